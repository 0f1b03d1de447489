from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_env: str = "dev"
    # Published Google Sheets CSV export of the inventory tab
    inventory_csv_url: str = (
        "https://docs.google.com/spreadsheets/d/e/2PACX-1vQxaY0FXgYSKVrYoo-1k9bkSQDjZPKwpOnvQbYWB1QW4XT9rwU0GJUq4lN0YLRMXKXS4XHi2MsTfZLM"
        "/pub?gid=917352588&single=true&output=csv"
    )
    fetch_timeout_seconds: float = 30
    numeric_keys: List[str] = ["order_quantity", "default_quantity"]
    required_key: str = "item_name"
    fetch_on_startup: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = ""


settings = Settings()
