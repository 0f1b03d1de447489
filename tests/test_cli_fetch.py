import json

import respx
from httpx import Response

from app.cli_fetch import _format_row, main


def test_format_row():
    item = {"item_name": "Tomatoes", "category": "Produce", "order_quantity": 12.0, "measure_unit": "kg", "default_supplier": "Fresh Farms"}
    assert _format_row(item) == "Tomatoes | Produce | 12.0 kg | Fresh Farms"


@respx.mock
def test_main_prints_filtered_items(capsys, sheet_url, sheet_csv):
    respx.get(sheet_url).mock(return_value=Response(200, text=sheet_csv))

    assert main(["--url", sheet_url, "--category", "Dry Goods"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "[inventory] 2 of 3 items"
    assert out[1].startswith("Flour, Type 00 | Dry Goods | 2.5 bag")


@respx.mock
def test_main_json_output(capsys, sheet_url, sheet_csv):
    respx.get(sheet_url).mock(return_value=Response(200, text=sheet_csv))

    assert main(["--url", sheet_url, "--search", "tomato", "--json"]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert rows == [
        {
            "item_name": "Tomatoes",
            "category": "Produce",
            "default_supplier": "Fresh Farms",
            "supplier_alternative": "Green Grocer",
            "order_quantity": 12.0,
            "measure_unit": "kg",
            "default_quantity": 10.0,
            "brand_tag": "",
        }
    ]


@respx.mock
def test_main_fetch_failure_exits_nonzero(capsys, sheet_url):
    respx.get(sheet_url).mock(return_value=Response(500))

    assert main(["--url", sheet_url]) == 1
    assert "HTTP error! status: 500" in capsys.readouterr().err
