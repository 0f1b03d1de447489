import os
import sys

import pytest


# Ensure project root is on sys.path so `import app` works in tests
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


SHEET_URL = "https://docs.google.com/spreadsheets/d/e/test-sheet/pub?output=csv"

SHEET_CSV = (
    "Item Name,Category,Default Supplier,Supplier Alternative,Order Quantity,Measure Unit,Default Quantity,Brand Tag\n"
    "Tomatoes,Produce,Fresh Farms,Green Grocer,12,kg,10,\n"
    "\"Flour, Type 00\",Dry Goods,Mill Co,,2.5,bag,abc,Caputo\n"
    ",Produce,Fresh Farms,,1,kg,1,\n"
    "Olive Oil,Dry Goods,Green Grocer,Mill Co,3,bottle,2,Colavita\n"
)


@pytest.fixture
def sheet_csv() -> str:
    return SHEET_CSV


@pytest.fixture
def sheet_url() -> str:
    return SHEET_URL
