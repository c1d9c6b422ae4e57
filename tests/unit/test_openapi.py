"""The suggested categories are published in the OpenAPI document for the forms."""
from app.schemas.finance import SUGGESTED_CATEGORIES as FINANCE_CATEGORIES
from app.schemas.note import SUGGESTED_CATEGORIES as NOTE_CATEGORIES


def category_field(client, schema_name):
    schemas = client.get("/api/openapi.json").json()["components"]["schemas"]
    return schemas[schema_name]["properties"]["category"]


def test_finance_category_suggestions(client):
    field = category_field(client, "FinanceCreate")
    assert field["examples"] == FINANCE_CATEGORIES
    assert field["default"] == "geral"


def test_note_category_suggestions(client):
    field = category_field(client, "NoteCreate")
    assert field["examples"] == NOTE_CATEGORIES
