"""
Tests for JSON Schema contract validators

Checks:
- The schemas themselves are valid Draft 2020-12
- The packaged sample documents pass their contracts
- Required fields, types and extra properties are detected
"""

import copy

import pytest
from jsonschema import ValidationError

from refactoring_kata.core.contracts import (
    InvoiceValidator,
    PlaysValidator,
    ProvinceValidator,
    SchemaLoader,
    validate_invoice,
    validate_invoices,
    validate_plays,
    validate_province,
)
from refactoring_kata.samples import sample_invoices, sample_plays, sample_province_data


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_plays():
    return sample_plays()


@pytest.fixture
def valid_invoice():
    return sample_invoices()[0]


@pytest.fixture
def valid_province():
    return sample_province_data()


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    @pytest.mark.parametrize("name", ["plays", "invoice", "invoices", "province"])
    def test_load_schema(self, name: str) -> None:
        schema = SchemaLoader().load_schema(name)
        assert schema["$schema"].endswith("2020-12/schema")

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("plays") is loader.load_schema("plays")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path) -> None:
        with pytest.raises(RuntimeError):
            SchemaLoader(tmp_path / "nowhere")

    def test_registry_holds_every_schema(self) -> None:
        registry = SchemaLoader().registry()
        for schema_id in ("plays.json", "invoice.json", "invoices.json", "province.json"):
            assert registry.contents(schema_id)["$id"] == schema_id

    def test_invoices_refers_to_invoice(self) -> None:
        schema = SchemaLoader().load_schema("invoices")
        assert schema["items"] == {"$ref": "invoice.json"}


# =============================================================================
# PLAYS
# =============================================================================


class TestPlaysContract:
    def test_valid(self, valid_plays) -> None:
        validate_plays(valid_plays)

    def test_unknown_type_is_shape_valid(self, valid_plays) -> None:
        valid_plays["henry-v"] = {"name": "Henry V", "type": "history"}
        assert PlaysValidator().is_valid(valid_plays)

    def test_missing_name(self, valid_plays) -> None:
        del valid_plays["hamlet"]["name"]
        with pytest.raises(ValidationError):
            validate_plays(valid_plays)

    def test_extra_property(self, valid_plays) -> None:
        valid_plays["hamlet"]["author"] = "Shakespeare"
        assert not PlaysValidator().is_valid(valid_plays)


# =============================================================================
# INVOICES
# =============================================================================


class TestInvoiceContract:
    def test_valid(self, valid_invoice) -> None:
        validate_invoice(valid_invoice)

    def test_valid_list(self) -> None:
        validate_invoices(sample_invoices())

    def test_audience_must_be_integer(self, valid_invoice) -> None:
        valid_invoice["performances"][0]["audience"] = "55"
        with pytest.raises(ValidationError):
            validate_invoice(valid_invoice)

    def test_missing_play_id(self, valid_invoice) -> None:
        del valid_invoice["performances"][0]["playID"]
        errors = list(InvoiceValidator().iter_errors(valid_invoice))
        assert len(errors) == 1

    def test_list_checks_items_through_ref(self, valid_invoice) -> None:
        valid_invoice["performances"][1]["audience"] = -5
        with pytest.raises(ValidationError):
            validate_invoices([valid_invoice])

    def test_list_rejects_bad_invoice(self, valid_invoice) -> None:
        bad = copy.deepcopy(valid_invoice)
        del bad["customer"]
        with pytest.raises(ValidationError):
            validate_invoices([valid_invoice, bad])


# =============================================================================
# PROVINCE
# =============================================================================


class TestProvinceContract:
    def test_valid(self, valid_province) -> None:
        validate_province(valid_province)

    def test_production_optional(self, valid_province) -> None:
        del valid_province["producers"][0]["production"]
        assert ProvinceValidator().is_valid(valid_province)

    def test_negative_production(self, valid_province) -> None:
        valid_province["producers"][0]["production"] = -1
        with pytest.raises(ValidationError):
            validate_province(valid_province)

    def test_missing_demand(self, valid_province) -> None:
        del valid_province["demand"]
        assert not ProvinceValidator().is_valid(valid_province)
