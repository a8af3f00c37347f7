"""
JSON Schema Contract Validators

Validation of the JSON documents the package ships as sample data,
against formal JSON Schema contracts (Draft 2020-12, via jsonschema).

Schemas:
- plays.json     (plays catalogue: playID -> {name, type})
- invoice.json   (one invoice: customer + performances)
- invoices.json  (list of invoices, items refer to invoice.json)
- province.json  (province document: name, producers, demand, price)

These contracts describe document shape only. Pricing rules (known play
types, resolvable playIDs) are enforced by the billing module.
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator
from referencing import Registry, Resource
from referencing.jsonschema import DRAFT202012


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Loader for the packaged JSON Schema files.

    Schemas live in the `schema/` directory next to this module.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Cache of loaded schemas
        self._schemas: Dict[str, Dict[str, Any]] = {}
        self._registry: Registry | None = None

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load a JSON Schema file.

        Args:
            schema_name: Schema name without extension (e.g. 'plays')

        Returns:
            The schema as a dict

        Raises:
            FileNotFoundError: If the schema file does not exist
            ValueError: If the file is not a valid JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema

    def registry(self) -> Registry:
        """
        Registry of every packaged schema, keyed by its $id.

        Lets one contract refer to another with a relative $ref
        (e.g. invoices.json -> invoice.json).

        Returns:
            referencing.Registry with all schemas in the schema directory
        """
        if self._registry is None:
            resources = []
            for schema_path in sorted(self._schema_dir.glob("*.json")):
                schema = self.load_schema(schema_path.stem)
                resources.append(
                    (schema["$id"], Resource.from_contents(schema, default_specification=DRAFT202012))
                )
            self._registry = Registry().with_resources(resources)
        return self._registry


# Shared loader instance
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Base class for contract validators.

    Wraps a Draft 2020-12 validator built from a packaged schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema, registry=_SCHEMA_LOADER.registry())

    def validate(self, data: Any) -> None:
        """
        Validate data against the schema.

        Raises:
            ValidationError: If the data does not match the schema
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any):
        """Iterate over every validation error found in the data."""
        return self.validator.iter_errors(data)


class PlaysValidator(ContractValidator):
    """Validator for the plays catalogue."""

    def __init__(self):
        super().__init__("plays")


class InvoiceValidator(ContractValidator):
    """Validator for a single invoice."""

    def __init__(self):
        super().__init__("invoice")


class InvoicesValidator(ContractValidator):
    """Validator for a list of invoices."""

    def __init__(self):
        super().__init__("invoices")


class ProvinceValidator(ContractValidator):
    """Validator for a province document."""

    def __init__(self):
        super().__init__("province")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_plays(data: Dict[str, Any]) -> None:
    """
    Validate a plays catalogue.

    Raises:
        ValidationError: If the data does not match the schema
    """
    PlaysValidator().validate(data)


def validate_invoice(data: Dict[str, Any]) -> None:
    """
    Validate a single invoice.

    Raises:
        ValidationError: If the data does not match the schema
    """
    InvoiceValidator().validate(data)


def validate_invoices(data: list) -> None:
    """
    Validate a list of invoices.

    Raises:
        ValidationError: If the data does not match the schema
    """
    InvoicesValidator().validate(data)


def validate_province(data: Dict[str, Any]) -> None:
    """
    Validate a province document.

    Raises:
        ValidationError: If the data does not match the schema
    """
    ProvinceValidator().validate(data)
