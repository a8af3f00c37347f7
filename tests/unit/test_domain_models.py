"""
Tests for billing domain models: Play, Performance, Invoice, Statement

Checks:
1. Creation from documents (playID alias) and by field name
2. Immutability (frozen models)
3. Unknown play types are accepted by the model and rejected by pricing
4. JSON serialisation
"""

import pytest
from pydantic import ValidationError

from refactoring_kata.core.domain import (
    EnrichedPerformance,
    Invoice,
    Performance,
    Play,
    PlayType,
    Statement,
)


class TestPlay:
    def test_creation(self) -> None:
        play = Play(name="Hamlet", type="tragedy")
        assert play.name == "Hamlet"
        assert PlayType(play.type) is PlayType.TRAGEDY

    def test_unknown_type_accepted(self) -> None:
        assert Play(name="Henry V", type="history").type == "history"

    def test_frozen(self) -> None:
        play = Play(name="Hamlet", type="tragedy")
        with pytest.raises(ValidationError):
            play.name = "Macbeth"  # type: ignore[misc]

    def test_missing_field(self) -> None:
        with pytest.raises(ValidationError):
            Play.model_validate({"name": "Hamlet"})


class TestPerformance:
    def test_from_document_alias(self) -> None:
        perf = Performance.model_validate({"playID": "hamlet", "audience": 55})
        assert perf.play_id == "hamlet"
        assert perf.audience == 55

    def test_by_field_name(self) -> None:
        assert Performance(play_id="hamlet", audience=55).play_id == "hamlet"

    def test_dump_by_alias(self) -> None:
        perf = Performance(play_id="hamlet", audience=55)
        assert perf.model_dump(by_alias=True) == {"playID": "hamlet", "audience": 55}


class TestInvoice:
    def test_from_document(self) -> None:
        invoice = Invoice.model_validate(
            {
                "customer": "BigCo",
                "performances": [
                    {"playID": "hamlet", "audience": 55},
                    {"playID": "othello", "audience": 40},
                ],
            }
        )
        assert invoice.customer == "BigCo"
        assert [p.play_id for p in invoice.performances] == ["hamlet", "othello"]

    def test_default_no_performances(self) -> None:
        assert Invoice(customer="BigCo").performances == ()


class TestStatement:
    @pytest.fixture
    def statement(self) -> Statement:
        hamlet = EnrichedPerformance(
            play_id="hamlet",
            audience=55,
            play=Play(name="Hamlet", type="tragedy"),
            amount=65000,
            volume_credits=25,
        )
        return Statement(
            customer="BigCo",
            performances=(hamlet,),
            total_amount=65000,
            total_volume_credits=25,
        )

    def test_enriched_performance_is_performance(self, statement: Statement) -> None:
        assert isinstance(statement.performances[0], Performance)

    def test_enriched_performance_inherits_config(self, statement: Statement) -> None:
        hamlet = statement.performances[0]
        assert hamlet.play_id == "hamlet"
        with pytest.raises(ValidationError):
            hamlet.amount = 0  # type: ignore[misc]

    def test_json_roundtrip(self, statement: Statement) -> None:
        restored = Statement.model_validate_json(statement.model_dump_json())
        assert restored == statement

    def test_frozen(self, statement: Statement) -> None:
        with pytest.raises(ValidationError):
            statement.customer = "SmallCo"  # type: ignore[misc]
