"""Tests for BigDecimal as a pydantic field type."""

from decimal import Decimal

import pytest
from pydantic import BaseModel, ValidationError

from bigdecimal import BigDecimal


class Invoice(BaseModel):
    """Model with a BigDecimal field."""

    amount: BigDecimal


class TestValidation:
    """Tests for validating BigDecimal fields."""

    @pytest.mark.parametrize(
        "raw,magnitude,scale",
        [
            ("1.50", 150, 2),
            ("2.5e1", 25, 0),
            (3, 3, 0),
            (Decimal("-0.001"), -1, 3),
            (0.1, 1, 1),
        ],
    )
    def test_accepted_inputs(self, raw, magnitude, scale):
        """Text, int, Decimal and float inputs validate."""
        invoice = Invoice(amount=raw)
        assert isinstance(invoice.amount, BigDecimal)
        assert (invoice.amount.magnitude, invoice.amount.scale) == (magnitude, scale)

    def test_instance_passes_through(self):
        """BigDecimal instances are kept as-is."""
        value = BigDecimal(5, 1)
        assert Invoice(amount=value).amount is value

    @pytest.mark.parametrize("raw", ["abc", "", True, None, [1]])
    def test_rejected_inputs(self, raw):
        """Invalid inputs raise ValidationError."""
        with pytest.raises(ValidationError):
            Invoice(amount=raw)

    def test_validate_json(self):
        """JSON strings and numbers validate."""
        assert Invoice.model_validate_json('{"amount": "1.50"}').amount == BigDecimal(150, 2)
        assert Invoice.model_validate_json('{"amount": 1.5}').amount == BigDecimal(15, 1)


class TestSerialization:
    """Tests for dumping BigDecimal fields."""

    def test_json_uses_canonical_text(self):
        """JSON output is the canonical string form."""
        assert Invoice(amount="1.50").model_dump_json() == '{"amount":"1.50"}'
        assert Invoice(amount=5).model_dump_json() == '{"amount":"5."}'

    def test_python_dump_keeps_instance(self):
        """Python-mode dumps keep the BigDecimal."""
        dumped = Invoice(amount="1.5").model_dump()
        assert dumped["amount"] == BigDecimal(15, 1)

    def test_json_schema(self):
        """The JSON schema describes a numeric string."""
        schema = Invoice.model_json_schema()["properties"]["amount"]
        assert schema["type"] == "string"
        assert "pattern" in schema
