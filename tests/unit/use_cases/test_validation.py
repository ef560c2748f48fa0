"""Unit tests for the validation adapter"""

from decimal import Decimal

from src.app.validation import validate
from src.app.use_cases.sales.dtos import LineItemInputDTO


class TestValidate:
    def test_valid_payload(self):
        result = validate(LineItemInputDTO, {"description": "Widget", "quantity": "2", "unit_price": "9.99"})

        assert result.is_ok()
        assert result.value.quantity == Decimal("2")
        assert result.value.discount_percent == Decimal("0")

    def test_issues_use_dotted_field_paths(self):
        result = validate(LineItemInputDTO, {"description": "Widget", "unit_price": "-1", "discount_percent": 150})

        assert result.is_err()
        assert result.error.code == "VALIDATION_ERROR"
        assert result.error.message == "Invalid request payload"
        fields = sorted(issue.split(":")[0] for issue in result.error.issues)
        assert fields == ["discount_percent", "unit_price"]
        assert result.error.reason == "; ".join(result.error.issues)

    def test_none_is_validated_as_empty_object(self):
        result = validate(LineItemInputDTO, None, "Invalid line item")

        assert result.is_err()
        assert result.error.message == "Invalid line item"
        assert any(issue.startswith("description:") for issue in result.error.issues)

    def test_non_finite_numbers_are_rejected(self):
        result = validate(LineItemInputDTO, {"description": "Widget", "unit_price": "NaN"})

        assert result.is_err()
        assert result.error.issues[0].startswith("unit_price:")
