"""Tests for domain models."""

import pydantic
import pytest

from brdoc_validator.core.models import DocumentKind, ValidationResult


class TestDocumentKind:
    """Tests for DocumentKind enum."""

    def test_values(self):
        """Test enum values match the serialized names."""
        assert DocumentKind("CPF") is DocumentKind.CPF
        assert DocumentKind.CNPJ.value == "CNPJ"
        assert DocumentKind.UNKNOWN == "UNKNOWN"


class TestValidationResult:
    """Tests for ValidationResult model."""

    def test_is_frozen(self):
        """Test results cannot be mutated."""
        result = ValidationResult(is_valid=True, type=DocumentKind.CPF, formatted="123.456.789-09")
        with pytest.raises(pydantic.ValidationError):
            result.is_valid = False

    def test_json_uses_camel_case_alias(self):
        """Test JSON output matches the public result shape."""
        result = ValidationResult(is_valid=False, type=DocumentKind.UNKNOWN, formatted="123")
        assert result.model_dump(mode="json", by_alias=True) == {
            "isValid": False,
            "type": "UNKNOWN",
            "formatted": "123",
        }

    def test_type_accepts_string(self):
        """Test type is coerced from its string value."""
        result = ValidationResult(is_valid=True, type="CNPJ", formatted="11.222.333/0001-81")
        assert result.type is DocumentKind.CNPJ
