"""Tests for document classification and caller helpers."""

import logging

import pytest

from brdoc_validator.core.models import DocumentKind, ValidationResult
from brdoc_validator.core.services import (
    describe_error,
    describe_success,
    limit_input,
    require_valid,
    validate_document,
)
from brdoc_validator.shared.exceptions import (
    CNPJValidationError,
    CPFValidationError,
    DocumentValidationError,
    InputTooLongError,
    UnknownDocumentError,
)


class TestValidateDocument:
    """Tests for validate_document."""

    def test_valid_cpf(self):
        """Should detect and validate CPF."""
        result = validate_document("12345678909")
        assert result == ValidationResult(
            is_valid=True, type=DocumentKind.CPF, formatted="123.456.789-09"
        )

    def test_valid_cnpj(self):
        """Should detect and validate CNPJ."""
        result = validate_document("11.222.333/0001-81")
        assert result.type == DocumentKind.CNPJ
        assert result.is_valid is True
        assert result.formatted == "11.222.333/0001-81"

    def test_invalid_cpf_keeps_type(self):
        """Length decides the type even when the checksum fails."""
        result = validate_document("12345678901")
        assert result.type == DocumentKind.CPF
        assert result.is_valid is False
        assert result.formatted == "123.456.789-01"

    def test_repeated_cnpj_keeps_type(self):
        """Repeated digits are invalid but still classified as CNPJ."""
        result = validate_document("00000000000000")
        assert result.type == DocumentKind.CNPJ
        assert result.is_valid is False

    def test_unknown_length(self):
        """Should return UNKNOWN with the raw input for other lengths."""
        result = validate_document("123456")
        assert result.model_dump(by_alias=True) == {
            "isValid": False,
            "type": DocumentKind.UNKNOWN,
            "formatted": "123456",
        }

    def test_unknown_keeps_raw_text(self):
        """Formatting characters of unclassified input are left alone."""
        assert validate_document("12.3-x").formatted == "12.3-x"
        assert validate_document("").formatted == ""

    @pytest.mark.parametrize("length", [0, 1, 10, 12, 13, 15, 20])
    def test_other_lengths_are_unknown(self, length):
        """Only 11 and 14 digits are classified."""
        result = validate_document("7" * length)
        assert result.type == DocumentKind.UNKNOWN
        assert result.is_valid is False

    def test_never_raises(self):
        """Arbitrary text is classified without exceptions."""
        for raw in ["", "abc", "\x00\n", "١٢٣", "1" * 100, "[bold]11222333000181"]:
            validate_document(raw)

    def test_logs_classification_at_debug(self, caplog):
        """Each classification is logged at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="brdoc_validator"):
            validate_document("11222333000180")
        records = [r for r in caplog.records if r.name.startswith("brdoc_validator")]
        assert len(records) == 1
        assert records[0].levelno == logging.DEBUG
        assert records[0].getMessage() == "Classified 14 digits as CNPJ (valid=False)"

    def test_fresh_result_each_call(self):
        """Each call returns an equal but independent value."""
        first = validate_document("12345678909")
        second = validate_document("12345678909")
        assert first == second
        assert first is not second


class TestLimitInput:
    """Tests for the 14-digit input cap."""

    def test_accepts_up_to_limit(self):
        """Input within the cap is returned unchanged."""
        assert limit_input("11.222.333/0001-81") == "11.222.333/0001-81"
        assert limit_input("") == ""

    def test_rejects_over_limit(self):
        """More than 14 digits raises InputTooLongError."""
        with pytest.raises(InputTooLongError) as exc_info:
            limit_input("123456789012345")
        assert exc_info.value.digitos == 15
        assert exc_info.value.limite == 14

    def test_custom_limit(self):
        """The cap can be lowered by the caller."""
        with pytest.raises(InputTooLongError):
            limit_input("123456789012", max_digits=11)


class TestMessages:
    """Tests for caller-level messages."""

    def test_no_error_for_empty_input(self):
        """Empty field shows no error."""
        assert describe_error("", validate_document("")) is None

    def test_no_error_for_valid(self):
        """Valid document shows no error."""
        assert describe_error("12345678909", validate_document("12345678909")) is None

    def test_unknown_length_message(self):
        """Unclassified input asks for a CPF or CNPJ."""
        message = describe_error("123", validate_document("123"))
        assert message == "Digite um CPF (11 dígitos) ou CNPJ (14 dígitos)"

    def test_invalid_type_message(self):
        """Invalid CPF/CNPJ names the type."""
        assert describe_error("12345678901", validate_document("12345678901")) == "CPF inválido"
        assert describe_error("11222333000180", validate_document("11222333000180")) == "CNPJ inválido"

    def test_success_message(self):
        """Valid document gets a confirmation."""
        assert describe_success(validate_document("11222333000181")) == "CNPJ válido"
        assert describe_success(validate_document("12345678901")) is None


class TestRequireValid:
    """Tests for the strict validation helper."""

    def test_returns_result_when_valid(self):
        """Valid input returns the ValidationResult."""
        assert require_valid("12345678909").formatted == "123.456.789-09"

    def test_invalid_cpf(self):
        """Invalid CPF raises CPFValidationError with the reason."""
        with pytest.raises(CPFValidationError, match="Segundo dígito"):
            require_valid("12345678900")

    def test_invalid_cnpj(self):
        """Invalid CNPJ raises CNPJValidationError."""
        with pytest.raises(CNPJValidationError, match="todos dígitos iguais"):
            require_valid("11111111111111")

    def test_unknown(self):
        """Unclassified length raises UnknownDocumentError."""
        with pytest.raises(UnknownDocumentError):
            require_valid("123456")

    def test_shared_base_class(self):
        """All strict failures share DocumentValidationError."""
        with pytest.raises(DocumentValidationError):
            require_valid("12345678901")
