"""Custom exceptions for brdoc-validator.

The core validators never raise; these are used by the strict helpers
and by the CLI.
"""


class BrDocError(Exception):
    """Base exception for all brdoc-validator errors."""

    pass


class ValidationError(BrDocError):
    """Data validation error."""

    pass


class InputTooLongError(ValidationError):
    """Input has more digits than the field accepts."""

    def __init__(self, digitos: int, limite: int):
        self.digitos = digitos
        self.limite = limite
        super().__init__(f"Entrada com {digitos} dígitos excede o limite de {limite}")


class DocumentValidationError(ValidationError):
    """Document failed validation."""

    pass


class CPFValidationError(DocumentValidationError):
    """Invalid CPF."""

    pass


class CNPJValidationError(DocumentValidationError):
    """Invalid CNPJ."""

    pass


class UnknownDocumentError(DocumentValidationError):
    """Input length matches neither CPF nor CNPJ."""

    pass
