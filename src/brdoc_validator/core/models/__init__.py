"""Domain models for CPF/CNPJ validation."""

from brdoc_validator.core.models.enums import DocumentKind
from brdoc_validator.core.models.validation import ValidationResult

__all__ = [
    "DocumentKind",
    "ValidationResult",
]
