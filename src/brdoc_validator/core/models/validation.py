"""Validation result model."""

from pydantic import BaseModel, Field

from brdoc_validator.core.models.enums import DocumentKind


class ValidationResult(BaseModel):
    """Outcome of classifying and validating one raw input.

    ``formatted`` comes from the digits only and has no bearing on
    ``is_valid``. For UNKNOWN it is the raw input unchanged.
    """

    is_valid: bool = Field(..., serialization_alias="isValid", description="Check digits match")
    type: DocumentKind = Field(..., description="CPF, CNPJ or UNKNOWN by digit count")
    formatted: str = Field(..., description="Masked document for display")

    model_config = {"frozen": True}
