"""Services built on top of the validators."""

from brdoc_validator.core.services.document_validator import (
    describe_error,
    describe_success,
    limit_input,
    require_valid,
    validate_document,
)

__all__ = [
    "describe_error",
    "describe_success",
    "limit_input",
    "require_valid",
    "validate_document",
]
