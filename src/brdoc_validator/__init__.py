"""brdoc-validator - validação e formatação de CPF e CNPJ."""

__version__ = "0.1.0"

from brdoc_validator.core.models import DocumentKind, ValidationResult
from brdoc_validator.core.services import (
    describe_error,
    describe_success,
    limit_input,
    require_valid,
    validate_document,
)
from brdoc_validator.shared import (
    cnpj_check_digits,
    cpf_check_digits,
    format_cnpj,
    format_cpf,
    mask_cnpj,
    mask_cpf,
    normalize,
    validar_cnpj,
    validar_cpf,
    validate_cnpj,
    validate_cpf,
)

__all__ = [
    "__version__",
    "DocumentKind",
    "ValidationResult",
    "cnpj_check_digits",
    "cpf_check_digits",
    "describe_error",
    "describe_success",
    "format_cnpj",
    "format_cpf",
    "limit_input",
    "mask_cnpj",
    "mask_cpf",
    "normalize",
    "require_valid",
    "validar_cnpj",
    "validar_cpf",
    "validate_cnpj",
    "validate_cpf",
    "validate_document",
]
