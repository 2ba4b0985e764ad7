"""Shared utilities for brdoc-validator."""

from brdoc_validator.shared.formatters import (
    format_cnpj,
    format_cpf,
    mask_cnpj,
    mask_cpf,
)
from brdoc_validator.shared.normalizer import normalize
from brdoc_validator.shared.validators import (
    cnpj_check_digits,
    cpf_check_digits,
    validar_cnpj,
    validar_cpf,
    validate_cnpj,
    validate_cpf,
)

__all__ = [
    # Normalizer
    "normalize",
    # Formatters
    "format_cnpj",
    "format_cpf",
    "mask_cnpj",
    "mask_cpf",
    # Validators
    "cnpj_check_digits",
    "cpf_check_digits",
    "validar_cnpj",
    "validar_cpf",
    "validate_cnpj",
    "validate_cpf",
]
