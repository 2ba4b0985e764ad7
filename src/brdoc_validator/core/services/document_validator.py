"""Document classification and caller-level helpers."""

import logging
from typing import Optional

from brdoc_validator.core.models import DocumentKind, ValidationResult
from brdoc_validator.core.rules.document_rules import (
    CNPJ_LENGTH,
    CPF_LENGTH,
    MAX_DIGITS,
    MENSAGEM_INVALIDO,
    MENSAGEM_TAMANHO_DESCONHECIDO,
    MENSAGEM_VALIDO,
)
from brdoc_validator.shared.exceptions import (
    CNPJValidationError,
    CPFValidationError,
    InputTooLongError,
    UnknownDocumentError,
)
from brdoc_validator.shared.formatters import format_cnpj, format_cpf
from brdoc_validator.shared.normalizer import normalize
from brdoc_validator.shared.validators import (
    validar_cnpj,
    validar_cpf,
    validate_cnpj,
    validate_cpf,
)

logger = logging.getLogger(__name__)


def validate_document(document: str) -> ValidationResult:
    """
    Classify input as CPF or CNPJ by digit count and validate it.

    Never raises: input of any other length is UNKNOWN, invalid, and keeps
    its raw text as ``formatted``.

    Args:
        document: Raw user input

    Returns:
        A new ValidationResult
    """
    tamanho = len(normalize(document))

    if tamanho == CPF_LENGTH:
        result = ValidationResult(
            is_valid=validate_cpf(document),
            type=DocumentKind.CPF,
            formatted=format_cpf(document),
        )
    elif tamanho == CNPJ_LENGTH:
        result = ValidationResult(
            is_valid=validate_cnpj(document),
            type=DocumentKind.CNPJ,
            formatted=format_cnpj(document),
        )
    else:
        result = ValidationResult(
            is_valid=False,
            type=DocumentKind.UNKNOWN,
            formatted=document,
        )

    logger.debug("Classified %d digits as %s (valid=%s)", tamanho, result.type.value, result.is_valid)
    return result


def limit_input(document: str, max_digits: int = MAX_DIGITS) -> str:
    """Reject input with more digits than the field accepts.

    Raises:
        InputTooLongError: If the normalized input exceeds ``max_digits``
    """
    digitos = len(normalize(document))
    if digitos > max_digits:
        raise InputTooLongError(digitos, max_digits)
    return document


def describe_error(document: str, result: ValidationResult) -> Optional[str]:
    """Build the message shown under the input field, if any."""
    if not document or result.is_valid:
        return None
    if result.type == DocumentKind.UNKNOWN:
        return MENSAGEM_TAMANHO_DESCONHECIDO
    return MENSAGEM_INVALIDO.format(tipo=result.type.value)


def describe_success(result: ValidationResult) -> Optional[str]:
    """Build the confirmation message for a valid document."""
    if not result.is_valid:
        return None
    return MENSAGEM_VALIDO.format(tipo=result.type.value)


def require_valid(document: str) -> ValidationResult:
    """
    Validate a document, raising instead of returning an invalid result.

    Args:
        document: Raw user input

    Returns:
        The ValidationResult of a valid CPF or CNPJ

    Raises:
        UnknownDocumentError: Length is neither 11 nor 14 digits
        CPFValidationError: 11 digits that fail the CPF rules
        CNPJValidationError: 14 digits that fail the CNPJ rules
    """
    result = validate_document(document)
    if result.is_valid:
        return result

    if result.type == DocumentKind.CPF:
        _, motivo = validar_cpf(document)
        raise CPFValidationError(f"CPF inválido: {motivo}")
    if result.type == DocumentKind.CNPJ:
        _, motivo = validar_cnpj(document)
        raise CNPJValidationError(f"CNPJ inválido: {motivo}")
    raise UnknownDocumentError(MENSAGEM_TAMANHO_DESCONHECIDO)
