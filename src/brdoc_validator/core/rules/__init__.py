"""Business rules and constants for Brazilian tax documents."""

from brdoc_validator.core.rules.document_rules import (
    CNPJ_BASE_LENGTH,
    CNPJ_GRUPOS,
    CNPJ_LENGTH,
    CNPJ_PESOS_DV1,
    CNPJ_PESOS_DV2,
    CNPJ_SEPARADORES,
    CPF_BASE_LENGTH,
    CPF_GRUPOS,
    CPF_LENGTH,
    CPF_PESOS_DV1,
    CPF_PESOS_DV2,
    CPF_SEPARADORES,
    MAX_DIGITS,
    MENSAGEM_INVALIDO,
    MENSAGEM_TAMANHO_DESCONHECIDO,
    MENSAGEM_VALIDO,
)

__all__ = [
    "CNPJ_BASE_LENGTH",
    "CNPJ_GRUPOS",
    "CNPJ_LENGTH",
    "CNPJ_PESOS_DV1",
    "CNPJ_PESOS_DV2",
    "CNPJ_SEPARADORES",
    "CPF_BASE_LENGTH",
    "CPF_GRUPOS",
    "CPF_LENGTH",
    "CPF_PESOS_DV1",
    "CPF_PESOS_DV2",
    "CPF_SEPARADORES",
    "MAX_DIGITS",
    "MENSAGEM_INVALIDO",
    "MENSAGEM_TAMANHO_DESCONHECIDO",
    "MENSAGEM_VALIDO",
]
