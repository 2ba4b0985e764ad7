"""Enumerations for document models."""

from enum import Enum


class DocumentKind(str, Enum):
    """Document type, decided by the number of digits only."""

    CPF = "CPF"
    CNPJ = "CNPJ"
    UNKNOWN = "UNKNOWN"
