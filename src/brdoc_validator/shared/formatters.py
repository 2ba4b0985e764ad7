"""Progressive masks and display redaction for CPF/CNPJ."""

from brdoc_validator.core.rules.document_rules import (
    CNPJ_GRUPOS,
    CNPJ_LENGTH,
    CNPJ_SEPARADORES,
    CPF_GRUPOS,
    CPF_LENGTH,
    CPF_SEPARADORES,
)
from brdoc_validator.shared.normalizer import normalize


def _apply_mask(digits: str, grupos: tuple[int, ...], separadores: tuple[str, ...]) -> str:
    """Split digits into groups and join them with the mask separators.

    A separator is only written once the next group has at least one digit,
    so partial input never ends in a separator. Digits past the last group
    are dropped.
    """
    partes: list[str] = []
    inicio = 0
    for tamanho in grupos:
        parte = digits[inicio:inicio + tamanho]
        if not parte:
            break
        partes.append(parte)
        inicio += tamanho

    if not partes:
        return ""

    resultado = partes[0]
    for separador, parte in zip(separadores, partes[1:]):
        resultado += separador + parte
    return resultado


def format_cpf(cpf: str) -> str:
    """
    Format CPF progressively as XXX.XXX.XXX-XX.

    Args:
        cpf: CPF string, complete or partial (formatting is ignored)

    Returns:
        Masked digits, e.g. "123.45" for "12345" and "123.456.789-09"
        for a full CPF
    """
    return _apply_mask(normalize(cpf), CPF_GRUPOS, CPF_SEPARADORES)


def format_cnpj(cnpj: str) -> str:
    """
    Format CNPJ progressively as XX.XXX.XXX/XXXX-XX.

    Args:
        cnpj: CNPJ string, complete or partial (formatting is ignored)

    Returns:
        Masked digits, e.g. "11.2" for "112" and "11.222.333/0001-81"
        for a full CNPJ
    """
    return _apply_mask(normalize(cnpj), CNPJ_GRUPOS, CNPJ_SEPARADORES)


def _redact(
    digits: str,
    tamanho: int,
    visiveis_a_partir: int,
    grupos: tuple[int, ...],
    separadores: tuple[str, ...],
) -> str:
    """Hide digits before ``visiveis_a_partir`` and apply the mask.

    Input of the wrong length is hidden entirely.
    """
    if len(digits) != tamanho:
        return _apply_mask("*" * tamanho, grupos, separadores)
    ocultos = "*" * visiveis_a_partir
    return _apply_mask(ocultos + digits[visiveis_a_partir:], grupos, separadores)


def mask_cpf(cpf: str) -> str:
    """Mask CPF for display as ***.***.**X-XX."""
    return _redact(normalize(cpf), CPF_LENGTH, 8, CPF_GRUPOS, CPF_SEPARADORES)


def mask_cnpj(cnpj: str) -> str:
    """Mask CNPJ for display as **.***.***/XXXX-XX (branch and check digits)."""
    return _redact(normalize(cnpj), CNPJ_LENGTH, 8, CNPJ_GRUPOS, CNPJ_SEPARADORES)
