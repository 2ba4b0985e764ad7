"""CPF and CNPJ check digit validators (módulo 11).

100% local - the number is checked for structure and check digits only,
never against the Receita Federal registry.
"""

from brdoc_validator.core.rules.document_rules import (
    CNPJ_BASE_LENGTH,
    CNPJ_LENGTH,
    CNPJ_PESOS_DV1,
    CNPJ_PESOS_DV2,
    CPF_BASE_LENGTH,
    CPF_LENGTH,
    CPF_PESOS_DV1,
    CPF_PESOS_DV2,
)
from brdoc_validator.shared.normalizer import normalize


def _soma_ponderada(digitos: str, pesos: list[int]) -> int:
    return sum(int(d) * p for d, p in zip(digitos, pesos))


def _digito_cpf(digitos: str, pesos: list[int]) -> int:
    # Remainder 10 maps to 0
    resto = _soma_ponderada(digitos, pesos) * 10 % 11
    return 0 if resto >= 10 else resto


def _digito_cnpj(digitos: str, pesos: list[int]) -> int:
    resto = _soma_ponderada(digitos, pesos) % 11
    return 0 if resto < 2 else 11 - resto


def cpf_check_digits(base: str) -> str:
    """
    Calculate the two CPF check digits.

    Args:
        base: At least the first 9 CPF digits (formatting is ignored;
            anything after the 9th digit is not used)

    Returns:
        The two check digits as a string, e.g. "09" for "123456789"

    Raises:
        ValueError: If ``base`` has fewer than 9 digits
    """
    digitos = normalize(base)
    if len(digitos) < CPF_BASE_LENGTH:
        raise ValueError(f"CPF base deve ter {CPF_BASE_LENGTH} dígitos, tem {len(digitos)}")

    digitos = digitos[:CPF_BASE_LENGTH]
    digito1 = _digito_cpf(digitos, CPF_PESOS_DV1)
    digito2 = _digito_cpf(digitos + str(digito1), CPF_PESOS_DV2)
    return f"{digito1}{digito2}"


def cnpj_check_digits(base: str) -> str:
    """
    Calculate the two CNPJ check digits.

    Args:
        base: At least the first 12 CNPJ digits (formatting is ignored;
            anything after the 12th digit is not used)

    Returns:
        The two check digits as a string, e.g. "81" for "112223330001"

    Raises:
        ValueError: If ``base`` has fewer than 12 digits
    """
    digitos = normalize(base)
    if len(digitos) < CNPJ_BASE_LENGTH:
        raise ValueError(f"CNPJ base deve ter {CNPJ_BASE_LENGTH} dígitos, tem {len(digitos)}")

    digitos = digitos[:CNPJ_BASE_LENGTH]
    digito1 = _digito_cnpj(digitos, CNPJ_PESOS_DV1)
    digito2 = _digito_cnpj(digitos + str(digito1), CNPJ_PESOS_DV2)
    return f"{digito1}{digito2}"


def validate_cpf(cpf: str) -> bool:
    """
    Validate Brazilian CPF number.

    Args:
        cpf: CPF string (can contain formatting characters)

    Returns:
        True if valid, False otherwise
    """
    valido, _ = validar_cpf(cpf)
    return valido


def validate_cnpj(cnpj: str) -> bool:
    """
    Validate Brazilian CNPJ number.

    Args:
        cnpj: CNPJ string (can contain formatting characters)

    Returns:
        True if valid, False otherwise
    """
    valido, _ = validar_cnpj(cnpj)
    return valido


# === Validation with error messages ===


def validar_cpf(cpf: str) -> tuple[bool, str]:
    """Validate CPF and return reason if invalid.

    Check digits:
    - 1st: sum of d[i] * (10 - i) over 9 digits, times 10, mod 11
    - 2nd: sum of d[i] * (11 - i) over 10 digits, times 10, mod 11
    A remainder of 10 counts as 0.

    Args:
        cpf: CPF string (can contain formatting characters)

    Returns:
        (True, "") if valid
        (False, "reason") if invalid
    """
    cpf = normalize(cpf)

    if len(cpf) != CPF_LENGTH:
        return False, f"CPF deve ter {CPF_LENGTH} dígitos, tem {len(cpf)}"

    # Repeated sequences pass the checksum but are never issued
    if cpf == cpf[0] * CPF_LENGTH:
        return False, "CPF com todos dígitos iguais é inválido"

    digito1 = _digito_cpf(cpf[:9], CPF_PESOS_DV1)
    if int(cpf[9]) != digito1:
        return False, f"Primeiro dígito verificador inválido (esperado {digito1})"

    digito2 = _digito_cpf(cpf[:10], CPF_PESOS_DV2)
    if int(cpf[10]) != digito2:
        return False, f"Segundo dígito verificador inválido (esperado {digito2})"

    return True, ""


def validar_cnpj(cnpj: str) -> tuple[bool, str]:
    """Validate CNPJ and return reason if invalid.

    Multipliers:
    - 1st digit: 5,4,3,2,9,8,7,6,5,4,3,2 (positions 0-11)
    - 2nd digit: 6,5,4,3,2,9,8,7,6,5,4,3,2 (positions 0-12)
    Remainder below 2 gives 0, otherwise 11 - remainder.

    Args:
        cnpj: CNPJ string (can contain formatting characters)

    Returns:
        (True, "") if valid
        (False, "reason") if invalid
    """
    cnpj = normalize(cnpj)

    if len(cnpj) != CNPJ_LENGTH:
        return False, f"CNPJ deve ter {CNPJ_LENGTH} dígitos, tem {len(cnpj)}"

    if cnpj == cnpj[0] * CNPJ_LENGTH:
        return False, "CNPJ com todos dígitos iguais é inválido"

    digito1 = _digito_cnpj(cnpj[:12], CNPJ_PESOS_DV1)
    if int(cnpj[12]) != digito1:
        return False, f"Primeiro dígito verificador inválido (esperado {digito1})"

    digito2 = _digito_cnpj(cnpj[:13], CNPJ_PESOS_DV2)
    if int(cnpj[13]) != digito2:
        return False, f"Segundo dígito verificador inválido (esperado {digito2})"

    return True, ""
