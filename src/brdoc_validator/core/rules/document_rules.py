"""Constants for CPF and CNPJ validation and formatting.

Values follow the Receita Federal rules for the módulo 11 check digits.
"""

# === Lengths ===

CPF_LENGTH = 11
CNPJ_LENGTH = 14

# Base digits used to compute the two check digits
CPF_BASE_LENGTH = 9
CNPJ_BASE_LENGTH = 12

# Longest input the interactive field accepts (a full CNPJ)
MAX_DIGITS = CNPJ_LENGTH

# === Check digit weights ===

# CPF weights descend from (base length + 1) down to 2
CPF_PESOS_DV1 = [10, 9, 8, 7, 6, 5, 4, 3, 2]
CPF_PESOS_DV2 = [11, 10, 9, 8, 7, 6, 5, 4, 3, 2]

CNPJ_PESOS_DV1 = [5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
CNPJ_PESOS_DV2 = [6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]

# === Masks ===

# ddd.ddd.ddd-dd
CPF_GRUPOS = (3, 3, 3, 2)
CPF_SEPARADORES = (".", ".", "-")

# dd.ddd.ddd/dddd-dd
CNPJ_GRUPOS = (2, 3, 3, 4, 2)
CNPJ_SEPARADORES = (".", ".", "/", "-")

# === User-facing messages ===

MENSAGEM_TAMANHO_DESCONHECIDO = "Digite um CPF (11 dígitos) ou CNPJ (14 dígitos)"
MENSAGEM_INVALIDO = "{tipo} inválido"
MENSAGEM_VALIDO = "{tipo} válido"
