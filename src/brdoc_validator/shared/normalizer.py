"""Input normalization."""

import re

# ASCII only: other Unicode digits are not part of a CPF/CNPJ
_NON_DIGITS = re.compile(r"\D", re.ASCII)


def normalize(raw: str) -> str:
    """
    Remove every character that is not an ASCII digit.

    Args:
        raw: Free-form user input (may contain punctuation, letters, spaces)

    Returns:
        Digits of ``raw`` in their original order ("" for empty input)
    """
    return _NON_DIGITS.sub("", raw)
