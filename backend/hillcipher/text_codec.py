import re
from typing import List

from .hill_math import MODULUS, mod

_NON_ALPHA = re.compile(r"[^A-Z]")


def clean_text(text: str) -> str:
    """Uppercase and keep only A-Z"""
    return _NON_ALPHA.sub("", text.upper())


def text_to_numbers(text: str) -> List[int]:
    return [ord(ch) - ord('A') for ch in clean_text(text)]


def numbers_to_text(numbers: List[int]) -> str:
    # Values coming out of matrix arithmetic may be negative or >= 26
    return "".join(chr(mod(n, MODULUS) + ord('A')) for n in numbers)
