import logging
from typing import List

from .hill_math import (
    MODULUS,
    Matrix,
    NoInverseExists,
    determinant,
    inverse_matrix,
    mod,
    mod_inverse,
    multiply_matrix_vector,
)
from .text_codec import numbers_to_text, text_to_numbers

logger = logging.getLogger(__name__)

# 'X' fills the last block
PAD_VALUE = 23
# Determinant cost is O(n!), keep keys small
MAX_KEY_SIZE = 6


class KeySizeTooLarge(ValueError):
    def __init__(self, size: int, limit: int = MAX_KEY_SIZE):
        self.size = size
        self.limit = limit
        super().__init__(f"Key matrix {size}x{size} exceeds the supported size {limit}x{limit}")


class HillCipher:
    def __init__(self, key: Matrix, modulus: int = MODULUS):
        n = len(key)
        if n == 0:
            raise ValueError("Key matrix is empty")
        if any(len(row) != n for row in key):
            raise ValueError(f"Key matrix must be square ({n}x{n})")
        if n > MAX_KEY_SIZE:
            raise KeySizeTooLarge(n)

        self.modulus = modulus
        self.size = n
        # Entries may arrive un-reduced
        self.key = [[mod(val, modulus) for val in row] for row in key]
        self.determinant = determinant(self.key, modulus)
        self._inverse_key = None

    @property
    def inverse_key(self) -> Matrix:
        """Inverse key matrix; raises NoInverseExists for a singular key."""
        if self._inverse_key is None:
            self._inverse_key = inverse_matrix(self.key, self.modulus)
        return self._inverse_key

    @property
    def is_invertible(self) -> bool:
        try:
            mod_inverse(self.determinant, self.modulus)
        except NoInverseExists:
            return False
        return True

    def _pad(self, numbers: List[int]) -> List[int]:
        while len(numbers) % self.size != 0:
            numbers.append(PAD_VALUE)
        return numbers

    def _transform(self, matrix: Matrix, numbers: List[int]) -> List[int]:
        out = []
        # Whole blocks only
        usable = len(numbers) - len(numbers) % self.size
        for i in range(0, usable, self.size):
            block = numbers[i:i + self.size]
            out.extend(multiply_matrix_vector(matrix, block, self.modulus))
        return out

    def encrypt(self, plaintext: str) -> str:
        numbers = self._pad(text_to_numbers(plaintext))
        return numbers_to_text(self._transform(self.key, numbers))

    def decrypt(self, ciphertext: str) -> str:
        key_inv = self.inverse_key
        numbers = text_to_numbers(ciphertext)
        trailing = len(numbers) % self.size
        if trailing:
            logger.warning(
                "Ciphertext length %d is not a multiple of %d, dropping %d trailing letter(s)",
                len(numbers), self.size, trailing,
            )
        return numbers_to_text(self._transform(key_inv, numbers))


def encrypt_hill(plaintext: str, key: Matrix) -> str:
    return HillCipher(key).encrypt(plaintext)


def decrypt_hill(ciphertext: str, key: Matrix) -> str:
    return HillCipher(key).decrypt(ciphertext)
