from pydantic import BaseModel, field_validator
from typing import List, Optional


class KeyInput(BaseModel):
    key: List[List[int]] # n x n

    @field_validator("key")
    @classmethod
    def key_must_be_square(cls, v):
        if not v:
            raise ValueError("Key matrix is empty")
        n = len(v)
        if any(len(row) != n for row in v):
            raise ValueError("Fill all key matrix values before continuing (matrix must be square)")
        return v

class EncryptionRequest(KeyInput):
    plaintext: str

class DecryptionRequest(KeyInput):
    ciphertext: str

class MatrixDetails(BaseModel):
    determinant: int # mod 26
    inverse: Optional[List[List[int]]] = None
    verified: bool = False

class EncryptionResult(BaseModel):
    ciphertext: str
    details: MatrixDetails

class DecryptionResult(BaseModel):
    plaintext: str
    details: MatrixDetails
