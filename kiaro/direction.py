"""Transformation direction shared by every lookup in the cipher."""
from enum import Enum


class Direction(Enum):
    """Which way a word is being transformed."""
    ENCRYPT = "encrypt"  # plain -> cipher
    DECRYPT = "decrypt"  # cipher -> plain

    @property
    def is_encrypt(self) -> bool:
        return self is Direction.ENCRYPT
