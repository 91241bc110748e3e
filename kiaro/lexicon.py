"""
The whole-word lexicon: direct plain <-> cipher word tables.

Holds the encrypt map (plain -> cipher), the decrypt map (cipher -> plain)
and a reverse index derived from the encrypt map. The reverse index lets
decryption recover words that only the encrypt side lists, and never lets
an identity entry hide a genuine reverse mapping.
"""
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from .direction import Direction
from .logging_config import DiagnosticLogger
from .normalizer import normalize_key, normalize_string_map


class WholeWordLexicon:
    """
    Bidirectional word table, normalized and frozen at construction.

    Usage:
        lexicon = WholeWordLexicon({"casa": "porta"}, {"porta": "casa"})
        lexicon.resolve("porta", Direction.DECRYPT)   # -> "casa"
    """

    def __init__(
        self,
        encrypt_map: Optional[Mapping[str, str]] = None,
        decrypt_map: Optional[Mapping[str, str]] = None,
        diagnostics: Optional[DiagnosticLogger] = None,
    ):
        self.diagnostics = diagnostics or DiagnosticLogger()
        self.encrypt_map = MappingProxyType(normalize_string_map(encrypt_map or {}))
        self.decrypt_map = MappingProxyType(normalize_string_map(decrypt_map or {}))
        self.inverse_map = MappingProxyType(self._build_inverse())

    def _build_inverse(self) -> Dict[str, str]:
        inverse: Dict[str, str] = {}

        # Pass 1: genuine (non-identity) pairs only, first seen wins.
        for plain, cipher in self.encrypt_map.items():
            if not cipher or plain == cipher:
                continue
            existing = inverse.get(cipher)
            if existing is None:
                inverse[cipher] = plain
            elif existing != plain:
                self.diagnostics.emit(
                    "build_inverse",
                    f'WARNING: collision inverse for "{cipher}": '
                    f'keeping "{existing}", ignoring "{plain}"',
                )

        # Pass 2: identities fill only ciphers nobody else claimed.
        for plain, cipher in self.encrypt_map.items():
            if not cipher or plain != cipher:
                continue
            inverse.setdefault(cipher, plain)

        return inverse

    def encrypt_lookup(self, key: str) -> Optional[str]:
        return self.encrypt_map.get(key)

    def decrypt_lookup(self, key: str) -> Optional[str]:
        return self.decrypt_map.get(key)

    def direct(self, key: str, direction: Direction) -> Optional[str]:
        """Raw lookup in the map of the given direction, no inverse fallback."""
        if direction.is_encrypt:
            return self.encrypt_lookup(key)
        return self.decrypt_lookup(key)

    def resolve_decrypt(self, key: str) -> Optional[str]:
        """
        Decrypt a whole word.

        Precedence: a genuine decrypt-map entry, then a genuine entry of the
        encrypt-map inverse, then a decrypt-map identity, then None.
        """
        key = normalize_key(key)
        direct = self.decrypt_map.get(key)
        if direct is not None and direct != key:
            return direct

        if direct is not None:
            self.diagnostics.emit(
                "resolve_decrypt",
                f'decrypt map identity "{key}" -> "{direct}" (ignored, trying inverse)',
            )

        fallback = self.inverse_map.get(key)
        if fallback is not None and fallback != key:
            self.diagnostics.emit("resolve_decrypt", f'inverse encrypt map "{key}" -> "{fallback}"')
            return fallback

        return direct

    def resolve(self, key: str, direction: Direction) -> Optional[str]:
        """Whole-word mapping for a normalized key, or None when unmapped."""
        if direction.is_encrypt:
            return self.encrypt_lookup(key)
        return self.resolve_decrypt(key)

    def __len__(self):
        return len(self.encrypt_map)
