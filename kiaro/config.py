"""
Cipher options as a frozen dataclass.
"""
from dataclasses import dataclass, field, fields, replace
from typing import FrozenSet

from .clitics import DEFAULT_CLITICS

DEFAULT_DEBUG_TRUNCATE = 120


@dataclass(frozen=True)
class CipherConfig:
    """Options shared by every table and strategy of one cipher instance."""

    # Clitic pronoun suffixes recognized by the splitter.
    clitics: FrozenSet[str] = field(default=DEFAULT_CLITICS)

    # Maximum diagnostic message length before truncation.
    debug_truncate: int = DEFAULT_DEBUG_TRUNCATE

    # Keep the original word after an elision unless its cipher starts with
    # a vowel or 'h'.
    strict_elision: bool = False

    def __post_init__(self):
        if self.debug_truncate < 0:
            raise ValueError(f"debug_truncate must be >= 0, got {self.debug_truncate}")
        object.__setattr__(self, "clitics", frozenset(self.clitics))

    @classmethod
    def from_overrides(cls, **overrides) -> "CipherConfig":
        """Build a config from keyword overrides, ignoring None values."""
        known = {f.name for f in fields(cls)}
        unknown = set(overrides) - known
        if unknown:
            raise ValueError(f"Unknown config options: {', '.join(sorted(unknown))}")
        return cls(**{k: v for k, v in overrides.items() if v is not None})

    def with_overrides(self, **overrides) -> "CipherConfig":
        """Copy of this config with the non-None overrides applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})
