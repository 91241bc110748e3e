"""
Key normalization for lexicon and morphology lookups.

Every lookup in the cipher goes through `normalize_key`, which unifies the
curly apostrophe, removes invisible and bidi code points, lowercases and
trims. The surface token is kept separately so casing can be restored.
"""
from typing import Dict, Mapping

APOSTROPHE = "'"
CURLY_APOSTROPHE = "\u2019"
LAYOUT_WHITESPACE = frozenset("\t\n\x0b\x0c\r")

# Single code points that never carry visible text.
_INVISIBLE_CODE_POINTS = frozenset({
    0x00A0,  # no-break space
    0x202F,  # narrow no-break space
    0x205F,  # medium mathematical space
    0x3000,  # ideographic space
    0x00AD,  # soft hyphen
    0x034F,  # combining grapheme joiner
    0x061C,  # arabic letter mark
    0x180E,  # mongolian vowel separator
    0xFEFF,  # BOM / zero-width no-break space
})

# Inclusive ranges.
_INVISIBLE_RANGES = (
    (0x0000, 0x001F),    # ASCII controls
    (0x007F, 0x009F),    # DEL + C1 controls
    (0x200B, 0x200F),    # zero-width space .. right-to-left mark
    (0x202A, 0x202E),    # bidi embeddings and overrides
    (0x2060, 0x206F),    # word joiner, bidi isolates, invisible operators
    (0xFFF9, 0xFFFB),    # interlinear annotation
    (0x1BCA0, 0x1BCA3),  # shorthand format controls
    (0xE0000, 0xE007F),  # tag characters
)


def is_invisible(code_point: int) -> bool:
    """Return True for control, format and invisible-space code points."""
    if code_point in _INVISIBLE_CODE_POINTS:
        return True
    for low, high in _INVISIBLE_RANGES:
        if low <= code_point <= high:
            return True
    return False


def unify_apostrophes(text: str) -> str:
    return text.replace(CURLY_APOSTROPHE, APOSTROPHE)


def strip_invisibles(text: str, keep_layout: bool = False) -> str:
    """
    Remove invisible code points, leaving case and everything else intact.

    With `keep_layout`, tab, newline and the other ASCII whitespace controls
    survive so running text keeps its line structure.
    """
    return "".join(
        ch for ch in text
        if not is_invisible(ord(ch)) or (keep_layout and ch in LAYOUT_WHITESPACE)
    )


def normalize_key(text: str) -> str:
    """
    Derive the lookup key for a word.

    Args:
        text: A surface word or lexicon entry.

    Returns:
        The apostrophe-unified, invisible-stripped, lowercased, trimmed key.
    """
    key = strip_invisibles(unify_apostrophes(text))
    return key.lower().strip()


def normalize_string_map(mapping: Mapping[str, str]) -> Dict[str, str]:
    """Normalize both keys and values of a word map (later keys win on clash)."""
    return {normalize_key(k): normalize_key(v) for k, v in mapping.items()}
