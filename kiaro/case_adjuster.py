"""Reapply the casing of a source token to a lowercase result."""


def is_upper(ch: str) -> bool:
    return ch.upper() == ch and ch.lower() != ch


def adjust_case_like(source: str, target: str) -> str:
    """
    Copy the casing pattern of `source` onto `target`.

    All-caps source -> all-caps target; capitalized source -> capitalized
    target; anything else leaves target as is.
    """
    if not source or not target:
        return target
    if source.upper() == source and source.lower() != source:
        return target.upper()
    if is_upper(source[0]):
        return target[0].upper() + target[1:]
    return target
