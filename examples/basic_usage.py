#!/usr/bin/env python3
"""
Basic Cipher Usage

Builds a cipher from small hand-written tables and shows how single words
are resolved.
"""
import logging
import sys
from pathlib import Path

# Add parent directory to path to import kiaro
sys.path.insert(0, str(Path(__file__).parent.parent))

from kiaro import CipherConfig, Direction, KiaroCipher
from kiaro.logging_config import setup_logging


def example_1_whole_words():
    """Swap words through the whole-word lexicon."""
    print("=" * 60)
    print("Example 1: Whole-Word Lexicon")
    print("=" * 60)

    cipher = KiaroCipher({"sole": "luna", "luna": "sole"}, {"luna": "sole", "sole": "luna"})

    for word in ("sole", "Luna", "STELLA"):
        print(f"  {word:10} -> {cipher.encrypt(word)}")

    print("\nUnknown words come back unchanged.")


def example_2_verbs():
    """Permute infinitives and re-inflect conjugated forms."""
    print("\n" + "=" * 60)
    print("Example 2: Verb Permutation")
    print("=" * 60)

    forms = {
        "parla": [{"lemma": "parlare", "tag": "VER:ind:pres:S3"}],
        "canta": [{"lemma": "cantare", "tag": "VER:ind:pres:S3"}],
        "balla": [{"lemma": "ballare", "tag": "VER:ind:pres:S3"}],
    }
    cipher = KiaroCipher({}, {}, form_to_lemma_tags=forms)

    for word in ("parlare", "parla", "parlerai", "cantavano"):
        print(f"  {word:10} -> {cipher.resolve_word(word, Direction.ENCRYPT)}")

    print("\nOnly forms with an analysis are re-inflected; 'parlerai' has none.")


def example_3_strict_elision():
    """Keep the original word after an elision when the cipher would break it."""
    print("\n" + "=" * 60)
    print("Example 3: Strict Elision")
    print("=" * 60)

    tables = ({"amico": "cane"}, {"cane": "amico"})
    loose = KiaroCipher(*tables)
    strict = KiaroCipher(*tables, config=CipherConfig(strict_elision=True))

    text = "l'amico"
    print(f"  loose:  {loose.encrypt(text)}")
    print(f"  strict: {strict.encrypt(text)}")


def main():
    setup_logging(level=logging.WARNING)
    example_1_whole_words()
    example_2_verbs()
    example_3_strict_elision()
    print()


if __name__ == "__main__":
    main()
