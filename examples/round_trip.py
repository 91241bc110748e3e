#!/usr/bin/env python3
"""
Round-Trip Conversion: Text → Cipher → Text

Encrypts Italian sentences with the sample lexicon and decrypts them back.
Decryption restores the original exactly, casing and punctuation included.
"""
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from kiaro.sample_lexicon import build_sample_cipher


def round_trip(cipher, sentence: str, times: int = 1):
    """Encrypt a sentence `times` times, then decrypt it the same number of times."""
    print(f"\n  Original:  '{sentence}'")

    secret = cipher.encrypt_times(sentence, times)
    print(f"  Encrypted: '{secret}'")

    restored = cipher.decrypt_times(secret, times)
    print(f"  Decrypted: '{restored}'")

    match = restored == sentence
    status = "✓" if match else "✗"
    print(f"  Match: {status}")

    return match


def main():
    """Run round trips on a few sentences."""
    cipher = build_sample_cipher()

    print("\n")
    print("*" * 60)
    print("  KIARO: Round-Trip Examples")
    print("*" * 60)

    print("\n" + "=" * 60)
    print("Example 1: Whole Words and Nouns")
    print("=" * 60)

    sentences = [
        "Il gatto e il cane.",
        "Le case con le porte.",
        "Un libro per l'amico.",
    ]

    results = []
    for sentence in sentences:
        results.append(round_trip(cipher, sentence))

    print("\n" + "=" * 60)
    print("Example 2: Conjugated Verbs and Clitics")
    print("=" * 60)

    sentences = [
        "Lasciatemi andare!",
        "Finisce presto, poi dorme.",
        "Voi siete qui e fate tutto.",
        "Va a vedere il CANE.",
    ]

    for sentence in sentences:
        results.append(round_trip(cipher, sentence))

    print("\n" + "=" * 60)
    print("Example 3: Repeated Passes")
    print("=" * 60)

    for times in (2, 3):
        results.append(round_trip(cipher, "L'amico parla con la casa.", times))

    print("\n" + "=" * 60)
    print("Summary")
    print("=" * 60)
    total = len(results)
    passed = sum(results)

    print(f"\nTotal sentences tested: {total}")
    print(f"Successful round-trips: {passed}")
    print(f"Success rate: {passed/total*100:.1f}%")
    print("\n")


if __name__ == "__main__":
    main()
