# This file makes the 'kiaro' directory a Python package.

from kiaro.cipher import KiaroCipher
from kiaro.config import CipherConfig
from kiaro.direction import Direction
from kiaro.lexicon import WholeWordLexicon
from kiaro.morphology import MorphAnalysis, MorphologyTables
from kiaro.normalizer import normalize_key
from kiaro.verb_permutation import VerbPermutationIndex

__all__ = [
    'KiaroCipher',
    'CipherConfig',
    'Direction',
    'WholeWordLexicon',
    'MorphAnalysis',
    'MorphologyTables',
    'normalize_key',
    'VerbPermutationIndex',
]
