#!/usr/bin/env python3
"""
Phoneme Inventory
=================
The symbol alphabet and its phonological classes.

Usage:
    from phonodrift.generators.phonemes import PhonemeClass, BOUNDARY, class_of

    class_of('p')      # PhonemeClass.CONSONANT
    class_of(BOUNDARY) # PhonemeClass.BOUNDARY
    class_of('r')      # PhonemeClass.BOUNDARY (not in the inventory)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List


class PhonemeClass(Enum):
    """Automaton-relevant category of a symbol."""
    CONSONANT = "C"
    NASAL = "N"
    VOWEL = "V"
    BOUNDARY = "#"


# Reserved word start/end marker
BOUNDARY = '#'


@dataclass(frozen=True)
class Phoneme:
    """An inventory entry."""
    symbol: str
    cls: PhonemeClass


PHONEMES: List[Phoneme] = [
    Phoneme('p', PhonemeClass.CONSONANT),
    Phoneme('t', PhonemeClass.CONSONANT),
    Phoneme('k', PhonemeClass.CONSONANT),
    Phoneme('s', PhonemeClass.CONSONANT),
    Phoneme('m', PhonemeClass.NASAL),
    Phoneme('n', PhonemeClass.NASAL),
    Phoneme('a', PhonemeClass.VOWEL),
    Phoneme('i', PhonemeClass.VOWEL),
    Phoneme('u', PhonemeClass.VOWEL),
]

CLASS_OF: Dict[str, PhonemeClass] = {p.symbol: p.cls for p in PHONEMES}
CLASS_OF[BOUNDARY] = PhonemeClass.BOUNDARY


def class_of(symbol: str) -> PhonemeClass:
    """
    Look up the class of a symbol.

    Symbols outside the inventory (the anchors mention 'r' and 'l') are
    treated as BOUNDARY for automaton purposes.
    """
    return CLASS_OF.get(symbol, PhonemeClass.BOUNDARY)


def symbols_of_class(cls: PhonemeClass) -> List[str]:
    """Inventory symbols belonging to a class (the boundary excluded)."""
    return [p.symbol for p in PHONEMES if p.cls is cls]


__all__ = [
    'PhonemeClass',
    'Phoneme',
    'PHONEMES',
    'BOUNDARY',
    'CLASS_OF',
    'class_of',
    'symbols_of_class',
]
