#!/usr/bin/env python3
"""
Syllable Automaton
==================
Deterministic finite automaton over phoneme classes encoding legal syllable
shapes (CV/CVC chains separated by word boundaries).

States:
    START   - initial state
    ONSET   - consonant seen, vowel required
    NUCLEUS - vowel seen
    CODA    - nasal closed the syllable
    SEP     - syllable boundary

The NUCLEUS state carries a syllable-break edge for consonants: a consonant
after a vowel starts the next syllable's onset. That edge overrides the
plain CONSONANT -> CODA entry, so only nasals ever reach CODA.
"""

import logging
from enum import Enum
from typing import Dict, FrozenSet, Optional

from .phonemes import PhonemeClass

logger = logging.getLogger(__name__)


class SyllableState(Enum):
    """Automaton states."""
    START = "START"
    ONSET = "ONSET"
    NUCLEUS = "NUCLEUS"
    CODA = "CODA"
    SEP = "SEP"


C = PhonemeClass.CONSONANT
N = PhonemeClass.NASAL
V = PhonemeClass.VOWEL
B = PhonemeClass.BOUNDARY

TRANSITIONS: Dict[SyllableState, Dict[PhonemeClass, SyllableState]] = {
    SyllableState.START: {C: SyllableState.ONSET, V: SyllableState.NUCLEUS},
    SyllableState.ONSET: {V: SyllableState.NUCLEUS},
    SyllableState.NUCLEUS: {C: SyllableState.CODA, N: SyllableState.CODA, B: SyllableState.SEP},
    SyllableState.CODA: {B: SyllableState.SEP, C: SyllableState.ONSET},
    SyllableState.SEP: {C: SyllableState.ONSET, V: SyllableState.NUCLEUS},
}

# Consonant syllable-break edges (state -> target), checked before TRANSITIONS
CONSONANT_BREAKS: Dict[SyllableState, SyllableState] = {
    SyllableState.NUCLEUS: SyllableState.ONSET,
}

ACCEPTING: FrozenSet[SyllableState] = frozenset({
    SyllableState.NUCLEUS,
    SyllableState.CODA,
    SyllableState.SEP,
})


class SyllableAutomaton:
    """
    Class-level legality checker.

    Lookups never fail: a (state, class) pair without an entry is simply not
    allowed, and advancing on it keeps the current state.
    """

    def __init__(self,
                 transitions: Dict[SyllableState, Dict[PhonemeClass, SyllableState]] = None,
                 consonant_breaks: Dict[SyllableState, SyllableState] = None,
                 start: SyllableState = SyllableState.START,
                 accepting: FrozenSet[SyllableState] = ACCEPTING):
        self.transitions = TRANSITIONS if transitions is None else transitions
        self.consonant_breaks = CONSONANT_BREAKS if consonant_breaks is None else consonant_breaks
        self.start = start
        self.accepting = accepting

    def _break_target(self, state: SyllableState, cls: PhonemeClass) -> Optional[SyllableState]:
        if cls is PhonemeClass.CONSONANT:
            return self.consonant_breaks.get(state)
        return None

    def allows(self, state: SyllableState, cls: PhonemeClass) -> bool:
        """True if a symbol of this class may follow in this state."""
        if self._break_target(state, cls) is not None:
            return True
        return cls in self.transitions.get(state, {})

    def next(self, state: SyllableState, cls: PhonemeClass) -> SyllableState:
        """Advance on a class; stays in place when the table has no entry."""
        target = self._break_target(state, cls)
        if target is not None:
            return target

        target = self.transitions.get(state, {}).get(cls)
        if target is None:
            logger.debug("No transition for (%s, %s), staying in place", state.value, cls.value)
            return state
        return target

    def is_accepting(self, state: SyllableState) -> bool:
        return state in self.accepting

    def allowed_classes(self, state: SyllableState) -> FrozenSet[PhonemeClass]:
        """All classes legal in a state."""
        return frozenset(cls for cls in PhonemeClass if self.allows(state, cls))


# Default automaton
DEFAULT_AUTOMATON = SyllableAutomaton()
