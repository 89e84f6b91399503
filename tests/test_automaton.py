"""
Tests for the Syllable Automaton
================================
Transition table, allows/next queries, the stay-in-place default, and the
NUCLEUS consonant-break edge that routes consonants to ONSET.
"""

import logging
import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from phonodrift.generators.automaton import (
    DEFAULT_AUTOMATON,
    SyllableAutomaton,
    SyllableState,
)
from phonodrift.generators.phonemes import (
    BOUNDARY,
    PhonemeClass,
    class_of,
    symbols_of_class,
)

C = PhonemeClass.CONSONANT
N = PhonemeClass.NASAL
V = PhonemeClass.VOWEL
B = PhonemeClass.BOUNDARY
S = SyllableState


class TestClassTable:
    """Symbol to class lookup."""

    def test_inventory_classes(self):
        """Test the inventory partitions into the expected classes."""
        assert symbols_of_class(C) == ['p', 't', 'k', 's']
        assert symbols_of_class(N) == ['m', 'n']
        assert symbols_of_class(V) == ['a', 'i', 'u']

    def test_boundary_symbol(self):
        """Test the boundary marker is BOUNDARY class."""
        assert class_of(BOUNDARY) is B

    def test_unmapped_defaults_to_boundary(self):
        """Test that symbols outside the inventory count as BOUNDARY."""
        assert class_of('r') is B
        assert class_of('l') is B
        assert class_of('') is B


class TestAllows:
    """Legality queries."""

    @pytest.fixture
    def dfa(self):
        return DEFAULT_AUTOMATON

    def test_start(self, dfa):
        """Test START allows consonants and vowels only."""
        assert dfa.allowed_classes(S.START) == {C, V}

    def test_onset(self, dfa):
        """Test ONSET requires a vowel."""
        assert dfa.allowed_classes(S.ONSET) == {V}

    def test_nucleus(self, dfa):
        """Test NUCLEUS allows consonant, nasal and boundary."""
        assert dfa.allowed_classes(S.NUCLEUS) == {C, N, B}

    def test_coda(self, dfa):
        """Test CODA allows boundary and consonant."""
        assert dfa.allowed_classes(S.CODA) == {B, C}

    def test_sep(self, dfa):
        """Test SEP behaves like START."""
        assert dfa.allowed_classes(S.SEP) == {C, V}

    def test_accepting(self, dfa):
        """Test accepting states."""
        assert dfa.is_accepting(S.NUCLEUS)
        assert dfa.is_accepting(S.CODA)
        assert dfa.is_accepting(S.SEP)
        assert not dfa.is_accepting(S.START)
        assert not dfa.is_accepting(S.ONSET)


class TestNext:
    """State advancement."""

    @pytest.fixture
    def dfa(self):
        return DEFAULT_AUTOMATON

    @pytest.mark.parametrize("state,cls,expected", [
        (S.START, C, S.ONSET),
        (S.START, V, S.NUCLEUS),
        (S.ONSET, V, S.NUCLEUS),
        (S.NUCLEUS, N, S.CODA),
        (S.NUCLEUS, B, S.SEP),
        (S.CODA, B, S.SEP),
        (S.CODA, C, S.ONSET),
        (S.SEP, C, S.ONSET),
        (S.SEP, V, S.NUCLEUS),
    ])
    def test_table_edges(self, dfa, state, cls, expected):
        """Test plain table edges."""
        assert dfa.next(state, cls) is expected

    def test_missing_entry_stays(self, dfa):
        """Test that a missing entry keeps the current state."""
        assert dfa.next(S.ONSET, N) is S.ONSET
        assert dfa.next(S.START, B) is S.START
        assert dfa.next(S.CODA, V) is S.CODA

    def test_missing_entry_logged(self, dfa, caplog):
        """Test that a stay-in-place lookup is logged (table gap indicator)."""
        with caplog.at_level(logging.DEBUG, logger="phonodrift.generators.automaton"):
            dfa.next(S.ONSET, N)
        assert "staying in place" in caplog.text

    def test_never_raises(self, dfa):
        """Test that every (state, class) pair resolves."""
        for state in S:
            for cls in PhonemeClass:
                assert isinstance(dfa.next(state, cls), S)
                assert isinstance(dfa.allows(state, cls), bool)


class TestNucleusConsonantBreak:
    """
    Known quirk, reproduced on purpose: NUCLEUS has both a CONSONANT -> CODA
    table entry and a consonant-break edge to ONSET. The break edge wins, so
    consonants after a vowel always start a new onset and only nasals can
    reach CODA.
    """

    def test_consonant_after_vowel_goes_to_onset(self):
        """Test the break edge overrides CONSONANT -> CODA."""
        assert DEFAULT_AUTOMATON.transitions[S.NUCLEUS][C] is S.CODA
        assert DEFAULT_AUTOMATON.next(S.NUCLEUS, C) is S.ONSET

    def test_only_nasals_reach_coda(self):
        """Test that CODA is reachable only through NASAL."""
        reaching = {
            cls for state in S for cls in PhonemeClass
            if DEFAULT_AUTOMATON.allows(state, cls)
            and DEFAULT_AUTOMATON.next(state, cls) is S.CODA
        }
        assert reaching == {N}

    def test_break_only_for_consonants(self):
        """Test the break edge does not apply to other classes."""
        assert DEFAULT_AUTOMATON.next(S.NUCLEUS, N) is S.CODA
        assert DEFAULT_AUTOMATON.next(S.NUCLEUS, B) is S.SEP

    def test_without_break_consonant_reaches_coda(self):
        """Test an automaton without break edges uses the plain entry."""
        plain = SyllableAutomaton(consonant_breaks={})
        assert plain.next(S.NUCLEUS, C) is S.CODA
        assert plain.allows(S.NUCLEUS, C)

    def test_break_allows_without_table_entry(self):
        """Test the break edge permits consonants even with no table entry."""
        dfa = SyllableAutomaton(
            transitions={S.NUCLEUS: {}},
            consonant_breaks={S.NUCLEUS: S.ONSET},
        )
        assert dfa.allows(S.NUCLEUS, C)
        assert dfa.next(S.NUCLEUS, C) is S.ONSET
        assert not dfa.allows(S.NUCLEUS, N)
