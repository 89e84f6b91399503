#!/usr/bin/env python3
"""
Phonotactic Word Generator
==========================
Samples words from a blended Markov model constrained by the syllable
automaton (product-automaton sampling).

At every step the Markov row for the last symbol is intersected with the
classes the automaton allows in its current state. The surviving weights are
renormalized and one symbol is drawn. Both cursors then advance: the
automaton on the symbol's class and the Markov context on the symbol itself.
A boundary symbol, or reaching SEP, closes a syllable and resets the Markov
context to the boundary.

The traced variant records every sampled edge with its raw probability, its
effective probability after the legality filter, and its surprise
(-ln effective probability).

Usage:
    from phonodrift.generators import WordGenerator, build_blended, RandomSource

    gen = WordGenerator(build_blended(0.3), rng=RandomSource(seed=7))
    word = gen.generate_word_traced(max_syllables=3)
    print(word.text, word.mean_surprise)
"""

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from ..config import clamp_drift, validate_syllable_range
from ..settings import get_setting
from .automaton import DEFAULT_AUTOMATON, SyllableAutomaton, SyllableState
from .entropy import GreedySource, RandomSource, get_rng
from .markov_generator import BlendedModel, build_blended
from .phonemes import BOUNDARY, PhonemeClass, class_of

logger = logging.getLogger(__name__)

DEFAULT_STEPS_PER_SYLLABLE = 32

SyllableBudget = Union[int, Tuple[int, int], None]


# =============================================================================
# Data Classes
# =============================================================================

@dataclass
class Edge:
    """One sampled transition."""
    prev: str
    next: str
    raw_probability: float
    effective_probability: float
    surprise: float
    state: Optional[SyllableState] = None  # automaton state before the step

    def to_dict(self) -> dict:
        return {
            'prev': self.prev,
            'next': self.next,
            'raw_probability': self.raw_probability,
            'effective_probability': self.effective_probability,
            'surprise': self.surprise,
            'state': self.state.value if self.state else None,
        }


@dataclass
class GeneratedWord:
    """A generated word; boundary symbols are stripped from `symbols`."""
    symbols: List[str] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)
    syllables: int = 0
    max_syllables: int = 0

    @property
    def text(self) -> str:
        return ''.join(self.symbols)

    @property
    def total_surprise(self) -> float:
        """Information content of the whole word, in nats."""
        return sum(e.surprise for e in self.edges)

    @property
    def mean_surprise(self) -> float:
        if not self.edges:
            return 0.0
        return self.total_surprise / len(self.edges)

    def to_dict(self) -> dict:
        return {
            'word': self.text,
            'syllables': self.syllables,
            'max_syllables': self.max_syllables,
            'total_surprise': self.total_surprise,
            'edges': [e.to_dict() for e in self.edges],
        }

    def __str__(self) -> str:
        return self.text


# =============================================================================
# Word Generator
# =============================================================================

class WordGenerator:
    """Product-automaton sampler over one blended model."""

    def __init__(self,
                 model: BlendedModel,
                 automaton: SyllableAutomaton = None,
                 rng: RandomSource = None,
                 max_steps_per_syllable: int = None):
        """
        Args:
            model: Blended transition table (shared read-only)
            automaton: Syllable automaton (default: DEFAULT_AUTOMATON)
            rng: Random source (default: the shared unseeded source)
            max_steps_per_syllable: Hard cap on sampling steps per syllable
                of budget; a word that hits it ends early
        """
        self.model = model
        self.automaton = automaton or DEFAULT_AUTOMATON
        self.rng = rng or get_rng()
        if max_steps_per_syllable is None:
            max_steps_per_syllable = get_setting(
                "generation.max_steps_per_syllable", DEFAULT_STEPS_PER_SYLLABLE
            )
        if max_steps_per_syllable < 1:
            raise ValueError(f"max_steps_per_syllable must be >= 1, got {max_steps_per_syllable}")
        self.max_steps_per_syllable = int(max_steps_per_syllable)

    def candidates(self,
                   state: SyllableState,
                   last: str) -> Tuple[List[Tuple[str, float]], float]:
        """
        Legal continuations of `last` in automaton state `state`.

        Returns:
            ([(symbol, raw_probability), ...], total raw probability)
        """
        kept = []
        total = 0.0
        for symbol, prob in self.model.row(last).items():
            if prob <= 0:
                continue
            if not self.automaton.allows(state, class_of(symbol)):
                continue
            kept.append((symbol, prob))
            total += prob
        return kept, total

    def _walk(self, max_syllables: int, trace: bool) -> GeneratedWord:
        if max_syllables < 0:
            raise ValueError(f"max_syllables must be >= 0, got {max_syllables}")

        word = GeneratedWord(max_syllables=max_syllables)
        state = self.automaton.start
        last = BOUNDARY
        steps_left = self.max_steps_per_syllable * max_syllables

        while word.syllables < max_syllables:
            if steps_left <= 0:
                logger.debug("Step budget exhausted after %d syllable(s)", word.syllables)
                break
            steps_left -= 1

            cands, total = self.candidates(state, last)
            if not cands:
                logger.debug("No legal continuation of %r in state %s", last, state.value)
                break

            chosen, raw = self.rng.weighted_choice(cands)
            if chosen != BOUNDARY:
                word.symbols.append(chosen)
            if trace:
                effective = raw / total
                word.edges.append(Edge(
                    prev=last,
                    next=chosen,
                    raw_probability=raw,
                    effective_probability=effective,
                    surprise=-math.log(effective),
                    state=state,
                ))

            cls = class_of(chosen)
            state = self.automaton.next(state, cls)
            if cls is PhonemeClass.BOUNDARY or state is SyllableState.SEP:
                word.syllables += 1
                state = SyllableState.SEP
                last = BOUNDARY
                continue
            last = chosen

        return word

    def generate_word(self, max_syllables: int = 3) -> GeneratedWord:
        """Generate one word (no edge trace)."""
        return self._walk(max_syllables, trace=False)

    def generate_word_traced(self, max_syllables: int = 3) -> GeneratedWord:
        """Generate one word with per-edge probabilities and surprise."""
        return self._walk(max_syllables, trace=True)

    def most_likely_word(self, max_syllables: int = 3) -> GeneratedWord:
        """The word a greedy (always most probable) walk produces, traced."""
        greedy = WordGenerator(self.model, self.automaton, GreedySource(),
                               self.max_steps_per_syllable)
        return greedy.generate_word_traced(max_syllables)


# =============================================================================
# Sequence Generation
# =============================================================================

def resolve_syllable_budget(syllables: SyllableBudget) -> Tuple[int, int]:
    """
    Normalize a syllable budget to a (min, max) range.

    Args:
        syllables: int (fixed budget), (min, max) tuple, or None for the
            configured range
    """
    if syllables is None:
        return validate_syllable_range(
            get_setting("generation.min_syllables", 2),
            get_setting("generation.max_syllables", 3),
        )
    if isinstance(syllables, int):
        return validate_syllable_range(syllables, syllables)
    low, high = syllables
    return validate_syllable_range(low, high)


def _generate(alpha: float,
              word_count: Optional[int],
              syllables: SyllableBudget,
              rng: Optional[RandomSource],
              trace: bool) -> List[GeneratedWord]:
    if word_count is None:
        word_count = get_setting("generation.word_count", 10)
    if word_count < 0:
        raise ValueError(f"word_count must be >= 0, got {word_count}")

    low, high = resolve_syllable_budget(syllables)
    model = build_blended(clamp_drift(alpha))
    gen = WordGenerator(model, rng=rng)

    words = []
    for _ in range(word_count):
        budget = gen.rng.randint(low, high)
        words.append(gen.generate_word_traced(budget) if trace else gen.generate_word(budget))
    return words


def generate_sequence(alpha: float,
                      word_count: int = None,
                      syllables: SyllableBudget = None,
                      rng: RandomSource = None) -> List[str]:
    """
    Generate independent words at one drift value.

    Args:
        alpha: Drift in [0, 1] (clamped)
        word_count: Number of words (default from settings)
        syllables: Per-word syllable budget, fixed or (min, max) range;
            each word draws its own budget from the range
        rng: Random source

    Returns:
        Word strings (possibly empty)
    """
    return [w.text for w in _generate(alpha, word_count, syllables, rng, trace=False)]


def generate_sequence_trace(alpha: float,
                            word_count: int = None,
                            syllables: SyllableBudget = None,
                            rng: RandomSource = None) -> List[GeneratedWord]:
    """Like generate_sequence, returning traced GeneratedWord objects."""
    return _generate(alpha, word_count, syllables, rng, trace=True)
