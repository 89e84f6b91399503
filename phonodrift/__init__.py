#!/usr/bin/env python3
"""
PhonoDrift - Drifting Phonotactic Word Generator
================================================

Generates synthetic words whose shape is constrained by a syllable automaton
and whose transitions blend between two anchor Markov models along a drift
coefficient.

Quick Start
-----------
    from phonodrift import PhonoDrift

    pd = PhonoDrift(seed=42)

    # Plain words at a drift value or profile
    words = pd.generate(count=10, drift=0.3)
    words = pd.generate(count=10, drift="archaic")

    # Words with per-edge probabilities and surprise
    for word in pd.trace(count=3, drift=0.5):
        print(word.text, word.total_surprise)

Modules
-------
    phonodrift.generators - Phonemes, automaton, blender, word generator
    phonodrift.parallel   - Thread-pool generation
    phonodrift.config     - Drift profiles and generation defaults
    phonodrift.ui         - Rich tables for traces and blended rows

CLI Usage
---------
    python -m phonodrift generate -n 10 --drift midway
    python -m phonodrift generate -n 3 --trace --seed 7
    python -m phonodrift blend --drift 0.5
"""

__version__ = "0.1.0"

import logging
from typing import List, Optional, Union

# =============================================================================
# Submodule Imports
# =============================================================================

from . import generators
from . import config

from .generators import (
    AnchorModel,
    BlendedModel,
    Edge,
    GeneratedWord,
    GreedySource,
    RandomSource,
    SyllableAutomaton,
    SyllableState,
    WordGenerator,
    blend,
    build_blended,
    generate_sequence,
    generate_sequence_trace,
)
from .config import GenerationConfig, clamp_drift, get_drift, list_profiles
from .parallel import ParallelConfig, generate_parallel

logger = logging.getLogger(__name__)

Drift = Union[str, float, int, None]


class PhonoDrift:
    """
    Main interface for word generation.

    Example:
        pd = PhonoDrift(seed=1)
        pd.generate(count=5, drift="past")
    """

    def __init__(self, seed: Optional[int] = None, config: GenerationConfig = None):
        self.config = config or GenerationConfig(seed=seed)
        if seed is not None:
            self.config.seed = seed
        self.rng = RandomSource(self.config.seed)

    def _drift(self, drift: Drift) -> float:
        if drift is None:
            return self.config.drift
        return get_drift(drift)

    def _syllables(self, syllables):
        if syllables is None:
            return self.config.syllable_range
        return syllables

    def blend(self, drift: Drift = None) -> BlendedModel:
        """Blended model of the built-in anchors."""
        return build_blended(self._drift(drift))

    def generate(self, count: int = None, drift: Drift = None, syllables=None) -> List[str]:
        """Generate plain words."""
        return generate_sequence(
            self._drift(drift),
            self.config.word_count if count is None else count,
            self._syllables(syllables),
            self.rng,
        )

    def trace(self, count: int = None, drift: Drift = None, syllables=None) -> List[GeneratedWord]:
        """Generate words with edge traces."""
        return generate_sequence_trace(
            self._drift(drift),
            self.config.word_count if count is None else count,
            self._syllables(syllables),
            self.rng,
        )

    def generate_parallel(self, count: int = None, drift: Drift = None,
                          syllables=None, workers: int = None) -> List[GeneratedWord]:
        """Generate traced words on a thread pool."""
        return generate_parallel(
            self._drift(drift),
            self.config.word_count if count is None else count,
            ParallelConfig(workers=workers or self.config.workers),
            self._syllables(syllables),
            self.rng.randint(0, 2**63 - 1) if self.rng.seeded else None,
        )

    def most_likely_word(self, drift: Drift = None, max_syllables: int = 3) -> GeneratedWord:
        """Greedy walk: the most probable legal continuation at every step."""
        return WordGenerator(self.blend(drift)).most_likely_word(max_syllables)


__all__ = [
    '__version__',
    'PhonoDrift',
    # Models
    'AnchorModel',
    'BlendedModel',
    'blend',
    'build_blended',
    # Automaton
    'SyllableAutomaton',
    'SyllableState',
    # Generation
    'WordGenerator',
    'GeneratedWord',
    'Edge',
    'RandomSource',
    'GreedySource',
    'generate_sequence',
    'generate_sequence_trace',
    'generate_parallel',
    'ParallelConfig',
    # Config
    'GenerationConfig',
    'clamp_drift',
    'get_drift',
    'list_profiles',
]
