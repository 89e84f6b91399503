#!/usr/bin/env python3
"""
Word Generators
===============
Provides the pieces of the drifting phonotactic generator:
- Phonemes: symbol inventory and classes
- Automaton: syllable-structure legality over classes
- Markov: anchor tables and the log-space blender
- Word generator: product-automaton sampling with optional edge traces
"""

from .phonemes import (
    PhonemeClass,
    Phoneme,
    PHONEMES,
    BOUNDARY,
    class_of,
)
from .automaton import (
    SyllableAutomaton,
    SyllableState,
    DEFAULT_AUTOMATON,
)
from .markov_generator import (
    AnchorModel,
    BlendedModel,
    PRESENT,
    PAST,
    blend,
    blend_rows,
    build_blended,
)
from .entropy import (
    RandomSource,
    GreedySource,
    get_rng,
)
from .word_generator import (
    Edge,
    GeneratedWord,
    WordGenerator,
    generate_sequence,
    generate_sequence_trace,
)

__all__ = [
    # Phonemes
    'PhonemeClass',
    'Phoneme',
    'PHONEMES',
    'BOUNDARY',
    'class_of',
    # Automaton
    'SyllableAutomaton',
    'SyllableState',
    'DEFAULT_AUTOMATON',
    # Markov
    'AnchorModel',
    'BlendedModel',
    'PRESENT',
    'PAST',
    'blend',
    'blend_rows',
    'build_blended',
    # Randomness
    'RandomSource',
    'GreedySource',
    'get_rng',
    # Generation
    'Edge',
    'GeneratedWord',
    'WordGenerator',
    'generate_sequence',
    'generate_sequence_trace',
]
