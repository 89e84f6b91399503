#!/usr/bin/env python3
"""
Parallel Generation
===================
Thread-pool word generation over one shared blended model.

Words share no mutable state: the blended model is read-only and every word
gets its own random source spawned from a parent source. With a seeded
parent the output is reproducible regardless of scheduling, since sources
are spawned (and syllable budgets drawn) before any work is submitted.

Usage:
    from phonodrift.parallel import ParallelConfig, generate_parallel

    words = generate_parallel(0.4, 100, config=ParallelConfig(workers=8), seed=1)
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Optional

from .config import clamp_drift
from .generators.entropy import RandomSource
from .generators.markov_generator import build_blended
from .generators.word_generator import (
    GeneratedWord,
    SyllableBudget,
    WordGenerator,
    resolve_syllable_budget,
)
from .settings import get_setting

logger = logging.getLogger(__name__)


@dataclass
class ParallelConfig:
    """Configuration for parallel generation."""
    workers: Optional[int] = None
    trace: bool = True

    def __post_init__(self):
        if self.workers is None:
            self.workers = get_setting("parallel.workers")
        if self.workers is None:
            raise ValueError("parallel settings missing in app.yaml: workers")
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")


def generate_parallel(alpha: float,
                      word_count: int,
                      config: ParallelConfig = None,
                      syllables: SyllableBudget = None,
                      seed: Optional[int] = None) -> List[GeneratedWord]:
    """
    Generate words concurrently.

    Args:
        alpha: Drift in [0, 1] (clamped)
        word_count: Number of words
        config: Worker settings
        syllables: Per-word syllable budget, fixed or (min, max)
        seed: Parent seed (None for unseeded system randomness)

    Returns:
        Words in submission order
    """
    if word_count < 0:
        raise ValueError(f"word_count must be >= 0, got {word_count}")
    config = config or ParallelConfig()
    low, high = resolve_syllable_budget(syllables)
    model = build_blended(clamp_drift(alpha))

    parent = RandomSource(seed)
    jobs = []
    for _ in range(word_count):
        rng = parent.spawn()
        jobs.append((WordGenerator(model, rng=rng), parent.randint(low, high)))

    def run(job) -> GeneratedWord:
        gen, budget = job
        if config.trace:
            return gen.generate_word_traced(budget)
        return gen.generate_word(budget)

    logger.debug("Generating %d words on %d workers", word_count, config.workers)
    with ThreadPoolExecutor(max_workers=config.workers) as executor:
        return list(executor.map(run, jobs))
