"""
Tests for Parallel Generation
=============================
Thread-pool generation with per-word random sources.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from phonodrift.generators import DEFAULT_AUTOMATON, class_of
from phonodrift.generators.entropy import RandomSource
from phonodrift.parallel import ParallelConfig, generate_parallel


class TestParallelConfig:
    """ParallelConfig settings."""

    def test_default_workers(self):
        """Test workers come from app.yaml."""
        assert ParallelConfig().workers == 4

    def test_invalid_workers(self):
        """Test zero workers is rejected."""
        with pytest.raises(ValueError):
            ParallelConfig(workers=0)


class TestGenerateParallel:
    """generate_parallel behaviour."""

    def test_count(self):
        """Test the number of words."""
        words = generate_parallel(0.5, 12, ParallelConfig(workers=3), seed=1)
        assert len(words) == 12

    def test_seeded_reproducible(self):
        """Test a seed gives identical output across runs."""
        first = generate_parallel(0.4, 30, ParallelConfig(workers=4), seed=99)
        second = generate_parallel(0.4, 30, ParallelConfig(workers=4), seed=99)
        assert [w.text for w in first] == [w.text for w in second]

    def test_worker_count_irrelevant(self):
        """Test output does not depend on the number of workers."""
        one = generate_parallel(0.7, 25, ParallelConfig(workers=1), seed=5)
        many = generate_parallel(0.7, 25, ParallelConfig(workers=8), seed=5)
        assert [w.text for w in one] == [w.text for w in many]

    def test_traced_edges_legal(self):
        """Test parallel words carry legal edges."""
        words = generate_parallel(0.5, 20, ParallelConfig(workers=4), seed=2)
        for word in words:
            for edge in word.edges:
                assert DEFAULT_AUTOMATON.allows(edge.state, class_of(edge.next))

    def test_untraced(self):
        """Test trace=False skips edges."""
        words = generate_parallel(0.5, 5, ParallelConfig(workers=2, trace=False), seed=2)
        assert all(w.edges == [] for w in words)

    def test_budget(self):
        """Test the syllable budget is honoured."""
        words = generate_parallel(0.5, 10, ParallelConfig(workers=2), syllables=(1, 1), seed=3)
        assert all(w.max_syllables == 1 and w.syllables <= 1 for w in words)

    def test_empty_and_invalid(self):
        """Test zero and negative counts."""
        assert generate_parallel(0.5, 0, ParallelConfig(workers=2), seed=1) == []
        with pytest.raises(ValueError):
            generate_parallel(0.5, -2, ParallelConfig(workers=2))


class TestSpawn:
    """Child random sources."""

    def test_seeded_spawn_deterministic(self):
        """Test children of equal seeds are equal."""
        a = RandomSource(7).spawn()
        b = RandomSource(7).spawn()
        assert [a.random() for _ in range(5)] == [b.random() for _ in range(5)]

    def test_unseeded_spawn(self):
        """Test children of unseeded sources are unseeded."""
        assert not RandomSource().spawn().seeded
