#!/usr/bin/env python3
"""
Drifting Markov Models
======================
Blends two anchor transition tables along a drift coefficient.

Theory:
-------
For each previous symbol k and each candidate s in the union of both anchor
rows, the blended log-weight is a linear interpolation of the anchor
log-probabilities:

    logmix(s) = (1 - alpha) * ln(P_A[k][s]) + alpha * ln(P_B[k][s])

followed by a softmax over the row. This is a geometric blend: it moves the
odds of each outcome smoothly from anchor A (alpha=0) to anchor B (alpha=1).

Missing or non-positive anchor entries are floored at epsilon (1e-9) so that
no symbol is excluded outright and ln(0) never happens. As a consequence a
symbol known to only one anchor keeps a tiny positive probability even at
the far end of the axis.
"""

import logging
import math
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from ..settings import get_setting
from .anchors import P_PAST, P_PRESENT

logger = logging.getLogger(__name__)

EPSILON = 1e-9

_EMPTY_ROW = MappingProxyType({})


# =============================================================================
# MODELS
# =============================================================================

@dataclass
class AnchorModel:
    """A fixed transition table: previous symbol -> {next symbol: weight}"""
    name: str
    transitions: Dict[str, Dict[str, float]] = field(default_factory=dict)

    def row(self, prev: str) -> Dict[str, float]:
        """Row for a previous symbol; empty when the key is absent."""
        return self.transitions.get(prev, {})

    def weight(self, prev: str, symbol: str) -> float:
        """Raw weight, 0.0 when absent."""
        return self.row(prev).get(symbol, 0.0)

    def symbols(self) -> set:
        """Every symbol mentioned as a key or inside a row."""
        found = set(self.transitions)
        for row in self.transitions.values():
            found.update(row)
        return found

    def validate(self) -> 'AnchorModel':
        """Reject negative weights."""
        for prev, row in self.transitions.items():
            for symbol, weight in row.items():
                if weight < 0:
                    raise ValueError(
                        f"Anchor '{self.name}' has negative weight {weight} "
                        f"for transition {prev!r} -> {symbol!r}"
                    )
        return self

    def to_dict(self) -> dict:
        """Serialize model to dictionary"""
        return {
            'name': self.name,
            'transitions': {k: dict(v) for k, v in self.transitions.items()},
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'AnchorModel':
        """Deserialize model from dictionary"""
        model = cls(
            name=data.get('name', 'anchor'),
            transitions={
                k: {s: float(w) for s, w in v.items()}
                for k, v in data['transitions'].items()
            },
        )
        return model.validate()


@dataclass(frozen=True)
class BlendedModel:
    """
    Transition table produced by blending two anchors at a drift value.

    Read-only once built; safe to share between concurrently generated words.
    Rows are copied into read-only mappings on construction, so the instances
    handed out by the build_blended cache cannot be edited by callers.
    """
    alpha: float
    transitions: Mapping[str, Mapping[str, float]]

    def __post_init__(self):
        rows = {k: MappingProxyType(dict(v)) for k, v in self.transitions.items()}
        object.__setattr__(self, "transitions", MappingProxyType(rows))

    def row(self, prev: str) -> Mapping[str, float]:
        """Row for a previous symbol; empty when the key is absent."""
        return self.transitions.get(prev, _EMPTY_ROW)

    def probability(self, prev: str, symbol: str) -> float:
        return self.row(prev).get(symbol, 0.0)

    def keys(self) -> List[str]:
        return list(self.transitions)

    def entropy(self, prev: str) -> float:
        """Shannon entropy of a row, in nats."""
        return -sum(p * math.log(p) for p in self.row(prev).values() if p > 0)

    def most_likely(self, prev: str) -> Optional[Tuple[str, float]]:
        """Highest-probability continuation, or None for an empty row."""
        row = self.row(prev)
        if not row:
            return None
        symbol = max(row, key=row.get)
        return symbol, row[symbol]

    def to_dict(self) -> dict:
        return {
            'alpha': self.alpha,
            'transitions': {k: dict(v) for k, v in self.transitions.items()},
        }


PRESENT = AnchorModel('present', P_PRESENT).validate()
PAST = AnchorModel('past', P_PAST).validate()


# =============================================================================
# BLENDING
# =============================================================================

def _floored(weight: Optional[float], epsilon: float) -> float:
    if weight is None or weight <= 0:
        return epsilon
    return max(weight, epsilon)


def blend_rows(row_a: Dict[str, float],
               row_b: Dict[str, float],
               alpha: float,
               epsilon: float = EPSILON) -> Dict[str, float]:
    """
    Log-space interpolation of two rows followed by a stable softmax.

    Args:
        row_a: Anchor A row (weights need not sum to 1)
        row_b: Anchor B row
        alpha: Drift in [0, 1]; not clamped here
        epsilon: Floor for missing or non-positive weights

    Returns:
        Probability row over the union of both rows' symbols
    """
    keys = list(row_a)
    keys.extend(s for s in row_b if s not in row_a)
    if not keys:
        return {}

    logmix = {}
    for symbol in keys:
        pa = _floored(row_a.get(symbol), epsilon)
        pb = _floored(row_b.get(symbol), epsilon)
        logmix[symbol] = (1.0 - alpha) * math.log(pa) + alpha * math.log(pb)

    peak = max(logmix.values())
    exps = {s: math.exp(v - peak) for s, v in logmix.items()}
    total = sum(exps.values())
    return {s: e / total for s, e in exps.items()}


def blend(model_a: AnchorModel,
          model_b: AnchorModel,
          alpha: float,
          epsilon: float = EPSILON) -> BlendedModel:
    """
    Blend two anchors row by row over the union of their keys.

    The caller is responsible for keeping alpha in [0, 1]
    (see phonodrift.config.clamp_drift).
    """
    keys = list(model_a.transitions)
    keys.extend(k for k in model_b.transitions if k not in model_a.transitions)

    transitions = {
        k: blend_rows(model_a.row(k), model_b.row(k), alpha, epsilon)
        for k in keys
    }
    logger.debug("Blended '%s'/'%s' at alpha=%.4f (%d rows)",
                 model_a.name, model_b.name, alpha, len(transitions))
    return BlendedModel(alpha=alpha, transitions=transitions)


@lru_cache(maxsize=32)
def build_blended(alpha: float) -> BlendedModel:
    """Blend the built-in anchors at alpha (cached per alpha)."""
    epsilon = float(get_setting("blender.epsilon", EPSILON))
    return blend(PRESENT, PAST, alpha, epsilon)
