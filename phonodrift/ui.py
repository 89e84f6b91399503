#!/usr/bin/env python3
"""
Terminal Rendering
==================
Rich tables for traced words and blended transition rows.

Usage:
    from phonodrift.ui import render_trace

    render_trace(words)
"""

from typing import Iterable, List, Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .generators.markov_generator import BlendedModel
from .generators.word_generator import GeneratedWord

# Surprise thresholds (nats) for coloring
SURPRISE_STYLES = [
    (0.7, "green"),
    (1.6, "yellow"),
    (float("inf"), "red"),
]


def surprise_style(surprise: float) -> str:
    for limit, style in SURPRISE_STYLES:
        if surprise <= limit:
            return style
    return "red"


def trace_table(word: GeneratedWord, index: Optional[int] = None) -> Table:
    """Edge table for one traced word."""
    title = f"{word.text or '(empty)'}"
    if index is not None:
        title = f"{index:2}. {title}"
    table = Table(
        title=title,
        caption=f"{word.syllables}/{word.max_syllables} syllables, "
                f"surprise {word.total_surprise:.3f} nats",
        box=box.SIMPLE,
    )
    table.add_column("state")
    table.add_column("prev")
    table.add_column("next")
    table.add_column("raw", justify="right")
    table.add_column("effective", justify="right")
    table.add_column("surprise", justify="right")

    for edge in word.edges:
        table.add_row(
            edge.state.value if edge.state else "",
            edge.prev,
            edge.next,
            f"{edge.raw_probability:.4f}",
            f"{edge.effective_probability:.4f}",
            Text(f"{edge.surprise:.3f}", style=surprise_style(edge.surprise)),
        )
    return table


def render_trace(words: Iterable[GeneratedWord], console: Console = None):
    """Print an edge table per word."""
    console = console or Console()
    for i, word in enumerate(words, 1):
        console.print(trace_table(word, i))


def blend_table(model: BlendedModel, rows: List[str] = None) -> Table:
    """Blended rows as a prev x next probability grid."""
    rows = rows or model.keys()
    columns = []
    for prev in rows:
        for symbol in model.row(prev):
            if symbol not in columns:
                columns.append(symbol)

    table = Table(title=f"Blended model (drift={model.alpha:.2f})", box=box.SIMPLE)
    table.add_column("prev")
    for symbol in columns:
        table.add_column(symbol, justify="right")
    table.add_column("H (nats)", justify="right")

    for prev in rows:
        row = model.row(prev)
        cells = [f"{row[s]:.3f}" if s in row else "" for s in columns]
        table.add_row(prev, *cells, f"{model.entropy(prev):.3f}")
    return table


def render_blend(model: BlendedModel, rows: List[str] = None, console: Console = None):
    console = console or Console()
    console.print(blend_table(model, rows))


def render_profiles(profiles: dict, console: Console = None):
    """Drift profiles as name, drift, description."""
    console = console or Console()
    table = Table(title="Drift profiles", box=box.SIMPLE)
    table.add_column("Profile", style="bold")
    table.add_column("Drift", justify="right")
    table.add_column("Description")
    for name, p in profiles.items():
        table.add_row(name, f"{p['drift']:.2f}", p["description"])
    console.print(table)
