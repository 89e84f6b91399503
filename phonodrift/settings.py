#!/usr/bin/env python3
"""
Settings
========
Reads phonodrift/configs/app.yaml once per process.

Sections: generation (drift, counts, syllable budget, step cap),
blender (epsilon), parallel (workers), logging (level).
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

APP_CONFIG_PATH = Path(__file__).resolve().parent / "configs" / "app.yaml"


@lru_cache(maxsize=1)
def load_app_config() -> dict:
    """Parsed app.yaml; an empty file gives an empty dict."""
    if not APP_CONFIG_PATH.exists():
        raise FileNotFoundError(f"Missing app config: {APP_CONFIG_PATH}")
    with APP_CONFIG_PATH.open(encoding="utf-8") as fh:
        return yaml.safe_load(fh) or {}


def get_setting(path: str, default: Any = None) -> Any:
    """Look up "section.key"; default when any part is missing."""
    node: Any = load_app_config()
    for part in path.split('.'):
        if not isinstance(node, dict) or part not in node:
            return default
        node = node[part]
    return node
