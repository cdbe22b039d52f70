"""Shared type aliases used across docshelf."""

from pathlib import Path
from typing import Any

# Config value types
ConfigDict = dict[str, Any]

# Path types
PathLike = str | Path

# (id, raw markdown) pairs in corpus order
RawCorpus = list[tuple[str, str]]
