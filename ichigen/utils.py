# File: ichigen/utils.py
"""
ichigen - Utility Functions & Helpers
=====================================
Identifier-case conversion, directory creation and timing helpers used
throughout the scaffolding pipeline.

Case conversion rules:
- Word delimiters are ``_``, ``-`` and space. Nothing else splits words.
- Conversions are locale-independent: only ASCII ``A``-``Z`` count as
  upper-case letters for snake-case boundaries.
- Every function is pure and total, and cached with a bounded ``@lru_cache``
  since the same entity name is converted several times per run.
"""

from __future__ import annotations

import functools
import logging
import re
import time
from pathlib import Path
from typing import List, Optional

# ---------------------------------------------------------------------------
# Logger
# ---------------------------------------------------------------------------
logger: logging.Logger = logging.getLogger("ichigen.utils")

# ---------------------------------------------------------------------------
# Pre-compiled regex patterns (compiled once at module load)
# ---------------------------------------------------------------------------

_WORD_DELIMITER_RE: re.Pattern[str] = re.compile(r"[_\- ]")
_UPPER_BOUNDARY_RE: re.Pattern[str] = re.compile(r"(?<=.)([A-Z])", re.DOTALL)

# Entries kept per case function.
_CASE_CACHE_SIZE: int = 1024


# ---------------------------------------------------------------------------
# Cached string transformation functions
# ---------------------------------------------------------------------------


@functools.lru_cache(maxsize=_CASE_CACHE_SIZE)
def to_pascal_case(name: str) -> str:
    """
    Convert a delimited identifier to PascalCase.

    Each word is lower-cased, then its first character upper-cased, so
    existing capitals inside a word are not preserved.

    Examples:
        >>> to_pascal_case("order_item")
        'OrderItem'
        >>> to_pascal_case("blog-post entry")
        'BlogPostEntry'
        >>> to_pascal_case("OrderItem")
        'Orderitem'
    """
    if not name:
        return ""
    words: List[str] = [w for w in _WORD_DELIMITER_RE.split(name) if w]
    return "".join(_title_word(w) for w in words)


@functools.lru_cache(maxsize=_CASE_CACHE_SIZE)
def to_camel_case(name: str) -> str:
    """
    Convert a delimited identifier to camelCase.

    Examples:
        >>> to_camel_case("order_item")
        'orderItem'
    """
    pascal: str = to_pascal_case(name)
    if not pascal:
        return ""
    return pascal[0].lower() + pascal[1:]


@functools.lru_cache(maxsize=_CASE_CACHE_SIZE)
def to_snake_case(name: str) -> str:
    """
    Convert a PascalCase / camelCase identifier to snake_case.

    An underscore goes before every upper-case letter except the first
    character, then the whole result is lower-cased. Runs of capitals are
    not collapsed, and existing delimiters are left alone.

    Examples:
        >>> to_snake_case("OrderItem")
        'order_item'
        >>> to_snake_case("HTTPServer")
        'h_t_t_p_server'
        >>> to_snake_case("order_item")
        'order_item'
    """
    if not name:
        return ""
    return _UPPER_BOUNDARY_RE.sub(r"_\1", name).lower()


def _title_word(word: str) -> str:
    lowered: str = word.lower()
    return lowered[:1].upper() + lowered[1:]


# ---------------------------------------------------------------------------
# File system helpers
# ---------------------------------------------------------------------------


def ensure_directory(path: Path) -> None:
    """Create *path* and any missing parents. Existing directories are fine."""
    path.mkdir(parents=True, exist_ok=True)
    logger.debug("Ensured directory exists: %s", path)


# ---------------------------------------------------------------------------
# Timer context manager
# ---------------------------------------------------------------------------


class Timer:
    """
    Context-manager timer for pipeline steps.

    Usage:
        with Timer("render dto") as t:
            ...
        print(t.elapsed)
    """

    __slots__ = ("label", "start_time", "elapsed")

    def __init__(self, label: str = "operation") -> None:
        self.label: str = label
        self.start_time: float = 0.0
        self.elapsed: float = 0.0

    def __enter__(self) -> "Timer":
        self.start_time = time.perf_counter()
        return self

    def __exit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[BaseException],
        exc_tb: Optional[object],
    ) -> None:
        self.elapsed = time.perf_counter() - self.start_time
        logger.debug("Timer [%s]: %.4f seconds", self.label, self.elapsed)

    def __repr__(self) -> str:
        return f"<Timer {self.label}: {self.elapsed:.4f}s>"


# ---------------------------------------------------------------------------
# Module-level exports
# ---------------------------------------------------------------------------

__all__: List[str] = [
    "to_pascal_case",
    "to_camel_case",
    "to_snake_case",
    "ensure_directory",
    "Timer",
]
