"""Vectorised bracket lookups over NumPy code point arrays.

Layout engines commonly keep shaped runs as integer code point buffers; these
helpers apply the bracket table to a whole buffer at once. Lookups use sorted
key arrays and ``np.searchsorted`` (binary search), mirroring the scalar
helpers in :mod:`unicode_brackets.brackets` element by element.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np
from numpy.typing import ArrayLike

from .table import BRACKET_PAIRS

MAX_CODEPOINT: int = 0x10FFFF

OPENING: int = 1
CLOSING: int = -1
NEITHER: int = 0


def _sorted_lookup(keys: list[int], values: list[int]) -> Tuple[np.ndarray, np.ndarray]:
    key_arr = np.asarray(keys, dtype=np.uint32)
    value_arr = np.asarray(values, dtype=np.uint32)
    order = np.argsort(key_arr, kind="stable")
    key_arr = key_arr[order]
    value_arr = value_arr[order]
    key_arr.setflags(write=False)
    value_arr.setflags(write=False)
    return key_arr, value_arr


_OPEN_KEYS, _CLOSE_VALUES = _sorted_lookup(
    [pair.open_codepoint for pair in BRACKET_PAIRS],
    [pair.close_codepoint for pair in BRACKET_PAIRS],
)
_CLOSE_KEYS, _OPEN_VALUES = _sorted_lookup(
    [pair.close_codepoint for pair in BRACKET_PAIRS],
    [pair.open_codepoint for pair in BRACKET_PAIRS],
)


def _as_codepoints(values: ArrayLike) -> np.ndarray:
    arr = np.asarray(values)
    if arr.size == 0:
        return arr.astype(np.uint32)
    if arr.dtype.kind not in "iu":
        raise TypeError(f"Expected an integer array of code points, got dtype {arr.dtype}")
    wide = arr.astype(np.int64)
    if (wide < 0).any() or (wide > MAX_CODEPOINT).any():
        raise ValueError(f"Code points must lie in [0, 0x{MAX_CODEPOINT:X}]")
    return wide.astype(np.uint32)


def _lookup(
    arr: np.ndarray, keys: np.ndarray, values: np.ndarray
) -> Tuple[np.ndarray, np.ndarray]:
    """Return ``(mapped, hit)``; unmatched elements map to themselves."""
    idx = np.searchsorted(keys, arr)
    idx = np.minimum(idx, keys.size - 1)
    hit = keys[idx] == arr
    return np.where(hit, values[idx], arr).astype(np.uint32), hit


def codepoints(text: str) -> np.ndarray:
    """Return the code points of ``text`` as a ``uint32`` array."""
    return np.fromiter((ord(ch) for ch in text), dtype=np.uint32, count=len(text))


def from_codepoints(values: ArrayLike) -> str:
    """Build a string from a one-dimensional array of code points."""
    arr = _as_codepoints(values)
    return "".join(chr(cp) for cp in arr.ravel().tolist())


def to_close_codepoints(values: ArrayLike) -> np.ndarray:
    """Element-wise ``to_close_bracket`` over an array of code points.

    Parameters
    ----------
    values:
        Integer array-like of code points, any shape.

    Returns
    -------
    np.ndarray
        New ``uint32`` array of the same shape. Elements that are not opening
        brackets are copied unchanged.

    Raises
    ------
    TypeError
        If ``values`` is not an integer array.
    ValueError
        If any value lies outside the Unicode code space.
    """
    mapped, _ = _lookup(_as_codepoints(values), _OPEN_KEYS, _CLOSE_VALUES)
    return mapped


def to_open_codepoints(values: ArrayLike) -> np.ndarray:
    """Element-wise ``to_open_bracket`` over an array of code points."""
    mapped, _ = _lookup(_as_codepoints(values), _CLOSE_KEYS, _OPEN_VALUES)
    return mapped


def mirror_codepoints(values: ArrayLike) -> np.ndarray:
    """Element-wise ``mirror_bracket`` over an array of code points."""
    arr = _as_codepoints(values)
    closed, open_hit = _lookup(arr, _OPEN_KEYS, _CLOSE_VALUES)
    opened, _ = _lookup(arr, _CLOSE_KEYS, _OPEN_VALUES)
    return np.where(open_hit, closed, opened).astype(np.uint32)


def classify_codepoints(values: ArrayLike) -> np.ndarray:
    """Classify each code point.

    Returns
    -------
    np.ndarray
        ``int8`` array of the input's shape holding ``OPENING`` (1),
        ``CLOSING`` (-1) or ``NEITHER`` (0).
    """
    arr = _as_codepoints(values)
    _, open_hit = _lookup(arr, _OPEN_KEYS, _CLOSE_VALUES)
    _, close_hit = _lookup(arr, _CLOSE_KEYS, _OPEN_VALUES)
    classes = np.full(arr.shape, NEITHER, dtype=np.int8)
    classes[open_hit] = OPENING
    classes[close_hit] = CLOSING
    return classes


__all__ = [
    "MAX_CODEPOINT",
    "OPENING",
    "CLOSING",
    "NEITHER",
    "codepoints",
    "from_codepoints",
    "to_close_codepoints",
    "to_open_codepoints",
    "mirror_codepoints",
    "classify_codepoints",
]
