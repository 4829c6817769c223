"""
Text rendering of dense matrices.

One line per row, elements separated by a single space, each element
in Python's default float text (str(float)). Meant for humans, not for
parsing back.
"""

from __future__ import annotations

from typing import Any, Iterator
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.config import ELEMENT_SEPARATOR


def iter_lines(data: NDArray[np.floating[Any]]) -> Iterator[str]:
    """Yield the rendered text of each row, without line terminators."""
    for row in data.tolist():
        yield ELEMENT_SEPARATOR.join(str(value) for value in row)


def render(data: NDArray[np.floating[Any]]) -> str:
    """Render the whole matrix, rows joined by newlines (no trailing newline)."""
    return "\n".join(iter_lines(data))
