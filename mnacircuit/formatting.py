"""Console formatting helpers: separator lines and phasor notation."""

from __future__ import annotations

import cmath
import sys

_LINE_WIDTH = 48
_SINGLE_RULE = "-" * _LINE_WIDTH
_DOUBLE_RULE = "=" * _LINE_WIDTH
_VERTICAL_SPACE = "\n\n"


def _emit(text: str) -> str:
    """Write ``text`` and a newline to standard output and return what was written."""
    written = f"{text}\n"
    sys.stdout.write(written)
    sys.stdout.flush()
    return written


def hline() -> str:
    """Print a single separator line and return the text written."""
    return _emit(_SINGLE_RULE)


def double_hline() -> str:
    """Print a double separator line and return the text written."""
    return _emit(_DOUBLE_RULE)


def vspace() -> str:
    """Print a block of vertical space and return the text written."""
    return _emit(_VERTICAL_SPACE)


def format_phasor(value: complex) -> str:
    """Render a complex number as ``<magnitude> cis <phase/pi> pi`` with 4 significant figures."""
    magnitude, phase = cmath.polar(complex(value))
    return f"{magnitude:.4g} cis {phase / cmath.pi:.4g} pi"