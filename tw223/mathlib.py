"""Script-facing ``random`` / ``randomseed`` bindings.

A ``MathLibrary`` stands for the math module of one interpreter instance. It
owns a single generator state, created unseeded so that programs which never
ask for randomness never pay for seeding. Arguments arrive as arbitrary
Python values and are checked and coerced the way a dynamically typed host
does: numbers pass, numeric strings are converted, anything else is
rejected with a ``bad argument`` error before the generator is touched.
"""

from __future__ import annotations

import math
import re
import threading
from contextlib import nullcontext

from .extract import extract, reseed
from .types import GeneratorState

_HEX_RE = re.compile(
    r"^([+-]?)0[xX](([0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)([pP][+-]?\d+)?)$"
)
_DEC_RE = re.compile(
    r"^[+-]?(\d+\.?\d*([eE][+-]?\d+)?|\.\d+([eE][+-]?\d+)?|inf(inity)?|nan)$",
    re.IGNORECASE,
)


class ArgumentError(TypeError):
    """A script called a binding with a missing or non-numeric argument."""


def type_name(value: object) -> str:
    """Script-level name of a Python value's type, used in error messages."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (dict, list, tuple)):
        return "table"
    if callable(value):
        return "function"
    return "userdata"


def _int_to_float(v: int) -> float:
    try:
        return float(v)
    except OverflowError:
        return math.copysign(math.inf, v)


def _hex_to_float(body: str) -> float:
    try:
        return float.fromhex(body)
    except OverflowError:
        return math.inf


def to_number(value: object) -> float | None:
    """Coerce ``value`` to a float, or None if it is not numeric.

    Strings may be decimal (``"12.5"``, ``"1e3"``, ``"inf"``, ``"nan"``) or
    hexadecimal with an optional fraction and binary exponent (``"0x10"``,
    ``"0x1.8"``, ``"0x1p4"``). Values too large for a double become infinite.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return _int_to_float(value)
    if isinstance(value, float):
        return value
    if isinstance(value, str):
        s = value.strip()
        m = _HEX_RE.match(s)
        if m:
            v = _hex_to_float(m.group(2))
            return -v if m.group(1) == "-" else v
        if _DEC_RE.match(s):
            return float(s)
    return None


def check_number(args: tuple, n: int, fname: str) -> float:
    """Return argument ``n`` (1-based) of ``args`` as a float.

    Raises ArgumentError if it is missing or not convertible to a number.
    """
    if n > len(args):
        raise ArgumentError(
            f"bad argument #{n} to '{fname}' (number expected, got no value)"
        )
    value = args[n - 1]
    number = to_number(value)
    if number is None:
        raise ArgumentError(
            f"bad argument #{n} to '{fname}' "
            f"(number expected, got {type_name(value)})"
        )
    return number


class MathLibrary:
    """Per-interpreter owner of one generator state.

    With ``thread_safe=True`` every call holds a lock for the whole
    read-modify-write of the registers, so one library object can be shared
    between threads.
    """

    def __init__(self, thread_safe: bool = False) -> None:
        self._state = GeneratorState()
        self._lock = threading.Lock() if thread_safe else nullcontext()

    @property
    def state(self) -> GeneratorState:
        return self._state

    def random(self, *args: object) -> float:
        """``random()``, ``random(m)`` or ``random(m, n)``.

        Only the first two arguments are read; extras are ignored.
        """
        n = min(len(args), 2)
        bounds = tuple(check_number(args, i, "random") for i in range(1, n + 1))
        with self._lock:
            return extract(self._state, *bounds)

    def randomseed(self, *args: object) -> None:
        d = check_number(args, 1, "randomseed")
        with self._lock:
            reseed(self._state, d)
