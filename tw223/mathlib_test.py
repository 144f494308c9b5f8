"""Tests for the script-facing random/randomseed bindings."""

import math
import threading

import pytest

from tw223.extract import extract
from tw223.mathlib import (
    ArgumentError,
    MathLibrary,
    check_number,
    to_number,
    type_name,
)
from tw223.types import GeneratorState


def test_random_forms():
    lib = MathLibrary()
    assert 0.0 <= lib.random() < 1.0
    v = lib.random(6)
    assert v in {1.0, 2.0, 3.0, 4.0, 5.0, 6.0}
    v = lib.random(-3, 3)
    assert -3.0 <= v <= 3.0
    assert v.is_integer()


def test_random_is_lazy_until_first_call():
    lib = MathLibrary()
    assert lib.state.valid is False
    lib.random()
    assert lib.state.valid is True


def test_default_stream_is_zero_seed():
    lib = MathLibrary()
    state = GeneratorState()
    assert [lib.random() for _ in range(10)] == [extract(state) for _ in range(10)]


def test_randomseed_makes_sequence_reproducible():
    lib = MathLibrary()
    lib.randomseed(1234)
    first = [lib.random(100) for _ in range(20)]
    lib.randomseed(1234.0)
    assert [lib.random(100) for _ in range(20)] == first


def test_instances_do_not_share_state():
    a = MathLibrary()
    b = MathLibrary()
    a.randomseed(5)
    b.randomseed(5)
    a.random()
    assert a.state != b.state


def test_numeric_strings_are_coerced():
    a = MathLibrary()
    b = MathLibrary()
    a.randomseed("7")
    b.randomseed(7)
    assert a.random("1", " 0x10 ") == b.random(1, 16)


def test_extra_arguments_are_ignored():
    a = MathLibrary()
    b = MathLibrary()
    assert a.random(1, 6, "junk", None) == b.random(1, 6)


def test_bad_argument_messages():
    lib = MathLibrary()
    with pytest.raises(ArgumentError, match=r"bad argument #1 to 'random' \(number expected, got string\)"):
        lib.random("six")
    with pytest.raises(ArgumentError, match=r"#2 to 'random' \(number expected, got boolean\)"):
        lib.random(1, True)
    with pytest.raises(ArgumentError, match=r"#1 to 'randomseed' \(number expected, got no value\)"):
        lib.randomseed()
    with pytest.raises(ArgumentError, match="got nil"):
        lib.randomseed(None)
    with pytest.raises(ArgumentError, match="got table"):
        lib.random([1, 2])


def test_argument_error_is_type_error():
    assert issubclass(ArgumentError, TypeError)


def test_rejected_call_does_not_draw():
    lib = MathLibrary()
    lib.randomseed(3)
    before = lib.state.copy()
    with pytest.raises(ArgumentError):
        lib.random({})
    assert lib.state == before


def test_to_number():
    assert to_number(3) == 3.0
    assert to_number(2.5) == 2.5
    assert to_number("12.5") == 12.5
    assert to_number(" -4 ") == -4.0
    assert to_number("1e3") == 1000.0
    assert to_number(".5") == 0.5
    assert to_number("0x10") == 16.0
    assert to_number("-0XfF") == -255.0
    assert to_number("inf") == math.inf
    assert math.isnan(to_number("nan"))
    assert to_number(10**400) == math.inf
    assert to_number(-(10**400)) == -math.inf
    assert to_number("1_0") is None
    assert to_number("abc") is None
    assert to_number("") is None
    assert to_number(False) is None
    assert to_number(None) is None


def test_to_number_hex_fraction_and_exponent():
    assert to_number("0x1.8") == 1.5
    assert to_number("0x1p4") == 16.0
    assert to_number("0x.8") == 0.5
    assert to_number("-0x1.8P-1") == -0.75
    assert to_number("0x1p5000") == math.inf
    assert to_number("-0x1p5000") == -math.inf
    assert to_number("0x") is None
    assert to_number("0x1p") is None
    assert to_number("1p4") is None


def test_hex_fraction_accepted_by_random():
    a = MathLibrary()
    b = MathLibrary()
    a.randomseed("0x1.8")
    b.randomseed(1.5)
    assert a.random("0x1p3") == b.random(8)


def test_type_name():
    assert type_name(None) == "nil"
    assert type_name(True) == "boolean"
    assert type_name(1) == "number"
    assert type_name("x") == "string"
    assert type_name({}) == "table"
    assert type_name(len) == "function"
    assert type_name(object()) == "userdata"


def test_check_number_positions():
    assert check_number((1, "2"), 2, "f") == 2.0
    with pytest.raises(ArgumentError, match="#3 to 'f'"):
        check_number((1, 2), 3, "f")


def test_thread_safe_library_draws_each_value_once():
    lib = MathLibrary(thread_safe=True)
    lib.randomseed(17)
    results = [[] for _ in range(4)]

    def worker(out):
        for _ in range(500):
            out.append(lib.random())

    threads = [threading.Thread(target=worker, args=(r,)) for r in results]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    reference = MathLibrary()
    reference.randomseed(17)
    expected = sorted(reference.random() for _ in range(2000))
    assert sorted(v for r in results for v in r) == expected
