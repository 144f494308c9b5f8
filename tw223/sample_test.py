"""Tests for sampling parameters and the JSON interface."""

import pytest

from tw223.extract import extract, reseed
from tw223.sample import SamplingParams, sample, sample_json
from tw223.types import GeneratorState


def test_params_defaults():
    params = SamplingParams.from_dict({})
    assert params.seed is None
    assert params.count == 10
    assert params.args == ()


def test_params_roundtrip():
    params = SamplingParams(seed=3.0, count=4, args=(1.0, 6.0))
    assert SamplingParams.from_dict(params.to_dict()) == params
    assert SamplingParams(count=2).to_dict() == {"count": 2}


def test_params_validation():
    with pytest.raises(ValueError, match="non-negative"):
        SamplingParams.from_dict({"count": -1})
    with pytest.raises(ValueError, match="At most 2"):
        SamplingParams.from_dict({"args": [1, 2, 3]})


def test_params_reject_non_list_args():
    with pytest.raises(ValueError, match="list of numbers"):
        SamplingParams.from_dict({"args": "12"})
    with pytest.raises(ValueError, match="list of numbers"):
        SamplingParams.from_dict({"args": 6})
    assert SamplingParams.from_dict({"args": (1, 6)}).args == (1.0, 6.0)


def test_sample_seeded():
    result = sample(SamplingParams(seed=8.0, count=5, args=(6.0,)))
    state = GeneratorState()
    reseed(state, 8.0)
    assert result.values == [extract(state, 6.0) for _ in range(5)]
    assert result.state == state


def test_sample_unseeded_uses_default_stream():
    result = sample(SamplingParams(count=3))
    state = GeneratorState()
    assert result.values == [extract(state) for _ in range(3)]


def test_sample_zero_count_leaves_state_lazy():
    result = sample(SamplingParams(count=0))
    assert result.values == []
    assert result.state.valid is False


def test_sample_json():
    out = sample_json({"seed": 1, "count": 3, "args": [10, 20]})
    assert set(out) == {"values", "state"}
    assert len(out["values"]) == 3
    assert all(10.0 <= v <= 20.0 for v in out["values"])
    assert out["state"]["valid"] is True
    assert len(out["state"]["gen"]) == 4
