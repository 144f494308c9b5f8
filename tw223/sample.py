"""Sampling parameters and the JSON-dict interface used by the scripts."""

from __future__ import annotations

from dataclasses import dataclass, field

from .extract import extract, reseed
from .types import GeneratorState


@dataclass
class SamplingParams:
    seed: float | None = None
    count: int = 10
    args: tuple[float, ...] = ()

    @staticmethod
    def from_dict(d: dict) -> SamplingParams:
        seed = d.get("seed")
        count = int(d.get("count", 10))
        raw_args = d.get("args", ())
        if not isinstance(raw_args, (list, tuple)):
            raise ValueError(
                f"args must be a list of numbers, got {type(raw_args).__name__}"
            )
        args = tuple(float(a) for a in raw_args)
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        if len(args) > 2:
            raise ValueError(f"At most 2 range arguments, got {len(args)}")
        return SamplingParams(
            seed=float(seed) if seed is not None else None,
            count=count,
            args=args,
        )

    def to_dict(self) -> dict:
        d: dict = {"count": self.count}
        if self.seed is not None:
            d["seed"] = self.seed
        if self.args:
            d["args"] = list(self.args)
        return d


@dataclass
class SampleResult:
    values: list[float] = field(default_factory=list)
    state: GeneratorState = field(default_factory=GeneratorState)

    def to_dict(self) -> dict:
        return {"values": list(self.values), "state": self.state.to_dict()}


def sample(params: SamplingParams) -> SampleResult:
    """Draw ``params.count`` values from a fresh state.

    Without a seed the state is left to lazy seeding, so the values are the
    default seed-0.0 stream.
    """
    state = GeneratorState()
    if params.seed is not None:
        reseed(state, params.seed)
    values = [extract(state, *params.args) for _ in range(params.count)]
    return SampleResult(values=values, state=state)


def sample_json(params_dict: dict) -> dict:
    """JSON-dict in, JSON-dict out wrapper."""
    return sample(SamplingParams.from_dict(params_dict)).to_dict()
