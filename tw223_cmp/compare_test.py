"""Pytest integration for engine comparison tests."""

import pytest

from .compare import TEST_SCENARIOS, run_comparison


@pytest.mark.parametrize(
    "scenario", TEST_SCENARIOS, ids=[s.name for s in TEST_SCENARIOS]
)
def test_parity(scenario):
    """Test that scalar and vectorized engines produce identical draws."""
    result = run_comparison(scenario, verbose=True)

    if result.timing:
        print(
            f"\n  timing: scalar {result.timing.scalar_secs:.3f}s"
            f", vectorized {result.timing.vector_secs:.3f}s"
            f", total {result.timing.total_secs:.3f}s"
        )

    if not result.success:
        error_msg = "Engine outputs differ:\n"
        for diff in result.diffs:
            error_msg += f"  - {diff}\n"
        pytest.fail(error_msg)
