from __future__ import annotations

import pytest

try:
    from hypothesis import HealthCheck, settings
except ImportError:  # pragma: no cover
    settings = None
    HealthCheck = None

from golden_staircase.common.constants import RNG_SEEDS, seed_everywhere


TEST_SEED = RNG_SEEDS.get("tests", 1337)
seed_everywhere(TEST_SEED)

if settings is not None:  # pragma: no branch
    settings.register_profile(
        "ci",
        max_examples=60,
        deadline=None,
        print_blob=True,
        suppress_health_check=(
            HealthCheck.filter_too_much,
            HealthCheck.too_slow,
        ),
    )
    settings.load_profile("ci")


def pytest_configure(config: pytest.Config) -> None:  # pragma: no cover
    config.addinivalue_line("markers", "slow: mark test as slow")


@pytest.fixture(scope="session")
def four_steps():
    """Hand-traced staircase: widths [2, 3, 2, 4], heights [3, 2, 4, 2]."""
    return [(2, 3), (3, 2), (2, 4), (4, 2)]
