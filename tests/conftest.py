#
# Pytest Fixtures
#

# Standard library -----------------------------------------------------------------------------------------------------
import random

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

RANDOM_SEED = 0
RANDOM_RUNS = 20


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def rng() -> random.Random:
    """Random generator with a fixed seed, so property checks are reproducible."""
    return random.Random(RANDOM_SEED)


@pytest.fixture
def random_amounts(rng) -> list[float]:
    """Finite amounts spread over many magnitudes, both signs."""
    amounts = []
    for _ in range(RANDOM_RUNS):
        magnitude = 10.0 ** rng.randint(-3, 6)
        amounts.append(rng.uniform(-magnitude, magnitude))
    return amounts
