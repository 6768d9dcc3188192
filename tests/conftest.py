import numpy as np
import pytest

from sudogen.grid import parse_grid

# Well-known puzzle with a single solution.
CLASSIC_PUZZLE = """
53. .7. ...
6.. 195 ...
.98 ... .6.

8.. .6. ..3
4.. 8.3 ..1
7.. .2. ..6

.6. ... 28.
... 419 ..5
... .8. .79
"""

CLASSIC_SOLUTION = """
534 678 912
672 195 348
198 342 567

859 761 423
426 853 791
713 924 856

961 537 284
287 419 635
345 286 179
"""


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def classic_puzzle() -> np.ndarray:
    return parse_grid(CLASSIC_PUZZLE)


@pytest.fixture
def classic_solution() -> np.ndarray:
    return parse_grid(CLASSIC_SOLUTION)
