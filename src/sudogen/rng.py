import numpy as np
import numpy.typing as npt

__all__ = [
    "RandomSource",
    "as_generator",
    "digit_permutation",
    "pick_and_remove",
    "split_seeds",
]

RandomSource = np.random.Generator | int | None


def as_generator(rng: RandomSource = None) -> np.random.Generator:
    if not isinstance(rng, np.random.Generator):
        rng = np.random.default_rng(rng)
    return rng


def digit_permutation(rng: np.random.Generator) -> npt.NDArray[np.int8]:
    return (rng.permutation(9) + 1).astype(np.int8)  # Shuffle 1-9


def pick_and_remove(pool: list[int], rng: np.random.Generator) -> int:
    """Remove and return a uniformly chosen element of ``pool``.

    The last element is swapped into the freed slot, so pool order is not kept.
    """
    n = int(rng.integers(len(pool)))
    item = pool[n]
    pool[n] = pool[-1]
    pool.pop()
    return item


def split_seeds(rng: np.random.Generator, count: int) -> tuple[int, ...]:
    return tuple(rng.integers(0, 2**32 - 1, size=count).tolist())
