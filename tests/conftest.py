from collections.abc import Iterator

import numpy as np
import numpy.typing as npt
import pytest

from onebased.config import config


@pytest.fixture(autouse=True)
def reset_config() -> Iterator[None]:
    config.reset()
    yield
    config.reset()


@pytest.fixture
def grid() -> npt.NDArray[np.int64]:
    """A 4x4 array where item (i, j) is ``(i + 1) + 10 * j``."""
    return np.array(
        [[1, 11, 21, 31], [2, 12, 22, 32], [3, 13, 23, 33], [4, 14, 24, 34]], dtype="i8"
    )
