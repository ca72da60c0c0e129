from onebased._version import version as __version__
from onebased.config import config
from onebased.core import OneBasedArray, OneBasedArray2D
from onebased.creation import array, empty, from_1d, full, ones, zeros
from onebased.errors import ArrayShapeError, BoundsCheckError, EmptyArrayError

__all__ = [
    "ArrayShapeError",
    "BoundsCheckError",
    "EmptyArrayError",
    "OneBasedArray",
    "OneBasedArray2D",
    "__version__",
    "array",
    "config",
    "empty",
    "from_1d",
    "full",
    "ones",
    "zeros",
]
