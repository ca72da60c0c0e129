"""
The config module is responsible for managing the configuration of onebased and is based on the
Donfig python library.

Example:
    Values produced by user functions (``map``, ``zip_array`` and the folds) are stored in
    arrays of dtype ``array.result_dtype``. To store them as 64-bit integers instead of Python
    objects:

    ```python
    from onebased.config import config

    config.set({"array.result_dtype": "int64"})
    ```

    The same value can be set with the environment variable ``ONEBASED_ARRAY__RESULT_DTYPE``.
    The double underscore ``__`` is used to indicate nested access.

For more information, see the Donfig documentation at https://github.com/pytroll/donfig.
"""

from __future__ import annotations

from typing import Any, Literal, cast

from donfig import Config as DConfig

Orientation = Literal["row", "column"]


class BadConfigError(ValueError):
    _msg = "bad Config: %r"


class Config(DConfig):  # type: ignore[misc]
    """The Config will collect configuration from config files and environment variables

    Example environment variables:
    Grabs environment variables of the form "ONEBASED_FOO__BAR_BAZ=123" and
    turns these into config variables of the form ``{"foo": {"bar-baz": 123}}``
    It transforms the key and value in the following way:

    -  Lower-cases the key text
    -  Treats ``__`` (double-underscore) as nested access
    -  Calls ``ast.literal_eval`` on the value

    """

    def reset(self) -> None:
        self.clear()
        self.refresh()


# The default configuration for onebased
config = Config(
    "onebased",
    defaults=[
        {
            "array": {
                "dtype": "float64",
                "result_dtype": "object",
            },
        }
    ],
)


def parse_orientation(data: Any) -> Orientation:
    if data in ("row", "column"):
        return cast("Orientation", data)
    msg = f"Expected one of ('row', 'column'), got {data!r} instead."
    raise ValueError(msg)
