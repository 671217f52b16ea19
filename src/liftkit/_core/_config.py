from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ._format import value_repr


@dataclass(slots=True, frozen=True)
class Config:
    """Process-wide display settings for liftkit containers.

    Args:
        max_repr_length (int): Longest payload repr shown before it is cut with `...`.

    Example:
    ```python
    >>> import liftkit as lk
    >>> lk.Config(max_repr_length=10).value_repr("a long payload")
    "'a long..."

    ```
    """

    max_repr_length: int = 80

    def __post_init__(self) -> None:
        if self.max_repr_length < 1:
            msg = f"max_repr_length must be positive, got {self.max_repr_length}"
            raise ValueError(msg)

    def value_repr(self, v: Any) -> str:
        return value_repr(v, self.max_repr_length)


_CONFIG = Config()


def get_config() -> Config:
    """Return the active configuration."""
    return _CONFIG


def set_config(config: Config) -> Config:
    """Replace the active configuration and return the previous one."""
    global _CONFIG  # noqa: PLW0603
    previous = _CONFIG
    _CONFIG = config
    return previous
