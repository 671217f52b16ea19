from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Never, TypeIs

from .._core import Pipeable, get_config

logger = logging.getLogger(__name__)


class OptionUnwrapError(RuntimeError):
    """Raised when a value is requested from an `Absent` option."""


class Option[T](Pipeable, ABC):
    __slots__ = ()

    @abstractmethod
    def is_present(self) -> TypeIs[Present[T]]:  # type: ignore[misc]
        """
        Returns `True` if the option is a `Present` value.

        Returns:
            `True` if the option is a `Present` variant, `False` otherwise.

        Example:
        ```python
        >>> from liftkit import Present, Absent, Option
        >>> x: Option[int] = Present(2)
        >>> x.is_present()
        True
        >>> y: Option[int] = Absent()
        >>> y.is_present()
        False

        ```
        """
        ...

    @abstractmethod
    def is_absent(self) -> TypeIs[Absent]:  # type: ignore[misc]
        """
        Returns `True` if the option is an `Absent` value.

        Returns:
            `True` if the option is the `Absent` variant, `False` otherwise.

        Example:
        ```python
        >>> from liftkit import Present, Absent
        >>> Present(2).is_absent()
        False
        >>> Absent().is_absent()
        True

        ```
        """
        ...

    @abstractmethod
    def extract(self) -> tuple[T | None, bool]:
        """
        Returns the contained value together with a success flag.

        Never raises: absence is reported through the flag, with `None` in place of the value.

        Returns:
            `(value, True)` for `Present`, `(None, False)` for `Absent`.

        Example:
        ```python
        >>> from liftkit import Present, Absent
        >>> Present("car").extract()
        ('car', True)
        >>> Absent().extract()
        (None, False)

        ```
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """
        Returns the contained `Present` value.

        Returns:
            The contained `Present` value.

        Raises:
            OptionUnwrapError: If the option is `Absent`.

        Example:
        ```python
        >>> from liftkit import Present, Absent
        >>> Present("car").unwrap()
        'car'
        >>> Absent().unwrap()
        Traceback (most recent call last):
            ...
        liftkit._results._option.OptionUnwrapError: called `unwrap` on an `Absent`

        ```
        """
        ...

    def expect(self, msg: str) -> T:
        """
        Returns the contained `Present` value.
        Raises an exception with a provided message if the value is `Absent`.

        Args:
            msg: The message to include in the exception if the option is `Absent`.

        Returns:
            The contained `Present` value.

        Raises:
            OptionUnwrapError: If the option is `Absent`.

        Example:
        ```python
        >>> from liftkit import Present, Absent
        >>> Present("value").expect("fruits are healthy")
        'value'
        >>> Absent().expect("fruits are healthy")
        Traceback (most recent call last):
            ...
        liftkit._results._option.OptionUnwrapError: fruits are healthy (called `expect` on an `Absent`)

        ```
        """
        if self.is_present():
            return self.unwrap()
        msg = f"{msg} (called `expect` on an `Absent`)"
        raise OptionUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """
        Returns the contained `Present` value or a provided default.

        Example:
        ```python
        >>> from liftkit import Present, Absent
        >>> Present("car").unwrap_or("bike")
        'car'
        >>> Absent().unwrap_or("bike")
        'bike'

        ```
        """
        return self.unwrap() if self.is_present() else default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """Returns the contained `Present` value or computes it from `f`."""
        return self.unwrap() if self.is_present() else f()

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """
        Maps an `Option[T]` to `Option[U]` by applying a function to a contained `Present` value,
        leaving an `Absent` value untouched.

        Args:
            f: The function to apply to the `Present` value.

        Returns:
            A new `Option` with the mapped value if `Present`, otherwise `Absent`.

        Example:
        ```python
        >>> from liftkit import Present, Absent
        >>> Present("Hello, World!").map(len)
        Present(13)
        >>> Absent().map(len)
        Absent()

        ```
        """
        if self.is_present():
            return Present(f(self.unwrap()))
        return ABSENT

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """
        Calls a function if the option is `Present`, otherwise returns `Absent`.
        Some languages call this operation flatmap.

        The result of `f` is returned as-is, it is never wrapped again.

        Args:
            f: The function to call with the `Present` value.

        Returns:
            The result of the function if `Present`, otherwise `Absent`.

        Example:
        ```python
        >>> from liftkit import Present, Absent, Option
        >>> def sq(x: int) -> Option[int]:
        ...     return Present(x * x)
        >>> def nope(x: int) -> Option[int]:
        ...     return Absent()
        >>> Present(2).and_then(sq).and_then(sq)
        Present(16)
        >>> Present(2).and_then(nope).and_then(sq)
        Absent()

        ```
        """
        if self.is_present():
            return f(self.unwrap())
        return ABSENT

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        """Returns the option if it contains a value, otherwise calls `f` and returns its result."""
        return self if self.is_present() else f()


@dataclass(slots=True, frozen=True, repr=False)
class Present[T](Option[T]):
    """Option variant representing the presence of a value.

    Args:
        value (T): The contained value.
    """

    value: T

    def __repr__(self) -> str:
        return f"Present({get_config().value_repr(self.value)})"

    def is_present(self) -> TypeIs[Present[T]]:  # type: ignore[misc]
        return True

    def is_absent(self) -> TypeIs[Absent]:  # type: ignore[misc]
        return False

    def extract(self) -> tuple[T, bool]:
        return self.value, True

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True, frozen=True, repr=False)
class Absent(Option[Any]):
    """Option variant representing the absence of a value."""

    def __repr__(self) -> str:
        return "Absent()"

    def is_present(self) -> TypeIs[Present[Any]]:  # type: ignore[misc]
        return False

    def is_absent(self) -> TypeIs[Absent]:  # type: ignore[misc]
        return True

    def extract(self) -> tuple[None, bool]:
        return None, False

    def unwrap(self) -> Never:
        raise OptionUnwrapError("called `unwrap` on an `Absent`")


ABSENT: Option[Any] = Absent()
"""Shared instance representing the absence of a value."""


def map_option[T, R](f: Callable[[T], R]) -> Callable[[Option[T]], Option[R]]:
    """Lift a unary function to the `Option` category.

    The lifted function returns `Absent` for an `Absent` argument,
    and `Present(f(x))` for `Present(x)`.

    Args:
        f (Callable[[T], R]): The function to lift.

    Returns:
        Callable[[Option[T]], Option[R]]: The lifted function.

    Example:
    ```python
    >>> from liftkit import Present, Absent, map_option
    >>> double = map_option(lambda x: x * 2)
    >>> double(Present(21))
    Present(42)
    >>> double(Absent())
    Absent()

    ```
    """

    def _lifted(opt: Option[T]) -> Option[R]:
        return opt.map(f)

    return _lifted


def map2_option[A, B, C](
    f: Callable[[A, B], C],
) -> Callable[[Option[A], Option[B]], Option[C]]:
    """Lift a binary function to the `Option` category.

    The lifted function returns `Absent` if either argument is `Absent`, checking the left one first,
    and `Present(f(a, b))` when both are present.

    Example:
    ```python
    >>> from liftkit import Present, Absent, map2_option
    >>> add = map2_option(lambda a, b: a + b)
    >>> add(Present(1), Present(2))
    Present(3)
    >>> add(Present(1), Absent())
    Absent()

    ```
    """

    def _lifted(left: Option[A], right: Option[B]) -> Option[C]:
        match left, right:
            case Present(a), Present(b):
                return Present(f(a, b))
            case _:
                return ABSENT

    return _lifted


def bind_option[T, R](f: Callable[[T], Option[R]]) -> Callable[[Option[T]], Option[R]]:
    """Lift a function returning an `Option` and join the result.

    `Absent` propagates, and `Present(x)` yields `f(x)` directly.

    Example:
    ```python
    >>> from liftkit import Present, Absent, bind_option
    >>> def half(x: int):
    ...     return Present(x // 2) if x % 2 == 0 else Absent()
    >>> bind_option(half)(Present(4))
    Present(2)
    >>> bind_option(half)(Present(3))
    Absent()

    ```
    """

    def _bound(opt: Option[T]) -> Option[R]:
        return opt.and_then(f)

    return _bound


def from_legacy_option[T](value: T, err: object | None) -> Option[T]:
    """Wrap a conventional value-and-error pair in an `Option`.

    Any error information is discarded: a non-`None` `err` gives `Absent`.

    Args:
        value (T): The value to wrap when there is no error.
        err (object | None): The failure signal, `None` on success.

    Returns:
        Option[T]: `Present(value)` if `err` is `None`, otherwise `Absent`.

    Example:
    ```python
    >>> from liftkit import from_legacy_option
    >>> from_legacy_option(3, None)
    Present(3)
    >>> from_legacy_option(3, ValueError("boom"))
    Absent()

    ```
    """
    if err is not None:
        logger.debug("Discarding legacy error %r while wrapping in Option", err)
        return ABSENT
    return Present(value)
