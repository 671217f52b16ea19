from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Never, TypeIs, cast

import cytoolz as cz

from .._core import Pipeable, get_config

logger = logging.getLogger(__name__)


class ResultUnwrapError(RuntimeError):
    """Raised when a `Result` is unwrapped on the wrong variant."""


class Result[T, E](Pipeable, ABC):
    __slots__ = ()

    @abstractmethod
    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        """Returns True if the result is Ok."""
        ...

    @abstractmethod
    def is_failed(self) -> TypeIs[Failed[T, E]]:  # type: ignore[misc]
        """Returns True if the result is Failed."""
        ...

    @abstractmethod
    def extract(self) -> tuple[T | None, E | None]:
        """
        Returns the contained value together with the failure cause.

        Never raises. The error of a `Failed` result is the original object, never a copy.

        Returns:
            `(value, None)` for `Ok`, `(None, error)` for `Failed`.

        Example:
        ```python
        >>> from liftkit import Ok, Failed
        >>> Ok(4).extract()
        (4, None)
        >>> Failed("forbidden").extract()
        (None, 'forbidden')

        ```
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Returns the contained Ok value, or raises ResultUnwrapError if the result is Failed."""
        ...

    @abstractmethod
    def unwrap_failed(self) -> E:
        """Returns the contained error, or raises ResultUnwrapError if the result is Ok."""
        ...

    def map_or_else[U](self, ok: Callable[[T], U], failed: Callable[[E], U]) -> U:
        """
        Pattern matches on the result, calling ok if Ok, or failed if Failed.

        Args:
            ok: Callable to handle the Ok value.
            failed: Callable to handle the error.

        Returns:
            The result of the called function.

        Example:
        ```python
        >>> from liftkit import Ok, Failed
        >>> Ok(3).map_or_else(lambda v: v * 2, len)
        6
        >>> Failed("oops").map_or_else(lambda v: v * 2, len)
        4

        ```
        """
        match self:
            case Ok(value):
                return ok(value)
            case Failed(error):
                return failed(error)
            case _:
                raise RuntimeError("unreachable")

    def expect(self, msg: str) -> T:
        """
        Returns the contained Ok value, or raises ResultUnwrapError with a custom message if the result is Failed.

        Args:
            msg: The message to display if the result is Failed.

        Returns:
            The contained Ok value.

        Raises:
            ResultUnwrapError: If the result is Failed, with the provided message and error.
        """
        if self.is_ok():
            return self.unwrap()
        raise ResultUnwrapError(f"{msg}: {self.unwrap_failed()}")

    def unwrap_or(self, default: T) -> T:
        """Returns the contained Ok value or a provided default."""
        return self.unwrap() if self.is_ok() else default

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """
        Returns the contained Ok value or computes it from the error.

        Args:
            f: Callable that takes the error and returns a T.

        Returns:
            The contained Ok value or the result of f(error).
        """
        return self.unwrap() if self.is_ok() else f(self.unwrap_failed())

    def map[U](self, f: Callable[[T], U]) -> Result[U, E]:
        """
        Maps a Result[T, E] to Result[U, E] by applying a function to a contained Ok value, leaving Failed untouched.

        Args:
            f: Callable to apply to the Ok value.

        Returns:
            Result[U, E]: Ok(f(value)) if Ok, otherwise the same Failed result.

        Example:
        ```python
        >>> from liftkit import Ok, Failed
        >>> Ok(2).map(str)
        Ok('2')
        >>> Failed("no").map(str)
        Failed('no')

        ```
        """
        if self.is_ok():
            return Ok(f(self.unwrap()))
        return cast(Result[U, E], self)

    def map_failed[F](self, f: Callable[[E], F]) -> Result[T, F]:
        """
        Maps a Result[T, E] to Result[T, F] by applying a function to a contained error, leaving Ok untouched.

        `f` must not return `None`: the new error becomes the cause of a `Failed`, which rejects `None`.

        Args:
            f: Callable to apply to the error.

        Returns:
            Result[T, F]: Failed(f(error)) if Failed, otherwise the same Ok result.

        Raises:
            TypeError: If `f` returns `None`.
        """
        if self.is_failed():
            return Failed(f(self.unwrap_failed()))
        return cast(Result[T, F], self)

    def and_then[U](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """
        Calls f if the result is Ok, otherwise returns the Failed result unchanged.

        Args:
            f: Callable that takes the Ok value and returns a Result.

        Returns:
            Result[U, E]: The result of f(value) if Ok, otherwise the original Failed.
        """
        if self.is_ok():
            return f(self.unwrap())
        return cast(Result[U, E], self)

    def or_else(self, f: Callable[[E], Result[T, E]]) -> Result[T, E]:
        """Calls f with the error if the result is Failed, otherwise returns self."""
        return self if self.is_ok() else f(self.unwrap_failed())


@dataclass(slots=True, frozen=True, repr=False)
class Ok[T, E](Result[T, E]):
    """Represents a successful value."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({get_config().value_repr(self.value)})"

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return True

    def is_failed(self) -> TypeIs[Failed[T, E]]:  # type: ignore[misc]
        return False

    def extract(self) -> tuple[T, None]:
        return self.value, None

    def unwrap(self) -> T:
        return self.value

    def unwrap_failed(self) -> Never:
        raise ResultUnwrapError("called `unwrap_failed` on Ok")


@dataclass(slots=True, frozen=True, repr=False)
class Failed[T, E](Result[T, E]):
    """Represents a failure, carrying its cause."""

    error: E

    def __post_init__(self) -> None:
        if self.error is None:
            msg = "Failed error must not be None"
            raise TypeError(msg)

    def __repr__(self) -> str:
        return f"Failed({get_config().value_repr(self.error)})"

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return False

    def is_failed(self) -> TypeIs[Failed[T, E]]:  # type: ignore[misc]
        return True

    def extract(self) -> tuple[None, E]:
        return None, self.error

    def unwrap(self) -> Never:
        raise ResultUnwrapError(f"called `unwrap` on Failed: {self.error!r}")

    def unwrap_failed(self) -> E:
        return self.error


def map_result[T, R, E](f: Callable[[T], R]) -> Callable[[Result[T, E]], Result[R, E]]:
    """Lift a unary function to the `Result` applicative functor.

    The lifted function returns a `Failed` argument unchanged, and `Ok(f(x))` for `Ok(x)`.

    Example:
    ```python
    >>> from liftkit import Ok, Failed, map_result
    >>> inc = map_result(lambda x: x + 1)
    >>> inc(Ok(1))
    Ok(2)
    >>> inc(Failed("boom"))
    Failed('boom')

    ```
    """

    def _lifted(res: Result[T, E]) -> Result[R, E]:
        return res.map(f)

    return _lifted


def map2_result[A, B, C, E](
    f: Callable[[A, B], C],
) -> Callable[[Result[A, E], Result[B, E]], Result[C, E]]:
    """Lift a binary function to the `Result` applicative functor.

    The left operand is checked first: when both arguments failed, the left error is returned.

    Args:
        f (Callable[[A, B], C]): The function to lift.

    Returns:
        Callable[[Result[A, E], Result[B, E]], Result[C, E]]: The lifted function.

    Example:
    ```python
    >>> from liftkit import Ok, Failed, map2_result
    >>> add = map2_result(lambda a, b: a + b)
    >>> add(Ok(1), Ok(2))
    Ok(3)
    >>> add(Failed("left"), Failed("right"))
    Failed('left')

    ```
    """

    def _lifted(left: Result[A, E], right: Result[B, E]) -> Result[C, E]:
        match left, right:
            case Failed(), _:
                return cast(Result[C, E], left)
            case _, Failed():
                return cast(Result[C, E], right)
            case Ok(a), Ok(b):
                return Ok(f(a, b))
            case _:
                raise RuntimeError("unreachable")

    return _lifted


def bind_result[T, R, E](
    f: Callable[[T], Result[R, E]],
) -> Callable[[Result[T, E]], Result[R, E]]:
    """Lift a function returning a `Result` and join the result.

    A `Failed` argument propagates unchanged, `Ok(x)` yields `f(x)` directly.
    """

    def _bound(res: Result[T, E]) -> Result[R, E]:
        return res.and_then(f)

    return _bound


def from_legacy_result[T, E](value: T, err: E | None) -> Result[T, E]:
    """Wrap a conventional value-and-error pair in a `Result`.

    The error object is kept as the cause of the `Failed` result.

    Args:
        value (T): The value to wrap when there is no error.
        err (E | None): The failure signal, `None` on success.

    Returns:
        Result[T, E]: `Ok(value)` if `err` is `None`, otherwise `Failed(err)`.

    Example:
    ```python
    >>> from liftkit import from_legacy_result
    >>> from_legacy_result(3, None)
    Ok(3)
    >>> from_legacy_result(3, "boom")
    Failed('boom')

    ```
    """
    if err is not None:
        logger.debug("Wrapping legacy error %r in Failed", err)
        return Failed(err)
    return Ok(value)


def compose_kleisli[A, B, C, E](
    f: Callable[[A], Result[B, E]],
    g: Callable[[B], Result[C, E]],
) -> Callable[[A], Result[C, E]]:
    """Compose two fallible functions left to right.

    The composed function applies `f`, and feeds its Ok value to `g`.
    A failure of `f` is returned as-is and `g` is not called.

    Args:
        f (Callable[[A], Result[B, E]]): The first stage.
        g (Callable[[B], Result[C, E]]): The second stage.

    Returns:
        Callable[[A], Result[C, E]]: `a -> bind_result(g)(f(a))`.

    Example:
    ```python
    >>> from liftkit import Ok, Failed, compose_kleisli
    >>> def parse(s: str):
    ...     return Ok(int(s)) if s.isdigit() else Failed(f"not a number: {s!r}")
    >>> def invert(n: int):
    ...     return Ok(1 / n) if n else Failed("divide by zero")
    >>> parse_and_invert = compose_kleisli(parse, invert)
    >>> parse_and_invert("4")
    Ok(0.25)
    >>> parse_and_invert("0")
    Failed('divide by zero')
    >>> parse_and_invert("x")
    Failed("not a number: 'x'")

    ```
    """
    return cz.compose_left(f, bind_result(g))
