from collections.abc import Callable, Iterable, Iterator
from itertools import chain
from typing import Any, TypeVar

from data_either.either import Either, Right

L = TypeVar("L")
R = TypeVar("R")
T = TypeVar("T")


def is_required(o: T | None, name: str | None = None) -> T:
    """
    Similar to Guava's Preconditions.checkNotNull. Check if argument was supplied.
    As a side effect makes mypy happy via return type.
    """
    if o is None:
        msg_prefix = f"{name}" if name else "Argument"
        raise ValueError(f"{msg_prefix} is required, None supplied")
    return o


def rights(items: Iterable[Either[Any, R]]) -> Iterator[R]:
    """
    Lazily yields the payloads of the `Right` items, `Left` items are skipped.

    Example: [Right(1), Left("x"), Right(2)] -> 1, 2
    """
    return chain.from_iterable(is_required(items, "items"))


def lefts(items: Iterable[Either[L, Any]]) -> Iterator[L]:
    """
    Lazily yields the payloads of the `Left` items, `Right` items are skipped.

    Example: [Right(1), Left("x"), Right(2)] -> "x"
    """
    return chain.from_iterable(e.swap() for e in is_required(items, "items"))


def partition(items: Iterable[Either[L, R]]) -> tuple[list[L], list[R]]:
    """Splits the items into the `Left` payloads and the `Right` payloads, in order"""
    ls: list[L] = []
    rs: list[R] = []
    for e in is_required(items, "items"):
        e.fold(ls.append, rs.append)
    return ls, rs


def sequence(items: Iterable[Either[L, R]]) -> Either[L, list[R]]:
    """
    `Right` of all the payloads if every item is a `Right`, otherwise the first
    `Left`. Items after the first `Left` are not consumed, so this also works
    as an early exit over lazy generators.

    For example:
    ```
    sequence([Right(1), Right(2)]) -> Right([1, 2])
    sequence([Right(1), Left("bad"), Left("worse")]) -> Left("bad")
    ```
    """
    values: list[R] = []
    for e in is_required(items, "items"):
        if e.is_left:
            return e  # type: ignore[return-value]
        values.append(e.get())
    return Right(values)


def traverse(
    items: Iterable[T], f: Callable[[T], Either[L, R]]
) -> Either[L, list[R]]:
    """
    Applies `f` to each item and sequences the results. `f` is not called for
    items past the first `Left` it returns.
    """
    return sequence(f(i) for i in is_required(items, "items"))
