import functools
import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Generic, Protocol, TypeVar

logger = logging.getLogger(__name__)

L = TypeVar("L")
R = TypeVar("R")
T = TypeVar("T")
U = TypeVar("U")
S = TypeVar("S", bound="Semigroup")


class Semigroup(Protocol):
    """A payload type with an associative `+`, required by `Either.concat`"""

    def __add__(self: S, other: S) -> S:
        ...


class Tag(Enum):
    LEFT = "Left"
    RIGHT = "Right"


@dataclass(frozen=True, eq=False, repr=False)
class Either(Generic[L, R], Iterable[R]):
    """
    Represents a value of one of two possible types (a disjoint union).

    Either holds a `Left` or a `Right` value at any given time. The operations
    are biased on the `Right` value: `map`, `chain`, `ap` and `concat` act on it
    and pass a `Left` through untouched, so a common use is to hold the result
    of a computation that may fail, keeping information about the failure
    instead of raising:

        parse = Either.try_(int)
        parse("42").map(lambda n: n * 2)     # Right(84)
        parse("foo").map(lambda n: n * 2)    # Left(ValueError(...))

    `Left` and `Right` only fix the tag, every operation lives here.
    """

    _value: L | R
    _tag: ClassVar[Tag]

    def __post_init__(self) -> None:
        if not hasattr(type(self), "_tag"):
            raise TypeError("Either can't be instantiated directly, use Left or Right")

    def _copy(self) -> "Either[L, R]":
        return type(self)(self._value)

    # -- Construction

    @staticmethod
    def of(value: T) -> "Either[Any, T]":
        """Unit, same as `Right(value)`"""
        return Right(value)

    @staticmethod
    def from_nullable(value: T | None) -> "Either[None, T]":
        """
        `Left(None)` if the value is None, `Right(value)` otherwise. Falsy values
        like 0, "" or False are present values.
        """
        return Left(value) if value is None else Right(value)

    @staticmethod
    def try_(f: Callable[..., T]) -> Callable[..., "Either[Exception, T]"]:
        """
        Wraps a function that may raise. Each call of the wrapper calls `f` once
        with the same arguments and returns `Right(result)`, or `Left(exception)`
        if `f` raised.
        """

        @functools.wraps(f)
        def wrapper(*args: Any, **kwargs: Any) -> "Either[Exception, T]":
            try:
                return Right(f(*args, **kwargs))
            except Exception as e:
                logger.debug(
                    "%s raised %r, captured as Left", getattr(f, "__qualname__", f), e
                )
                return Left(e)

        return wrapper

    # -- Inspection

    @property
    def tag(self) -> Tag:
        return self._tag

    @property
    def is_left(self) -> bool:
        return self._tag is Tag.LEFT

    @property
    def is_right(self) -> bool:
        return self._tag is Tag.RIGHT

    @property
    def value(self) -> L | R:
        return self._value

    def __len__(self) -> int:
        return 1 if self.is_right else 0

    def __bool__(self) -> bool:
        return self.is_right

    def __iter__(self) -> Iterator[R]:
        if self.is_left:
            return iter([])
        return iter([self._value])  # type: ignore[list-item]

    # -- Functor, Applicative, Chain

    def map(self, f: Callable[[R], T]) -> "Either[L, T]":
        if self.is_left:
            return self._copy()  # type: ignore[return-value]
        return Right(f(self._value))  # type: ignore[arg-type]

    def ap(self, other: "Either[L, Any]") -> "Either[L, Any]":
        """
        Applies the function held by this `Right` to the `Right` value of `other`.
        Raises TypeError if this is a `Right` holding something not callable.
        """
        if self.is_left:
            return self._copy()
        if not callable(self._value):
            raise TypeError(f"Can't apply a non-callable Right value: {self._value!r}")
        if other.is_left:
            return other._copy()
        return Right(self._value(other._value))

    def chain(self, f: Callable[[R], "Either[L, T]"]) -> "Either[L, T]":
        if self.is_left:
            return self._copy()  # type: ignore[return-value]
        return _expect_either(f(self._value), "chain")  # type: ignore[arg-type]

    def concat(self, other: "Either[L, S]") -> "Either[L, S]":
        """
        Combines two `Right` values with `+`. A `Left` on either side is kept,
        the receiver's `Left` first. Two `Left` values are never combined.
        """
        if self.is_left:
            return self._copy()  # type: ignore[return-value]
        if other.is_left:
            return other._copy()
        return Right(self._value + other._value)  # type: ignore[operator]

    # -- Extraction

    def get(self) -> R:
        if self.is_left:
            raise TypeError("Can't extract the value of a Left(a).")
        return self._value  # type: ignore[return-value]

    def get_or_else(self, default: T) -> R | T:
        return self._value if self.is_right else default  # type: ignore[return-value]

    def merge(self) -> L | R:
        return self._value

    def or_else(self, f: Callable[[L], "Either[T, R]"]) -> "Either[T, R]":
        if self.is_right:
            return self._copy()  # type: ignore[return-value]
        return _expect_either(f(self._value), "or_else")  # type: ignore[arg-type]

    def fold(self, on_left: Callable[[L], T], on_right: Callable[[R], T]) -> T:
        if self.is_left:
            return on_left(self._value)  # type: ignore[arg-type]
        return on_right(self._value)  # type: ignore[arg-type]

    def cata(self, pattern: Any) -> Any:
        """
        Catamorphism over a pattern with `Left` and `Right` handlers, given as a
        mapping (`{"Left": f, "Right": g}`) or as attributes of an object.
        """
        name = self._tag.value
        if isinstance(pattern, Mapping):
            return pattern[name](self._value)
        return getattr(pattern, name)(self._value)

    # -- Structural transforms

    def swap(self) -> "Either[R, L]":
        return Right(self._value) if self.is_left else Left(self._value)

    def bimap(
        self, f_left: Callable[[L], T], f_right: Callable[[R], U]
    ) -> "Either[T, U]":
        if self.is_left:
            return Left(f_left(self._value))  # type: ignore[arg-type]
        return Right(f_right(self._value))  # type: ignore[arg-type]

    def left_map(self, f: Callable[[L], T]) -> "Either[T, R]":
        if self.is_right:
            return self._copy()  # type: ignore[return-value]
        return Left(f(self._value))  # type: ignore[arg-type]

    # -- Equality and display

    def is_equal(self, other: Any) -> bool:
        return (
            isinstance(other, Either)
            and self._tag is other._tag
            and self._value == other._value
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Either):
            return NotImplemented
        return self.is_equal(other)

    def __hash__(self) -> int:
        return hash((self._tag, self._value))

    def to_string(self) -> str:
        return f"Either.{self._tag.value}({self._value})"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{self._tag.value}({self._value!r})"


class Right(Either[Any, R]):
    _tag = Tag.RIGHT


class Left(Either[L, Any]):
    _tag = Tag.LEFT


def _expect_either(result: Any, op: str) -> Either[Any, Any]:
    if not isinstance(result, Either):
        raise TypeError(
            f"Function passed to {op} must return an Either, "
            f"got {type(result).__name__}"
        )
    return result


def lift_a2(
    f: Callable[[T, U], R], a: Either[L, T], b: Either[L, U]
) -> Either[L, R]:
    """
    Lifts a binary function over two Eithers. `Right(f(x, y))` if both are
    `Right`, otherwise the first `Left`.
    """
    return a.map(lambda x: lambda y: f(x, y)).ap(b)
