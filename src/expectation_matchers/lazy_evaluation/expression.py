"""Deferred access to the actual value under test."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")

_UNSET = object()


class Expression(Generic[T]):
    """Zero-argument thunk whose evaluation is deferred until ``evaluate`` is called.

    Nothing is forced at construction time. Without ``memoize`` every call to
    ``evaluate`` runs the closure again, so side effects happen once per call.
    With ``memoize`` the first result is kept and reused.
    """

    def __init__(
        self,
        closure: Callable[[], T],
        *,
        location: str | None = None,
        memoize: bool = False,
    ) -> None:
        if not callable(closure):
            raise TypeError("Expression closure must be callable.")
        self._closure = closure
        self._memoize = memoize
        self._cached: object = _UNSET
        self.location = location

    @classmethod
    def of(cls, value: T, *, location: str | None = None) -> Expression[T]:
        """Wrap an already computed value."""
        return cls(lambda: value, location=location)

    @property
    def memoized(self) -> bool:
        return self._memoize

    def evaluate(self) -> T:
        """Force the closure and return its value."""
        if not self._memoize:
            return self._closure()
        if self._cached is _UNSET:
            self._cached = self._closure()
        return self._cached  # type: ignore[return-value]

    def cast(self, transform: Callable[[T], U]) -> Expression[U]:
        """Return a lazy expression applying ``transform`` to this one's value."""
        return Expression(
            lambda: transform(self.evaluate()),
            location=self.location,
            memoize=self._memoize,
        )

    def __repr__(self) -> str:
        return f"Expression(location={self.location!r}, memoize={self._memoize})"
