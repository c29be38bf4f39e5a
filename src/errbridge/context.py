"""Attach structured context to an exception without replacing it.

``wrap`` pairs a cause with logging-style key/value details. The cause is
kept as-is so handlers can still classify it, and the details travel to the
client payload and the log line.

Usage:
    user = await get_user(db, user_id)
    if user is None:
        raise wrap(NotFoundError(), "user_id", user_id)
"""

from collections.abc import Callable, Iterator, Mapping, Sequence
from types import MappingProxyType
from typing import Any


class ContextError(Exception):
    """Immutable pairing of a cause exception and a details map.

    ``__cause__`` points at the wrapped exception, so tracebacks render the
    full chain.
    """

    def __init__(self, cause: BaseException, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(cause)
        self._cause = cause
        self._details: Mapping[str, Any] = MappingProxyType(dict(details or {}))
        self.__cause__ = cause

    @property
    def cause(self) -> BaseException:
        return self._cause

    @property
    def details(self) -> Mapping[str, Any]:
        """Read-only details; empty when nothing was attached."""
        return self._details

    def unwrap(self) -> BaseException:
        return self._cause

    def __str__(self) -> str:
        if not self._details:
            return str(self._cause)
        pairs = " ".join(f"{key}={value}" for key, value in self._details.items())
        return f"{self._cause}: {pairs}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._cause!r}, {dict(self._details)!r})"


def parse_key_values(key_values: Sequence[Any]) -> dict[str, Any]:
    """Convert logging-style alternating key/value arguments into a dict.

    A trailing unpaired element is dropped, as is any pair whose key is not
    a string.
    """
    data: dict[str, Any] = {}
    for i in range(0, len(key_values) - 1, 2):
        key = key_values[i]
        if isinstance(key, str):
            data[key] = key_values[i + 1]
    return data


def wrap(cause: BaseException | None, *key_values: Any) -> ContextError | None:
    """Wrap ``cause`` with context details. Wrapping ``None`` returns ``None``."""
    if cause is None:
        return None
    return ContextError(cause, parse_key_values(key_values))


def unwrap(err: BaseException) -> BaseException | None:
    """Return the next exception in the chain, or None at the end.

    Follows ContextError causes and explicit ``raise ... from ...`` chaining.
    Implicit ``__context__`` is not followed.
    """
    if isinstance(err, ContextError):
        return err.cause
    return err.__cause__


def iter_chain(err: BaseException | None) -> Iterator[BaseException]:
    """Yield ``err`` and every exception reachable through ``unwrap``."""
    seen: set[int] = set()
    current = err
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = unwrap(current)


def chain_contains(
    err: BaseException | None, predicate: Callable[[BaseException], bool]
) -> bool:
    """Return True if any exception in the chain satisfies ``predicate``."""
    return any(predicate(node) for node in iter_chain(err))


def first_in_chain[E: BaseException](
    err: BaseException | None, exc_type: type[E] | tuple[type[E], ...]
) -> E | None:
    """Return the first exception in the chain that is an ``exc_type``."""
    for node in iter_chain(err):
        if isinstance(node, exc_type):
            return node
    return None


def root_cause(err: BaseException) -> BaseException:
    """Strip every ContextError layer and return the innermost cause."""
    while isinstance(err, ContextError):
        err = err.cause
    return err
