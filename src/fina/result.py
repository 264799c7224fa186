"""
Tagged success/failure values for callers that prefer not to use ``try``.

>>> from fina import attempt, mean
>>> attempt(mean, []).kind
<ErrorKind.EMPTY_INPUT: 'EmptyInput'>
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from .errors import ErrorKind, KernelError

__all__ = ["Outcome", "attempt"]


@dataclass(frozen=True)
class Outcome:
    """Either a kernel's return value or the :class:`KernelError` it raised."""

    value: Any = None
    error: Optional[KernelError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        return None if self.error is None else self.error.kind

    def unwrap(self) -> Any:
        if self.error is not None:
            raise self.error
        return self.value


def attempt(func: Callable[..., Any], *args: Any, **kwargs: Any) -> Outcome:
    """Call ``func`` and capture a :class:`KernelError` instead of raising it."""
    try:
        return Outcome(value=func(*args, **kwargs))
    except KernelError as exc:
        return Outcome(error=exc)
