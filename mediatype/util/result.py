"""Lightweight result type for operation outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Result:
    """Represents the outcome of a fallible operation.

    Supports boolean evaluation, tuple unpacking, and carries the produced
    object via *value* or the exception that stopped it via *error*.

    Examples::

        r = parse_media_type("text/html")
        if r:
            print(r.value.subtype)

        ok, msg = parse_media_type("nonsense")
    """

    success: bool
    message: str = ""
    value: Any = field(default=None, repr=False)
    error: Exception | None = field(default=None, repr=False)

    # -- constructors ------------------------------------------------------

    @classmethod
    def ok(cls, message: str = "", *, value: Any = None) -> Result:
        return cls(success=True, message=message, value=value)

    @classmethod
    def fail(cls, message: str = "", *, error: Exception | None = None) -> Result:
        return cls(success=False, message=message, error=error)

    # -- accessors ---------------------------------------------------------

    def unwrap(self) -> Any:
        """Return *value*, re-raising the carried error on failure."""
        if self.success:
            return self.value
        if self.error is not None:
            raise self.error
        raise ValueError(self.message or "unwrap() called on a failed Result")

    # -- protocols ---------------------------------------------------------

    def __bool__(self) -> bool:
        return self.success

    def __iter__(self):
        yield self.success
        yield self.message
