"""Lightweight result type for routing operation outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Result:
    """Represents the outcome of a send or reply.

    Truthy only when the operation went through. A *skipped* result means
    nothing was attempted (no activity, no text), which callers can tell
    apart from a failure.

    Examples::

        r = await reply_to(activity, "hi")
        if r:
            print(r.value.id)
        elif r.skipped:
            print("nothing to send:", r.message)

        ok, msg = Result.skip("empty message")
    """

    success: bool
    message: str = ""
    value: Any = field(default=None, repr=False)
    skipped: bool = False

    # -- constructors ------------------------------------------------------

    @classmethod
    def ok(cls, message: str = "", *, value: Any = None) -> Result:
        return cls(success=True, message=message, value=value)

    @classmethod
    def fail(cls, message: str = "") -> Result:
        return cls(success=False, message=message)

    @classmethod
    def skip(cls, message: str = "") -> Result:
        return cls(success=False, message=message, skipped=True)

    # -- protocols ---------------------------------------------------------

    def __bool__(self) -> bool:
        return self.success

    def __iter__(self):
        yield self.success
        yield self.message
