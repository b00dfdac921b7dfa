from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Notification:
    """Immutable named message dispatched through a core's View.

    Notifications carry no identity beyond their content; several may share
    the same name.
    """

    name: str
    """Notification name observers and commands are registered against."""
    body: Any = None
    """Opaque payload."""
    type: Optional[str] = None
    """Optional tag that lets receivers tell variants of one name apart."""

    def __str__(self) -> str:
        body = "null" if self.body is None else repr(self.body)
        kind = "null" if self.type is None else self.type
        return f"Notification Name: {self.name}\nBody: {body}\nType: {kind}"


__all__ = ["Notification"]
