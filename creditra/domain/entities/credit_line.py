"""Credit line entity and its lifecycle state machine."""

import copy
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional


class CreditLineStatus(str, Enum):
    """Status of a credit line. CLOSED is terminal."""

    ACTIVE = "active"
    SUSPENDED = "suspended"
    CLOSED = "closed"


class CreditLineAction(str, Enum):
    """Action recorded in a credit line's event trail."""

    CREATED = "created"
    SUSPENDED = "suspended"
    CLOSED = "closed"


# Requested verb -> (allowed source statuses, target status)
TRANSITIONS: dict[str, tuple[frozenset[CreditLineStatus], CreditLineStatus]] = {
    "suspend": (
        frozenset({CreditLineStatus.ACTIVE}),
        CreditLineStatus.SUSPENDED,
    ),
    "close": (
        frozenset({CreditLineStatus.ACTIVE, CreditLineStatus.SUSPENDED}),
        CreditLineStatus.CLOSED,
    ),
}

_ACTION_FOR_STATUS = {
    CreditLineStatus.SUSPENDED: CreditLineAction.SUSPENDED,
    CreditLineStatus.CLOSED: CreditLineAction.CLOSED,
}


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def isoformat(value: datetime) -> str:
    """Render a UTC timestamp as ISO 8601 with a trailing Z."""
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


@dataclass(frozen=True)
class CreditLineEvent:
    """A single entry in a credit line's append-only audit trail."""

    action: CreditLineAction
    timestamp: datetime
    actor: Optional[str] = None

    def to_dict(self) -> dict:
        data = {
            "action": self.action.value,
            "timestamp": isoformat(self.timestamp),
        }
        if self.actor is not None:
            data["actor"] = self.actor
        return data


@dataclass
class CreditLine:
    """
    A borrower's credit facility, tracked by status and audit trail.

    Status changes only through suspend() and close(); each successful
    change appends exactly one event. Records are never deleted, a
    closed line stays around for its history.
    """

    id: str
    status: CreditLineStatus
    created_at: datetime
    updated_at: datetime
    events: List[CreditLineEvent] = field(default_factory=list)

    @classmethod
    def open(
        cls,
        line_id: str,
        status: CreditLineStatus = CreditLineStatus.ACTIVE,
        actor: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> "CreditLine":
        """Build a new line whose trail starts with a single created event."""
        ts = now or utcnow()
        return cls(
            id=line_id,
            status=CreditLineStatus(status),
            created_at=ts,
            updated_at=ts,
            events=[CreditLineEvent(CreditLineAction.CREATED, ts, actor)],
        )

    @property
    def is_terminal(self) -> bool:
        return self.status == CreditLineStatus.CLOSED

    def can(self, action: str) -> bool:
        """Check whether the requested action is allowed from the current status."""
        allowed_from, _ = TRANSITIONS[action]
        return self.status in allowed_from

    def apply(self, action: str, actor: Optional[str] = None) -> None:
        """
        Apply a transition in place.

        Callers must check can() first; this raises ValueError on an
        illegal action so a bug never corrupts the trail silently.
        """
        allowed_from, target = TRANSITIONS[action]
        if self.status not in allowed_from:
            raise ValueError(f"illegal transition {self.status.value} -> {action}")

        # Clock may step backwards; the trail must stay monotonic.
        ts = max(utcnow(), self.updated_at)
        self.status = target
        self.updated_at = ts
        self.events.append(CreditLineEvent(_ACTION_FOR_STATUS[target], ts, actor))

    def snapshot(self) -> "CreditLine":
        """Return an independent copy safe to hand outside the registry."""
        return copy.deepcopy(self)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "status": self.status.value,
            "createdAt": isoformat(self.created_at),
            "updatedAt": isoformat(self.updated_at),
            "events": [event.to_dict() for event in self.events],
        }
