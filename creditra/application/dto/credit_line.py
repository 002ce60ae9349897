"""Data transfer objects for credit line operations."""

from dataclasses import dataclass
from typing import List, Optional

from creditra.domain.entities import CreditLine, CreditLineStatus


@dataclass(frozen=True)
class CreateCreditLineRequest:
    """
    Input for creating a credit line.

    A missing line_id means the service generates one.
    """

    line_id: Optional[str] = None
    status: CreditLineStatus = CreditLineStatus.ACTIVE
    actor: Optional[str] = None

    @classmethod
    def with_id(
        cls,
        line_id: str,
        status: CreditLineStatus = CreditLineStatus.ACTIVE,
    ) -> "CreateCreditLineRequest":
        return cls(line_id=line_id, status=status)

    @classmethod
    def generated(
        cls,
        status: CreditLineStatus = CreditLineStatus.ACTIVE,
    ) -> "CreateCreditLineRequest":
        return cls(line_id=None, status=status)


@dataclass(frozen=True)
class CreditLineEventDTO:
    action: str
    timestamp: str
    actor: Optional[str] = None


@dataclass(frozen=True)
class CreditLineResponse:
    """Serialized view of a credit line."""

    id: str
    status: str
    created_at: str
    updated_at: str
    events: List[CreditLineEventDTO]

    @classmethod
    def from_entity(cls, line: CreditLine) -> "CreditLineResponse":
        data = line.to_dict()
        return cls(
            id=data["id"],
            status=data["status"],
            created_at=data["createdAt"],
            updated_at=data["updatedAt"],
            events=[
                CreditLineEventDTO(
                    action=event["action"],
                    timestamp=event["timestamp"],
                    actor=event.get("actor"),
                )
                for event in data["events"]
            ],
        )
