"""Repository interfaces for data persistence."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Union

from creditra.domain.entities import CreditLine, CreditLineStatus
from creditra.domain.exceptions import (
    CreditLineNotFoundException,
    InvalidTransitionException,
)

TransitionError = Union[CreditLineNotFoundException, InvalidTransitionException]


@dataclass(frozen=True)
class TransitionResult:
    """
    Outcome of a status transition.

    Exactly one of line or error is set. The error carries its payload
    (line_id, or current_status and action) so callers can branch on
    it without catching anything.
    """

    line: Optional[CreditLine] = None
    error: Optional[TransitionError] = None

    def __post_init__(self):
        if (self.line is None) == (self.error is None):
            raise ValueError("TransitionResult needs exactly one of line or error")

    @classmethod
    def ok(cls, line: CreditLine) -> "TransitionResult":
        return cls(line=line)

    @classmethod
    def fail(cls, error: TransitionError) -> "TransitionResult":
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> CreditLine:
        """Return the updated line or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.line


class CreditLineRepository(ABC):
    """
    Abstract registry of credit lines.

    Implementations own every record and must make each transition
    atomic per line id: the status check and the mutation cannot
    interleave with another transition on the same id.
    """

    @abstractmethod
    async def create(
        self,
        line_id: str,
        status: CreditLineStatus = CreditLineStatus.ACTIVE,
        actor: Optional[str] = None,
    ) -> CreditLine:
        """
        Create a credit line with a single created event.

        Args:
            line_id: Identifier for the new line
            status: Initial status, active unless overridden
            actor: Optional identity recorded on the created event

        Returns:
            A snapshot of the stored line

        Raises:
            DuplicateCreditLineException: If line_id is already taken
        """
        ...

    @abstractmethod
    async def get(self, line_id: str) -> Optional[CreditLine]:
        """
        Retrieve a credit line by id.

        Returns:
            A snapshot of the line if found, None otherwise
        """
        ...

    @abstractmethod
    async def list(self) -> List[CreditLine]:
        """
        Retrieve every credit line.

        Returns:
            Snapshots of all lines in insertion order
        """
        ...

    @abstractmethod
    async def suspend(
        self,
        line_id: str,
        actor: Optional[str] = None,
    ) -> TransitionResult:
        """Move an active line to suspended."""
        ...

    @abstractmethod
    async def close(
        self,
        line_id: str,
        actor: Optional[str] = None,
    ) -> TransitionResult:
        """Move an active or suspended line to closed."""
        ...

    @abstractmethod
    async def clear(self) -> None:
        """Drop every record."""
        ...
