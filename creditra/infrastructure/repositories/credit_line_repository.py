"""In-memory credit line registry."""

import threading
from typing import Dict, List, Optional

from creditra.domain.entities import CreditLine, CreditLineStatus
from creditra.domain.exceptions import (
    CreditLineNotFoundException,
    DuplicateCreditLineException,
    InvalidTransitionException,
)
from creditra.domain.interfaces import CreditLineRepository, TransitionResult


class InMemoryCreditLineRepository(CreditLineRepository):
    """
    Process-local credit line registry.

    Each record has its own lock, so transitions on one id are
    serialized while different ids proceed independently. The table
    lock only guards membership of the dicts. Reads hand out deep
    copies taken under the record lock. Nothing here awaits, so the
    methods are safe to call from several event loops or threads.
    """

    def __init__(self):
        self._lines: Dict[str, CreditLine] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._table_lock = threading.Lock()

    async def create(
        self,
        line_id: str,
        status: CreditLineStatus = CreditLineStatus.ACTIVE,
        actor: Optional[str] = None,
    ) -> CreditLine:
        line = CreditLine.open(line_id, status=status, actor=actor)
        with self._table_lock:
            if line_id in self._lines:
                raise DuplicateCreditLineException(line_id)
            self._lines[line_id] = line
            self._locks[line_id] = threading.Lock()
            return line.snapshot()

    async def get(self, line_id: str) -> Optional[CreditLine]:
        entry = self._entry(line_id)
        if entry is None:
            return None
        line, lock = entry
        with lock:
            return line.snapshot()

    async def list(self) -> List[CreditLine]:
        with self._table_lock:
            entries = [(line, self._locks[line_id]) for line_id, line in self._lines.items()]

        snapshots = []
        for line, lock in entries:
            with lock:
                snapshots.append(line.snapshot())
        return snapshots

    async def suspend(
        self,
        line_id: str,
        actor: Optional[str] = None,
    ) -> TransitionResult:
        return self._transition(line_id, "suspend", actor)

    async def close(
        self,
        line_id: str,
        actor: Optional[str] = None,
    ) -> TransitionResult:
        return self._transition(line_id, "close", actor)

    async def clear(self) -> None:
        with self._table_lock:
            self._lines.clear()
            self._locks.clear()

    def _entry(self, line_id: str) -> Optional[tuple[CreditLine, threading.Lock]]:
        with self._table_lock:
            line = self._lines.get(line_id)
            if line is None:
                return None
            return line, self._locks[line_id]

    def _transition(
        self,
        line_id: str,
        action: str,
        actor: Optional[str],
    ) -> TransitionResult:
        entry = self._entry(line_id)
        if entry is None:
            return TransitionResult.fail(CreditLineNotFoundException(line_id))

        line, lock = entry
        with lock:
            if not line.can(action):
                return TransitionResult.fail(
                    InvalidTransitionException(line.status.value, action)
                )
            line.apply(action, actor=actor)
            return TransitionResult.ok(line.snapshot())
