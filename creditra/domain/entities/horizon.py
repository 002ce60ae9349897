"""Contract event observed on the Horizon API."""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class HorizonEvent:
    """
    A decoded Soroban contract event.

    Attributes:
        ledger: Ledger sequence number the event was recorded in
        timestamp: ISO 8601 timestamp of the ledger close
        contract_id: Contract that emitted the event
        topics: Decoded topic values
        data: Decoded event payload
    """

    ledger: int
    timestamp: str
    contract_id: str
    topics: List[str] = field(default_factory=list)
    data: str = ""

    def to_dict(self) -> dict:
        return {
            "ledger": self.ledger,
            "timestamp": self.timestamp,
            "contractId": self.contract_id,
            "topics": list(self.topics),
            "data": self.data,
        }
