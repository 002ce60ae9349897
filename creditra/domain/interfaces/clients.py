"""External client interfaces."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional


class DatabaseClient(ABC):
    """
    Abstract SQL client used by the migration runner and schema validator.

    Keeps those tools independent of a live PostgreSQL server so tests
    can substitute a fake.
    """

    @abstractmethod
    async def execute_script(self, sql: str) -> None:
        """Run a script that may hold several statements and no parameters."""
        ...

    @abstractmethod
    async def execute(
        self,
        sql: str,
        params: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """Run a single parameterised statement using :name binds."""
        ...

    @abstractmethod
    async def fetch(
        self,
        sql: str,
        params: Optional[Mapping[str, Any]] = None,
    ) -> List[Dict[str, Any]]:
        """
        Run a query and return its rows.

        Returns:
            One dict per row keyed by column name
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Release the underlying connection resources."""
        ...
