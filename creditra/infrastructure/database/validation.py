"""Schema validation against the expected core tables."""

from typing import List, Sequence

from creditra.domain.exceptions import SchemaValidationException
from creditra.domain.interfaces import DatabaseClient
from .migrations import EXPECTED_TABLES


async def missing_tables(
    client: DatabaseClient,
    tables: Sequence[str] = EXPECTED_TABLES,
    schema: str = "public",
) -> List[str]:
    """Return the requested tables absent from the schema, in request order."""
    rows = await client.fetch(
        "SELECT table_name FROM information_schema.tables "
        "WHERE table_schema = :schema",
        {"schema": schema},
    )
    found = {row["table_name"] for row in rows}
    return [table for table in tables if table not in found]


async def validate_schema(client: DatabaseClient) -> None:
    """
    Check that every core table exists.

    Raises:
        SchemaValidationException: Listing the missing tables
    """
    missing = await missing_tables(client)
    if missing:
        raise SchemaValidationException(missing)
