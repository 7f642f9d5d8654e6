"""Supabase-backed log store.

All collections share one table; each row keeps the record as an opaque
JSON payload next to its id and collection name.
"""

from dataclasses import dataclass

from supabase import Client

from nutrition_engine.adapters.supabase_errors import StoreError, execute_query
from nutrition_engine.services.event_log import LogStore


@dataclass
class SupabaseLogStore(LogStore):
    """Supabase implementation of the event log store."""

    client: Client
    table: str = "log_records"

    def read_all(self, collection: str) -> list[dict[str, object]]:
        """Return every record payload in a collection, oldest first."""
        response = execute_query(
            self.client.table(self.table)
            .select("id, payload")
            .eq("collection", collection)
            .order("created_at", desc=False),
            f"read {collection}",
        )
        return [_parse_payload(row) for row in response.data or []]

    def append(self, collection: str, record: dict[str, object]) -> None:
        """Insert a record payload."""
        response = execute_query(
            self.client.table(self.table).insert(
                {
                    "id": str(record["id"]),
                    "collection": collection,
                    "payload": record,
                }
            ),
            f"append record to {collection}",
        )
        if not response.data:
            raise StoreError(f"Failed to append record to {collection}")

    def remove_by_id(self, collection: str, record_id: str) -> None:
        """Delete a record payload by id."""
        execute_query(
            self.client.table(self.table)
            .delete()
            .eq("collection", collection)
            .eq("id", record_id),
            f"delete {record_id} from {collection}",
        )


def _parse_payload(row: dict[str, object]) -> dict[str, object]:
    payload = row.get("payload")
    record = dict(payload) if isinstance(payload, dict) else {}
    record.setdefault("id", row.get("id"))
    return record
