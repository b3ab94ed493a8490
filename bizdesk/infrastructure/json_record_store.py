"""Record Store persisted to a single local JSON document.

The document holds ``clients``, ``orders`` and ``expenses`` arrays of
camelCase objects, the layout used by the browser-storage revision of the
application, so existing exports load unchanged. The file is re-read on every
operation and replaced atomically on every write.
"""

import json
import os
from pathlib import Path

from bizdesk.domain.errors import StoreError
from bizdesk.infrastructure.memory_record_store import (
    CLIENTS,
    EXPENSES,
    ORDERS,
    Collections,
    InMemoryRecordStore,
)
from bizdesk.infrastructure.record_mapping import (
    CLIENT_FIELDS,
    EXPENSE_FIELDS,
    ORDER_FIELDS,
    client_from_mapping,
    expense_from_mapping,
    order_from_mapping,
    to_document,
)

_READERS = {
    CLIENTS: client_from_mapping,
    ORDERS: order_from_mapping,
    EXPENSES: expense_from_mapping,
}
_SPECS = {
    CLIENTS: CLIENT_FIELDS,
    ORDERS: ORDER_FIELDS,
    EXPENSES: EXPENSE_FIELDS,
}


class JsonFileRecordStore(InMemoryRecordStore):
    """Record Store reading and writing a JSON file."""

    def __init__(self, path: Path | str, **kwargs) -> None:
        """Initialize the store.

        Args:
            path: Location of the JSON document; created on first write.
            **kwargs: Options forwarded to ``InMemoryRecordStore``
                (``cascade_client_orders``, ``clock``, ``id_factory``).
        """
        super().__init__(**kwargs)
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> Collections:
        if not self._path.exists():
            return {name: {} for name in _READERS}
        try:
            with self._path.open(encoding="utf-8") as handle:
                document = json.load(handle)
            if not isinstance(document, dict):
                raise StoreError(
                    f"Expected a JSON object in {self._path}, "
                    f"got {type(document).__name__}"
                )
            collections: Collections = {}
            for name, reader in _READERS.items():
                records = [reader(item) for item in document.get(name, [])]
                collections[name] = {record.id: record for record in records}
        except (OSError, json.JSONDecodeError) as exc:
            raise StoreError(f"Cannot read {self._path}: {exc}") from exc
        except (KeyError, TypeError, ValueError, ArithmeticError) as exc:
            raise StoreError(
                f"Malformed record in {self._path}: {exc!r}"
            ) from exc
        return collections

    def _write(self, collections: Collections) -> None:
        document = {
            name: [
                to_document(record, _SPECS[name])
                for record in collections[name].values()
            ]
            for name in _READERS
        }
        tmp_path = self._path.with_name(f"{self._path.name}.tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tmp_path.open("w", encoding="utf-8") as handle:
                json.dump(document, handle, indent=2)
            os.replace(tmp_path, self._path)
        except OSError as exc:
            raise StoreError(f"Cannot write {self._path}: {exc}") from exc


__all__ = ["JsonFileRecordStore"]
