"""Save and restore the managed symbol set through a key-value store."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from pydantic import TypeAdapter, ValidationError

from symbolsync.contracts.config import STORAGE_KEY_MARKERS
from symbolsync.contracts.exceptions import SymbolError, SyncError
from symbolsync.contracts.progress import NullRestoreProgress, RestoreProgress
from symbolsync.contracts.store import KeyValueStore
from symbolsync.contracts.symbol import SymbolRecord

if TYPE_CHECKING:
    from symbolsync.manager import SymbolFactory, SymbolManager

logger = logging.getLogger(__name__)

_RECORDS = TypeAdapter(list[SymbolRecord])


class SymbolStore:
    """Persists the valid symbols of *manager* under one slot of *store*.

    The slot holds a JSON array of ``{id, name, source, latitude, longitude,
    isMovable}`` objects. There is no version field.
    """

    def __init__(
        self,
        manager: SymbolManager,
        store: KeyValueStore,
        *,
        key: str = STORAGE_KEY_MARKERS,
        factory: SymbolFactory | None = None,
        progress: RestoreProgress | None = None,
    ) -> None:
        self._manager = manager
        self._store = store
        self._key = key
        self._factory = factory or manager.factory
        self._progress: RestoreProgress = progress or NullRestoreProgress()

    @property
    def key(self) -> str:
        return self._key

    def records(self) -> list[SymbolRecord]:
        return [symbol.to_record() for symbol in self._manager.symbols if not symbol.invalid]

    def save(self) -> int:
        """Write every non-invalid symbol to the store. Returns the number written.

        Raises:
            StorageError: The store could not be written.
        """
        records = self.records()
        self._store.set(self._key, _RECORDS.dump_json(records, by_alias=True).decode("utf-8"))
        logger.debug("saved %d symbols to %r", len(records), self._key)
        return len(records)

    def restore(self) -> int:
        """Rebuild symbols from the store and add them to the manager.

        Absent, empty or unreadable data leaves the collection untouched.
        Each record is independent: a bad record or a symbol that fails to
        construct is skipped with a warning and reported to the progress
        observer. Returns the number of symbols added.

        Raises:
            StorageError: The store itself could not be read.
        """
        payload = self._read_payload()
        if not payload:
            return 0

        restored = 0
        self._progress.started(len(payload))
        try:
            for raw in payload:
                if self._restore_one(raw):
                    restored += 1
        except BaseException as exc:
            self._progress.failed(exc)
            raise
        skipped = len(payload) - restored
        self._progress.finished(restored, skipped)
        logger.debug("restored %d of %d symbols from %r", restored, len(payload), self._key)
        return restored

    def _read_payload(self) -> list[Any]:
        text = self._store.get(self._key)
        if not text:
            return []
        try:
            payload: Any = json.loads(text)
        except json.JSONDecodeError:
            logger.warning("ignoring unparsable data in slot %r", self._key)
            return []
        if not isinstance(payload, list):
            logger.warning("ignoring non-array data in slot %r", self._key)
            return []
        return payload

    def _restore_one(self, raw: Any) -> bool:
        try:
            record = SymbolRecord.model_validate(raw)
        except ValidationError as exc:
            logger.warning("skipping malformed symbol record: %s", exc.errors(include_url=False))
            self._progress.skipped(f"malformed record ({exc.error_count()} errors)")
            return False

        try:
            symbol = self._factory(self._manager, record.to_position(), record.to_params())
        except (SymbolError, ValueError) as exc:
            return self._skip(record, str(exc))
        if symbol.invalid:
            return self._skip(record, "invalid position or image source")

        try:
            self._manager.add_symbol(symbol)
        except (SymbolError, SyncError) as exc:
            return self._skip(record, str(exc))
        self._progress.restored(symbol.id)
        return True

    def _skip(self, record: SymbolRecord, reason: str) -> bool:
        logger.warning("skipping symbol %s (%r): %s", record.id, record.name, reason)
        self._progress.skipped(f"{record.name!r}: {reason}")
        return False
