"""
Audit Store - append-only log of physician decisions.

In-memory list with optional JSON Lines file persistence. Entries are never
edited or removed once appended; the file is only ever appended to, so the API
and the Streamlit UI can share one trail.
"""

import logging
import threading
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import ValidationError

from glyeral.errors import AuditTrailError
from glyeral.models.audit import AuditEntry
from glyeral.models.enums import AuditStatus


logger = logging.getLogger(__name__)

LOG_ID_PREFIX = "REQ-"


class AuditStore:
    """
    Audit trail with JSON Lines file persistence.

    Lines written by other processes are picked up before every read and
    before an id is assigned. A file that does not parse is never written to.
    """

    def __init__(self, storage_path: Optional[Union[str, Path]] = None):
        """
        Initialize the store.

        Args:
            storage_path: Path to the JSON Lines file (optional)

        Raises:
            AuditTrailError: if the existing file cannot be read
        """
        self.storage_path = Path(storage_path) if storage_path else None
        self.entries: list[AuditEntry] = []
        self._offset = 0
        self._partial = False
        self._lock = threading.Lock()

        if self.storage_path and self.storage_path.exists():
            self._load_from_storage()
            self._check_complete()
            logger.info(f"Loaded {len(self.entries)} audit entries from {self.storage_path}")

    def __len__(self) -> int:
        with self._lock:
            self._load_from_storage()
            return len(self.entries)

    def next_log_id(self) -> str:
        """Sequential id for the next entry: REQ-001, REQ-002, ..."""
        with self._lock:
            self._load_from_storage()
            return self._next_log_id()

    def append(self, entry: AuditEntry) -> AuditEntry:
        """
        Append an entry with a caller-chosen id and persist.

        Args:
            entry: The audit entry

        Returns:
            The stored entry

        Raises:
            ValueError: if the id is already in the trail
        """
        with self._lock:
            self._load_from_storage()
            if self._find(entry.log_id) is not None:
                raise ValueError(f"Audit entry {entry.log_id} already exists")
            self._persist(entry)
        return entry

    def record(self, **fields: Any) -> AuditEntry:
        """
        Append a new entry under the next free log id.

        Args:
            **fields: AuditEntry fields other than log_id

        Returns:
            The stored entry
        """
        with self._lock:
            self._load_from_storage()
            entry = AuditEntry(log_id=self._next_log_id(), **fields)
            self._persist(entry)
        return entry

    def get(self, log_id: str) -> Optional[AuditEntry]:
        with self._lock:
            self._load_from_storage()
            return self._find(log_id)

    def list_entries(
        self,
        status: Optional[Union[str, AuditStatus]] = None,
        patient_id: Optional[str] = None,
    ) -> list[AuditEntry]:
        """
        List entries, newest first.

        Args:
            status: "All", None, or a status name (case-insensitive)
            patient_id: Restrict to one patient

        Returns:
            Matching entries
        """
        wanted = None
        if isinstance(status, AuditStatus):
            wanted = status.value.lower()
        elif status and status.strip().lower() != "all":
            wanted = status.strip().lower()

        with self._lock:
            self._load_from_storage()
            matches = [
                entry for entry in self.entries
                if (wanted is None or entry.status.lower() == wanted)
                and (patient_id is None or entry.patient_id == patient_id)
            ]
        return sorted(matches, key=lambda e: (e.time, e.log_id), reverse=True)

    # =========================================================================
    # INTERNALS (caller holds the lock)
    # =========================================================================

    def _find(self, log_id: str) -> Optional[AuditEntry]:
        for entry in self.entries:
            if entry.log_id == log_id:
                return entry
        return None

    def _next_log_id(self) -> str:
        highest = 0
        for entry in self.entries:
            suffix = entry.log_id.removeprefix(LOG_ID_PREFIX)
            if suffix.isdigit():
                highest = max(highest, int(suffix))
        return f"{LOG_ID_PREFIX}{highest + 1:03d}"

    def _persist(self, entry: AuditEntry):
        """Write the entry, then keep it in memory. A failed write keeps nothing."""
        if not self.storage_path:
            self.entries.append(entry)
        else:
            self._check_complete()
            line = entry.model_dump_json(by_alias=True) + "\n"
            try:
                self.storage_path.parent.mkdir(parents=True, exist_ok=True)
                with self.storage_path.open("a", encoding="utf-8") as f:
                    f.write(line)
            except OSError as e:
                logger.error(f"Failed to save audit entry {entry.log_id} to {self.storage_path}: {e}")
                raise
            self._load_from_storage()

        logger.info(
            f"Audit {entry.log_id}: {entry.status} {entry.meds} "
            f"(patient {entry.patient_id or '-'})"
        )

    def _load_from_storage(self):
        """Read complete lines appended since the last read."""
        if not self.storage_path or not self.storage_path.exists():
            return

        try:
            with self.storage_path.open("rb") as f:
                f.seek(0, 2)
                size = f.tell()
                if size < self._offset:
                    raise AuditTrailError(self.storage_path, "shrank since it was last read")
                f.seek(self._offset)
                chunk = f.read()
        except OSError as e:
            logger.error(f"Failed to read audit trail {self.storage_path}: {e}")
            raise

        end = chunk.rfind(b"\n") + 1
        new_entries = []
        for line in chunk[:end].splitlines():
            if not line.strip():
                continue
            try:
                new_entries.append(AuditEntry.model_validate_json(line))
            except ValidationError as e:
                logger.error(f"Unreadable audit trail {self.storage_path}: {e}")
                raise AuditTrailError(self.storage_path, "contains an unreadable entry") from e

        self.entries.extend(new_entries)
        self._offset += end
        self._partial = end < len(chunk)

    def _check_complete(self):
        if self._partial:
            raise AuditTrailError(self.storage_path, "ends with an incomplete entry")
