"""
JSON file storage for the employee collection.

The whole collection lives in a single file holding a JSON array of
employee objects.  There is no partial read or write: callers load
the full list, change it and save the full list back.  ``load_all``
prefers availability over surfacing corruption, so a missing, empty
or unparseable file reads as an empty collection and invalid entries
are left out.  Mutations go through ``load_documents``, which keeps
every entry as stored and refuses to read a corrupt file as empty.
``save_documents`` writes to a temporary sibling file and renames it
over the target, so readers never observe a half written collection.

Writers inside one process are serialized through ``JsonEmployeeStore.lock``.
Separate processes sharing the file are not coordinated and the last
writer wins.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Iterable, List

from pydantic import ValidationError

from .config import settings
from employee_directory_api.app.schemas.employee import EmployeeRead


logger = logging.getLogger(__name__)

# Shared by every store instance so that stores built per request
# still serialize their read-modify-write cycles.
_WRITE_LOCK = threading.RLock()


class StorageError(Exception):
    """Raised when the underlying file cannot be read or written."""


class JsonEmployeeStore:
    """Load and save the employee collection as one JSON document."""

    lock = _WRITE_LOCK

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def load_documents(self, strict: bool = False) -> List[Any]:
        """Return the raw JSON entries of the stored array, untouched.

        Absent or empty files yield an empty list.  A file that is not
        a JSON array yields an empty list too, unless ``strict`` is set,
        in which case :class:`StorageError` is raised so that a
        mutation never overwrites data it could not read.  Other I/O
        failures always raise :class:`StorageError`.
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except OSError as exc:
            raise StorageError(f"Cannot read {self.path}: {exc}") from exc

        if not raw.strip():
            return []
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            if strict:
                raise StorageError(f"Refusing to overwrite unparseable {self.path}: {exc}") from exc
            logger.warning("Ignoring unparseable data file %s: %s", self.path, exc)
            return []
        if not isinstance(data, list):
            if strict:
                raise StorageError(f"Refusing to overwrite {self.path}: expected a JSON array")
            logger.warning("Ignoring data file %s: expected a JSON array", self.path)
            return []
        return data

    def load_all(self) -> List[EmployeeRead]:
        """Return every valid stored employee in file order.

        Entries that do not describe a valid employee are skipped here
        but stay in the file; mutations work on :meth:`load_documents`
        and write them back as they were.
        """
        records: List[EmployeeRead] = []
        for index, item in enumerate(self.load_documents()):
            try:
                records.append(EmployeeRead.model_validate(item))
            except ValidationError as exc:
                logger.warning("Skipping invalid record #%d in %s: %s", index, self.path, exc)
        return records

    def save_all(self, records: Iterable[EmployeeRead]) -> None:
        """Replace the stored collection with ``records``."""
        self.save_documents([record.to_document() for record in records])

    def save_documents(self, documents: List[Any]) -> None:
        """Replace the stored array with ``documents``, written atomically."""
        text = json.dumps(documents, indent=2, ensure_ascii=False)
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
                f.write("\n")
            os.replace(tmp_name, self.path)
        except OSError as exc:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(f"Cannot write {self.path}: {exc}") from exc


def get_data_path() -> Path:
    """Compute the path to the employee data file.

    If ``settings.data_file`` is absolute, use it directly.  Otherwise
    resolve it relative to the project root.
    """
    data_file = Path(settings.data_file)
    if data_file.is_absolute():
        return data_file
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return (base_dir / data_file).resolve()


def get_store() -> JsonEmployeeStore:
    """Return a store bound to the currently configured data file."""
    return JsonEmployeeStore(get_data_path())
