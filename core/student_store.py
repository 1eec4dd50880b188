# =============================================================================
# core/student_store.py  —  Student Record Storage & Search
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Owns the list of students.  Memory holds a cache of the records; the JSON
#   file on disk is the durable copy.  Every write rewrites the whole file and
#   then reads it back, so the in-memory list is always what is actually on
#   disk.
#
# OPERATIONS:
#   - load()                  best-effort read; a missing or corrupt file
#                             leaves an empty collection (never raises)
#   - persist()               full rewrite + read-back check
#                             (raises PersistenceError)
#   - add()                   append + persist (reports an AddResult)
#   - search_by_given_name()  exact match after normalization
#   - search_by_family_name() exact match after normalization
#   - render_listing()        one bullet line per record
#
# NORMALIZATION:
#   "José", "JOSE", "jose" and "josé" all normalize to "jose": the string is
#   decomposed (NFD), combining marks are dropped, and the rest is lowercased.
#   Matching is equality of normalized strings, never substring.
#
# CONCURRENCY:
#   One store per file, one process.  load/persist/add hold an RLock so two
#   tool calls running on worker threads cannot interleave their
#   write-then-reload sequences.  Nothing guards against other processes
#   writing the same file (last writer wins).
# =============================================================================

import json
import logging
import os
import tempfile
import threading
import unicodedata
from pathlib import Path
from typing import Any, Iterable, Optional, Sequence, Union

from core.models import (
    COLLECTION_KEY,
    AddResult,
    AddStatus,
    LoadError,
    LoadErrorKind,
    LoadResult,
    PersistenceError,
    StudentRecord,
)

logger = logging.getLogger(__name__)

BULLET = "📌"


def normalize_name(value: str) -> str:
    """Fold case and accents so "José" and "jose" compare equal."""
    decomposed = unicodedata.normalize("NFD", value)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.lower()


def _name_matches(value: Any, target: str) -> bool:
    # Stored fields are not coerced on read; a non-string never matches
    return isinstance(value, str) and normalize_name(value) == target


def format_record(record: StudentRecord) -> str:
    return f"{BULLET} {record.given_name} {record.family_name} - Course: {record.course}"


class StudentStore:
    """Single source of truth for student records, backed by a JSON file."""

    def __init__(self, path: Union[str, os.PathLike], enforce_unique: bool = False):
        self.path = Path(path)
        self.enforce_unique = enforce_unique
        self.last_load_error: Optional[LoadError] = None
        self._records: list[StudentRecord] = []
        self._lock = threading.RLock()
        self.load()

    def __len__(self) -> int:
        return len(self._records)

    @property
    def records(self) -> list[StudentRecord]:
        """A copy of the current collection, in insertion order."""
        return list(self._records)

    # =========================================================================
    # Reading
    # =========================================================================
    def read_records(self) -> LoadResult:
        """Read the students file without touching the in-memory collection.

        Never raises.  A document without the collection key is a valid,
        empty result; a document that is not a JSON object is malformed.
        """
        path = str(self.path)
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            return LoadResult(error=LoadError(LoadErrorKind.MISSING, path, str(e)))
        except ValueError as e:
            # json.JSONDecodeError and UnicodeDecodeError are both ValueErrors
            return LoadResult(error=LoadError(LoadErrorKind.MALFORMED, path, str(e)))
        except OSError as e:
            return LoadResult(error=LoadError(LoadErrorKind.UNREADABLE, path, str(e)))

        if not isinstance(data, dict):
            return LoadResult(error=LoadError(
                LoadErrorKind.MALFORMED, path,
                f"expected a JSON object, got {type(data).__name__}",
            ))

        entries = data.get(COLLECTION_KEY) or []
        if not isinstance(entries, list):
            return LoadResult(error=LoadError(
                LoadErrorKind.MALFORMED, path,
                f"'{COLLECTION_KEY}' must be a list, got {type(entries).__name__}",
            ))

        records = []
        for idx, entry in enumerate(entries):
            if not isinstance(entry, dict):
                logger.warning("Skipping entry %d in %s: not an object", idx, path)
                continue
            records.append(StudentRecord.from_dict(entry))
        return LoadResult(records=records)

    def load(self) -> LoadResult:
        """Refresh the in-memory collection from disk (best effort).

        On failure the collection is reset to empty and the error is kept in
        ``last_load_error``.
        """
        with self._lock:
            result = self.read_records()
            self._records = result.records
            self.last_load_error = result.error

        if result.error is None:
            logger.debug("Loaded %d students from %s", len(result.records), self.path)
        elif result.error.kind is LoadErrorKind.MISSING:
            logger.warning("Students file not found, starting empty: %s", self.path)
        else:
            logger.error("Could not read students file: %s", result.error)
        return result

    # =========================================================================
    # Writing
    # =========================================================================
    def persist(self) -> None:
        """Rewrite the whole file, then reload and check it reads back as written.

        The document is encoded in full, written to a temporary file next to
        the target and moved over it, so a failed write leaves the previous
        file untouched.

        Raises:
            PersistenceError: the write failed, or the reloaded collection
                differs from the one that was written.
        """
        with self._lock:
            snapshot = list(self._records)
            document = {COLLECTION_KEY: [r.to_dict() for r in snapshot]}
            try:
                payload = json.dumps(document, indent=2, ensure_ascii=False).encode("utf-8")
                self.path.parent.mkdir(parents=True, exist_ok=True)
                self._replace_file(payload)
            except (OSError, TypeError, ValueError) as e:
                logger.error("Failed to write students file %s: %s", self.path, e)
                raise PersistenceError(f"Could not save the student list: {e}") from e

            result = self.load()
            if not result.ok:
                raise PersistenceError(f"Saved student list could not be read back: {result.error}")
            if result.records != snapshot:
                raise PersistenceError(
                    f"Saved student list does not match: wrote {len(snapshot)} "
                    f"records, read back {len(result.records)}"
                )
            logger.info("Saved %d students to %s", len(snapshot), self.path)

    def _replace_file(self, payload: bytes) -> None:
        fd, tmp_path = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(payload)
            os.replace(tmp_path, self.path)
        except OSError:
            try:
                os.unlink(tmp_path)
            except OSError:
                logger.warning("Could not remove temporary file %s", tmp_path)
            raise

    def add(self, given_name: str, family_name: str, course: str) -> AddResult:
        """Append a student and save the collection.

        No validation is performed; empty strings are accepted.  A write
        failure is logged and reported as AddStatus.FAILED, never raised; the
        record is then dropped from memory so memory keeps matching disk.
        """
        record = StudentRecord(given_name=given_name, family_name=family_name, course=course)
        with self._lock:
            if self.enforce_unique and self._find_duplicate(record) is not None:
                logger.info("Not adding duplicate student %s %s", given_name, family_name)
                return AddResult(status=AddStatus.DUPLICATE, record=record)

            self._records.append(record)
            try:
                self.persist()
            except PersistenceError as e:
                # A failed read-back has already reloaded from disk; only an
                # unwritten record is still sitting at the end of the list
                if self._records and self._records[-1] is record:
                    self._records.pop()
                logger.error("Student %s %s was not saved: %s", given_name, family_name, e)
                return AddResult(status=AddStatus.FAILED, record=record, error=str(e))

        return AddResult(status=AddStatus.ADDED, record=record)

    def _find_duplicate(self, record: StudentRecord) -> Optional[StudentRecord]:
        if not (isinstance(record.given_name, str) and isinstance(record.family_name, str)):
            return None
        given = normalize_name(record.given_name)
        family = normalize_name(record.family_name)
        for existing in self._records:
            if (_name_matches(existing.given_name, given)
                    and _name_matches(existing.family_name, family)):
                return existing
        return None

    # =========================================================================
    # Queries
    # =========================================================================
    def search_by_given_name(self, query: str) -> list[StudentRecord]:
        if not isinstance(query, str):
            return []
        target = normalize_name(query)
        return [r for r in self.records if _name_matches(r.given_name, target)]

    def search_by_family_name(self, query: str) -> list[StudentRecord]:
        if not isinstance(query, str):
            return []
        target = normalize_name(query)
        return [r for r in self.records if _name_matches(r.family_name, target)]

    def render_listing(self, records: Optional[Sequence[StudentRecord]] = None) -> str:
        """One bullet line per record; empty string when there are none.

        Renders the whole collection unless an explicit sequence (e.g. search
        results) is given.
        """
        rows: Iterable[StudentRecord] = self.records if records is None else records
        return "".join(f"{format_record(r)}\n" for r in rows)
