# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the shape of every piece of information that flows
# between the record store, the tool layer and the agent.  They carry no
# behavior beyond small conversion helpers.
#
# ON-DISK FORMAT:
#   The students file keeps the field names of the original data file
#   ("alumnos" / "nombre" / "apellido" / "curso") so existing files load
#   unchanged.  Python code only ever sees the English attribute names; the
#   mapping lives in to_dict() / from_dict() below and nowhere else.
# =============================================================================

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


# Keys of the persisted JSON document
COLLECTION_KEY = "alumnos"
GIVEN_NAME_KEY = "nombre"
FAMILY_NAME_KEY = "apellido"
COURSE_KEY = "curso"


# -----------------------------------------------------------------------------
# StudentRecord — one student as stored on disk
# -----------------------------------------------------------------------------
# No identifier field exists.  Two records with identical fields are two
# records; uniqueness is a policy of the store (see StudentStore), not of
# the model.
# -----------------------------------------------------------------------------
@dataclass
class StudentRecord:
    """A single student entry."""

    given_name: str                    # e.g. "José"
    family_name: str                   # e.g. "Pérez"
    course: str                        # Free-form cohort label, e.g. "5A"

    def to_dict(self) -> dict[str, str]:
        return {
            GIVEN_NAME_KEY: self.given_name,
            FAMILY_NAME_KEY: self.family_name,
            COURSE_KEY: self.course,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StudentRecord":
        """Build a record from one entry of the persisted list.

        Missing fields read as empty strings.  Values are taken as they are
        stored: no type coercion is performed.
        """
        return cls(
            given_name=data.get(GIVEN_NAME_KEY, ""),
            family_name=data.get(FAMILY_NAME_KEY, ""),
            course=data.get(COURSE_KEY, ""),
        )


# -----------------------------------------------------------------------------
# Load results
# -----------------------------------------------------------------------------
# Reading the students file never raises.  Instead it produces a LoadResult
# so a caller can tell "empty because there are no students" apart from
# "empty because the file was missing or corrupt".
# -----------------------------------------------------------------------------
class LoadErrorKind(str, Enum):
    """Why the students file could not be read."""

    MISSING = "missing"                # File does not exist
    UNREADABLE = "unreadable"          # OS-level read failure (permissions, ...)
    MALFORMED = "malformed"            # Not JSON, or not a JSON object


@dataclass
class LoadError:
    """Diagnostic for a failed read of the students file."""

    kind: LoadErrorKind
    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.path}: {self.message}"


@dataclass
class LoadResult:
    """Outcome of reading the students file."""

    records: list[StudentRecord] = field(default_factory=list)
    error: Optional[LoadError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


# -----------------------------------------------------------------------------
# Persistence
# -----------------------------------------------------------------------------
class PersistenceError(Exception):
    """The students file could not be written, or did not read back as written."""


# -----------------------------------------------------------------------------
# Add results
# -----------------------------------------------------------------------------
# add() never raises.  Its outcome is reported here so the tool layer (and the
# agent behind it) can tell a durable save from an in-memory-only one.
# -----------------------------------------------------------------------------
class AddStatus(str, Enum):
    ADDED = "added"                    # Appended and durably saved
    DUPLICATE = "duplicate"            # Rejected by the uniqueness policy
    FAILED = "failed"                  # Appended in memory, write failed


@dataclass
class AddResult:
    """Outcome of StudentStore.add()."""

    status: AddStatus
    record: StudentRecord
    error: Optional[str] = None        # PersistenceError message when FAILED

    @property
    def ok(self) -> bool:
        return self.status is AddStatus.ADDED
