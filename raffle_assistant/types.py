"""Type definitions for the raffle assistant."""

from dataclasses import dataclass, field
from enum import Enum


class SpotSource(Enum):
    """How a spot in the preview got its name."""

    FIXED = "Fixed"
    RANDOM = "Random"
    EMPTY = "Empty"


@dataclass(frozen=True)
class Participant:
    """A registered participant. Never edited after creation, only removed."""

    id: str
    name: str
    fixed_spots: tuple[int, ...] = ()
    random_count: int = 0


@dataclass(frozen=True)
class Conflict:
    """Two participants asking for the same fixed spot."""

    spot: int
    first: str
    later: str


@dataclass(frozen=True)
class ClaimResult:
    """Fixed claims (spot -> name) and the conflicts found while building them."""

    claims: dict[int, str]
    conflicts: list[Conflict] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.conflicts


@dataclass(frozen=True)
class SpotParse:
    """Result of parsing a fixed-spot expression such as ``"1,3,5-8"``."""

    spots: tuple[int, ...]
    skipped: tuple[str, ...] = ()  # tokens that are not an integer or a range
    out_of_range: tuple[str, ...] = ()  # discarded values, leading zeros stripped


@dataclass(frozen=True)
class NotAssigned:
    """No random draw is active; preview and export use the fixed claims."""


@dataclass(frozen=True)
class Assigned:
    """Outcome of a random draw."""

    final_mapping: dict[int, str]  # spot -> name, fixed and random
    random_record: dict[str, tuple[int, ...]]  # participant id -> spots in draw order


AssignmentState = NotAssigned | Assigned
