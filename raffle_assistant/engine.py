"""Conflict detection and random spot assignment."""

import logging
from typing import Protocol, Sequence

from raffle_assistant.types import Assigned, ClaimResult, Conflict, Participant

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything that can draw a uniform integer in ``[0, stop)``, e.g. ``random.Random``."""

    def randrange(self, stop: int) -> int: ...


class ConflictError(ValueError):
    """Raised when random assignment is requested while fixed picks collide."""

    def __init__(self, conflicts: list[Conflict]):
        self.conflicts = conflicts
        super().__init__(
            f"Conflicts detected on {len(conflicts)} fixed spot(s). "
            "Please resolve before assigning randoms."
        )


def _in_range(spot: int, total_spots: int) -> bool:
    return 1 <= spot <= total_spots


def compute_claims(participants: Sequence[Participant], total_spots: int) -> ClaimResult:
    """Resolve fixed picks first-come-first-served in participant order.

    Args:
        participants: Participants in insertion order.
        total_spots: Highest valid spot number. Fixed spots outside
            [1, total_spots] are ignored.

    Returns:
        ClaimResult with the fixed claims (spot -> name) and one Conflict for
        every later participant whose fixed spot was already taken under a
        different name.
    """
    claims: dict[int, str] = {}
    conflicts: list[Conflict] = []

    for participant in participants:
        for spot in participant.fixed_spots:
            if not _in_range(spot, total_spots):
                continue
            claimed_by = claims.get(spot)
            if claimed_by is None:
                claims[spot] = participant.name
            elif claimed_by != participant.name:
                conflicts.append(Conflict(spot=spot, first=claimed_by, later=participant.name))

    logger.debug("Computed %d fixed claims, %d conflicts", len(claims), len(conflicts))
    return ClaimResult(claims=claims, conflicts=conflicts)


def shuffle_spots(spots: Sequence[int], rng: RandomSource) -> list[int]:
    """Return a uniformly shuffled copy of ``spots`` (Fisher-Yates)."""
    arr = list(spots)
    for i in range(len(arr) - 1, 0, -1):
        j = rng.randrange(i + 1)
        arr[i], arr[j] = arr[j], arr[i]
    return arr


class SpotAssigner:
    """
    Places fixed picks, then fills requested random spots from what is left.

    Attributes:
        participants: Participants in insertion order
        total_spots: Number of spots in the raffle
        rng: Source of uniform random integers used for the shuffle
    """

    def __init__(
        self,
        participants: Sequence[Participant],
        total_spots: int,
        rng: RandomSource,
    ):
        """
        Initialize the assigner with the current raffle data.

        Raises:
            ValueError: If total_spots < 1
        """
        if total_spots < 1:
            raise ValueError("total_spots must be at least 1")

        self.participants = list(participants)
        self.total_spots = total_spots
        self.rng = rng

    def _place_fixed(self) -> dict[int, str]:
        """Re-derive the fixed claims; refuse to continue if any conflict."""
        result = compute_claims(self.participants, self.total_spots)
        if not result.is_valid:
            logger.warning(
                "Refusing random assignment: %d conflict(s)", len(result.conflicts)
            )
            raise ConflictError(result.conflicts)
        return dict(result.claims)

    def _available_spots(self, mapping: dict[int, str]) -> list[int]:
        return [s for s in range(1, self.total_spots + 1) if s not in mapping]

    def _distribute(
        self, mapping: dict[int, str], available: list[int]
    ) -> dict[str, tuple[int, ...]]:
        """Hand out shuffled spots in participant order until they run out."""
        random_record: dict[str, tuple[int, ...]] = {}
        idx = 0

        for participant in self.participants:
            take = available[idx : idx + participant.random_count]
            idx += len(take)
            for spot in take:
                mapping[spot] = participant.name
            random_record[participant.id] = tuple(take)

            if len(take) < participant.random_count:
                logger.warning(
                    "%s requested %d random spot(s) but only %d were left",
                    participant.name,
                    participant.random_count,
                    len(take),
                )

        return random_record

    def assign(self) -> Assigned:
        """
        Run the draw.

        Steps:
            1. Place fixed claims first-come-first-served.
            2. Shuffle every spot not held by a fixed claim.
            3. Give each participant, in order, up to ``random_count`` spots
               from the front of the shuffled list.

        Returns:
            Assigned with the final mapping and the random spots per participant id

        Raises:
            ConflictError: If two participants hold the same fixed spot
        """
        mapping = self._place_fixed()
        available = shuffle_spots(self._available_spots(mapping), self.rng)
        random_record = self._distribute(mapping, available)

        logger.info(
            "Assigned %d random spot(s); %d of %d spots filled",
            sum(len(spots) for spots in random_record.values()),
            len(mapping),
            self.total_spots,
        )
        return Assigned(final_mapping=mapping, random_record=random_record)


def build_assignment(
    participants: Sequence[Participant],
    total_spots: int,
    rng: RandomSource,
) -> Assigned:
    """
    Build the final spot mapping for a conflict-free participant list.

    This is a convenience wrapper around SpotAssigner.

    Parameters:
        participants: Participants in insertion order
        total_spots: Number of spots in the raffle
        rng: Source of uniform random integers, e.g. ``random.Random(seed)``

    Returns:
        Assigned with the final mapping and the per-participant random record

    Raises:
        ConflictError: If the fixed picks contain conflicts
    """
    return SpotAssigner(participants, total_spots, rng).assign()
