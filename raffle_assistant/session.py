"""Raffle session state and the transitions the UI and CLI apply to it.

A ``RaffleState`` is an immutable snapshot. Every operation returns a new
snapshot; derived data (fixed claims, conflicts, the preview mapping) is
recomputed from the snapshot on demand instead of being cached.
"""

import logging
import uuid
from dataclasses import dataclass, replace

from raffle_assistant.config import DEFAULT_CONFIG
from raffle_assistant.engine import RandomSource, build_assignment, compute_claims
from raffle_assistant.spots import parse_spot_list
from raffle_assistant.types import (
    Assigned,
    AssignmentState,
    ClaimResult,
    NotAssigned,
    Participant,
    SpotSource,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RaffleState:
    total_spots: int = DEFAULT_CONFIG.default_total_spots
    participants: tuple[Participant, ...] = ()
    assignment: AssignmentState = NotAssigned()

    @property
    def is_assigned(self) -> bool:
        return isinstance(self.assignment, Assigned)


def new_state(total_spots: int = DEFAULT_CONFIG.default_total_spots) -> RaffleState:
    if total_spots < 1:
        raise ValueError("Total spots must be at least 1")
    return RaffleState(total_spots=total_spots)


def set_total_spots(state: RaffleState, total_spots: int) -> RaffleState:
    """Change the number of spots. Any active draw is discarded."""
    if total_spots < 1:
        raise ValueError("Total spots must be at least 1")
    logger.info("Total spots set to %d", total_spots)
    return replace(state, total_spots=total_spots, assignment=NotAssigned())


def add_participant(
    state: RaffleState,
    name: str,
    fixed_text: str = "",
    random_count: int = 0,
    participant_id: str | None = None,
) -> RaffleState:
    """Append a participant. Any active draw is discarded.

    Args:
        state: Current snapshot.
        name: Display name; surrounding whitespace is stripped.
        fixed_text: Fixed-spot expression, parsed against the current total.
            Malformed tokens and out-of-range values are dropped.
        random_count: How many spots to draw at random for this participant.
        participant_id: Optional explicit id; a random one is generated otherwise.

    Raises:
        ValueError: If the name is blank or random_count is negative.
    """
    name = name.strip()
    if not name:
        raise ValueError("Please enter a participant name.")
    if random_count < 0:
        raise ValueError("Random spots cannot be negative")

    participant = Participant(
        id=participant_id or uuid.uuid4().hex[:10],
        name=name,
        fixed_spots=parse_spot_list(fixed_text, state.total_spots),
        random_count=int(random_count),
    )
    logger.info(
        "Added participant %s (fixed=%s, random=%d)",
        participant.name,
        list(participant.fixed_spots),
        participant.random_count,
    )
    return replace(
        state,
        participants=state.participants + (participant,),
        assignment=NotAssigned(),
    )


def remove_participant(state: RaffleState, participant_id: str) -> RaffleState:
    """Remove a participant by id. Any active draw is discarded.

    Raises:
        KeyError: If no participant has that id.
    """
    remaining = tuple(p for p in state.participants if p.id != participant_id)
    if len(remaining) == len(state.participants):
        raise KeyError(f"Unknown participant id: {participant_id}")
    logger.info("Removed participant %s", participant_id)
    return replace(state, participants=remaining, assignment=NotAssigned())


def claims(state: RaffleState) -> ClaimResult:
    """Fixed claims and conflicts for the current snapshot."""
    return compute_claims(state.participants, state.total_spots)


def assign_randoms(state: RaffleState, rng: RandomSource) -> RaffleState:
    """Run a fresh random draw.

    Raises:
        ConflictError: If fixed picks conflict; the caller keeps the old state.
    """
    result = build_assignment(state.participants, state.total_spots, rng)
    return replace(state, assignment=result)


def reset_randoms(state: RaffleState) -> RaffleState:
    """Drop the random draw, keeping participants and fixed picks."""
    return replace(state, assignment=NotAssigned())


def current_mapping(state: RaffleState) -> dict[int, str]:
    """The authoritative spot -> name mapping for preview and export.

    Always a fresh dict; changing it does not touch the snapshot.
    """
    if isinstance(state.assignment, Assigned):
        return dict(state.assignment.final_mapping)
    return claims(state).claims


def random_spots_for(state: RaffleState, participant_id: str) -> tuple[int, ...]:
    if isinstance(state.assignment, Assigned):
        return state.assignment.random_record.get(participant_id, ())
    return ()


def unfilled_count(state: RaffleState) -> int:
    mapping = current_mapping(state)
    return sum(1 for spot in range(1, state.total_spots + 1) if spot not in mapping)


def spot_sources(state: RaffleState) -> dict[int, SpotSource]:
    """Classify every spot as fixed, random or empty."""
    fixed = claims(state).claims
    mapping = current_mapping(state)

    sources: dict[int, SpotSource] = {}
    for spot in range(1, state.total_spots + 1):
        if spot in fixed:
            sources[spot] = SpotSource.FIXED
        elif spot in mapping:
            sources[spot] = SpotSource.RANDOM
        else:
            sources[spot] = SpotSource.EMPTY
    return sources
