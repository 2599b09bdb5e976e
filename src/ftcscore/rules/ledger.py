from __future__ import annotations
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence

from ftcscore.config import FullConfig
from ftcscore.errors import MatchInvariantError, RobotIndexError
from ftcscore.field.junctions import Junction
from ftcscore.state import Alliance, AllianceResult, ParkingLocation, SignalZone, Terminal

logger = logging.getLogger(__name__)


class ClaimStatus(Enum):
    UNCLAIMED = "unclaimed"
    VALID = "valid"
    INVALID = "invalid"


@dataclass(frozen=True, slots=True)
class ClaimSlot:
    status: ClaimStatus
    location: Optional[Junction] = None   # set only when VALID

    @property
    def is_valid(self) -> bool:
        return self.status is ClaimStatus.VALID


UNCLAIMED = ClaimSlot(ClaimStatus.UNCLAIMED)
INVALID = ClaimSlot(ClaimStatus.INVALID)


@dataclass
class AllianceLedger:
    """Per-alliance scoring record. Junction possession is held by the match record."""
    alliance: Alliance
    teams: tuple[int, ...]
    penalty_points: int = 0
    auto_points: int = 0
    teleop_points: int = 0
    endgame_points: int = 0
    terminals: dict[Terminal, int] = field(default_factory=lambda: {t: 0 for t in Terminal})
    claims: list[ClaimSlot] = field(init=False)
    parking: list[Optional[ParkingLocation]] = field(init=False)

    def __post_init__(self):
        self.teams = tuple(self.teams)
        self.claims = [UNCLAIMED] * len(self.teams)
        self.parking = [None] * len(self.teams)

    def __len__(self) -> int:
        return len(self.teams)

    def check_index(self, index: int) -> int:
        if not 0 <= index < len(self.teams):
            raise RobotIndexError(
                f"robot index {index} invalid: {self.alliance} has {len(self.teams)} robot(s) in this match"
            )
        return index

    # claims
    def claim_slot(self, index: int) -> ClaimSlot:
        return self.claims[self.check_index(index)]

    def set_claim(self, index: int, location: Optional[Junction]) -> None:
        """Move an unclaimed slot to valid(location), or to invalid when location is None."""
        if self.claim_slot(index).status is not ClaimStatus.UNCLAIMED:
            raise MatchInvariantError(f"claim slot {self.alliance}[{index}] already used")
        self.claims[index] = INVALID if location is None else ClaimSlot(ClaimStatus.VALID, location)

    def valid_claims(self) -> list[Junction]:
        return [c.location for c in self.claims if c.is_valid]

    def has_valid_claim_on(self, location: Junction) -> bool:
        return any(c.is_valid and c.location is location for c in self.claims)

    # terminals / penalties / parking
    def add_terminal(self, terminal: Terminal) -> None:
        self.terminals[terminal] += 1

    @property
    def terminal_total(self) -> int:
        return sum(self.terminals.values())

    def penalize(self, points: int) -> None:
        self.penalty_points += points

    def park(self, index: int, location: ParkingLocation) -> None:
        self.parking[self.check_index(index)] = location

    def parked_in_terminal(self) -> int:
        return sum(1 for p in self.parking if p is not None and p.is_terminal)

    def clear_parking(self) -> None:
        self.parking = [None] * len(self.teams)

    def score_parking_and_terminals(self, signal_sleeves: Sequence[bool], signal_zone: SignalZone,
                                    config: FullConfig) -> int:
        """Credit auto parking and terminal points; parking slots are always cleared."""
        cfg = config.parking
        zone = signal_zone.parking
        parked = 0
        for sleeve, loc in zip(signal_sleeves, self.parking):
            if loc is None:
                continue
            if loc is zone:
                parked += cfg.signal_zone_points * (2 if sleeve else 1)
            elif not loc.is_signal_zone:
                parked += cfg.off_zone_points
        gained = parked + self.terminal_total * config.scoring.terminal_points
        self.auto_points += gained
        self.clear_parking()
        logger.debug("%s auto parking=%d terminals=%d", self.alliance, parked, self.terminal_total)
        return gained

    def result(self) -> AllianceResult:
        return AllianceResult(
            alliance=self.alliance,
            teams=self.teams,
            penalty_points=self.penalty_points,
            auto_points=self.auto_points,
            teleop_points=self.teleop_points,
            endgame_points=self.endgame_points,
        )
