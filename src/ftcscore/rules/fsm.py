from __future__ import annotations
import logging
from enum import Enum
from typing import Optional, Sequence
import numpy as np

from ftcscore.config import FullConfig
from ftcscore.constants import ANONYMOUS_TEAM_START
from ftcscore.errors import DuplicateTeamError, InvalidRosterError, MatchInvariantError, PhaseConsumedError
from ftcscore.field.junctions import Junction
from ftcscore.rules.finalize import finalize
from ftcscore.rules.record import MatchRecord, distinct_teams
from ftcscore.state import (
    Alliance, AllianceResult, MatchIndex, Parkable, RobotEntry, SignalZone, Terminal, as_parking,
)

logger = logging.getLogger(__name__)

ACTIONS = ("place", "remove", "terminal", "claim", "park", "penalty")


class Phase(Enum):
    AUTO = "auto"
    TELEOP = "teleop"
    END_GAME = "end_game"


def legal_actions(phase: Phase) -> dict[str, np.ndarray]:
    mask = np.zeros(len(ACTIONS), dtype=bool)
    mask[[0, 1, 2, 5]] = True  # place, remove, terminal, penalty
    if phase is not Phase.TELEOP:
        mask[4] = True         # park
    if phase is Phase.END_GAME:
        mask[3] = True         # claim
    return {"action": mask}


def is_legal(phase: Phase, action: str) -> bool:
    return bool(legal_actions(phase)["action"][ACTIONS.index(action)])


def _roster(entries) -> tuple[RobotEntry, ...]:
    # RobotEntry, (team, signal_sleeve) or a bare team number
    out = []
    for e in entries:
        if isinstance(e, RobotEntry):
            out.append(e)
        elif isinstance(e, int):
            out.append(RobotEntry(e))
        else:
            out.append(RobotEntry(*e))
    return tuple(out)


class _MatchPhase:
    """
    Operations shared by every phase. Each phase object holds the match record
    exclusively; a transition hands the record to the next phase object and
    leaves this one unusable.
    """
    phase: Phase

    def __init__(self, record: MatchRecord):
        self._record: Optional[MatchRecord] = record

    @property
    def record(self) -> MatchRecord:
        if self._record is None:
            raise PhaseConsumedError(f"{type(self).__name__} was consumed by a phase transition")
        return self._record

    def _take(self) -> MatchRecord:
        record = self.record
        self._record = None
        return record

    def _allows(self, action: str) -> bool:
        return is_legal(self.phase, action)

    # roster lookup
    def teams(self, alliance: Alliance) -> tuple[int, ...]:
        return self.record[alliance].teams

    def index_of(self, team: int) -> Optional[MatchIndex]:
        return self.record.index_of(team)

    def alliance_of(self, team: int) -> Optional[Alliance]:
        idx = self.record.index_of(team)
        return idx.alliance if idx is not None else None

    def require_index(self, team: int) -> MatchIndex:
        return self.record.require_index(team)

    def team_at(self, robot: MatchIndex) -> int:
        return self.record.team_at(robot)

    def robot(self, alliance: Alliance, index: int) -> MatchIndex:
        """Validated robot index; out of range is fatal."""
        return self.record.check(MatchIndex(alliance, index))

    def try_robot(self, alliance: Alliance, index: int) -> Optional[MatchIndex]:
        if 0 <= index < len(self.record[alliance]):
            return MatchIndex(alliance, index)
        return None

    # scoring
    def score_for(self, alliance: Alliance, location: Junction) -> bool:
        return self.record.place_token(alliance, location)

    def descore(self, location: Junction) -> Alliance:
        return self.record.remove_token(location)

    def add_terminal_for(self, alliance: Alliance, terminal: Terminal) -> bool:
        return self.record.add_terminal(alliance, terminal)

    def cap_for(self, robot: MatchIndex, location: Junction) -> None:
        record = self.record
        record.claim(record.check(robot), location, allowed=self._allows("claim"))

    def penalize(self, alliance: Alliance, points: int) -> None:
        self.record.penalize(alliance, points)

    def _park(self, robot: MatchIndex, location: Parkable) -> None:
        if not self._allows("park"):
            raise MatchInvariantError(f"parking is not scored during {self.phase.value}")
        record = self.record
        record.park(record.check(robot), as_parking(location))

    def __repr__(self) -> str:
        if self._record is None:
            return f"<{type(self).__name__} consumed>"
        red, blue = self._record[Alliance.RED], self._record[Alliance.BLUE]
        return f"<{type(self).__name__} red={red.teams} blue={blue.teams} stacks={len(self._record.stacks)}>"


class AutoMatch(_MatchPhase):
    phase = Phase.AUTO

    @classmethod
    def create(cls, red: Sequence, blue: Sequence, signal_zone: SignalZone,
               config: Optional[FullConfig] = None) -> AutoMatch:
        """Start a match; raises DuplicateTeamError if a team appears twice."""
        red, blue = _roster(red), _roster(blue)
        if not distinct_teams(red, blue):
            raise DuplicateTeamError("the same team cannot compete in two slots in the same match")
        return cls(MatchRecord(red, blue, signal_zone, config))

    @classmethod
    def from_teams(cls, red: Sequence, blue: Sequence, signal_zone: SignalZone,
                   config: Optional[FullConfig] = None) -> AutoMatch:
        """Start a match from a roster the caller has already validated."""
        try:
            return cls.create(red, blue, signal_zone, config)
        except DuplicateTeamError as e:
            raise InvalidRosterError(str(e)) from e

    @classmethod
    def anonymous(cls, red_sleeves: Sequence[bool], blue_sleeves: Sequence[bool],
                  signal_zone: SignalZone, config: Optional[FullConfig] = None) -> AutoMatch:
        """Match with placeholder team ids -1, -2, ... (red first)."""
        ids = iter(range(ANONYMOUS_TEAM_START, ANONYMOUS_TEAM_START - len(red_sleeves) - len(blue_sleeves), -1))
        red = [RobotEntry(next(ids), s) for s in red_sleeves]
        blue = [RobotEntry(next(ids), s) for s in blue_sleeves]
        return cls(MatchRecord(red, blue, signal_zone, config))

    def park_for(self, robot: MatchIndex, location: Parkable) -> None:
        self._park(robot, location)

    def into_teleop(self) -> TeleOpMatch:
        record = self._take()
        for alliance, ledger in record.ledgers.items():
            ledger.auto_points += record.stack_points(alliance)
            ledger.score_parking_and_terminals(record.signal_sleeves[alliance], record.signal_zone, record.config)
        logger.info("auto over: red=%d blue=%d",
                    record[Alliance.RED].auto_points, record[Alliance.BLUE].auto_points)
        return TeleOpMatch(record)


class TeleOpMatch(_MatchPhase):
    phase = Phase.TELEOP

    def into_end_game(self) -> EndGameMatch:
        logger.info("end game started")
        return EndGameMatch(self._take())


class EndGameMatch(_MatchPhase):
    phase = Phase.END_GAME

    def park_for(self, robot: MatchIndex, location: Parkable) -> None:
        self._park(robot, location)

    def park_in_terminal_for(self, robot: MatchIndex, terminal: Terminal = Terminal.NEAR) -> None:
        self._park(robot, terminal)

    def end_match(self) -> tuple[AllianceResult, AllianceResult]:
        red, blue = finalize(self._take())
        logger.info("match over: red=%s blue=%s", red, blue)
        return red, blue
