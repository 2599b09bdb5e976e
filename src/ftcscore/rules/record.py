from __future__ import annotations
import logging
from typing import Iterable, Optional, Sequence

from ftcscore.config import FullConfig
from ftcscore.errors import (
    AlreadyClaimedError,
    ClaimOutsideEndGameError,
    LocationBlockedError,
    LocationCappedError,
    LocationEmptyError,
    RobotNotInMatchError,
)
from ftcscore.field.junctions import Junction
from ftcscore.rules.ledger import AllianceLedger, ClaimStatus
from ftcscore.rules.stack import PossessionStack
from ftcscore.state import Alliance, MatchIndex, ParkingLocation, RobotEntry, SignalZone, Terminal

logger = logging.getLogger(__name__)


def distinct_teams(red: Iterable[RobotEntry], blue: Iterable[RobotEntry]) -> bool:
    teams = [r.team for r in red] + [r.team for r in blue]
    return len(teams) == len(set(teams))


class MatchRecord:
    """
    Mutable state shared by every phase of one match: both alliance ledgers and
    the junction -> possession stack map. A stack is only ever present while it
    holds at least one token, and never at a junction with a valid claim.
    """

    def __init__(self, red: Sequence[RobotEntry], blue: Sequence[RobotEntry],
                 signal_zone: SignalZone, config: Optional[FullConfig] = None):
        self.signal_zone = signal_zone
        self.config = config or FullConfig()
        self.ledgers = {
            Alliance.RED: AllianceLedger(Alliance.RED, tuple(r.team for r in red)),
            Alliance.BLUE: AllianceLedger(Alliance.BLUE, tuple(r.team for r in blue)),
        }
        self.signal_sleeves = {
            Alliance.RED: tuple(r.signal_sleeve for r in red),
            Alliance.BLUE: tuple(r.signal_sleeve for r in blue),
        }
        self.stacks: dict[Junction, PossessionStack] = {}

    def __getitem__(self, alliance: Alliance) -> AllianceLedger:
        return self.ledgers[alliance]

    # roster
    def index_of(self, team: int) -> Optional[MatchIndex]:
        for alliance, ledger in self.ledgers.items():
            if team in ledger.teams:
                return MatchIndex(alliance, ledger.teams.index(team))
        return None

    def require_index(self, team: int) -> MatchIndex:
        idx = self.index_of(team)
        if idx is None:
            raise RobotNotInMatchError(f"team {team} is not in this match")
        return idx

    def check(self, robot: MatchIndex) -> MatchIndex:
        self.ledgers[robot.alliance].check_index(robot.index)
        return robot

    def team_at(self, robot: MatchIndex) -> int:
        return self.ledgers[robot.alliance].teams[self.check(robot).index]

    # junctions
    def has_claim_on(self, location: Junction) -> bool:
        return any(ledger.has_valid_claim_on(location) for ledger in self.ledgers.values())

    def place_token(self, alliance: Alliance, location: Junction) -> bool:
        if self.has_claim_on(location):
            return False
        stack = self.stacks.get(location)
        if stack is None:
            self.stacks[location] = PossessionStack(alliance)
        else:
            stack.push(alliance)
        logger.debug("%s token on %s", alliance, location)
        return True

    def remove_token(self, location: Junction) -> Alliance:
        if self.has_claim_on(location):
            raise LocationBlockedError(f"{location} holds a claim")
        stack = self.stacks.get(location)
        top = stack.pop() if stack is not None else None
        if top is None:
            raise LocationEmptyError(f"{location} has no tokens")
        if not stack:
            del self.stacks[location]
        logger.debug("%s token removed from %s", top, location)
        return top

    def stack_points(self, alliance: Alliance) -> int:
        return sum(s.count(alliance) * loc.points for loc, s in self.stacks.items())

    def topped_by(self, alliance: Alliance) -> set[Junction]:
        return {loc for loc, s in self.stacks.items() if s.top() is alliance}

    # other scoring
    def add_terminal(self, alliance: Alliance, terminal: Terminal) -> bool:
        self.ledgers[alliance].add_terminal(terminal)
        logger.debug("%s terminal %s", alliance, terminal.value)
        return True

    def penalize(self, alliance: Alliance, points: int) -> None:
        self.ledgers[alliance].penalize(points)
        logger.debug("%s penalized %d", alliance, points)

    def park(self, robot: MatchIndex, location: ParkingLocation) -> None:
        self.ledgers[robot.alliance].park(robot.index, location)
        logger.debug("%s parked in %s", robot, location.value)

    def claim(self, robot: MatchIndex, location: Junction, *, allowed: bool) -> None:
        """
        Apply the one-time claim rule. An attempt outside the claim window or on
        a capped junction still consumes the robot's slot.
        """
        ledger = self.ledgers[robot.alliance]
        slot = ledger.claim_slot(robot.index)
        if not allowed:
            if slot.status is ClaimStatus.UNCLAIMED:
                ledger.set_claim(robot.index, None)
            logger.warning("%s claimed %s outside endgame", robot, location)
            raise ClaimOutsideEndGameError(f"{robot} scored a claim outside endgame")
        if slot.status is not ClaimStatus.UNCLAIMED:
            raise AlreadyClaimedError(f"{robot} already scored its claim")
        if self.has_claim_on(location):
            ledger.set_claim(robot.index, None)
            logger.warning("%s claimed capped junction %s", robot, location)
            raise LocationCappedError(f"{location} is capped")
        ledger.set_claim(robot.index, location)
        buried = self.stacks.pop(location, None)
        logger.info("%s capped %s (removed %d tokens)", robot, location, len(buried) if buried else 0)
