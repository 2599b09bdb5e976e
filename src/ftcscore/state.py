from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Union


class Alliance(Enum):
    RED = 0
    BLUE = 1

    @property
    def other(self) -> Alliance:
        return Alliance.BLUE if self is Alliance.RED else Alliance.RED

    def __str__(self) -> str:
        return self.name


class ParkingLocation(Enum):
    LEFT_SIGNAL_ZONE = "left_signal_zone"
    MIDDLE_SIGNAL_ZONE = "middle_signal_zone"
    RIGHT_SIGNAL_ZONE = "right_signal_zone"
    NEAR_TERMINAL = "near_terminal"
    FAR_TERMINAL = "far_terminal"
    SUBSTATION = "substation"

    @property
    def is_signal_zone(self) -> bool:
        return self in _SIGNAL_ZONES

    @property
    def is_terminal(self) -> bool:
        return self in _TERMINALS


_SIGNAL_ZONES = frozenset({
    ParkingLocation.LEFT_SIGNAL_ZONE,
    ParkingLocation.MIDDLE_SIGNAL_ZONE,
    ParkingLocation.RIGHT_SIGNAL_ZONE,
})
_TERMINALS = frozenset({ParkingLocation.NEAR_TERMINAL, ParkingLocation.FAR_TERMINAL})


class SignalZone(Enum):
    LEFT = "left"
    MIDDLE = "middle"
    RIGHT = "right"

    @property
    def parking(self) -> ParkingLocation:
        return ParkingLocation[f"{self.name}_SIGNAL_ZONE"]


class Terminal(Enum):
    NEAR = "near"
    FAR = "far"

    @property
    def parking(self) -> ParkingLocation:
        return ParkingLocation[f"{self.name}_TERMINAL"]


Parkable = Union[ParkingLocation, SignalZone, Terminal]


def as_parking(location: Parkable) -> ParkingLocation:
    if isinstance(location, ParkingLocation):
        return location
    return location.parking


@dataclass(frozen=True, slots=True)
class MatchIndex:
    """A robot's role in one match. Position 0 is the captain."""
    alliance: Alliance
    index: int

    @property
    def is_captain(self) -> bool:
        return self.index == 0

    def __str__(self) -> str:
        return f"{self.alliance}[{self.index}]"


RED_CAPTAIN = MatchIndex(Alliance.RED, 0)
BLUE_CAPTAIN = MatchIndex(Alliance.BLUE, 0)
RED_FIRST_PICK = MatchIndex(Alliance.RED, 1)
BLUE_FIRST_PICK = MatchIndex(Alliance.BLUE, 1)


@dataclass(frozen=True, slots=True)
class RobotEntry:
    team: int               # negative numbers exist in test matches
    signal_sleeve: bool = False


@dataclass(frozen=True, slots=True)
class AllianceResult:
    alliance: Alliance
    teams: tuple[int, ...]
    penalty_points: int
    auto_points: int
    teleop_points: int
    endgame_points: int

    @property
    def total(self) -> int:
        return self.auto_points + self.teleop_points + self.endgame_points


def final_scores(red: AllianceResult, blue: AllianceResult) -> tuple[int, int]:
    """Match scores with each alliance credited its opponent's penalty points."""
    return red.total + blue.penalty_points, blue.total + red.penalty_points
