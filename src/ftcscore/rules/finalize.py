"""End-of-match scoring: live stack points, claims, ownership, terminal parking and circuits."""
from __future__ import annotations
import logging
from collections import deque
from typing import AbstractSet

from ftcscore.field.junctions import CIRCUIT_GOALS, CIRCUIT_STARTS, Junction, neighbors
from ftcscore.rules.ledger import AllianceLedger
from ftcscore.rules.record import MatchRecord
from ftcscore.state import Alliance, AllianceResult, Terminal

logger = logging.getLogger(__name__)


def circuit_complete(alliance: Alliance, possessed: AbstractSet[Junction]) -> bool:
    """True when possessed junctions link the alliance's start junctions to its goal junctions."""
    frontier = CIRCUIT_STARTS[alliance] & possessed
    goals = CIRCUIT_GOALS[alliance]
    visited = set(frontier)
    queue: deque[Junction] = deque(frontier)
    while queue:
        current = queue.popleft()
        if current in goals:
            return True
        for nxt in neighbors(current):
            if nxt in possessed and nxt not in visited:
                visited.add(nxt)
                queue.append(nxt)
    return False


def terminal_parking_bonus(ledger: AllianceLedger, full_points: int) -> int:
    if not len(ledger):
        return 0
    return full_points * ledger.parked_in_terminal() // len(ledger)


def _score_alliance(record: MatchRecord, alliance: Alliance) -> AllianceResult:
    ledger = record[alliance]
    cfg = record.config
    claimed = set(ledger.valid_claims())
    owned = record.topped_by(alliance) - claimed

    circuit = 0
    if ledger.terminals[Terminal.NEAR] and ledger.terminals[Terminal.FAR] \
            and circuit_complete(alliance, claimed | owned):
        circuit = cfg.scoring.circuit_points
    parking = terminal_parking_bonus(ledger, cfg.parking.endgame_terminal_points)

    ledger.teleop_points = record.stack_points(alliance)
    ledger.endgame_points = (
        cfg.scoring.claim_points * len(claimed)
        + cfg.scoring.possession_points * len(owned)
        + parking
        + circuit
    )
    ledger.clear_parking()
    logger.debug("%s endgame: claims=%d owned=%d parking=%d circuit=%d",
                 alliance, len(claimed), len(owned), parking, circuit)
    return ledger.result()


def finalize(record: MatchRecord) -> tuple[AllianceResult, AllianceResult]:
    return _score_alliance(record, Alliance.RED), _score_alliance(record, Alliance.BLUE)
