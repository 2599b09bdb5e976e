"""
Error taxonomy for match scoring.

``ScoringError`` subclasses are recoverable: the caller decides whether to
retry or ignore them, and the match record stays consistent. Any state change
the claim rule prescribes (burning a robot's claim slot) has already been
applied when one is raised.

``MatchInvariantError`` subclasses mean the match record can no longer be
trusted. Nothing in this package catches them.
"""
from __future__ import annotations


class ScoringError(Exception):
    """Base class for recoverable scoring outcomes."""


class LocationEmptyError(ScoringError):
    pass


class LocationBlockedError(ScoringError):
    """Token activity attempted at a location holding a valid claim."""


class LocationCappedError(ScoringError):
    pass


class AlreadyClaimedError(ScoringError):
    pass


class ClaimOutsideEndGameError(ScoringError):
    pass


class RobotNotInMatchError(ScoringError, LookupError):
    pass


class DuplicateTeamError(ScoringError, ValueError):
    pass


class MatchInvariantError(RuntimeError):
    """Base class for fatal violations."""


class StackOverflowError(MatchInvariantError):
    pass


class RobotIndexError(MatchInvariantError, IndexError):
    pass


class PhaseConsumedError(MatchInvariantError):
    pass


class InvalidRosterError(MatchInvariantError):
    pass
