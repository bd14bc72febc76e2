"""
Ratings Repository

The engine never reads or writes team points itself. The match processor
goes through a repository with get/put semantics instead, which is where a
real data store plugs in.

A team's running total must be updated by one match at a time, so the
repository hands out per-team locks; locked() acquires several in a fixed
order so two matches sharing teams cannot deadlock.
"""

import threading
from collections.abc import Hashable, Iterable, Mapping
from contextlib import ExitStack, contextmanager
from typing import Protocol

import pandas as pd

from sumrank.config import INITIAL_RATING
from sumrank.elo.engine import calculate_seeding_points


class RatingsRepository(Protocol):
    def get(self, team: Hashable) -> float:
        """Current points for team, creating the team if it is new."""

    def put(self, team: Hashable, points: float) -> None:
        """Store new points for team."""

    def locked(self, *teams: Hashable):
        """Context manager serializing updates to the given teams."""


class InMemoryRatingsRepository:
    """Dict-backed repository; new teams start at INITIAL_RATING."""

    def __init__(self, initial: Mapping | None = None, default_points: float = INITIAL_RATING):
        self._points = dict(initial or {})
        self._default = default_points
        self._guard = threading.Lock()
        self._locks: dict = {}

    @classmethod
    def from_seeding(cls, ranked_teams: Iterable, **kwargs) -> "InMemoryRatingsRepository":
        """Seed points from an initial ranking (best team first)."""
        seeded = {team: calculate_seeding_points(rank) for rank, team in enumerate(ranked_teams, start=1)}
        return cls(seeded, **kwargs)

    def __contains__(self, team):
        with self._guard:
            return team in self._points

    def __len__(self):
        with self._guard:
            return len(self._points)

    def get(self, team):
        with self._guard:
            return self._points.setdefault(team, self._default)

    def put(self, team, points):
        with self._guard:
            self._points[team] = points

    def snapshot(self) -> dict:
        """Copy of all current points."""
        with self._guard:
            return dict(self._points)

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            sorted(self.snapshot().items(), key=lambda item: (-item[1], str(item[0]))),
            columns=['team', 'points'],
        )

    def _lock_for(self, team) -> threading.Lock:
        with self._guard:
            return self._locks.setdefault(team, threading.Lock())

    @contextmanager
    def locked(self, *teams):
        with ExitStack() as stack:
            for team in sorted(set(teams), key=repr):
                stack.enter_context(self._lock_for(team))
            yield
