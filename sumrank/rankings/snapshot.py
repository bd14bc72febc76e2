"""
Ranking Snapshots

A snapshot is the full table of teams ordered by points for one date,
with each team's previous rank and rank movement. Snapshots are kept as
one CSV per date; writing a snapshot for a date that already has one
replaces it.
"""

from datetime import date, datetime
from pathlib import Path

import pandas as pd

from sumrank.config import OUTPUT_FOLDER, SNAPSHOT_PREFIX
from sumrank.utils import atomic_write_csv, round_half_away, setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)

SNAPSHOT_COLUMNS = ['snapshot_date', 'rank', 'team', 'points', 'previous_rank', 'rank_change']


def build_ranking_snapshot(points, previous_ranks=None, snapshot_date=None) -> pd.DataFrame:
    """
    Rank teams by points.

    Teams on equal points share the better rank. rank_change is
    previous_rank - rank (positive = moved up) and 0 for teams without a
    previous rank.

    Args:
        points: Mapping of team -> points
        previous_ranks: Mapping of team -> rank in the previous snapshot
        snapshot_date: Date stamped on every row (default: today)

    Returns:
        DataFrame with SNAPSHOT_COLUMNS, best team first
    """
    snapshot_date = pd.Timestamp(snapshot_date or date.today()).date().isoformat()
    previous_ranks = previous_ranks or {}

    if not points:
        return pd.DataFrame(columns=SNAPSHOT_COLUMNS)

    df = pd.DataFrame({'team': list(points.keys()), 'points': list(points.values())})
    df['points'] = df['points'].map(round_half_away)
    df = df.sort_values(['points', 'team'], ascending=[False, True]).reset_index(drop=True)

    df['rank'] = df['points'].rank(method='min', ascending=False).astype(int)
    df['previous_rank'] = df['team'].map(previous_ranks).astype('Int64')
    df['rank_change'] = (df['previous_rank'] - df['rank']).fillna(0).astype(int)
    df['snapshot_date'] = snapshot_date

    return df[SNAPSHOT_COLUMNS]


def snapshot_path(folder: Path, snapshot_date) -> Path:
    stamp = pd.Timestamp(snapshot_date).strftime('%Y%m%d')
    return folder / f"{SNAPSHOT_PREFIX}_{stamp}.csv"


def save_ranking_snapshot(df: pd.DataFrame, folder: Path = OUTPUT_FOLDER, snapshot_date=None) -> Path:
    """Write the snapshot for its date, replacing any earlier one for that date."""
    path = snapshot_path(folder, snapshot_date or date.today())
    if path.exists():
        logger.info(f"Replacing existing snapshot {path.name}")
    atomic_write_csv(df, path, index=False)
    logger.info(f"Saved ranking snapshot for {len(df)} teams to {path}")
    return path


def _snapshot_date(path: Path) -> date | None:
    stamp = path.stem.removeprefix(f"{SNAPSHOT_PREFIX}_")
    try:
        return datetime.strptime(stamp, '%Y%m%d').date()
    except ValueError:
        return None


def load_latest_snapshot(folder: Path = OUTPUT_FOLDER, before=None) -> pd.DataFrame | None:
    """
    Load the most recent snapshot, optionally only those dated strictly before a date.

    Returns:
        Snapshot DataFrame, or None if there is none
    """
    cutoff = pd.Timestamp(before).date() if before is not None else None
    candidates = []
    for path in folder.glob(f"{SNAPSHOT_PREFIX}_*.csv"):
        stamp = _snapshot_date(path)
        if stamp is None or (cutoff is not None and stamp >= cutoff):
            continue
        candidates.append((stamp, path))

    if not candidates:
        return None

    _, path = max(candidates)
    logger.info(f"Loading previous snapshot {path}")
    return pd.read_csv(path, dtype={'team': str})
