"""
Central configuration for the SUM ranking system.

All shared constants and configuration values should be defined here
to avoid duplication and ensure consistency across modules.
"""

from pathlib import Path

# --- Project Paths ---
PROJECT_ROOT = Path(__file__).parent.parent
DATA_FOLDER = PROJECT_ROOT / "data"
OUTPUT_FOLDER = DATA_FOLDER / "processed"
INPUT_FOLDER = DATA_FOLDER / "raw"

# Input/output file patterns
MATCHES_PATTERN = "matches_*.csv"
SNAPSHOT_PREFIX = "ranking_snapshot"
HISTORY_PREFIX = "match_history"

# --- Rating Formula ---
# We = 1 / (10^(-dr/RATING_SCALE) + 1)
RATING_SCALE = 600
POINTS_DECIMALS = 1  # Final deltas are rounded to one decimal place

# Starting points for a team the ratings repository has never seen
INITIAL_RATING = 1500

# Seeding: P = SEEDING_TOP_POINTS - (rank - 1) * SEEDING_RANK_STEP
SEEDING_TOP_POINTS = 1600
SEEDING_RANK_STEP = 4

# --- Actual Result Values (W) ---
RESULT_WIN = 1.0
RESULT_DRAW = 0.5
RESULT_LOSS = 0.0
RESULT_SHOOTOUT_WIN = 0.75
RESULT_SHOOTOUT_LOSS = 0.5

# --- Match Importance (I) ---
IMPORTANCE_WORLD_CUP_LATE = 60      # World Cup finals, QF onwards
IMPORTANCE_WORLD_CUP = 50           # World Cup finals, up to R16
IMPORTANCE_QUALIFIER = 25           # World Cup and confederation qualifiers
IMPORTANCE_CONTINENTAL_LATE = 40    # Confederation finals, QF onwards
IMPORTANCE_CONTINENTAL = 35         # Confederation finals, up to R16
IMPORTANCE_CONFEDERATIONS_CUP = 40
IMPORTANCE_NATIONS_LEAGUE_LATE = 25  # Nations League finals and play-offs
IMPORTANCE_NATIONS_LEAGUE = 15       # Nations League group phase
IMPORTANCE_FRIENDLY_WINDOW = 10      # Friendlies inside a calendar window
IMPORTANCE_DEFAULT = 10              # Unclassified competitions

# Friendlies outside a calendar window. Earlier copies of the cascade disagreed
# on this value (0.5 and 5); 0.5 is the published FIFA figure. Pending a product
# decision, callers can pass an override to match_importance().
NON_WINDOW_FRIENDLY_IMPORTANCE = 0.5

# --- International Match Calendar ---
# (month, first_day, last_day), inclusive, year independent
MATCH_CALENDAR_WINDOWS = (
    (3, 20, 31),   # late March
    (6, 1, 15),    # early June
    (9, 1, 15),    # early September
    (10, 10, 20),  # mid October
    (11, 10, 25),  # mid November
)

# --- Fixture Statuses ---
COMPLETED_STATUSES = frozenset({"FT", "AET", "PEN"})
PENALTY_STATUS = "PEN"

# Columns a match file must provide
REQUIRED_MATCH_COLUMNS = (
    "fixture_id",
    "home_team",
    "away_team",
    "home_goals",
    "away_goals",
    "competition",
    "status",
)
