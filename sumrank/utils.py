"""
Shared utilities for the SUM ranking system.

This module provides common functions used across multiple modules
to avoid code duplication.
"""

import logging
import shutil
import tempfile
from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP
from pathlib import Path

from sumrank.config import OUTPUT_FOLDER, POINTS_DECIMALS


# --- Logging Setup ---
def setup_logging(name: str | None = None, level: int = logging.INFO) -> logging.Logger:
    """
    Configure and return a logger with consistent formatting.

    Args:
        name: Logger name (usually __name__ from the calling module)
        level: Logging level (default: INFO)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


# --- Numeric Helpers ---
def round_half_away(value: float, decimals: int = POINTS_DECIMALS) -> float:
    """
    Round to a fixed number of decimals, halves away from zero.

    Python's round() uses banker's rounding, so 0.25 -> 0.2. Here 0.25 -> 0.3
    and -0.25 -> -0.3. The value goes through its shortest repr first so
    binary noise like 2.6749999 for 2.675 does not flip the result.

    Args:
        value: Number to round
        decimals: Decimal places to keep

    Returns:
        Rounded float (negative zero normalized to 0.0)
    """
    quantum = Decimal(1).scaleb(-decimals)
    rounded = float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))
    return rounded + 0.0


# --- Date Helpers ---
def coerce_datetime(value) -> datetime | None:
    """
    Convert a timestamp-like value to a datetime.

    Accepts datetime, date, pandas Timestamp and ISO-8601 strings (a trailing
    "Z" is treated as UTC). Missing or unparseable values return None.
    """
    # NaN and NaT are the only values not equal to themselves
    if value is None or value != value:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            return None
    return None


# --- File Operations ---
def cleanup_old_files(pattern: str, keep_file: Path | None = None, folder: Path | None = None) -> list[Path]:
    """
    Remove old files matching pattern, optionally keeping one specific file.

    Args:
        pattern: Glob pattern to match files (e.g., "ranking_snapshot_*.csv")
        keep_file: Path to the file that should NOT be deleted (usually the newest)
        folder: Folder to search in (default: OUTPUT_FOLDER)

    Returns:
        List of deleted file paths
    """
    logger = setup_logging(__name__)
    target_folder = folder or OUTPUT_FOLDER
    deleted = []

    for f in target_folder.glob(pattern):
        if keep_file and f.resolve() == keep_file.resolve():
            continue
        try:
            f.unlink()
            deleted.append(f)
            logger.debug(f"Deleted old file: {f}")
        except OSError as e:
            logger.warning(f"Could not delete {f}: {e}")

    return deleted


def atomic_write_csv(df, path: Path, **kwargs) -> None:
    """
    Write a DataFrame to CSV atomically using a temporary file.

    This prevents data corruption if the write is interrupted.

    Args:
        df: pandas DataFrame to write
        path: Destination path for the CSV file
        **kwargs: Additional arguments to pass to df.to_csv()
    """
    logger = setup_logging(__name__)

    path.parent.mkdir(parents=True, exist_ok=True)

    tmp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            mode='w',
            delete=False,
            suffix='.csv',
            dir=path.parent  # Same filesystem for atomic move
        ) as tmp:
            tmp_path = Path(tmp.name)
        df.to_csv(tmp_path, **kwargs)

        shutil.move(str(tmp_path), str(path))
        logger.debug(f"Atomically wrote {len(df)} rows to {path}")

    except Exception:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise


# --- Validation ---
def validate_columns(columns, required) -> None:
    """
    Validate that a table provides every required column.

    Args:
        columns: Column names present in the table
        required: Column names that must be present

    Raises:
        ValueError: If any required column is missing
    """
    missing = [c for c in required if c not in set(columns)]
    if missing:
        raise ValueError(
            f"Missing required columns: {', '.join(missing)}. "
            f"Found: {', '.join(map(str, columns))}"
        )


__all__ = [
    # Logging
    'setup_logging',
    # Numeric / dates
    'round_half_away',
    'coerce_datetime',
    # File operations
    'cleanup_old_files',
    'atomic_write_csv',
    # Validation
    'validate_columns',
]
