"""
SUM Ranking System - Core Package

This package contains the core modules for:
- Tournament classification (sumrank.registry)
- SUM Elo rating computation (sumrank.elo)
- Fixture assembly (sumrank.ingestion)
- Ratings persistence seam, match processing and snapshots (sumrank.rankings)
- Shared configuration and utilities
"""

from sumrank.config import *
