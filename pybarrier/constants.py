"""Physical and bookkeeping constants shared across modules."""

from __future__ import annotations

from scipy import constants

__all__ = [
    "SECONDS_PER_MONTH",
    "NEVER",
    "NEGLIGIBLE_MASS",
    "EXTRACTION_TOLERANCE",
    "SENTINEL_ISOTOPE",
]

# One timestep is one month of a Julian year [s]
SECONDS_PER_MONTH = constants.Julian_year / 12.0

# Time sentinel: "never degraded" / "never updated"
NEVER = -1

# Source terms at or below this mass are not transferred [kg]
NEGLIGIBLE_MASS = 1e-30

# Absolute slack allowed when extracting mass from an inventory [kg]
EXTRACTION_TOLERANCE = 1e-16

# U-235; key of the zero entry recorded when no concentration is defined
SENTINEL_ISOTOPE = 92235
