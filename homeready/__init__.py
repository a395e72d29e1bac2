"""Home-buying readiness scoring.

This module also exposes the package version for runtime display."""
from importlib import metadata

from homeready.calculators import calculate_affordability, estimate_monthly_payment, max_price_for_dti
from homeready.config import Assumptions, get_assumptions
from homeready.engine import calculate_score, calculate_score_at_price, calculate_score_from_values
from homeready.models import ScoreInput, ScoreResult, ScoreValuesInput

try:
    __version__ = metadata.version("homeready")
except metadata.PackageNotFoundError:  # pragma: no cover - during local dev
    __version__ = "0.1.0"

__all__ = [
    "Assumptions",
    "ScoreInput",
    "ScoreResult",
    "ScoreValuesInput",
    "__version__",
    "calculate_affordability",
    "calculate_score",
    "calculate_score_at_price",
    "calculate_score_from_values",
    "estimate_monthly_payment",
    "get_assumptions",
    "max_price_for_dti",
]
