from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Assumptions(BaseSettings):
    """Market assumptions behind every payment estimate.

    Defaults describe a 6.0% 30-year fixed loan. Any value can be overridden
    with a ``HOMEREADY_`` environment variable (``HOMEREADY_ANNUAL_RATE_PCT=6.5``)
    or by passing an explicit instance to the public functions.
    """

    model_config = SettingsConfigDict(env_prefix="HOMEREADY_", extra="ignore", frozen=True)

    annual_rate_pct: float = Field(default=6.0, ge=0, le=25)
    term_years: int = Field(default=30, ge=1, le=50)
    property_tax_rate_pct: float = Field(default=1.2, ge=0)
    insurance_monthly: float = Field(default=100.0, ge=0)
    # Charged on the loan amount regardless of down payment size.
    mortgage_insurance_pct: float = Field(default=0.8, ge=0)
    min_down_payment_pct: float = Field(default=0.035, ge=0, lt=1)


@lru_cache()
def get_assumptions() -> Assumptions:
    """Return the process-wide default assumptions."""
    return Assumptions()


def resolve_assumptions(assumptions=None) -> Assumptions:
    return assumptions if assumptions is not None else get_assumptions()
