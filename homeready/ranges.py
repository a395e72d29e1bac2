"""Range token resolvers.

The intake flow collects coarse ranges (``"620-659"``, ``"40k-60k"``) rather
than exact figures.  Each ``*_amount`` function maps a token to the value the
model reasons with; each ``*_range`` function maps an exact figure back to the
token whose band contains it.  Bands are half-open on their lower bound, so
``price_range(price_amount(t)) == t`` for every defined token.
"""
from __future__ import annotations

from typing import Optional

from homeready.presets import (
    CREDIT_SCORE_BANDS,
    CREDIT_SCORE_RANGES,
    DOWN_PAYMENT_BANDS,
    DOWN_PAYMENT_DEFAULT,
    DOWN_PAYMENT_RANGES,
    INCOME_BANDS,
    INCOME_DEFAULT,
    INCOME_RANGES,
    MONTHLY_DEBT_BANDS,
    MONTHLY_DEBT_DEFAULT,
    MONTHLY_DEBT_RANGES,
    PRICE_BANDS,
    PRICE_DEFAULT,
    PRICE_RANGES,
)
from homeready.utils import nz


def _lookup(table, token, default):
    if not token:
        return default
    value = table.get(token, default)
    return default if value is None else value


def _band(bands, value, fallback):
    for lower, token in bands:
        if value >= lower:
            return token
    return fallback


def credit_score(token: Optional[str]) -> Optional[int]:
    """Representative credit score, or ``None`` when unknown ("not-sure")."""
    if not token:
        return None
    return CREDIT_SCORE_RANGES.get(token)


def income_amount(token: Optional[str]) -> float:
    return _lookup(INCOME_RANGES, token, INCOME_DEFAULT)


def price_amount(token: Optional[str]) -> float:
    return _lookup(PRICE_RANGES, token, PRICE_DEFAULT)


def down_payment_amount(token: Optional[str]) -> float:
    return _lookup(DOWN_PAYMENT_RANGES, token, DOWN_PAYMENT_DEFAULT)


def monthly_debt_amount(token: Optional[str]) -> float:
    return _lookup(MONTHLY_DEBT_RANGES, token, MONTHLY_DEBT_DEFAULT)


def credit_score_range(score) -> Optional[str]:
    if score is None:
        return None
    return _band(CREDIT_SCORE_BANDS, nz(score), "below-580")


def income_range(income) -> str:
    return _band(INCOME_BANDS, nz(income), "under-40k")


def price_range(price) -> str:
    return _band(PRICE_BANDS, nz(price), "under-400k")


def down_payment_range(amount) -> str:
    return _band(DOWN_PAYMENT_BANDS, nz(amount), "under-10k")


def monthly_debt_range(debt) -> str:
    d = nz(debt)
    if d > 0:
        return _band(MONTHLY_DEBT_BANDS, d, "under-250")
    return "none"
