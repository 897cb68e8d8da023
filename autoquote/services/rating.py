"""Premium rating engine.

Starts from a base annual premium and applies six multiplicative risk factors
(applicant age, state, vehicle, coverage type, liability limit, deductible).
Pure: the evaluation date is the only notion of "now" and can be passed in.
"""
import math
from datetime import date
from typing import Dict, Optional

from autoquote.core.enums import CoverageType
from autoquote.schemas.quote import QuoteInput, QuoteResult

BASE_PREMIUM = 800.0

AGE_TIERS = [
    (18, 2.5),
    (25, 1.8),
    (35, 1.2),
    (55, 1.0),
    (70, 1.1),
]
SENIOR_AGE_FACTOR = 1.3

HIGH_RISK_STATES = frozenset({"CA", "NY", "FL", "TX", "MI"})
LOW_RISK_STATES = frozenset({"VT", "ME", "NH", "IA", "WY"})
HIGH_RISK_STATE_FACTOR = 1.3
LOW_RISK_STATE_FACTOR = 0.8

VEHICLE_AGE_TIERS = [
    (3, 1.2),
    (7, 1.0),
    (15, 0.9),
]
OLD_VEHICLE_FACTOR = 0.8

SPORTS_MAKES = frozenset({"FERRARI", "LAMBORGHINI", "PORSCHE", "MASERATI"})
LUXURY_MAKES = frozenset({"BMW", "MERCEDES-BENZ", "AUDI", "LEXUS", "ACURA", "INFINITI", "CADILLAC"})
ECONOMY_MAKES = frozenset({"TOYOTA", "HONDA", "HYUNDAI", "KIA", "NISSAN"})

COVERAGE_FACTORS = {
    CoverageType.LIABILITY: 0.6,
    CoverageType.STANDARD: 1.0,
    CoverageType.FULL: 1.6,
}

# (upper bound inclusive, factor)
LIABILITY_TIERS = [
    (25000, 0.8),
    (50000, 0.9),
    (100000, 1.0),
    (250000, 1.1),
]
MAX_LIABILITY_FACTOR = 1.2

# (lower bound inclusive, factor), highest first
DEDUCTIBLE_TIERS = [
    (2000, 0.8),
    (1000, 0.9),
    (500, 0.95),
]

BREAKDOWN_SHARES = {
    CoverageType.LIABILITY: {"liability": 1.0},
    CoverageType.STANDARD: {"liability": 0.5, "collision": 0.3, "comprehensive": 0.2},
    CoverageType.FULL: {
        "liability": 0.4,
        "collision": 0.3,
        "comprehensive": 0.2,
        "personal_injury": 0.1,
    },
}


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def applicant_age(date_of_birth: date, as_of: date) -> int:
    """Whole years between date_of_birth and as_of."""
    before_birthday = (as_of.month, as_of.day) < (date_of_birth.month, date_of_birth.day)
    return as_of.year - date_of_birth.year - int(before_birthday)


def age_factor(age: int) -> float:
    for upper, factor in AGE_TIERS:
        if age < upper:
            return factor
    return SENIOR_AGE_FACTOR


def state_factor(state: str) -> float:
    if state in HIGH_RISK_STATES:
        return HIGH_RISK_STATE_FACTOR
    if state in LOW_RISK_STATES:
        return LOW_RISK_STATE_FACTOR
    return 1.0


def vehicle_age_factor(vehicle_age: int) -> float:
    for upper, factor in VEHICLE_AGE_TIERS:
        if vehicle_age < upper:
            return factor
    return OLD_VEHICLE_FACTOR


def make_factor(make: str) -> float:
    make = make.upper()
    if make in SPORTS_MAKES:
        return 2.0
    if make in LUXURY_MAKES:
        return 1.4
    if make in ECONOMY_MAKES:
        return 0.9
    return 1.0


def vehicle_factor(vehicle_year: int, make: str, current_year: int) -> float:
    return vehicle_age_factor(current_year - vehicle_year) * make_factor(make)


def coverage_factor(coverage_type) -> float:
    return COVERAGE_FACTORS.get(coverage_type, 1.0)


def liability_factor(liability_limit: int) -> float:
    for upper, factor in LIABILITY_TIERS:
        if liability_limit <= upper:
            return factor
    return MAX_LIABILITY_FACTOR


def deductible_factor(deductible: int) -> float:
    for lower, factor in DEDUCTIBLE_TIERS:
        if deductible >= lower:
            return factor
    return 1.0


def calculate_breakdown(premium: float, coverage_type) -> Dict[str, int]:
    """Split the unrounded premium across coverage components.

    Each component is rounded on its own, so the parts may differ from the
    rounded premium by a unit or two.
    """
    shares = BREAKDOWN_SHARES.get(coverage_type, BREAKDOWN_SHARES[CoverageType.LIABILITY])
    return {name: round_half_up(premium * share) for name, share in shares.items()}


def calculate_quote(quote: QuoteInput, as_of: Optional[date] = None) -> QuoteResult:
    if as_of is None:
        as_of = date.today()

    premium = BASE_PREMIUM
    premium *= age_factor(applicant_age(quote.date_of_birth, as_of))
    premium *= state_factor(quote.state)
    premium *= vehicle_factor(quote.vehicle_year, quote.vehicle_make, as_of.year)
    premium *= coverage_factor(quote.coverage_type)
    premium *= liability_factor(quote.liability_limit)
    premium *= deductible_factor(quote.deductible)

    annual = round_half_up(premium)
    return QuoteResult(
        premium=annual,
        monthly_payment=round_half_up(annual / 12),
        breakdown=calculate_breakdown(premium, quote.coverage_type),
    )
