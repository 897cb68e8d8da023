from datetime import date
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, field_validator

from autoquote.core.enums import CoverageType
from autoquote.services.coverage import ALLOWED_DEDUCTIBLES, ALLOWED_LIABILITY_LIMITS

MIN_VEHICLE_YEAR = 1990


class QuoteInput(BaseModel):
    """Completed wizard data handed to the rating engine."""

    model_config = ConfigDict(frozen=True)

    date_of_birth: date
    state: str
    vehicle_year: int
    vehicle_make: str
    coverage_type: CoverageType
    liability_limit: int
    deductible: int

    @field_validator("date_of_birth")
    @classmethod
    def dob_not_in_future(cls, v: date) -> date:
        if v > date.today():
            raise ValueError("date_of_birth cannot be in the future")
        return v

    @field_validator("state")
    @classmethod
    def two_letter_state(cls, v: str) -> str:
        v = v.strip().upper()
        if len(v) != 2 or not v.isalpha():
            raise ValueError("state must be a two-letter code")
        return v

    @field_validator("vehicle_year")
    @classmethod
    def vehicle_year_in_range(cls, v: int) -> int:
        latest = date.today().year + 1
        if not MIN_VEHICLE_YEAR <= v <= latest:
            raise ValueError(f"vehicle_year must be between {MIN_VEHICLE_YEAR} and {latest}")
        return v

    @field_validator("vehicle_make")
    @classmethod
    def make_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("vehicle_make is required")
        return v

    @field_validator("liability_limit")
    @classmethod
    def liability_on_ladder(cls, v: int) -> int:
        if v not in ALLOWED_LIABILITY_LIMITS:
            raise ValueError(f"liability_limit must be one of {sorted(ALLOWED_LIABILITY_LIMITS)}")
        return v

    @field_validator("deductible")
    @classmethod
    def deductible_on_ladder(cls, v: int) -> int:
        if v not in ALLOWED_DEDUCTIBLES:
            raise ValueError(f"deductible must be one of {sorted(ALLOWED_DEDUCTIBLES)}")
        return v


class QuoteResult(BaseModel):
    premium: int
    monthly_payment: int
    breakdown: Dict[str, int]


class CoverageOption(BaseModel):
    coverage_type: CoverageType
    name: str
    description: str
    features: List[str]


class LadderOption(BaseModel):
    value: int
    label: str


class QuoteOptions(BaseModel):
    coverage_options: List[CoverageOption]
    liability_limits: List[LadderOption]
    deductibles: List[LadderOption]
    default_liability_limit: int
    default_deductible: int
