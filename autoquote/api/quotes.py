"""Premium quote endpoints"""
import logging
from fastapi import APIRouter

from autoquote.core.metrics import quotes_calculated
from autoquote.schemas.quote import CoverageOption, LadderOption, QuoteInput, QuoteOptions, QuoteResult
from autoquote.services.coverage import (
    COVERAGE_OPTIONS,
    DEDUCTIBLE_OPTIONS,
    DEFAULT_DEDUCTIBLE,
    DEFAULT_LIABILITY_LIMIT,
    LIABILITY_LIMITS,
)
from autoquote.services.rating import calculate_quote

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/quotes", tags=["quotes"])


@router.post("/calc", response_model=QuoteResult)
async def calc_quote(req: QuoteInput):
    result = calculate_quote(req)
    quotes_calculated.labels(coverage_type=str(req.coverage_type)).inc()
    logger.info(
        f"Rated {req.coverage_type} quote for {req.state} "
        f"{req.vehicle_year} {req.vehicle_make}: ${result.premium}"
    )
    return result


@router.get("/options", response_model=QuoteOptions)
async def quote_options():
    return QuoteOptions(
        coverage_options=[
            CoverageOption(coverage_type=coverage_type, **option)
            for coverage_type, option in COVERAGE_OPTIONS.items()
        ],
        liability_limits=[LadderOption(**o) for o in LIABILITY_LIMITS],
        deductibles=[LadderOption(**o) for o in DEDUCTIBLE_OPTIONS],
        default_liability_limit=DEFAULT_LIABILITY_LIMIT,
        default_deductible=DEFAULT_DEDUCTIBLE,
    )
