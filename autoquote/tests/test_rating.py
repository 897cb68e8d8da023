import pytest
from datetime import date

from autoquote.core.enums import CoverageType
from autoquote.schemas.quote import QuoteInput
from autoquote.services.rating import (
    BASE_PREMIUM,
    age_factor,
    applicant_age,
    calculate_breakdown,
    calculate_quote,
    coverage_factor,
    deductible_factor,
    liability_factor,
    make_factor,
    round_half_up,
    state_factor,
    vehicle_age_factor,
    vehicle_factor,
)

LIABILITY_LADDER = [25000, 50000, 100000, 250000, 500000]
DEDUCTIBLE_LADDER = [250, 500, 1000, 2000]


def make_quote(**overrides) -> QuoteInput:
    data = {
        "date_of_birth": date(1994, 6, 1),
        "state": "WY",
        "vehicle_year": 2023,
        "vehicle_make": "Toyota",
        "coverage_type": CoverageType.STANDARD,
        "liability_limit": 100000,
        "deductible": 1000,
    }
    data.update(overrides)
    return QuoteInput.model_construct(**data)


@pytest.mark.pricing
class TestFactors:

    @pytest.mark.parametrize("age,expected", [
        (16, 2.5), (17, 2.5),
        (18, 1.8), (24, 1.8),
        (25, 1.2), (34, 1.2),
        (35, 1.0), (54, 1.0),
        (55, 1.1), (69, 1.1),
        (70, 1.3), (90, 1.3),
    ])
    def test_age_tiers(self, age, expected):
        assert age_factor(age) == expected

    def test_applicant_age_counts_whole_years(self):
        as_of = date(2025, 1, 1)
        assert applicant_age(date(1994, 6, 1), as_of) == 30
        assert applicant_age(date(1995, 1, 1), as_of) == 30
        assert applicant_age(date(1995, 1, 2), as_of) == 29

    @pytest.mark.parametrize("state,expected", [
        ("CA", 1.3), ("NY", 1.3), ("FL", 1.3), ("TX", 1.3), ("MI", 1.3),
        ("VT", 0.8), ("ME", 0.8), ("NH", 0.8), ("IA", 0.8), ("WY", 0.8),
        ("OH", 1.0), ("WA", 1.0),
    ])
    def test_state_factor(self, state, expected):
        assert state_factor(state) == expected

    @pytest.mark.parametrize("vehicle_age,expected", [
        (0, 1.2), (2, 1.2),
        (3, 1.0), (6, 1.0),
        (7, 0.9), (14, 0.9),
        (15, 0.8), (30, 0.8),
    ])
    def test_vehicle_age_tiers(self, vehicle_age, expected):
        assert vehicle_age_factor(vehicle_age) == expected

    @pytest.mark.parametrize("make,expected", [
        ("Ferrari", 2.0), ("porsche", 2.0),
        ("BMW", 1.4), ("Mercedes-Benz", 1.4), ("cadillac", 1.4),
        ("Toyota", 0.9), ("HONDA", 0.9), ("kia", 0.9),
        ("Ford", 1.0), ("Tesla", 1.0),
    ])
    def test_make_factor_is_case_insensitive(self, make, expected):
        assert make_factor(make) == expected

    def test_vehicle_factor_multiplies_sub_factors(self):
        assert vehicle_factor(2023, "Toyota", 2025) == pytest.approx(1.08)
        assert vehicle_factor(2025, "Ferrari", 2025) == pytest.approx(2.4)
        assert vehicle_factor(2000, "Ford", 2025) == pytest.approx(0.8)

    def test_coverage_factor(self):
        assert coverage_factor(CoverageType.LIABILITY) == 0.6
        assert coverage_factor(CoverageType.STANDARD) == 1.0
        assert coverage_factor(CoverageType.FULL) == 1.6
        assert coverage_factor("FULL") == 1.6

    def test_unknown_coverage_defaults_to_one(self):
        assert coverage_factor("PLATINUM") == 1.0

    @pytest.mark.parametrize("limit,expected", [
        (25000, 0.8), (50000, 0.9), (100000, 1.0), (250000, 1.1), (500000, 1.2),
    ])
    def test_liability_ladder(self, limit, expected):
        assert liability_factor(limit) == expected

    @pytest.mark.parametrize("deductible,expected", [
        (250, 1.0), (500, 0.95), (1000, 0.9), (2000, 0.8),
    ])
    def test_deductible_ladder(self, deductible, expected):
        assert deductible_factor(deductible) == expected

    def test_round_half_up(self):
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(2.49) == 2
        assert round_half_up(51.83) == 52


@pytest.mark.pricing
class TestCalculateQuote:

    def test_low_risk_standard_quote(self, evaluation_date):
        result = calculate_quote(make_quote(), as_of=evaluation_date)

        # 800 * 1.2 * 0.8 * (1.2 * 0.9) * 1.0 * 1.0 * 0.9 = 746.496
        assert result.premium == 746
        assert result.monthly_payment == 62
        assert result.breakdown == {"liability": 373, "collision": 224, "comprehensive": 149}

    def test_high_risk_full_quote(self, evaluation_date):
        quote = make_quote(
            date_of_birth=date(2004, 6, 1),
            state="CA",
            vehicle_year=2025,
            vehicle_make="Ferrari",
            coverage_type=CoverageType.FULL,
            liability_limit=500000,
            deductible=250,
        )
        result = calculate_quote(quote, as_of=evaluation_date)

        # 800 * 1.8 * 1.3 * (1.2 * 2.0) * 1.6 * 1.2 * 1.0 = 8626.176
        assert result.premium == 8626
        assert result.monthly_payment == 719
        assert result.breakdown == {
            "liability": 3450,
            "collision": 2588,
            "comprehensive": 1725,
            "personal_injury": 863,
        }

    def test_liability_only_breakdown_equals_premium(self, evaluation_date):
        result = calculate_quote(
            make_quote(coverage_type=CoverageType.LIABILITY), as_of=evaluation_date
        )
        assert result.breakdown == {"liability": result.premium}

    def test_unknown_coverage_type_is_rated_as_standard_with_single_component(self, evaluation_date):
        standard = calculate_quote(make_quote(), as_of=evaluation_date)
        unknown = calculate_quote(make_quote(coverage_type="PLATINUM"), as_of=evaluation_date)

        assert unknown.premium == standard.premium
        assert unknown.breakdown == {"liability": unknown.premium}

    def test_deterministic(self, evaluation_date):
        quote = make_quote(coverage_type=CoverageType.FULL, state="TX")
        results = [calculate_quote(quote, as_of=evaluation_date) for _ in range(5)]
        assert all(r == results[0] for r in results)

    def test_premium_never_below_zero(self, evaluation_date):
        quote = make_quote(
            date_of_birth=date(1980, 1, 1),
            state="VT",
            vehicle_year=1995,
            vehicle_make="Honda",
            coverage_type=CoverageType.LIABILITY,
            liability_limit=25000,
            deductible=2000,
        )
        result = calculate_quote(quote, as_of=evaluation_date)
        assert result.premium > 0
        assert result.monthly_payment >= 0

    def test_defaults_to_today(self):
        quote = make_quote(vehicle_year=date.today().year)
        assert calculate_quote(quote) == calculate_quote(quote, as_of=date.today())

    @pytest.mark.parametrize("coverage_type", list(CoverageType))
    def test_deductible_monotonicity(self, evaluation_date, coverage_type):
        premiums = [
            calculate_quote(
                make_quote(coverage_type=coverage_type, deductible=d), as_of=evaluation_date
            ).premium
            for d in DEDUCTIBLE_LADDER
        ]
        assert premiums == sorted(premiums, reverse=True)

    @pytest.mark.parametrize("coverage_type", list(CoverageType))
    def test_liability_limit_monotonicity(self, evaluation_date, coverage_type):
        premiums = [
            calculate_quote(
                make_quote(coverage_type=coverage_type, liability_limit=limit), as_of=evaluation_date
            ).premium
            for limit in LIABILITY_LADDER
        ]
        assert premiums == sorted(premiums)

    @pytest.mark.parametrize("state,make,coverage_type", [
        ("CA", "BMW", CoverageType.STANDARD),
        ("NY", "Porsche", CoverageType.FULL),
        ("OH", "Ford", CoverageType.STANDARD),
        ("IA", "Kia", CoverageType.FULL),
    ])
    def test_breakdown_sums_close_to_premium(self, evaluation_date, state, make, coverage_type):
        result = calculate_quote(
            make_quote(state=state, vehicle_make=make, coverage_type=coverage_type),
            as_of=evaluation_date,
        )
        assert abs(sum(result.breakdown.values()) - result.premium) <= 2


@pytest.mark.pricing
def test_breakdown_uses_unrounded_premium():
    assert calculate_breakdown(746.496, CoverageType.STANDARD) == {
        "liability": 373,
        "collision": 224,
        "comprehensive": 149,
    }


@pytest.mark.pricing
def test_base_premium():
    assert BASE_PREMIUM == 800
