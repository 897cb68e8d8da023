"""Coverage choices offered by the quote wizard.

The liability and deductible ladders double as the validation domains for
``QuoteInput``.
"""
from autoquote.core.enums import CoverageType

COVERAGE_OPTIONS = {
    CoverageType.LIABILITY: {
        "name": "Liability Only",
        "description": "Basic coverage required by law. Covers damage you cause to others.",
        "features": ["Bodily injury liability", "Property damage liability"],
    },
    CoverageType.STANDARD: {
        "name": "Standard Coverage",
        "description": "Good protection including collision and comprehensive coverage.",
        "features": [
            "Bodily injury liability",
            "Property damage liability",
            "Collision coverage",
            "Comprehensive coverage",
        ],
    },
    CoverageType.FULL: {
        "name": "Full Coverage",
        "description": "Maximum protection with all available coverage options.",
        "features": [
            "Bodily injury liability",
            "Property damage liability",
            "Collision coverage",
            "Comprehensive coverage",
            "Personal injury protection",
            "Uninsured motorist coverage",
        ],
    },
}

LIABILITY_LIMITS = [
    {"value": 25000, "label": "$25,000"},
    {"value": 50000, "label": "$50,000"},
    {"value": 100000, "label": "$100,000"},
    {"value": 250000, "label": "$250,000"},
    {"value": 500000, "label": "$500,000"},
]

DEDUCTIBLE_OPTIONS = [
    {"value": 250, "label": "$250"},
    {"value": 500, "label": "$500"},
    {"value": 1000, "label": "$1,000"},
    {"value": 2000, "label": "$2,000"},
]

ALLOWED_LIABILITY_LIMITS = frozenset(o["value"] for o in LIABILITY_LIMITS)
ALLOWED_DEDUCTIBLES = frozenset(o["value"] for o in DEDUCTIBLE_OPTIONS)

DEFAULT_LIABILITY_LIMIT = 100000
DEFAULT_DEDUCTIBLE = 1000
