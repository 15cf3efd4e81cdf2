"""Per-seller sales performance report.

Exposes :func:`analyze_sales_data` and the default strategies for programmatic use.
"""

from .engine import analyze_sales_data
from .errors import (
    InvalidDataError,
    InvalidOptionsError,
    ReferentialIntegrityError,
    SalesReportError,
)
from .policies import DEFAULT_OPTIONS, calculate_bonus_by_profit, calculate_simple_revenue

__all__ = [
    "analyze_sales_data",
    "calculate_bonus_by_profit",
    "calculate_simple_revenue",
    "DEFAULT_OPTIONS",
    "InvalidDataError",
    "InvalidOptionsError",
    "ReferentialIntegrityError",
    "SalesReportError",
]
