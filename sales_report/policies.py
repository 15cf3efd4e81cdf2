"""Default revenue and bonus strategies.

Both are plain functions; any callable with the same signature can be passed
to :func:`sales_report.engine.analyze_sales_data` instead.
"""

from typing import Protocol

from sales_report.models import AnalysisOptions, Item, SellerAccumulator


class RevenueStrategy(Protocol):
    def __call__(self, item: Item) -> float: ...


class BonusStrategy(Protocol):
    def __call__(self, index: int, total: int, seller: SellerAccumulator) -> float: ...


# Share of profit paid out by rank position
TOP_RATE     = 0.15
PODIUM_RATE  = 0.10
DEFAULT_RATE = 0.05
LAST_RATE    = 0.00


def calculate_simple_revenue(item: Item) -> float:
    """Revenue of one line item after its percentage discount."""
    discount = 1 - item.discount / 100
    return item.sale_price * item.quantity * discount


def bonus_rate(index: int, total: int) -> float:
    # First match wins: a lone seller is both first and last and gets TOP_RATE.
    match index:
        case 0:
            return TOP_RATE
        case _ if index == total - 1:
            return LAST_RATE
        case 1 | 2:
            return PODIUM_RATE
        case _:
            return DEFAULT_RATE


def calculate_bonus_by_profit(index: int, total: int, seller: SellerAccumulator) -> float:
    return seller.profit * bonus_rate(index, total)


DEFAULT_OPTIONS = AnalysisOptions(
    calculate_revenue=calculate_simple_revenue,
    calculate_bonus=calculate_bonus_by_profit,
)
