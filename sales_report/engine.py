import logging
from collections.abc import Mapping
from typing import Any, Optional

from pydantic import ValidationError

from sales_report.config import DEFAULT_SETTINGS, ReportSettings
from sales_report.errors import (
    InvalidDataError,
    InvalidOptionsError,
    ReferentialIntegrityError,
)
from sales_report.models import (
    AnalysisOptions,
    Product,
    PurchaseRecord,
    SalesDataset,
    SellerAccumulator,
    SellerReport,
    TopProduct,
)
from sales_report.policies import BonusStrategy, RevenueStrategy

logger = logging.getLogger(__name__)


def _coerce(model, value: Any):
    if isinstance(value, Mapping):
        return model.model_validate(dict(value))
    return model.model_validate(value, from_attributes=True)


def validate_dataset(data: Any) -> SalesDataset:
    if data is None:
        raise InvalidDataError("Dataset is missing")
    try:
        return _coerce(SalesDataset, data)
    except ValidationError as exc:
        logger.warning("Rejected dataset: %d problem(s)", exc.error_count())
        raise InvalidDataError(f"Invalid dataset: {exc}") from exc


def validate_options(options: Any) -> AnalysisOptions:
    if options is None:
        raise InvalidOptionsError("Options are missing")
    try:
        return _coerce(AnalysisOptions, options)
    except ValidationError as exc:
        logger.warning("Rejected options: %d problem(s)", exc.error_count())
        raise InvalidOptionsError(f"Invalid options: {exc}") from exc


def build_indexes(
    dataset: SalesDataset,
) -> tuple[dict[str, SellerAccumulator], dict[str, Product]]:
    seller_index = {
        s.id: SellerAccumulator(id=s.id, name=f"{s.first_name} {s.last_name}")
        for s in dataset.sellers
    }
    product_index = {p.sku: p for p in dataset.products}
    return seller_index, product_index


def accumulate_record(
    acc: SellerAccumulator,
    record: PurchaseRecord,
    product_index: Mapping[str, Product],
    calculate_revenue: RevenueStrategy,
) -> SellerAccumulator:
    """Return a copy of ``acc`` with ``record`` folded in.

    Revenue comes from the record's total amount; profit is the strategy's item
    revenue minus purchase cost, summed over the record's items. Nothing is
    rounded here.
    """
    profit = acc.profit
    products_sold = dict(acc.products_sold)

    for item in record.items:
        product = product_index.get(item.sku)
        if product is None:
            raise ReferentialIntegrityError("product", item.sku)
        cost = product.purchase_price * item.quantity
        profit += calculate_revenue(item) - cost
        products_sold[item.sku] = products_sold.get(item.sku, 0) + item.quantity

    return acc.model_copy(update={
        "revenue": acc.revenue + record.total_amount,
        "profit": profit,
        "sales_count": acc.sales_count + 1,
        "products_sold": products_sold,
    })


def rank_sellers(sellers: list[SellerAccumulator]) -> list[SellerAccumulator]:
    # sorted() is stable, reverse=True included: equal profits keep index order
    return sorted(sellers, key=lambda s: s.profit, reverse=True)


def top_products(products_sold: Mapping[str, int], limit: int = 10) -> list[TopProduct]:
    ranked = sorted(products_sold.items(), key=lambda kv: kv[1], reverse=True)
    return [TopProduct(sku=sku, quantity=qty) for sku, qty in ranked[:limit]]


def format_report(
    seller: SellerAccumulator,
    bonus: float,
    products: list[TopProduct],
    decimal_places: int = 2,
) -> SellerReport:
    return SellerReport(
        seller_id=seller.id,
        name=seller.name,
        revenue=round(seller.revenue, decimal_places),
        profit=round(seller.profit, decimal_places),
        sales_count=seller.sales_count,
        top_products=products,
        bonus=round(bonus, decimal_places),
    )


def analyze_sales_data(
    data: Any,
    options: Any,
    *,
    settings: Optional[ReportSettings] = None,
) -> list[SellerReport]:
    """Build the per-seller performance report, best profit first.

    ``data`` needs non-empty ``sellers``, ``customers``, ``products`` and
    ``purchase_records``; ``options`` supplies ``calculate_revenue(item)`` and
    ``calculate_bonus(index, total, seller)``. Raises :class:`InvalidDataError`
    or :class:`InvalidOptionsError` before doing any work, and
    :class:`ReferentialIntegrityError` on a dangling seller or sku.
    """
    settings = settings or DEFAULT_SETTINGS

    # ── 1. Validate inputs ───────────────────────────────────────────────────
    dataset = validate_dataset(data)
    opts = validate_options(options)

    # ── 2. Index sellers and products ────────────────────────────────────────
    seller_index, product_index = build_indexes(dataset)
    logger.debug("Indexed %d sellers and %d products",
                 len(seller_index), len(product_index))

    # ── 3. Fold purchase records into seller accumulators ────────────────────
    for record in dataset.purchase_records:
        acc = seller_index.get(record.seller_id)
        if acc is None:
            raise ReferentialIntegrityError("seller", record.seller_id)
        seller_index[record.seller_id] = accumulate_record(
            acc, record, product_index, opts.calculate_revenue
        )

    # ── 4. Rank by profit ────────────────────────────────────────────────────
    ranked = rank_sellers(list(seller_index.values()))

    # ── 5. Apply bonus policy and pick top products ──────────────────────────
    calculate_bonus: BonusStrategy = opts.calculate_bonus
    total = len(ranked)
    reports: list[SellerReport] = []
    for index, seller in enumerate(ranked):
        bonus = calculate_bonus(index, total, seller)
        products = top_products(seller.products_sold, settings.top_products_limit)

        # ── 6. Project and round ─────────────────────────────────────────────
        reports.append(format_report(seller, bonus, products, settings.decimal_places))

    logger.info("Built sales report for %d sellers from %d purchase records",
                total, len(dataset.purchase_records))
    return reports
