import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import Body, FastAPI, HTTPException

from sales_report.config import load_settings
from sales_report.engine import analyze_sales_data
from sales_report.errors import InvalidDataError, ReferentialIntegrityError
from sales_report.policies import DEFAULT_OPTIONS
from sales_report.store import store

settings = load_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # Auto-seed on startup so the service is immediately usable
    from scripts.seed_data import seed
    seed(store)
    logger.info("Seeded %d sellers and %d purchase records",
                len(store.sellers), len(store.purchase_records))
    yield


app = FastAPI(
    title="Seller Sales Report Service",
    version="1.0.0",
    description="Profit-ranked seller performance and bonus report",
    lifespan=lifespan,
)


def _build_report(data: Any) -> list[dict]:
    try:
        reports = analyze_sales_data(data, DEFAULT_OPTIONS, settings=settings)
    except (InvalidDataError, ReferentialIntegrityError) as exc:
        raise HTTPException(422, str(exc))
    return [r.model_dump() for r in reports]


# ── Sellers ──────────────────────────────────────────────────────────────────

@app.get("/api/v1/sellers", summary="List all sellers")
def list_sellers():
    return {"sellers": [s.model_dump() for s in store.list_sellers()]}


@app.get("/api/v1/sellers/{seller_id}", summary="Get seller details")
def get_seller(seller_id: str):
    seller = store.get_seller(seller_id)
    if not seller:
        raise HTTPException(404, f"Seller '{seller_id}' not found")
    return seller.model_dump()


# ── Products ─────────────────────────────────────────────────────────────────

@app.get("/api/v1/products", summary="List all products")
def list_products():
    return {"products": [p.model_dump() for p in store.list_products()]}


# ── Reports ──────────────────────────────────────────────────────────────────

@app.get("/api/v1/reports/sellers", summary="Profit-ranked report for all sellers")
def get_sellers_report():
    return {"sellers": _build_report(store.as_dataset())}


@app.get(
    "/api/v1/reports/sellers/{seller_id}",
    summary="One seller's row of the report, with its rank",
)
def get_seller_report(seller_id: str):
    if store.get_seller(seller_id) is None:
        raise HTTPException(404, f"Seller '{seller_id}' not found")
    for rank, row in enumerate(_build_report(store.as_dataset())):
        if row["seller_id"] == seller_id:
            return {"rank": rank, **row}
    raise HTTPException(404, f"Seller '{seller_id}' not found")


@app.post("/api/v1/reports/sellers", summary="Report for a posted dataset")
def post_sellers_report(payload: dict[str, Any] = Body(...)):
    return {"sellers": _build_report(payload)}


# ── Admin ─────────────────────────────────────────────────────────────────────

@app.post("/api/v1/admin/seed", summary="Re-seed demo data")
def reseed():
    from scripts.seed_data import seed
    store.clear()
    seed(store)
    return {
        "status": "seeded",
        "sellers": len(store.sellers),
        "customers": len(store.customers),
        "products": len(store.products),
        "purchase_records": len(store.purchase_records),
    }
