"""
Deterministic demo-data generator.

Produces:
  - 5 sellers
  - 12 customers
  - 30 products  (purchase price 5 .. 400)
  - 400 purchase records, 1-4 line items each
    - ~60 % of items carry no discount, the rest 5-30 %
"""

import random

from sales_report.models import Customer, Item, Product, PurchaseRecord, Seller
from sales_report.store import DataStore

SEED = 42
RECORD_COUNT = 400

SELLERS = [
    ("seller_1", "Alexey", "Petrov"),
    ("seller_2", "Anna", "Ivanova"),
    ("seller_3", "Dmitry", "Smirnov"),
    ("seller_4", "Elena", "Kuznetsova"),
    ("seller_5", "Ivan", "Popov"),
]

CUSTOMERS = [
    ("customer_1", "Ekaterina", "Volkova"),
    ("customer_2", "Sergey", "Sokolov"),
    ("customer_3", "Olga", "Lebedeva"),
    ("customer_4", "Pavel", "Kozlov"),
    ("customer_5", "Maria", "Novikova"),
    ("customer_6", "Nikolai", "Morozov"),
    ("customer_7", "Tatiana", "Pavlova"),
    ("customer_8", "Andrei", "Semenov"),
    ("customer_9", "Irina", "Golubeva"),
    ("customer_10", "Mikhail", "Vinogradov"),
    ("customer_11", "Svetlana", "Bogdanova"),
    ("customer_12", "Artem", "Fedorov"),
]


def seed(store: DataStore) -> None:
    rng = random.Random(SEED)

    # ── sellers & customers ──────────────────────────────────────────────────
    for sid, first, last in SELLERS:
        store.add_seller(Seller(id=sid, first_name=first, last_name=last))
    for cid, first, last in CUSTOMERS:
        store.add_customer(Customer(id=cid, first_name=first, last_name=last))

    # ── products ─────────────────────────────────────────────────────────────
    products = [
        Product(
            sku=f"SKU_{n:03d}",
            name=f"Product {n}",
            purchase_price=round(rng.uniform(5, 400), 2),
        )
        for n in range(1, 31)
    ]
    for p in products:
        store.add_product(p)

    # ── purchase records ─────────────────────────────────────────────────────
    # sellers get different shares of the traffic so the ranking is non-trivial
    seller_weights = [5, 4, 3, 2, 1]

    for n in range(1, RECORD_COUNT + 1):
        seller_id = rng.choices([s[0] for s in SELLERS], weights=seller_weights)[0]
        items = []
        for product in rng.sample(products, rng.randint(1, 4)):
            markup   = rng.uniform(1.05, 1.8)
            discount = 0 if rng.random() < 0.6 else rng.choice([5, 10, 15, 20, 30])
            items.append(Item(
                sku=product.sku,
                quantity=rng.randint(1, 10),
                sale_price=round(product.purchase_price * markup, 2),
                discount=discount,
            ))
        total = sum(i.sale_price * i.quantity * (1 - i.discount / 100) for i in items)

        store.add_purchase_record(PurchaseRecord(
            receipt_id=f"receipt_{n}",
            seller_id=seller_id,
            customer_id=rng.choice(CUSTOMERS)[0],
            total_amount=round(total, 2),
            items=items,
        ))
