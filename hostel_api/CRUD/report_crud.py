from collections import Counter
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from hostel_api.models.order import Order, OrderItem, OrderStatus
from hostel_api.utils.date_utils import last_n_days


def completed_items_report(
    db: Session,
    date_from: Optional[datetime] = None,
    date_to: Optional[datetime] = None,
) -> dict:
    """
    Sales per menu item over completed, non-archived orders.

    Orders and their lines come back from one SELECT (outer join, so orders
    without lines still count), which keeps every figure on the same
    snapshot of the data.
    """
    query = db.query(
        Order.id,
        Order.customer,
        OrderItem.name,
        OrderItem.quantity,
        OrderItem.line_total,
    ).outerjoin(
        OrderItem, OrderItem.order_id == Order.id
    ).filter(
        Order.status == OrderStatus.COMPLETED,
        Order.archived.is_(False),
    )

    if date_from is not None:
        query = query.filter(Order.created_at >= date_from)
    if date_to is not None:
        query = query.filter(Order.created_at <= date_to)

    groups = {}
    order_ids = set()
    customers = set()

    for order_id, customer, name, quantity, total in query.all():
        order_ids.add(order_id)
        if customer and customer.strip():
            customers.add(customer.strip())
        if name is None:
            continue
        group = groups.setdefault(
            name, {"qty": 0, "total": Decimal("0"), "times_ordered": 0})
        group["qty"] += quantity or 0
        group["total"] += Decimal(total or 0)
        group["times_ordered"] += 1

    ranked = sorted(groups.items(), key=lambda kv: (-kv[1]["total"], kv[0]))
    items = [
        {
            "name": name,
            "qty": g["qty"],
            "total": float(g["total"]),
            "times_ordered": g["times_ordered"],
        }
        for name, g in ranked
    ]

    return {
        "items": items,
        "grand_total": float(sum((g["total"] for g in groups.values()), Decimal("0"))),
        "order_count": len(order_ids),
        "unique_customers": len(customers),
    }


def dashboard_metrics(db: Session, today: Optional[date] = None) -> dict:
    """Order counts per status plus the last 7 days of orders and revenue"""
    rows = db.query(
        Order.status, Order.archived, Order.total, Order.created_at
    ).all()

    status_counts = Counter({s.value: 0 for s in OrderStatus})
    orders_per_day = Counter()
    revenue_per_day = Counter()
    total_revenue = Decimal("0")
    archived_count = 0

    for order_status, archived, total, created_at in rows:
        status_counts[order_status.value] += 1
        if archived:
            archived_count += 1
        day = created_at.date() if created_at else None
        orders_per_day[day] += 1
        # archived orders stay out of revenue, same as the completed-items report
        if order_status == OrderStatus.COMPLETED and not archived:
            total_revenue += Decimal(total or 0)
            revenue_per_day[day] += Decimal(total or 0)

    days = last_n_days(7, today)
    return {
        "total_orders": len(rows),
        "active_orders": len(rows) - archived_count,
        "archived_orders": archived_count,
        "status_counts": dict(status_counts),
        "total_revenue": float(total_revenue),
        "daily_orders": [
            {"date": d.isoformat(), "count": orders_per_day.get(d, 0)} for d in days
        ],
        "daily_revenue": [
            {"date": d.isoformat(), "revenue": float(revenue_per_day.get(d, 0))} for d in days
        ],
    }
