"""
Reporting and dashboard schemas.
"""
from typing import Dict, List

from .base import CamelModel


class CompletedItemGroup(CamelModel):
    name: str
    qty: int
    total: float
    times_ordered: int


class CompletedItemsReport(CamelModel):
    items: List[CompletedItemGroup]
    grand_total: float
    order_count: int
    unique_customers: int


class DailyCount(CamelModel):
    date: str
    count: int


class DailyRevenue(CamelModel):
    date: str
    revenue: float


class DashboardMetrics(CamelModel):
    total_orders: int
    active_orders: int
    archived_orders: int
    status_counts: Dict[str, int]
    total_revenue: float
    daily_orders: List[DailyCount]
    daily_revenue: List[DailyRevenue]
