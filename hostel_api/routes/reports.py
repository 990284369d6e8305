"""
Reporting routes: completed-items sales report and dashboard metrics.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from hostel_api.CRUD import report_crud
from hostel_api.schemas.report import CompletedItemsReport, DashboardMetrics
from hostel_api.utils.date_utils import parse_datetime, parse_range_end

from ..auth_utils import AuthPayload, get_current_admin
from ..db import get_db

router = APIRouter(tags=["reports"])


@router.get("/reports/completed-items", response_model=CompletedItemsReport)
def completed_items(
    date_from: Optional[str] = Query(None, alias="dateFrom"),
    date_to: Optional[str] = Query(None, alias="dateTo"),
    db: Session = Depends(get_db),
    current: AuthPayload = Depends(get_current_admin),
):
    """
    Items sold in completed, non-archived orders.

    - **dateFrom**: inclusive lower bound on order creation
    - **dateTo**: inclusive upper bound; a bare YYYY-MM-DD covers the whole day

    Unparseable dates are ignored.
    """
    return report_crud.completed_items_report(
        db,
        date_from=parse_datetime(date_from),
        date_to=parse_range_end(date_to),
    )


@router.get("/dashboard/metrics", response_model=DashboardMetrics)
def dashboard_metrics(
    db: Session = Depends(get_db),
    current: AuthPayload = Depends(get_current_admin),
):
    return report_crud.dashboard_metrics(db)
