from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session

from inventory_api.dependencies import get_current_user, get_db
from inventory_api.schemas.report import SalesByCategoryReport, SalesByDateReport, SalesByItemReport
from inventory_api.schemas.stats import DashboardStats
from inventory_api.services import report_service
from inventory_api.services.export_service import (
    XLSX_MEDIA_TYPE,
    build_report_workbook,
    report_filename,
)
from inventory_api.services.stats_service import dashboard_stats

router = APIRouter(prefix="/api/reports", tags=["Reports"])


@router.get("/sales-by-item", response_model=SalesByItemReport)
def sales_by_item(
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    category: Optional[int] = Query(None),
    db: Session = Depends(get_db),
    _user=Depends(get_current_user),
):
    return report_service.sales_by_item(
        db, start_date=start_date, end_date=end_date, category_id=category
    )


@router.get("/sales-by-date", response_model=SalesByDateReport)
def sales_by_date(
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    category: Optional[int] = Query(None),
    group_by: str = Query("day", alias="groupBy", description="day | week | month"),
    db: Session = Depends(get_db),
    _user=Depends(get_current_user),
):
    return report_service.sales_by_date(
        db,
        start_date=start_date,
        end_date=end_date,
        category_id=category,
        group_by=group_by,
    )


@router.get("/sales-by-category", response_model=SalesByCategoryReport)
def sales_by_category(
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    category: Optional[int] = Query(None),
    db: Session = Depends(get_db),
    _user=Depends(get_current_user),
):
    return report_service.sales_by_category(
        db, start_date=start_date, end_date=end_date, category_id=category
    )


@router.get("/dashboard-stats", response_model=DashboardStats)
def report_dashboard_stats(db: Session = Depends(get_db), _user=Depends(get_current_user)):
    return dashboard_stats(db)


@router.get("/{report_name}/export")
def export_report(
    report_name: str,
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    category: Optional[int] = Query(None),
    group_by: str = Query("day", alias="groupBy"),
    db: Session = Depends(get_db),
    _user=Depends(get_current_user),
):
    build = report_service.REPORTS.get(report_name)
    if build is None:
        raise HTTPException(status_code=404, detail="Report not found")

    kwargs = dict(start_date=start_date, end_date=end_date, category_id=category)
    if report_name == "sales-by-date":
        kwargs["group_by"] = group_by
    content = build_report_workbook(report_name, build(db, **kwargs))
    return Response(
        content=content,
        media_type=XLSX_MEDIA_TYPE,
        headers={
            "Content-Disposition": 'attachment; filename="{}"'.format(report_filename(report_name))
        },
    )


__all__ = ["router"]
