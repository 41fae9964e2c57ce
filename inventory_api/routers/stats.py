from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from inventory_api.dependencies import get_db, require_admin
from inventory_api.schemas.stats import DashboardStats
from inventory_api.services.stats_service import dashboard_stats

router = APIRouter(prefix="/api/stats", tags=["Dashboard"])


@router.get("", response_model=DashboardStats)
def get_dashboard_stats(db: Session = Depends(get_db), _admin=Depends(require_admin)):
    return dashboard_stats(db)


__all__ = ["router"]
