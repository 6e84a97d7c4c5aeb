from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from tracker.core.database import get_db
from tracker.core.deps import range_window, role_config
from tracker.schemas.analytics import RollupResponse
from tracker.services.ranges import RangeWindow
from tracker.services.roles import RoleConfig
from tracker.services.rollup import build_rollup

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get("/{role}", response_model=RollupResponse)
def role_rollup(
    person_id: int | None = Query(default=None, alias="personId"),
    config: RoleConfig = Depends(role_config),
    window: RangeWindow = Depends(range_window),
    db: Session = Depends(get_db),
):
    rollup = build_rollup(db, config, window, person_id)
    return RollupResponse.from_rollup(config, rollup)
