from fastapi import APIRouter

from tracker.api.routes import analytics, eod, people, reports

api_router = APIRouter()
api_router.include_router(people.router)
api_router.include_router(eod.router)
api_router.include_router(analytics.router)
api_router.include_router(reports.router)
