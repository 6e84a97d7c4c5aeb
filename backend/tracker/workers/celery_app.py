from celery import Celery

from tracker.core.config import get_settings

settings = get_settings()

celery_app = Celery(
    "eod_tracker",
    broker=settings.CELERY_BROKER_URL,
    backend=settings.CELERY_RESULT_BACKEND,
)
