from tracker.api.routes import analytics, eod, people, reports

__all__ = [
    "people",
    "eod",
    "analytics",
    "reports",
]
