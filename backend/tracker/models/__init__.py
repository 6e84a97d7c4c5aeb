from tracker.models.person import Person, Role
from tracker.models.metrics import CloserMetrics, DialerMetrics, MetricRecordMixin, SetterMetrics

__all__ = [
    "Person",
    "Role",
    "MetricRecordMixin",
    "DialerMetrics",
    "SetterMetrics",
    "CloserMetrics",
]
