import datetime as dt

from sqlalchemy import Date, DateTime, Float, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, declared_attr, mapped_column, relationship

from tracker.core.database import Base


class MetricRecordMixin:
    """Columns shared by every role's EOD table. One row per (person_id, date)."""

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    person_id: Mapped[int] = mapped_column(ForeignKey("people.id"), nullable=False, index=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    created_at: Mapped[dt.datetime] = mapped_column(DateTime, default=dt.datetime.utcnow, nullable=False)
    updated_at: Mapped[dt.datetime] = mapped_column(
        DateTime, default=dt.datetime.utcnow, onupdate=dt.datetime.utcnow, nullable=False
    )

    @declared_attr
    def person(cls):
        return relationship("Person", lazy="joined")


class DialerMetrics(MetricRecordMixin, Base):
    __tablename__ = "dialer_metrics"
    __table_args__ = (UniqueConstraint("person_id", "date", name="uq_dialer_metrics_person_date"),)

    dials: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    connects: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    conversations: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    qualified_conversations: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    meetings_scheduled: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    meetings_set: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    meetings_showed: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    no_shows: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    closed_deals: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    revenue_generated: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    cash_collected: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)


class SetterMetrics(MetricRecordMixin, Base):
    __tablename__ = "setter_metrics"
    __table_args__ = (UniqueConstraint("person_id", "date", name="uq_setter_metrics_person_date"),)

    daily_outbound_conversations: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    inbound_conversations: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    follow_ups: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    calls_proposed: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    total_high_ticket_sales_calls_booked: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    sets_scheduled: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    sets_taken: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    closed_sets: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    revenue_generated: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    new_cash_collected: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    recurring_cash_collected: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    downsell_revenue: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)


class CloserMetrics(MetricRecordMixin, Base):
    __tablename__ = "closer_metrics"
    __table_args__ = (UniqueConstraint("person_id", "date", name="uq_closer_metrics_person_date"),)

    daily_calls_booked: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    shows: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    no_shows: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    cancelled: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    disqualified: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    rescheduled: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    offers_made: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    calls_taken: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    closes: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    cash_collected: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    revenue_generated: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
