from io import StringIO, BytesIO
import csv

from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from tracker.services.roles import RoleConfig
from tracker.services.rollup import AggregateWindow


def records_csv(config: RoleConfig, rollup: AggregateWindow) -> str:
    out = StringIO()
    writer = csv.writer(out)
    writer.writerow(["date", "person_id", "person", *[f.key for f in config.fields], "updated_at"])

    for r in rollup.records:
        writer.writerow([
            r.date.isoformat(),
            r.person_id,
            r.person.full_name if r.person else "",
            *[getattr(r, f.name) for f in config.fields],
            r.updated_at.isoformat(),
        ])

    return out.getvalue()


def _money(value: float) -> str:
    return f"${value:,.2f}"


def rollup_pdf(config: RoleConfig, rollup: AggregateWindow) -> bytes:
    window = rollup.window

    buffer = BytesIO()
    p = canvas.Canvas(buffer, pagesize=letter)
    y = 760
    p.setFont("Helvetica-Bold", 16)
    p.drawString(50, y, f"{config.label} Performance Report")
    y -= 24
    p.setFont("Helvetica", 10)
    p.drawString(
        50,
        y,
        f"{window.start_date.isoformat()} to {window.end_date.isoformat()} ({window.days} days, {window.time_zone})",
    )
    y -= 30

    p.setFont("Helvetica-Bold", 11)
    p.drawString(50, y, "Metric")
    p.drawString(260, y, "Total")
    p.drawString(360, y, "Per day")
    p.drawString(460, y, "vs previous")
    y -= 20
    p.setFont("Helvetica", 11)

    for f in config.fields:
        total = rollup.totals[f.name]
        average = rollup.averages[f.name]
        p.drawString(50, y, f.label)
        p.drawString(260, y, _money(total) if f.is_currency else str(total))
        p.drawString(360, y, _money(average) if f.is_currency else str(average))
        p.drawString(460, y, f"{rollup.deltas[f.name]:+d}%")
        y -= 18

    y -= 16
    p.setFont("Helvetica-Bold", 11)
    p.drawString(50, y, "Rates")
    y -= 20
    p.setFont("Helvetica", 11)
    for rate in rollup.rates:
        p.drawString(50, y, f"{rate.label}: {rate.value}% (previous {rate.previous}%, {rate.delta:+d}%)")
        y -= 18

    p.showPage()
    p.save()
    buffer.seek(0)
    return buffer.read()
