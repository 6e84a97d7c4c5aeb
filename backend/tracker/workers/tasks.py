import logging
import smtplib
from email.message import EmailMessage

from tracker.core.config import get_settings
from tracker.core.database import SessionLocal
from tracker.models.person import Role
from tracker.services.ranges import resolve_range
from tracker.services.reports import rollup_pdf
from tracker.services.roles import get_role_config
from tracker.services.rollup import build_rollup
from tracker.workers.celery_app import celery_app

logger = logging.getLogger(__name__)


def _send_email(to_email: str, subject: str, body: str, attachment: bytes | None = None, attachment_name: str = "report.pdf"):
    settings = get_settings()
    if not settings.SMTP_HOST:
        logger.warning("SMTP_HOST not set, skipping email to %s", to_email)
        return {"status": "smtp_not_configured"}

    msg = EmailMessage()
    msg["Subject"] = subject
    msg["From"] = settings.SMTP_FROM_EMAIL
    msg["To"] = to_email
    msg.set_content(body)

    if attachment:
        msg.add_attachment(attachment, maintype="application", subtype="pdf", filename=attachment_name)

    with smtplib.SMTP(settings.SMTP_HOST, settings.SMTP_PORT) as server:
        if settings.SMTP_USERNAME and settings.SMTP_PASSWORD:
            server.starttls()
            server.login(settings.SMTP_USERNAME, settings.SMTP_PASSWORD)
        server.send_message(msg)

    logger.info("Sent %s to %s", attachment_name, to_email)
    return {"status": "sent"}


@celery_app.task
def send_rollup_report(
    role: str,
    recipient_email: str,
    range_key: str | None = None,
    start_date: str | None = None,
    end_date: str | None = None,
    tz: str | None = None,
    person_id: int | None = None,
) -> dict:
    config = get_role_config(Role(role))
    window = resolve_range(range_key, start_date, end_date, tz)

    db = SessionLocal()
    try:
        rollup = build_rollup(db, config, window, person_id)
        pdf = rollup_pdf(config, rollup)
    finally:
        db.close()

    result = _send_email(
        recipient_email,
        subject=f"{config.label} performance {window.start_date.isoformat()} to {window.end_date.isoformat()}",
        body=f"Attached is the {config.role.value} performance report ({len(rollup.records)} EOD records).",
        attachment=pdf,
        attachment_name=f"{config.role.value}-report.pdf",
    )
    return {"role": config.role.value, "records": len(rollup.records), **result}
