from pydantic import BaseModel, EmailStr

from tracker.models.person import Role


class EmailReportRequest(BaseModel):
    recipient_email: EmailStr


class EmailReportQueued(BaseModel):
    status: str = "queued"
    role: Role
    recipient_email: EmailStr
