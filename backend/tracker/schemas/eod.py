import datetime as dt

from pydantic import BaseModel, Field

from tracker.models.person import Role
from tracker.schemas.person import PersonResponse
from tracker.services.field_guide import guide_for
from tracker.services.roles import FieldKind, RoleConfig


class FieldGuideResponse(BaseModel):
    description: str
    include: str
    why: str
    exclude: str
    important: str


class FormField(BaseModel):
    key: str
    name: str
    label: str
    kind: FieldKind
    step: str
    guide: FieldGuideResponse | None = None


class EodFormResponse(BaseModel):
    role: Role
    person: PersonResponse
    fields: list[FormField]

    @classmethod
    def for_role(cls, config: RoleConfig, person) -> "EodFormResponse":
        fields = []
        for f in config.fields:
            guide = guide_for(config.role, f.name)
            fields.append(
                FormField(
                    key=f.key,
                    name=f.name,
                    label=f.label,
                    kind=f.kind,
                    step="0.01" if f.is_currency else "1",
                    guide=FieldGuideResponse(**guide.__dict__) if guide else None,
                )
            )
        return cls(role=config.role, person=PersonResponse.model_validate(person), fields=fields)


class SubmissionSaved(BaseModel):
    success: bool = True


class SubmissionRejected(BaseModel):
    errors: dict[str, str]


class SubmissionConflict(BaseModel):
    existing_date: dt.date = Field(serialization_alias="existingDate")
