# users.py
# Field rules for user accounts (create + edit variants).

import re
from enum import Enum
from typing import Any, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

_USERNAME_RE = re.compile(r"[a-zA-Z0-9_]+")


class Unit(str, Enum):
    IMPERIAL = "imperial"
    METRIC = "metric"


class Role(str, Enum):
    USER = "user"
    ADMIN = "admin"


class EditUserSchema(BaseModel):
    """Profile fields a user may change about themselves."""

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        validate_default=True,
        extra="ignore",
    )

    username: str
    display_name: str = Field(..., min_length=3, alias="displayName")
    unit: Unit = Unit.METRIC

    @field_validator("username")
    @classmethod
    def _validate_username(cls, v: str) -> str:
        if len(v) < 3:
            raise ValueError("Username must be at least 3 characters long")
        if len(v) > 20:
            raise ValueError("Username must be at most 20 characters long")
        if not _USERNAME_RE.fullmatch(v):
            raise ValueError("Username can only contain letters, numbers, and underscores")
        return v


class UserSchema(EditUserSchema):
    password: str = Field(..., min_length=8, repr=False)
    role: Role = Role.USER


AddUserSchema = UserSchema


class FieldViolation(BaseModel):
    field: str
    message: str


class UserValidation(BaseModel):
    value: Optional[Union[UserSchema, EditUserSchema]] = None
    errors: List[FieldViolation] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def _violations(exc: ValidationError) -> List[FieldViolation]:
    out: List[FieldViolation] = []
    for err in exc.errors():
        field = ".".join(str(p) for p in err["loc"]) or "<root>"
        ctx_error = (err.get("ctx") or {}).get("error")
        if err["type"] == "value_error" and ctx_error is not None:
            message = str(ctx_error)
        else:
            message = err["msg"]
        out.append(FieldViolation(field=field, message=message))
    return out


def validate_user(data: Mapping[str, Any], *, edit: bool = False) -> UserValidation:
    """
    Validate a candidate user record.

    Every field is checked independently, so all violations come back from a
    single call. On the edit path password and role are not part of the
    schema and are dropped if present.
    """
    schema = EditUserSchema if edit else UserSchema
    try:
        value = schema.model_validate(data)
    except ValidationError as exc:
        return UserValidation(errors=_violations(exc))
    return UserValidation(value=value)
