from email_validator import EmailNotValidError, validate_email
from fastapi import Path
from pydantic import AfterValidator, BaseModel, constr, field_validator
from typing import Annotated, Optional

MAX_LENGTH = 128
# INT UNSIGNED upper bound; no row can have a larger id
MAX_USER_ID = 4294967295

Name = constr(strip_whitespace=True, min_length=1, max_length=MAX_LENGTH)
Password = constr(min_length=6, max_length=MAX_LENGTH)

# path parameter shared by get / update / delete
UserId = Annotated[int, Path(description="Primary key of the user")]


def in_id_range(user_id: int) -> bool:
    return 1 <= user_id <= MAX_USER_ID


def check_email(v: str) -> str:
    """Check format and length, but keep the address exactly as submitted."""
    if len(v) > MAX_LENGTH:
        raise ValueError(f"email must be at most {MAX_LENGTH} characters")
    try:
        validate_email(v, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"value is not a valid email address: {e}")
    return v


Email = Annotated[str, AfterValidator(check_email)]


class CreateUser(BaseModel):
    name: Name
    email: Email
    password: Password


class UpdateUser(BaseModel):
    """Partial update; only the fields sent by the client are applied."""

    name: Optional[Name] = None
    email: Optional[Email] = None
    password: Optional[Password] = None

    @field_validator("name", "email", "password", mode="before")
    @classmethod
    def not_null(cls, v):
        # columns are NOT NULL, so an explicit null can't mean "leave unchanged"
        if v is None:
            raise ValueError("must not be null")
        return v

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)
