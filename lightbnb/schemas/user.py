"""
Pydantic schemas for user records.
Emails are validated for format but stored exactly as given, since lookups match exactly.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from email_validator import validate_email, EmailNotValidError


class UserBase(BaseModel):
    """Base user schema with common fields."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="User's display name",
        examples=["Devin Sanders"]
    )

    email: str = Field(
        ...,
        max_length=255,
        description="User's email address",
        examples=["tristanjacobs@gmail.com"]
    )

    @field_validator("email")
    @classmethod
    def validate_email_format(cls, v: str) -> str:
        """Reject malformed addresses without rewriting the stored value."""
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(f"Invalid email format: {str(e)}")
        return v

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name cannot be empty")
        return v.strip()


class UserCreate(UserBase):
    """Schema for creating a new user."""

    password: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Password as it should be stored (normally a bcrypt hash)"
    )


class UserRead(BaseModel):
    """User record as stored, including the generated id. Not re-validated."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    password: str
