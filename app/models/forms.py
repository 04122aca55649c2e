"""Form-related Pydantic models"""
from pydantic import BaseModel, ConfigDict, field_validator
from typing import Any, Optional

from app.errors import ValidationError


class FormSubmission(BaseModel):
    """A validated inquiry; lives only for one request"""
    model_config = ConfigDict(frozen=True)

    name: str
    email: str
    details: str


class FormSubmitRequest(BaseModel):
    """Form submission request

    Fields are optional here so that an absent field is reported as a
    400 by the handler instead of a 422 by the framework.
    """
    name: Optional[str] = None
    email: Optional[str] = None
    details: Optional[str] = None

    @field_validator("name", "email", "details", mode="before")
    @classmethod
    def scalar_to_text(cls, value: Any) -> Any:
        """Accept numbers and booleans as text; zero and false count as missing"""
        if isinstance(value, bool):
            return "true" if value else None
        if isinstance(value, (int, float)):
            if not value:
                return None
            if isinstance(value, float) and value.is_integer():
                value = int(value)
            return str(value)
        return value

    def to_submission(self) -> FormSubmission:
        """Return the immutable submission, or raise ValidationError if any field is blank"""
        values = {
            "name": self.name,
            "email": self.email,
            "details": self.details,
        }
        missing = [field for field, value in values.items() if not value or not value.strip()]
        if missing:
            raise ValidationError()
        return FormSubmission(**values)


class FormSubmitResponse(BaseModel):
    """Form submission response (at least one side effect landed)"""
    message: str
    email: bool
    sheet: bool


class FormSubmitErrorResponse(BaseModel):
    """Form submission response when every dispatch failed"""
    error: str
    email: bool
    sheet: bool


class ErrorResponse(BaseModel):
    """Request rejected before any dispatch"""
    error: str
