"""
Form submission models.

SubmissionInput is what the landing page posts, CmsItemPayload is what gets
sent to the Webflow collection, and SubmissionSuccess / SubmissionFailure are
the two shapes the endpoint answers with.
"""

import json
from typing import Literal, Optional, Union

from pydantic import BaseModel, ValidationError

from formbridge.core.errors import SubmissionValidationError

REQUIRED_FIELDS_MESSAGE = "Name and email are required fields"


class SubmissionInput(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    message: Optional[str] = None


class CmsFieldData(BaseModel):
    name: str
    email: str
    phone: str = ""
    message: str = ""


class CmsItemPayload(BaseModel):
    fieldData: CmsFieldData

    @classmethod
    def from_submission(cls, submission: SubmissionInput) -> "CmsItemPayload":
        return cls(
            fieldData=CmsFieldData(
                name=submission.name,
                email=submission.email,
                phone=submission.phone or "",
                message=submission.message or "",
            )
        )


class SubmissionSuccess(BaseModel):
    success: Literal[True] = True
    message: str = "Form submitted successfully"
    itemId: Optional[str] = None


class SubmissionFailure(BaseModel):
    success: Literal[False] = False
    error: str


HandlerResult = Union[SubmissionSuccess, SubmissionFailure]


def parse_submission(raw_body: bytes) -> SubmissionInput:
    """
    Parse a raw request body into a SubmissionInput.

    An empty body is treated as an empty object so it falls through to the
    required field check. Unknown keys are ignored.

    Raises:
        SubmissionValidationError: body is not JSON, not an object, or a
            known field is not a string
    """
    if not raw_body or not raw_body.strip():
        return SubmissionInput()

    try:
        data = json.loads(raw_body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise SubmissionValidationError("Request body must be valid JSON")

    if not isinstance(data, dict):
        raise SubmissionValidationError("Request body must be a JSON object")

    try:
        return SubmissionInput.model_validate(data)
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err.get("loc"))
        raise SubmissionValidationError(f"Form fields must be strings: {fields}")


def validate_required(submission: SubmissionInput) -> SubmissionInput:
    """Ensure name and email are present and non-empty."""
    if not submission.name or not submission.email:
        raise SubmissionValidationError(REQUIRED_FIELDS_MESSAGE)
    return submission
