"""Submission validator domain service.

Rules are checked in order and the first violation wins:
1. name, email and message are all present and non-empty
2. email has the ``local@domain.tld`` shape
"""

from enum import Enum
from typing import Optional

from app.portfolio_contact.domain.entities.submission import Submission
from app.portfolio_contact.domain.value_objects.email_address import EmailAddress


class ValidationRule(Enum):
    """Validation rules a contact-form candidate can violate."""

    MISSING_FIELD = "missing_field"
    INVALID_EMAIL_FORMAT = "invalid_email_format"


class SubmissionRejected(ValueError):
    """Raised when a candidate violates a validation rule."""

    def __init__(self, rule: ValidationRule, field: str) -> None:
        super().__init__(f"{rule.value}: {field}")
        self.rule = rule
        self.field = field


class SubmissionValidator:
    """Pure validation of raw contact-form fields into a Submission."""

    REQUIRED_FIELDS = ("name", "email", "message")

    def validate(
        self,
        name: Optional[str],
        email: Optional[str],
        message: Optional[str],
        source_address: str,
    ) -> Submission:
        """Validate raw fields and build a Submission.

        Args:
            name: Sender name from the request body.
            email: Sender email from the request body.
            message: Message body from the request body.
            source_address: Client address captured by the caller.

        Returns:
            The validated Submission with values kept verbatim.

        Raises:
            SubmissionRejected: With the first violated rule.
        """
        values = {"name": name, "email": email, "message": message}
        for field_name in self.REQUIRED_FIELDS:
            value = values[field_name]
            if value is None or value == "":
                raise SubmissionRejected(ValidationRule.MISSING_FIELD, field_name)

        try:
            email_address = EmailAddress(email)  # type: ignore[arg-type]
        except ValueError as e:
            raise SubmissionRejected(ValidationRule.INVALID_EMAIL_FORMAT, "email") from e

        return Submission(
            name=name,  # type: ignore[arg-type]
            email=email_address,
            message=message,  # type: ignore[arg-type]
            source_address=source_address,
        )
