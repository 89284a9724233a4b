"""Builds the two emails sent for every accepted submission."""

from datetime import datetime
from html import escape

from app.portfolio_contact.domain.entities.notification import (
    NotificationKind,
    NotificationMessage,
)
from app.portfolio_contact.domain.entities.submission import Submission


class NotificationComposer:
    """Composes the operator notice and the sender acknowledgment.

    User-supplied text is HTML-escaped before being embedded in HTML bodies.
    """

    def __init__(self, sender: str, operator_address: str, signature_name: str) -> None:
        """Initialize the composer.

        Args:
            sender: From address for both messages (the mail account).
            operator_address: Where operator notices are delivered.
            signature_name: Name used to sign the acknowledgment.
        """
        self._sender = sender
        self._operator_address = operator_address
        self._signature_name = signature_name

    def operator_notice(
        self, submission: Submission, received_at: datetime
    ) -> NotificationMessage:
        """Build the notice telling the site owner about a new submission."""
        timestamp = received_at.strftime("%Y-%m-%d %H:%M:%S %Z").strip()
        name = escape(submission.name)
        email = escape(submission.email.value)
        message_html = escape(submission.message).replace("\n", "<br>")

        html_body = f"""
        <h3>New Contact Form Submission</h3>
        <p><strong>Name:</strong> {name}</p>
        <p><strong>Email:</strong> {email}</p>
        <p><strong>Message:</strong></p>
        <p>{message_html}</p>
        <p><strong>Timestamp:</strong> {timestamp}</p>
        """
        text_body = f"""
New Contact Form Submission

Name: {submission.name}
Email: {submission.email.value}
Message:
{submission.message}

Timestamp: {timestamp}
        """.strip()

        return NotificationMessage(
            kind=NotificationKind.OPERATOR_NOTICE,
            sender=self._sender,
            recipient=self._operator_address,
            # Header values must stay on one line
            subject=f"Portfolio Contact Form: Message from {' '.join(submission.name.split())}",
            html_body=html_body,
            text_body=text_body,
        )

    def sender_acknowledgment(self, submission: Submission) -> NotificationMessage:
        """Build the automated thank-you reply sent back to the submitter."""
        html_body = f"""
        <h3>Thank you for contacting me!</h3>
        <p>Hi {escape(submission.name)},</p>
        <p>Thank you for reaching out. I have received your message and will get back to you as soon as possible.</p>
        <p>Best regards,<br>{escape(self._signature_name)}</p>
        <hr>
        <p><em>This is an automated response. Please do not reply to this email.</em></p>
        """
        text_body = f"""
Hi {submission.name},

Thank you for reaching out. I have received your message and will get back to you as soon as possible.

Best regards,
{self._signature_name}

--
This is an automated response. Please do not reply to this email.
        """.strip()

        return NotificationMessage(
            kind=NotificationKind.SENDER_ACKNOWLEDGMENT,
            sender=self._sender,
            recipient=submission.email.value,
            subject="Thank you for your message!",
            html_body=html_body,
            text_body=text_body,
        )
