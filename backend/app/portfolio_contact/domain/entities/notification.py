"""Outgoing notification messages produced for an accepted submission."""

from dataclasses import dataclass
from enum import Enum


class NotificationKind(Enum):
    """Which of the two per-submission messages this is."""

    OPERATOR_NOTICE = "operator_notice"
    SENDER_ACKNOWLEDGMENT = "sender_acknowledgment"


@dataclass(frozen=True)
class NotificationMessage:
    """A transient email handed to the mail transport and discarded after sending.

    Attributes:
        kind: Operator notice or sender acknowledgment.
        sender: From address (the configured mail account).
        recipient: To address.
        subject: Subject line.
        html_body: HTML part.
        text_body: Plain-text alternative.
    """

    kind: NotificationKind
    sender: str
    recipient: str
    subject: str
    html_body: str
    text_body: str
