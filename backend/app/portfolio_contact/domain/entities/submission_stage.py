"""Stages a contact submission passes through while being processed."""

from enum import Enum


class SubmissionStage(Enum):
    """Processing stages of one submission, in order.

    A request leaves the pipeline either at COMPLETED or with an error
    raised from the stage it had reached.
    """

    RECEIVED = "received"
    RATE_CHECKED = "rate_checked"
    VALIDATED = "validated"
    PERSISTED = "persisted"
    NOTIFIED = "notified"
    COMPLETED = "completed"
