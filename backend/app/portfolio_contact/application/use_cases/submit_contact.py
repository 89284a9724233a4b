"""Use case for processing a contact-form submission.

Implements the submission pipeline by orchestrating:
- Submission-window admission via RateLimiter
- Body parsing via ContactRequest, field validation via SubmissionValidator
- Best-effort persistence via ContactStore
- Operator notice and sender acknowledgment via Notifier

Stages run strictly in that order; persistence always completes before
any email is sent so an acknowledged message is never silently dropped.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from pydantic import ValidationError

from app.portfolio_contact.application.dto.contact_dto import (
    ContactAcceptedDTO,
    ContactRequest,
)
from app.portfolio_contact.application.exceptions import (
    DispatchError,
    InvalidEmailFormatError,
    InvalidRequestBodyError,
    MissingFieldError,
    PersistenceError,
    RateLimitedError,
    SubmissionFailedError,
)
from app.portfolio_contact.application.interfaces.contact_store import ContactStore
from app.portfolio_contact.application.interfaces.notifier import Notifier
from app.portfolio_contact.application.interfaces.rate_limiter import RateLimiter
from app.portfolio_contact.domain.entities.submission_stage import SubmissionStage
from app.portfolio_contact.domain.services.submission_validator import (
    SubmissionRejected,
    SubmissionValidator,
    ValidationRule,
)

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SubmitContactUseCase:
    """Application service running one submission through the pipeline.

    The global rate-limit window is enforced before this use case runs
    (by middleware, for every path); this use case only counts the
    submission-specific window.
    """

    def __init__(
        self,
        rate_limiter: RateLimiter,
        contact_store: ContactStore,
        notifier: Notifier,
        validator: Optional[SubmissionValidator] = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize the use case with required dependencies.

        Args:
            rate_limiter: Limiter enforcing the submission window.
            contact_store: Persistence adapter (possibly disabled).
            notifier: Notification dispatcher (possibly disabled).
            validator: Field validator; a default one is used if omitted.
            clock: Source of UTC timestamps.
        """
        self._rate_limiter = rate_limiter
        self._contact_store = contact_store
        self._notifier = notifier
        self._validator = validator or SubmissionValidator()
        self._clock = clock

    async def execute(self, body: bytes, source_address: str) -> ContactAcceptedDTO:
        """Execute the submission pipeline.

        The submission window counts the attempt before the body is even
        parsed, so malformed attempts are throttled like any other.

        Args:
            body: Raw JSON request body; an empty body is an empty form.
            source_address: Client network address.

        Returns:
            ContactAcceptedDTO with the completion timestamp.

        Raises:
            RateLimitedError: If the submission window rejected the client.
            InvalidRequestBodyError: If the body is not a JSON object of strings.
            MissingFieldError: If a field is missing or empty.
            InvalidEmailFormatError: If the email is malformed.
            SubmissionFailedError: If storing or notifying failed.
        """
        received_at = self._clock()
        stage = SubmissionStage.RECEIVED

        # 1. Submission window
        decision = await self._rate_limiter.hit(source_address)
        if not decision.allowed:
            logger.warning(
                f"Contact submission rate limited for {source_address} "
                f"(retry after {decision.retry_after_seconds}s)"
            )
            raise RateLimitedError(decision.message, decision.retry_after_seconds)
        stage = SubmissionStage.RATE_CHECKED

        # 2. Validation - no side effects happen before this passes
        try:
            request = ContactRequest.from_body(body)
        except ValidationError as e:
            logger.info(
                f"Contact submission rejected: invalid body ({e.error_count()} errors)"
            )
            raise InvalidRequestBodyError() from e

        try:
            submission = self._validator.validate(
                name=request.name,
                email=request.email,
                message=request.message,
                source_address=source_address,
            )
        except SubmissionRejected as e:
            logger.info(f"Contact submission rejected: {e.rule.value} ({e.field})")
            if e.rule == ValidationRule.MISSING_FIELD:
                raise MissingFieldError(e.field) from e
            raise InvalidEmailFormatError(request.email or "") from e
        stage = SubmissionStage.VALIDATED

        # 3. Persistence must succeed before anyone is notified
        try:
            await self._contact_store.store(submission)
        except PersistenceError as e:
            logger.error(
                f"Contact submission failed after stage '{stage.value}': {e.message}"
            )
            raise SubmissionFailedError(stage) from e
        stage = SubmissionStage.PERSISTED

        # 4. Operator notice, then sender acknowledgment
        try:
            await self._notifier.notify(submission, received_at)
        except DispatchError as e:
            logger.error(
                f"Contact submission failed after stage '{stage.value}': {e.message}"
            )
            raise SubmissionFailedError(stage) from e
        stage = SubmissionStage.NOTIFIED

        completed_at = self._clock()
        stage = SubmissionStage.COMPLETED
        logger.info(f"Contact submission from {source_address} {stage.value}")
        return ContactAcceptedDTO(timestamp=completed_at)
