"""Contact form submission endpoint.

POST /api/contact runs the submission pipeline: submission rate window,
body parsing and validation, optional storage, then the two notification
emails. The body is read raw so that malformed attempts still count
toward the submission window.
"""

from fastapi import APIRouter, Depends, Request

from app.portfolio_contact.application.dto.contact_dto import (
    ContactAcceptedDTO,
    ContactRequest,
)
from app.portfolio_contact.application.use_cases.submit_contact import (
    SubmitContactUseCase,
)
from app.portfolio_contact.presentation.api.dependencies import (
    get_client_address,
    get_submit_contact_use_case,
)

router = APIRouter()


@router.post(
    "/contact",
    response_model=ContactAcceptedDTO,
    openapi_extra={
        "requestBody": {
            "required": False,
            "content": {
                "application/json": {"schema": ContactRequest.model_json_schema()}
            },
        }
    },
)
async def submit_contact(
    request: Request,
    source_address: str = Depends(get_client_address),
    use_case: SubmitContactUseCase = Depends(get_submit_contact_use_case),
) -> ContactAcceptedDTO:
    """Accept a contact form submission.

    Args:
        request: Incoming request; its body holds name, email and message.
        source_address: Client address (injected).
        use_case: Submission pipeline (injected).

    Returns:
        Confirmation message with completion timestamp.

    Raises:
        InvalidRequestBodyError / MissingFieldError / InvalidEmailFormatError: 400.
        RateLimitedError: 429.
        SubmissionFailedError: 500 when storing or notifying failed.
    """
    body = await request.body()
    return await use_case.execute(body, source_address)
