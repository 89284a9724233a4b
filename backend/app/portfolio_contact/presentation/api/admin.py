"""Admin endpoint listing stored contact messages.

Requires ``Authorization: Bearer <ADMIN_TOKEN>``.
"""

import logging

from fastapi import APIRouter, Depends

from app.portfolio_contact.application.dto.contact_dto import StoredContactDTO
from app.portfolio_contact.application.exceptions import (
    InternalError,
    StoreUnavailableError,
)
from app.portfolio_contact.application.use_cases.contact_queries import (
    ListRecentMessagesUseCase,
)
from app.portfolio_contact.presentation.api.dependencies import (
    get_list_messages_use_case,
    require_admin_token,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/admin/messages",
    response_model=list[StoredContactDTO],
    dependencies=[Depends(require_admin_token)],
)
async def list_messages(
    use_case: ListRecentMessagesUseCase = Depends(get_list_messages_use_case),
) -> list[StoredContactDTO]:
    """List the most recent contact messages, newest first.

    Raises:
        UnauthorizedError / InvalidTokenError: 401.
        StoreUnavailableError: 503 if no database is available.
        InternalError: 500 on read failure.
    """
    try:
        return await use_case.execute()
    except StoreUnavailableError:
        raise
    except Exception as e:
        logger.exception(f"Admin messages error: {e}")
        raise InternalError("Internal server error") from e
