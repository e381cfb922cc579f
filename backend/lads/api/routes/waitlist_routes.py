import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from lads.config.constants import MSG_COUNT_FAILED, MSG_JOINED, MSG_JOIN_FAILED
from lads.core.exceptions import Conflict, InvalidInput, StorageFailure, WaitlistError
from lads.core.models.waitlist import WaitlistEntry, WaitlistJoinRequest
from lads.core.services.waitlist_service import WaitlistStore, get_waitlist_store

logger = logging.getLogger("lads.api.waitlist")

router = APIRouter()


async def add_to_waitlist(store: WaitlistStore, email: str) -> str:
    # Check if email already exists. Not atomic with the insert below;
    # the unique index (when enabled) catches the concurrent case.
    if await store.find_by_email(email):
        logger.info(f"Email already on waitlist: {email}")
        raise Conflict()

    entry = WaitlistEntry(email=email)
    inserted_id = await store.insert(entry)
    logger.info(f"Email added to waitlist: {email} (id {inserted_id})")
    return inserted_id


@router.get("")
async def get_count(store: WaitlistStore = Depends(get_waitlist_store)):
    try:
        count = await store.count()
    except Exception as e:
        logger.exception(f"Waitlist count error: {e}")
        raise StorageFailure(MSG_COUNT_FAILED, extra={"count": 0})
    return {"count": count}


@router.post("", status_code=status.HTTP_201_CREATED)
async def join_waitlist(
    data: WaitlistJoinRequest,
    store: WaitlistStore = Depends(get_waitlist_store),
):
    """Register an email on the waitlist.

    The email is lower-cased before the duplicate check and before storage,
    so signups differing only in letter case collapse to one entry.
    """
    logger.info(f"Waitlist signup received: {data.email!r}")

    email = data.normalized_email()
    if email is None:
        raise InvalidInput()

    try:
        inserted_id = await add_to_waitlist(store, email)
    except WaitlistError:
        raise
    except Exception as e:
        logger.exception(f"Waitlist signup failed for {email}: {type(e).__name__}: {e}")
        raise StorageFailure(MSG_JOIN_FAILED, details=str(e))

    return JSONResponse(
        content={"success": True, "message": MSG_JOINED, "id": inserted_id},
        status_code=status.HTTP_201_CREATED,
    )
