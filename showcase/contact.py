# showcase/contact.py
import logging
from typing import Any, List, Optional, Tuple

from fastapi import APIRouter, Request
from pydantic import BaseModel

from .envelope import MISSING_FIELDS, failure, success

logger = logging.getLogger(__name__)

CONTACT_FIELDS = ("name", "email", "message")

router = APIRouter(prefix="/api/v1", tags=["contact"])


class ContactMessage(BaseModel):
    name: str
    email: str
    message: str


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or value == ""


def validate_contact(payload: Any) -> Tuple[Optional[ContactMessage], List[str]]:
    """Return (message, missing fields).

    Non-object payloads count as empty. A field is missing unless it is a
    non-empty string.
    """
    if not isinstance(payload, dict):
        payload = {}
    missing = [f for f in CONTACT_FIELDS if _is_blank(payload.get(f))]
    if missing:
        return None, missing
    return ContactMessage(**{f: payload[f] for f in CONTACT_FIELDS}), []


async def _read_json(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError:
        return None


@router.post("/contact")
async def submit_contact(request: Request):
    contact, missing = validate_contact(await _read_json(request))
    if contact is None:
        logger.info("Rejected contact submission, missing %s", ", ".join(missing))
        # need always lists every field, whichever were absent
        return failure(MISSING_FIELDS, 400, need=list(CONTACT_FIELDS))

    logger.info("Contact message received from %s <%s>", contact.name, contact.email)
    return success(contact.model_dump(), message="received")
