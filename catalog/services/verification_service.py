"""
Email verification code service.

Codes are short numeric strings stored in verification_codes with an expiry
timestamp. Issuing a new code retires every earlier unused code for the same
email, so only the latest code can be redeemed. Sending the code by email is
not handled here.
"""

import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional, cast

from supabase import Client

from catalog.config import settings
from catalog.services.user_service import normalize_email
from catalog.utils.constants import VERIFICATION_CODE_LENGTH, VERIFICATION_CODES_TABLE

logger = logging.getLogger(__name__)


def generate_code(length: int = VERIFICATION_CODE_LENGTH) -> str:
    """Return a random numeric code of the given length (leading zeros kept)."""
    return "".join(str(secrets.randbelow(10)) for _ in range(length))


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _parse_timestamp(value: str) -> datetime:
    # PostgREST returns e.g. "2025-11-07T15:46:43.123456+00:00"
    return _as_utc(datetime.fromisoformat(value.replace("Z", "+00:00")))


async def create_verification_code(
    supabase_client: Client,
    email: str,
    ttl_minutes: Optional[int] = None
) -> Dict[str, Any]:
    """
    Issue a new verification code for an email address.

    Args:
        supabase_client: Supabase client
        email: Address the code belongs to
        ttl_minutes: Lifetime of the code (defaults to VERIFICATION_CODE_TTL_MINUTES)

    Returns:
        The created verification_codes row (contains the code)
    """
    email = normalize_email(email)
    if ttl_minutes is None:
        ttl_minutes = settings.VERIFICATION_CODE_TTL_MINUTES

    # Retire earlier codes
    (
        supabase_client.table(VERIFICATION_CODES_TABLE)
        .update({"used": True})
        .eq("email", email)
        .eq("used", False)
        .execute()
    )

    expires_at = datetime.now(timezone.utc) + timedelta(minutes=ttl_minutes)
    code_data = {
        "email": email,
        "code": generate_code(),
        "expires_at": expires_at.isoformat(),
        "used": False,
    }

    result = supabase_client.table(VERIFICATION_CODES_TABLE).insert(code_data).execute()

    if not result.data:
        raise Exception("Failed to create verification code: no data returned")

    logger.info(f"Verification code issued, expires in {ttl_minutes} minutes")

    return cast(Dict[str, Any], result.data[0])


async def verify_code(
    supabase_client: Client,
    email: str,
    code: str,
    now: Optional[datetime] = None
) -> bool:
    """
    Redeem a verification code.

    The code must belong to the email, be unused and not yet expired. A
    successful check marks the code as used so it cannot be redeemed twice.

    Returns:
        True if the code was valid and has been consumed, False otherwise
    """
    email = normalize_email(email)
    now = _as_utc(now) if now else datetime.now(timezone.utc)

    result = (
        supabase_client.table(VERIFICATION_CODES_TABLE)
        .select("*")
        .eq("email", email)
        .eq("code", code.strip())
        .eq("used", False)
        .order("created_at", desc=True)
        .limit(1)
        .execute()
    )

    if not result.data:
        logger.warning("Verification failed: no matching unused code")
        return False

    row = cast(Dict[str, Any], result.data[0])

    if _parse_timestamp(row["expires_at"]) <= now:
        logger.warning(f"Verification failed: code {row['id']} expired")
        return False

    # Only one concurrent redemption can flip used from false to true
    consumed = (
        supabase_client.table(VERIFICATION_CODES_TABLE)
        .update({"used": True})
        .eq("id", row["id"])
        .eq("used", False)
        .execute()
    )

    if not consumed.data:
        logger.warning(f"Verification failed: code {row['id']} already redeemed")
        return False

    logger.info(f"Verification code {row['id']} redeemed")
    return True
