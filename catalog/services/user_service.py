"""
Catalog user service.

Handles registration, credential checks and the approval workflow for
catalog_users. New users start as 'pending'; an administrator moves them to
'approved' or 'rejected'. Only approved users may log in.

Passwords are hashed with werkzeug before they leave this module. Hashes are
never returned to the HTTP layer (see public_user) and never logged.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, cast

from supabase import Client
from werkzeug.security import check_password_hash, generate_password_hash

from catalog.utils.constants import DEFAULT_USER_STATUS, USER_STATUSES, USERS_TABLE

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def public_user(user: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of a user row without the password hash."""
    return {key: value for key, value in user.items() if key != "password_hash"}


async def register_user(
    supabase_client: Client,
    email: str,
    password: str,
    name: str,
    company_name: str = "",
    address: str = "",
    phone_number: str = ""
) -> Dict[str, Any]:
    """
    Register a new catalog user with status 'pending'.

    Args:
        supabase_client: Supabase client
        email: Login email (stored trimmed and lowercased)
        password: Plain-text password, hashed before insert
        name: Contact name
        company_name: Company name (optional)
        address: Postal address (optional)
        phone_number: Contact phone (optional)

    Returns:
        The created user record (including password_hash)

    Raises:
        postgrest.exceptions.APIError: code 23505 if the email is already registered
    """
    user_data = {
        "email": normalize_email(email),
        "password_hash": generate_password_hash(password),
        "name": name,
        "company_name": company_name,
        "address": address,
        "phone_number": phone_number,
        "status": DEFAULT_USER_STATUS,
        "is_admin": False,
    }

    logger.info("Registering new catalog user")

    result = supabase_client.table(USERS_TABLE).insert(user_data).execute()

    if not result.data:
        raise Exception("Failed to register user: no data returned")

    user = cast(Dict[str, Any], result.data[0])
    logger.info(f"User {user.get('id')} registered with status {DEFAULT_USER_STATUS}")

    return user


async def get_user_by_id(
    supabase_client: Client,
    user_id: str
) -> Optional[Dict[str, Any]]:
    result = (
        supabase_client.table(USERS_TABLE)
        .select("*")
        .eq("id", user_id)
        .execute()
    )

    if not result.data:
        logger.warning(f"User {user_id} not found")
        return None

    return cast(Dict[str, Any], result.data[0])


async def get_user_by_email(
    supabase_client: Client,
    email: str
) -> Optional[Dict[str, Any]]:
    result = (
        supabase_client.table(USERS_TABLE)
        .select("*")
        .eq("email", normalize_email(email))
        .execute()
    )

    if not result.data:
        return None

    return cast(Dict[str, Any], result.data[0])


async def authenticate_user(
    supabase_client: Client,
    email: str,
    password: str
) -> Optional[Dict[str, Any]]:
    """
    Check an email/password pair.

    No session or token is created; the caller decides what to do with the
    returned user (e.g. refuse users that are not approved).

    Returns:
        The user record if the credentials match, otherwise None
    """
    user = await get_user_by_email(supabase_client, email)

    if user is None or not check_password_hash(user["password_hash"], password):
        logger.warning("Login failed: invalid credentials")
        return None

    logger.info(f"Credentials verified for user {user.get('id')}")
    return user


async def update_user_status(
    supabase_client: Client,
    user_id: str,
    status: str
) -> Optional[Dict[str, Any]]:
    """
    Move a user through the approval workflow.

    Args:
        supabase_client: Supabase client
        user_id: User to update
        status: One of 'pending', 'approved', 'rejected'

    Returns:
        The updated user record, or None if the user does not exist

    Raises:
        ValueError: If status is not a known user status
    """
    if status not in USER_STATUSES:
        raise ValueError(
            f"Invalid user status '{status}'. Expected one of: {', '.join(USER_STATUSES)}"
        )

    logger.info(f"Setting status of user {user_id} to {status}")

    result = (
        supabase_client.table(USERS_TABLE)
        .update({
            "status": status,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        })
        .eq("id", user_id)
        .execute()
    )

    if not result.data:
        logger.warning(f"User {user_id} not found for status update")
        return None

    return cast(Dict[str, Any], result.data[0])


async def list_users(
    supabase_client: Client,
    status: Optional[str] = None
) -> List[Dict[str, Any]]:
    """List users, newest first, optionally filtered by status."""
    query = supabase_client.table(USERS_TABLE).select("*")

    if status:
        query = query.eq("status", status)

    result = query.order("created_at", desc=True).execute()

    users: List[Dict[str, Any]] = cast(List[Dict[str, Any]], result.data or [])
    logger.info(f"Found {len(users)} users (status={status})")

    return users
