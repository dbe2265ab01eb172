"""
Catalog user API endpoints.

Provides registration, credential checks and the approval workflow:
- POST  /users/register        - create a pending user
- POST  /users/login           - verify credentials of an approved user
- GET   /users/{user_id}       - public user profile
- PATCH /users/{user_id}/status - approve / reject / reset a user

No session or token is issued. Login only confirms the credentials and
returns the public user record.
"""

import logging
from typing import Any, Dict
from fastapi import APIRouter, HTTPException, status
from postgrest.exceptions import APIError

from catalog.db.client import get_supabase_client
from catalog.services import (
    authenticate_user,
    get_user_by_id,
    public_user,
    register_user,
    update_user_status,
)
from catalog.schemas.users import (
    UserLoginRequest,
    UserRegisterRequest,
    UserResponse,
    UserStatusUpdateRequest,
    UserStatusUpdateResponse,
)
from catalog.utils.errors import http_error_from_api_error

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


def user_to_response(user: Dict[str, Any]) -> UserResponse:
    data = public_user(user)

    # Helper to coerce optional DB values into strings for text columns
    def _as_str(val: Any) -> str:
        return str(val) if val is not None else ""

    return UserResponse(
        id=_as_str(data.get("id")),
        email=_as_str(data.get("email")),
        name=_as_str(data.get("name")),
        company_name=_as_str(data.get("company_name")),
        address=_as_str(data.get("address")),
        phone_number=_as_str(data.get("phone_number")),
        status=data["status"],
        is_admin=bool(data.get("is_admin")),
        created_at=data.get("created_at"),
        updated_at=data.get("updated_at"),
    )


@router.post(
    "/register",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a catalog user",
    description="""
    Register a new catalog user.

    The user is created with status 'pending' and must be approved by an
    administrator before logging in. Returns 409 if the email is taken.
    """
)
async def register(request: UserRegisterRequest) -> UserResponse:
    supabase_client = get_supabase_client()

    try:
        user = await register_user(
            supabase_client=supabase_client,
            email=request.email,
            password=request.password,
            name=request.name,
            company_name=request.company_name,
            address=request.address,
            phone_number=request.phone_number,
        )
    except APIError as e:
        raise http_error_from_api_error(
            e,
            "create_error",
            "Failed to register user",
            conflict_details="A user with this email already exists",
        )

    return user_to_response(user)


@router.post(
    "/login",
    response_model=UserResponse,
    status_code=status.HTTP_200_OK,
    summary="Verify user credentials",
    description="""
    Check an email/password pair.

    - 401 if the credentials do not match
    - 403 if the user exists but is not approved yet (or was rejected)
    """
)
async def login(request: UserLoginRequest) -> UserResponse:
    supabase_client = get_supabase_client()

    try:
        user = await authenticate_user(supabase_client, request.email, request.password)
    except APIError as e:
        raise http_error_from_api_error(e, "login_error", "Failed to verify credentials")

    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"error": "invalid_credentials", "details": "Invalid email or password"}
        )

    if user["status"] != "approved":
        logger.info(f"Login refused for user {user.get('id')}: status={user['status']}")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail={
                "error": f"account_{user['status']}",
                "details": f"Account is {user['status']}"
            }
        )

    return user_to_response(user)


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    status_code=status.HTTP_200_OK,
    summary="Get a catalog user"
)
async def get_user(user_id: str) -> UserResponse:
    supabase_client = get_supabase_client()

    try:
        user = await get_user_by_id(supabase_client, user_id)
    except APIError as e:
        raise http_error_from_api_error(e, "fetch_error", "Failed to retrieve user")

    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": "not_found", "details": f"User {user_id} not found"}
        )

    return user_to_response(user)


@router.patch(
    "/{user_id}/status",
    response_model=UserStatusUpdateResponse,
    status_code=status.HTTP_200_OK,
    summary="Change a user's approval status"
)
async def change_user_status(
    user_id: str,
    request: UserStatusUpdateRequest
) -> UserStatusUpdateResponse:
    supabase_client = get_supabase_client()

    try:
        user = await update_user_status(supabase_client, user_id, request.status)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "invalid_request", "details": str(e)}
        )
    except APIError as e:
        raise http_error_from_api_error(e, "update_error", "Failed to update user status")

    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": "not_found", "details": f"User {user_id} not found"}
        )

    return UserStatusUpdateResponse(status="UPDATED", user=user_to_response(user))
