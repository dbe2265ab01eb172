"""
Email verification code endpoints.

POST /verification-codes issues a code; delivering it by email is outside
this service. POST /verification-codes/verify redeems it once.
"""

import logging
from fastapi import APIRouter, HTTPException, status
from postgrest.exceptions import APIError

from catalog.db.client import get_supabase_client
from catalog.services import create_verification_code, verify_code
from catalog.schemas.verification import (
    VerificationCodeRequest,
    VerificationCodeResponse,
    VerifyCodeRequest,
    VerifyCodeResponse,
)
from catalog.utils.errors import http_error_from_api_error

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/verification-codes", tags=["verification"])


@router.post(
    "",
    response_model=VerificationCodeResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Issue a verification code"
)
async def issue_code(request: VerificationCodeRequest) -> VerificationCodeResponse:
    supabase_client = get_supabase_client()

    try:
        row = await create_verification_code(supabase_client, request.email)
    except APIError as e:
        raise http_error_from_api_error(e, "create_error", "Failed to create verification code")

    return VerificationCodeResponse(
        status="CREATED",
        email=row["email"],
        expires_at=str(row["expires_at"]),
    )


@router.post(
    "/verify",
    response_model=VerifyCodeResponse,
    status_code=status.HTTP_200_OK,
    summary="Redeem a verification code"
)
async def redeem_code(request: VerifyCodeRequest) -> VerifyCodeResponse:
    supabase_client = get_supabase_client()

    try:
        verified = await verify_code(supabase_client, request.email, request.code)
    except APIError as e:
        raise http_error_from_api_error(e, "verify_error", "Failed to verify code")

    if not verified:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "invalid_code", "details": "Code is invalid, expired or already used"}
        )

    return VerifyCodeResponse(status="VERIFIED", email=request.email)
