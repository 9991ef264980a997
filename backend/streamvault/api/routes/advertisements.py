"""
Advertisement request API endpoints.

Paths match the storefront client: list, submit and delete requests, and
check whether an IP has submitted recently.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from streamvault.db.deps import AdStore
from streamvault.schemas.advertisement import (
    AdvertisementRequestCreate,
    AdvertisementRequestResponse,
    ErrorResponse,
    RecentRequestCheck,
    RecentRequestCheckResponse,
    SuccessResponse,
)
from streamvault.services.advertisements import AdvertisementRequestService

router = APIRouter(tags=["Advertisements"])


def get_advertisement_service(store: AdStore) -> AdvertisementRequestService:
    """FastAPI dependency that provides the advertisement request service."""
    return AdvertisementRequestService(store)


# ========================================
# Endpoints
# ========================================

@router.get(
    "/advertisement-requests",
    response_model=List[AdvertisementRequestResponse],
    summary="List advertisement requests",
    description="All requests, newest first. Returns an empty list if the store is unavailable.",
)
async def list_advertisement_requests(
    service: AdvertisementRequestService = Depends(get_advertisement_service),
):
    return await service.list_requests()


@router.post(
    "/advertisement-requests",
    response_model=AdvertisementRequestResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit an advertisement request",
    responses={
        400: {"model": ErrorResponse, "description": "Missing fields or budget out of range"},
        429: {"model": ErrorResponse, "description": "A request from this IP was made within the last hour"},
        500: {"model": ErrorResponse, "description": "Store failure"},
    },
)
async def create_advertisement_request(
    request: AdvertisementRequestCreate,
    service: AdvertisementRequestService = Depends(get_advertisement_service),
):
    return await service.create_request(
        email=request.email,
        description=request.description,
        budget=request.budget,
        user_ip=request.user_ip,
    )


@router.delete(
    "/advertisement-requests/{request_id}",
    response_model=SuccessResponse,
    summary="Delete an advertisement request",
    responses={500: {"model": ErrorResponse, "description": "Store failure"}},
)
async def delete_advertisement_request(
    request_id: str,
    service: AdvertisementRequestService = Depends(get_advertisement_service),
):
    await service.delete_request(request_id)
    return SuccessResponse()


@router.post(
    "/check-recent-ad-request",
    response_model=RecentRequestCheckResponse,
    summary="Check for a recent request from an IP",
)
async def check_recent_ad_request(
    request: RecentRequestCheck,
    service: AdvertisementRequestService = Depends(get_advertisement_service),
):
    has_recent = await service.has_recent_request(request.user_ip, request.since)
    return RecentRequestCheckResponse(has_recent_request=has_recent)
