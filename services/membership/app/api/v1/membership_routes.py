"""API routes for membership operations."""

from typing import Any, List

from fastapi import APIRouter, Body, Depends, Response, status

from app.dependencies import get_membership_service
from app.schemas import ErrorResponse, MembershipWithPeriodsResponse
from app.services import MembershipService

router = APIRouter(prefix="/memberships", tags=["memberships"])


@router.get("", response_model=List[MembershipWithPeriodsResponse])
def list_memberships(service: MembershipService = Depends(get_membership_service)):
    return [
        MembershipWithPeriodsResponse.model_validate(item)
        for item in service.list_memberships_with_periods()
    ]


@router.post(
    "",
    response_model=MembershipWithPeriodsResponse,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
def create_membership(
    payload: Any = Body(...),
    service: MembershipService = Depends(get_membership_service),
):
    created = service.create_membership(payload)
    return MembershipWithPeriodsResponse.model_validate(created)


@router.get(
    "/{membership_id}",
    response_model=MembershipWithPeriodsResponse,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
def get_membership(
    membership_id: int, service: MembershipService = Depends(get_membership_service)
):
    return MembershipWithPeriodsResponse.model_validate(
        service.get_membership_with_periods(membership_id)
    )


@router.post(
    "/{membership_id}/terminate",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
        status.HTTP_409_CONFLICT: {"model": ErrorResponse},
    },
)
def terminate_membership(
    membership_id: int, service: MembershipService = Depends(get_membership_service)
):
    service.terminate_membership(membership_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
