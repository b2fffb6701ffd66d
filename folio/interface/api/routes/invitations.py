"""Invitation routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request, Response, status
from fastapi.responses import JSONResponse

from folio.application.usecase.auth import AuthenticateUseCase
from folio.application.usecase.invitation import (
    CancelInvitationUseCase,
    CreateInvitationRequest,
    CreateInvitationResponse,
    CreateInvitationUseCase,
    ListInvitationsResponse,
    ListInvitationsUseCase,
    ResendInvitationResponse,
    ResendInvitationUseCase,
    RevokeInvitationResponse,
    RevokeInvitationUseCase,
    ValidateInvitationRequest,
    ValidateInvitationResponse,
    ValidateInvitationUseCase,
)
from folio.config import SupabaseSettings
from folio.domain.error import INVITATION_GENERIC_MESSAGE
from folio.interface.api.guards import require_superadmin

router = APIRouter(prefix="/invitations", tags=["invitations"], route_class=DishkaRoute)


@router.get("/validate", response_model=ValidateInvitationResponse)
async def validate_invitation(
    validate_use_case: FromDishka[ValidateInvitationUseCase],
    token: str = Query(default=""),
):
    """Check an invitation link before showing the signup form.

    Public. Every failure returns 404 with the same message.
    """
    result = await validate_use_case.execute(ValidateInvitationRequest(token=token))
    if not result.valid:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": INVITATION_GENERIC_MESSAGE},
        )
    return result


@router.post(
    "", response_model=CreateInvitationResponse, status_code=status.HTTP_201_CREATED
)
async def create_invitation(
    body: CreateInvitationRequest,
    request: Request,
    response: Response,
    create_use_case: FromDishka[CreateInvitationUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    settings: FromDishka[SupabaseSettings],
) -> CreateInvitationResponse:
    """Issue an invitation link (superadmin only).

    Returns 200 instead of 201 when a live invitation for the email already
    existed and was returned as-is.
    """
    session = await require_superadmin(request, authenticate_use_case, settings)
    result = await create_use_case.execute(body, inviter_id=str(session.user.id))
    if not result.created:
        response.status_code = status.HTTP_200_OK
    return result


@router.get("", response_model=ListInvitationsResponse)
async def list_invitations(
    request: Request,
    list_use_case: FromDishka[ListInvitationsUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    settings: FromDishka[SupabaseSettings],
) -> ListInvitationsResponse:
    """List pending invitations, newest first (superadmin only)."""
    await require_superadmin(request, authenticate_use_case, settings)
    return await list_use_case.execute()


@router.post("/{invitation_id}/revoke", response_model=RevokeInvitationResponse)
async def revoke_invitation(
    invitation_id: str,
    request: Request,
    revoke_use_case: FromDishka[RevokeInvitationUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    settings: FromDishka[SupabaseSettings],
) -> RevokeInvitationResponse:
    """Revoke a pending invitation (superadmin only)."""
    await require_superadmin(request, authenticate_use_case, settings)
    return await revoke_use_case.execute(invitation_id)


@router.post("/{invitation_id}/resend", response_model=ResendInvitationResponse)
async def resend_invitation(
    invitation_id: str,
    request: Request,
    resend_use_case: FromDishka[ResendInvitationUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    settings: FromDishka[SupabaseSettings],
) -> ResendInvitationResponse:
    """Replace an invitation with a fresh link (superadmin only)."""
    session = await require_superadmin(request, authenticate_use_case, settings)
    return await resend_use_case.execute(invitation_id, inviter_id=str(session.user.id))


@router.delete("/{invitation_id}", status_code=status.HTTP_204_NO_CONTENT)
async def cancel_invitation(
    invitation_id: str,
    request: Request,
    cancel_use_case: FromDishka[CancelInvitationUseCase],
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    settings: FromDishka[SupabaseSettings],
) -> Response:
    """Delete an invitation outright (superadmin only)."""
    await require_superadmin(request, authenticate_use_case, settings)
    await cancel_use_case.execute(invitation_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
