"""
API views for campaign invite codes.

Owners and editors issue and list invites; any authenticated user holding
a code may redeem it.
"""

from rest_framework import permissions, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from api.errors import APIError, handle_tabletop_errors
from api.serializers import (
    CampaignInviteSerializer,
    CampaignSerializer,
    InviteCreateSerializer,
)
from campaigns.services import InvitationService


@api_view(["GET", "POST"])
@permission_classes([permissions.IsAuthenticated])
@handle_tabletop_errors
def campaign_invites(request, campaign_id):
    """
    GET: list the campaign's invites.
    POST: issue a new invite code.
    """
    service = InvitationService()

    if request.method == "GET":
        invites = service.list_for_campaign(campaign_id, request.user.id)
        return Response(CampaignInviteSerializer(invites, many=True).data)

    payload = InviteCreateSerializer(data=request.data)
    if not payload.is_valid():
        return APIError.validation_error(payload.errors)

    invite = service.issue(
        campaign_id,
        request.user.id,
        role_default=payload.validated_data["role_default"] or None,
        expires_at=payload.validated_data["expires_at"],
    )
    return Response(
        CampaignInviteSerializer(invite).data, status=status.HTTP_201_CREATED
    )


@api_view(["POST"])
@permission_classes([permissions.IsAuthenticated])
@handle_tabletop_errors
def accept_campaign_invite(request, code):
    """Redeem an invite code and join its campaign."""
    campaign = InvitationService().redeem(code, request.user.id)
    return Response(
        {
            "detail": "Invite accepted.",
            "campaign": CampaignSerializer(campaign).data,
        },
        status=status.HTTP_200_OK,
    )
