"""
API views for campaign membership operations.

This module provides REST API endpoints for listing members, changing their
roles and revoking their access.
"""

from rest_framework import permissions, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from api.errors import APIError, handle_tabletop_errors
from api.serializers import CampaignMembershipSerializer, MemberRoleSerializer
from campaigns.choices import Role, parse_choice
from campaigns.services import MembershipService


@api_view(["GET"])
@permission_classes([permissions.IsAuthenticated])
@handle_tabletop_errors
def list_campaign_members(request, campaign_id):
    """
    List all members of a campaign.

    Any accepted member can view the member list. ``?role=`` narrows the
    result to one role.
    """
    members = MembershipService().list_members(campaign_id, request.user.id)

    role_filter = request.GET.get("role")
    if role_filter:
        members = members.filter(role=parse_choice(Role, role_filter.lower(), "role"))

    return Response(CampaignMembershipSerializer(members, many=True).data)


@api_view(["PUT"])
@permission_classes([permissions.IsAuthenticated])
@handle_tabletop_errors
def change_member_role(request, campaign_id, user_id):
    """
    Change a member's role.

    Only owners may grant the owner role or change another owner's role;
    the campaign creator's role never changes.
    """
    payload = MemberRoleSerializer(data=request.data)
    if not payload.is_valid():
        return APIError.validation_error(payload.errors)

    membership = MembershipService().update_member_role(
        campaign_id, request.user.id, user_id, payload.validated_data["role"]
    )
    return Response(CampaignMembershipSerializer(membership).data)


@api_view(["POST"])
@permission_classes([permissions.IsAuthenticated])
@handle_tabletop_errors
def revoke_campaign_member(request, campaign_id, user_id):
    """Revoke a member's access. Owners cannot be revoked."""
    MembershipService().revoke_member(campaign_id, request.user.id, user_id)
    return Response({"detail": "Member revoked."}, status=status.HTTP_200_OK)
