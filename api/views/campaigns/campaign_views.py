"""
API views for single-campaign operations: updates, character links and
the tabletop snapshot.
"""

from rest_framework import permissions, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from api.errors import APIError, handle_tabletop_errors
from api.serializers import (
    AddCharacterSerializer,
    CampaignCharacterSerializer,
    CampaignSerializer,
    CampaignStatusSerializer,
    CampaignWriteSerializer,
    TabletopSnapshotSerializer,
)
from campaigns.services import CampaignService
from scenes.services import TabletopService


@api_view(["PUT"])
@permission_classes([permissions.IsAuthenticated])
@handle_tabletop_errors
def update_campaign(request, campaign_id):
    """Update name, description, visibility or status. Owners and editors only."""
    payload = CampaignWriteSerializer(data=request.data)
    if not payload.is_valid():
        return APIError.validation_error(payload.errors)

    campaign = CampaignService().update_campaign(
        campaign_id, request.user.id, **payload.validated_data
    )
    return Response(CampaignSerializer(campaign).data)


@api_view(["PUT"])
@permission_classes([permissions.IsAuthenticated])
@handle_tabletop_errors
def update_campaign_status(request, campaign_id):
    payload = CampaignStatusSerializer(data=request.data)
    if not payload.is_valid():
        return APIError.validation_error(payload.errors)

    campaign = CampaignService().update_status(
        campaign_id, request.user.id, payload.validated_data["status"]
    )
    return Response(CampaignSerializer(campaign).data)


@api_view(["POST"])
@permission_classes([permissions.IsAuthenticated])
@handle_tabletop_errors
def add_campaign_character(request, campaign_id):
    """Link one of the caller's characters to the campaign."""
    payload = AddCharacterSerializer(data=request.data)
    if not payload.is_valid():
        return APIError.validation_error(payload.errors)

    link = CampaignService().add_character(
        campaign_id, request.user.id, payload.validated_data["character_id"]
    )
    return Response(
        CampaignCharacterSerializer(link).data, status=status.HTTP_201_CREATED
    )


@api_view(["GET"])
@permission_classes([permissions.IsAuthenticated])
@handle_tabletop_errors
def campaign_full(request, campaign_id):
    """Role-filtered snapshot of the campaign's table."""
    snapshot = TabletopService().get_full(campaign_id, request.user.id)
    return Response(TabletopSnapshotSerializer(snapshot).data)
