"""API views for campaign handouts."""

from rest_framework import permissions, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from api.errors import APIError, handle_tabletop_errors
from api.serializers import CampaignHandoutSerializer, HandoutCreateSerializer
from campaigns.services import HandoutService


@api_view(["GET", "POST"])
@permission_classes([permissions.IsAuthenticated])
@handle_tabletop_errors
def campaign_handouts(request, campaign_id):
    service = HandoutService()

    if request.method == "GET":
        handouts = service.list_handouts(campaign_id, request.user.id)
        return Response(CampaignHandoutSerializer(handouts, many=True).data)

    payload = HandoutCreateSerializer(data=request.data)
    if not payload.is_valid():
        return APIError.validation_error(payload.errors)

    handout = service.create_handout(
        campaign_id, request.user.id, **payload.validated_data
    )
    return Response(
        CampaignHandoutSerializer(handout).data, status=status.HTTP_201_CREATED
    )
