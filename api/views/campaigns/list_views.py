"""
API views for campaign listing and creation.

Listing only ever returns campaigns where the caller holds an accepted
membership; creation goes through ``CampaignService`` so the campaign and
its owner membership are written together.
"""

from django.db.models import QuerySet
from rest_framework import generics, permissions, status
from rest_framework.response import Response

from api.errors import APIError
from api.serializers import (
    CampaignDetailSerializer,
    CampaignSerializer,
    CampaignWriteSerializer,
)
from campaigns.models import Campaign
from campaigns.services import CampaignService


class CampaignListCreateAPIView(generics.ListCreateAPIView):
    """
    GET: campaigns the user is an accepted member of, most recently updated first.
    POST: create a campaign owned by the user.
    """

    serializer_class = CampaignSerializer
    permission_classes = [permissions.IsAuthenticated]

    def get_queryset(self) -> QuerySet[Campaign]:
        return CampaignService().list_campaigns(self.request.user.id).select_related(
            "owner"
        )

    def create(self, request, *args, **kwargs):
        payload = CampaignWriteSerializer(data=request.data)
        if not payload.is_valid():
            return APIError.validation_error(payload.errors)
        campaign = CampaignService().create_campaign(
            owner_id=request.user.id, **payload.validated_data
        )
        return Response(
            CampaignSerializer(campaign).data, status=status.HTTP_201_CREATED
        )


class CampaignDetailListAPIView(generics.ListAPIView):
    """Member campaigns with their linked characters."""

    serializer_class = CampaignDetailSerializer
    permission_classes = [permissions.IsAuthenticated]

    def get_queryset(self) -> QuerySet[Campaign]:
        return (
            CampaignService()
            .list_campaign_details(self.request.user.id)
            .select_related("owner")
        )
