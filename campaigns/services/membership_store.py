"""
Membership store: the (campaign, user, role, status) table every other
service consults before reading or writing campaign data.
"""

import logging
from typing import Any, Optional

from django.db import IntegrityError, transaction
from django.db.models import QuerySet

from ..choices import MemberStatus, Role, parse_choice
from ..exceptions import AlreadyExists, NotCampaignMember
from ..models import CampaignMembership

logger = logging.getLogger(__name__)


class MembershipStore:
    """Keyed access to campaign memberships by (campaign_id, user_id)."""

    def get(self, campaign_id: Any, user_id: Any) -> CampaignMembership:
        """Return the membership row for the pair.

        Raises:
            NotCampaignMember: If no row exists for the pair
        """
        try:
            return CampaignMembership.objects.get(
                campaign_id=campaign_id, user_id=user_id
            )
        except CampaignMembership.DoesNotExist:
            raise NotCampaignMember()

    def find(self, campaign_id: Any, user_id: Any) -> Optional[CampaignMembership]:
        """Return the membership row for the pair, or None."""
        return CampaignMembership.objects.filter(
            campaign_id=campaign_id, user_id=user_id
        ).first()

    def put(
        self,
        campaign_id: Any,
        user_id: Any,
        role: str,
        status: str,
        invited_by: Any = None,
    ) -> CampaignMembership:
        """Insert a new membership row.

        Raises:
            AlreadyExists: If the pair already has a row
        """
        role = parse_choice(Role, role, "role")
        status = parse_choice(MemberStatus, status, "status")
        try:
            with transaction.atomic():
                return CampaignMembership.objects.create(
                    campaign_id=campaign_id,
                    user_id=user_id,
                    role=role,
                    status=status,
                    invited_by_id=invited_by,
                )
        except IntegrityError:
            logger.info(
                "Duplicate membership rejected: campaign=%s user=%s",
                campaign_id,
                user_id,
            )
            raise AlreadyExists("User is already a member of this campaign.")

    def set_role(self, campaign_id: Any, user_id: Any, role: str) -> None:
        role = parse_choice(Role, role, "role")
        updated = CampaignMembership.objects.filter(
            campaign_id=campaign_id, user_id=user_id
        ).update(role=role)
        if not updated:
            raise NotCampaignMember()

    def set_status(self, campaign_id: Any, user_id: Any, status: str) -> None:
        status = parse_choice(MemberStatus, status, "status")
        updated = CampaignMembership.objects.filter(
            campaign_id=campaign_id, user_id=user_id
        ).update(status=status)
        if not updated:
            raise NotCampaignMember()

    def list_members(self, campaign_id: Any) -> QuerySet:
        """Every membership row of the campaign, oldest first."""
        return (
            CampaignMembership.objects.filter(campaign_id=campaign_id)
            .select_related("user")
            .order_by("created_at", "id")
        )
