"""
Campaign lookup and permission resolution shared by the service layer.

Resolution always runs top-down: the campaign must exist (``NotFound``), the
caller must have a membership row (``NotCampaignMember``) and that row must
pass the permission gate for the requested action (``NotPermitted``).
"""

from typing import Any, Optional, Tuple

from ..exceptions import NotFound
from ..models import Campaign, CampaignMembership
from ..permissions import Action, require
from .membership_store import MembershipStore


def get_campaign(campaign_id: Any) -> Campaign:
    """Return the campaign or raise ``NotFound``."""
    try:
        return Campaign.objects.get(id=campaign_id)
    except (Campaign.DoesNotExist, ValueError, TypeError):
        raise NotFound("Campaign not found.")


def resolve_access(
    campaign_id: Any,
    user_id: Any,
    action: Action,
    store: Optional[MembershipStore] = None,
) -> Tuple[Campaign, CampaignMembership]:
    """Return ``(campaign, membership)`` once the caller may perform ``action``."""
    store = store or MembershipStore()
    campaign = get_campaign(campaign_id)
    membership = store.get(campaign.id, user_id)
    require(membership, action)
    return campaign, membership
