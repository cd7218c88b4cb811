"""
Campaign API views package.
"""

from .campaign_views import (
    add_campaign_character,
    campaign_full,
    update_campaign,
    update_campaign_status,
)
from .handout_views import campaign_handouts
from .invitation_views import accept_campaign_invite, campaign_invites
from .list_views import CampaignDetailListAPIView, CampaignListCreateAPIView

__all__ = [
    "CampaignDetailListAPIView",
    "CampaignListCreateAPIView",
    "accept_campaign_invite",
    "add_campaign_character",
    "campaign_full",
    "campaign_handouts",
    "campaign_invites",
    "update_campaign",
    "update_campaign_status",
]
