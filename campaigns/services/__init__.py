"""Campaign services for business logic."""

from .access import get_campaign, resolve_access
from .campaign_services import CampaignService, HandoutService, MembershipService
from .invitations import InvitationService, generate_invite_code
from .membership_store import MembershipStore

__all__ = [
    "CampaignService",
    "HandoutService",
    "InvitationService",
    "MembershipService",
    "MembershipStore",
    "generate_invite_code",
    "get_campaign",
    "resolve_access",
]
