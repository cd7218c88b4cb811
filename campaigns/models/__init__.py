from .campaign import Campaign, CampaignCharacter, CampaignMembership
from .handout import CampaignHandout
from .invite import CampaignInvite

__all__ = [
    "Campaign",
    "CampaignMembership",
    "CampaignCharacter",
    "CampaignInvite",
    "CampaignHandout",
]
