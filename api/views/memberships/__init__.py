"""
Campaign membership API views.
"""

from .member_views import (
    change_member_role,
    list_campaign_members,
    revoke_campaign_member,
)

__all__ = [
    "list_campaign_members",
    "change_member_role",
    "revoke_campaign_member",
]
