"""Campaign permission gate.

Every mutating operation, and every read of privileged data, passes through
``authorize`` before touching shared state. The functions here are pure: they
only look at the caller's (role, status) pair as resolved by the membership
store and never query the database themselves.
"""

import enum
from typing import Optional

from .choices import GM_ROLES, MemberStatus, Role
from .exceptions import NotPermitted


class Action(enum.Enum):
    """Classes of operation a member can attempt on a campaign."""

    EDIT_CAMPAIGN = "edit_campaign"
    MANAGE_MEMBERS = "manage_members"
    MANAGE_CONTENT = "manage_content"
    VIEW_AS_GM = "view_as_gm"
    VIEW_AS_PLAYER = "view_as_player"


def is_gm(role: Optional[str]) -> bool:
    """Owners and editors run the table."""
    return role in GM_ROLES


def authorize(role: Optional[str], status: Optional[str], action: Action) -> bool:
    """Decide whether a member with ``role``/``status`` may perform ``action``.

    Pending and revoked members are denied everything.
    """
    if status != MemberStatus.ACCEPTED:
        return False

    if action in (
        Action.EDIT_CAMPAIGN,
        Action.MANAGE_MEMBERS,
        Action.MANAGE_CONTENT,
        Action.VIEW_AS_GM,
    ):
        return is_gm(role)
    if action is Action.VIEW_AS_PLAYER:
        return role in (Role.OWNER, Role.EDITOR, Role.VIEWER)
    return False


def require(record, action: Action) -> None:
    """Raise ``NotPermitted`` unless the membership record allows ``action``."""
    if not authorize(record.role, record.status, action):
        raise NotPermitted()


def can_change_role(actor_role: str, target_role: str, new_role: str) -> bool:
    """Only an owner may grant the owner role or change an owner's role."""
    if Role.OWNER in (target_role, new_role):
        return actor_role == Role.OWNER
    return is_gm(actor_role)


def can_revoke(actor_role: str, target_role: str) -> bool:
    """Nobody may revoke a member who currently holds the owner role."""
    if target_role == Role.OWNER:
        return False
    return is_gm(actor_role)
