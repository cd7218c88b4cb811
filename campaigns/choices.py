"""
Closed enumerations for campaign, membership and invite state.

Every role, status and visibility value stored by the campaigns app is one
of these choices; services validate incoming strings against them before
touching the database.
"""

from django.db import models

from .exceptions import InvalidState


class Visibility(models.TextChoices):
    PRIVATE = "private", "Private"
    INVITE = "invite", "Invite only"


class CampaignStatus(models.TextChoices):
    NOT_STARTED = "not_started", "Not started"
    IN_PROGRESS = "in_progress", "In progress"
    PAUSED = "paused", "Paused"
    COMPLETED = "completed", "Completed"
    ARCHIVED = "archived", "Archived"


class Role(models.TextChoices):
    OWNER = "owner", "Owner"
    EDITOR = "editor", "Editor"
    VIEWER = "viewer", "Viewer"


class MemberStatus(models.TextChoices):
    PENDING = "pending", "Pending"
    ACCEPTED = "accepted", "Accepted"
    REVOKED = "revoked", "Revoked"


class InviteStatus(models.TextChoices):
    ACTIVE = "active", "Active"
    REDEEMED = "redeemed", "Redeemed"


# Roles an invite may hand out; ownership is never granted by code.
INVITE_ROLE_CHOICES = [
    (Role.VIEWER.value, Role.VIEWER.label),
    (Role.EDITOR.value, Role.EDITOR.label),
]

GM_ROLES = (Role.OWNER, Role.EDITOR)


def parse_choice(choices, value, field_name: str):
    """Return the enum member for ``value`` or raise ``InvalidState``."""
    try:
        return choices(value)
    except ValueError:
        raise InvalidState(f"Invalid {field_name}: {value!r}")
