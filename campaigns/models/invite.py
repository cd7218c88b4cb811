from datetime import datetime
from typing import Optional

from django.conf import settings
from django.db import models
from django.utils import timezone
from django_fsm import FSMField, transition  # type: ignore[import-untyped]

from ..choices import INVITE_ROLE_CHOICES, InviteStatus, Role
from .campaign import Campaign


class CampaignInvite(models.Model):
    """One-time redeemable code granting a default role in a campaign.

    The invite moves ``active -> redeemed`` exactly once; the redeemer and
    redemption time are stamped by the same transition.
    """

    campaign = models.ForeignKey(  # type: ignore[var-annotated]
        Campaign,
        on_delete=models.CASCADE,
        related_name="invites",
        help_text="The campaign being joined",
    )
    code = models.CharField(  # type: ignore[var-annotated]
        max_length=32,
        unique=True,
        help_text="Opaque redemption code",
    )
    invited_by = models.ForeignKey(  # type: ignore[var-annotated]
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="issued_campaign_invites",
        help_text="The member who issued the invite",
    )
    role_default = models.CharField(  # type: ignore[var-annotated]
        max_length=10,
        choices=INVITE_ROLE_CHOICES,
        default=Role.VIEWER,
        help_text="Role granted on redemption",
    )
    status: FSMField = FSMField(
        max_length=10,
        choices=InviteStatus.choices,
        default=InviteStatus.ACTIVE,
        protected=False,
        help_text="Lifecycle status of the invite",
    )
    expires_at = models.DateTimeField(  # type: ignore[var-annotated]
        help_text="When this invite stops being redeemable"
    )
    redeemed_by = models.ForeignKey(  # type: ignore[var-annotated]
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="redeemed_campaign_invites",
    )
    redeemed_at = models.DateTimeField(  # type: ignore[var-annotated]
        null=True, blank=True
    )
    created_at = models.DateTimeField(auto_now_add=True)  # type: ignore[var-annotated]

    class Meta:
        db_table = "campaigns_invite"
        ordering = ["-created_at"]
        verbose_name = "Campaign Invite"
        verbose_name_plural = "Campaign Invites"
        indexes = [
            models.Index(
                fields=["campaign", "status"], name="invite_campaign_status_idx"
            ),
        ]

    def __str__(self) -> str:
        return f"{self.code} ({self.campaign.name}, {self.role_default})"

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """Check if the invite is past its expiry."""
        return (now or timezone.now()) > self.expires_at

    @property
    def is_redeemed(self) -> bool:
        """Either half of the redemption stamp marks the invite as used."""
        return self.status != InviteStatus.ACTIVE or self.redeemed_by_id is not None

    @transition(field=status, source=InviteStatus.ACTIVE, target=InviteStatus.REDEEMED)
    def redeem(self, user_id, when: Optional[datetime] = None) -> None:
        """Stamp the invite as redeemed by ``user_id``."""
        self.redeemed_by_id = user_id
        self.redeemed_at = when or timezone.now()
