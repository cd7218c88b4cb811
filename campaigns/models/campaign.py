from typing import Any

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import QuerySet

from core.models import DescribedModelMixin, TimestampedMixin

from ..choices import CampaignStatus, MemberStatus, Role, Visibility


class CampaignManager(models.Manager):
    """Custom manager for Campaign model with membership filtering."""

    def for_member(self, user_id: Any) -> "QuerySet[Campaign]":
        """Return campaigns where the user holds an accepted membership.

        Args:
            user_id: The user to filter campaigns for

        Returns:
            QuerySet of campaigns ordered by most recent update
        """
        return self.filter(
            memberships__user_id=user_id,
            memberships__status=MemberStatus.ACCEPTED,
        ).order_by("-updated_at", "-id")


class Campaign(TimestampedMixin, DescribedModelMixin):
    """Campaign model for a shared tabletop session."""

    name = models.CharField(  # type: ignore[var-annotated]
        max_length=200, help_text="Campaign name"
    )
    owner = models.ForeignKey(  # type: ignore[var-annotated]
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="owned_campaigns",
        help_text="User who created the campaign",
    )
    visibility = models.CharField(  # type: ignore[var-annotated]
        max_length=10,
        choices=Visibility.choices,
        default=Visibility.PRIVATE,
        help_text="Who may discover the campaign",
    )
    status = models.CharField(  # type: ignore[var-annotated]
        max_length=20,
        choices=CampaignStatus.choices,
        default=CampaignStatus.NOT_STARTED,
        db_index=True,
        help_text="Lifecycle status of the campaign",
    )
    active_scene = models.ForeignKey(  # type: ignore[var-annotated]
        "scenes.Scene",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
        help_text="Scene currently shown to players",
    )

    objects = CampaignManager()

    class Meta:
        db_table = "campaigns_campaign"
        ordering = ["-updated_at", "name"]
        verbose_name = "Campaign"
        verbose_name_plural = "Campaigns"

    def __str__(self) -> str:
        """Return the campaign name."""
        return self.name

    def clean(self) -> None:
        """Validate the campaign data."""
        super().clean()
        if not self.name or not self.name.strip():
            raise ValidationError("Campaign name is required.")


class CampaignMembership(models.Model):
    """Role and status of one user inside one campaign."""

    campaign = models.ForeignKey(  # type: ignore[var-annotated]
        Campaign,
        on_delete=models.CASCADE,
        related_name="memberships",
        help_text="The campaign",
    )
    user = models.ForeignKey(  # type: ignore[var-annotated]
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="campaign_memberships",
        help_text="The user",
    )
    role = models.CharField(  # type: ignore[var-annotated]
        max_length=10,
        choices=Role.choices,
        help_text="The user's role in the campaign",
    )
    status = models.CharField(  # type: ignore[var-annotated]
        max_length=10,
        choices=MemberStatus.choices,
        default=MemberStatus.ACCEPTED,
        help_text="Whether the membership is currently in force",
    )
    invited_by = models.ForeignKey(  # type: ignore[var-annotated]
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
        help_text="The user whose invite created this membership",
    )
    created_at = models.DateTimeField(auto_now_add=True)  # type: ignore[var-annotated]

    class Meta:
        db_table = "campaigns_membership"
        constraints = [
            models.UniqueConstraint(
                fields=["campaign", "user"], name="unique_campaign_user_membership"
            ),
        ]
        indexes = [
            models.Index(fields=["user", "status"], name="membership_user_status_idx"),
        ]
        ordering = ["campaign", "created_at", "id"]
        verbose_name = "Campaign Membership"
        verbose_name_plural = "Campaign Memberships"

    def __str__(self) -> str:
        """Return a string representation of the membership."""
        return f"{self.user.username} - {self.campaign.name} ({self.role}, {self.status})"


class CampaignCharacter(models.Model):
    """Link between a campaign and a player's character."""

    campaign = models.ForeignKey(  # type: ignore[var-annotated]
        Campaign,
        on_delete=models.CASCADE,
        related_name="character_links",
    )
    character = models.ForeignKey(  # type: ignore[var-annotated]
        "characters.Character",
        on_delete=models.CASCADE,
        related_name="campaign_links",
    )
    created_at = models.DateTimeField(auto_now_add=True)  # type: ignore[var-annotated]

    class Meta:
        db_table = "campaigns_campaign_character"
        constraints = [
            models.UniqueConstraint(
                fields=["campaign", "character"],
                name="unique_campaign_character",
            ),
        ]
        ordering = ["created_at", "id"]

    def __str__(self) -> str:
        return f"{self.character} in {self.campaign}"
