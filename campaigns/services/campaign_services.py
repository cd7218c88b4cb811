"""
Service layer for campaign business logic.

This module provides service classes that handle campaign creation and
updates, membership administration and handouts. Every method takes the
acting user's id explicitly and checks it against the campaign's membership
table before changing anything.
"""

import logging
from typing import Any, Optional

from django.db import DatabaseError, IntegrityError, transaction
from django.db.models import Prefetch, QuerySet

from characters.models import Character

from ..choices import CampaignStatus, MemberStatus, Role, Visibility, parse_choice
from ..exceptions import (
    AlreadyExists,
    CharacterNotOwned,
    InvalidState,
    NotFound,
    NotPermitted,
    StoreError,
)
from ..models import Campaign, CampaignCharacter, CampaignHandout, CampaignMembership
from ..permissions import Action, can_change_role, can_revoke
from .access import resolve_access
from .membership_store import MembershipStore

logger = logging.getLogger(__name__)


class CampaignService:
    """Service for general campaign operations."""

    def __init__(self, store: Optional[MembershipStore] = None):
        """Initialize service, optionally with a specific membership store."""
        self.store = store or MembershipStore()

    def create_campaign(
        self,
        owner_id: Any,
        name: str,
        description: str = "",
        visibility: Optional[str] = None,
        status: Optional[str] = None,
    ) -> Campaign:
        """Create a new campaign and its owner membership.

        Args:
            owner_id: The user who will own the campaign
            name: Campaign name (required)
            description: Optional description
            visibility: ``private`` (default) or ``invite``
            status: Lifecycle status, ``not_started`` by default

        Returns:
            The created campaign

        Raises:
            InvalidState: If the name is blank or an enum value is unknown
            StoreError: If either insert fails; nothing is persisted
        """
        if not name or not name.strip():
            raise InvalidState("Campaign name is required.")
        visibility = parse_choice(
            Visibility, visibility or Visibility.PRIVATE, "visibility"
        )
        status = parse_choice(
            CampaignStatus, status or CampaignStatus.NOT_STARTED, "status"
        )

        try:
            with transaction.atomic():
                campaign = Campaign.objects.create(
                    owner_id=owner_id,
                    name=name.strip(),
                    description=description or "",
                    visibility=visibility,
                    status=status,
                )
                self.store.put(
                    campaign.id, owner_id, Role.OWNER, MemberStatus.ACCEPTED
                )
        except DatabaseError as exc:
            logger.exception("Campaign creation rolled back for user %s", owner_id)
            raise StoreError("Failed to create campaign.") from exc

        logger.info("Campaign %s created by user %s", campaign.id, owner_id)
        return campaign

    def list_campaigns(self, user_id: Any) -> QuerySet:
        """Campaigns in which the user holds an accepted membership."""
        return Campaign.objects.for_member(user_id)

    def list_campaign_details(self, user_id: Any) -> QuerySet:
        """Member campaigns with their linked characters and owners loaded."""
        return self.list_campaigns(user_id).prefetch_related(
            Prefetch(
                "character_links",
                queryset=CampaignCharacter.objects.select_related(
                    "character__owner"
                ),
            )
        )

    def update_campaign(
        self,
        campaign_id: Any,
        user_id: Any,
        name: Optional[str] = None,
        description: Optional[str] = None,
        visibility: Optional[str] = None,
        status: Optional[str] = None,
    ) -> Campaign:
        """Update campaign fields.

        Unspecified or empty fields keep their current values.
        """
        if visibility:
            visibility = parse_choice(Visibility, visibility, "visibility")
        if status:
            status = parse_choice(CampaignStatus, status, "status")

        campaign, _ = resolve_access(
            campaign_id, user_id, Action.EDIT_CAMPAIGN, self.store
        )

        if name and name.strip():
            campaign.name = name.strip()
        if description:
            campaign.description = description
        if visibility:
            campaign.visibility = visibility
        if status:
            campaign.status = status
        campaign.save(
            update_fields=["name", "description", "visibility", "status", "updated_at"]
        )
        return campaign

    def update_status(self, campaign_id: Any, user_id: Any, status: str) -> Campaign:
        """Move the campaign to another lifecycle status."""
        status = parse_choice(CampaignStatus, status, "status")
        campaign, _ = resolve_access(
            campaign_id, user_id, Action.EDIT_CAMPAIGN, self.store
        )
        old_status = campaign.status
        campaign.status = status
        campaign.save(update_fields=["status", "updated_at"])
        logger.info(
            "Campaign %s status changed from '%s' to '%s' by user %s",
            campaign.id,
            old_status,
            status,
            user_id,
        )
        return campaign

    def add_character(
        self, campaign_id: Any, user_id: Any, character_id: Any
    ) -> CampaignCharacter:
        """Attach one of the caller's characters to the campaign.

        Raises:
            NotFound: If the campaign or character does not exist
            CharacterNotOwned: If the caller does not own the character
            AlreadyExists: If the character is already linked
        """
        campaign, _ = resolve_access(
            campaign_id, user_id, Action.MANAGE_CONTENT, self.store
        )

        try:
            character = Character.objects.get(id=character_id)
        except (Character.DoesNotExist, ValueError, TypeError):
            raise NotFound("Character not found.")
        if character.owner_id != user_id:
            raise CharacterNotOwned()

        try:
            with transaction.atomic():
                return CampaignCharacter.objects.create(
                    campaign=campaign, character=character
                )
        except IntegrityError:
            raise AlreadyExists("Character already in campaign.")


class MembershipService:
    """Service for handling campaign membership operations."""

    def __init__(self, store: Optional[MembershipStore] = None):
        self.store = store or MembershipStore()

    def list_members(self, campaign_id: Any, user_id: Any) -> QuerySet:
        """Get all campaign members with user information."""
        campaign, _ = resolve_access(
            campaign_id, user_id, Action.VIEW_AS_PLAYER, self.store
        )
        return self.store.list_members(campaign.id)

    def update_member_role(
        self, campaign_id: Any, actor_id: Any, target_id: Any, role: str
    ) -> CampaignMembership:
        """Change a member's role in the campaign.

        Args:
            campaign_id: The campaign
            actor_id: The member making the change
            target_id: The member whose role changes
            role: The new role

        Returns:
            The updated membership

        Raises:
            InvalidState: If role is invalid
            NotCampaignMember: If actor or target has no membership
            NotPermitted: If the actor may not make this change
        """
        role = parse_choice(Role, role, "role")
        campaign, actor = resolve_access(
            campaign_id, actor_id, Action.MANAGE_MEMBERS, self.store
        )
        target = self.store.get(campaign.id, target_id)

        if target.user_id == campaign.owner_id and role != Role.OWNER:
            raise NotPermitted("The campaign owner's role cannot be changed.")
        if not can_change_role(actor.role, target.role, role):
            raise NotPermitted()

        self.store.set_role(campaign.id, target.user_id, role)
        logger.info(
            "Campaign %s: user %s changed role of user %s from '%s' to '%s'",
            campaign.id,
            actor_id,
            target.user_id,
            target.role,
            role,
        )
        return self.store.get(campaign.id, target.user_id)

    def revoke_member(self, campaign_id: Any, actor_id: Any, target_id: Any) -> None:
        """Revoke a member's access.

        Owners can never be revoked. Revoking an already revoked member
        writes the same status again.
        """
        campaign, actor = resolve_access(
            campaign_id, actor_id, Action.MANAGE_MEMBERS, self.store
        )
        target = self.store.get(campaign.id, target_id)

        if target.user_id == campaign.owner_id or not can_revoke(
            actor.role, target.role
        ):
            raise NotPermitted("Campaign owners cannot be revoked.")

        self.store.set_status(campaign.id, target.user_id, MemberStatus.REVOKED)
        logger.info(
            "Campaign %s: user %s revoked user %s",
            campaign.id,
            actor_id,
            target.user_id,
        )


class HandoutService:
    """Service for files and notes shared with the party."""

    DEFAULT_TITLE = "Handout"

    def __init__(self, store: Optional[MembershipStore] = None):
        self.store = store or MembershipStore()

    def list_handouts(self, campaign_id: Any, user_id: Any) -> QuerySet:
        campaign, _ = resolve_access(
            campaign_id, user_id, Action.VIEW_AS_PLAYER, self.store
        )
        return CampaignHandout.objects.filter(campaign=campaign).order_by(
            "created_at", "id"
        )

    def create_handout(
        self,
        campaign_id: Any,
        user_id: Any,
        title: str = "",
        description: str = "",
        file_url: str = "",
    ) -> CampaignHandout:
        campaign, _ = resolve_access(
            campaign_id, user_id, Action.MANAGE_CONTENT, self.store
        )
        return CampaignHandout.objects.create(
            campaign=campaign,
            title=(title or "").strip() or self.DEFAULT_TITLE,
            description=description or "",
            file_url=file_url or "",
            created_by_id=user_id,
        )
