"""
Invitation lifecycle: issuing one-time codes and redeeming them.

Codes are random strings drawn from an alphabet without easily confused
characters. Collisions are detected by the unique constraint on
``CampaignInvite.code`` rather than by a read-before-insert check, so two
concurrent issuers can never end up holding the same code.
"""

import logging
import secrets
from datetime import datetime, timedelta
from typing import Any, Callable, Optional

from django.conf import settings
from django.db import DatabaseError, IntegrityError, transaction
from django.db.models import QuerySet
from django.utils import timezone

from ..choices import MemberStatus, Role
from ..exceptions import (
    AlreadyExists,
    AlreadyMember,
    CouldNotGenerateCode,
    InvalidState,
    InviteExpired,
    InviteNotFound,
    InviteRedeemed,
    StoreError,
)
from ..models import Campaign, CampaignInvite
from ..permissions import Action
from .access import resolve_access
from .membership_store import MembershipStore

logger = logging.getLogger(__name__)


def generate_invite_code(
    length: Optional[int] = None, alphabet: Optional[str] = None
) -> str:
    """Return a random invite code using the configured length and alphabet."""
    length = length or settings.INVITE_CODE_LENGTH
    alphabet = alphabet or settings.INVITE_CODE_ALPHABET
    return "".join(secrets.choice(alphabet) for _ in range(length))


class InvitationService:
    """Issue, list and redeem campaign invites."""

    def __init__(
        self,
        store: Optional[MembershipStore] = None,
        code_generator: Optional[Callable[[], str]] = None,
        max_attempts: Optional[int] = None,
    ):
        self.store = store or MembershipStore()
        self.code_generator = code_generator or generate_invite_code
        self.max_attempts = max_attempts

    def issue(
        self,
        campaign_id: Any,
        user_id: Any,
        role_default: Optional[str] = None,
        expires_at: Optional[datetime] = None,
    ) -> CampaignInvite:
        """Create a new invite for the campaign.

        Args:
            campaign_id: The campaign to invite into
            user_id: The member issuing the invite
            role_default: ``viewer`` (default) or ``editor``
            expires_at: Expiry time; a missing or past value is replaced by
                now plus the configured time-to-live. Naive values are read
                in the current time zone

        Returns:
            The created invite

        Raises:
            InvalidState: If role_default is not viewer or editor
            NotFound, NotCampaignMember, NotPermitted: From access resolution
            CouldNotGenerateCode: If every attempt collided
        """
        role_default = role_default or Role.VIEWER
        if role_default not in (Role.VIEWER, Role.EDITOR):
            raise InvalidState("Invite role must be 'viewer' or 'editor'.")

        now = timezone.now()
        if expires_at is not None and timezone.is_naive(expires_at):
            expires_at = timezone.make_aware(expires_at)
        if expires_at is None or expires_at <= now:
            expires_at = now + timedelta(days=settings.INVITE_DEFAULT_TTL_DAYS)

        campaign, _ = resolve_access(
            campaign_id, user_id, Action.MANAGE_MEMBERS, self.store
        )

        attempts = self.max_attempts or settings.INVITE_CODE_MAX_ATTEMPTS
        for attempt in range(1, attempts + 1):
            code = self.code_generator()
            try:
                with transaction.atomic():
                    invite = CampaignInvite.objects.create(
                        campaign=campaign,
                        code=code,
                        invited_by_id=user_id,
                        role_default=role_default,
                        expires_at=expires_at,
                    )
            except IntegrityError as exc:
                if not CampaignInvite.objects.filter(code=code).exists():
                    logger.exception(
                        "Invite insert failed for campaign %s", campaign.id
                    )
                    raise StoreError("Failed to create invite.") from exc
                logger.debug(
                    "Invite code collision on attempt %d/%d for campaign %s",
                    attempt,
                    attempts,
                    campaign.id,
                )
                continue

            logger.info(
                "Invite %s issued for campaign %s by user %s (role %s)",
                invite.code,
                campaign.id,
                user_id,
                role_default,
            )
            return invite

        logger.error(
            "Could not generate a unique invite code for campaign %s after %d attempts",
            campaign.id,
            attempts,
        )
        raise CouldNotGenerateCode()

    def list_for_campaign(self, campaign_id: Any, user_id: Any) -> QuerySet:
        """All invites of the campaign, newest first."""
        campaign, _ = resolve_access(
            campaign_id, user_id, Action.MANAGE_MEMBERS, self.store
        )
        return CampaignInvite.objects.filter(campaign=campaign).order_by(
            "-created_at", "-id"
        )

    def redeem(self, code: str, user_id: Any) -> Campaign:
        """Redeem an invite code for ``user_id``.

        An existing membership row (pending or revoked) is re-admitted with
        the invite's role; otherwise a new accepted membership is created.
        The invite is stamped and the membership written in one transaction.

        Raises:
            InviteNotFound: If no invite has this code
            InviteExpired: If the invite is past its expiry
            InviteRedeemed: If the invite was already used
            AlreadyMember: If the user already holds an accepted membership
        """
        try:
            invite = CampaignInvite.objects.select_related("campaign").get(
                code=code
            )
        except CampaignInvite.DoesNotExist:
            raise InviteNotFound()

        now = timezone.now()
        self._check_redeemable(invite, now)
        self._check_not_member(invite.campaign_id, user_id)

        try:
            with transaction.atomic():
                locked = CampaignInvite.objects.select_for_update().get(pk=invite.pk)
                self._check_redeemable(locked, now)
                self._check_not_member(locked.campaign_id, user_id)

                locked.redeem(user_id, when=now)
                locked.save(update_fields=["status", "redeemed_by", "redeemed_at"])

                if self.store.find(locked.campaign_id, user_id) is None:
                    self.store.put(
                        locked.campaign_id,
                        user_id,
                        locked.role_default,
                        MemberStatus.ACCEPTED,
                        invited_by=locked.invited_by_id,
                    )
                else:
                    self.store.set_role(locked.campaign_id, user_id, locked.role_default)
                    self.store.set_status(
                        locked.campaign_id, user_id, MemberStatus.ACCEPTED
                    )
        except AlreadyExists:
            raise AlreadyMember()
        except DatabaseError as exc:
            logger.exception("Redeeming invite %s failed for user %s", code, user_id)
            raise StoreError("Failed to redeem invite.") from exc

        logger.info(
            "User %s joined campaign %s via invite %s as %s",
            user_id,
            invite.campaign_id,
            invite.code,
            invite.role_default,
        )
        return invite.campaign

    def _check_redeemable(self, invite: CampaignInvite, now: datetime) -> None:
        if invite.is_expired(now):
            raise InviteExpired()
        if invite.is_redeemed:
            raise InviteRedeemed()

    def _check_not_member(self, campaign_id: Any, user_id: Any) -> None:
        existing = self.store.find(campaign_id, user_id)
        if existing is not None and existing.status == MemberStatus.ACCEPTED:
            raise AlreadyMember()
