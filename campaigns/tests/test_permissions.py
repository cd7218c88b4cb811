"""
Tests for the campaign permission gate.

The gate only looks at a member's (role, status) pair, so every combination
is checked directly without touching the database.
"""

from django.test import SimpleTestCase

from campaigns.choices import MemberStatus, Role
from campaigns.exceptions import NotPermitted
from campaigns.models import CampaignMembership
from campaigns.permissions import (
    Action,
    authorize,
    can_change_role,
    can_revoke,
    is_gm,
    require,
)

GM_ACTIONS = (
    Action.EDIT_CAMPAIGN,
    Action.MANAGE_MEMBERS,
    Action.MANAGE_CONTENT,
    Action.VIEW_AS_GM,
)


class AuthorizeMatrixTest(SimpleTestCase):
    """Exhaustive (role, status, action) matrix."""

    def test_accepted_gm_roles_may_do_everything(self):
        for role in (Role.OWNER, Role.EDITOR):
            for action in Action:
                with self.subTest(role=role, action=action):
                    self.assertTrue(authorize(role, MemberStatus.ACCEPTED, action))

    def test_accepted_viewer_may_only_view_as_player(self):
        for action in Action:
            with self.subTest(action=action):
                self.assertEqual(
                    authorize(Role.VIEWER, MemberStatus.ACCEPTED, action),
                    action is Action.VIEW_AS_PLAYER,
                )

    def test_non_accepted_members_are_denied_everything(self):
        for status in (MemberStatus.PENDING, MemberStatus.REVOKED):
            for role in Role:
                for action in Action:
                    with self.subTest(status=status, role=role, action=action):
                        self.assertFalse(authorize(role, status, action))

    def test_plain_strings_are_accepted(self):
        """Values read back from the database are plain strings."""
        self.assertTrue(authorize("editor", "accepted", Action.MANAGE_CONTENT))
        self.assertFalse(authorize("viewer", "accepted", Action.MANAGE_CONTENT))

    def test_unknown_role_is_denied(self):
        for action in Action:
            with self.subTest(action=action):
                self.assertFalse(authorize("dungeon_master", "accepted", action))
                self.assertFalse(authorize(None, None, action))

    def test_is_gm(self):
        self.assertTrue(is_gm(Role.OWNER))
        self.assertTrue(is_gm("editor"))
        self.assertFalse(is_gm(Role.VIEWER))
        self.assertFalse(is_gm(None))


class RequireTest(SimpleTestCase):
    def test_require_raises_not_permitted(self):
        record = CampaignMembership(role=Role.VIEWER, status=MemberStatus.ACCEPTED)
        for action in GM_ACTIONS:
            with self.subTest(action=action):
                with self.assertRaises(NotPermitted):
                    require(record, action)

    def test_require_passes_for_allowed_action(self):
        record = CampaignMembership(role=Role.EDITOR, status=MemberStatus.ACCEPTED)
        require(record, Action.MANAGE_MEMBERS)


class RoleChangeRulesTest(SimpleTestCase):
    def test_only_owner_may_grant_owner(self):
        self.assertTrue(can_change_role(Role.OWNER, Role.EDITOR, Role.OWNER))
        self.assertFalse(can_change_role(Role.EDITOR, Role.VIEWER, Role.OWNER))

    def test_only_owner_may_demote_owner(self):
        self.assertTrue(can_change_role(Role.OWNER, Role.OWNER, Role.EDITOR))
        self.assertFalse(can_change_role(Role.EDITOR, Role.OWNER, Role.VIEWER))

    def test_gm_roles_may_swap_editor_and_viewer(self):
        for actor in (Role.OWNER, Role.EDITOR):
            with self.subTest(actor=actor):
                self.assertTrue(can_change_role(actor, Role.VIEWER, Role.EDITOR))
                self.assertTrue(can_change_role(actor, Role.EDITOR, Role.VIEWER))
        self.assertFalse(can_change_role(Role.VIEWER, Role.VIEWER, Role.EDITOR))

    def test_owners_are_never_revocable(self):
        for actor in Role:
            with self.subTest(actor=actor):
                self.assertFalse(can_revoke(actor, Role.OWNER))

    def test_gm_roles_may_revoke_non_owners(self):
        self.assertTrue(can_revoke(Role.OWNER, Role.EDITOR))
        self.assertTrue(can_revoke(Role.EDITOR, Role.VIEWER))
        self.assertFalse(can_revoke(Role.VIEWER, Role.VIEWER))
