"""
Tests for scene, map and token services.
"""

from django.contrib.auth import get_user_model
from django.test import TestCase

from campaigns.choices import MemberStatus, Role
from campaigns.exceptions import InvalidState, NotFound, NotPermitted
from campaigns.services import CampaignService, MembershipStore
from scenes.models import GM_ONLY, Scene, Token, TokenLayer
from scenes.services import SceneService, TokenService

User = get_user_model()


class TabletopTestMixin:
    def setUp(self):
        self.store = MembershipStore()
        self.owner = User.objects.create_user(
            username="gm", email="gm@test.com", password="testpass123"
        )
        self.viewer = User.objects.create_user(
            username="player", email="player@test.com", password="testpass123"
        )
        self.campaign = CampaignService().create_campaign(self.owner.id, "Lost Mine")
        self.store.put(self.campaign.id, self.viewer.id, Role.VIEWER, MemberStatus.ACCEPTED)
        self.scenes = SceneService()
        self.tokens = TokenService()


class SceneServiceTest(TabletopTestMixin, TestCase):
    def test_first_scene_becomes_active(self):
        first = self.scenes.create_scene(self.campaign.id, self.owner.id, "Cragmaw Hideout")
        second = self.scenes.create_scene(self.campaign.id, self.owner.id, "Phandalin")

        self.campaign.refresh_from_db()
        first.refresh_from_db()
        second.refresh_from_db()
        self.assertEqual(self.campaign.active_scene, first)
        self.assertTrue(first.is_active)
        self.assertFalse(second.is_active)
        self.assertEqual((first.ordering, second.ordering), (0, 1))

    def test_activate_on_create_moves_active_flag(self):
        first = self.scenes.create_scene(self.campaign.id, self.owner.id, "Road")
        second = self.scenes.create_scene(
            self.campaign.id, self.owner.id, "Ambush", activate=True
        )

        first.refresh_from_db()
        self.campaign.refresh_from_db()
        self.assertFalse(first.is_active)
        self.assertEqual(self.campaign.active_scene_id, second.id)

    def test_set_active_scene(self):
        first = self.scenes.create_scene(self.campaign.id, self.owner.id, "Road")
        second = self.scenes.create_scene(self.campaign.id, self.owner.id, "Cave")

        self.scenes.set_active_scene(self.campaign.id, self.owner.id, second.id)

        self.assertEqual(
            list(
                Scene.objects.filter(campaign=self.campaign, is_active=True).values_list(
                    "id", flat=True
                )
            ),
            [second.id],
        )
        self.campaign.refresh_from_db()
        self.assertEqual(self.campaign.active_scene_id, second.id)
        first.refresh_from_db()
        self.assertFalse(first.is_active)

    def test_set_active_scene_from_other_campaign(self):
        other = CampaignService().create_campaign(self.owner.id, "Other")
        foreign = self.scenes.create_scene(other.id, self.owner.id, "Elsewhere")

        with self.assertRaises(NotFound):
            self.scenes.set_active_scene(self.campaign.id, self.owner.id, foreign.id)

    def test_viewer_cannot_create_scenes(self):
        with self.assertRaises(NotPermitted):
            self.scenes.create_scene(self.campaign.id, self.viewer.id, "Sneaky")

    def test_blank_scene_name_rejected(self):
        with self.assertRaises(InvalidState):
            self.scenes.create_scene(self.campaign.id, self.owner.id, " ")

    def test_create_map_creates_default_scene(self):
        game_map = self.scenes.create_map(self.campaign.id, self.owner.id)

        scene = game_map.scene
        self.assertEqual(scene.name, "Table")
        self.assertTrue(scene.is_active)
        self.assertEqual(game_map.name, "Map")
        self.assertEqual(game_map.grid_size_ft, 5)
        self.assertEqual(game_map.lighting_mode, "none")
        self.campaign.refresh_from_db()
        self.assertEqual(self.campaign.active_scene, scene)

    def test_create_map_reuses_first_scene(self):
        scene = self.scenes.create_scene(self.campaign.id, self.owner.id, "Road")

        first = self.scenes.create_map(self.campaign.id, self.owner.id, name="Overland")
        second = self.scenes.create_map(self.campaign.id, self.owner.id)

        self.assertEqual(first.scene, scene)
        self.assertEqual(second.scene, scene)
        self.assertEqual(Scene.objects.filter(campaign=self.campaign).count(), 1)


class TokenServiceTest(TabletopTestMixin, TestCase):
    def setUp(self):
        super().setUp()
        self.map = self.scenes.create_map(self.campaign.id, self.owner.id)

    def test_token_defaults(self):
        token = self.tokens.create_token(self.map.id, self.owner.id, label="Goblin")

        self.assertEqual(token.audience, [GM_ONLY])
        self.assertEqual(token.layer, TokenLayer.TOKEN)
        self.assertEqual(token.size_squares, 1)
        self.assertEqual(token.tags, [])

    def test_non_positive_size_becomes_one(self):
        for size in (0, -3):
            with self.subTest(size=size):
                token = self.tokens.create_token(
                    self.map.id, self.owner.id, size_squares=size
                )
                self.assertEqual(token.size_squares, 1)

    def test_unknown_layer_rejected(self):
        with self.assertRaises(InvalidState):
            self.tokens.create_token(self.map.id, self.owner.id, layer="sky")

    def test_missing_map(self):
        with self.assertRaises(NotFound):
            self.tokens.create_token(999999, self.owner.id)

    def test_viewer_cannot_create_token(self):
        with self.assertRaises(NotPermitted):
            self.tokens.create_token(self.map.id, self.viewer.id, audience=[])

    def test_move_token(self):
        token = self.tokens.create_token(self.map.id, self.owner.id, label="Goblin")

        moved = self.tokens.move_token(token.id, self.owner.id, 7, -2)

        self.assertEqual((moved.position_x, moved.position_y), (7, -2))
        token.refresh_from_db()
        self.assertEqual((token.position_x, token.position_y), (7, -2))

    def test_last_move_wins(self):
        token = self.tokens.create_token(self.map.id, self.owner.id)

        self.tokens.move_token(token.id, self.owner.id, 1, 1)
        self.tokens.move_token(token.id, self.owner.id, 4, 5)

        token.refresh_from_db()
        self.assertEqual((token.position_x, token.position_y), (4, 5))

    def test_viewer_cannot_move_token(self):
        token = self.tokens.create_token(self.map.id, self.owner.id)

        with self.assertRaises(NotPermitted):
            self.tokens.move_token(token.id, self.viewer.id, 3, 3)

        token.refresh_from_db()
        self.assertEqual((token.position_x, token.position_y), (0, 0))

    def test_move_missing_token(self):
        with self.assertRaises(NotFound):
            self.tokens.move_token(999999, self.owner.id, 1, 1)

    def test_update_layer(self):
        token = self.tokens.create_token(self.map.id, self.owner.id)

        updated = self.tokens.update_layer(token.id, self.owner.id, "gm")

        self.assertEqual(updated.layer, TokenLayer.GM)
        self.assertTrue(updated.is_gm_only)

    def test_revoked_editor_cannot_touch_tokens(self):
        editor = User.objects.create_user(
            username="editor", email="editor@test.com", password="testpass123"
        )
        self.store.put(self.campaign.id, editor.id, Role.EDITOR, MemberStatus.REVOKED)
        token = self.tokens.create_token(self.map.id, self.owner.id)

        with self.assertRaises(NotPermitted):
            self.tokens.update_layer(token.id, editor.id, "map")
        self.assertEqual(Token.objects.get(pk=token.pk).layer, TokenLayer.TOKEN)
