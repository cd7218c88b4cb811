"""
Tests for the scene, map, token and snapshot endpoints.
"""

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from campaigns.choices import MemberStatus, Role
from campaigns.services import CampaignService, MembershipStore
from scenes.models import Token

User = get_user_model()


class TabletopAPITest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.gm = User.objects.create_user(
            username="gm", email="gm@test.com", password="testpass123"
        )
        self.viewer = User.objects.create_user(
            username="viewer", email="viewer@test.com", password="testpass123"
        )
        self.campaign = CampaignService().create_campaign(self.gm.id, "Lost Mine")
        MembershipStore().put(
            self.campaign.id, self.viewer.id, Role.VIEWER, MemberStatus.ACCEPTED
        )

    def campaign_url(self, name):
        return reverse(f"api:campaigns:{name}", kwargs={"campaign_id": self.campaign.id})

    def create_map(self):
        self.client.force_authenticate(user=self.gm)
        response = self.client.post(
            self.campaign_url("create_map"), {"name": "Cragmaw"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        return response.data["id"]

    def create_token(self, map_id, **data):
        self.client.force_authenticate(user=self.gm)
        response = self.client.post(
            reverse("api:tabletop:create_token", kwargs={"map_id": map_id}),
            data,
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        return response.data

    def test_gm_only_token_absent_from_viewer_snapshot(self):
        map_id = self.create_map()
        self.create_token(map_id, label="Ambush", audience=["gm-only"])
        self.create_token(map_id, label="Wagon", audience=[])

        self.client.force_authenticate(user=self.viewer)
        viewer_view = self.client.get(self.campaign_url("full"))
        self.client.force_authenticate(user=self.gm)
        gm_view = self.client.get(self.campaign_url("full"))

        def labels(response):
            return [
                token["label"]
                for scene in response.data["scenes"]
                for game_map in scene["maps"]
                for token in game_map["tokens"]
            ]

        self.assertEqual(viewer_view.status_code, status.HTTP_200_OK)
        self.assertEqual(viewer_view.data["role"], "viewer")
        self.assertEqual(labels(viewer_view), ["Wagon"])
        self.assertEqual(labels(gm_view), ["Ambush", "Wagon"])

    def test_token_defaults_over_api(self):
        map_id = self.create_map()

        token = self.create_token(map_id, label="Goblin", size_squares=0)

        self.assertEqual(token["audience"], ["gm-only"])
        self.assertEqual(token["layer"], "token")
        self.assertEqual(token["size_squares"], 1)

    def test_move_token(self):
        token = self.create_token(self.create_map(), label="Goblin")
        url = reverse("api:tabletop:move_token", kwargs={"token_id": token["id"]})

        response = self.client.put(url, {"position_x": 3, "position_y": 9}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual((response.data["position_x"], response.data["position_y"]), (3, 9))

        self.client.force_authenticate(user=self.viewer)
        denied = self.client.put(url, {"position_x": 0, "position_y": 0}, format="json")
        self.assertEqual(denied.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(Token.objects.get(pk=token["id"]).position_x, 3)

    def test_move_missing_token(self):
        self.client.force_authenticate(user=self.gm)
        url = reverse("api:tabletop:move_token", kwargs={"token_id": 999999})

        response = self.client.put(url, {"position_x": 1, "position_y": 1}, format="json")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_token_layer(self):
        token = self.create_token(self.create_map())
        url = reverse("api:tabletop:token_layer", kwargs={"token_id": token["id"]})

        ok = self.client.put(url, {"layer": "object"}, format="json")
        bad = self.client.put(url, {"layer": "ceiling"}, format="json")

        self.assertEqual(ok.status_code, status.HTTP_200_OK)
        self.assertEqual(ok.data["layer"], "object")
        self.assertEqual(bad.status_code, status.HTTP_400_BAD_REQUEST)

    def test_scenes_and_activation(self):
        self.client.force_authenticate(user=self.gm)
        first = self.client.post(
            self.campaign_url("create_scene"), {"name": "Road"}, format="json"
        )
        second = self.client.post(
            self.campaign_url("create_scene"), {"name": "Cave"}, format="json"
        )
        self.assertTrue(first.data["is_active"])
        self.assertFalse(second.data["is_active"])

        response = self.client.put(
            self.campaign_url("active_scene"),
            {"scene_id": second.data["id"]},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.campaign.refresh_from_db()
        self.assertEqual(self.campaign.active_scene_id, second.data["id"])

        self.client.force_authenticate(user=self.viewer)
        snapshot = self.client.get(self.campaign_url("full"))
        self.assertEqual([s["name"] for s in snapshot.data["scenes"]], ["Cave"])

    def test_snapshot_for_non_member(self):
        outsider = User.objects.create_user(
            username="outsider", email="outsider@test.com", password="testpass123"
        )
        self.client.force_authenticate(user=outsider)

        response = self.client.get(self.campaign_url("full"))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
