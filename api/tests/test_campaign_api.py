"""
Tests for the campaign, membership and handout API endpoints.
"""

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from api.messages import ErrorMessages
from campaigns.choices import MemberStatus, Role
from campaigns.models import Campaign, CampaignMembership
from campaigns.services import CampaignService, MembershipStore
from characters.models import Character

User = get_user_model()


class CampaignAPITestCase(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.store = MembershipStore()
        self.owner = User.objects.create_user(
            username="owner", email="owner@test.com", password="testpass123"
        )
        self.editor = User.objects.create_user(
            username="editor", email="editor@test.com", password="testpass123"
        )
        self.viewer = User.objects.create_user(
            username="viewer", email="viewer@test.com", password="testpass123"
        )
        self.outsider = User.objects.create_user(
            username="outsider", email="outsider@test.com", password="testpass123"
        )
        self.campaign = CampaignService().create_campaign(self.owner.id, "Lost Mine")
        self.store.put(self.campaign.id, self.editor.id, Role.EDITOR, MemberStatus.ACCEPTED)
        self.store.put(self.campaign.id, self.viewer.id, Role.VIEWER, MemberStatus.ACCEPTED)


class CampaignListCreateAPITest(CampaignAPITestCase):
    def test_requires_authentication(self):
        response = self.client.get(reverse("api:campaigns:list_create"))

        self.assertIn(
            response.status_code,
            [status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN],
        )

    def test_create_campaign(self):
        self.client.force_authenticate(user=self.outsider)

        response = self.client.post(
            reverse("api:campaigns:list_create"), {"name": "Lost Mine"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["visibility"], "private")
        self.assertEqual(response.data["status"], "not_started")
        self.assertEqual(response.data["owner"]["id"], self.outsider.id)
        membership = CampaignMembership.objects.get(
            campaign_id=response.data["id"], user=self.outsider
        )
        self.assertEqual(membership.role, Role.OWNER)

    def test_create_campaign_blank_name(self):
        self.client.force_authenticate(user=self.owner)

        response = self.client.post(
            reverse("api:campaigns:list_create"), {"name": ""}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(Campaign.objects.count(), 1)

    def test_create_campaign_malformed_body(self):
        self.client.force_authenticate(user=self.owner)

        response = self.client.post(
            reverse("api:campaigns:list_create"),
            {"name": {"text": "Lost Mine"}},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["detail"], ErrorMessages.VALIDATION_ERROR)
        self.assertIn("name", response.data["errors"])
        self.assertEqual(Campaign.objects.count(), 1)

    def test_list_only_member_campaigns(self):
        CampaignService().create_campaign(self.outsider.id, "Someone else's")
        self.client.force_authenticate(user=self.viewer)

        response = self.client.get(reverse("api:campaigns:list_create"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([c["name"] for c in response.data], ["Lost Mine"])

    def test_details_include_characters(self):
        character = Character.objects.create(owner=self.owner, name="Sildar")
        CampaignService().add_character(self.campaign.id, self.owner.id, character.id)
        self.client.force_authenticate(user=self.viewer)

        response = self.client.get(reverse("api:campaigns:details"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data[0]["characters"][0]["name"], "Sildar")


class CampaignUpdateAPITest(CampaignAPITestCase):
    def status_url(self):
        return reverse("api:campaigns:status", kwargs={"campaign_id": self.campaign.id})

    def test_viewer_forbidden_editor_allowed(self):
        self.client.force_authenticate(user=self.viewer)
        response = self.client.put(self.status_url(), {"status": "in_progress"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

        self.client.force_authenticate(user=self.editor)
        response = self.client.put(self.status_url(), {"status": "in_progress"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["status"], "in_progress")

    def test_unknown_status(self):
        self.client.force_authenticate(user=self.owner)

        response = self.client.put(self.status_url(), {"status": "done"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_missing_status_field(self):
        self.client.force_authenticate(user=self.owner)

        response = self.client.put(self.status_url(), {}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("status", response.data["errors"])

    def test_unknown_campaign_and_non_member(self):
        self.client.force_authenticate(user=self.outsider)
        missing = reverse("api:campaigns:status", kwargs={"campaign_id": 999999})

        self.assertEqual(
            self.client.put(missing, {"status": "paused"}, format="json").status_code,
            status.HTTP_404_NOT_FOUND,
        )
        self.assertEqual(
            self.client.put(
                self.status_url(), {"status": "paused"}, format="json"
            ).status_code,
            status.HTTP_403_FORBIDDEN,
        )

    def test_update_campaign(self):
        self.client.force_authenticate(user=self.owner)
        url = reverse("api:campaigns:update", kwargs={"campaign_id": self.campaign.id})

        response = self.client.put(url, {"visibility": "invite"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["visibility"], "invite")
        self.assertEqual(response.data["name"], "Lost Mine")

    def test_add_character_conflict(self):
        character = Character.objects.create(owner=self.editor, name="Nundro")
        self.client.force_authenticate(user=self.editor)
        url = reverse(
            "api:campaigns:add_character", kwargs={"campaign_id": self.campaign.id}
        )

        first = self.client.post(url, {"character_id": character.id}, format="json")
        second = self.client.post(url, {"character_id": character.id}, format="json")

        self.assertEqual(first.status_code, status.HTTP_201_CREATED)
        self.assertEqual(second.status_code, status.HTTP_409_CONFLICT)

    def test_add_foreign_character_forbidden(self):
        character = Character.objects.create(owner=self.viewer, name="Tharden")
        self.client.force_authenticate(user=self.editor)
        url = reverse(
            "api:campaigns:add_character", kwargs={"campaign_id": self.campaign.id}
        )

        response = self.client.post(url, {"character_id": character.id}, format="json")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data["detail"], "Character not owned by user.")


class MemberAPITest(CampaignAPITestCase):
    def test_list_members(self):
        self.client.force_authenticate(user=self.viewer)
        url = reverse("api:campaigns:members", kwargs={"campaign_id": self.campaign.id})

        response = self.client.get(url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            [m["user"]["username"] for m in response.data],
            ["owner", "editor", "viewer"],
        )

    def test_list_members_role_filter(self):
        self.client.force_authenticate(user=self.viewer)
        url = reverse("api:campaigns:members", kwargs={"campaign_id": self.campaign.id})

        response = self.client.get(url, {"role": "EDITOR"})

        self.assertEqual([m["user"]["username"] for m in response.data], ["editor"])

    def test_change_role(self):
        self.client.force_authenticate(user=self.owner)
        url = reverse(
            "api:campaigns:change_member_role",
            kwargs={"campaign_id": self.campaign.id, "user_id": self.viewer.id},
        )

        response = self.client.put(url, {"role": "editor"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["role"], "editor")

    def test_owner_role_cannot_be_changed(self):
        for user in (self.editor, self.viewer):
            with self.subTest(user=user.username):
                self.client.force_authenticate(user=user)
                url = reverse(
                    "api:campaigns:change_member_role",
                    kwargs={"campaign_id": self.campaign.id, "user_id": self.owner.id},
                )

                response = self.client.put(url, {"role": "viewer"}, format="json")

                self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_revoke_member(self):
        self.client.force_authenticate(user=self.owner)
        url = reverse(
            "api:campaigns:revoke_member",
            kwargs={"campaign_id": self.campaign.id, "user_id": self.editor.id},
        )

        response = self.client.post(url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            self.store.get(self.campaign.id, self.editor.id).status,
            MemberStatus.REVOKED,
        )

    def test_revoke_owner_forbidden(self):
        self.client.force_authenticate(user=self.editor)
        url = reverse(
            "api:campaigns:revoke_member",
            kwargs={"campaign_id": self.campaign.id, "user_id": self.owner.id},
        )

        response = self.client.post(url)

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class HandoutAPITest(CampaignAPITestCase):
    def test_create_and_list(self):
        url = reverse("api:campaigns:handouts", kwargs={"campaign_id": self.campaign.id})
        self.client.force_authenticate(user=self.owner)

        created = self.client.post(
            url, {"title": "Letter", "file_url": "https://files/letter.pdf"}, format="json"
        )
        self.client.force_authenticate(user=self.viewer)
        listed = self.client.get(url)

        self.assertEqual(created.status_code, status.HTTP_201_CREATED)
        self.assertEqual([h["title"] for h in listed.data], ["Letter"])

    def test_viewer_cannot_create(self):
        url = reverse("api:campaigns:handouts", kwargs={"campaign_id": self.campaign.id})
        self.client.force_authenticate(user=self.viewer)

        response = self.client.post(url, {"title": "Forged"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
