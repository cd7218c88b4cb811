"""
URL configuration for campaign API endpoints.
"""

from django.urls import path

from api.views.campaigns import (
    CampaignDetailListAPIView,
    CampaignListCreateAPIView,
    accept_campaign_invite,
    add_campaign_character,
    campaign_full,
    campaign_handouts,
    campaign_invites,
    update_campaign,
    update_campaign_status,
)
from api.views.memberships import (
    change_member_role,
    list_campaign_members,
    revoke_campaign_member,
)
from api.views.scene_views import create_map, create_scene, set_active_scene

app_name = "campaigns"

urlpatterns = [
    # Campaign CRUD operations
    path("", CampaignListCreateAPIView.as_view(), name="list_create"),
    path("details/", CampaignDetailListAPIView.as_view(), name="details"),
    path("<int:campaign_id>/", update_campaign, name="update"),
    path("<int:campaign_id>/status/", update_campaign_status, name="status"),
    path(
        "<int:campaign_id>/characters/",
        add_campaign_character,
        name="add_character",
    ),
    path("<int:campaign_id>/full/", campaign_full, name="full"),
    # Invites
    path("<int:campaign_id>/invites/", campaign_invites, name="invites"),
    path(
        "invites/<str:code>/accept/",
        accept_campaign_invite,
        name="accept_invite",
    ),
    # Campaign membership management
    path("<int:campaign_id>/members/", list_campaign_members, name="members"),
    path(
        "<int:campaign_id>/members/<int:user_id>/role/",
        change_member_role,
        name="change_member_role",
    ),
    path(
        "<int:campaign_id>/members/<int:user_id>/revoke/",
        revoke_campaign_member,
        name="revoke_member",
    ),
    # Content
    path("<int:campaign_id>/handouts/", campaign_handouts, name="handouts"),
    path("<int:campaign_id>/scenes/", create_scene, name="create_scene"),
    path(
        "<int:campaign_id>/scenes/active/",
        set_active_scene,
        name="active_scene",
    ),
    path("<int:campaign_id>/maps/", create_map, name="create_map"),
]
