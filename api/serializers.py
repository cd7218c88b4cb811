"""
API serializers for the tabletop application.

Output serializers render models; input serializers only parse and type-check
request bodies. Business rules (defaults, enum membership, permissions) are
enforced by the services, so input fields are deliberately permissive.
"""

from django.contrib.auth import get_user_model
from rest_framework import serializers

from campaigns.models import (
    Campaign,
    CampaignCharacter,
    CampaignHandout,
    CampaignInvite,
    CampaignMembership,
)
from characters.models import Character
from scenes.models import Map, Scene, Token

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    """Lightweight user serializer for nested responses."""

    class Meta:
        model = User
        fields = ("id", "username")


class CampaignSerializer(serializers.ModelSerializer):
    """Serializer for Campaign model."""

    owner = UserSerializer(read_only=True)

    class Meta:
        model = Campaign
        fields = (
            "id",
            "name",
            "description",
            "visibility",
            "status",
            "owner",
            "active_scene",
            "created_at",
            "updated_at",
        )
        read_only_fields = fields


class CharacterSerializer(serializers.ModelSerializer):
    owner = UserSerializer(read_only=True)

    class Meta:
        model = Character
        fields = ("id", "name", "character_class", "level", "owner")
        read_only_fields = fields


class CampaignCharacterSerializer(serializers.ModelSerializer):
    character = CharacterSerializer(read_only=True)

    class Meta:
        model = CampaignCharacter
        fields = ("id", "campaign", "character", "created_at")
        read_only_fields = fields


class CampaignDetailSerializer(CampaignSerializer):
    """Campaign with the characters linked to it."""

    characters = serializers.SerializerMethodField()

    class Meta(CampaignSerializer.Meta):
        fields = CampaignSerializer.Meta.fields + ("characters",)
        read_only_fields = fields

    def get_characters(self, obj):
        """Serialize linked characters, using prefetched links when present."""
        links = obj.character_links.all()
        return CharacterSerializer([link.character for link in links], many=True).data


class CampaignMembershipSerializer(serializers.ModelSerializer):
    """Serializer for CampaignMembership model."""

    user = UserSerializer(read_only=True)

    class Meta:
        model = CampaignMembership
        fields = ("id", "campaign", "user", "role", "status", "invited_by", "created_at")
        read_only_fields = fields


class CampaignInviteSerializer(serializers.ModelSerializer):
    """Serializer for CampaignInvite model."""

    is_redeemed = serializers.ReadOnlyField()

    class Meta:
        model = CampaignInvite
        fields = (
            "id",
            "campaign",
            "code",
            "role_default",
            "status",
            "invited_by",
            "expires_at",
            "redeemed_by",
            "redeemed_at",
            "is_redeemed",
            "created_at",
        )
        read_only_fields = fields


class CampaignHandoutSerializer(serializers.ModelSerializer):
    class Meta:
        model = CampaignHandout
        fields = (
            "id",
            "campaign",
            "title",
            "description",
            "file_url",
            "created_by",
            "created_at",
        )
        read_only_fields = fields


class TokenSerializer(serializers.ModelSerializer):
    class Meta:
        model = Token
        fields = (
            "id",
            "map",
            "character",
            "label",
            "image_url",
            "size_squares",
            "position_x",
            "position_y",
            "facing_deg",
            "audience",
            "tags",
            "notes",
            "layer",
            "created_by",
            "created_at",
        )
        read_only_fields = fields


class MapSerializer(serializers.ModelSerializer):
    class Meta:
        model = Map
        fields = (
            "id",
            "scene",
            "name",
            "base_image_url",
            "grid_size_ft",
            "width_px",
            "height_px",
            "lighting_mode",
            "fog_state",
            "created_at",
        )
        read_only_fields = fields


class SceneSerializer(serializers.ModelSerializer):
    class Meta:
        model = Scene
        fields = (
            "id",
            "campaign",
            "name",
            "description",
            "ordering",
            "is_active",
            "created_by",
            "created_at",
            "updated_at",
        )
        read_only_fields = fields


class TabletopSnapshotSerializer(serializers.Serializer):
    """
    Render the dict built by ``TabletopService.get_full``.

    Scenes arrive as ``{"scene": Scene, "maps": [{"map": Map, "tokens": [...]}]}``
    so token visibility is already decided before rendering.
    """

    campaign = CampaignSerializer(read_only=True)
    role = serializers.CharField(read_only=True)
    members = CampaignMembershipSerializer(many=True, read_only=True)
    characters = CharacterSerializer(many=True, read_only=True)
    handouts = CampaignHandoutSerializer(many=True, read_only=True)
    scenes = serializers.SerializerMethodField()

    def get_scenes(self, obj):
        scenes = []
        for entry in obj["scenes"]:
            scene_data = dict(SceneSerializer(entry["scene"]).data)
            scene_data["maps"] = []
            for map_entry in entry["maps"]:
                map_data = dict(MapSerializer(map_entry["map"]).data)
                map_data["tokens"] = TokenSerializer(map_entry["tokens"], many=True).data
                scene_data["maps"].append(map_data)
            scenes.append(scene_data)
        return scenes


# Request body serializers


class CampaignWriteSerializer(serializers.Serializer):
    name = serializers.CharField(required=False, allow_blank=True, default="")
    description = serializers.CharField(required=False, allow_blank=True, default="")
    visibility = serializers.CharField(required=False, allow_blank=True, default="")
    status = serializers.CharField(required=False, allow_blank=True, default="")


class CampaignStatusSerializer(serializers.Serializer):
    status = serializers.CharField()


class AddCharacterSerializer(serializers.Serializer):
    character_id = serializers.IntegerField()


class InviteCreateSerializer(serializers.Serializer):
    role_default = serializers.CharField(required=False, allow_blank=True, default="")
    expires_at = serializers.DateTimeField(required=False, allow_null=True, default=None)


class MemberRoleSerializer(serializers.Serializer):
    role = serializers.CharField()


class HandoutCreateSerializer(serializers.Serializer):
    title = serializers.CharField(required=False, allow_blank=True, default="")
    description = serializers.CharField(required=False, allow_blank=True, default="")
    file_url = serializers.CharField(required=False, allow_blank=True, default="")


class SceneCreateSerializer(serializers.Serializer):
    name = serializers.CharField(required=False, allow_blank=True, default="")
    description = serializers.CharField(required=False, allow_blank=True, default="")
    activate = serializers.BooleanField(required=False, default=False)


class ActiveSceneSerializer(serializers.Serializer):
    scene_id = serializers.IntegerField()


class MapCreateSerializer(serializers.Serializer):
    name = serializers.CharField(required=False, allow_blank=True, default="Map")
    base_image_url = serializers.CharField(required=False, allow_blank=True, default="")


class TokenCreateSerializer(serializers.Serializer):
    label = serializers.CharField(required=False, allow_blank=True, default="")
    character_id = serializers.IntegerField(required=False, allow_null=True, default=None)
    image_url = serializers.CharField(required=False, allow_blank=True, default="")
    size_squares = serializers.IntegerField(required=False, default=1)
    position_x = serializers.IntegerField(required=False, default=0)
    position_y = serializers.IntegerField(required=False, default=0)
    facing_deg = serializers.IntegerField(required=False, default=0)
    audience = serializers.ListField(
        child=serializers.CharField(), required=False, allow_null=True, default=None
    )
    tags = serializers.ListField(
        child=serializers.CharField(), required=False, default=list
    )
    layer = serializers.CharField(required=False, allow_blank=True, default="")


class TokenPositionSerializer(serializers.Serializer):
    position_x = serializers.IntegerField()
    position_y = serializers.IntegerField()


class TokenLayerSerializer(serializers.Serializer):
    layer = serializers.CharField()
