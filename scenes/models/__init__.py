from __future__ import annotations

from django.conf import settings
from django.db import models

from campaigns.models import Campaign
from core.models import DescribedModelMixin, TimestampedMixin

GM_ONLY = "gm-only"


class TokenLayer(models.TextChoices):
    MAP = "map", "Map"
    OBJECT = "object", "Object"
    TOKEN = "token", "Token"
    GM = "gm", "GM"


class LightingMode(models.TextChoices):
    NONE = "none", "None"
    BASIC = "basic", "Basic"
    DYNAMIC = "dynamic", "Dynamic"


class SceneQuerySet(models.QuerySet):
    """Custom queryset for Scene model."""

    def by_campaign(self, campaign_id):
        """Filter scenes by campaign ID, in display order."""
        return self.filter(campaign_id=campaign_id).order_by("ordering", "id")

    def with_maps(self, token_queryset=None):
        """Prefetch maps and their tokens, optionally through a filtered queryset."""
        tokens = token_queryset if token_queryset is not None else Token.objects.all()
        return self.prefetch_related(
            models.Prefetch(
                "maps",
                queryset=Map.objects.order_by("id").prefetch_related(
                    models.Prefetch("tokens", queryset=tokens.order_by("id"))
                ),
            )
        )


class Scene(TimestampedMixin, DescribedModelMixin):
    """
    A scene within a campaign.

    Exactly one scene per campaign may be active at a time; the active one is
    mirrored by ``Campaign.active_scene``.
    """

    name: models.CharField = models.CharField(max_length=200, help_text="Scene name")
    campaign: models.ForeignKey = models.ForeignKey(
        Campaign,
        on_delete=models.CASCADE,
        related_name="scenes",
        help_text="The campaign this scene belongs to",
    )
    ordering: models.IntegerField = models.IntegerField(
        default=0, help_text="Position of the scene in the campaign"
    )
    is_active: models.BooleanField = models.BooleanField(default=False)
    created_by: models.ForeignKey = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="created_scenes",
        help_text="The user who created this scene",
    )

    objects = SceneQuerySet.as_manager()

    class Meta:
        db_table = "scenes_scene"
        ordering = ["ordering", "id"]
        verbose_name = "Scene"
        verbose_name_plural = "Scenes"
        indexes = [
            models.Index(
                fields=["campaign", "ordering"], name="scene_campaign_ordering_idx"
            ),
        ]

    def __str__(self) -> str:
        """Return the scene name."""
        return self.name


class Map(models.Model):
    """A battle map placed on a scene."""

    scene: models.ForeignKey = models.ForeignKey(
        Scene,
        on_delete=models.CASCADE,
        related_name="maps",
    )
    name: models.CharField = models.CharField(max_length=200, default="Map")
    base_image_url: models.CharField = models.CharField(
        max_length=500, blank=True, default=""
    )
    grid_size_ft: models.PositiveIntegerField = models.PositiveIntegerField(default=5)
    width_px: models.PositiveIntegerField = models.PositiveIntegerField(default=0)
    height_px: models.PositiveIntegerField = models.PositiveIntegerField(default=0)
    lighting_mode: models.CharField = models.CharField(
        max_length=10, choices=LightingMode.choices, default=LightingMode.NONE
    )
    fog_state = models.JSONField(default=dict, blank=True)
    created_by: models.ForeignKey = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="created_maps",
    )
    created_at: models.DateTimeField = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "scenes_map"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.name} ({self.scene.name})"


class TokenQuerySet(models.QuerySet):
    def off_gm_layer(self):
        """Exclude tokens on the GM layer.

        Audience lists are JSON, so the ``gm-only`` check is done per token
        with ``Token.is_gm_only``.
        """
        return self.exclude(layer=TokenLayer.GM)


class Token(models.Model):
    """A piece on a map, optionally tied to a character."""

    map: models.ForeignKey = models.ForeignKey(
        Map,
        on_delete=models.CASCADE,
        related_name="tokens",
    )
    character: models.ForeignKey = models.ForeignKey(
        "characters.Character",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="tokens",
    )
    label: models.CharField = models.CharField(max_length=100, blank=True, default="")
    image_url: models.CharField = models.CharField(
        max_length=500, blank=True, default=""
    )
    size_squares: models.PositiveIntegerField = models.PositiveIntegerField(default=1)
    position_x: models.IntegerField = models.IntegerField(default=0)
    position_y: models.IntegerField = models.IntegerField(default=0)
    facing_deg: models.IntegerField = models.IntegerField(default=0)
    audience = models.JSONField(
        default=list, blank=True, help_text="Who may see the token"
    )
    tags = models.JSONField(default=list, blank=True)
    notes: models.TextField = models.TextField(blank=True, default="")
    layer: models.CharField = models.CharField(
        max_length=10, choices=TokenLayer.choices, default=TokenLayer.TOKEN
    )
    created_by: models.ForeignKey = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="created_tokens",
    )
    created_at: models.DateTimeField = models.DateTimeField(auto_now_add=True)

    objects = TokenQuerySet.as_manager()

    class Meta:
        db_table = "scenes_token"
        ordering = ["id"]

    def __str__(self) -> str:
        return self.label or f"Token {self.pk}"

    @property
    def is_gm_only(self) -> bool:
        return self.layer == TokenLayer.GM or GM_ONLY in (self.audience or [])
