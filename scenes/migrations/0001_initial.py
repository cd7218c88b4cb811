import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("campaigns", "0001_initial"),
        ("characters", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Scene",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "created_at",
                    models.DateTimeField(
                        auto_now_add=True,
                        db_index=True,
                        help_text="Timestamp when the object was created",
                    ),
                ),
                (
                    "updated_at",
                    models.DateTimeField(
                        auto_now=True,
                        db_index=True,
                        help_text="Timestamp when the object was last modified",
                    ),
                ),
                (
                    "description",
                    models.TextField(
                        blank=True,
                        default="",
                        help_text="Optional detailed description",
                    ),
                ),
                ("name", models.CharField(help_text="Scene name", max_length=200)),
                (
                    "ordering",
                    models.IntegerField(
                        default=0, help_text="Position of the scene in the campaign"
                    ),
                ),
                ("is_active", models.BooleanField(default=False)),
                (
                    "campaign",
                    models.ForeignKey(
                        help_text="The campaign this scene belongs to",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="scenes",
                        to="campaigns.campaign",
                    ),
                ),
                (
                    "created_by",
                    models.ForeignKey(
                        help_text="The user who created this scene",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="created_scenes",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Scene",
                "verbose_name_plural": "Scenes",
                "db_table": "scenes_scene",
                "ordering": ["ordering", "id"],
                "indexes": [
                    models.Index(
                        fields=["campaign", "ordering"],
                        name="scene_campaign_ordering_idx",
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="Map",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("name", models.CharField(default="Map", max_length=200)),
                (
                    "base_image_url",
                    models.CharField(blank=True, default="", max_length=500),
                ),
                ("grid_size_ft", models.PositiveIntegerField(default=5)),
                ("width_px", models.PositiveIntegerField(default=0)),
                ("height_px", models.PositiveIntegerField(default=0)),
                (
                    "lighting_mode",
                    models.CharField(
                        choices=[
                            ("none", "None"),
                            ("basic", "Basic"),
                            ("dynamic", "Dynamic"),
                        ],
                        default="none",
                        max_length=10,
                    ),
                ),
                ("fog_state", models.JSONField(blank=True, default=dict)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "created_by",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="created_maps",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "scene",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="maps",
                        to="scenes.scene",
                    ),
                ),
            ],
            options={
                "db_table": "scenes_map",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="Token",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("label", models.CharField(blank=True, default="", max_length=100)),
                (
                    "image_url",
                    models.CharField(blank=True, default="", max_length=500),
                ),
                ("size_squares", models.PositiveIntegerField(default=1)),
                ("position_x", models.IntegerField(default=0)),
                ("position_y", models.IntegerField(default=0)),
                ("facing_deg", models.IntegerField(default=0)),
                (
                    "audience",
                    models.JSONField(
                        blank=True, default=list, help_text="Who may see the token"
                    ),
                ),
                ("tags", models.JSONField(blank=True, default=list)),
                ("notes", models.TextField(blank=True, default="")),
                (
                    "layer",
                    models.CharField(
                        choices=[
                            ("map", "Map"),
                            ("object", "Object"),
                            ("token", "Token"),
                            ("gm", "GM"),
                        ],
                        default="token",
                        max_length=10,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "character",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="tokens",
                        to="characters.character",
                    ),
                ),
                (
                    "created_by",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="created_tokens",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "map",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="tokens",
                        to="scenes.map",
                    ),
                ),
            ],
            options={
                "db_table": "scenes_token",
                "ordering": ["id"],
            },
        ),
    ]
