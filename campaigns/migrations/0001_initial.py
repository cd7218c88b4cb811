import django.db.models.deletion
import django_fsm
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("characters", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Campaign",
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
                ("name", models.CharField(help_text="Campaign name", max_length=200)),
                (
                    "visibility",
                    models.CharField(
                        choices=[("private", "Private"), ("invite", "Invite only")],
                        default="private",
                        help_text="Who may discover the campaign",
                        max_length=10,
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("not_started", "Not started"),
                            ("in_progress", "In progress"),
                            ("paused", "Paused"),
                            ("completed", "Completed"),
                            ("archived", "Archived"),
                        ],
                        db_index=True,
                        default="not_started",
                        help_text="Lifecycle status of the campaign",
                        max_length=20,
                    ),
                ),
                (
                    "owner",
                    models.ForeignKey(
                        help_text="User who created the campaign",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="owned_campaigns",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Campaign",
                "verbose_name_plural": "Campaigns",
                "db_table": "campaigns_campaign",
                "ordering": ["-updated_at", "name"],
            },
        ),
        migrations.CreateModel(
            name="CampaignMembership",
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
                    "role",
                    models.CharField(
                        choices=[
                            ("owner", "Owner"),
                            ("editor", "Editor"),
                            ("viewer", "Viewer"),
                        ],
                        help_text="The user's role in the campaign",
                        max_length=10,
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("pending", "Pending"),
                            ("accepted", "Accepted"),
                            ("revoked", "Revoked"),
                        ],
                        default="accepted",
                        help_text="Whether the membership is currently in force",
                        max_length=10,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "campaign",
                    models.ForeignKey(
                        help_text="The campaign",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="memberships",
                        to="campaigns.campaign",
                    ),
                ),
                (
                    "invited_by",
                    models.ForeignKey(
                        blank=True,
                        help_text="The user whose invite created this membership",
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="+",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        help_text="The user",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="campaign_memberships",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Campaign Membership",
                "verbose_name_plural": "Campaign Memberships",
                "db_table": "campaigns_membership",
                "ordering": ["campaign", "created_at", "id"],
                "indexes": [
                    models.Index(
                        fields=["user", "status"],
                        name="membership_user_status_idx",
                    )
                ],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("campaign", "user"),
                        name="unique_campaign_user_membership",
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="CampaignCharacter",
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
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "campaign",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="character_links",
                        to="campaigns.campaign",
                    ),
                ),
                (
                    "character",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="campaign_links",
                        to="characters.character",
                    ),
                ),
            ],
            options={
                "db_table": "campaigns_campaign_character",
                "ordering": ["created_at", "id"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("campaign", "character"),
                        name="unique_campaign_character",
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="CampaignHandout",
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
                ("title", models.CharField(max_length=200)),
                (
                    "file_url",
                    models.CharField(
                        blank=True,
                        default="",
                        help_text="Location of the stored file; storage itself is external",
                        max_length=500,
                    ),
                ),
                (
                    "campaign",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="handouts",
                        to="campaigns.campaign",
                    ),
                ),
                (
                    "created_by",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="campaign_handouts",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "campaigns_handout",
                "ordering": ["created_at", "id"],
            },
        ),
        migrations.CreateModel(
            name="CampaignInvite",
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
                    "code",
                    models.CharField(
                        help_text="Opaque redemption code", max_length=32, unique=True
                    ),
                ),
                (
                    "role_default",
                    models.CharField(
                        choices=[("viewer", "Viewer"), ("editor", "Editor")],
                        default="viewer",
                        help_text="Role granted on redemption",
                        max_length=10,
                    ),
                ),
                (
                    "status",
                    django_fsm.FSMField(
                        choices=[("active", "Active"), ("redeemed", "Redeemed")],
                        default="active",
                        help_text="Lifecycle status of the invite",
                        max_length=10,
                    ),
                ),
                (
                    "expires_at",
                    models.DateTimeField(
                        help_text="When this invite stops being redeemable"
                    ),
                ),
                ("redeemed_at", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "campaign",
                    models.ForeignKey(
                        help_text="The campaign being joined",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="invites",
                        to="campaigns.campaign",
                    ),
                ),
                (
                    "invited_by",
                    models.ForeignKey(
                        help_text="The member who issued the invite",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="issued_campaign_invites",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "redeemed_by",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="redeemed_campaign_invites",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Campaign Invite",
                "verbose_name_plural": "Campaign Invites",
                "db_table": "campaigns_invite",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(
                        fields=["campaign", "status"],
                        name="invite_campaign_status_idx",
                    )
                ],
            },
        ),
    ]
