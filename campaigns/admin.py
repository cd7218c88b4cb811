from django.contrib import admin
from django.db.models import Count, Q
from django.utils.html import format_html

from .choices import GM_ROLES, MemberStatus
from .models import (
    Campaign,
    CampaignCharacter,
    CampaignHandout,
    CampaignInvite,
    CampaignMembership,
)


class CampaignMembershipInline(admin.TabularInline):
    """Inline admin for campaign memberships."""

    model = CampaignMembership
    fk_name = "campaign"
    extra = 0
    fields = ["user", "role", "status", "invited_by", "created_at"]
    readonly_fields = ["created_at"]
    raw_id_fields = ["user", "invited_by"]

    def get_queryset(self, request):
        return super().get_queryset(request).select_related("user")


class CampaignInviteInline(admin.TabularInline):
    model = CampaignInvite
    extra = 0
    fields = ["code", "role_default", "status", "expires_at", "redeemed_by"]
    readonly_fields = ["code", "status", "redeemed_by"]


@admin.register(Campaign)
class CampaignAdmin(admin.ModelAdmin):
    """Admin configuration for Campaign model."""

    list_display = ["name", "owner", "status", "visibility", "member_count_display"]
    list_filter = ["status", "visibility", "created_at"]
    search_fields = ["name", "description", "owner__username"]
    readonly_fields = ["created_at", "updated_at"]
    raw_id_fields = ["owner", "active_scene"]
    inlines = [CampaignMembershipInline, CampaignInviteInline]

    def get_queryset(self, request):
        """Annotate accepted member counts by role."""
        accepted = Q(memberships__status=MemberStatus.ACCEPTED)
        return (
            super()
            .get_queryset(request)
            .select_related("owner")
            .annotate(
                total_members=Count("memberships", filter=accepted),
                gm_count=Count(
                    "memberships",
                    filter=accepted & Q(memberships__role__in=GM_ROLES),
                ),
            )
        )

    def member_count_display(self, obj):
        return format_html(
            "<strong>GMs:</strong> {} | <strong>Total:</strong> {}",
            getattr(obj, "gm_count", 0),
            getattr(obj, "total_members", 0),
        )

    member_count_display.short_description = "Members"
    member_count_display.admin_order_field = "total_members"


@admin.register(CampaignMembership)
class CampaignMembershipAdmin(admin.ModelAdmin):
    list_display = ["user", "campaign", "role", "status", "created_at"]
    list_filter = ["role", "status"]
    search_fields = ["user__username", "campaign__name"]
    raw_id_fields = ["user", "campaign", "invited_by"]

    def get_queryset(self, request):
        return super().get_queryset(request).select_related("user", "campaign")


@admin.register(CampaignInvite)
class CampaignInviteAdmin(admin.ModelAdmin):
    list_display = ["code", "campaign", "role_default", "status", "expires_at"]
    list_filter = ["status", "role_default"]
    search_fields = ["code", "campaign__name"]
    raw_id_fields = ["campaign", "invited_by", "redeemed_by"]


admin.site.register(CampaignCharacter)
admin.site.register(CampaignHandout)
