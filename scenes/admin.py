"""Admin registrations for scenes app."""

from django.contrib import admin

from .models import Map, Scene, Token


class MapInline(admin.TabularInline):
    model = Map
    extra = 0
    fields = ("name", "base_image_url", "grid_size_ft", "lighting_mode")


@admin.register(Scene)
class SceneAdmin(admin.ModelAdmin):
    """Admin interface for Scene model."""

    list_display = ("name", "campaign", "ordering", "is_active", "created_by")
    list_filter = ("is_active", "campaign")
    search_fields = ("name", "description", "campaign__name")
    readonly_fields = ("created_at", "updated_at")
    inlines = (MapInline,)

    fieldsets = (
        (None, {"fields": ("name", "description", "campaign", "ordering")}),
        ("Status", {"fields": ("is_active",)}),
        (
            "Metadata",
            {
                "fields": ("created_by", "created_at", "updated_at"),
                "classes": ("collapse",),
            },
        ),
    )


@admin.register(Token)
class TokenAdmin(admin.ModelAdmin):
    """Admin interface for Token model."""

    list_display = ("label", "map", "layer", "position_x", "position_y")
    list_filter = ("layer",)
    search_fields = ("label", "map__name")
    raw_id_fields = ("map", "character", "created_by")
