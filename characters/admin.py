from django.contrib import admin

from .models import Character


@admin.register(Character)
class CharacterAdmin(admin.ModelAdmin):
    """Admin interface for Character model."""

    list_display = ["name", "owner", "character_class", "level", "created_at"]
    list_filter = ["character_class", "created_at"]
    search_fields = ["name", "owner__username"]
    readonly_fields = ["created_at", "updated_at"]
