from __future__ import annotations

from django.conf import settings
from django.db import models

from core.models import TimestampedMixin


class Character(TimestampedMixin):
    """
    A player's character.

    Only identity and ownership live here; the character sheet itself is
    kept by an external rules engine.
    """

    owner: models.ForeignKey = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="characters",
        help_text="The player who owns this character",
    )
    name: models.CharField = models.CharField(max_length=100)
    character_class: models.CharField = models.CharField(
        max_length=50, blank=True, default=""
    )
    level: models.PositiveIntegerField = models.PositiveIntegerField(default=1)

    class Meta:
        db_table = "characters_character"
        ordering = ["name", "id"]
        verbose_name = "Character"
        verbose_name_plural = "Characters"

    def __str__(self) -> str:
        return self.name
