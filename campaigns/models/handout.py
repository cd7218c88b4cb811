from django.conf import settings
from django.db import models

from core.models import DescribedModelMixin, TimestampedMixin

from .campaign import Campaign


class CampaignHandout(TimestampedMixin, DescribedModelMixin):
    """A file or note shared with the whole party."""

    campaign = models.ForeignKey(  # type: ignore[var-annotated]
        Campaign,
        on_delete=models.CASCADE,
        related_name="handouts",
    )
    title = models.CharField(max_length=200)  # type: ignore[var-annotated]
    file_url = models.CharField(  # type: ignore[var-annotated]
        max_length=500,
        blank=True,
        default="",
        help_text="Location of the stored file; storage itself is external",
    )
    created_by = models.ForeignKey(  # type: ignore[var-annotated]
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="campaign_handouts",
    )

    class Meta:
        db_table = "campaigns_handout"
        ordering = ["created_at", "id"]

    def __str__(self) -> str:
        return self.title
