"""
Core model mixins for reusable model functionality.

These mixins provide common fields that are shared across the campaign,
scene and handout models. Each mixin is abstract and composable.

Available mixins:
- TimestampedMixin: Automatic created_at and updated_at fields
- DescribedModelMixin: Optional description field

Usage:
    class Handout(TimestampedMixin, DescribedModelMixin):
        title = models.CharField(max_length=200)
"""

from django.db import models


class TimestampedMixin(models.Model):
    """
    Mixin to add automatic timestamp tracking to models.

    Provides:
    - created_at: Automatically set when object is first created (indexed)
    - updated_at: Automatically updated every time object is saved (indexed)
    """

    created_at = models.DateTimeField(
        auto_now_add=True,
        db_index=True,
        help_text="Timestamp when the object was created",
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        db_index=True,
        help_text="Timestamp when the object was last modified",
    )

    class Meta:
        abstract = True


class DescribedModelMixin(models.Model):
    """
    Mixin to add an optional description field to models.

    Provides:
    - description: Optional TextField for detailed information
    """

    description = models.TextField(
        blank=True, default="", help_text="Optional detailed description"
    )

    class Meta:
        abstract = True
