import uuid
from django.db import models
from django.utils.translation import gettext_lazy as _


class BaseModel(models.Model):
    """
    Abstract base for the project's stored records: a UUID primary key
    plus `created_at` / `updated_at` timestamps.
    """
    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        verbose_name=_('ID')
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        editable=False,
        db_index=True,
        verbose_name=_('Created At'),
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        editable=False,
        verbose_name=_('Last Updated At'),
    )

    class Meta:
        abstract = True
        ordering = ['-created_at']  # Newest first for every inheriting model

    def __str__(self):
        return f"{self.__class__.__name__} object ({self.pk})"
