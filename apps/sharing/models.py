from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.core.models import BaseModel


class ShareLink(BaseModel):
    """
    Public read-only link to a user's whole collection. At most one per user;
    revoking deletes the row, so sharing again issues a fresh hash.
    """
    hash = models.CharField(_("Share Hash"), max_length=32, unique=True)
    owner = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='share_link',
        verbose_name=_("Owner"),
    )

    class Meta(BaseModel.Meta):
        verbose_name = _("Share Link")
        verbose_name_plural = _("Share Links")

    def __str__(self):
        return f"{self.owner_id} -> {self.hash}"
