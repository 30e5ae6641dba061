from django.conf import settings
from django.core.validators import MaxValueValidator
from django.db import models
from django.utils import timezone
from django.utils.text import slugify
from django.utils.translation import gettext_lazy as _

from apps.core.models import BaseModel

SOCIAL_TYPES = ('linkedin', 'twitter', 'instagram', 'youtube', 'pinterest')
DOCUMENTS = 'documents'
OTHER = 'other'

MAX_FILE_SIZE = 10 * 1024 * 1024  # 10 MiB, hard ceiling at the storage layer


def document_upload_path(instance, filename):
    """uploads/documents/<epoch millis>-<original name>"""
    stamp = int(timezone.now().timestamp() * 1000)
    return f"{settings.CONTENT_UPLOAD_DIR}/{stamp}-{filename}"


class Tag(models.Model):
    """
    Reserved for labelling saved content. Nothing in the API assigns tags yet,
    so `Content.tags` is always empty.
    """
    name = models.CharField(_("Tag Name"), max_length=100, unique=True)
    slug = models.SlugField(_("Slug"), max_length=120, unique=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Tag")
        verbose_name_plural = _("Tags")
        ordering = ['name']

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.name)
        super().save(*args, **kwargs)

    def __str__(self):
        return self.name


class Content(BaseModel):
    """
    A single saved item (bookmark, social post, document) owned by one user.
    Which of link / description / file must be filled depends on `type`;
    see apps.content.validators.
    """
    TYPE_CHOICES = [
        ('linkedin', _('LinkedIn')),
        ('twitter', _('Twitter')),
        ('instagram', _('Instagram')),
        ('youtube', _('YouTube')),
        ('pinterest', _('Pinterest')),
        (DOCUMENTS, _('Documents')),
        (OTHER, _('Other')),
    ]

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='contents'
    )
    title = models.CharField(_("Title"), max_length=200)
    type = models.CharField(_("Content Type"), max_length=20, choices=TYPE_CHOICES, db_index=True)
    link = models.CharField(_("Link"), max_length=2048, blank=True, default='')
    description = models.TextField(_("Description"), max_length=1000, blank=True, default='')

    # Uploaded document (type == 'documents' only)
    file = models.FileField(_("File"), upload_to=document_upload_path, max_length=500, blank=True)
    file_name = models.CharField(_("Original File Name"), max_length=255, blank=True, default='')
    file_size = models.PositiveIntegerField(
        _("File Size (bytes)"),
        null=True, blank=True,
        validators=[MaxValueValidator(MAX_FILE_SIZE)]
    )

    tags = models.ManyToManyField(Tag, blank=True, related_name='contents')

    class Meta(BaseModel.Meta):
        verbose_name = _("Content")
        verbose_name_plural = _("Contents")
        indexes = [models.Index(fields=['owner', '-created_at'], name='content_owner_created_idx')]

    def __str__(self):
        return f"{self.title} ({self.type})"

    @property
    def has_file(self):
        return bool(self.file)
