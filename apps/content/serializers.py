from contextlib import contextmanager

from django.conf import settings
from django.urls import reverse
from django.utils.translation import gettext_lazy as _
from rest_framework import serializers

from .models import Content, DOCUMENTS
from .validators import (
    MISSING_REQUIRED_FIELD, UNEXPECTED_FILE, rule_for, validate_link, validate_upload,
)


@contextmanager
def field_errors(field):
    """Re-key a bare ValidationError raised inside the block onto `field`."""
    try:
        yield
    except serializers.ValidationError as exc:
        raise serializers.ValidationError({field: exc.detail})


def absolute_api_url(request, path):
    """Prefix an API path with BACKEND_URL, or with the request's host when that is unset."""
    if settings.BACKEND_URL:
        return f"{settings.BACKEND_URL}{path}"
    if request is not None:
        return request.build_absolute_uri(path)
    return path


class ContentSerializer(serializers.ModelSerializer):
    """Read-side representation of a saved item for its owner."""
    type_display = serializers.CharField(source='get_type_display', read_only=True)
    owner = serializers.CharField(source='owner.username', read_only=True)
    tags = serializers.SlugRelatedField(many=True, read_only=True, slug_field='name')
    has_file = serializers.BooleanField(read_only=True)
    download_url = serializers.SerializerMethodField()

    class Meta:
        model = Content
        fields = [
            'id', 'title', 'type', 'type_display', 'link', 'description',
            'file_name', 'file_size', 'has_file', 'download_url',
            'tags', 'owner', 'created_at', 'updated_at',
        ]
        read_only_fields = fields

    def get_download_url(self, obj: Content) -> str | None:
        if not obj.has_file:
            return None
        path = reverse('content:content-download', kwargs={'pk': obj.pk})
        return absolute_api_url(self.context.get('request'), path)


class SharedContentSerializer(ContentSerializer):
    """What an anonymous visitor of a share link sees: no download endpoint, no owner id."""

    class Meta(ContentSerializer.Meta):
        fields = [
            'id', 'title', 'type', 'type_display', 'link', 'description',
            'file_name', 'has_file', 'tags', 'created_at',
        ]
        read_only_fields = fields


class ContentSubmissionSerializer(serializers.Serializer):
    """
    Validates a new content submission (JSON or multipart) and builds the
    normalized Content record. Call `save(owner=user)` to persist it.
    """
    title = serializers.CharField(required=False, allow_blank=True, max_length=200)
    type = serializers.CharField(required=False, allow_blank=True)
    link = serializers.CharField(required=False, allow_blank=True, max_length=2048, default='')
    description = serializers.CharField(required=False, allow_blank=True, max_length=1000, default='')
    file = serializers.FileField(required=False, allow_null=True, allow_empty_file=False, write_only=True)

    def validate(self, attrs):
        """
        Checks run in a fixed order and stop at the first failure: title/type,
        type enumeration, link format, upload size and MIME type, file on a
        non-document type, then the per-type rule.
        """
        title = attrs.get('title') or ''
        content_type = attrs.get('type') or ''
        if not title or not content_type:
            missing = [name for name, value in (('title', title), ('type', content_type)) if not value]
            raise serializers.ValidationError(
                {name: [_("Title and type are required")] for name in missing},
                code=MISSING_REQUIRED_FIELD,
            )

        rule = rule_for(content_type)

        with field_errors('link'):
            validate_link(attrs.get('link') or '')
        with field_errors('file'):
            validate_upload(attrs.get('file'))

        if attrs.get('file') and content_type != DOCUMENTS:
            raise serializers.ValidationError(
                {'file': [_("File uploads are only supported for documents")]},
                code=UNEXPECTED_FILE,
            )

        rule.check(attrs)
        return attrs

    @property
    def success_message(self):
        return rule_for(self.validated_data['type']).success_message

    def build_content(self, owner, validated_data=None):
        """
        Turn validated input into an unsaved Content instance: strings trimmed
        (done by the fields), link/description defaulted to "", file metadata
        copied from the upload, no tags.
        """
        data = validated_data if validated_data is not None else self.validated_data
        content = Content(
            owner=owner,
            title=data['title'],
            type=data['type'],
            link=data.get('link') or '',
            description=data.get('description') or '',
        )
        upload = data.get('file')
        if upload:
            content.file = upload
            content.file_name = upload.name[:255]
            content.file_size = upload.size
        return content

    def create(self, validated_data):
        owner = validated_data.pop('owner')
        content = self.build_content(owner, validated_data)
        content.save()
        return content
