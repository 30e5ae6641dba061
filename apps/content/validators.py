"""
Per-type field requirements for saved content.

Each content type maps to exactly one rule. A rule names the fields that
type depends on and whether it needs all of them (social posts) or at least
one (documents, other). Field-shape checks that apply to every type (link
format, upload size and MIME type) live here too so the serializer only has
to wire them up.
"""
import re

from django.conf import settings
from django.utils.translation import gettext_lazy as _
from rest_framework import serializers

from .models import Content, SOCIAL_TYPES, DOCUMENTS, OTHER

CONTENT_TYPES = tuple(value for value, _label in Content.TYPE_CHOICES)

LINK_PATTERN = re.compile(r'^https?://.+', re.IGNORECASE)

# Error codes carried on every ValidationError raised from this module.
MISSING_REQUIRED_FIELD = 'missing_required_field'
INVALID_TYPE = 'invalid_type'
INVALID_LINK = 'invalid_link'
FILE_TOO_LARGE = 'file_too_large'
INVALID_FILE_TYPE = 'invalid_file_type'
UNEXPECTED_FILE = 'unexpected_file'


class ContentTypeRule:
    def __init__(self, types, fields, require_all, error_message, success_message):
        self.types = tuple(types)
        self.fields = tuple(fields)
        self.require_all = require_all
        self.error_message = error_message
        self.success_message = success_message

    def missing_fields(self, values):
        """Return the fields that make `values` unacceptable, or an empty list."""
        present = [name for name in self.fields if values.get(name)]
        if self.require_all:
            return [name for name in self.fields if name not in present]
        return [] if present else list(self.fields)

    def check(self, values):
        missing = self.missing_fields(values)
        if missing:
            raise serializers.ValidationError(
                {name: [self.error_message] for name in missing},
                code=MISSING_REQUIRED_FIELD,
            )

    def __repr__(self):
        return f"<ContentTypeRule {'/'.join(self.types)}>"


SOCIAL_POST_RULE = ContentTypeRule(
    types=SOCIAL_TYPES,
    fields=('link', 'description'),
    require_all=True,
    error_message=_("For social media types: title, link, and description are all required"),
    success_message=_("Content created successfully"),
)

DOCUMENT_RULE = ContentTypeRule(
    types=(DOCUMENTS,),
    fields=('file', 'link'),
    require_all=False,
    error_message=_("For documents: either upload a file OR provide a link"),
    success_message=_("Document saved successfully"),
)

OTHER_RULE = ContentTypeRule(
    types=(OTHER,),
    fields=('link', 'description'),
    require_all=False,
    error_message=_("For other type: either link OR description is required"),
    success_message=_("Content saved successfully"),
)

RULES_BY_TYPE = {
    content_type: rule
    for rule in (SOCIAL_POST_RULE, DOCUMENT_RULE, OTHER_RULE)
    for content_type in rule.types
}


def rule_for(content_type):
    try:
        return RULES_BY_TYPE[content_type]
    except KeyError:
        raise serializers.ValidationError(
            {'type': [_("Invalid type. Must be one of: %(types)s") % {'types': ', '.join(CONTENT_TYPES)}]},
            code=INVALID_TYPE,
        )


def validate_link(value):
    if value and not LINK_PATTERN.match(value):
        raise serializers.ValidationError(_("Link must be a valid URL"), code=INVALID_LINK)
    return value


def validate_upload(upload):
    """Size and MIME type checks for an uploaded document."""
    if upload is None:
        return upload
    max_size = settings.CONTENT_MAX_UPLOAD_SIZE
    if upload.size > max_size:
        raise serializers.ValidationError(
            _("File size cannot exceed %(mb)s MB") % {'mb': max_size // (1024 * 1024)},
            code=FILE_TOO_LARGE,
        )
    if getattr(upload, 'content_type', None) not in settings.CONTENT_ALLOWED_UPLOAD_TYPES:
        raise serializers.ValidationError(
            _("Only PDF, DOC, DOCX, PPT, PPTX files allowed"),
            code=INVALID_FILE_TYPE,
        )
    return upload
