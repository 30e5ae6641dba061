from django.utils.translation import gettext_lazy as _
from rest_framework import serializers


class ShareToggleSerializer(serializers.Serializer):
    share = serializers.BooleanField(
        required=True,
        error_messages={'required': _("The 'share' flag is required.")},
    )
