from django_filters import rest_framework as filters

from .models import Content


class ContentFilter(filters.FilterSet):
    """?type=<content type> on the owner's content list."""
    type = filters.ChoiceFilter(choices=Content.TYPE_CHOICES)

    class Meta:
        model = Content
        fields = ['type']
