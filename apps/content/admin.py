from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from .models import Content, Tag


@admin.register(Tag)
class TagAdmin(admin.ModelAdmin):
    list_display = ('name', 'slug', 'created_at')
    search_fields = ('name',)
    prepopulated_fields = {'slug': ('name',)}


@admin.register(Content)
class ContentAdmin(admin.ModelAdmin):
    """
    Read-mostly view of saved content. Items are created through the API,
    where per-type validation runs; admins mainly browse and delete.
    """
    list_display = ('title', 'type', 'owner_username', 'has_file', 'created_at')
    list_filter = ('type', 'created_at')
    search_fields = ('title', 'link', 'description', 'owner__username')
    readonly_fields = ('id', 'file_name', 'file_size', 'created_at', 'updated_at')
    list_select_related = ('owner',)
    fieldsets = (
        (None, {'fields': ('id', 'owner', 'title', 'type')}),
        (_('Details'), {'fields': ('link', 'description', 'tags')}),
        (_('Uploaded Document'), {'fields': ('file', 'file_name', 'file_size')}),
        (_('Timestamps'), {'fields': ('created_at', 'updated_at')}),
    )

    @admin.display(description=_('Owner'), ordering='owner__username')
    def owner_username(self, obj):
        return obj.owner.username

    @admin.display(description=_('File'), boolean=True)
    def has_file(self, obj):
        return obj.has_file
