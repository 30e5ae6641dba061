from django.contrib import admin

from .models import ShareLink


@admin.register(ShareLink)
class ShareLinkAdmin(admin.ModelAdmin):
    list_display = ('owner', 'hash', 'created_at')
    search_fields = ('owner__username', 'hash')
    readonly_fields = ('id', 'hash', 'created_at', 'updated_at')
    list_select_related = ('owner',)
