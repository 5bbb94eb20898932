from django.contrib import admin
from .models import ImportCursor


@admin.register(ImportCursor)
class ImportCursorAdmin(admin.ModelAdmin):
    list_display = ('cursor_id', 'site', 'last_imported', 'completed', 'updated_at')
    list_filter = ('cursor_id', 'completed')
    search_fields = ('cursor_id', 'site__name')
    readonly_fields = ('updated_at',)
