from django.contrib import admin
from .models import Option


@admin.register(Option)
class OptionAdmin(admin.ModelAdmin):
    list_display = ('name', 'site', 'updated_at')
    list_filter = ('name',)
    search_fields = ('name', 'site__name', 'site__url')
    readonly_fields = ('created_at', 'updated_at')
