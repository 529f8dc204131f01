from django.contrib import admin

from .models import Summary


@admin.register(Summary)
class SummaryAdmin(admin.ModelAdmin):
    list_display = ("id", "owner", "file_name", "file_type", "created_at")
    list_filter = ("file_type",)
    search_fields = ("file_name", "summary_text", "owner__username")
    readonly_fields = ("owner", "file_name", "file_type", "summary_text", "created_at")

    def has_add_permission(self, request):
        return False
