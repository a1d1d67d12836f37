from django.contrib import admin

from contact_relay.contacts import models


@admin.register(models.ContactMessage)
class ContactMessageAdmin(admin.ModelAdmin):
    list_display = ["id", "name", "email", "message", "created_at"]
    search_fields = ["name", "email", "message"]
    list_filter = ["created_at"]
    readonly_fields = ["name", "email", "message", "created_at", "updated_at"]

    # Submissions are immutable once stored.
    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
