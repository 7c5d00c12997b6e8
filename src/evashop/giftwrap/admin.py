"""Admin registration for gift wrap models."""

from django.contrib import admin

from .models import Option, OrderMeta


@admin.register(Option)
class OptionAdmin(admin.ModelAdmin):
    list_display = ["key", "value", "updated_at"]
    search_fields = ["key"]


@admin.register(OrderMeta)
class OrderMetaAdmin(admin.ModelAdmin):
    """Order snapshots are write-once."""

    list_display = ["order_type", "order_id", "key", "value", "created_at"]
    list_filter = ["key", "value"]
    search_fields = ["order_id"]
    readonly_fields = ["order_type", "order_id", "key", "value", "created_at"]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
