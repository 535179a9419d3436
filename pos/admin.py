from django.contrib import admin

from .models import InventoryItem, MenuItem, Transaction


@admin.register(InventoryItem)
class InventoryItemAdmin(admin.ModelAdmin):
    list_display = ("name", "amount", "unit", "reorder")
    list_editable = ("reorder",)
    list_filter = ("reorder",)
    search_fields = ("name",)
    ordering = ("name",)


@admin.register(MenuItem)
class MenuItemAdmin(admin.ModelAdmin):
    list_display = ("name", "item_type", "price", "premium")
    list_filter = ("item_type", "premium")
    search_fields = ("name",)
    filter_horizontal = ("ingredients",)


@admin.register(Transaction)
class TransactionAdmin(admin.ModelAdmin):
    list_display = ("id", "customer_name", "cashier_name", "sale_price", "meals", "created_at")
    search_fields = ("customer_name", "cashier_name")
    date_hierarchy = "created_at"
