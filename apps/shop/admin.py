from django.contrib import admin
from .models import ShopItem, UserEntitlement, UserPurchase

@admin.register(ShopItem)
class ShopItemAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'price', 'item_type', 'enabled')
    list_filter = ('item_type', 'enabled')

@admin.register(UserEntitlement)
class UserEntitlementAdmin(admin.ModelAdmin):
    list_display = ('user', 'item_type', 'quantity')
    search_fields = ('user__username',)

@admin.register(UserPurchase)
class UserPurchaseAdmin(admin.ModelAdmin):
    list_display = ('user', 'item', 'price_paid', 'purchased_at')
    readonly_fields = ('user', 'item', 'price_paid', 'transaction', 'purchased_at')
