from django.contrib import admin
from .models import Wallet, CoinTransaction

class CoinTransactionInline(admin.TabularInline):
    model = CoinTransaction
    extra = 0
    readonly_fields = ('delta', 'reason', 'created_at')
    can_delete = False

@admin.register(Wallet)
class WalletAdmin(admin.ModelAdmin):
    list_display = ('user', 'balance')
    search_fields = ('user__email', 'user__username')
    readonly_fields = ('balance',)
    inlines = [CoinTransactionInline]
