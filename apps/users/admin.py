# apps/users/admin.py
from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from .models import User

@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """
    Account admin with the coin balance and last heartbeat next to each user.
    """
    list_display = ('username', 'email', 'coin_balance', 'last_seen', 'is_active')
    list_filter = ('is_active', 'is_superuser')
    search_fields = ('username', 'email')
    ordering = ('-date_joined',)
    list_select_related = ('wallet', 'activity')
    fieldsets = (
        (None, {'fields': ('username', 'email', 'full_name', 'password')}),
        ('Access', {'fields': ('is_active', 'is_staff', 'is_superuser')}),
    )
    add_fieldsets = (
        (None, {'classes': ('wide',), 'fields': ('username', 'email', 'password1', 'password2')}),
    )

    @admin.display(description='Coins')
    def coin_balance(self, obj):
        wallet = getattr(obj, 'wallet', None)
        return wallet.balance if wallet else 0

    @admin.display(description='Last seen')
    def last_seen(self, obj):
        activity = getattr(obj, 'activity', None)
        return activity.last_seen if activity else None
