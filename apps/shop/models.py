# apps/shop/models.py
from django.conf import settings
from django.db import models
from django.utils import timezone

class ShopItem(models.Model):
    """
    Item sold for coins.
    - price: coin price, never negative.
    - item_type: what the purchase grants (see UserEntitlement).
    - enabled: disabled items are hidden from the shop and cannot be bought.
    """
    ITEM_TYPES = [
        ('rest_day', 'Rest Day'),
    ]

    name = models.CharField(max_length=200)
    description = models.TextField(null=True, blank=True)
    price = models.PositiveIntegerField()
    item_type = models.CharField(max_length=30, choices=ITEM_TYPES)
    enabled = models.BooleanField(default=True)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['id']

    def __str__(self):
        return self.name

class UserEntitlement(models.Model):
    """
    Units of an item type a user owns, e.g. spare rest days.
    """
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='entitlements')
    item_type = models.CharField(max_length=30, choices=ShopItem.ITEM_TYPES)
    quantity = models.PositiveIntegerField(default=0)

    class Meta:
        unique_together = ('user', 'item_type')

    def __str__(self):
        return f"{self.user.username}: {self.quantity}x {self.item_type}"

class UserPurchase(models.Model):
    """
    Tracks purchases made by users.
    - user: The user who made the purchase.
    - item: The item purchased.
    - price_paid: Coins charged at purchase time.
    - transaction: Ledger entry of the coin deduction (empty for free items).
    """
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='purchases')
    item = models.ForeignKey(ShopItem, on_delete=models.PROTECT, related_name='purchases')
    price_paid = models.PositiveIntegerField()
    transaction = models.ForeignKey('coins.CoinTransaction', on_delete=models.SET_NULL, null=True, blank=True)
    purchased_at = models.DateTimeField(default=timezone.now)

    def __str__(self):
        return f"{self.user.username} bought {self.item.name}"
