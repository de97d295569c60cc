# apps/shop/services.py
from dataclasses import dataclass
from typing import Optional

from django.db import transaction
from django.db.models import F

from apps.coins.models import Wallet
from .models import ShopItem, UserEntitlement, UserPurchase


@dataclass
class PurchaseResult:
    success: bool
    item: Optional[ShopItem] = None
    message: str = ""


def get_shop_items():
    return ShopItem.objects.filter(enabled=True).order_by('id')


def grant_entitlement(user, item):
    """Apply the item's effect: one more unit of its entitlement."""
    entitlement, _ = UserEntitlement.objects.get_or_create(user=user, item_type=item.item_type)
    UserEntitlement.objects.filter(pk=entitlement.pk).update(quantity=F('quantity') + 1)


def purchase_shop_item(user, item_id):
    """
    Buy one unit of an item.

    The item is read and the wallet row locked inside one transaction, and the
    debit itself is conditional on the balance, so concurrent purchases by the
    same user serialize and the balance never goes negative. Purchases by
    different users never wait on each other. The debit and the granted
    entitlement commit together or not at all.
    """
    with transaction.atomic():
        item = ShopItem.objects.filter(pk=item_id, enabled=True).first()
        if item is None:
            return PurchaseResult(success=False, message="Item not found or unavailable")

        Wallet.objects.get_or_create(user=user)
        wallet = Wallet.objects.select_for_update().get(user=user)

        if wallet.balance < item.price:
            return PurchaseResult(
                success=False,
                item=item,
                message=f"Not enough coins: {item.name} costs {item.price}, you have {wallet.balance}",
            )

        coin_transaction = None
        if item.price > 0:
            coin_transaction = wallet.remove_coins(item.price, f"shop_purchase:{item.name}")
            if coin_transaction is None:
                return PurchaseResult(success=False, item=item, message="Not enough coins")

        grant_entitlement(user, item)
        UserPurchase.objects.create(user=user, item=item, price_paid=item.price, transaction=coin_transaction)

    return PurchaseResult(success=True, item=item, message=f"Purchased {item.name}!")
