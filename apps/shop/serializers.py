# apps/shop/serializers.py
from rest_framework import serializers
from apps.common.fields import StrictIntegerField
from apps.shop.models import ShopItem

INVALID_ITEM_ID = "Invalid item ID"

class ShopItemSerializer(serializers.ModelSerializer):
    class Meta:
        model = ShopItem
        fields = ['id', 'name', 'description', 'price', 'item_type', 'enabled', 'created_at']

class PurchaseSerializer(serializers.Serializer):
    """
    Request body of a purchase: {"itemId": <number>}.
    """
    itemId = StrictIntegerField(
        source='item_id',
        min_value=1,
        max_value=2147483647,
        error_messages={
            'required': INVALID_ITEM_ID,
            'null': INVALID_ITEM_ID,
            'invalid': INVALID_ITEM_ID,
            'min_value': INVALID_ITEM_ID,
            'max_value': INVALID_ITEM_ID,
            'max_string_length': INVALID_ITEM_ID,
        },
    )
