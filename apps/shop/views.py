# apps/shop/views.py
from rest_framework import generics, status, permissions
from rest_framework.response import Response
from apps.coins.models import get_user_coins
from .serializers import ShopItemSerializer, PurchaseSerializer
from .services import get_shop_items, purchase_shop_item
import logging

logger = logging.getLogger(__name__)

class ShopItemListView(generics.GenericAPIView):
    """
    List every enabled shop item.
    """
    permission_classes = [permissions.IsAuthenticated]
    serializer_class = ShopItemSerializer

    def get(self, request, *args, **kwargs):
        try:
            items = self.get_serializer(get_shop_items(), many=True).data
        except Exception:
            logger.exception("Shop items listing failed")
            return Response({"error": "Internal server error"}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response({"items": items}, status=status.HTTP_200_OK)

class PurchaseView(generics.GenericAPIView):
    """
    Process a shop purchase.
    - Deducts coins from the user's wallet and grants the item.
    - Domain failures (unknown item, insufficient coins) answer 400.
    """
    permission_classes = [permissions.IsAuthenticated]
    serializer_class = PurchaseSerializer

    def post(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        item_id = serializer.validated_data['item_id']

        try:
            result = purchase_shop_item(request.user, item_id)
            if not result.success:
                return Response({"error": result.message}, status=status.HTTP_400_BAD_REQUEST)

            new_balance = get_user_coins(request.user)
        except Exception:
            logger.exception("Purchase of item %s failed for user %s", item_id, request.user.pk)
            return Response({"error": "Internal server error"}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        logger.info("User %s purchased item %s", request.user.pk, item_id)
        return Response({
            "success": True,
            "item": ShopItemSerializer(result.item).data,
            "newBalance": new_balance,
            "message": result.message,
        }, status=status.HTTP_200_OK)
