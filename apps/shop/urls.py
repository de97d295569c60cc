# apps/shop/urls.py
from django.urls import path
from .views import ShopItemListView, PurchaseView

urlpatterns = [
    path('items', ShopItemListView.as_view(), name='shop-items'),
    path('purchase', PurchaseView.as_view(), name='shop-purchase'),
]
