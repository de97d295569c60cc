# config/urls.py
from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls),
    path('', include('apps.activity.urls')),
    path('', include('apps.feedback.urls')),
    path('shop/', include('apps.shop.urls')),
]
