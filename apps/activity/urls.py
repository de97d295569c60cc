# apps/activity/urls.py
from django.urls import path
from .views import ActiveUsersView, HeartbeatView, CleanupActivityView

urlpatterns = [
    path('active-users', ActiveUsersView.as_view(), name='active-users'),
    path('user-heartbeat', HeartbeatView.as_view(), name='user-heartbeat'),
    path('cleanup-activity', CleanupActivityView.as_view(), name='cleanup-activity'),
]
