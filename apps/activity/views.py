# apps/activity/views.py
from rest_framework import generics, status, permissions
from rest_framework.response import Response
from apps.common.permissions import IsSuperuser
from .models import count_online_users, record_heartbeat, clear_activity
import logging

logger = logging.getLogger(__name__)

# ---------------------------
# Online Users View
# ---------------------------
class ActiveUsersView(generics.GenericAPIView):
    """
    Count users seen in the last few minutes.
    - GET: public; a storage failure reports 0 instead of an error.
    """
    authentication_classes = []
    permission_classes = [permissions.AllowAny]

    def get(self, request, *args, **kwargs):
        try:
            online = count_online_users()
        except Exception:
            logger.exception("Online users count failed")
            online = 0
        return Response({"onlineUsers": online}, status=status.HTTP_200_OK)

# ---------------------------
# Heartbeat View
# ---------------------------
class HeartbeatView(generics.GenericAPIView):
    permission_classes = [permissions.IsAuthenticated]

    def post(self, request, *args, **kwargs):
        try:
            record_heartbeat(request.user)
        except Exception:
            logger.exception("Heartbeat failed for user %s", request.user.pk)
            return Response({"error": "Internal server error"}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return Response({"success": True}, status=status.HTTP_200_OK)

# ---------------------------
# Cleanup View
# ---------------------------
class CleanupActivityView(generics.GenericAPIView):
    """
    Drop every activity row (admins only).
    """
    permission_classes = [IsSuperuser]

    def post(self, request, *args, **kwargs):
        try:
            deleted = clear_activity()
        except Exception:
            logger.exception("Activity cleanup failed")
            return Response({"error": "Failed to cleanup"}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        logger.info("Cleared %d activity rows", deleted)
        return Response({
            "success": True,
            "message": "All user activity entries cleared",
            "deleted": deleted,
        }, status=status.HTTP_200_OK)
