# apps/feedback/views.py
from rest_framework import generics, status, permissions
from rest_framework.response import Response
from .serializers import FeedbackSerializer
import logging

logger = logging.getLogger(__name__)

class FeedbackView(generics.GenericAPIView):
    """
    Submit feedback as the authenticated user.
    """
    permission_classes = [permissions.IsAuthenticated]
    serializer_class = FeedbackSerializer

    def post(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            serializer.save(user=request.user)
        except Exception:
            logger.exception("Feedback submission failed for user %s", request.user.pk)
            return Response({"error": "Failed to submit feedback"}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response({
            "success": True,
            "message": "Feedback submitted successfully",
        }, status=status.HTTP_200_OK)
