# apps/feedback/models.py
from django.conf import settings
from django.db import models
from django.utils import timezone

FEEDBACK_MAX_LENGTH = 5000

class Feedback(models.Model):
    """
    Free-text feedback left by a user. Rows are never edited after creation.
    """
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, related_name='feedback')
    feedback_text = models.TextField()
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['-created_at']
        verbose_name_plural = 'feedback'

    def __str__(self):
        return f"Feedback #{self.pk} from {self.user or 'deleted user'}"
