# apps/activity/models.py
from django.conf import settings
from django.db import models
from django.utils import timezone

class UserActivity(models.Model):
    """
    Last heartbeat seen for a user.
    - One row per user; removed together with the user.
    - last_seen only ever moves forward (see record_heartbeat).
    """
    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, primary_key=True, related_name='activity')
    last_seen = models.DateTimeField(db_index=True)

    class Meta:
        verbose_name_plural = 'user activity'

    def __str__(self):
        return f"{self.user.username} last seen {self.last_seen:%Y-%m-%d %H:%M:%S}"

def count_online_users(now=None):
    """Number of users whose last heartbeat falls inside the online window."""
    now = now or timezone.now()
    cutoff = now - settings.ONLINE_WINDOW
    return UserActivity.objects.filter(last_seen__gte=cutoff).count()

def record_heartbeat(user, now=None):
    now = now or timezone.now()
    activity, created = UserActivity.objects.get_or_create(user=user, defaults={'last_seen': now})
    if not created:
        # out-of-order heartbeats must not move last_seen backwards
        UserActivity.objects.filter(pk=activity.pk, last_seen__lt=now).update(last_seen=now)

def clear_activity():
    deleted, _ = UserActivity.objects.all().delete()
    return deleted
