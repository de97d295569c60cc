# apps/coins/signals.py
from django.conf import settings
from django.db.models.signals import post_save
from django.dispatch import receiver
from apps.coins.models import Wallet

@receiver(post_save, sender=settings.AUTH_USER_MODEL)
def create_wallet(sender, instance, created, **kwargs):
    """
    Open an empty wallet for every new user.
    """
    if created:
        Wallet.objects.get_or_create(user=instance)
