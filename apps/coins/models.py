# apps/coins/models.py
from django.conf import settings
from django.db import models
from django.db.models import F

class Wallet(models.Model):
    """
    Per-user coin balance.
    - balance: whole coins, never negative.
    All balance changes go through add_coins / remove_coins so every delta
    lands in the CoinTransaction log.
    """
    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='wallet')
    balance = models.PositiveIntegerField(default=0)

    def __str__(self):
        return f"{self.user.username}'s Wallet: {self.balance} coins"

    def add_coins(self, amount, reason):
        if amount <= 0:
            return None
        Wallet.objects.filter(pk=self.pk).update(balance=F('balance') + amount)
        self.refresh_from_db(fields=['balance'])
        return CoinTransaction.objects.create(wallet=self, delta=amount, reason=reason)

    def remove_coins(self, amount, reason):
        """
        Conditional debit: the balance check and the decrement are one UPDATE,
        so a stale in-memory balance can never push the row below zero.
        Returns the logged CoinTransaction, or None when funds are short.
        """
        if amount <= 0:
            return None
        updated = Wallet.objects.filter(pk=self.pk, balance__gte=amount).update(balance=F('balance') - amount)
        self.refresh_from_db(fields=['balance'])
        if not updated:
            return None
        return CoinTransaction.objects.create(wallet=self, delta=-amount, reason=reason)

class CoinTransaction(models.Model):
    """Append-only log of signed balance deltas."""
    wallet = models.ForeignKey(Wallet, on_delete=models.CASCADE, related_name='transactions')
    delta = models.IntegerField()
    reason = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return f"{self.delta:+d} for {self.wallet.user.username} ({self.reason})"

def get_user_coins(user):
    balance = Wallet.objects.filter(user=user).values_list('balance', flat=True).first()
    return balance or 0
