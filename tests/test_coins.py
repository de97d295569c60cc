import pytest

from apps.coins.models import CoinTransaction, Wallet, get_user_coins


@pytest.mark.django_db()
def test_new_user_gets_empty_wallet(user):
    assert Wallet.objects.get(user=user).balance == 0
    assert get_user_coins(user) == 0


@pytest.mark.django_db()
def test_add_and_remove_log_deltas(user):
    wallet = user.wallet
    wallet.add_coins(150, "daily_claim")
    assert wallet.remove_coins(100, "shop_purchase:test") is not None
    assert wallet.balance == 50
    assert list(CoinTransaction.objects.order_by("id").values_list("delta", flat=True)) == [150, -100]


@pytest.mark.django_db()
def test_remove_coins_refuses_overdraft(user, fund):
    fund(user, 99)
    wallet = Wallet.objects.get(user=user)
    assert wallet.remove_coins(100, "too much") is None
    assert get_user_coins(user) == 99
    assert not CoinTransaction.objects.exists()


@pytest.mark.django_db()
def test_remove_coins_ignores_stale_balance(user, fund):
    fund(user, 100)
    first = Wallet.objects.get(user=user)
    stale = Wallet.objects.get(user=user)

    assert first.remove_coins(100, "first") is not None
    assert stale.balance == 100
    assert stale.remove_coins(100, "second") is None
    assert stale.balance == 0
    assert get_user_coins(user) == 0


@pytest.mark.django_db()
def test_non_positive_amounts_are_ignored(user):
    wallet = user.wallet
    assert wallet.add_coins(0, "noop") is None
    assert wallet.remove_coins(-5, "noop") is None
    assert not CoinTransaction.objects.exists()
