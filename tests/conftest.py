import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken

from apps.coins.models import Wallet
from apps.users.models import User


def _make_user(username, **extra):
    return User.objects.create_user(
        email=f"{username}@example.com",
        password="s3cret-pass",
        username=username,
        **extra,
    )


@pytest.fixture()
def user(db):
    return _make_user("runner")


@pytest.fixture()
def superuser(db):
    return User.objects.create_superuser(
        email="admin@example.com",
        password="s3cret-pass",
        username="admin",
    )


@pytest.fixture()
def client():
    return APIClient()


def login(client, user):
    client.cookies["token"] = str(AccessToken.for_user(user))
    return client


@pytest.fixture()
def auth_client(client, user):
    return login(client, user)


@pytest.fixture()
def fund(db):
    def _fund(user, balance):
        Wallet.objects.filter(user=user).update(balance=balance)

    return _fund
