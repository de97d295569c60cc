import pytest
from django.urls import reverse
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken

from apps.common.authentication import CookieJWTAuthentication, verify_token

from .conftest import login


@pytest.mark.django_db()
def test_verify_token_returns_user_id(user):
    token = str(AccessToken.for_user(user))
    assert str(verify_token(token)) == str(user.pk)


def test_verify_token_rejects_garbage():
    assert verify_token("not-a-jwt") is None


@pytest.mark.django_db()
def test_missing_cookie_is_not_authenticated(client):
    response = client.get(reverse("shop-items"))
    assert response.status_code == 401
    assert response.json() == {"error": "Not authenticated"}


@pytest.mark.django_db()
def test_bad_cookie_is_invalid_token(client):
    client.cookies["token"] = "garbage"
    response = client.get(reverse("shop-items"))
    assert response.status_code == 401
    assert response.json() == {"error": "Invalid token"}


@pytest.mark.django_db()
def test_inactive_user_is_invalid_token(auth_client, user):
    user.is_active = False
    user.save(update_fields=["is_active"])
    response = auth_client.get(reverse("shop-items"))
    assert response.status_code == 401
    assert response.json() == {"error": "Invalid token"}


@pytest.mark.django_db()
def test_token_verifier_can_be_swapped(client, user, monkeypatch):
    monkeypatch.setattr(CookieJWTAuthentication, "token_verifier", staticmethod(lambda raw: user.pk))
    client.cookies["token"] = "anything"
    response = client.get(reverse("shop-items"))
    assert response.status_code == 200


@pytest.mark.django_db()
def test_form_encoded_body_is_rejected(auth_client):
    response = auth_client.post(reverse("feedback"), {"feedback": "from a form"})
    assert response.status_code == 415
    assert "error" in response.json()


@pytest.mark.django_db()
@pytest.mark.parametrize("url_name", ["feedback", "user-heartbeat", "shop-purchase"])
def test_cookie_post_without_csrf_token_is_forbidden(user, url_name):
    browser = login(APIClient(enforce_csrf_checks=True), user)
    response = browser.post(reverse(url_name), {"feedback": "x", "itemId": 1}, format="json")
    assert response.status_code == 403
    assert response.json()["error"].startswith("CSRF Failed")


@pytest.mark.django_db()
def test_cookie_post_with_csrf_token_is_accepted(user):
    browser = login(APIClient(enforce_csrf_checks=True), user)
    browser.cookies["csrftoken"] = "a" * 32
    response = browser.post(reverse("user-heartbeat"), HTTP_X_CSRFTOKEN="a" * 32)
    assert response.status_code == 200


@pytest.mark.django_db()
def test_safe_methods_skip_csrf(user):
    browser = login(APIClient(enforce_csrf_checks=True), user)
    assert browser.get(reverse("shop-items")).status_code == 200
