import pytest
from django.urls import reverse

from apps.feedback.models import Feedback
from apps.feedback.serializers import FeedbackSerializer


def _submit(client, payload):
    return client.post(reverse("feedback"), payload, format="json")


@pytest.mark.django_db()
def test_feedback_requires_auth(client):
    response = _submit(client, {"feedback": "hello"})
    assert response.status_code == 401
    assert response.json() == {"error": "Not authenticated"}
    assert not Feedback.objects.exists()


@pytest.mark.django_db()
@pytest.mark.parametrize("payload", [{}, {"feedback": ""}, {"feedback": "   \n\t"}, {"feedback": None}, {"feedback": 42}])
def test_feedback_required(auth_client, payload):
    response = _submit(auth_client, payload)
    assert response.status_code == 400
    assert response.json() == {"error": "Feedback is required"}
    assert not Feedback.objects.exists()


@pytest.mark.django_db()
def test_feedback_too_long(auth_client):
    response = _submit(auth_client, {"feedback": "x" * 5001})
    assert response.status_code == 400
    assert response.json() == {"error": "Feedback is too long (max 5000 characters)"}


@pytest.mark.django_db()
def test_feedback_at_limit_is_stored(auth_client, user):
    text = "y" * 5000
    response = _submit(auth_client, {"feedback": text})
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Feedback submitted successfully"}
    stored = Feedback.objects.get()
    assert stored.user == user
    assert stored.feedback_text == text


@pytest.mark.django_db()
def test_feedback_is_trimmed(auth_client):
    _submit(auth_client, {"feedback": "  great app!  \n"})
    assert Feedback.objects.get().feedback_text == "great app!"


@pytest.mark.django_db()
def test_feedback_storage_failure_is_opaque(auth_client, monkeypatch):
    def broken(self, validated_data):
        raise RuntimeError("disk full at /var/lib/postgresql")

    monkeypatch.setattr(FeedbackSerializer, "create", broken)
    response = _submit(auth_client, {"feedback": "hello"})
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to submit feedback"}


@pytest.mark.django_db()
def test_oversized_whitespace_is_reported_as_missing(auth_client):
    response = _submit(auth_client, {"feedback": " " * 6000})
    assert response.status_code == 400
    assert response.json() == {"error": "Feedback is required"}


@pytest.mark.django_db()
def test_padding_counts_towards_limit(auth_client):
    response = _submit(auth_client, {"feedback": " " + "z" * 5000})
    assert response.status_code == 400
    assert response.json() == {"error": "Feedback is too long (max 5000 characters)"}
