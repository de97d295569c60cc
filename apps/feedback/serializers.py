# apps/feedback/serializers.py
from rest_framework import serializers
from apps.common.fields import StrictCharField
from .models import Feedback, FEEDBACK_MAX_LENGTH

FEEDBACK_REQUIRED = "Feedback is required"
FEEDBACK_TOO_LONG = f"Feedback is too long (max {FEEDBACK_MAX_LENGTH} characters)"

class FeedbackSerializer(serializers.ModelSerializer):
    """
    Validates a feedback submission.
    - Blank text is rejected before the length limit is checked.
    - The length limit applies to the text as sent; the stored text is trimmed.
    """
    feedback = StrictCharField(
        source='feedback_text',
        allow_blank=True,
        trim_whitespace=False,
        error_messages={
            'required': FEEDBACK_REQUIRED,
            'null': FEEDBACK_REQUIRED,
            'invalid': FEEDBACK_REQUIRED,
        },
    )

    class Meta:
        model = Feedback
        fields = ['feedback']

    def validate_feedback(self, value):
        if not value.strip():
            raise serializers.ValidationError(FEEDBACK_REQUIRED)
        if len(value) > FEEDBACK_MAX_LENGTH:
            raise serializers.ValidationError(FEEDBACK_TOO_LONG)
        return value.strip()
