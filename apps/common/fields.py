# apps/common/fields.py
from rest_framework import serializers


class StrictCharField(serializers.CharField):
    """CharField that refuses numbers and other non-string JSON values."""

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail('invalid')
        return super().to_internal_value(data)


class StrictIntegerField(serializers.IntegerField):
    """IntegerField that only accepts JSON numbers (no strings, no booleans)."""

    def to_internal_value(self, data):
        if isinstance(data, bool) or not isinstance(data, (int, float)):
            self.fail('invalid')
        return super().to_internal_value(data)
