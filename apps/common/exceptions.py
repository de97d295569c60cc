# apps/common/exceptions.py
from rest_framework import exceptions
from rest_framework.views import exception_handler


def _first_message(data):
    if isinstance(data, dict):
        if not data:
            return ""
        return _first_message(next(iter(data.values())))
    if isinstance(data, (list, tuple)):
        if not data:
            return ""
        return _first_message(data[0])
    return str(data)


def api_exception_handler(exc, context):
    """
    Reshape DRF error responses into the {"error": "<message>"} envelope.
    Non-API exceptions are left to Django (None is returned).
    """
    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, exceptions.NotAuthenticated):
        message = "Not authenticated"
    else:
        message = _first_message(response.data)
    response.data = {"error": message}
    return response
