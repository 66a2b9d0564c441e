"""
Custom Response Formatter for Standardized API Error Responses

Successful responses are rendered as-is (entities, arrays, list envelopes,
`{"message": ...}` confirmations). Every error response follows the format:
{
    "message": "code: The code has already been taken.",
    "errors": {"code": ["The code has already been taken."]}
}
`errors` is omitted when the failure is not tied to fields.
"""
from rest_framework.views import exception_handler
from rest_framework.response import Response
from rest_framework import status as http_status
from rest_framework.renderers import JSONRenderer


def custom_exception_handler(exc, context):
    """
    DRF exception handler: NotFound, NotAuthenticated, parse errors and the
    like leave here as {"message": ..., "errors": ...} bodies.
    """
    response = exception_handler(exc, context)

    if response is not None:
        response.data = format_error_response(response.data, response.status_code)

    return response


def format_error_response(errors, status_code):
    """
    Build the {message, errors} body from a raw error payload.

    Accepted shapes:
    - {"field": ["error1", "error2"]} -> "field: error1, error2"
    - {"detail": "message"} -> "message"
    - ["error1", "error2"] -> "error1, error2"
    """
    message = ""
    field_errors = {}

    if isinstance(errors, dict):
        error_messages = []
        for field, value in errors.items():
            if field in ('detail', 'message'):
                # Direct detail message
                message = str(value)
            elif isinstance(value, list):
                field_errors[field] = [str(e) for e in value]
                error_messages.append(f"{field}: {', '.join(field_errors[field])}")
            elif isinstance(value, dict):
                field_errors[field] = [format_nested_errors(value)]
                error_messages.append(f"{field}: {field_errors[field][0]}")
            else:
                field_errors[field] = [str(value)]
                error_messages.append(f"{field}: {value}")

        if error_messages and not message:
            message = "; ".join(error_messages)

    elif isinstance(errors, list):
        message = ", ".join(str(e) for e in errors)

    else:
        message = str(errors)

    if not message:
        message = default_message(status_code)

    formatted = {"message": message}
    if field_errors:
        formatted["errors"] = field_errors
    return formatted


def format_nested_errors(errors_dict):
    """Format nested error dictionaries."""
    messages = []
    for key, value in errors_dict.items():
        if isinstance(value, list):
            messages.append(f"{key}: {', '.join(str(v) for v in value)}")
        elif isinstance(value, dict):
            messages.append(f"{key}: {format_nested_errors(value)}")
        else:
            messages.append(f"{key}: {str(value)}")
    return "; ".join(messages)


def default_message(status_code):
    if status_code == http_status.HTTP_401_UNAUTHORIZED:
        return "Authentication required"
    if status_code == http_status.HTTP_403_FORBIDDEN:
        return "Permission denied"
    if status_code == http_status.HTTP_404_NOT_FOUND:
        return "Not found"
    return "Request failed"


class StandardizedJSONRenderer(JSONRenderer):
    """
    JSON renderer that normalises error bodies into the standard format.

    Views return raw field-error dicts (``serializer.errors``,
    ``ValidationError.message_dict``); this renderer rewrites them for
    4xx/5xx responses. Success bodies are left untouched.
    """

    def render(self, data, accepted_media_type=None, renderer_context=None):
        response = renderer_context.get('response') if renderer_context else None
        # Don't wrap 204 No Content responses - they should have no body
        if response is not None and response.status_code == 204:
            return b''
        if response is not None and response.status_code >= 400:
            if not self.is_already_formatted(data):
                data = format_error_response(data, response.status_code)

        return super().render(data, accepted_media_type, renderer_context)

    def is_already_formatted(self, data):
        """Check if response is already in our standard error format."""
        if isinstance(data, dict):
            return 'message' in data and set(data) <= {'message', 'errors'}
        return False


def message_response(message, data=None, status_code=http_status.HTTP_200_OK):
    """
    Helper function to create confirmation responses.

    Usage:
        from refdata_project.response_formatter import message_response

        return message_response("City deleted successfully")
    """
    body = {"message": message}
    if data is not None:
        body["data"] = data
    return Response(body, status=status_code)


def error_response(message, errors=None, status_code=http_status.HTTP_400_BAD_REQUEST):
    """
    Helper function to create standardized error responses.

    Usage:
        from refdata_project.response_formatter import error_response

        return error_response(
            message="Cannot delete city. It has associated districts.",
            status_code=status.HTTP_400_BAD_REQUEST
        )
    """
    body = {"message": message}
    if errors:
        body["errors"] = errors
    return Response(body, status=status_code)


def validation_error_response(exc):
    """
    Turn a Django ValidationError raised by a service into a 400 response.

    Field errors keep their per-field shape; plain errors become a message.
    """
    if hasattr(exc, 'error_dict'):
        return Response(exc.message_dict, status=http_status.HTTP_400_BAD_REQUEST)
    return error_response(' '.join(exc.messages))
