"""
Permission decorators for function-based views.
"""
from functools import wraps
from rest_framework.response import Response
from rest_framework import status
from core.permissions.services import action_for_method, user_has_permission


def require_permission(resource, action=None, public_methods=()):
    """
    Decorator to check ``<resource>:<action>`` permissions for function-based views.

    Args:
        resource: The permission prefix (e.g., 'geo_city')
        action: The action to check. If None, auto-detects from HTTP method
            (GET = read, POST/PUT/PATCH = write, DELETE = delete)
        public_methods: HTTP methods that skip the check entirely

    Usage:
        # Public listing, authenticated creation
        @api_view(['GET', 'POST'])
        @require_permission('geo_city', public_methods=('GET',))
        def city_list(request):
            ...

        # Auto-detect action from HTTP method
        @api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
        @require_permission('geo_city')
        def city_detail(request, pk):
            ...
    """
    def decorator(view_func):
        @wraps(view_func)
        def wrapper(request, *args, **kwargs):
            if request.method in public_methods:
                return view_func(request, *args, **kwargs)

            # Check authentication
            if not request.user or not request.user.is_authenticated:
                return Response(
                    {'message': 'Authentication required'},
                    status=status.HTTP_401_UNAUTHORIZED
                )

            determined_action = action or action_for_method(request.method)
            permission = f'{resource}:{determined_action}'

            if not user_has_permission(request.user, permission):
                return Response(
                    {'message': f"Permission denied. Required permission: '{permission}'"},
                    status=status.HTTP_403_FORBIDDEN
                )

            return view_func(request, *args, **kwargs)

        # Add metadata for introspection/documentation
        wrapper.resource = resource
        wrapper.action = action

        return wrapper
    return decorator
