"""
Permission checks for ``<resource>:<action>`` permission strings.

Permission strings are stored as Django permission codenames declared on the
models (``geo_city:read``, ``hr_department:delete``, ``audit_log:read``), so
they can be granted through the admin, to users directly or via groups.
"""

READ = 'read'
WRITE = 'write'
DELETE = 'delete'

AUDIT_LOG_READ = 'audit_log:read'

METHOD_ACTIONS = {
    'GET': READ,
    'HEAD': READ,
    'OPTIONS': READ,
    'POST': WRITE,
    'PUT': WRITE,
    'PATCH': WRITE,
    'DELETE': DELETE,
}


def action_for_method(http_method):
    """Map an HTTP method to a permission action (unknown methods -> read)."""
    return METHOD_ACTIONS.get(http_method.upper(), READ)


def user_has_permission(user, permission):
    """
    Check whether ``user`` holds ``permission`` (e.g. 'geo_city:write').

    Superusers hold every permission; anonymous and inactive users hold none.
    """
    if user is None or not user.is_authenticated or not user.is_active:
        return False
    if user.is_superuser:
        return True
    return any(
        perm.split('.', 1)[1] == permission
        for perm in user.get_all_permissions()
    )


def permission_map(user, resource):
    """
    Affordance flags for a resource, consumed by pages.

    Returns:
        {'read': bool, 'write': bool, 'delete': bool, 'audit': bool}
    """
    return {
        READ: user_has_permission(user, f'{resource}:{READ}'),
        WRITE: user_has_permission(user, f'{resource}:{WRITE}'),
        DELETE: user_has_permission(user, f'{resource}:{DELETE}'),
        'audit': user_has_permission(user, AUDIT_LOG_READ),
    }


def resource_permissions(resource, verbose_name):
    """
    ``Meta.permissions`` entries for a resource.

    Usage:
        class Meta:
            default_permissions = ()
            permissions = resource_permissions('geo_city', 'city')
    """
    return [
        (f'{resource}:{READ}', f'Can view {verbose_name}'),
        (f'{resource}:{WRITE}', f'Can create and edit {verbose_name}'),
        (f'{resource}:{DELETE}', f'Can delete {verbose_name}'),
    ]
