from django.contrib.auth import get_user_model
from django.contrib.auth.models import Permission

User = get_user_model()


def create_user(username='testuser', password='testpass123', **extra):
    """Create a plain (non-superuser) account for tests"""
    extra.setdefault('email', f'{username}@test.com')
    return User.objects.create_user(username=username, password=password, **extra)


def grant_permissions(user, *codenames):
    """
    Grant Django permissions by codename, e.g.
    grant_permissions(user, 'geo_city:read', 'geo_city:write')
    """
    permissions = list(Permission.objects.filter(codename__in=codenames))
    missing = set(codenames) - {p.codename for p in permissions}
    if missing:
        raise ValueError(f"Unknown permission(s): {', '.join(sorted(missing))}")
    user.user_permissions.add(*permissions)
    # Django caches permissions on the instance
    for cache in ('_perm_cache', '_user_perm_cache', '_group_perm_cache'):
        if hasattr(user, cache):
            delattr(user, cache)
    return user


def create_user_with_permissions(username, *codenames, **extra):
    """Shortcut: create_user() followed by grant_permissions()."""
    return grant_permissions(create_user(username=username, **extra), *codenames)
