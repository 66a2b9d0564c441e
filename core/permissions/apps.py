from django.apps import AppConfig


class PermissionsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'core.permissions'
    label = 'permissions'
    verbose_name = 'Reference Data Permissions'
