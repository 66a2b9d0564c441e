from django.apps import AppConfig


class GeographyConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'Geography'
    label = 'geography'
    verbose_name = 'Geographic Reference Data'
