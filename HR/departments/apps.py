from django.apps import AppConfig


class DepartmentsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'HR.departments'
    label = 'departments'
    verbose_name = 'HR Departments'
