from HR.departments.models import Department


def create_department(code, name, parent=None, **extra):
    return Department.objects.create(code=code, name=name, parent=parent, **extra)
