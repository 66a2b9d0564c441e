import logging
from django.db import transaction
from django.db.models import Count, Q
from django.core.exceptions import ValidationError
from HR.departments.dtos import DepartmentCreateDTO, DepartmentUpdateDTO
from HR.departments.models import Department
from core.base.models import StatusChoices

logger = logging.getLogger(__name__)


class DepartmentService:
    """Service for Department business logic"""

    filter_spec = {
        'code': 'code__icontains',
        'name': 'name__icontains',
        'parent_id': 'parent_id',
        'parent_name': 'parent__name__icontains',
        'status': 'status',
    }
    sort_fields = ('code', 'name', 'status', 'created_at', 'updated_at')

    @staticmethod
    def base_queryset():
        return Department.objects.select_related('parent', 'updated_by').annotate(
            children_count=Count(
                'children',
                filter=Q(children__status=StatusChoices.ACTIVE),
                distinct=True,
            )
        )

    @staticmethod
    def list_departments(filters=None, sort=None):
        """
        Filtered and sorted departments, active and inactive.

        Raises:
            ValidationError: unknown filter key or sort field
        """
        return (
            DepartmentService.base_queryset()
            .apply_filters(filters, DepartmentService.filter_spec)
            .apply_sort(sort, DepartmentService.sort_fields, default='name')
        )

    @staticmethod
    def options(filters=None):
        """Active departments for dropdowns, ordered by name."""
        return (
            Department.objects.active()
            .apply_filters(filters, DepartmentService.filter_spec)
            .order_by('name', 'pk')
        )

    @staticmethod
    def children_of(department):
        """Active direct sub-departments, ordered by name."""
        return Department.objects.active().filter(parent=department).order_by('name', 'pk')

    @staticmethod
    def get(pk):
        return DepartmentService.base_queryset().get(pk=pk)

    @staticmethod
    def _resolve_parent(parent_id, department=None):
        try:
            parent = Department.objects.active().get(pk=parent_id)
        except Department.DoesNotExist:
            raise ValidationError({'parent_id': 'Parent department not found or inactive'})

        if department is not None:
            if parent.pk == department.pk or department in parent.ancestors():
                raise ValidationError({'parent_id': 'A department cannot be its own ancestor'})
        return parent

    @staticmethod
    def _ensure_unique_code(code, exclude_pk=None):
        queryset = Department.objects.filter(code=code)
        if exclude_pk is not None:
            queryset = queryset.exclude(pk=exclude_pk)
        if queryset.exists():
            raise ValidationError({'code': 'The code has already been taken.'})

    @staticmethod
    @transaction.atomic
    def create(user, dto: DepartmentCreateDTO) -> Department:
        """
        Create new department with validation.

        Validates:
        - Parent department exists and is active
        - Code is unique
        """
        parent = None
        if dto.parent_id is not None:
            parent = DepartmentService._resolve_parent(dto.parent_id)
        DepartmentService._ensure_unique_code(dto.code)

        department = Department(
            code=dto.code,
            name=dto.name,
            description=dto.description or '',
            parent=parent,
        )
        department.stamp(user, creating=True)
        department.full_clean()
        department.save()
        logger.info(f"Created department {department.code} (id={department.pk})")
        return department

    @staticmethod
    @transaction.atomic
    def update(user, dto: DepartmentUpdateDTO) -> Department:
        """
        Update existing department.

        Uses SoftDeleteMixin.update_fields() for consistent update pattern.

        Validates:
        - Department exists and is active
        - New parent exists, is active and is not a descendant
        - Code is unique (if changed)
        """
        try:
            department = Department.objects.active().get(pk=dto.department_id)
        except Department.DoesNotExist:
            raise ValidationError(f"No active department found with ID '{dto.department_id}'")

        field_updates = {}
        if dto.code is not None:
            DepartmentService._ensure_unique_code(dto.code, exclude_pk=department.pk)
            field_updates['code'] = dto.code
        if dto.name is not None:
            field_updates['name'] = dto.name
        if dto.description is not None:
            field_updates['description'] = dto.description
        if dto.clear_parent:
            field_updates['parent'] = None
        elif dto.parent_id is not None:
            field_updates['parent'] = DepartmentService._resolve_parent(dto.parent_id, department)

        department.stamp(user)
        field_updates['updated_by'] = department.updated_by
        department.update_fields(field_updates)
        logger.info(f"Updated department {department.code} (id={department.pk})")
        return department

    @staticmethod
    @transaction.atomic
    def deactivate(user, department_id: int) -> Department:
        """
        Deactivate (soft delete) a department.

        Raises:
            ValidationError: if the department has active sub-departments
        """
        try:
            department = Department.objects.active().get(pk=department_id)
        except Department.DoesNotExist:
            raise ValidationError(f"No active department found with ID '{department_id}'")

        child_count = Department.objects.active().filter(parent=department).count()
        if child_count > 0:
            logger.warning(
                f"Refused to deactivate department {department.code}: "
                f"{child_count} active sub-departments"
            )
            raise ValidationError(
                f"Cannot delete department '{department.name}' because it has "
                f"{child_count} active sub-departments."
            )

        department.stamp(user)
        department.deactivate()
        logger.info(f"Deactivated department {department.code} (id={department.pk})")
        return department
