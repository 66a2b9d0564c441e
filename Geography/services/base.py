"""
Shared service logic for the geographic reference entities.

Each entity service is a subclass declaring its model, its parent link,
its child relation and which filter[...] keys it accepts.
"""
import logging
from dataclasses import asdict

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import Count

logger = logging.getLogger(__name__)

DEFAULT_SORT_FIELDS = ('code', 'name', 'created_at', 'updated_at')


class GeoReferenceService:
    """Service for geographic reference business logic"""

    model = None
    # Singular label used in messages and DTO ids ('city' -> city_id)
    label = ''
    # Parent foreign key name ('province'); None for the top level
    parent_field = None
    parent_model = None
    # Reverse relation holding the children ('districts'); None for the bottom level
    children_relation = None
    # Allowed filter[...] keys -> ORM lookups
    filter_spec = {}
    sort_fields = DEFAULT_SORT_FIELDS
    default_sort = 'name'
    # Parent chain joined for list rows
    related = ()
    editable_fields = ('code', 'name')

    @classmethod
    def base_queryset(cls):
        queryset = cls.model.objects.select_related(*cls.related, 'updated_by')
        if cls.children_relation:
            queryset = queryset.annotate(**{
                f'{cls.children_relation}_count': Count(cls.children_relation, distinct=True)
            })
        return queryset

    @classmethod
    def list_entities(cls, filters=None, sort=None):
        """
        Filtered and sorted queryset for the paginated list.

        Raises:
            ValidationError: unknown filter key or sort field
        """
        return (
            cls.base_queryset()
            .apply_filters(filters, cls.filter_spec)
            .apply_sort(sort, cls.sort_fields, default=cls.default_sort)
        )

    @classmethod
    def options(cls, filters=None):
        """Unpaginated rows for dropdowns, ordered by name."""
        return (
            cls.model.objects.select_related(*cls.related)
            .apply_filters(filters, cls.filter_spec)
            .order_by('name', 'pk')
        )

    @classmethod
    def by_parent(cls, parent):
        """Children of ``parent`` as ``{id, code, name}`` rows, ordered by name."""
        return (
            cls.model.objects
            .filter(**{cls.parent_field: parent})
            .order_by('name', 'pk')
            .values('id', 'code', 'name')
        )

    @classmethod
    def get(cls, pk):
        """Entity with its parent chain and children count."""
        return cls.base_queryset().get(pk=pk)

    @classmethod
    def _resolve_parent(cls, parent_id):
        field = f'{cls.parent_field}_id'
        try:
            return cls.parent_model.objects.get(pk=parent_id)
        except (cls.parent_model.DoesNotExist, ValueError, TypeError):
            raise ValidationError({field: f'The selected {cls.parent_field} does not exist.'})

    @classmethod
    def clean_values(cls, values):
        """Normalise write values before validation. Subclasses extend this."""
        return values

    @classmethod
    def unique_errors(cls, values, parent=None, exclude_pk=None):
        """
        Field errors for values already taken.

        Codes are unique among the children of one parent (across the
        whole table for the top level).
        """
        queryset = cls.model.objects.filter(code=values['code'])
        if cls.parent_field:
            queryset = queryset.filter(**{cls.parent_field: parent})
        if exclude_pk is not None:
            queryset = queryset.exclude(pk=exclude_pk)
        if queryset.exists():
            return {'code': 'The code has already been taken.'}
        return {}

    @classmethod
    def _ensure_unique(cls, values, parent=None, exclude_pk=None):
        errors = cls.unique_errors(values, parent, exclude_pk)
        if errors:
            raise ValidationError(errors)

    @classmethod
    @transaction.atomic
    def create(cls, user, dto):
        """
        Create new entity with validation.

        Validates:
        - Parent exists
        - Code is unique within the parent
        """
        data = asdict(dto)
        parent = None
        if cls.parent_field:
            parent = cls._resolve_parent(data.pop(f'{cls.parent_field}_id'))
        data = cls.clean_values(data)
        cls._ensure_unique(data, parent)

        instance = cls.model(**data)
        if parent is not None:
            setattr(instance, cls.parent_field, parent)
        instance.stamp(user, creating=True)
        instance.full_clean()
        instance.save()
        logger.info(f"Created {cls.label} {instance.code} (id={instance.pk})")
        return instance

    @classmethod
    @transaction.atomic
    def update(cls, user, dto):
        """
        Update existing entity. Fields left as None are unchanged.

        Validates:
        - Entity exists
        - Parent exists (if changed)
        - Code is unique within the (new) parent
        """
        pk = getattr(dto, f'{cls.label}_id')
        try:
            instance = cls.model.objects.get(pk=pk)
        except cls.model.DoesNotExist:
            raise ValidationError(f"No {cls.label} found with ID '{pk}'")

        field_updates = {}
        for field in cls.editable_fields:
            value = getattr(dto, field)
            if value is not None:
                field_updates[field] = value

        if cls.parent_field:
            parent_id = getattr(dto, f'{cls.parent_field}_id')
            if parent_id is not None:
                field_updates[cls.parent_field] = cls._resolve_parent(parent_id)

        field_updates = cls.clean_values(field_updates)
        values = {field: getattr(instance, field) for field in cls.editable_fields}
        values.update(field_updates)
        parent = None
        if cls.parent_field:
            parent = field_updates.get(cls.parent_field, getattr(instance, cls.parent_field))
        cls._ensure_unique(values, parent, exclude_pk=instance.pk)

        for field, value in field_updates.items():
            setattr(instance, field, value)
        instance.stamp(user)
        instance.full_clean()
        instance.save()
        logger.info(f"Updated {cls.label} {instance.code} (id={instance.pk})")
        return instance

    @classmethod
    @transaction.atomic
    def delete(cls, user, pk):
        """
        Permanently delete an entity.

        Raises:
            ValidationError: if the entity still has children
        """
        try:
            instance = cls.model.objects.get(pk=pk)
        except cls.model.DoesNotExist:
            raise ValidationError(f"No {cls.label} found with ID '{pk}'")

        if cls.children_relation and getattr(instance, cls.children_relation).exists():
            logger.warning(
                f"Refused to delete {cls.label} {instance.code} (id={instance.pk}): "
                f"it has {cls.children_relation}"
            )
            raise ValidationError(
                f"Cannot delete {cls.label}. It has associated {cls.children_relation}."
            )

        code = instance.code
        instance.delete()
        username = getattr(user, 'username', None)
        logger.info(f"Deleted {cls.label} {code} (id={pk}) by {username}")
