"""
Core Base Managers Module

Provides custom managers and querysets for base models.

**Architecture:**
- BaseQuerySet: filter[...] and sort handling driven by per-entity specs
- SoftDeleteQuerySet: For models with status field

Exports:
    QuerySets:
        - BaseQuerySet: apply_filters(), apply_sort()
        - SoftDeleteQuerySet: active(), inactive()

    Managers:
        - ReferenceManager: For plain reference models
        - SoftDeleteManager: For SoftDeleteMixin models

Usage:
    class City(AuditMixin, models.Model):
        objects = ReferenceManager()

    City.objects.apply_filters(
        {'name': 'jak', 'province_id': '3'},
        {'name': 'name__icontains', 'province_id': 'province_id'},
    ).apply_sort('-name', ('code', 'name'), default='name')
"""

from django.core.exceptions import ValidationError
from django.db import models
from core.base.models import StatusChoices


class BaseQuerySet(models.QuerySet):
    """
    Base QuerySet with the list-page filtering methods.

    Methods:
        - apply_filters: Filter by filter[...] values using a key -> lookup map
        - apply_sort: Order by a `field` / `-field` sort value
    """

    def apply_filters(self, filters, filter_spec):
        """
        Apply filter[...] values from a list request.

        Args:
            filters: dict of filter key -> raw value (empty values are skipped)
            filter_spec: dict of allowed filter key -> ORM lookup, e.g.
                {'code': 'code__icontains', 'country_id': 'province__country_id'}

        Raises:
            ValidationError: if a filter key is not in filter_spec

        Returns:
            Filtered QuerySet
        """
        filters = filters or {}
        unknown = sorted(key for key in filters if key not in filter_spec)
        if unknown:
            raise ValidationError({
                'filter': (
                    f"Requested filter(s) `{', '.join(unknown)}` are not allowed. "
                    f"Allowed filter(s) are `{', '.join(filter_spec)}`."
                )
            })

        queryset = self
        for key, value in filters.items():
            if value in (None, ''):
                continue
            lookup = filter_spec[key]
            if lookup.endswith('_id'):
                value = str(value).strip()
                if not value.isdigit():
                    # Identifiers are integers; anything else cannot match
                    return queryset.none()
            queryset = queryset.filter(**{lookup: value})
        return queryset

    def apply_sort(self, sort, sort_fields, default=None):
        """
        Order by a sort value such as ``name`` or ``-created_at``.

        Args:
            sort: requested sort ('' or None falls back to ``default``)
            sort_fields: allowed field names (without direction prefix)
            default: sort used when none was requested

        Raises:
            ValidationError: if the field is not sortable
        """
        sort = sort or default
        if not sort:
            return self.order_by('pk')

        field = sort[1:] if sort.startswith('-') else sort
        if field not in sort_fields:
            raise ValidationError({
                'sort': (
                    f"Requested sort(s) `{field}` is not allowed. "
                    f"Allowed sort(s) are `{', '.join(sort_fields)}`."
                )
            })
        # Stable ordering across pages
        tiebreak = '-pk' if sort.startswith('-') else 'pk'
        return self.order_by(sort, tiebreak)


class ReferenceManager(models.Manager.from_queryset(BaseQuerySet)):
    """
    Manager for hard-deleted reference models.
    """
    pass


class SoftDeleteQuerySet(BaseQuerySet):
    """
    QuerySet for SoftDeleteMixin models (models with status field).

    Methods:
        - active(): Return status=ACTIVE records
        - inactive(): Return status=INACTIVE records
    """

    def active(self):
        """Return only active records (status=ACTIVE)."""
        return self.filter(status=StatusChoices.ACTIVE)

    def inactive(self):
        """Return only inactive records (status=INACTIVE)."""
        return self.filter(status=StatusChoices.INACTIVE)


class SoftDeleteManager(models.Manager.from_queryset(SoftDeleteQuerySet)):
    """
    Manager for SoftDeleteMixin models.

    Usage:
        class Department(SoftDeleteMixin, models.Model):
            objects = SoftDeleteManager()

        Department.objects.active()
        Department.objects.inactive()
    """
    pass
