"""
Core Base Module

Provides shared base classes, mixins, and utilities for the reference data
apps.

Modules:
    - models: StatusChoices, AuditMixin, SoftDeleteMixin
    - managers: BaseQuerySet (filter[...] / sort handling), SoftDeleteQuerySet,
      SoftDeleteManager
    - query: Parsing of filter[...] / sort / page / per_page query parameters
    - paging: Page-number rendering and pagination envelope helpers
    - test_utils: Helpers for granting permissions in tests

Nothing is re-exported here: ``paging`` must stay importable without a
configured Django project, so import from the submodules directly.

Usage Examples:

    from core.base.models import AuditMixin, SoftDeleteMixin
    from core.base.managers import SoftDeleteManager

    class Department(SoftDeleteMixin, AuditMixin, models.Model):
        code = models.CharField(max_length=50, unique=True)
        objects = SoftDeleteManager()
"""
