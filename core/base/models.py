from django.db import models
from django.conf import settings


class StatusChoices(models.TextChoices):
    """Lifecycle of records that are deactivated rather than deleted."""
    ACTIVE = 'active', 'Active'
    INACTIVE = 'inactive', 'Inactive'


class AuditMixin(models.Model):
    """
    Who created / last changed a record, and when.

    Fields:
        - created_at / updated_at: maintained by Django
        - created_by / updated_by: the acting user, set through stamp()

    Usage:
        class Country(AuditMixin):
            name = models.CharField(max_length=255)

        country.stamp(request.user, creating=True)
        country.save()
    """
    created_at = models.DateTimeField(
        auto_now_add=True,
        help_text="When the record was created"
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="When the record was last saved"
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='%(app_label)s_%(class)s_created',
        help_text="User who created the record"
    )
    updated_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='%(app_label)s_%(class)s_updated',
        help_text="User who last changed the record"
    )

    class Meta:
        abstract = True

    def stamp(self, user, creating=False):
        """Record ``user`` as the last editor (and creator when ``creating``)."""
        if user is not None and not getattr(user, 'is_authenticated', False):
            user = None
        if creating:
            self.created_by = user
        self.updated_by = user


class SoftDeleteMixin(models.Model):
    """
    Records that are switched to INACTIVE instead of being removed.

    Inactive rows stay referenced by their children and history; managers
    built on SoftDeleteQuerySet expose active() / inactive() views.
    """
    status = models.CharField(
        max_length=10,
        choices=StatusChoices.choices,
        default=StatusChoices.ACTIVE,
        help_text="INACTIVE marks a deleted record"
    )

    class Meta:
        abstract = True

    @property
    def is_active(self):
        return self.status == StatusChoices.ACTIVE

    def _status_update_fields(self):
        # Audit columns travel with the status when the model has them
        return ['status'] + [f for f in ('updated_at', 'updated_by') if hasattr(self, f)]

    def deactivate(self):
        """Soft delete."""
        self.status = StatusChoices.INACTIVE
        self.save(update_fields=self._status_update_fields())

    def reactivate(self):
        self.status = StatusChoices.ACTIVE
        self.save(update_fields=self._status_update_fields())

    def update_fields(self, field_updates: dict):
        """
        Assign several fields, validate the whole record and save it.

        Example:
            department.update_fields({'name': 'Finance', 'parent': head_office})
        """
        for field_name, value in field_updates.items():
            setattr(self, field_name, value)
        self.full_clean()
        self.save()
        return self
