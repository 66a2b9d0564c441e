from django.db import models

from core.base.models import AuditMixin, SoftDeleteMixin
from core.base.managers import SoftDeleteManager
from core.permissions.services import resource_permissions


class Department(SoftDeleteMixin, AuditMixin):
    """
    Organisational department, optionally nested under a parent department.

    Departments are never removed; deleting one deactivates it
    (SoftDeleteMixin).
    """
    code = models.CharField(max_length=20, unique=True)
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default='')
    parent = models.ForeignKey(
        'self',
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='children',
    )

    objects = SoftDeleteManager()

    class Meta:
        db_table = 'hr_department'
        verbose_name = 'Department'
        verbose_name_plural = 'Departments'
        permissions = resource_permissions('hr_department', 'departments')

    def __str__(self):
        return f"{self.code} - {self.name}"

    def ancestors(self):
        """Parent chain from the direct parent up to the root."""
        chain = []
        seen = {self.pk}
        node = self.parent
        while node is not None and node.pk not in seen:
            chain.append(node)
            seen.add(node.pk)
            node = node.parent
        return chain
