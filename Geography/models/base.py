from django.db import models

from core.base.models import AuditMixin
from core.base.managers import ReferenceManager


class GeoReference(AuditMixin):
    """
    Common shape of every geographic reference record.

    Fields:
        - code: Short code, unique within the parent (e.g. 'ID', '31', '31.71')
        - name: Display name
    """
    code = models.CharField(max_length=20)
    name = models.CharField(max_length=255)

    objects = ReferenceManager()

    class Meta:
        abstract = True

    def __str__(self):
        return f"{self.code} - {self.name}"
