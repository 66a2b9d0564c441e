from django.db import models

from core.permissions.services import resource_permissions
from Geography.models.base import GeoReference


class District(GeoReference):
    """District belonging to a city."""
    city = models.ForeignKey(
        'City',
        on_delete=models.PROTECT,
        related_name='districts',
    )

    class Meta:
        db_table = 'ref_geo_district'
        verbose_name = 'District'
        verbose_name_plural = 'Districts'
        permissions = resource_permissions('geo_district', 'districts')
        constraints = [
            models.UniqueConstraint(fields=['city', 'code'], name='ref_geo_district_city_id_code_unique'),
        ]
