from django.db import models

from core.permissions.services import resource_permissions
from Geography.models.base import GeoReference


class City(GeoReference):
    """City belonging to a province."""
    province = models.ForeignKey(
        'Province',
        on_delete=models.PROTECT,
        related_name='cities',
    )

    class Meta:
        db_table = 'ref_geo_city'
        verbose_name = 'City'
        verbose_name_plural = 'Cities'
        permissions = resource_permissions('geo_city', 'cities')
        constraints = [
            models.UniqueConstraint(fields=['province', 'code'], name='ref_geo_city_province_id_code_unique'),
        ]
