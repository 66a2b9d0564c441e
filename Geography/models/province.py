from django.db import models

from core.permissions.services import resource_permissions
from Geography.models.base import GeoReference


class Province(GeoReference):
    """Province belonging to a country."""
    country = models.ForeignKey(
        'Country',
        on_delete=models.PROTECT,
        related_name='provinces',
    )

    class Meta:
        db_table = 'ref_geo_province'
        verbose_name = 'Province'
        verbose_name_plural = 'Provinces'
        permissions = resource_permissions('geo_province', 'provinces')
        constraints = [
            models.UniqueConstraint(fields=['country', 'code'], name='ref_geo_province_country_id_code_unique'),
        ]
