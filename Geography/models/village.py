from django.db import models

from core.permissions.services import resource_permissions
from Geography.models.base import GeoReference


class Village(GeoReference):
    """Village belonging to a district."""
    district = models.ForeignKey(
        'District',
        on_delete=models.PROTECT,
        related_name='villages',
    )

    class Meta:
        db_table = 'ref_geo_village'
        verbose_name = 'Village'
        verbose_name_plural = 'Villages'
        permissions = resource_permissions('geo_village', 'villages')
        constraints = [
            models.UniqueConstraint(fields=['district', 'code'], name='ref_geo_village_district_id_code_unique'),
        ]
