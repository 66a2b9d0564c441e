from django.db import models

from core.permissions.services import resource_permissions
from Geography.models.base import GeoReference


class Country(GeoReference):
    """Top of the region hierarchy."""
    code = models.CharField(max_length=20, unique=True)
    iso_code = models.CharField(max_length=3, unique=True, null=True, blank=True)
    phone_code = models.CharField(max_length=10, null=True, blank=True)

    class Meta:
        db_table = 'ref_geo_country'
        verbose_name = 'Country'
        verbose_name_plural = 'Countries'
        permissions = resource_permissions('geo_country', 'countries')
