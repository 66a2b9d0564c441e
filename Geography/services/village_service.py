from Geography.models import District, Village
from Geography.services.base import GeoReferenceService


class VillageService(GeoReferenceService):
    """Service for Village business logic"""
    model = Village
    label = 'village'
    parent_field = 'district'
    parent_model = District
    related = ('district__city__province__country',)
    filter_spec = {
        'code': 'code__icontains',
        'name': 'name__icontains',
        'district_id': 'district_id',
        'district_name': 'district__name__icontains',
        'city_id': 'district__city_id',
        'province_id': 'district__city__province_id',
        'country_id': 'district__city__province__country_id',
    }
