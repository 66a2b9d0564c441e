from Geography.models import Province, City
from Geography.services.base import GeoReferenceService


class CityService(GeoReferenceService):
    """Service for City business logic"""
    model = City
    label = 'city'
    parent_field = 'province'
    parent_model = Province
    children_relation = 'districts'
    related = ('province__country',)
    filter_spec = {
        'code': 'code__icontains',
        'name': 'name__icontains',
        'province_id': 'province_id',
        'province_name': 'province__name__icontains',
        'country_id': 'province__country_id',
    }
