from Geography.models import Country, Province
from Geography.services.base import GeoReferenceService


class ProvinceService(GeoReferenceService):
    """Service for Province business logic"""
    model = Province
    label = 'province'
    parent_field = 'country'
    parent_model = Country
    children_relation = 'cities'
    related = ('country',)
    filter_spec = {
        'code': 'code__icontains',
        'name': 'name__icontains',
        'country_id': 'country_id',
        'country_name': 'country__name__icontains',
    }
