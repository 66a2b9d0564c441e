from Geography.models import City, District
from Geography.services.base import GeoReferenceService


class DistrictService(GeoReferenceService):
    """Service for District business logic"""
    model = District
    label = 'district'
    parent_field = 'city'
    parent_model = City
    children_relation = 'villages'
    related = ('city__province__country',)
    filter_spec = {
        'code': 'code__icontains',
        'name': 'name__icontains',
        'city_id': 'city_id',
        'city_name': 'city__name__icontains',
        'province_id': 'city__province_id',
        'country_id': 'city__province__country_id',
    }
