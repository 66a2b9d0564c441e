from Geography.models import Country
from Geography.services.base import GeoReferenceService, DEFAULT_SORT_FIELDS


class CountryService(GeoReferenceService):
    """Service for Country business logic"""
    model = Country
    label = 'country'
    children_relation = 'provinces'
    editable_fields = ('code', 'name', 'iso_code', 'phone_code')
    sort_fields = DEFAULT_SORT_FIELDS + ('iso_code', 'phone_code')
    filter_spec = {
        'code': 'code__icontains',
        'name': 'name__icontains',
        'iso_code': 'iso_code__icontains',
        'phone_code': 'phone_code__icontains',
    }

    @classmethod
    def clean_values(cls, values):
        # Blank optional codes are stored as NULL so they never collide
        for field in ('iso_code', 'phone_code'):
            if field in values and values[field] == '':
                values[field] = None
        return values

    @classmethod
    def unique_errors(cls, values, parent=None, exclude_pk=None):
        errors = super().unique_errors(values, parent, exclude_pk)
        iso_code = values.get('iso_code')
        if iso_code:
            queryset = Country.objects.filter(iso_code=iso_code)
            if exclude_pk is not None:
                queryset = queryset.exclude(pk=exclude_pk)
            if queryset.exists():
                errors['iso_code'] = 'The iso code has already been taken.'
        return errors
