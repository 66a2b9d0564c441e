"""
Create / edit forms for the geography pages.

Forms shape and pre-validate input; the services perform the write.
"""
from django import forms

from Geography.models import Country, Province, City, District, Village


class CountryForm(forms.ModelForm):
    class Meta:
        model = Country
        fields = ['code', 'name', 'iso_code', 'phone_code']
        labels = {'iso_code': 'ISO Code', 'phone_code': 'Phone Code'}
        widgets = {
            'code': forms.TextInput(attrs={'placeholder': 'e.g. ID'}),
            'name': forms.TextInput(attrs={'placeholder': 'e.g. Indonesia'}),
            'iso_code': forms.TextInput(attrs={'placeholder': 'e.g. IDN'}),
            'phone_code': forms.TextInput(attrs={'placeholder': 'e.g. +62'}),
        }


class GeoChildForm(forms.ModelForm):
    """Base form for entities with a parent: parent dropdown ordered by name."""
    parent_field = None

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        parent = self.fields[self.parent_field]
        parent.queryset = parent.queryset.order_by('name')
        parent.empty_label = f'Select {parent.label.lower()}'


class ProvinceForm(GeoChildForm):
    parent_field = 'country'

    class Meta:
        model = Province
        fields = ['country', 'code', 'name']


class CityForm(GeoChildForm):
    parent_field = 'province'

    class Meta:
        model = City
        fields = ['province', 'code', 'name']


class DistrictForm(GeoChildForm):
    parent_field = 'city'

    class Meta:
        model = District
        fields = ['city', 'code', 'name']


class VillageForm(GeoChildForm):
    parent_field = 'district'

    class Meta:
        model = Village
        fields = ['district', 'code', 'name']
