"""
Shared fixtures for the geography tests.
"""
from Geography.models import Country, Province, City, District, Village


def create_country(code='ID', name='Indonesia', **extra):
    extra.setdefault('iso_code', 'IDN')
    extra.setdefault('phone_code', '+62')
    return Country.objects.create(code=code, name=name, **extra)


def create_province(country, code='31', name='DKI Jakarta', **extra):
    return Province.objects.create(country=country, code=code, name=name, **extra)


def create_city(province, code='31.71', name='Jakarta Pusat', **extra):
    return City.objects.create(province=province, code=code, name=name, **extra)


def create_district(city, code='31.71.01', name='Gambir', **extra):
    return District.objects.create(city=city, code=code, name=name, **extra)


def create_village(district, code='31.71.01.1001', name='Gambir', **extra):
    return Village.objects.create(district=district, code=code, name=name, **extra)


def create_region_tree():
    """One country -> province -> city -> district -> village chain."""
    country = create_country()
    province = create_province(country)
    city = create_city(province)
    district = create_district(city)
    village = create_village(district)
    return country, province, city, district, village
