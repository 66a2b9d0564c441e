"""
Server-rendered pages for the geographic reference data.
"""
from core.pages.views import (
    ChildList,
    Column,
    FilterField,
    ParentLink,
    ResourceDeletePage,
    ResourceFormPage,
    ResourceListPage,
    ResourceShowPage,
)
from Geography.dtos import (
    CountryCreateDTO, CountryUpdateDTO,
    ProvinceCreateDTO, ProvinceUpdateDTO,
    CityCreateDTO, CityUpdateDTO,
    DistrictCreateDTO, DistrictUpdateDTO,
    VillageCreateDTO, VillageUpdateDTO,
)
from Geography.forms import CountryForm, ProvinceForm, CityForm, DistrictForm, VillageForm
from Geography.models import Country, Province, City, District, Village
from Geography.services import (
    CountryService,
    ProvinceService,
    CityService,
    DistrictService,
    VillageService,
)


def options_from(service):
    """Dropdown choices (id, name) from a service's unpaginated list."""
    def options():
        return [(row.pk, row.name) for row in service.options()]
    return options


AUDIT_COLUMNS = [
    Column('updated_by.username', 'Updated By'),
    Column('updated_at', 'Updated', sortable=True),
]


# Country

class CountryPageMixin:
    resource = 'geo_country'
    route_prefix = 'geography:countries'
    service = CountryService
    model = Country
    verbose_name = 'Country'
    verbose_name_plural = 'Countries'
    subject_type = 'geography.country'


class CountryListPage(CountryPageMixin, ResourceListPage):
    columns = [
        Column('code', 'Code', sortable=True),
        Column('name', 'Name', sortable=True),
        Column('iso_code', 'ISO Code', sortable=True),
        Column('phone_code', 'Phone Code', sortable=True),
        Column('provinces_count', 'Provinces'),
    ] + AUDIT_COLUMNS
    filters = [
        FilterField('code', 'Code'),
        FilterField('name', 'Name'),
        FilterField('iso_code', 'ISO Code'),
        FilterField('phone_code', 'Phone Code'),
    ]


class CountryShowPage(CountryPageMixin, ResourceShowPage):
    fields = [
        ('Code', 'code'),
        ('Name', 'name'),
        ('ISO Code', 'iso_code'),
        ('Phone Code', 'phone_code'),
        ('Created', 'created_at'),
        ('Updated', 'updated_at'),
        ('Updated By', 'updated_by.username'),
    ]
    children = ChildList('Provinces', 'provinces', 'geography:provinces.show')


class CountryFormPage(CountryPageMixin, ResourceFormPage):
    form_class = CountryForm
    create_dto = CountryCreateDTO
    update_dto = CountryUpdateDTO


class CountryDeletePage(CountryPageMixin, ResourceDeletePage):
    pass


# Province

class ProvincePageMixin:
    resource = 'geo_province'
    route_prefix = 'geography:provinces'
    service = ProvinceService
    model = Province
    verbose_name = 'Province'
    verbose_name_plural = 'Provinces'
    subject_type = 'geography.province'


class ProvinceListPage(ProvincePageMixin, ResourceListPage):
    columns = [
        Column('code', 'Code', sortable=True),
        Column('name', 'Name', sortable=True),
        Column('country.name', 'Country'),
        Column('cities_count', 'Cities'),
    ] + AUDIT_COLUMNS
    filters = [
        FilterField('code', 'Code'),
        FilterField('name', 'Name'),
        FilterField('country_id', 'Country', options=options_from(CountryService)),
    ]


class ProvinceShowPage(ProvincePageMixin, ResourceShowPage):
    fields = [
        ('Code', 'code'),
        ('Name', 'name'),
        ('Created', 'created_at'),
        ('Updated', 'updated_at'),
        ('Updated By', 'updated_by.username'),
    ]
    parents = [
        ParentLink('Country', 'country', 'geography:countries.show'),
    ]
    children = ChildList('Cities', 'cities', 'geography:cities.show')


class ProvinceFormPage(ProvincePageMixin, ResourceFormPage):
    form_class = ProvinceForm
    create_dto = ProvinceCreateDTO
    update_dto = ProvinceUpdateDTO


class ProvinceDeletePage(ProvincePageMixin, ResourceDeletePage):
    pass


# City

class CityPageMixin:
    resource = 'geo_city'
    route_prefix = 'geography:cities'
    service = CityService
    model = City
    verbose_name = 'City'
    verbose_name_plural = 'Cities'
    subject_type = 'geography.city'


class CityListPage(CityPageMixin, ResourceListPage):
    columns = [
        Column('code', 'Code', sortable=True),
        Column('name', 'Name', sortable=True),
        Column('province.name', 'Province'),
        Column('province.country.name', 'Country'),
        Column('districts_count', 'Districts'),
    ] + AUDIT_COLUMNS
    filters = [
        FilterField('code', 'Code'),
        FilterField('name', 'Name'),
        FilterField('province_id', 'Province', options=options_from(ProvinceService)),
    ]


class CityShowPage(CityPageMixin, ResourceShowPage):
    fields = [
        ('Code', 'code'),
        ('Name', 'name'),
        ('Created', 'created_at'),
        ('Updated', 'updated_at'),
        ('Updated By', 'updated_by.username'),
    ]
    parents = [
        ParentLink('Country', 'province.country', 'geography:countries.show'),
        ParentLink('Province', 'province', 'geography:provinces.show'),
    ]
    children = ChildList('Districts', 'districts', 'geography:districts.show')


class CityFormPage(CityPageMixin, ResourceFormPage):
    form_class = CityForm
    create_dto = CityCreateDTO
    update_dto = CityUpdateDTO


class CityDeletePage(CityPageMixin, ResourceDeletePage):
    pass


# District

class DistrictPageMixin:
    resource = 'geo_district'
    route_prefix = 'geography:districts'
    service = DistrictService
    model = District
    verbose_name = 'District'
    verbose_name_plural = 'Districts'
    subject_type = 'geography.district'


class DistrictListPage(DistrictPageMixin, ResourceListPage):
    columns = [
        Column('code', 'Code', sortable=True),
        Column('name', 'Name', sortable=True),
        Column('city.name', 'City'),
        Column('city.province.name', 'Province'),
        Column('villages_count', 'Villages'),
    ] + AUDIT_COLUMNS
    filters = [
        FilterField('code', 'Code'),
        FilterField('name', 'Name'),
        FilterField('city_id', 'City', options=options_from(CityService)),
    ]


class DistrictShowPage(DistrictPageMixin, ResourceShowPage):
    fields = [
        ('Code', 'code'),
        ('Name', 'name'),
        ('Created', 'created_at'),
        ('Updated', 'updated_at'),
        ('Updated By', 'updated_by.username'),
    ]
    parents = [
        ParentLink('Country', 'city.province.country', 'geography:countries.show'),
        ParentLink('Province', 'city.province', 'geography:provinces.show'),
        ParentLink('City', 'city', 'geography:cities.show'),
    ]
    children = ChildList('Villages', 'villages', 'geography:villages.show')


class DistrictFormPage(DistrictPageMixin, ResourceFormPage):
    form_class = DistrictForm
    create_dto = DistrictCreateDTO
    update_dto = DistrictUpdateDTO


class DistrictDeletePage(DistrictPageMixin, ResourceDeletePage):
    pass


# Village

class VillagePageMixin:
    resource = 'geo_village'
    route_prefix = 'geography:villages'
    service = VillageService
    model = Village
    verbose_name = 'Village'
    verbose_name_plural = 'Villages'
    subject_type = 'geography.village'


class VillageListPage(VillagePageMixin, ResourceListPage):
    columns = [
        Column('code', 'Code', sortable=True),
        Column('name', 'Name', sortable=True),
        Column('district.name', 'District'),
        Column('district.city.name', 'City'),
    ] + AUDIT_COLUMNS
    filters = [
        FilterField('code', 'Code'),
        FilterField('name', 'Name'),
        FilterField('district_id', 'District', options=options_from(DistrictService)),
    ]


class VillageShowPage(VillagePageMixin, ResourceShowPage):
    fields = [
        ('Code', 'code'),
        ('Name', 'name'),
        ('Created', 'created_at'),
        ('Updated', 'updated_at'),
        ('Updated By', 'updated_by.username'),
    ]
    parents = [
        ParentLink('Country', 'district.city.province.country', 'geography:countries.show'),
        ParentLink('Province', 'district.city.province', 'geography:provinces.show'),
        ParentLink('City', 'district.city', 'geography:cities.show'),
        ParentLink('District', 'district', 'geography:districts.show'),
    ]


class VillageFormPage(VillagePageMixin, ResourceFormPage):
    form_class = VillageForm
    create_dto = VillageCreateDTO
    update_dto = VillageUpdateDTO


class VillageDeletePage(VillagePageMixin, ResourceDeletePage):
    pass
