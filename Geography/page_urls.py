"""
URL configuration for the server-rendered geography pages.

Mounted under /geography/. Route names follow ``<resource>``,
``<resource>.show``, ``<resource>.create``, ``<resource>.edit`` and
``<resource>.destroy``.
"""
from django.urls import path
from Geography import pages

app_name = 'geography'


def resource_urls(prefix, list_page, show_page, form_page, delete_page):
    return [
        path(f'{prefix}', list_page.as_view(), name=prefix),
        path(f'{prefix}/create', form_page.as_view(), name=f'{prefix}.create'),
        path(f'{prefix}/<int:pk>', show_page.as_view(), name=f'{prefix}.show'),
        path(f'{prefix}/<int:pk>/edit', form_page.as_view(), name=f'{prefix}.edit'),
        path(f'{prefix}/<int:pk>/delete', delete_page.as_view(), name=f'{prefix}.destroy'),
    ]


urlpatterns = [
    *resource_urls('countries', pages.CountryListPage, pages.CountryShowPage,
                   pages.CountryFormPage, pages.CountryDeletePage),
    *resource_urls('provinces', pages.ProvinceListPage, pages.ProvinceShowPage,
                   pages.ProvinceFormPage, pages.ProvinceDeletePage),
    *resource_urls('cities', pages.CityListPage, pages.CityShowPage,
                   pages.CityFormPage, pages.CityDeletePage),
    *resource_urls('districts', pages.DistrictListPage, pages.DistrictShowPage,
                   pages.DistrictFormPage, pages.DistrictDeletePage),
    *resource_urls('villages', pages.VillageListPage, pages.VillageShowPage,
                   pages.VillageFormPage, pages.VillageDeletePage),
]
