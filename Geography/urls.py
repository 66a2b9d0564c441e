"""
URL configuration for the geographic reference data API.

Mounted under /api/v1/geo/. Paths carry no trailing slash.
"""
from django.urls import path
from Geography import views

app_name = 'geo_api'

urlpatterns = [
    # Country endpoints
    path('countries', views.country_list, name='country_list'),
    path('countries/list', views.country_options, name='country_options'),
    path('countries/<int:pk>', views.country_detail, name='country_detail'),
    path('countries/<int:pk>/provinces', views.country_provinces, name='country_provinces'),

    # Province endpoints
    path('provinces', views.province_list, name='province_list'),
    path('provinces/list', views.province_options, name='province_options'),
    path('provinces/<int:pk>', views.province_detail, name='province_detail'),
    path('provinces/<int:pk>/cities', views.province_cities, name='province_cities'),

    # City endpoints
    path('cities', views.city_list, name='city_list'),
    path('cities/list', views.city_options, name='city_options'),
    path('cities/<int:pk>', views.city_detail, name='city_detail'),
    path('cities/<int:pk>/districts', views.city_districts, name='city_districts'),

    # District endpoints
    path('districts', views.district_list, name='district_list'),
    path('districts/list', views.district_options, name='district_options'),
    path('districts/<int:pk>', views.district_detail, name='district_detail'),
    path('districts/<int:pk>/villages', views.district_villages, name='district_villages'),

    # Village endpoints
    path('villages', views.village_list, name='village_list'),
    path('villages/list', views.village_options, name='village_options'),
    path('villages/<int:pk>', views.village_detail, name='village_detail'),
]
