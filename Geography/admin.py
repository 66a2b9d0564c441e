from django.contrib import admin
from .models import Country, Province, City, District, Village


class GeoReferenceAdmin(admin.ModelAdmin):
    search_fields = ['code', 'name']
    readonly_fields = ['created_at', 'updated_at', 'created_by', 'updated_by']
    ordering = ['name']

    def save_model(self, request, obj, form, change):
        obj.stamp(request.user, creating=not change)
        super().save_model(request, obj, form, change)


class ProvinceInline(admin.TabularInline):
    model = Province
    fields = ['code', 'name']
    extra = 0
    show_change_link = True


@admin.register(Country)
class CountryAdmin(GeoReferenceAdmin):
    list_display = ['code', 'name', 'iso_code', 'phone_code', 'updated_at']
    search_fields = ['code', 'name', 'iso_code']
    inlines = [ProvinceInline]


@admin.register(Province)
class ProvinceAdmin(GeoReferenceAdmin):
    list_display = ['code', 'name', 'country', 'updated_at']
    list_filter = ['country']
    autocomplete_fields = ['country']


@admin.register(City)
class CityAdmin(GeoReferenceAdmin):
    list_display = ['code', 'name', 'province', 'updated_at']
    list_filter = ['province__country']
    autocomplete_fields = ['province']


@admin.register(District)
class DistrictAdmin(GeoReferenceAdmin):
    list_display = ['code', 'name', 'city', 'updated_at']
    autocomplete_fields = ['city']


@admin.register(Village)
class VillageAdmin(GeoReferenceAdmin):
    list_display = ['code', 'name', 'district', 'updated_at']
    autocomplete_fields = ['district']
