"""
Compact representations used for parent chains and child lists.
"""
from rest_framework import serializers

from Geography.models import Country, Province, City, District


class GeoChildSerializer(serializers.Serializer):
    """Child row on a detail response: {id, code, name, created_at}"""
    id = serializers.IntegerField(read_only=True)
    code = serializers.CharField(read_only=True)
    name = serializers.CharField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)


class CountrySummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Country
        fields = ['id', 'code', 'name']


class ProvinceSummarySerializer(serializers.ModelSerializer):
    country = CountrySummarySerializer(read_only=True)

    class Meta:
        model = Province
        fields = ['id', 'code', 'name', 'country_id', 'country']


class CitySummarySerializer(serializers.ModelSerializer):
    province = ProvinceSummarySerializer(read_only=True)

    class Meta:
        model = City
        fields = ['id', 'code', 'name', 'province_id', 'province']


class DistrictSummarySerializer(serializers.ModelSerializer):
    city = CitySummarySerializer(read_only=True)

    class Meta:
        model = District
        fields = ['id', 'code', 'name', 'city_id', 'city']
