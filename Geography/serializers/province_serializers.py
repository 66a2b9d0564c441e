"""
Serializers for Province model
"""
from rest_framework import serializers

from core.base.serializers import RelatedCountField, UserSummaryField
from Geography.models import Province
from Geography.dtos import ProvinceCreateDTO, ProvinceUpdateDTO
from Geography.serializers.common import GeoChildSerializer, CountrySummarySerializer


class ProvinceReadSerializer(serializers.ModelSerializer):
    """Read serializer for Province model, with its parent chain"""
    country = CountrySummarySerializer(read_only=True)
    cities_count = RelatedCountField('cities')
    updated_by = UserSummaryField()

    class Meta:
        model = Province
        fields = [
            'id', 'country_id', 'code', 'name',
            'country',
            'cities_count',
            'created_at', 'updated_at', 'updated_by',
        ]
        read_only_fields = fields


class ProvinceShowSerializer(ProvinceReadSerializer):
    """Detail serializer: list row plus the province's cities"""
    cities = serializers.SerializerMethodField()

    class Meta(ProvinceReadSerializer.Meta):
        fields = ProvinceReadSerializer.Meta.fields + ['cities']

    def get_cities(self, obj):
        return GeoChildSerializer(obj.cities.order_by('name', 'pk'), many=True).data


class ProvinceOptionSerializer(serializers.ModelSerializer):
    """Dropdown row for the unpaginated list endpoint"""
    country = CountrySummarySerializer(read_only=True)

    class Meta:
        model = Province
        fields = ['id', 'country_id', 'code', 'name', 'country']


class ProvinceCreateSerializer(serializers.Serializer):
    """Write serializer for creating a province"""
    country_id = serializers.IntegerField()
    code = serializers.CharField(max_length=20)
    name = serializers.CharField(max_length=255)

    def to_dto(self) -> ProvinceCreateDTO:
        return ProvinceCreateDTO(**self.validated_data)


class ProvinceUpdateSerializer(serializers.Serializer):
    """Write serializer for updating a province"""
    province_id = serializers.IntegerField()  # Primary Key
    country_id = serializers.IntegerField(required=False)
    code = serializers.CharField(max_length=20, required=False)
    name = serializers.CharField(max_length=255, required=False)

    def to_dto(self) -> ProvinceUpdateDTO:
        return ProvinceUpdateDTO(**self.validated_data)
