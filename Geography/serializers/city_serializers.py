"""
Serializers for City model
"""
from rest_framework import serializers

from core.base.serializers import RelatedCountField, UserSummaryField
from Geography.models import City
from Geography.dtos import CityCreateDTO, CityUpdateDTO
from Geography.serializers.common import GeoChildSerializer, ProvinceSummarySerializer


class CityReadSerializer(serializers.ModelSerializer):
    """Read serializer for City model, with its parent chain"""
    province = ProvinceSummarySerializer(read_only=True)
    districts_count = RelatedCountField('districts')
    updated_by = UserSummaryField()

    class Meta:
        model = City
        fields = [
            'id', 'province_id', 'code', 'name',
            'province',
            'districts_count',
            'created_at', 'updated_at', 'updated_by',
        ]
        read_only_fields = fields


class CityShowSerializer(CityReadSerializer):
    """Detail serializer: list row plus the city's districts"""
    districts = serializers.SerializerMethodField()

    class Meta(CityReadSerializer.Meta):
        fields = CityReadSerializer.Meta.fields + ['districts']

    def get_districts(self, obj):
        return GeoChildSerializer(obj.districts.order_by('name', 'pk'), many=True).data


class CityOptionSerializer(serializers.ModelSerializer):
    """Dropdown row for the unpaginated list endpoint"""
    province = ProvinceSummarySerializer(read_only=True)

    class Meta:
        model = City
        fields = ['id', 'province_id', 'code', 'name', 'province']


class CityCreateSerializer(serializers.Serializer):
    """Write serializer for creating a city"""
    province_id = serializers.IntegerField()
    code = serializers.CharField(max_length=20)
    name = serializers.CharField(max_length=255)

    def to_dto(self) -> CityCreateDTO:
        return CityCreateDTO(**self.validated_data)


class CityUpdateSerializer(serializers.Serializer):
    """Write serializer for updating a city"""
    city_id = serializers.IntegerField()  # Primary Key
    province_id = serializers.IntegerField(required=False)
    code = serializers.CharField(max_length=20, required=False)
    name = serializers.CharField(max_length=255, required=False)

    def to_dto(self) -> CityUpdateDTO:
        return CityUpdateDTO(**self.validated_data)
