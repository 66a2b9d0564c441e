"""
Serializers for District model
"""
from rest_framework import serializers

from core.base.serializers import RelatedCountField, UserSummaryField
from Geography.models import District
from Geography.dtos import DistrictCreateDTO, DistrictUpdateDTO
from Geography.serializers.common import GeoChildSerializer, CitySummarySerializer


class DistrictReadSerializer(serializers.ModelSerializer):
    """Read serializer for District model, with its parent chain"""
    city = CitySummarySerializer(read_only=True)
    villages_count = RelatedCountField('villages')
    updated_by = UserSummaryField()

    class Meta:
        model = District
        fields = [
            'id', 'city_id', 'code', 'name',
            'city',
            'villages_count',
            'created_at', 'updated_at', 'updated_by',
        ]
        read_only_fields = fields


class DistrictShowSerializer(DistrictReadSerializer):
    """Detail serializer: list row plus the district's villages"""
    villages = serializers.SerializerMethodField()

    class Meta(DistrictReadSerializer.Meta):
        fields = DistrictReadSerializer.Meta.fields + ['villages']

    def get_villages(self, obj):
        return GeoChildSerializer(obj.villages.order_by('name', 'pk'), many=True).data


class DistrictOptionSerializer(serializers.ModelSerializer):
    """Dropdown row for the unpaginated list endpoint"""
    city = CitySummarySerializer(read_only=True)

    class Meta:
        model = District
        fields = ['id', 'city_id', 'code', 'name', 'city']


class DistrictCreateSerializer(serializers.Serializer):
    """Write serializer for creating a district"""
    city_id = serializers.IntegerField()
    code = serializers.CharField(max_length=20)
    name = serializers.CharField(max_length=255)

    def to_dto(self) -> DistrictCreateDTO:
        return DistrictCreateDTO(**self.validated_data)


class DistrictUpdateSerializer(serializers.Serializer):
    """Write serializer for updating a district"""
    district_id = serializers.IntegerField()  # Primary Key
    city_id = serializers.IntegerField(required=False)
    code = serializers.CharField(max_length=20, required=False)
    name = serializers.CharField(max_length=255, required=False)

    def to_dto(self) -> DistrictUpdateDTO:
        return DistrictUpdateDTO(**self.validated_data)
