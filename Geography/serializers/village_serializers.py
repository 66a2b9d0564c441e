"""
Serializers for Village model
"""
from rest_framework import serializers

from core.base.serializers import UserSummaryField
from Geography.models import Village
from Geography.dtos import VillageCreateDTO, VillageUpdateDTO
from Geography.serializers.common import DistrictSummarySerializer


class VillageReadSerializer(serializers.ModelSerializer):
    """Read serializer for Village model, with its parent chain"""
    district = DistrictSummarySerializer(read_only=True)
    updated_by = UserSummaryField()

    class Meta:
        model = Village
        fields = [
            'id', 'district_id', 'code', 'name',
            'district',
            'created_at', 'updated_at', 'updated_by',
        ]
        read_only_fields = fields


class VillageOptionSerializer(serializers.ModelSerializer):
    """Dropdown row for the unpaginated list endpoint"""
    district = DistrictSummarySerializer(read_only=True)

    class Meta:
        model = Village
        fields = ['id', 'district_id', 'code', 'name', 'district']


class VillageCreateSerializer(serializers.Serializer):
    """Write serializer for creating a village"""
    district_id = serializers.IntegerField()
    code = serializers.CharField(max_length=20)
    name = serializers.CharField(max_length=255)

    def to_dto(self) -> VillageCreateDTO:
        return VillageCreateDTO(**self.validated_data)


class VillageUpdateSerializer(serializers.Serializer):
    """Write serializer for updating a village"""
    village_id = serializers.IntegerField()  # Primary Key
    district_id = serializers.IntegerField(required=False)
    code = serializers.CharField(max_length=20, required=False)
    name = serializers.CharField(max_length=255, required=False)

    def to_dto(self) -> VillageUpdateDTO:
        return VillageUpdateDTO(**self.validated_data)
