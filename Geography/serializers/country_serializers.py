"""
Serializers for Country model
"""
from rest_framework import serializers

from core.base.serializers import RelatedCountField, UserSummaryField
from Geography.models import Country
from Geography.dtos import CountryCreateDTO, CountryUpdateDTO
from Geography.serializers.common import GeoChildSerializer


class CountryReadSerializer(serializers.ModelSerializer):
    """Read serializer for Country model"""
    provinces_count = RelatedCountField('provinces')
    updated_by = UserSummaryField()

    class Meta:
        model = Country
        fields = [
            'id', 'code', 'name', 'iso_code', 'phone_code',
            'provinces_count',
            'created_at', 'updated_at', 'updated_by',
        ]
        read_only_fields = fields


class CountryShowSerializer(CountryReadSerializer):
    """Detail serializer: list row plus the country's provinces"""
    provinces = serializers.SerializerMethodField()

    class Meta(CountryReadSerializer.Meta):
        fields = CountryReadSerializer.Meta.fields + ['provinces']

    def get_provinces(self, obj):
        return GeoChildSerializer(obj.provinces.order_by('name', 'pk'), many=True).data


class CountryCreateSerializer(serializers.Serializer):
    """Write serializer for creating a country"""
    code = serializers.CharField(max_length=20)
    name = serializers.CharField(max_length=255)
    iso_code = serializers.CharField(max_length=3, required=False, allow_blank=True, allow_null=True)
    phone_code = serializers.CharField(max_length=10, required=False, allow_blank=True, allow_null=True)

    def to_dto(self) -> CountryCreateDTO:
        return CountryCreateDTO(**self.validated_data)


class CountryUpdateSerializer(serializers.Serializer):
    """Write serializer for updating a country"""
    country_id = serializers.IntegerField()  # Primary Key
    code = serializers.CharField(max_length=20, required=False)
    name = serializers.CharField(max_length=255, required=False)
    iso_code = serializers.CharField(max_length=3, required=False, allow_blank=True)
    phone_code = serializers.CharField(max_length=10, required=False, allow_blank=True)

    def to_dto(self) -> CountryUpdateDTO:
        return CountryUpdateDTO(**self.validated_data)


class CountryOptionSerializer(serializers.ModelSerializer):
    """Dropdown row for the unpaginated list endpoint"""

    class Meta:
        model = Country
        fields = ['id', 'code', 'name', 'iso_code', 'phone_code']
