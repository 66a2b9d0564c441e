"""
Serializers for Department model
"""
from rest_framework import serializers

from core.base.serializers import RelatedCountField, UserSummaryField
from HR.departments.models import Department
from HR.departments.dtos import DepartmentCreateDTO, DepartmentUpdateDTO


class DepartmentSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Department
        fields = ['id', 'code', 'name']


class DepartmentChildSerializer(serializers.ModelSerializer):
    class Meta:
        model = Department
        fields = ['id', 'code', 'name', 'created_at']


class DepartmentReadSerializer(serializers.ModelSerializer):
    """Read serializer for Department model"""
    parent = DepartmentSummarySerializer(read_only=True)
    children_count = RelatedCountField('children')
    updated_by = UserSummaryField()

    class Meta:
        model = Department
        fields = [
            'id', 'code', 'name', 'description',
            'parent_id', 'parent', 'status',
            'children_count',
            'created_at', 'updated_at', 'updated_by',
        ]
        read_only_fields = fields


class DepartmentShowSerializer(DepartmentReadSerializer):
    """Detail serializer: list row, the parent chain and active sub-departments"""
    ancestors = serializers.SerializerMethodField()
    children = serializers.SerializerMethodField()

    class Meta(DepartmentReadSerializer.Meta):
        fields = DepartmentReadSerializer.Meta.fields + ['ancestors', 'children']

    def get_ancestors(self, obj):
        return DepartmentSummarySerializer(obj.ancestors(), many=True).data

    def get_children(self, obj):
        children = obj.children.active().order_by('name', 'pk')
        return DepartmentChildSerializer(children, many=True).data


class DepartmentCreateSerializer(serializers.Serializer):
    """Write serializer for creating a department"""
    code = serializers.CharField(max_length=20)
    name = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, default='')
    parent_id = serializers.IntegerField(required=False, allow_null=True)

    def to_dto(self) -> DepartmentCreateDTO:
        return DepartmentCreateDTO(**self.validated_data)


class DepartmentUpdateSerializer(serializers.Serializer):
    """Write serializer for updating a department"""
    department_id = serializers.IntegerField()  # Primary Key
    code = serializers.CharField(max_length=20, required=False)
    name = serializers.CharField(max_length=255, required=False)
    description = serializers.CharField(required=False, allow_blank=True)
    parent_id = serializers.IntegerField(required=False, allow_null=True)

    def to_dto(self) -> DepartmentUpdateDTO:
        data = dict(self.validated_data)
        # An explicit null parent moves the department to the top level
        clear_parent = 'parent_id' in data and data['parent_id'] is None
        return DepartmentUpdateDTO(**data, clear_parent=clear_parent)
