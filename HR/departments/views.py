from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status
from django.core.exceptions import ValidationError
from django.shortcuts import get_object_or_404

from core.base.query import parse_filters, parse_list_query
from core.permissions.decorators import require_permission
from HR.departments.models import Department
from HR.departments.services import DepartmentService
from HR.departments.serializers import (
    DepartmentReadSerializer,
    DepartmentShowSerializer,
    DepartmentSummarySerializer,
    DepartmentCreateSerializer,
    DepartmentUpdateSerializer,
)
from refdata_project.pagination import paginated_response
from refdata_project.response_formatter import message_response, validation_error_response


@api_view(['GET', 'POST'])
@require_permission('hr_department', public_methods=('GET',))
def department_list(request):
    """
    List departments or create a new department.

    GET /api/v1/hr/departments
    - Filters: filter[code], filter[name], filter[parent_id], filter[parent_name], filter[status]
    - Sort: ?sort=name | -name | code | status | created_at | updated_at

    POST /api/v1/hr/departments
    - Requires hr_department:write
    """
    if request.method == 'GET':
        query = parse_list_query(request.query_params)
        try:
            departments = DepartmentService.list_departments(query.filters, query.sort)
        except ValidationError as e:
            return validation_error_response(e)
        return paginated_response(request, departments, DepartmentReadSerializer)

    serializer = DepartmentCreateSerializer(data=request.data)
    if serializer.is_valid():
        try:
            department = DepartmentService.create(request.user, serializer.to_dto())
        except ValidationError as e:
            return validation_error_response(e)
        read_serializer = DepartmentReadSerializer(DepartmentService.get(department.pk))
        return Response(read_serializer.data, status=status.HTTP_201_CREATED)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['GET'])
def department_options(request):
    """
    Active departments for dropdowns.

    GET /api/v1/hr/departments/list
    """
    try:
        departments = DepartmentService.options(parse_filters(request.query_params))
    except ValidationError as e:
        return validation_error_response(e)
    return Response(DepartmentSummarySerializer(departments, many=True).data)


@api_view(['GET'])
def department_children(request, pk):
    """
    Active sub-departments of a department as {id, code, name}.

    GET /api/v1/hr/departments/<pk>/children
    """
    department = get_object_or_404(Department, pk=pk)
    children = DepartmentService.children_of(department).values('id', 'code', 'name')
    return Response(list(children))


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@require_permission('hr_department')
def department_detail(request, pk):
    """
    Retrieve, update or deactivate a department.

    GET /api/v1/hr/departments/<pk>
    PUT/PATCH /api/v1/hr/departments/<pk>
    DELETE /api/v1/hr/departments/<pk>  (soft delete)
    """
    department = get_object_or_404(Department, pk=pk)

    if request.method == 'GET':
        serializer = DepartmentShowSerializer(DepartmentService.get(department.pk))
        return Response(serializer.data, status=status.HTTP_200_OK)

    elif request.method in ['PUT', 'PATCH']:
        data = request.data.copy()
        data['department_id'] = department.id

        serializer = DepartmentUpdateSerializer(data=data)
        if serializer.is_valid():
            try:
                updated = DepartmentService.update(request.user, serializer.to_dto())
            except ValidationError as e:
                return validation_error_response(e)
            read_serializer = DepartmentReadSerializer(DepartmentService.get(updated.pk))
            return Response(read_serializer.data, status=status.HTTP_200_OK)
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        DepartmentService.deactivate(request.user, department.id)
    except ValidationError as e:
        return validation_error_response(e)
    return message_response('Department deleted successfully')
