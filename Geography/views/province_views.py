from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status
from django.core.exceptions import ValidationError
from django.shortcuts import get_object_or_404

from core.base.query import parse_filters, parse_list_query
from core.permissions.decorators import require_permission
from Geography.models import Province, Country
from Geography.services import ProvinceService
from Geography.serializers import (
    ProvinceReadSerializer,
    ProvinceShowSerializer,
    ProvinceOptionSerializer,
    ProvinceCreateSerializer,
    ProvinceUpdateSerializer,
)
from refdata_project.pagination import paginated_response
from refdata_project.response_formatter import message_response, validation_error_response


@api_view(['GET', 'POST'])
@require_permission('geo_province', public_methods=('GET',))
def province_list(request):
    """
    List provinces or create a new province.

    GET /api/v1/geo/provinces
    - Filters: filter[code], filter[name], filter[country_id], filter[country_name]
    - Sort: ?sort=name | -name | code | created_at | updated_at
    - Pagination: ?page=2&per_page=25

    POST /api/v1/geo/provinces
    - Requires geo_province:write
    """
    if request.method == 'GET':
        query = parse_list_query(request.query_params)
        try:
            provinces = ProvinceService.list_entities(query.filters, query.sort)
        except ValidationError as e:
            return validation_error_response(e)
        return paginated_response(request, provinces, ProvinceReadSerializer)

    serializer = ProvinceCreateSerializer(data=request.data)
    if serializer.is_valid():
        try:
            province = ProvinceService.create(request.user, serializer.to_dto())
        except ValidationError as e:
            return validation_error_response(e)
        read_serializer = ProvinceReadSerializer(ProvinceService.get(province.pk))
        return Response(read_serializer.data, status=status.HTTP_201_CREATED)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['GET'])
def province_options(request):
    """
    Unpaginated provinces for dropdowns, ordered by name.

    GET /api/v1/geo/provinces/list
    """
    try:
        provinces = ProvinceService.options(parse_filters(request.query_params))
    except ValidationError as e:
        return validation_error_response(e)
    return Response(ProvinceOptionSerializer(provinces, many=True).data)


@api_view(['GET'])
def country_provinces(request, pk):
    """
    Province rows of one country as {id, code, name}.

    GET /api/v1/geo/countries/<pk>/provinces
    """
    country = get_object_or_404(Country, pk=pk)
    return Response(list(ProvinceService.by_parent(country)))


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@require_permission('geo_province')
def province_detail(request, pk):
    """
    Retrieve, update or delete a province.

    GET /api/v1/geo/provinces/<pk>
    PUT/PATCH /api/v1/geo/provinces/<pk>
    DELETE /api/v1/geo/provinces/<pk>
    """
    province = get_object_or_404(Province, pk=pk)

    if request.method == 'GET':
        serializer = ProvinceShowSerializer(ProvinceService.get(province.pk))
        return Response(serializer.data, status=status.HTTP_200_OK)

    elif request.method in ['PUT', 'PATCH']:
        data = request.data.copy()
        data['province_id'] = province.id

        serializer = ProvinceUpdateSerializer(data=data)
        if serializer.is_valid():
            try:
                updated = ProvinceService.update(request.user, serializer.to_dto())
            except ValidationError as e:
                return validation_error_response(e)
            read_serializer = ProvinceReadSerializer(ProvinceService.get(updated.pk))
            return Response(read_serializer.data, status=status.HTTP_200_OK)
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        ProvinceService.delete(request.user, province.id)
    except ValidationError as e:
        return validation_error_response(e)
    return message_response('Province deleted successfully')
