from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status
from django.core.exceptions import ValidationError
from django.shortcuts import get_object_or_404

from core.base.query import parse_filters, parse_list_query
from core.permissions.decorators import require_permission
from Geography.models import District, City
from Geography.services import DistrictService
from Geography.serializers import (
    DistrictReadSerializer,
    DistrictShowSerializer,
    DistrictOptionSerializer,
    DistrictCreateSerializer,
    DistrictUpdateSerializer,
)
from refdata_project.pagination import paginated_response
from refdata_project.response_formatter import message_response, validation_error_response


@api_view(['GET', 'POST'])
@require_permission('geo_district', public_methods=('GET',))
def district_list(request):
    """
    List districts or create a new district.

    GET /api/v1/geo/districts
    - Filters: filter[code], filter[name], filter[city_id], filter[city_name],
      filter[province_id], filter[country_id]
    - Sort: ?sort=name | -name | code | created_at | updated_at
    - Pagination: ?page=2&per_page=25

    POST /api/v1/geo/districts
    - Requires geo_district:write
    """
    if request.method == 'GET':
        query = parse_list_query(request.query_params)
        try:
            districts = DistrictService.list_entities(query.filters, query.sort)
        except ValidationError as e:
            return validation_error_response(e)
        return paginated_response(request, districts, DistrictReadSerializer)

    serializer = DistrictCreateSerializer(data=request.data)
    if serializer.is_valid():
        try:
            district = DistrictService.create(request.user, serializer.to_dto())
        except ValidationError as e:
            return validation_error_response(e)
        read_serializer = DistrictReadSerializer(DistrictService.get(district.pk))
        return Response(read_serializer.data, status=status.HTTP_201_CREATED)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['GET'])
def district_options(request):
    """
    Unpaginated districts for dropdowns, ordered by name.

    GET /api/v1/geo/districts/list
    """
    try:
        districts = DistrictService.options(parse_filters(request.query_params))
    except ValidationError as e:
        return validation_error_response(e)
    return Response(DistrictOptionSerializer(districts, many=True).data)


@api_view(['GET'])
def city_districts(request, pk):
    """
    District rows of one city as {id, code, name}.

    GET /api/v1/geo/cities/<pk>/districts
    """
    city = get_object_or_404(City, pk=pk)
    return Response(list(DistrictService.by_parent(city)))


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@require_permission('geo_district')
def district_detail(request, pk):
    """
    Retrieve, update or delete a district.

    GET /api/v1/geo/districts/<pk>
    PUT/PATCH /api/v1/geo/districts/<pk>
    DELETE /api/v1/geo/districts/<pk>
    """
    district = get_object_or_404(District, pk=pk)

    if request.method == 'GET':
        serializer = DistrictShowSerializer(DistrictService.get(district.pk))
        return Response(serializer.data, status=status.HTTP_200_OK)

    elif request.method in ['PUT', 'PATCH']:
        data = request.data.copy()
        data['district_id'] = district.id

        serializer = DistrictUpdateSerializer(data=data)
        if serializer.is_valid():
            try:
                updated = DistrictService.update(request.user, serializer.to_dto())
            except ValidationError as e:
                return validation_error_response(e)
            read_serializer = DistrictReadSerializer(DistrictService.get(updated.pk))
            return Response(read_serializer.data, status=status.HTTP_200_OK)
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        DistrictService.delete(request.user, district.id)
    except ValidationError as e:
        return validation_error_response(e)
    return message_response('District deleted successfully')
