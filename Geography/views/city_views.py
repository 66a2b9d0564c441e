from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status
from django.core.exceptions import ValidationError
from django.shortcuts import get_object_or_404

from core.base.query import parse_filters, parse_list_query
from core.permissions.decorators import require_permission
from Geography.models import City, Province
from Geography.services import CityService
from Geography.serializers import (
    CityReadSerializer,
    CityShowSerializer,
    CityOptionSerializer,
    CityCreateSerializer,
    CityUpdateSerializer,
)
from refdata_project.pagination import paginated_response
from refdata_project.response_formatter import message_response, validation_error_response


@api_view(['GET', 'POST'])
@require_permission('geo_city', public_methods=('GET',))
def city_list(request):
    """
    List cities or create a new city.

    GET /api/v1/geo/cities
    - Filters: filter[code], filter[name], filter[province_id], filter[province_name],
      filter[country_id]
    - Sort: ?sort=name | -name | code | created_at | updated_at
    - Pagination: ?page=2&per_page=25

    POST /api/v1/geo/cities
    - Requires geo_city:write
    """
    if request.method == 'GET':
        query = parse_list_query(request.query_params)
        try:
            cities = CityService.list_entities(query.filters, query.sort)
        except ValidationError as e:
            return validation_error_response(e)
        return paginated_response(request, cities, CityReadSerializer)

    serializer = CityCreateSerializer(data=request.data)
    if serializer.is_valid():
        try:
            city = CityService.create(request.user, serializer.to_dto())
        except ValidationError as e:
            return validation_error_response(e)
        read_serializer = CityReadSerializer(CityService.get(city.pk))
        return Response(read_serializer.data, status=status.HTTP_201_CREATED)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['GET'])
def city_options(request):
    """
    Unpaginated cities for dropdowns, ordered by name.

    GET /api/v1/geo/cities/list
    """
    try:
        cities = CityService.options(parse_filters(request.query_params))
    except ValidationError as e:
        return validation_error_response(e)
    return Response(CityOptionSerializer(cities, many=True).data)


@api_view(['GET'])
def province_cities(request, pk):
    """
    City rows of one province as {id, code, name}.

    GET /api/v1/geo/provinces/<pk>/cities
    """
    province = get_object_or_404(Province, pk=pk)
    return Response(list(CityService.by_parent(province)))


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@require_permission('geo_city')
def city_detail(request, pk):
    """
    Retrieve, update or delete a city.

    GET /api/v1/geo/cities/<pk>
    PUT/PATCH /api/v1/geo/cities/<pk>
    DELETE /api/v1/geo/cities/<pk>
    """
    city = get_object_or_404(City, pk=pk)

    if request.method == 'GET':
        serializer = CityShowSerializer(CityService.get(city.pk))
        return Response(serializer.data, status=status.HTTP_200_OK)

    elif request.method in ['PUT', 'PATCH']:
        data = request.data.copy()
        data['city_id'] = city.id

        serializer = CityUpdateSerializer(data=data)
        if serializer.is_valid():
            try:
                updated = CityService.update(request.user, serializer.to_dto())
            except ValidationError as e:
                return validation_error_response(e)
            read_serializer = CityReadSerializer(CityService.get(updated.pk))
            return Response(read_serializer.data, status=status.HTTP_200_OK)
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        CityService.delete(request.user, city.id)
    except ValidationError as e:
        return validation_error_response(e)
    return message_response('City deleted successfully')
