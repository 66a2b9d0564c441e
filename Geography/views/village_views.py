from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status
from django.core.exceptions import ValidationError
from django.shortcuts import get_object_or_404

from core.base.query import parse_filters, parse_list_query
from core.permissions.decorators import require_permission
from Geography.models import Village, District
from Geography.services import VillageService
from Geography.serializers import (
    VillageReadSerializer,
    VillageOptionSerializer,
    VillageCreateSerializer,
    VillageUpdateSerializer,
)
from refdata_project.pagination import paginated_response
from refdata_project.response_formatter import message_response, validation_error_response


@api_view(['GET', 'POST'])
@require_permission('geo_village', public_methods=('GET',))
def village_list(request):
    """
    List villages or create a new village.

    GET /api/v1/geo/villages
    - Filters: filter[code], filter[name], filter[district_id], filter[district_name],
      filter[city_id], filter[province_id], filter[country_id]
    - Sort: ?sort=name | -name | code | created_at | updated_at
    - Pagination: ?page=2&per_page=25

    POST /api/v1/geo/villages
    - Requires geo_village:write
    """
    if request.method == 'GET':
        query = parse_list_query(request.query_params)
        try:
            villages = VillageService.list_entities(query.filters, query.sort)
        except ValidationError as e:
            return validation_error_response(e)
        return paginated_response(request, villages, VillageReadSerializer)

    serializer = VillageCreateSerializer(data=request.data)
    if serializer.is_valid():
        try:
            village = VillageService.create(request.user, serializer.to_dto())
        except ValidationError as e:
            return validation_error_response(e)
        read_serializer = VillageReadSerializer(VillageService.get(village.pk))
        return Response(read_serializer.data, status=status.HTTP_201_CREATED)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['GET'])
def village_options(request):
    """
    Unpaginated villages for dropdowns, ordered by name.

    GET /api/v1/geo/villages/list
    """
    try:
        villages = VillageService.options(parse_filters(request.query_params))
    except ValidationError as e:
        return validation_error_response(e)
    return Response(VillageOptionSerializer(villages, many=True).data)


@api_view(['GET'])
def district_villages(request, pk):
    """
    Village rows of one district as {id, code, name}.

    GET /api/v1/geo/districts/<pk>/villages
    """
    district = get_object_or_404(District, pk=pk)
    return Response(list(VillageService.by_parent(district)))


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@require_permission('geo_village')
def village_detail(request, pk):
    """
    Retrieve, update or delete a village.

    GET /api/v1/geo/villages/<pk>
    PUT/PATCH /api/v1/geo/villages/<pk>
    DELETE /api/v1/geo/villages/<pk>
    """
    village = get_object_or_404(Village, pk=pk)

    if request.method == 'GET':
        serializer = VillageReadSerializer(VillageService.get(village.pk))
        return Response(serializer.data, status=status.HTTP_200_OK)

    elif request.method in ['PUT', 'PATCH']:
        data = request.data.copy()
        data['village_id'] = village.id

        serializer = VillageUpdateSerializer(data=data)
        if serializer.is_valid():
            try:
                updated = VillageService.update(request.user, serializer.to_dto())
            except ValidationError as e:
                return validation_error_response(e)
            read_serializer = VillageReadSerializer(VillageService.get(updated.pk))
            return Response(read_serializer.data, status=status.HTTP_200_OK)
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        VillageService.delete(request.user, village.id)
    except ValidationError as e:
        return validation_error_response(e)
    return message_response('Village deleted successfully')
