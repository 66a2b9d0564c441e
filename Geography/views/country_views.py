from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status
from django.core.exceptions import ValidationError
from django.shortcuts import get_object_or_404

from core.base.query import parse_filters, parse_list_query
from core.permissions.decorators import require_permission
from Geography.models import Country
from Geography.services import CountryService
from Geography.serializers import (
    CountryReadSerializer,
    CountryShowSerializer,
    CountryOptionSerializer,
    CountryCreateSerializer,
    CountryUpdateSerializer,
)
from refdata_project.pagination import paginated_response
from refdata_project.response_formatter import message_response, validation_error_response


@api_view(['GET', 'POST'])
@require_permission('geo_country', public_methods=('GET',))
def country_list(request):
    """
    List countries or create a new country.

    GET /api/v1/geo/countries
    - Filters: filter[code], filter[name], filter[iso_code], filter[phone_code]
    - Sort: ?sort=name | -name | code | created_at | updated_at | iso_code | phone_code
    - Pagination: ?page=2&per_page=25

    POST /api/v1/geo/countries
    - Requires geo_country:write
    """
    if request.method == 'GET':
        query = parse_list_query(request.query_params)
        try:
            countries = CountryService.list_entities(query.filters, query.sort)
        except ValidationError as e:
            return validation_error_response(e)
        return paginated_response(request, countries, CountryReadSerializer)

    serializer = CountryCreateSerializer(data=request.data)
    if serializer.is_valid():
        try:
            country = CountryService.create(request.user, serializer.to_dto())
        except ValidationError as e:
            return validation_error_response(e)
        read_serializer = CountryReadSerializer(CountryService.get(country.pk))
        return Response(read_serializer.data, status=status.HTTP_201_CREATED)
    return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)


@api_view(['GET'])
def country_options(request):
    """
    Unpaginated countries for dropdowns, ordered by name.

    GET /api/v1/geo/countries/list
    """
    try:
        countries = CountryService.options(parse_filters(request.query_params))
    except ValidationError as e:
        return validation_error_response(e)
    return Response(CountryOptionSerializer(countries, many=True).data)


@api_view(['GET', 'PUT', 'PATCH', 'DELETE'])
@require_permission('geo_country')
def country_detail(request, pk):
    """
    Retrieve, update or delete a country.

    GET /api/v1/geo/countries/<pk>
    PUT/PATCH /api/v1/geo/countries/<pk>
    DELETE /api/v1/geo/countries/<pk>
    """
    country = get_object_or_404(Country, pk=pk)

    if request.method == 'GET':
        serializer = CountryShowSerializer(CountryService.get(country.pk))
        return Response(serializer.data, status=status.HTTP_200_OK)

    elif request.method in ['PUT', 'PATCH']:
        data = request.data.copy()
        data['country_id'] = country.id

        serializer = CountryUpdateSerializer(data=data)
        if serializer.is_valid():
            try:
                updated = CountryService.update(request.user, serializer.to_dto())
            except ValidationError as e:
                return validation_error_response(e)
            read_serializer = CountryReadSerializer(CountryService.get(updated.pk))
            return Response(read_serializer.data, status=status.HTTP_200_OK)
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        CountryService.delete(request.user, country.id)
    except ValidationError as e:
        return validation_error_response(e)
    return message_response('Country deleted successfully')
