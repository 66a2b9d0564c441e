"""
Pagination for Function-Based Views

Paginated responses use the list envelope the admin pages consume:
{
    "data": [...],
    "current_page": 2,
    "last_page": 7,
    "per_page": 15,
    "total": 98,
    "from": 16,
    "to": 30,
    "next_page_url": "http://testserver/api/v1/geo/cities?page=3",
    "prev_page_url": "http://testserver/api/v1/geo/cities?page=1"
}
"""
from django.conf import settings
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response

from core.base.paging import page_meta


class StandardResultsSetPagination(PageNumberPagination):
    """
    Standard pagination class for the project.

    Query Parameters:
    - page: Page number (default: 1)
    - per_page: Items per page (default: REFDATA_PER_PAGE, max: REFDATA_MAX_PER_PAGE)
    """
    page_size = settings.REFDATA_PER_PAGE
    page_size_query_param = 'per_page'
    max_page_size = settings.REFDATA_MAX_PER_PAGE

    def paginate_queryset(self, queryset, request, view=None):
        """
        Like DRF's, but a page that is not a number falls back to the first
        page and an out-of-range one to the last page, instead of a 404.
        """
        page_size = self.get_page_size(request)
        paginator = self.django_paginator_class(queryset, page_size)
        self.page = paginator.get_page(request.query_params.get(self.page_query_param))
        self.request = request
        return list(self.page)

    def get_paginated_response(self, data):
        """
        Override to wrap the page in the list envelope.
        """
        paginator = self.page.paginator
        meta = page_meta(paginator.count, self.page.number, paginator.per_page)
        return Response({
            'data': data,
            **meta,
            'next_page_url': self.get_next_link(),
            'prev_page_url': self.get_previous_link(),
        })


def paginated_response(request, queryset, serializer_class):
    """
    Paginate a queryset and serialize only the requested page.

    Usage:
        from refdata_project.pagination import paginated_response

        @api_view(['GET', 'POST'])
        def city_list(request):
            if request.method == 'GET':
                queryset = CityService.list_entities(filters, sort)
                return paginated_response(request, queryset, CityReadSerializer)

    Out-of-range pages are clamped, see
    StandardResultsSetPagination.paginate_queryset.
    """
    paginator = StandardResultsSetPagination()
    page = paginator.paginate_queryset(queryset, request)
    serializer = serializer_class(page, many=True)
    return paginator.get_paginated_response(serializer.data)
