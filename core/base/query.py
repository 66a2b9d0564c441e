"""
Parsing of list-request query parameters.

List pages and list endpoints share one query-string vocabulary:

    ?filter[code]=JK&filter[province_id]=3&sort=-name&page=2&per_page=25
"""
import re
from dataclasses import dataclass, field

from django.conf import settings

FILTER_PARAM = re.compile(r'^filter\[(?P<key>[A-Za-z0-9_]+)\]$')


@dataclass
class ListQuery:
    """Filters, sort and pagination requested by a list page or endpoint"""
    filters: dict = field(default_factory=dict)
    sort: str = ''
    page: int = 1
    per_page: int = 15


def filter_param(key):
    """Query-string name of a filter key (``code`` -> ``filter[code]``)."""
    return f'filter[{key}]'


def parse_filters(query_params):
    """
    Collect ``filter[key]=value`` pairs, stripping whitespace and dropping
    empty values.
    """
    filters = {}
    for param in query_params.keys():
        match = FILTER_PARAM.match(param)
        if not match:
            continue
        value = (query_params.get(param) or '').strip()
        if value:
            filters[match.group('key')] = value
    return filters


def _positive_int(raw, default):
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    return value if value > 0 else default


def parse_list_query(query_params, default_sort=''):
    """
    Build a ListQuery from request query parameters.

    ``per_page`` falls back to REFDATA_PER_PAGE and is capped at
    REFDATA_MAX_PER_PAGE; ``page`` falls back to 1.
    """
    per_page = _positive_int(query_params.get('per_page'), settings.REFDATA_PER_PAGE)
    return ListQuery(
        filters=parse_filters(query_params),
        sort=query_params.get('sort', default_sort) or '',
        page=_positive_int(query_params.get('page'), 1),
        per_page=min(per_page, settings.REFDATA_MAX_PER_PAGE),
    )
