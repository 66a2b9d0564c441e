"""
Pagination and sort helpers shared by list pages, list endpoints and the
REST client.

Pure Python on purpose: ``refdata_client`` imports this module without a
configured Django project.
"""
import math

MAX_PAGE_BUTTONS = 7


def page_numbers(current_page, total_pages):
    """
    Page buttons to render for a paginator.

    Up to 7 pages are listed in full. Above that the first and last pages
    are always shown, plus a window of up to 3 pages around the current
    page; ``None`` marks an ellipsis wherever the window does not touch an
    end.

    Example:
        >>> page_numbers(6, 12)
        [1, None, 5, 6, 7, None, 12]
    """
    if total_pages <= 0:
        return []
    if total_pages <= MAX_PAGE_BUTTONS:
        return list(range(1, total_pages + 1))

    current_page = min(max(current_page, 1), total_pages)
    start = max(2, current_page - 1)
    end = min(total_pages - 1, current_page + 1)

    pages = [1]
    if start > 2:
        pages.append(None)
    pages.extend(range(start, end + 1))
    if end < total_pages - 1:
        pages.append(None)
    pages.append(total_pages)
    return pages


def page_meta(total, current_page, per_page):
    """
    Envelope fields describing one page of a collection.

    Returns a dict with ``current_page``, ``last_page``, ``per_page``,
    ``total``, ``from`` and ``to``; ``from``/``to`` are 1-based row
    positions and ``None`` when the page is empty.
    """
    last_page = max(1, math.ceil(total / per_page)) if per_page else 1
    first_row = (current_page - 1) * per_page + 1
    has_rows = total > 0 and first_row <= total
    return {
        'current_page': current_page,
        'last_page': last_page,
        'per_page': per_page,
        'total': total,
        'from': first_row if has_rows else None,
        'to': min(current_page * per_page, total) if has_rows else None,
    }


def row_number(current_page, per_page, index):
    """1-based position of the ``index``-th row of a page in the whole list."""
    return (current_page - 1) * per_page + index + 1


def next_sort(current_sort, field):
    """
    Sort value after clicking a column header.

    Cycles unsorted -> ``field`` -> ``-field`` -> unsorted ('').
    """
    if current_sort == field:
        return f'-{field}'
    if current_sort == f'-{field}':
        return ''
    return field


def sort_direction(current_sort, field):
    """'asc', 'desc' or None for the given column."""
    if current_sort == field:
        return 'asc'
    if current_sort == f'-{field}':
        return 'desc'
    return None
