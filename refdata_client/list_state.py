"""
Filter / sort / pagination state of a REST-driven list page.
"""
import logging

from core.base.paging import page_numbers, row_number

from .api import ApiError

logger = logging.getLogger(__name__)

DEFAULT_PER_PAGE = 15


class ApiListState:
    """
    One list endpoint plus the query the page is currently showing.

    Every mutator reloads from the API; filter, sort and page-size changes
    go back to page 1. Requests are synchronous and never cancelled, so
    with several callers the last response to arrive wins.

    Attributes:
        data, loading, error
        filters, sort, per_page
        current_page, total_pages, total, from_, to
    """

    def __init__(self, api, endpoint, initial_filters=None, initial_sort='',
                 per_page=DEFAULT_PER_PAGE, auto_load=True):
        self.api = api
        self.endpoint = endpoint
        self.filters = {k: v for k, v in (initial_filters or {}).items() if v not in (None, '')}
        self.sort = initial_sort or ''
        self.per_page = per_page

        self.data = []
        self.loading = False
        self.error = None
        self.current_page = 1
        self.total_pages = 1
        self.total = 0
        self.from_ = None
        self.to = None

        if auto_load:
            self.load()

    def params(self):
        params = {f'filter[{key}]': value for key, value in self.filters.items()}
        if self.sort:
            params['sort'] = self.sort
        params['page'] = self.current_page
        params['per_page'] = self.per_page
        return params

    def load(self):
        """Fetch the current page. Failures are kept in ``error``, not raised."""
        self.loading = True
        self.error = None
        try:
            body = self.api.get(self.endpoint, params=self.params())
        except ApiError as exc:
            logger.warning(f"Loading {self.endpoint} failed: {exc}")
            self.error = exc.message
            return False
        finally:
            self.loading = False

        body = body or {}
        self.data = body.get('data', [])
        self.current_page = body.get('current_page', self.current_page)
        self.total_pages = body.get('last_page', 1)
        self.per_page = body.get('per_page', self.per_page)
        self.total = body.get('total', len(self.data))
        self.from_ = body.get('from')
        self.to = body.get('to')
        return True

    def update_filter(self, key, value):
        self.update_filters({**self.filters, key: value})

    def update_filters(self, filters):
        """Replace all filters at once (empty values are dropped)."""
        self.filters = {k: v for k, v in filters.items() if v not in (None, '')}
        self.current_page = 1
        return self.load()

    def update_sort(self, sort):
        self.sort = sort or ''
        self.current_page = 1
        return self.load()

    def update_per_page(self, per_page):
        self.per_page = int(per_page)
        self.current_page = 1
        return self.load()

    def go_to_page(self, page):
        self.current_page = min(max(int(page), 1), max(self.total_pages, 1))
        return self.load()

    def refresh(self):
        return self.load()

    def clear_filters(self):
        return self.update_filters({})

    @property
    def page_numbers(self):
        return page_numbers(self.current_page, self.total_pages)

    def row_number(self, index):
        return row_number(self.current_page, self.per_page, index)
