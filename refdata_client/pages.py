"""
Controllers for the REST-driven list, detail and form pages.

Controllers hold no UI; callers render from their attributes and forward
user actions to their methods. Confirmation and navigation are injected as
callables so a CLI, a GUI or a test can supply them.
"""
import logging
import threading

from core.base.paging import next_sort, sort_direction

from .api import ApiError
from .debounce import Debouncer
from .list_state import ApiListState, DEFAULT_PER_PAGE

logger = logging.getLogger(__name__)

FILTER_DEBOUNCE_SECONDS = 0.5


def always_confirm(message):
    return True


class ListPageController:
    """
    List page over ``endpoint`` (e.g. 'cities').

    Text filter inputs update ``inputs`` immediately and reach the list state
    after ``debounce_wait`` seconds without further typing. Dropdown filters
    apply at once. Parent dropdown options are loaded once from the parents'
    ``list`` endpoints, given as ``option_sources={'province_id': 'provinces'}``.
    """

    def __init__(self, api, endpoint, initial_filters=None, initial_sort='',
                 per_page=DEFAULT_PER_PAGE, option_sources=None, subject_type='',
                 activity_log_endpoint=None, confirm=always_confirm,
                 debounce_wait=FILTER_DEBOUNCE_SECONDS, timer_factory=threading.Timer,
                 auto_load=True):
        self.api = api
        self.endpoint = endpoint
        self.subject_type = subject_type
        self.activity_log_endpoint = activity_log_endpoint
        self.confirm = confirm
        self.option_sources = option_sources or {}
        self.options = {key: [] for key in self.option_sources}
        self.error = None

        self.state = ApiListState(
            api, endpoint,
            initial_filters=initial_filters,
            initial_sort=initial_sort,
            per_page=per_page,
            auto_load=auto_load,
        )
        self.inputs = dict(self.state.filters)
        self._debouncer = Debouncer(debounce_wait, self._apply_inputs, timer_factory=timer_factory)

        if auto_load:
            self.load_options()

    def load_options(self):
        """Populate parent dropdowns from their unpaginated list endpoints."""
        for key, source in self.option_sources.items():
            try:
                self.options[key] = self.api.get(f'{source}/list') or []
            except ApiError as exc:
                logger.warning(f"Loading {source} options failed: {exc}")
                self.options[key] = []

    def _apply_inputs(self):
        self.state.update_filters(dict(self.inputs))

    def set_filter_input(self, key, value):
        """Text input changed: show it now, query after the debounce wait."""
        self.inputs[key] = value
        self._debouncer()

    def select_filter(self, key, value):
        """Dropdown changed: apply it, with any pending text input, right away."""
        self.inputs[key] = value
        self._debouncer.cancel()
        self._apply_inputs()

    def clear_filters(self):
        self._debouncer.cancel()
        self.inputs = {}
        self.state.clear_filters()

    def flush(self):
        """Apply pending text input immediately (e.g. on Enter)."""
        return self._debouncer.flush()

    def handle_sort(self, field):
        """Column header clicked: unsorted -> field -> -field -> unsorted."""
        self.state.update_sort(next_sort(self.state.sort, field))

    def sort_direction(self, field):
        return sort_direction(self.state.sort, field)

    def handle_delete(self, item, confirm=None):
        """
        Ask for confirmation, DELETE the item, then reload the current page.

        Returns True when the item was deleted.
        """
        confirm = confirm or self.confirm
        label = item.get('name') or item.get('code') or item['id']
        if not confirm(f'Are you sure you want to delete {label}?'):
            return False
        self.error = None
        try:
            self.api.delete(f"{self.endpoint}/{item['id']}")
        except ApiError as exc:
            self.error = exc.message
            return False
        self.state.refresh()
        return True

    def activity_logs(self, item):
        """Activity entries for one row, newest first."""
        if not self.activity_log_endpoint:
            return []
        body = self.api.get(self.activity_log_endpoint, params={
            'filter[subject_type]': self.subject_type,
            'filter[subject_id]': item['id'],
            'sort': '-created_at',
        })
        if isinstance(body, dict):
            return body.get('data', [])
        return body or []

    def close(self):
        self._debouncer.cancel()


class DetailPageController:
    """Detail page for ``endpoint/pk``; ``navigate`` is called after a delete."""

    def __init__(self, api, endpoint, pk, navigate=None, confirm=always_confirm):
        self.api = api
        self.endpoint = endpoint
        self.pk = pk
        self.navigate = navigate
        self.confirm = confirm
        self.item = None
        self.loading = False
        self.error = None

    def load(self):
        self.loading = True
        self.error = None
        try:
            self.item = self.api.get(f'{self.endpoint}/{self.pk}')
        except ApiError as exc:
            self.error = exc.message
            return False
        finally:
            self.loading = False
        return True

    def delete(self, confirm=None):
        confirm = confirm or self.confirm
        name = (self.item or {}).get('name', self.pk)
        if not confirm(f'Are you sure you want to delete {name}?'):
            return False
        try:
            self.api.delete(f'{self.endpoint}/{self.pk}')
        except ApiError as exc:
            self.error = exc.message
            return False
        if self.navigate is not None:
            self.navigate(self.endpoint)
        return True


class FormController:
    """
    Create (``pk`` None) or edit form bound to ``endpoint``.

    Server validation errors land in ``errors`` (field -> messages) and
    ``error`` (the overall message).
    """

    def __init__(self, api, endpoint, pk=None, initial=None, navigate=None):
        self.api = api
        self.endpoint = endpoint
        self.pk = pk
        self.navigate = navigate
        self.data = dict(initial or {})
        self.errors = {}
        self.error = None
        self.processing = False

    @property
    def is_edit(self):
        return self.pk is not None

    def load(self, fields):
        """Prefill ``fields`` from the existing record (edit forms)."""
        item = self.api.get(f'{self.endpoint}/{self.pk}')
        self.data.update({field: item.get(field) for field in fields})
        return item

    def set(self, field, value):
        self.data[field] = value
        self.errors.pop(field, None)

    def submit(self):
        """Send the form. Returns the saved record, or None on failure."""
        self.processing = True
        self.errors = {}
        self.error = None
        try:
            if self.is_edit:
                result = self.api.put(f'{self.endpoint}/{self.pk}', self.data)
            else:
                result = self.api.post(self.endpoint, self.data)
        except ApiError as exc:
            self.errors = exc.errors
            self.error = exc.message
            return None
        finally:
            self.processing = False

        if self.navigate is not None:
            self.navigate(result)
        return result
