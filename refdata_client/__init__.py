"""
Python client for the reference-data REST API.

Holds the page logic of the REST-driven admin pages: list state with
filters/sort/pagination, debounced filter input, confirm-then-delete and
form submission with per-field errors.
"""
from .api import ApiError, ApiService
from .debounce import Debouncer
from .list_state import ApiListState
from .pages import DetailPageController, FormController, ListPageController

__all__ = [
    'ApiError',
    'ApiService',
    'Debouncer',
    'ApiListState',
    'ListPageController',
    'DetailPageController',
    'FormController',
]
