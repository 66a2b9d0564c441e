"""
HTTP access to the /api/v1 endpoints.
"""
import logging

import requests

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """
    A failed API call.

    Attributes:
        message: human readable message (the body's ``message`` when present)
        status_code: HTTP status, None for network failures
        errors: field -> list of messages for validation failures
    """

    def __init__(self, message, status_code=None, errors=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.errors = errors or {}

    @classmethod
    def from_response(cls, response):
        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}
        message = (
            body.get('message')
            or body.get('detail')
            or f'Request failed with status {response.status_code}'
        )
        return cls(message, status_code=response.status_code, errors=body.get('errors'))

    def __str__(self):
        if self.status_code:
            return f'{self.status_code}: {self.message}'
        return self.message


class ApiService:
    """
    Thin wrapper over ``requests.Session`` for one API root.

    Usage:
        api = ApiService('http://localhost:8000/api/v1/geo', token=access_token)
        page = api.get('cities', params={'filter[code]': 'JK', 'page': 2})
        api.delete('cities/7')

    Without a token the service only reaches the public endpoints.
    """

    def __init__(self, base_url, token=None, session=None, timeout=10):
        self.base_url = base_url.rstrip('/')
        self.token = token
        self.session = session or requests.Session()
        self.timeout = timeout

    @property
    def is_authenticated(self):
        return bool(self.token)

    def url(self, endpoint):
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    def headers(self):
        headers = {'Accept': 'application/json'}
        if self.token:
            headers['Authorization'] = f'Bearer {self.token}'
        return headers

    def request(self, method, endpoint, params=None, data=None):
        """
        Perform a request and return the decoded JSON body (None when empty).

        Raises:
            ApiError: on network failures and on 4xx/5xx responses
        """
        url = self.url(endpoint)
        try:
            response = self.session.request(
                method,
                url,
                params=params,
                json=data,
                headers=self.headers(),
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.warning(f"{method} {url} failed: {exc}")
            raise ApiError(f'Network error: {exc}') from exc

        if response.status_code >= 400:
            error = ApiError.from_response(response)
            logger.info(f"{method} {url} -> {response.status_code}: {error.message}")
            raise error

        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    def get(self, endpoint, params=None):
        return self.request('GET', endpoint, params=params)

    def post(self, endpoint, data=None):
        return self.request('POST', endpoint, data=data)

    def put(self, endpoint, data=None):
        return self.request('PUT', endpoint, data=data)

    def delete(self, endpoint):
        return self.request('DELETE', endpoint)
