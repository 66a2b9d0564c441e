"""
Tests for the HTTP layer of the REST client.
"""
import unittest
from unittest import mock

import requests

from refdata_client.api import ApiError, ApiService


def fake_response(status_code, body=None, content=b'{}'):
    response = mock.Mock(status_code=status_code, content=content)
    if body is None:
        response.json.side_effect = ValueError('No JSON')
    else:
        response.json.return_value = body
    return response


class ApiServiceTest(unittest.TestCase):

    def setUp(self):
        self.session = mock.Mock()
        self.api = ApiService('http://testserver/api/v1/geo/', token='abc', session=self.session)

    def test_get_sends_bearer_token_and_params(self):
        self.session.request.return_value = fake_response(200, {'data': []})

        body = self.api.get('cities', params={'filter[code]': 'JK'})

        self.assertEqual(body, {'data': []})
        self.session.request.assert_called_once_with(
            'GET',
            'http://testserver/api/v1/geo/cities',
            params={'filter[code]': 'JK'},
            json=None,
            headers={'Accept': 'application/json', 'Authorization': 'Bearer abc'},
            timeout=10,
        )

    def test_anonymous_requests_have_no_authorization_header(self):
        api = ApiService('http://testserver/api/v1/geo', session=self.session)

        self.assertNotIn('Authorization', api.headers())
        self.assertFalse(api.is_authenticated)

    def test_empty_body_returns_none(self):
        self.session.request.return_value = fake_response(204, content=b'')

        self.assertIsNone(self.api.delete('cities/7'))

    def test_validation_error_is_raised_with_field_errors(self):
        self.session.request.return_value = fake_response(400, {
            'message': 'code: The code has already been taken.',
            'errors': {'code': ['The code has already been taken.']},
        })

        with self.assertRaises(ApiError) as ctx:
            self.api.post('cities', {'code': 'JK'})

        self.assertEqual(ctx.exception.status_code, 400)
        self.assertEqual(ctx.exception.errors, {'code': ['The code has already been taken.']})

    def test_detail_message_is_used_when_no_message(self):
        self.session.request.return_value = fake_response(401, {'detail': 'Token is invalid'})

        with self.assertRaises(ApiError) as ctx:
            self.api.get('cities/1')

        self.assertEqual(ctx.exception.message, 'Token is invalid')
        self.assertEqual(str(ctx.exception), '401: Token is invalid')

    def test_non_json_error_body(self):
        self.session.request.return_value = fake_response(502)

        with self.assertRaises(ApiError) as ctx:
            self.api.get('cities')

        self.assertEqual(ctx.exception.message, 'Request failed with status 502')
        self.assertEqual(ctx.exception.errors, {})

    def test_network_failure(self):
        self.session.request.side_effect = requests.ConnectionError('refused')

        with self.assertRaises(ApiError) as ctx:
            self.api.get('cities')

        self.assertIsNone(ctx.exception.status_code)
        self.assertTrue(ctx.exception.message.startswith('Network error'))


if __name__ == '__main__':
    unittest.main()
