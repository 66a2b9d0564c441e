"""
API Tests for Province endpoints.
"""
from django.test import TestCase
from rest_framework.test import APIClient
from rest_framework import status

from Geography.models import Province
from Geography.tests.utils import create_country, create_province, create_city
from core.base.test_utils import create_user_with_permissions


class ProvinceAPITest(TestCase):
    """Test Province API endpoints."""

    def setUp(self):
        self.client = APIClient()
        self.user = create_user_with_permissions(
            'province_admin', 'geo_province:read', 'geo_province:write', 'geo_province:delete'
        )
        self.client.force_authenticate(user=self.user)
        self.country = create_country()

    def test_list_provinces_with_country(self):
        province = create_province(self.country)
        create_city(province)

        response = self.client.get('/api/v1/geo/provinces')

        row = response.json()['data'][0]
        self.assertEqual(row['country_id'], self.country.id)
        self.assertEqual(row['country'], {'id': self.country.id, 'code': 'ID', 'name': 'Indonesia'})
        self.assertEqual(row['cities_count'], 1)

    def test_filter_provinces_by_country_name(self):
        malaysia = create_country(code='MY', name='Malaysia', iso_code='MYS')
        create_province(self.country)
        create_province(malaysia, code='MY-01', name='Johor')

        response = self.client.get('/api/v1/geo/provinces?filter[country_name]=malay')

        data = response.json()['data']
        self.assertEqual([row['name'] for row in data], ['Johor'])

    def test_create_province(self):
        response = self.client.post('/api/v1/geo/provinces', {
            'country_id': self.country.id, 'code': '32', 'name': 'Jawa Barat'
        })

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.json()['country']['code'], 'ID')
        self.assertTrue(Province.objects.filter(code='32').exists())

    def test_create_province_with_missing_country(self):
        response = self.client.post('/api/v1/geo/provinces', {
            'country_id': 99999, 'code': '32', 'name': 'Jawa Barat'
        })

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(
            response.json()['errors']['country_id'],
            ['The selected country does not exist.'],
        )

    def test_same_code_in_another_country(self):
        malaysia = create_country(code='MY', name='Malaysia', iso_code='MYS')
        create_province(self.country, code='01', name='Aceh')

        response = self.client.post('/api/v1/geo/provinces', {
            'country_id': malaysia.id, 'code': '01', 'name': 'Johor'
        })

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(Province.objects.filter(code='01').count(), 2)

    def test_duplicate_code_in_the_same_country(self):
        create_province(self.country, code='01', name='Aceh')

        response = self.client.post('/api/v1/geo/provinces', {
            'country_id': self.country.id, 'code': '01', 'name': 'Sumatera Utara'
        })

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()['errors'], {'code': ['The code has already been taken.']})

    def test_show_province_lists_cities(self):
        province = create_province(self.country)
        create_city(province)

        response = self.client.get(f'/api/v1/geo/provinces/{province.id}')

        body = response.json()
        self.assertEqual(body['country']['name'], 'Indonesia')
        self.assertEqual([row['code'] for row in body['cities']], ['31.71'])

    def test_update_nonexistent_province_returns_404(self):
        response = self.client.put('/api/v1/geo/provinces/99999', {'name': 'Nowhere'})

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_cannot_delete_province_with_cities(self):
        province = create_province(self.country)
        create_city(province)

        response = self.client.delete(f'/api/v1/geo/provinces/{province.id}')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(
            response.json()['message'],
            'Cannot delete province. It has associated cities.',
        )

    def test_delete_province(self):
        province = create_province(self.country)

        response = self.client.delete(f'/api/v1/geo/provinces/{province.id}')

        self.assertEqual(response.json(), {'message': 'Province deleted successfully'})
