"""
API Tests for Country endpoints.
"""
from django.test import TestCase
from rest_framework.test import APIClient
from rest_framework import status

from Geography.models import Country
from Geography.tests.utils import create_country, create_province
from core.base.test_utils import create_user, create_user_with_permissions


class CountryAPITest(TestCase):
    """Test Country API endpoints."""

    def setUp(self):
        self.client = APIClient()
        self.user = create_user_with_permissions(
            'country_admin', 'geo_country:read', 'geo_country:write', 'geo_country:delete'
        )

    def test_list_countries(self):
        """Test GET /api/v1/geo/countries"""
        country = create_country()
        create_province(country)
        create_country(code='MY', name='Malaysia', iso_code='MYS', phone_code='+60')

        response = self.client.get('/api/v1/geo/countries')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        body = response.json()
        self.assertEqual(body['total'], 2)
        indonesia = body['data'][0]
        self.assertEqual(indonesia['name'], 'Indonesia')
        self.assertEqual(indonesia['iso_code'], 'IDN')
        self.assertEqual(indonesia['phone_code'], '+62')
        self.assertEqual(indonesia['provinces_count'], 1)

    def test_filter_countries_by_iso_code(self):
        create_country()
        create_country(code='MY', name='Malaysia', iso_code='MYS', phone_code='+60')

        response = self.client.get('/api/v1/geo/countries?filter[iso_code]=mys')

        data = response.json()['data']
        self.assertEqual([row['code'] for row in data], ['MY'])

    def test_sort_countries_by_phone_code(self):
        create_country(code='MY', name='Malaysia', iso_code='MYS', phone_code='+60')
        create_country()

        response = self.client.get('/api/v1/geo/countries?sort=-phone_code')

        codes = [row['code'] for row in response.json()['data']]
        self.assertEqual(codes, ['ID', 'MY'])

    def test_per_page_is_capped(self):
        create_country()

        response = self.client.get('/api/v1/geo/countries?per_page=500')

        self.assertEqual(response.json()['per_page'], 100)

    def test_create_country(self):
        """Test POST /api/v1/geo/countries"""
        self.client.force_authenticate(user=self.user)

        response = self.client.post('/api/v1/geo/countries', {
            'code': 'SG', 'name': 'Singapore', 'iso_code': 'SGP', 'phone_code': '+65'
        })

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.json()['provinces_count'], 0)
        country = Country.objects.get(code='SG')
        self.assertEqual(country.iso_code, 'SGP')
        self.assertEqual(country.created_by, self.user)

    def test_create_country_without_optional_codes(self):
        self.client.force_authenticate(user=self.user)

        response = self.client.post('/api/v1/geo/countries', {'code': 'XX', 'name': 'Nowhere'})

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertIsNone(response.json()['iso_code'])

    def test_create_country_rejects_long_iso_code(self):
        self.client.force_authenticate(user=self.user)

        response = self.client.post('/api/v1/geo/countries', {
            'code': 'SG', 'name': 'Singapore', 'iso_code': 'SGPR'
        })

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('iso_code', response.json()['errors'])

    def test_create_country_rejects_taken_iso_code(self):
        self.client.force_authenticate(user=self.user)
        create_country()

        response = self.client.post('/api/v1/geo/countries', {
            'code': 'XI', 'name': 'Indonesia Copy', 'iso_code': 'IDN'
        })

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()['errors'], {'iso_code': ['The iso code has already been taken.']})

    def test_blank_iso_codes_do_not_collide(self):
        self.client.force_authenticate(user=self.user)

        for code in ('XA', 'XB'):
            response = self.client.post('/api/v1/geo/countries', {'code': code, 'name': code, 'iso_code': ''})
            self.assertEqual(response.status_code, status.HTTP_201_CREATED)

        self.assertEqual(Country.objects.filter(iso_code__isnull=True).count(), 2)

    def test_update_country_to_taken_iso_code(self):
        self.client.force_authenticate(user=self.user)
        create_country()
        malaysia = create_country(code='MY', name='Malaysia', iso_code='MYS')

        response = self.client.patch(f'/api/v1/geo/countries/{malaysia.id}', {'iso_code': 'IDN'})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('iso_code', response.json()['errors'])

    def test_superuser_bypasses_permission_checks(self):
        admin = create_user('root', is_superuser=True, is_staff=True)
        self.client.force_authenticate(user=admin)

        response = self.client.post('/api/v1/geo/countries', {'code': 'SG', 'name': 'Singapore'})

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)

    def test_show_country_with_provinces(self):
        country = create_country()
        create_province(country, code='32', name='Jawa Barat')
        create_province(country, code='31', name='DKI Jakarta')
        self.client.force_authenticate(user=self.user)

        response = self.client.get(f'/api/v1/geo/countries/{country.id}')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        names = [row['name'] for row in response.json()['provinces']]
        self.assertEqual(names, ['DKI Jakarta', 'Jawa Barat'])

    def test_update_country(self):
        country = create_country()
        self.client.force_authenticate(user=self.user)

        response = self.client.patch(f'/api/v1/geo/countries/{country.id}', {'phone_code': '+062'})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        country.refresh_from_db()
        self.assertEqual(country.phone_code, '+062')
        self.assertEqual(country.name, 'Indonesia')

    def test_delete_country(self):
        country = create_country()
        self.client.force_authenticate(user=self.user)

        response = self.client.delete(f'/api/v1/geo/countries/{country.id}')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json()['message'], 'Country deleted successfully')
        self.assertFalse(Country.objects.exists())

    def test_cannot_delete_country_with_provinces(self):
        country = create_country()
        create_province(country)
        self.client.force_authenticate(user=self.user)

        response = self.client.delete(f'/api/v1/geo/countries/{country.id}')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(
            response.json()['message'],
            'Cannot delete country. It has associated provinces.',
        )

    def test_countries_list_for_dropdown(self):
        create_country(code='MY', name='Malaysia', iso_code='MYS')
        create_country()

        response = self.client.get('/api/v1/geo/countries/list')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([row['code'] for row in response.json()], ['ID', 'MY'])

    def test_provinces_by_country(self):
        country = create_country()
        create_province(country)

        response = self.client.get(f'/api/v1/geo/countries/{country.id}/provinces')

        self.assertEqual(response.json(), [
            {'id': country.provinces.get().id, 'code': '31', 'name': 'DKI Jakarta'}
        ])
