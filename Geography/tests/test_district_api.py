"""
API Tests for District endpoints.
"""
from django.test import TestCase
from rest_framework.test import APIClient
from rest_framework import status

from Geography.models import District
from Geography.tests.utils import (
    create_country, create_province, create_city, create_district, create_village,
)
from core.base.test_utils import create_user_with_permissions


class DistrictAPITest(TestCase):
    """Test District API endpoints."""

    def setUp(self):
        self.client = APIClient()
        self.user = create_user_with_permissions(
            'district_admin', 'geo_district:read', 'geo_district:write', 'geo_district:delete'
        )
        self.client.force_authenticate(user=self.user)
        self.country = create_country()
        self.province = create_province(self.country)
        self.city = create_city(self.province)

    def test_list_districts_with_parent_chain(self):
        district = create_district(self.city)
        create_village(district)

        response = self.client.get('/api/v1/geo/districts')

        row = response.json()['data'][0]
        self.assertEqual(row['city']['name'], 'Jakarta Pusat')
        self.assertEqual(row['city']['province']['name'], 'DKI Jakarta')
        self.assertEqual(row['city']['province']['country']['name'], 'Indonesia')
        self.assertEqual(row['villages_count'], 1)

    def test_filter_districts_by_province(self):
        other_province = create_province(self.country, code='32', name='Jawa Barat')
        other_city = create_city(other_province, code='32.01', name='Bogor')
        create_district(self.city)
        create_district(other_city, code='32.01.01', name='Cibinong')

        response = self.client.get(f'/api/v1/geo/districts?filter[province_id]={other_province.id}')

        self.assertEqual([row['name'] for row in response.json()['data']], ['Cibinong'])

    def test_filter_districts_by_city_name(self):
        create_district(self.city)

        response = self.client.get('/api/v1/geo/districts?filter[city_name]=bogor')

        self.assertEqual(response.json()['total'], 0)

    def test_create_district(self):
        response = self.client.post('/api/v1/geo/districts', {
            'city_id': self.city.id, 'code': '31.71.02', 'name': 'Sawah Besar'
        })

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.json()['city_id'], self.city.id)
        self.assertEqual(response.json()['villages_count'], 0)

    def test_create_district_with_invalid_city(self):
        response = self.client.post('/api/v1/geo/districts', {
            'city_id': 99999, 'code': '31.71.02', 'name': 'Sawah Besar'
        })

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('city_id', response.json()['errors'])

    def test_show_district_lists_villages(self):
        district = create_district(self.city)
        create_village(district, code='31.71.01.1002', name='Kebon Kelapa')
        create_village(district)

        response = self.client.get(f'/api/v1/geo/districts/{district.id}')

        names = [row['name'] for row in response.json()['villages']]
        self.assertEqual(names, ['Gambir', 'Kebon Kelapa'])

    def test_cannot_delete_district_with_villages(self):
        district = create_district(self.city)
        create_village(district)

        response = self.client.delete(f'/api/v1/geo/districts/{district.id}')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(
            response.json()['message'],
            'Cannot delete district. It has associated villages.',
        )
        self.assertTrue(District.objects.filter(pk=district.id).exists())

    def test_districts_by_city(self):
        district = create_district(self.city)

        response = self.client.get(f'/api/v1/geo/cities/{self.city.id}/districts')

        self.assertEqual(response.json(), [{'id': district.id, 'code': '31.71.01', 'name': 'Gambir'}])
