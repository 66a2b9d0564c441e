from django.core.exceptions import ValidationError
from django.http import QueryDict
from django.test import SimpleTestCase, TestCase, override_settings

from core.base.paging import next_sort, page_meta, page_numbers, row_number, sort_direction
from core.base.query import parse_filters, parse_list_query
from core.pages.querystring import activity_log_url, build_query
from Geography.models import City
from Geography.tests.utils import create_country, create_province, create_city


class PageNumbersTest(SimpleTestCase):

    def test_short_lists_show_every_page(self):
        self.assertEqual(page_numbers(1, 1), [1])
        self.assertEqual(page_numbers(4, 7), [1, 2, 3, 4, 5, 6, 7])

    def test_no_pages(self):
        self.assertEqual(page_numbers(1, 0), [])

    def test_window_in_the_middle(self):
        self.assertEqual(page_numbers(6, 12), [1, None, 5, 6, 7, None, 12])

    def test_window_near_the_ends(self):
        self.assertEqual(page_numbers(1, 12), [1, 2, None, 12])
        self.assertEqual(page_numbers(3, 12), [1, 2, 3, 4, None, 12])
        self.assertEqual(page_numbers(12, 12), [1, None, 11, 12])


class PageMetaTest(SimpleTestCase):

    def test_middle_page(self):
        self.assertEqual(page_meta(98, 2, 15), {
            'current_page': 2, 'last_page': 7, 'per_page': 15,
            'total': 98, 'from': 16, 'to': 30,
        })

    def test_empty_collection(self):
        meta = page_meta(0, 1, 15)

        self.assertEqual(meta['last_page'], 1)
        self.assertIsNone(meta['from'])
        self.assertIsNone(meta['to'])

    def test_row_number(self):
        self.assertEqual(row_number(3, 25, 0), 51)


class SortTest(SimpleTestCase):

    def test_next_sort_cycles(self):
        self.assertEqual(next_sort('', 'name'), 'name')
        self.assertEqual(next_sort('name', 'name'), '-name')
        self.assertEqual(next_sort('-name', 'name'), '')
        self.assertEqual(next_sort('-code', 'name'), 'name')

    def test_sort_direction(self):
        self.assertEqual(sort_direction('name', 'name'), 'asc')
        self.assertEqual(sort_direction('-name', 'name'), 'desc')
        self.assertIsNone(sort_direction('code', 'name'))


class ListQueryTest(SimpleTestCase):

    def test_parse_filters_drops_blank_values(self):
        params = QueryDict('filter[code]=%20JK%20&filter[name]=&page=2&filters=x')

        self.assertEqual(parse_filters(params), {'code': 'JK'})

    @override_settings(REFDATA_PER_PAGE=15, REFDATA_MAX_PER_PAGE=100)
    def test_parse_list_query(self):
        query = parse_list_query(QueryDict('sort=-name&page=abc&per_page=1000'))

        self.assertEqual(query.sort, '-name')
        self.assertEqual(query.page, 1)
        self.assertEqual(query.per_page, 100)

    def test_build_query(self):
        params = QueryDict('filter[code]=JK&page=3&sort=name')

        self.assertEqual(
            build_query(params, {'sort': '-name'}, drop=('page',)),
            '?filter%5Bcode%5D=JK&sort=-name',
        )
        self.assertEqual(build_query(QueryDict('page=2'), {'page': None}), '')

    @override_settings(ACTIVITY_LOG_URL='/api/activity-logs')
    def test_activity_log_url(self):
        self.assertEqual(
            activity_log_url('geography.city', 7),
            '/api/activity-logs?filter%5Bsubject_type%5D=geography.city'
            '&filter%5Bsubject_id%5D=7&sort=-created_at',
        )


class QuerySetHelpersTest(TestCase):

    def setUp(self):
        self.province = create_province(create_country())
        self.filter_map = {'name': 'name__icontains', 'province_id': 'province_id'}

    def test_apply_filters(self):
        city = create_city(self.province)
        create_city(self.province, code='31.72', name='Jakarta Utara')

        result = City.objects.apply_filters({'name': 'pusat'}, self.filter_map)

        self.assertEqual(list(result), [city])

    def test_apply_filters_rejects_unknown_keys(self):
        with self.assertRaises(ValidationError) as ctx:
            City.objects.apply_filters({'population': '1'}, self.filter_map)

        self.assertIn('population', ctx.exception.message_dict['filter'][0])

    def test_non_numeric_identifier_matches_nothing(self):
        create_city(self.province)

        self.assertFalse(City.objects.apply_filters({'province_id': 'x'}, self.filter_map).exists())

    def test_apply_sort_default_and_rejection(self):
        second = create_city(self.province, code='B', name='Bogor')
        first = create_city(self.province, code='A', name='Ambon')

        self.assertEqual(list(City.objects.apply_sort('', ('name',), default='name')), [first, second])
        with self.assertRaises(ValidationError):
            City.objects.apply_sort('population', ('name',))
