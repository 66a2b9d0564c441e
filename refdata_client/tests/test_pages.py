"""
Tests for the list state and the page controllers of the REST client.
"""
import unittest
from unittest import mock

from refdata_client.api import ApiError
from refdata_client.debounce import Debouncer
from refdata_client.list_state import ApiListState
from refdata_client.pages import DetailPageController, FormController, ListPageController


class FakeTimer:
    """Stands in for threading.Timer; tests fire it by hand."""
    created = []

    def __init__(self, wait, fn, args=()):
        self.wait = wait
        self.fn = fn
        self.args = args
        self.daemon = False
        self.started = False
        self.cancelled = False
        FakeTimer.created.append(self)

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        self.fn(*self.args)


def page_body(data=(), current_page=1, last_page=1, per_page=15, total=None):
    data = list(data)
    return {
        'data': data,
        'current_page': current_page,
        'last_page': last_page,
        'per_page': per_page,
        'total': len(data) if total is None else total,
        'from': 1 if data else None,
        'to': len(data) or None,
    }


class DebouncerTest(unittest.TestCase):

    def setUp(self):
        FakeTimer.created = []
        self.calls = []
        self.debounced = Debouncer(0.5, self.calls.append, timer_factory=FakeTimer)

    def test_only_last_call_runs(self):
        self.debounced('J')
        self.debounced('JK')

        first, second = FakeTimer.created
        self.assertTrue(first.cancelled)
        first.fire()
        self.assertEqual(self.calls, [])

        second.fire()
        self.assertEqual(self.calls, ['JK'])
        self.assertEqual(second.wait, 0.5)
        self.assertTrue(second.daemon)

    def test_flush_runs_pending_call(self):
        self.debounced('JK')

        self.assertTrue(self.debounced.flush())
        self.assertEqual(self.calls, ['JK'])
        self.assertFalse(self.debounced.flush())

    def test_cancel_drops_pending_call(self):
        self.debounced('JK')
        self.debounced.cancel()

        FakeTimer.created[0].fire()
        self.assertEqual(self.calls, [])
        self.assertFalse(self.debounced.pending)


class ApiListStateTest(unittest.TestCase):

    def setUp(self):
        self.api = mock.Mock()
        self.api.get.return_value = page_body([{'id': 1}], current_page=1, last_page=4)

    def test_initial_load_uses_initial_query(self):
        ApiListState(self.api, 'cities', initial_filters={'code': 'JK', 'name': ''},
                     initial_sort='-name', per_page=25)

        self.api.get.assert_called_once_with('cities', params={
            'filter[code]': 'JK', 'sort': '-name', 'page': 1, 'per_page': 25,
        })

    def test_filter_change_returns_to_first_page(self):
        state = ApiListState(self.api, 'cities')
        state.current_page = 3

        state.update_filter('name', 'jak')

        self.assertEqual(state.current_page, 1)
        self.assertEqual(self.api.get.call_args[1]['params']['filter[name]'], 'jak')

    def test_go_to_page_is_clamped(self):
        state = ApiListState(self.api, 'cities')

        state.go_to_page(9)

        self.assertEqual(self.api.get.call_args[1]['params']['page'], 4)

    def test_error_is_kept(self):
        self.api.get.side_effect = ApiError('Network error: refused')

        state = ApiListState(self.api, 'cities')

        self.assertEqual(state.error, 'Network error: refused')
        self.assertFalse(state.loading)
        self.assertEqual(state.data, [])

    def test_row_numbers(self):
        self.api.get.return_value = page_body([{'id': 1}], current_page=3, last_page=4, per_page=10)

        state = ApiListState(self.api, 'cities')

        self.assertEqual(state.row_number(0), 21)
        self.assertEqual(state.page_numbers, [1, 2, 3, 4])


class ListPageControllerTest(unittest.TestCase):

    def setUp(self):
        FakeTimer.created = []
        self.api = mock.Mock()
        self.api.get.side_effect = self.fake_get
        self.get_calls = []

    def fake_get(self, endpoint, params=None):
        self.get_calls.append((endpoint, params))
        if endpoint == 'provinces/list':
            return [{'id': 3, 'code': '31', 'name': 'DKI Jakarta'}]
        return page_body([{'id': 7, 'code': '31.71', 'name': 'Jakarta Pusat'}])

    def make_controller(self, **kwargs):
        kwargs.setdefault('option_sources', {'province_id': 'provinces'})
        return ListPageController(self.api, 'cities', timer_factory=FakeTimer, **kwargs)

    def list_calls(self):
        return [params for endpoint, params in self.get_calls if endpoint == 'cities']

    def test_loads_list_and_options(self):
        controller = self.make_controller()

        self.assertEqual(len(self.list_calls()), 1)
        self.assertEqual(controller.options['province_id'][0]['name'], 'DKI Jakarta')

    def test_text_filter_waits_for_debounce(self):
        controller = self.make_controller()

        controller.set_filter_input('code', '3')
        controller.set_filter_input('code', '31')

        self.assertEqual(controller.inputs['code'], '31')
        self.assertEqual(len(self.list_calls()), 1)

        timer = FakeTimer.created[-1]
        self.assertEqual(timer.wait, 0.5)
        timer.fire()

        calls = self.list_calls()
        self.assertEqual(len(calls), 2)
        self.assertEqual(calls[-1]['filter[code]'], '31')

    def test_dropdown_filter_applies_immediately(self):
        controller = self.make_controller()
        controller.set_filter_input('name', 'jak')

        controller.select_filter('province_id', '3')

        calls = self.list_calls()
        self.assertEqual(len(calls), 2)
        self.assertEqual(calls[-1]['filter[province_id]'], '3')
        self.assertEqual(calls[-1]['filter[name]'], 'jak')
        # The pending text timer must not query again
        FakeTimer.created[-1].fire()
        self.assertEqual(len(self.list_calls()), 2)

    def test_sort_cycles(self):
        controller = self.make_controller()

        controller.handle_sort('name')
        self.assertEqual(controller.sort_direction('name'), 'asc')
        controller.handle_sort('name')
        self.assertEqual(controller.sort_direction('name'), 'desc')
        controller.handle_sort('name')
        self.assertIsNone(controller.sort_direction('name'))
        self.assertNotIn('sort', self.list_calls()[-1])

    def test_delete_after_confirm(self):
        controller = self.make_controller()
        prompts = []

        deleted = controller.handle_delete(
            {'id': 7, 'name': 'Jakarta Pusat'},
            confirm=lambda message: prompts.append(message) or True,
        )

        self.assertTrue(deleted)
        self.api.delete.assert_called_once_with('cities/7')
        self.assertEqual(prompts, ['Are you sure you want to delete Jakarta Pusat?'])
        self.assertEqual(len(self.list_calls()), 2)

    def test_deleting_only_row_of_last_page(self):
        rows = [{'id': pk, 'code': f'C{pk:02d}', 'name': f'City {pk:02d}'} for pk in range(1, 17)]

        def fake_get(endpoint, params=None):
            self.get_calls.append((endpoint, params))
            if endpoint != 'cities':
                return []
            last_page = max((len(rows) + 14) // 15, 1)
            page = min(params['page'], last_page)
            chunk = rows[(page - 1) * 15:page * 15]
            return page_body(chunk, current_page=page, last_page=last_page, total=len(rows))

        self.api.get.side_effect = fake_get
        self.api.delete.side_effect = lambda path: rows.pop()
        controller = self.make_controller()
        controller.state.go_to_page(2)
        self.assertEqual([row['id'] for row in controller.state.data], [16])

        deleted = controller.handle_delete(rows[-1], confirm=lambda message: True)

        self.assertTrue(deleted)
        self.api.delete.assert_called_once_with('cities/16')
        self.assertEqual(len(self.list_calls()), 3)
        self.assertIsNone(controller.state.error)
        self.assertEqual(controller.state.current_page, 1)
        self.assertEqual(controller.state.total_pages, 1)
        self.assertEqual(len(controller.state.data), 15)

    def test_delete_cancelled(self):
        controller = self.make_controller()

        deleted = controller.handle_delete({'id': 7, 'name': 'Jakarta Pusat'}, confirm=lambda message: False)

        self.assertFalse(deleted)
        self.api.delete.assert_not_called()
        self.assertEqual(len(self.list_calls()), 1)

    def test_refused_delete_keeps_error(self):
        self.api.delete.side_effect = ApiError(
            'Cannot delete city. It has associated districts.', status_code=400
        )
        controller = self.make_controller()

        self.assertFalse(controller.handle_delete({'id': 7, 'name': 'Jakarta Pusat'}))
        self.assertEqual(controller.error, 'Cannot delete city. It has associated districts.')

    def test_activity_logs(self):
        controller = self.make_controller(
            subject_type='geography.city', activity_log_endpoint='activity-logs'
        )

        controller.activity_logs({'id': 7})

        self.assertEqual(self.get_calls[-1], ('activity-logs', {
            'filter[subject_type]': 'geography.city',
            'filter[subject_id]': 7,
            'sort': '-created_at',
        }))


class DetailAndFormControllerTest(unittest.TestCase):

    def setUp(self):
        self.api = mock.Mock()
        self.navigated = []

    def test_detail_delete_navigates_back(self):
        self.api.get.return_value = {'id': 7, 'name': 'Jakarta Pusat'}
        controller = DetailPageController(self.api, 'cities', 7, navigate=self.navigated.append)

        self.assertTrue(controller.load())
        self.assertTrue(controller.delete())

        self.api.delete.assert_called_once_with('cities/7')
        self.assertEqual(self.navigated, ['cities'])

    def test_detail_load_error(self):
        self.api.get.side_effect = ApiError('Not found', status_code=404)
        controller = DetailPageController(self.api, 'cities', 99)

        self.assertFalse(controller.load())
        self.assertEqual(controller.error, 'Not found')

    def test_form_create(self):
        self.api.post.return_value = {'id': 9, 'code': '31.74'}
        form = FormController(self.api, 'cities', navigate=self.navigated.append)
        form.set('code', '31.74')

        result = form.submit()

        self.api.post.assert_called_once_with('cities', {'code': '31.74'})
        self.assertEqual(result['id'], 9)
        self.assertEqual(self.navigated, [result])
        self.assertFalse(form.processing)

    def test_form_keeps_field_errors(self):
        self.api.put.side_effect = ApiError(
            'code: The code has already been taken.',
            status_code=400,
            errors={'code': ['The code has already been taken.']},
        )
        form = FormController(self.api, 'cities', pk=7, initial={'code': '31.71'})

        self.assertIsNone(form.submit())
        self.assertTrue(form.is_edit)
        self.assertEqual(form.errors, {'code': ['The code has already been taken.']})

        form.set('code', '31.79')
        self.assertEqual(form.errors, {})


if __name__ == '__main__':
    unittest.main()
