"""
Tests for the department pages and the department service.
"""
from django.contrib.messages import get_messages
from django.core.exceptions import ValidationError
from django.test import TestCase
from django.urls import reverse

from HR.departments.dtos import DepartmentUpdateDTO
from HR.departments.models import Department
from HR.departments.services import DepartmentService
from HR.departments.tests.utils import create_department
from core.base.models import StatusChoices
from core.base.test_utils import create_user, create_user_with_permissions


class DepartmentServiceTest(TestCase):

    def setUp(self):
        self.user = create_user()
        self.root = create_department('HO', 'Head Office')
        self.child = create_department('FIN', 'Finance', parent=self.root)

    def test_update_clear_parent(self):
        DepartmentService.update(self.user, DepartmentUpdateDTO(
            department_id=self.child.pk, clear_parent=True
        ))

        self.child.refresh_from_db()
        self.assertIsNone(self.child.parent)

    def test_update_cannot_parent_itself(self):
        with self.assertRaises(ValidationError) as ctx:
            DepartmentService.update(self.user, DepartmentUpdateDTO(
                department_id=self.root.pk, parent_id=self.root.pk
            ))

        self.assertIn('parent_id', ctx.exception.message_dict)

    def test_update_inactive_department(self):
        self.child.deactivate()

        with self.assertRaises(ValidationError) as ctx:
            DepartmentService.update(self.user, DepartmentUpdateDTO(
                department_id=self.child.pk, name='Renamed'
            ))

        self.assertEqual(ctx.exception.messages, [f"No active department found with ID '{self.child.pk}'"])

    def test_deactivate_logs_refusal(self):
        with self.assertLogs('HR.departments.services', level='WARNING'):
            with self.assertRaises(ValidationError):
                DepartmentService.deactivate(self.user, self.root.pk)

        self.root.refresh_from_db()
        self.assertTrue(self.root.is_active)

    def test_children_count_ignores_inactive(self):
        create_department('HR', 'Human Resources', parent=self.root).deactivate()

        self.assertEqual(DepartmentService.get(self.root.pk).children_count, 1)

    def test_reactivate(self):
        self.child.deactivate()
        self.child.reactivate()

        self.child.refresh_from_db()
        self.assertEqual(self.child.status, StatusChoices.ACTIVE)


class DepartmentPagesTest(TestCase):

    def setUp(self):
        self.user = create_user_with_permissions(
            'hr_admin', 'hr_department:read', 'hr_department:write', 'hr_department:delete'
        )
        self.client.force_login(self.user)
        self.root = create_department('HO', 'Head Office')
        self.child = create_department('FIN', 'Finance', parent=self.root)

    def test_list_page_status_badge(self):
        response = self.client.get(reverse('hr:departments'), {'filter[status]': 'active'})

        self.assertEqual(response.status_code, 200)
        badges = [(badge['label'], badge['value']) for badge in response.context['active_filters']]
        self.assertEqual(badges, [('Status', 'Active')])
        self.assertEqual(response.context['total'], 2)

    def test_show_page_lists_ancestors_root_first(self):
        payables = create_department('AP', 'Accounts Payable', parent=self.child)

        response = self.client.get(reverse('hr:departments.show', args=[payables.pk]))

        parents = [(parent['label'], parent['code']) for parent in response.context['parents']]
        self.assertEqual(parents, [('Ancestor', 'HO'), ('Parent', 'FIN')])

    def test_edit_without_parent_moves_to_top_level(self):
        response = self.client.post(reverse('hr:departments.edit', args=[self.child.pk]), {
            'code': 'FIN', 'name': 'Finance', 'parent': '', 'description': '',
        })

        self.assertRedirects(response, reverse('hr:departments.show', args=[self.child.pk]))
        self.child.refresh_from_db()
        self.assertIsNone(self.child.parent)

    def test_edit_form_excludes_self_from_parents(self):
        response = self.client.get(reverse('hr:departments.edit', args=[self.root.pk]))

        parents = response.context['form'].fields['parent'].queryset
        self.assertNotIn(self.root, parents)

    def test_delete_page_deactivates(self):
        response = self.client.post(reverse('hr:departments.destroy', args=[self.child.pk]))

        self.assertRedirects(response, reverse('hr:departments'))
        self.child.refresh_from_db()
        self.assertFalse(self.child.is_active)
        self.assertTrue(Department.objects.filter(pk=self.child.pk).exists())

    def test_delete_page_reports_refusal(self):
        response = self.client.post(reverse('hr:departments.destroy', args=[self.root.pk]))

        flashed = [str(message) for message in get_messages(response.wsgi_request)]
        self.assertEqual(
            flashed,
            ["Cannot delete department 'Head Office' because it has 1 active sub-departments."],
        )
