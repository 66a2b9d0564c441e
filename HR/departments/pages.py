"""
Server-rendered pages for HR departments.
"""
from core.base.models import StatusChoices
from core.pages.views import (
    ChildList,
    Column,
    FilterField,
    ResourceDeletePage,
    ResourceFormPage,
    ResourceListPage,
    ResourceShowPage,
)
from HR.departments.dtos import DepartmentCreateDTO, DepartmentUpdateDTO
from HR.departments.forms import DepartmentForm
from HR.departments.models import Department
from HR.departments.services import DepartmentService


def parent_options():
    return [(row.pk, row.name) for row in DepartmentService.options()]


def status_options():
    return list(StatusChoices.choices)


class DepartmentPageMixin:
    resource = 'hr_department'
    route_prefix = 'hr:departments'
    service = DepartmentService
    model = Department
    verbose_name = 'Department'
    verbose_name_plural = 'Departments'
    subject_type = 'departments.department'


class DepartmentListPage(DepartmentPageMixin, ResourceListPage):
    columns = [
        Column('code', 'Code', sortable=True),
        Column('name', 'Name', sortable=True),
        Column('parent.name', 'Parent'),
        Column('children_count', 'Sub-departments'),
        Column('status', 'Status', sortable=True),
        Column('updated_by.username', 'Updated By'),
        Column('updated_at', 'Updated', sortable=True),
    ]
    filters = [
        FilterField('code', 'Code'),
        FilterField('name', 'Name'),
        FilterField('parent_id', 'Parent', options=parent_options),
        FilterField('status', 'Status', options=status_options),
    ]

    def get_queryset(self, query):
        return DepartmentService.list_departments(query.filters, query.sort)


class DepartmentShowPage(DepartmentPageMixin, ResourceShowPage):
    fields = [
        ('Code', 'code'),
        ('Name', 'name'),
        ('Description', 'description'),
        ('Status', 'status'),
        ('Created', 'created_at'),
        ('Updated', 'updated_at'),
        ('Updated By', 'updated_by.username'),
    ]
    children = ChildList('Sub-departments', 'children', 'hr:departments.show')

    def get_children(self, obj):
        return DepartmentService.children_of(obj)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        obj = context['object']
        # Ancestors, root first
        context['parents'] = [
            {
                'label': 'Parent' if index == 0 else 'Ancestor',
                'code': ancestor.code,
                'name': ancestor.name,
                'url': self.route('show', ancestor.pk),
            }
            for index, ancestor in enumerate(obj.ancestors())
        ][::-1]
        return context


class DepartmentFormPage(DepartmentPageMixin, ResourceFormPage):
    form_class = DepartmentForm
    create_dto = DepartmentCreateDTO
    update_dto = DepartmentUpdateDTO

    def build_dto(self, form):
        dto = super().build_dto(form)
        if self.get_instance() is not None and dto.parent_id is None:
            dto.clear_parent = True
        return dto


class DepartmentDeletePage(DepartmentPageMixin, ResourceDeletePage):
    def perform_delete(self, obj):
        DepartmentService.deactivate(self.request.user, obj.pk)
