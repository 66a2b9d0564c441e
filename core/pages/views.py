"""
Server-rendered admin pages.

Generic class-based views shared by every reference-data entity. The server
resolves filters, sort and pagination and hands the template ready-made
props; entity modules (``Geography.pages``, ``HR.departments.pages``)
subclass these and declare columns, filters and routes.

    ResourceListPage  table with filters, sort links, pagination, row actions
    ResourceShowPage  read-only fields, parent chain, children
    ResourceFormPage  create / edit form backed by the entity service
    ResourceDeletePage  POST-only delete, then redirect with a flash message
"""
import logging
from dataclasses import dataclass, field
from datetime import date, datetime

from django.contrib import messages
from django.contrib.auth.mixins import LoginRequiredMixin
from django.core.exceptions import PermissionDenied, ValidationError
from django.core.paginator import Paginator
from django.db import DatabaseError
from django.db.models import Model
from django.http import Http404, HttpResponseRedirect
from django.shortcuts import get_object_or_404
from django.urls import reverse
from django.utils import formats, timezone
from django.utils.http import url_has_allowed_host_and_scheme
from django.views import View
from django.views.generic import FormView, TemplateView

from core.base.paging import next_sort, page_meta, page_numbers, row_number, sort_direction
from core.base.query import filter_param, parse_list_query
from core.pages.querystring import activity_log_url, build_query
from core.permissions.services import permission_map, user_has_permission

logger = logging.getLogger(__name__)


@dataclass
class Column:
    """Table column: ``accessor`` is a dotted attribute path ('province.name')."""
    accessor: str
    label: str
    sortable: bool = False


@dataclass
class FilterField:
    """
    A filter[...] input on a list page.

    ``options`` is a callable returning ``[(value, label), ...]`` for dropdown
    filters; text inputs leave it None.
    """
    key: str
    label: str
    options: object = None
    placeholder: str = ''


@dataclass
class ParentLink:
    """One step of the parent chain on a detail page."""
    label: str
    accessor: str
    route: str


@dataclass
class ChildList:
    """Children section on a detail page."""
    title: str
    accessor: str
    route: str
    empty_message: str = field(default='')


def resolve(obj, accessor):
    """Follow a dotted attribute path, returning None on a missing link."""
    value = obj
    for part in accessor.split('.'):
        if value is None:
            return None
        value = getattr(value, part, None)
    return value


def display(value):
    if value is None or value == '':
        return '-'
    if isinstance(value, datetime):
        return formats.date_format(timezone.localtime(value), 'SHORT_DATETIME_FORMAT')
    if isinstance(value, date):
        return formats.date_format(value, 'SHORT_DATE_FORMAT')
    if isinstance(value, Model):
        return getattr(value, 'name', str(value))
    return value


class ResourcePageMixin(LoginRequiredMixin):
    """
    Shared configuration of the pages of one resource.

    Attributes:
        resource: permission prefix ('geo_city')
        route_prefix: namespaced route prefix ('geography:cities')
        service: service class with get/list/create/update/delete operations
        model: the Django model
        verbose_name / verbose_name_plural: display labels
        subject_type: activity-log subject ('geography.city')
        required_action: permission action the page needs, or None
    """
    resource = None
    route_prefix = None
    service = None
    model = None
    verbose_name = ''
    verbose_name_plural = ''
    subject_type = ''
    required_action = None

    def dispatch(self, request, *args, **kwargs):
        if not request.user.is_authenticated:
            return self.handle_no_permission()
        if self.required_action and not user_has_permission(
            request.user, f'{self.resource}:{self.required_action}'
        ):
            raise PermissionDenied(
                f"Permission denied. Required permission: '{self.resource}:{self.required_action}'"
            )
        return super().dispatch(request, *args, **kwargs)

    def route(self, name=None, *args):
        route_name = f'{self.route_prefix}.{name}' if name else self.route_prefix
        return reverse(route_name, args=args)

    def get_can(self):
        return permission_map(self.request.user, self.resource)

    def record_links(self, obj, can):
        """Row/record action urls, None where the user lacks the permission."""
        return {
            'show_url': self.route('show', obj.pk) if can['read'] else None,
            'edit_url': self.route('edit', obj.pk) if can['write'] else None,
            'delete_url': self.route('destroy', obj.pk) if can['delete'] else None,
            'activity_log_url': (
                activity_log_url(self.subject_type, obj.pk) if can['audit'] else None
            ),
        }

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.update({
            'verbose_name': self.verbose_name,
            'verbose_name_plural': self.verbose_name_plural,
            'list_url': self.route(),
            'can': self.get_can(),
        })
        return context


class ResourceListPage(ResourcePageMixin, TemplateView):
    """
    List page: filter form, sortable table, pagination and row actions.

    Query string: ``filter[key]=...&sort=-name&page=2&per_page=25``.
    A failing query renders a page-level error with a "Try Again" link.
    """
    template_name = 'pages/list.html'
    columns = []
    filters = []

    def get_queryset(self, query):
        return self.service.list_entities(query.filters, query.sort)

    def get_filter_fields(self, query):
        fields = []
        for filter_field in self.filters:
            options = None
            if filter_field.options is not None:
                options = [
                    {'value': str(value), 'label': label}
                    for value, label in filter_field.options()
                ]
            fields.append({
                'name': filter_param(filter_field.key),
                'key': filter_field.key,
                'label': filter_field.label,
                'value': query.filters.get(filter_field.key, ''),
                'options': options,
                'placeholder': filter_field.placeholder or f'Search by {filter_field.label.lower()}',
            })
        return fields

    def get_active_filters(self, query, filter_fields):
        params = self.request.GET
        active = []
        for filter_field in filter_fields:
            value = query.filters.get(filter_field['key'])
            if not value:
                continue
            shown = value
            for option in filter_field['options'] or []:
                if option['value'] == value:
                    shown = option['label']
            active.append({
                'label': filter_field['label'],
                'value': shown,
                'clear_url': build_query(params, {filter_field['name']: None}, drop=('page',)),
            })
        return active

    def get_sort_headers(self, query):
        params = self.request.GET
        headers = []
        for column in self.columns:
            header = {'label': column.label, 'sortable': column.sortable}
            if column.sortable:
                header['url'] = build_query(
                    params, {'sort': next_sort(query.sort, column.accessor)}, drop=('page',)
                )
                header['direction'] = sort_direction(query.sort, column.accessor)
            headers.append(header)
        return headers

    def get_pagination(self, meta):
        params = self.request.GET
        current = meta['current_page']
        last = meta['last_page']

        def page_url(number):
            return build_query(params, {'page': number})

        links = []
        for number in page_numbers(current, last):
            if number is None:
                links.append({'ellipsis': True})
            else:
                links.append({'number': number, 'url': page_url(number), 'current': number == current})
        return {
            'links': links,
            'prev_url': page_url(current - 1) if current > 1 else None,
            'next_url': page_url(current + 1) if current < last else None,
        }

    def get_rows(self, objects, meta, can):
        rows = []
        for index, obj in enumerate(objects):
            rows.append({
                'number': row_number(meta['current_page'], meta['per_page'], index),
                'cells': [display(resolve(obj, column.accessor)) for column in self.columns],
                'object': obj,
                **self.record_links(obj, can),
            })
        return rows

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        query = parse_list_query(self.request.GET)
        can = context['can']

        error = None
        objects = []
        total = 0
        current_page = 1
        try:
            paginator = Paginator(self.get_queryset(query), query.per_page)
            page = paginator.get_page(query.page)
            objects = list(page.object_list)
            total = paginator.count
            current_page = page.number
        except ValidationError as e:
            error = ' '.join(e.messages)
        except DatabaseError:
            logger.exception(f"Failed to load {self.verbose_name_plural.lower()}")
            error = f"Failed to load {self.verbose_name_plural.lower()}. Please try again."

        meta = page_meta(total, current_page, query.per_page)
        filter_fields = self.get_filter_fields(query)
        active_filters = self.get_active_filters(query, filter_fields)

        context.update({
            **meta,
            'data': objects,
            'rows': self.get_rows(objects, meta, can),
            'filters': query.filters,
            'sort': query.sort,
            'filter_fields': filter_fields,
            'active_filters': active_filters,
            'clear_filters_url': self.request.path,
            'headers': self.get_sort_headers(query),
            'pagination': self.get_pagination(meta),
            'error': error,
            'retry_url': self.request.get_full_path(),
            'create_url': self.route('create') if can['write'] else None,
        })
        return context


class ResourceShowPage(ResourcePageMixin, TemplateView):
    """Detail page: fields, parent chain links and children."""
    template_name = 'pages/show.html'
    required_action = 'read'
    fields = []
    parents = []
    children = None

    def get_object(self):
        try:
            return self.service.get(self.kwargs['pk'])
        except self.model.DoesNotExist:
            raise Http404(f'No {self.verbose_name.lower()} found')

    def get_children(self, obj):
        return getattr(obj, self.children.accessor).order_by('name', 'pk')

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        obj = self.get_object()
        can = context['can']

        parents = []
        for parent in self.parents:
            value = resolve(obj, parent.accessor)
            if value is not None:
                parents.append({
                    'label': parent.label,
                    'code': value.code,
                    'name': value.name,
                    'url': reverse(parent.route, args=[value.pk]),
                })

        children = None
        if self.children is not None:
            children = {
                'title': self.children.title,
                'empty_message': self.children.empty_message or f'No {self.children.title.lower()} yet.',
                'rows': [
                    {
                        'code': child.code,
                        'name': child.name,
                        'created_at': display(child.created_at),
                        'url': reverse(self.children.route, args=[child.pk]),
                    }
                    for child in self.get_children(obj)
                ],
            }

        context.update({
            'object': obj,
            'fields': [
                {'label': label, 'value': display(resolve(obj, accessor))}
                for label, accessor in self.fields
            ],
            'parents': parents,
            'children': children,
            **self.record_links(obj, can),
        })
        return context


class ResourceFormPage(ResourcePageMixin, FormView):
    """
    Create / edit page.

    The form only shapes input; the entity service performs the write, and
    its ValidationErrors are attached to the matching form fields.
    """
    template_name = 'pages/form.html'
    required_action = 'write'
    create_dto = None
    update_dto = None

    def get_instance(self):
        if 'pk' not in self.kwargs:
            return None
        if not hasattr(self, '_instance'):
            self._instance = get_object_or_404(self.model, pk=self.kwargs['pk'])
        return self._instance

    def get_form_kwargs(self):
        kwargs = super().get_form_kwargs()
        kwargs['instance'] = self.get_instance()
        return kwargs

    def dto_data(self, form):
        """Cleaned form data keyed the way the DTOs expect (FKs as ``<name>_id``)."""
        data = {}
        for name, value in form.cleaned_data.items():
            if isinstance(value, Model):
                data[f'{name}_id'] = value.pk
            elif name in form.fields and hasattr(form.fields[name], 'queryset'):
                data[f'{name}_id'] = None
            else:
                data[name] = value
        return data

    def build_dto(self, form):
        instance = self.get_instance()
        data = self.dto_data(form)
        if instance is None:
            return self.create_dto(**data)
        pk_field = f'{self.model._meta.model_name}_id'
        return self.update_dto(**{pk_field: instance.pk}, **data)

    def attach_errors(self, form, error):
        if not hasattr(error, 'error_dict'):
            form.add_error(None, error.messages)
            return
        for key, field_errors in error.message_dict.items():
            name = key[:-3] if key.endswith('_id') and key[:-3] in form.fields else key
            form.add_error(name if name in form.fields else None, field_errors)

    def form_valid(self, form):
        instance = self.get_instance()
        try:
            dto = self.build_dto(form)
            if instance is None:
                saved = self.service.create(self.request.user, dto)
            else:
                saved = self.service.update(self.request.user, dto)
        except ValidationError as e:
            self.attach_errors(form, e)
            return self.form_invalid(form)

        action = 'created' if instance is None else 'updated'
        messages.success(self.request, f'{self.verbose_name} {action} successfully')
        return HttpResponseRedirect(self.route('show', saved.pk))

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        instance = self.get_instance()
        context.update({
            'object': instance,
            'is_edit': instance is not None,
            'cancel_url': self.route('show', instance.pk) if instance is not None else self.route(),
        })
        return context


class ResourceDeletePage(ResourcePageMixin, View):
    """
    POST-only delete endpoint for the list and detail pages.

    Redirects to a same-host ``next`` url (falling back to the list) and
    reports the outcome through the messages framework.
    """
    required_action = 'delete'
    http_method_names = ['post']

    def perform_delete(self, obj):
        self.service.delete(self.request.user, obj.pk)

    def success_url(self):
        next_url = self.request.POST.get('next') or self.request.GET.get('next')
        if next_url and url_has_allowed_host_and_scheme(
            next_url,
            allowed_hosts={self.request.get_host()},
            require_https=self.request.is_secure(),
        ):
            return next_url
        return self.route()

    def post(self, request, *args, **kwargs):
        obj = get_object_or_404(self.model, pk=kwargs['pk'])
        try:
            self.perform_delete(obj)
        except ValidationError as e:
            messages.error(request, ' '.join(e.messages))
            return HttpResponseRedirect(self.success_url())
        messages.success(request, f'{self.verbose_name} deleted successfully')
        return HttpResponseRedirect(self.success_url())
