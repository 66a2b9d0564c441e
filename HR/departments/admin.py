from django.contrib import admin
from .models import Department


@admin.register(Department)
class DepartmentAdmin(admin.ModelAdmin):
    list_display = ['code', 'name', 'parent', 'status', 'updated_at']
    list_filter = ['status']
    search_fields = ['code', 'name']
    readonly_fields = ['status', 'created_at', 'updated_at', 'created_by', 'updated_by']
    autocomplete_fields = ['parent']
    actions = ['reactivate_departments']

    def save_model(self, request, obj, form, change):
        obj.stamp(request.user, creating=not change)
        super().save_model(request, obj, form, change)

    @admin.action(description='Reactivate selected departments')
    def reactivate_departments(self, request, queryset):
        inactive = queryset.inactive()
        count = 0
        for department in inactive:
            department.stamp(request.user)
            department.reactivate()
            count += 1
        self.message_user(request, f'{count} department(s) reactivated.')
