from django.urls import path
from HR.departments import pages

urlpatterns = [
    path('departments', pages.DepartmentListPage.as_view(), name='departments'),
    path('departments/create', pages.DepartmentFormPage.as_view(), name='departments.create'),
    path('departments/<int:pk>', pages.DepartmentShowPage.as_view(), name='departments.show'),
    path('departments/<int:pk>/edit', pages.DepartmentFormPage.as_view(), name='departments.edit'),
    path('departments/<int:pk>/delete', pages.DepartmentDeletePage.as_view(), name='departments.destroy'),
]
