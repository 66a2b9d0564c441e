"""
URL configuration for the HR departments API.
"""
from django.urls import path
from HR.departments import views

urlpatterns = [
    path('departments', views.department_list, name='department_list'),
    path('departments/list', views.department_options, name='department_options'),
    path('departments/<int:pk>', views.department_detail, name='department_detail'),
    path('departments/<int:pk>/children', views.department_children, name='department_children'),
]
