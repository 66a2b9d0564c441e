"""
HR pages - URL Configuration
Mounted under /hr/.
"""
from django.urls import path, include

app_name = 'hr'

urlpatterns = [
    path('', include('HR.departments.page_urls')),
]
