"""
HR App - Main URL Configuration
This file routes URLs to the appropriate sub-apps within the HR module.
"""
from django.urls import path, include

app_name = 'hr_api'

urlpatterns = [
    # Department URLs
    path('', include('HR.departments.urls')),
]
