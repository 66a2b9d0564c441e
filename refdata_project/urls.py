"""
URL configuration for refdata_project.

    /admin/                 Django admin
    /api/token/             JWT obtain / refresh
    /api/v1/geo/...         geography REST API
    /api/v1/hr/...          HR REST API
    /geography/...          server-rendered geography pages
    /hr/...                 server-rendered HR pages
"""
from django.contrib import admin
from django.urls import include, path
from django.views.generic import RedirectView
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

urlpatterns = [
    path('', RedirectView.as_view(pattern_name='geography:countries', permanent=False)),
    path('admin/', admin.site.urls),

    # Authentication
    path('api/token/', TokenObtainPairView.as_view(), name='token_obtain_pair'),
    path('api/token/refresh/', TokenRefreshView.as_view(), name='token_refresh'),

    # REST API
    path('api/v1/geo/', include('Geography.urls')),
    path('api/v1/hr/', include('HR.urls')),

    # Pages
    path('geography/', include('Geography.page_urls')),
    path('hr/', include('HR.page_urls')),
]
