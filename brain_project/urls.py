# brain_project/urls.py
"""
URL configuration for brain_project project.
"""
from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/v1/', include('apps.users.urls')),
    path('api/v1/', include('apps.content.urls')),
    path('api/v1/brain/', include('apps.sharing.urls')),
]
