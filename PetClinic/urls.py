"""
URL configuration for PetClinic project.

The owner and pet pages live at the root (/owners/...); the admin site is
mounted under /admin/.
"""
from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls),
    path('', include('owners.urls')),
]
