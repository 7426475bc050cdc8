# owners/urls.py
from django.urls import path
from . import views

app_name = 'owners'

urlpatterns = [
    path('owners/<int:owner_id>', views.owner_detail, name='detail'),
    path('owners/<int:owner_id>/pets/new', views.create_pet, name='create_pet'),
    path('owners/<int:owner_id>/pets/<int:pet_id>/edit', views.update_pet, name='update_pet'),
]
