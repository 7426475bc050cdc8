from django.contrib import admin
from .models import Owner, Pet, PetType


class PetInline(admin.TabularInline):
    model = Pet
    extra = 0


@admin.register(Owner)
class OwnerAdmin(admin.ModelAdmin):
    list_display = ('last_name', 'first_name', 'city', 'telephone')
    search_fields = ('last_name', 'first_name', 'city')
    inlines = [PetInline]


@admin.register(Pet)
class PetAdmin(admin.ModelAdmin):
    list_display = ('name', 'type', 'birth_date', 'owner')
    search_fields = ('name', 'owner__last_name')
    list_filter = ('type',)


@admin.register(PetType)
class PetTypeAdmin(admin.ModelAdmin):
    list_display = ('name',)
