# owners/repository.py
"""
Owner/pet store used by the pet form views.

Thin wrapper over the ORM so the views depend on four lookups instead of
querysets: find_by_id, find_pet_types, find_pet_type and save_pet.
"""
import logging

from django.db import transaction

from .models import Owner, PetType

logger = logging.getLogger(__name__)


class OwnerRepository:

    def find_by_id(self, owner_id: int) -> Owner | None:
        return Owner.objects.filter(pk=owner_id).first()

    def find_pet_types(self) -> list[PetType]:
        return list(PetType.objects.order_by('name'))

    def find_pet_type(self, name: str) -> PetType | None:
        for pet_type in self.find_pet_types():
            if pet_type.name == name:
                return pet_type
        return None

    @transaction.atomic
    def save_pet(self, owner: Owner, pet):
        pet.owner = owner
        pet.save()
        logger.info("Saved pet %s (id=%s) for owner %s", pet.name, pet.pk, owner.pk)
        return pet
