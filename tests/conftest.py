"""
Shared fixtures.

The owner fixture mirrors the clinic's sample data: one owner with two pets,
"petty" and "doggy", registered in that order.
"""
from datetime import date

import pytest

from owners.models import Owner, Pet, PetType
from owners.repository import OwnerRepository


@pytest.fixture
def repository() -> OwnerRepository:
    return OwnerRepository()


@pytest.fixture
def hamster(db) -> PetType:
    pet_type, _ = PetType.objects.get_or_create(name='hamster')
    return pet_type


@pytest.fixture
def dog(db) -> PetType:
    pet_type, _ = PetType.objects.get_or_create(name='dog')
    return pet_type


@pytest.fixture
def owner(db, hamster, dog) -> Owner:
    owner = Owner.objects.create(
        first_name='George',
        last_name='Franklin',
        address='110 W. Liberty St.',
        city='Madison',
        telephone='6085551023',
    )
    Pet.objects.create(owner=owner, name='petty', type=hamster, birth_date=date(2010, 9, 7))
    Pet.objects.create(owner=owner, name='doggy', type=dog, birth_date=date(2012, 8, 6))
    return owner


@pytest.fixture
def petty(owner) -> Pet:
    return owner.pets.get(name='petty')


@pytest.fixture
def other_owner(db, dog) -> Owner:
    owner = Owner.objects.create(first_name='Betty', last_name='Davis', city='Sun Prairie')
    Pet.objects.create(owner=owner, name='Basil', type=dog)
    return owner
