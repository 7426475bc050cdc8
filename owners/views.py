import logging

from django.contrib import messages
from django.http import Http404
from django.shortcuts import redirect, render
from django.views.decorators.http import require_http_methods, require_safe

from .forms import PetForm
from .repository import OwnerRepository

logger = logging.getLogger(__name__)

PET_FORM_TEMPLATE = 'pets/createOrUpdatePetForm.html'
OWNER_DETAILS_TEMPLATE = 'owners/ownerDetails.html'

repository = OwnerRepository()


def _get_owner(owner_id):
    owner = repository.find_by_id(owner_id)
    if owner is None:
        logger.warning("Owner %s not found", owner_id)
        raise Http404(f"Owner {owner_id} not found")
    return owner


def _get_pet(owner, pet_id):
    pet = owner.pets.filter(pk=pet_id).first()
    if pet is None:
        logger.warning("Pet %s not found for owner %s", pet_id, owner.pk)
        raise Http404(f"Pet {pet_id} not found")
    return pet


def _render_pet_form(request, owner, form):
    context = {
        'owner': owner,
        'pet': form.instance,
        'form': form,
        'types': form.pet_types,
    }
    return render(request, PET_FORM_TEMPLATE, context)


def _process_pet_form(request, owner, form, message):
    # Invalid submissions are re-rendered with a 200, never an error status.
    if not form.is_valid():
        logger.debug("Rejected pet form for owner %s: %s", owner.pk, form.error_codes())
        return _render_pet_form(request, owner, form)

    repository.save_pet(owner, form.save(commit=False))
    messages.success(request, message)
    return redirect('owners:detail', owner_id=owner.pk)


@require_safe
def owner_detail(request, owner_id):
    owner = _get_owner(owner_id)
    pets = owner.pets.select_related('type')
    return render(request, OWNER_DETAILS_TEMPLATE, {'owner': owner, 'pets': pets})


@require_http_methods(['GET', 'POST'])
def create_pet(request, owner_id):
    owner = _get_owner(owner_id)

    if request.method == 'POST':
        form = PetForm(request.POST, owner=owner, repository=repository)
        return _process_pet_form(request, owner, form, "New Pet has been Added")

    form = PetForm(owner=owner, repository=repository)
    return _render_pet_form(request, owner, form)


@require_http_methods(['GET', 'POST'])
def update_pet(request, owner_id, pet_id):
    owner = _get_owner(owner_id)
    pet = _get_pet(owner, pet_id)

    if request.method == 'POST':
        form = PetForm(request.POST, instance=pet, owner=owner, repository=repository)
        return _process_pet_form(request, owner, form, "Pet details has been edited")

    form = PetForm(instance=pet, owner=owner, repository=repository)
    return _render_pet_form(request, owner, form)
