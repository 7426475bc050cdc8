import re

from django import forms
from django.core.exceptions import ValidationError
from django.utils import timezone

from .models import Pet, PetType
from .repository import OwnerRepository

# Field error codes rendered next to the inputs and asserted on by clients.
REQUIRED = 'required'
DUPLICATE = 'duplicate'
TYPE_MISMATCH = 'typeMismatch'
FUTURE_BIRTH_DATE = 'typeMismatch.birthDate'

# Form field -> name of the submitted parameter, where they differ.
PARAMETER_NAMES = {'birth_date': 'birthDate'}

ISO_DATE = re.compile(r'[0-9]{4}-[0-9]{2}-[0-9]{2}')


class IsoDateField(forms.DateField):
    """
    A date that must be submitted as yyyy-MM-dd. Anything unparseable is a
    type mismatch rather than Django's generic 'invalid'.
    """
    default_error_messages = {TYPE_MISMATCH: 'invalid date'}

    def __init__(self, **kwargs):
        kwargs.setdefault('input_formats', ['%Y-%m-%d'])
        kwargs.setdefault('widget', forms.DateInput(attrs={'type': 'date'}, format='%Y-%m-%d'))
        super().__init__(**kwargs)

    def to_python(self, value):
        if isinstance(value, str) and value and not ISO_DATE.fullmatch(value):
            raise ValidationError(self.error_messages[TYPE_MISMATCH], code=TYPE_MISMATCH)
        try:
            return super().to_python(value)
        except ValidationError as exc:
            raise ValidationError(self.error_messages[TYPE_MISMATCH], code=TYPE_MISMATCH) from exc


class PetTypeField(forms.Field):
    """Looks a submitted pet type name up among the types the store knows."""
    default_error_messages = {
        REQUIRED: 'is required',
        TYPE_MISMATCH: 'is not a known pet type',
    }

    def __init__(self, *, pet_types, **kwargs):
        self.pet_types = list(pet_types)
        kwargs.setdefault('widget', forms.Select(choices=[('', '---------')] + [(t.name, t.name) for t in self.pet_types]))
        super().__init__(**kwargs)

    def prepare_value(self, value):
        if isinstance(value, PetType):
            return value.name
        return value

    def to_python(self, value):
        if value in self.empty_values:
            return None
        name = str(value).strip()
        if not name:
            return None
        for pet_type in self.pet_types:
            if pet_type.name == name:
                return pet_type
        raise ValidationError(self.error_messages[TYPE_MISMATCH], code=TYPE_MISMATCH)


class PetForm(forms.ModelForm):
    birth_date = IsoDateField(required=False, label='Birth Date')

    class Meta:
        model = Pet
        fields = ['name', 'birth_date', 'type']
        error_messages = {
            'name': {REQUIRED: 'is required'},
        }

    def __init__(self, *args, owner, repository=None, **kwargs):
        self.owner = owner
        self.repository = repository or OwnerRepository()
        super().__init__(*args, **kwargs)
        if self.instance.owner_id is None:
            self.instance.owner = owner

        self.pet_types = self.repository.find_pet_types()
        # an edited pet keeps its type when none is submitted
        self.fields['type'] = PetTypeField(
            pet_types=self.pet_types,
            required=self.instance.is_new(),
            label='Type',
        )
        if self.instance.type_id is not None:
            self.initial['type'] = self.instance.type.name

    def add_prefix(self, field_name):
        return super().add_prefix(PARAMETER_NAMES.get(field_name, field_name))

    def clean_name(self):
        name = self.cleaned_data['name']
        if self.owner.get_pet(name, exclude=self.instance) is not None:
            raise ValidationError('is already in use', code=DUPLICATE)
        return name

    def clean_birth_date(self):
        birth_date = self.cleaned_data['birth_date']
        if birth_date is not None and birth_date > timezone.localdate():
            raise ValidationError('invalid date', code=FUTURE_BIRTH_DATE)
        return birth_date

    def clean_type(self):
        pet_type = self.cleaned_data['type']
        if pet_type is None and not self.instance.is_new():
            return self.instance.type
        return pet_type

    def error_codes(self):
        """Map each field with errors to the codes raised for it."""
        return {
            field: [error.code for error in errors]
            for field, errors in self.errors.as_data().items()
        }
