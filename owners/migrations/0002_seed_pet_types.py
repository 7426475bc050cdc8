from django.db import migrations

PET_TYPES = ['cat', 'dog', 'lizard', 'snake', 'bird', 'hamster']


def add_pet_types(apps, schema_editor):
    PetType = apps.get_model('owners', 'PetType')
    for name in PET_TYPES:
        PetType.objects.get_or_create(name=name)


def remove_pet_types(apps, schema_editor):
    PetType = apps.get_model('owners', 'PetType')
    PetType.objects.filter(name__in=PET_TYPES, pets__isnull=True).delete()


class Migration(migrations.Migration):

    dependencies = [
        ('owners', '0001_initial'),
    ]

    operations = [
        migrations.RunPython(add_pet_types, remove_pet_types),
    ]
