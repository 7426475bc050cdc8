from django.db import models


class PetType(models.Model):
    name = models.CharField(max_length=80, unique=True)

    class Meta:
        ordering = ['name']

    def __str__(self):
        return self.name


class Owner(models.Model):
    first_name = models.CharField(max_length=30)
    last_name = models.CharField(max_length=30)
    address = models.CharField(max_length=255, blank=True)
    city = models.CharField(max_length=80, blank=True)
    telephone = models.CharField(max_length=10, blank=True)

    def get_pet(self, name, exclude=None):
        """
        Return the pet of this owner called `name` (compared case-insensitively),
        or None. `exclude` is a pet that never counts as a match, so an edited
        pet does not collide with its own stored name.
        """
        if not name:
            return None
        pets = self.pets.all()
        if exclude is not None and exclude.pk is not None:
            pets = pets.exclude(pk=exclude.pk)
        # casefold in Python; SQLite's LIKE and LOWER only fold ASCII
        wanted = name.casefold()
        for pet in pets:
            if pet.name.casefold() == wanted:
                return pet
        return None

    def __str__(self):
        return f"{self.first_name} {self.last_name}"


class Pet(models.Model):
    owner = models.ForeignKey(Owner, on_delete=models.CASCADE, related_name='pets')
    name = models.CharField(max_length=30)
    birth_date = models.DateField(null=True, blank=True)
    type = models.ForeignKey(PetType, on_delete=models.PROTECT, related_name='pets')

    class Meta:
        # insertion order
        ordering = ['id']

    def is_new(self):
        return self.pk is None

    def __str__(self):
        if self.type_id is None:
            return self.name
        return f"{self.name} ({self.type.name})"
