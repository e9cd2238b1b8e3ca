"""Random employee generator backed by Faker."""

from __future__ import annotations

import time

from faker import Faker

from employees_seed.core.models import FIRST_NAMES, LAST_NAMES, ROLES, Employee


class EmployeeGenerator:
    """
    Draw employee rows from the fixed name and role sets.

    Every field is chosen independently and uniformly, with replacement,
    using the Faker instance passed in. Seeding that instance makes the
    output reproducible.

    Example:
        >>> fake = Faker()
        >>> fake.seed_instance(1234)
        >>> gen = EmployeeGenerator(fake)
        >>> gen.generate().email.endswith("@techtech.com")
        True
    """

    def __init__(self, fake: Faker):
        self.fake = fake

    @classmethod
    def from_time(cls) -> EmployeeGenerator:
        """Generator seeded once from the current time."""
        fake = Faker()
        fake.seed_instance(time.time_ns())
        return cls(fake)

    def generate(self) -> Employee:
        firstname = self.fake.random_element(FIRST_NAMES)
        lastname = self.fake.random_element(LAST_NAMES)
        role = self.fake.random_element(ROLES)
        return Employee.create(firstname, lastname, role)

    def generate_batch(self, count: int) -> list[Employee]:
        """Generate count employees."""
        return [self.generate() for _ in range(count)]
