"""Response schemas of the AdventureWorks controllers, kept apart from the mapped entities."""

from .adventure_works import EmployeeRead, PersonNameRead

__all__ = [
    "EmployeeRead",
    "PersonNameRead",
]
