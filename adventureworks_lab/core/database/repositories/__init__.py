"""
Database repository layer using SQLModel.

Modules:
- base: AsyncReadRepository interface and AsyncQueryBuilder utilities
- employees: HumanResources.Employee read operations
- people: Person.Person read operations
"""

from .employees import EmployeeRepository
from .people import PersonRepository

__all__ = [
    "EmployeeRepository",
    "PersonRepository",
]
