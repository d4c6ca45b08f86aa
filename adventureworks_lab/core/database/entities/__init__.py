"""
Database entity models.

Modules:
- adventure_works: the AdventureWorks2012 tables read by the demo controllers
  (``HumanResources.Employee``, ``Person.Person``)
- practice: the HR/Commerce schema used by the practice problems
"""

from . import adventure_works, practice

__all__ = [
    "adventure_works",
    "practice",
]
