"""
Declarative base of every mapped table.

Both the AdventureWorks tables and the practice schema share this
metadata; callers pick the tables they need when creating them (see
``utils.create_all``).
"""

from __future__ import annotations

from pydantic import ConfigDict
from sqlmodel import SQLModel


class Base(SQLModel):
    """Base class of the SQLModel entities."""

    model_config = ConfigDict(arbitrary_types_allowed=True)
