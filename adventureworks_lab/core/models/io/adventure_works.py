"""
AdventureWorks I/O models for API responses.

These models define the JSON contract of the AdventureWorks controllers.
Employee rows are serialized with camelCase keys, the way the original
web framework serialized the entity; the person projection keeps its
explicit lowercase names.
"""

from __future__ import annotations

import uuid
from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class EmployeeRead(BaseModel):
    """Schema for reading an AdventureWorks employee row."""

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    business_entity_id: int
    national_id_number: str
    login_id: str
    organization_level: Optional[int] = None
    job_title: str
    birth_date: date
    marital_status: str
    gender: str
    hire_date: date
    salaried_flag: bool
    vacation_hours: int
    sick_leave_hours: int
    current_flag: bool
    rowguid: uuid.UUID
    modified_date: datetime


class PersonNameRead(BaseModel):
    """Schema for the first name / last name projection of a person."""

    model_config = ConfigDict(from_attributes=True)

    firstname: str = Field(description="Person.FirstName")
    lastname: str = Field(description="Person.LastName")
    employee_id: int = Field(description="Person.BusinessEntityID")
