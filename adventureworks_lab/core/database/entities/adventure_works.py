"""
AdventureWorks entity models.

This module maps the two AdventureWorks2012 tables read by the demo
controllers. The database is pre-existing; these classes describe it and
never drive DDL against it. Attribute names are snake_case while the
column names keep the database's PascalCase.

``HumanResources.Employee.OrganizationNode`` is a SQL Server ``hierarchyid``
and is not mapped.
"""

from __future__ import annotations

import uuid
from datetime import date, datetime
from typing import Optional

from sqlalchemy import Boolean, Column, Date, DateTime, Integer, SmallInteger, String, Uuid
from sqlmodel import Field

from ..base import Base
from ..utils import utc_now_naive


class Employee(Base, table=True):
    """Employee information.

    Table: HumanResources.Employee
    """

    __tablename__ = "Employee"
    __table_args__ = {"schema": "HumanResources"}

    business_entity_id: int = Field(sa_column=Column("BusinessEntityID", Integer, primary_key=True, autoincrement=False))
    national_id_number: str = Field(sa_column=Column("NationalIDNumber", String(15), nullable=False))
    login_id: str = Field(sa_column=Column("LoginID", String(256), nullable=False))
    organization_level: Optional[int] = Field(default=None, sa_column=Column("OrganizationLevel", SmallInteger))
    job_title: str = Field(sa_column=Column("JobTitle", String(50), nullable=False))
    birth_date: date = Field(sa_column=Column("BirthDate", Date, nullable=False))
    marital_status: str = Field(sa_column=Column("MaritalStatus", String(1), nullable=False))
    gender: str = Field(sa_column=Column("Gender", String(1), nullable=False))
    hire_date: date = Field(sa_column=Column("HireDate", Date, nullable=False))
    salaried_flag: bool = Field(default=True, sa_column=Column("SalariedFlag", Boolean, nullable=False))
    vacation_hours: int = Field(default=0, sa_column=Column("VacationHours", SmallInteger, nullable=False))
    sick_leave_hours: int = Field(default=0, sa_column=Column("SickLeaveHours", SmallInteger, nullable=False))
    current_flag: bool = Field(default=True, sa_column=Column("CurrentFlag", Boolean, nullable=False))
    rowguid: uuid.UUID = Field(default_factory=uuid.uuid4, sa_column=Column("rowguid", Uuid, nullable=False))
    modified_date: datetime = Field(
        default_factory=utc_now_naive, sa_column=Column("ModifiedDate", DateTime, nullable=False)
    )

    def __repr__(self) -> str:
        return f"Employee(business_entity_id={self.business_entity_id}, job_title={self.job_title!r})"


class Person(Base, table=True):
    """Human beings involved with AdventureWorks: employees, customer contacts and vendor contacts.

    Table: Person.Person
    """

    __tablename__ = "Person"
    __table_args__ = {"schema": "Person"}

    business_entity_id: int = Field(sa_column=Column("BusinessEntityID", Integer, primary_key=True, autoincrement=False))
    person_type: str = Field(sa_column=Column("PersonType", String(2), nullable=False))
    name_style: bool = Field(default=False, sa_column=Column("NameStyle", Boolean, nullable=False))
    title: Optional[str] = Field(default=None, sa_column=Column("Title", String(8)))
    first_name: str = Field(sa_column=Column("FirstName", String(50), nullable=False))
    middle_name: Optional[str] = Field(default=None, sa_column=Column("MiddleName", String(50)))
    last_name: str = Field(sa_column=Column("LastName", String(50), nullable=False))
    suffix: Optional[str] = Field(default=None, sa_column=Column("Suffix", String(10)))
    email_promotion: int = Field(default=0, sa_column=Column("EmailPromotion", Integer, nullable=False))
    rowguid: uuid.UUID = Field(default_factory=uuid.uuid4, sa_column=Column("rowguid", Uuid, nullable=False))
    modified_date: datetime = Field(
        default_factory=utc_now_naive, sa_column=Column("ModifiedDate", DateTime, nullable=False)
    )

    def __repr__(self) -> str:
        return f"Person(business_entity_id={self.business_entity_id}, last_name={self.last_name!r})"
