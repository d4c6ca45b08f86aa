"""
Practice schema entity models.

This module contains the HR/Commerce schema the practice problems are
written against. Table names match the ones used in the problem queries
(``Employees``, ``Orders``...), column names are snake_case.

The schema only ever lives in the practice sandbox; see
``adventureworks_lab.practice.sandbox``.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from sqlmodel import Field

from ..base import Base


class Department(Base, table=True):
    """Table: Departments"""

    __tablename__ = "Departments"

    department_id: int = Field(primary_key=True)
    name: str = Field(max_length=64, unique=True)
    location: str = Field(max_length=64)


class Employee(Base, table=True):
    """Employees with an optional department and an optional manager.

    Table: Employees
    """

    __tablename__ = "Employees"

    employee_id: int = Field(primary_key=True)
    first_name: str = Field(max_length=64)
    last_name: str = Field(max_length=64)
    email: str = Field(max_length=128)
    department_id: Optional[int] = Field(default=None, foreign_key="Departments.department_id", index=True)
    manager_id: Optional[int] = Field(default=None, foreign_key="Employees.employee_id", index=True)
    salary: int = Field()
    hire_date: date = Field()


class Customer(Base, table=True):
    """Table: Customers"""

    __tablename__ = "Customers"

    customer_id: int = Field(primary_key=True)
    name: str = Field(max_length=128)
    city: str = Field(max_length=64)
    signup_date: date = Field()


class Product(Base, table=True):
    """Table: Products"""

    __tablename__ = "Products"

    product_id: int = Field(primary_key=True)
    name: str = Field(max_length=128)
    category: str = Field(max_length=64)
    price: float = Field()


class Order(Base, table=True):
    """Orders. ``customer_id`` is NULL for guest checkouts.

    Table: Orders
    """

    __tablename__ = "Orders"

    order_id: int = Field(primary_key=True)
    customer_id: Optional[int] = Field(default=None, foreign_key="Customers.customer_id", index=True)
    order_date: date = Field(index=True)
    status: str = Field(max_length=16)


class OrderItem(Base, table=True):
    """Table: OrderItems"""

    __tablename__ = "OrderItems"

    order_item_id: int = Field(primary_key=True)
    order_id: int = Field(foreign_key="Orders.order_id", index=True)
    product_id: int = Field(foreign_key="Products.product_id", index=True)
    quantity: int = Field()
    unit_price: float = Field()


class Payment(Base, table=True):
    """Payments. An order may be paid in several installments, or not at all.

    Table: Payments
    """

    __tablename__ = "Payments"

    payment_id: int = Field(primary_key=True)
    order_id: int = Field(foreign_key="Orders.order_id", index=True)
    amount: float = Field()
    paid_at: date = Field()


class Project(Base, table=True):
    """Table: Projects"""

    __tablename__ = "Projects"

    project_id: int = Field(primary_key=True)
    name: str = Field(max_length=64)
    department_id: int = Field(foreign_key="Departments.department_id")
    budget: int = Field()


class EmployeeProject(Base, table=True):
    """Assignment of employees to projects.

    Table: EmployeeProjects
    """

    __tablename__ = "EmployeeProjects"

    employee_id: int = Field(foreign_key="Employees.employee_id", primary_key=True)
    project_id: int = Field(foreign_key="Projects.project_id", primary_key=True)
    role: str = Field(max_length=32)


PRACTICE_MODELS = (
    Department,
    Employee,
    Customer,
    Product,
    Order,
    OrderItem,
    Payment,
    Project,
    EmployeeProject,
)
