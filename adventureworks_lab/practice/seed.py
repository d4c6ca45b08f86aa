"""Deterministic seed data for the practice schema.

The rows are small on purpose, but each one is there for a reason. Every
wrong attempt in the catalog has to be observably wrong on this data:

- two salary ties (120000 in Engineering, 70000 in Sales) separate
  ``DENSE_RANK`` from ``ROW_NUMBER``;
- ``Legal`` has no employees and ``Judy Moss`` has no department;
- order 8 is a guest checkout with a NULL ``customer_id`` (the ``NOT IN`` trap);
- ``Monitor`` is never ordered, ``Umbrella`` and ``Hooli`` never order;
- order 2 is paid in two installments, order 4 only partially;
- customer 1 orders on three consecutive days, pauses, and orders again.
"""

from __future__ import annotations

from datetime import date
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from adventureworks_lab.core.database.entities.practice import (
    Customer,
    Department,
    Employee,
    EmployeeProject,
    Order,
    OrderItem,
    Payment,
    Product,
    Project,
)


def build_seed_rows() -> List[SQLModel]:
    """Build the seed rows in dependency order."""
    departments = [
        Department(department_id=1, name="Engineering", location="Cairo"),
        Department(department_id=2, name="Sales", location="Alexandria"),
        Department(department_id=3, name="Marketing", location="Cairo"),
        Department(department_id=4, name="Legal", location="Giza"),
    ]
    employees = [
        Employee(employee_id=1, first_name="Alice", last_name="Smith", email="alice.smith@example.com",
                 department_id=1, manager_id=None, salary=150000, hire_date=date(2015, 3, 1)),
        Employee(employee_id=2, first_name="Bob", last_name="Jones", email="bob.jones@example.com",
                 department_id=1, manager_id=1, salary=120000, hire_date=date(2016, 6, 15)),
        Employee(employee_id=3, first_name="Carol", last_name="White", email="carol.white@example.com",
                 department_id=1, manager_id=2, salary=120000, hire_date=date(2018, 1, 10)),
        Employee(employee_id=4, first_name="Dan", last_name="Brown", email="dan.brown@example.com",
                 department_id=1, manager_id=2, salary=95000, hire_date=date(2019, 9, 1)),
        Employee(employee_id=5, first_name="Eve", last_name="Black", email="eve.black@example.com",
                 department_id=2, manager_id=1, salary=110000, hire_date=date(2017, 2, 20)),
        Employee(employee_id=6, first_name="Frank", last_name="Green", email="frank.green@example.com",
                 department_id=2, manager_id=5, salary=70000, hire_date=date(2020, 5, 5)),
        Employee(employee_id=7, first_name="Grace", last_name="Hall", email="grace.hall@example.com",
                 department_id=2, manager_id=5, salary=70000, hire_date=date(2021, 11, 11)),
        Employee(employee_id=8, first_name="Heidi", last_name="King", email="heidi.king@example.com",
                 department_id=3, manager_id=1, salary=85000, hire_date=date(2019, 4, 1)),
        Employee(employee_id=9, first_name="Ivan", last_name="Lee", email="ivan.lee@example.com",
                 department_id=3, manager_id=8, salary=60000, hire_date=date(2022, 8, 8)),
        Employee(employee_id=10, first_name="Judy", last_name="Moss", email="judy.moss@example.com",
                 department_id=None, manager_id=1, salary=50000, hire_date=date(2023, 1, 15)),
    ]
    customers = [
        Customer(customer_id=1, name="Acme Corp", city="Cairo", signup_date=date(2023, 5, 1)),
        Customer(customer_id=2, name="Globex", city="Alexandria", signup_date=date(2023, 6, 12)),
        Customer(customer_id=3, name="Initech", city="Cairo", signup_date=date(2023, 7, 20)),
        Customer(customer_id=4, name="Umbrella", city="Giza", signup_date=date(2023, 9, 3)),
        Customer(customer_id=5, name="Hooli", city="Cairo", signup_date=date(2023, 12, 24)),
    ]
    products = [
        Product(product_id=1, name="Laptop", category="Electronics", price=1200.0),
        Product(product_id=2, name="Mouse", category="Electronics", price=25.0),
        Product(product_id=3, name="Desk", category="Furniture", price=300.0),
        Product(product_id=4, name="Chair", category="Furniture", price=150.0),
        Product(product_id=5, name="Monitor", category="Electronics", price=400.0),
    ]
    orders = [
        Order(order_id=1, customer_id=1, order_date=date(2024, 1, 1), status="shipped"),
        Order(order_id=2, customer_id=1, order_date=date(2024, 1, 2), status="shipped"),
        Order(order_id=3, customer_id=1, order_date=date(2024, 1, 3), status="shipped"),
        Order(order_id=4, customer_id=1, order_date=date(2024, 1, 7), status="shipped"),
        Order(order_id=5, customer_id=2, order_date=date(2024, 1, 2), status="shipped"),
        Order(order_id=6, customer_id=2, order_date=date(2024, 1, 3), status="pending"),
        Order(order_id=7, customer_id=3, order_date=date(2024, 1, 5), status="cancelled"),
        Order(order_id=8, customer_id=None, order_date=date(2024, 1, 6), status="pending"),
    ]
    order_items = [
        OrderItem(order_item_id=1, order_id=1, product_id=1, quantity=1, unit_price=1200.0),
        OrderItem(order_item_id=2, order_id=1, product_id=2, quantity=2, unit_price=25.0),
        OrderItem(order_item_id=3, order_id=2, product_id=3, quantity=1, unit_price=300.0),
        OrderItem(order_item_id=4, order_id=3, product_id=2, quantity=1, unit_price=25.0),
        OrderItem(order_item_id=5, order_id=4, product_id=4, quantity=4, unit_price=150.0),
        OrderItem(order_item_id=6, order_id=5, product_id=1, quantity=2, unit_price=1200.0),
        OrderItem(order_item_id=7, order_id=6, product_id=4, quantity=1, unit_price=150.0),
        OrderItem(order_item_id=8, order_id=7, product_id=3, quantity=2, unit_price=300.0),
        OrderItem(order_item_id=9, order_id=8, product_id=2, quantity=3, unit_price=25.0),
    ]
    payments = [
        Payment(payment_id=1, order_id=1, amount=1250.0, paid_at=date(2024, 1, 1)),
        Payment(payment_id=2, order_id=2, amount=100.0, paid_at=date(2024, 1, 3)),
        Payment(payment_id=3, order_id=2, amount=200.0, paid_at=date(2024, 1, 4)),
        Payment(payment_id=4, order_id=4, amount=300.0, paid_at=date(2024, 1, 8)),
        Payment(payment_id=5, order_id=5, amount=2400.0, paid_at=date(2024, 1, 2)),
    ]
    projects = [
        Project(project_id=1, name="Apollo", department_id=1, budget=500000),
        Project(project_id=2, name="Hermes", department_id=2, budget=120000),
        Project(project_id=3, name="Zeus", department_id=1, budget=80000),
    ]
    employee_projects = [
        EmployeeProject(employee_id=2, project_id=1, role="Lead"),
        EmployeeProject(employee_id=3, project_id=1, role="Developer"),
        EmployeeProject(employee_id=4, project_id=1, role="Developer"),
        EmployeeProject(employee_id=4, project_id=3, role="Developer"),
        EmployeeProject(employee_id=5, project_id=2, role="Lead"),
        EmployeeProject(employee_id=6, project_id=2, role="Analyst"),
        EmployeeProject(employee_id=8, project_id=2, role="Designer"),
    ]
    return [
        *departments,
        *employees,
        *customers,
        *products,
        *orders,
        *order_items,
        *payments,
        *projects,
        *employee_projects,
    ]


async def seed(session: AsyncSession) -> int:
    """Insert the seed rows and commit.

    Returns:
        Number of rows inserted
    """
    rows = build_seed_rows()
    session.add_all(rows)
    await session.commit()
    return len(rows)
