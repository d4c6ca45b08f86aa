"""The practice problems.

Each problem has a ✅ solution and a list of other attempts: alternative
correct queries and ❌ wrong ones, each with the note explaining what is
going on. Queries target the practice schema (see
``adventureworks_lab.core.database.entities.practice``) and are written in
the SQL dialect of the practice sandbox (SQLite).
"""

from __future__ import annotations

from typing import Tuple

from .models import Attempt, Mistake, Problem, Topic, Verdict

TOP_SALARIES_PER_DEPARTMENT = Problem(
    slug="top-salaries-per-department",
    title="Top two salaries per department",
    topic=Topic.window_functions,
    prompt=(
        "List the employees earning one of the two highest distinct salaries of their department. "
        "Employees sharing a salary must all be listed. Employees without a department are ignored."
    ),
    tables=("Employees", "Departments"),
    solution=Attempt(
        verdict=Verdict.done,
        sql="""
WITH ranked AS (
    SELECT d.name AS department, e.first_name, e.last_name, e.salary,
           DENSE_RANK() OVER (PARTITION BY e.department_id ORDER BY e.salary DESC) AS salary_rank
    FROM Employees AS e
    JOIN Departments AS d ON d.department_id = e.department_id
)
SELECT department, first_name, last_name, salary
FROM ranked
WHERE salary_rank <= 2
ORDER BY department, salary DESC, last_name
""",
        commentary="DENSE_RANK gives tied salaries the same rank and leaves no gap, so ties are kept.",
    ),
    attempts=(
        Attempt(
            verdict=Verdict.wrong,
            mistake=Mistake.error,
            error_contains="misuse of window function",
            sql="""
SELECT first_name, last_name, salary
FROM Employees
WHERE DENSE_RANK() OVER (PARTITION BY department_id ORDER BY salary DESC) <= 2
""",
            commentary=(
                "Window functions are evaluated after WHERE, so they cannot be filtered on directly. "
                "Rank in a CTE or derived table and filter outside it."
            ),
        ),
        Attempt(
            verdict=Verdict.wrong,
            mistake=Mistake.wrong_result,
            sql="""
WITH ranked AS (
    SELECT d.name AS department, e.first_name, e.last_name, e.salary,
           ROW_NUMBER() OVER (PARTITION BY e.department_id ORDER BY e.salary DESC) AS salary_rank
    FROM Employees AS e
    JOIN Departments AS d ON d.department_id = e.department_id
)
SELECT department, first_name, last_name, salary
FROM ranked
WHERE salary_rank <= 2
ORDER BY department, salary DESC, last_name
""",
            commentary="ROW_NUMBER breaks ties arbitrarily: one of the two 120000 engineers disappears.",
        ),
    ),
)

THIRD_HIGHEST_SALARY = Problem(
    slug="third-highest-salary",
    title="Third highest distinct salary",
    topic=Topic.window_functions,
    prompt="Return the third highest distinct salary in the company.",
    tables=("Employees",),
    solution=Attempt(
        verdict=Verdict.done,
        sql="""
SELECT DISTINCT salary
FROM (
    SELECT salary, DENSE_RANK() OVER (ORDER BY salary DESC) AS salary_rank
    FROM Employees
) AS ranked
WHERE salary_rank = 3
""",
        commentary="Rank distinct salaries, then pick rank 3.",
    ),
    attempts=(
        Attempt(
            verdict=Verdict.done,
            sql="""
SELECT MAX(salary)
FROM Employees
WHERE salary < (SELECT MAX(salary) FROM Employees WHERE salary < (SELECT MAX(salary) FROM Employees))
""",
            commentary="Nested MAX works too, but it does not generalize to the Nth salary.",
        ),
        Attempt(
            verdict=Verdict.wrong,
            mistake=Mistake.wrong_result,
            sql="""
SELECT salary
FROM Employees
ORDER BY salary DESC
LIMIT 1 OFFSET 2
""",
            commentary="OFFSET counts rows, not distinct values: the 120000 tie is counted twice.",
        ),
    ),
)

CUSTOMERS_WITHOUT_ORDERS = Problem(
    slug="customers-without-orders",
    title="Customers who never ordered",
    topic=Topic.anti_join,
    prompt="List the customers that have never placed an order.",
    tables=("Customers", "Orders"),
    solution=Attempt(
        verdict=Verdict.done,
        sql="""
SELECT c.customer_id, c.name
FROM Customers AS c
WHERE NOT EXISTS (SELECT 1 FROM Orders AS o WHERE o.customer_id = c.customer_id)
ORDER BY c.customer_id
""",
        commentary="NOT EXISTS is the safest anti-join: NULLs in Orders.customer_id cannot affect it.",
    ),
    attempts=(
        Attempt(
            verdict=Verdict.done,
            sql="""
SELECT c.customer_id, c.name
FROM Customers AS c
LEFT JOIN Orders AS o ON o.customer_id = c.customer_id
WHERE o.order_id IS NULL
ORDER BY c.customer_id
""",
            commentary="LEFT JOIN and keep the rows where the right side did not match.",
        ),
        Attempt(
            verdict=Verdict.wrong,
            mistake=Mistake.wrong_result,
            sql="""
SELECT c.customer_id, c.name
FROM Customers AS c
WHERE c.customer_id NOT IN (SELECT o.customer_id FROM Orders AS o)
ORDER BY c.customer_id
""",
            commentary=(
                "The guest order has a NULL customer_id. x NOT IN (..., NULL) is never true, "
                "so the query returns nothing."
            ),
        ),
    ),
)

PRODUCTS_NEVER_ORDERED = Problem(
    slug="products-never-ordered",
    title="Products never ordered",
    topic=Topic.anti_join,
    prompt="List the products that appear on no order line.",
    tables=("Products", "OrderItems"),
    solution=Attempt(
        verdict=Verdict.done,
        sql="""
SELECT p.product_id, p.name
FROM Products AS p
LEFT JOIN OrderItems AS oi ON oi.product_id = p.product_id
WHERE oi.order_item_id IS NULL
ORDER BY p.product_id
""",
        commentary="The IS NULL test belongs in WHERE, after the outer join has produced its NULL rows.",
    ),
    attempts=(
        Attempt(
            verdict=Verdict.wrong,
            mistake=Mistake.wrong_result,
            sql="""
SELECT DISTINCT p.product_id, p.name
FROM Products AS p
LEFT JOIN OrderItems AS oi ON oi.product_id = p.product_id AND oi.order_item_id IS NULL
ORDER BY p.product_id
""",
            commentary="In the ON clause the test only restricts what may match; every product survives the LEFT JOIN.",
        ),
    ),
)

EMPLOYEES_WITHOUT_PROJECTS = Problem(
    slug="employees-without-projects",
    title="Employees assigned to no project",
    topic=Topic.anti_join,
    prompt="Return the ids of employees that are not assigned to any project.",
    tables=("Employees", "EmployeeProjects"),
    solution=Attempt(
        verdict=Verdict.done,
        sql="""
SELECT employee_id FROM Employees
EXCEPT
SELECT employee_id FROM EmployeeProjects
ORDER BY employee_id
""",
        commentary="EXCEPT is a set difference and removes duplicates on the way.",
    ),
    attempts=(
        Attempt(
            verdict=Verdict.wrong,
            mistake=Mistake.wrong_result,
            sql="""
SELECT e.employee_id
FROM Employees AS e
JOIN EmployeeProjects AS ep ON ep.employee_id = e.employee_id
WHERE ep.project_id IS NULL
ORDER BY e.employee_id
""",
            commentary="An INNER JOIN only keeps matched rows, so project_id is never NULL here. It must be a LEFT JOIN.",
        ),
    ),
)

REPORTING_CHAIN = Problem(
    slug="reporting-chain",
    title="Everyone reporting to the CEO",
    topic=Topic.recursive_cte,
    prompt=(
        "Starting from employee 1, list every employee in the reporting chain below her "
        "with their depth (0 for employee 1 herself)."
    ),
    tables=("Employees",),
    solution=Attempt(
        verdict=Verdict.done,
        sql="""
WITH RECURSIVE chain AS (
    SELECT employee_id, first_name, 0 AS depth
    FROM Employees
    WHERE employee_id = 1
    UNION ALL
    SELECT e.employee_id, e.first_name, c.depth + 1
    FROM Employees AS e
    JOIN chain AS c ON e.manager_id = c.employee_id
)
SELECT employee_id, first_name, depth
FROM chain
ORDER BY depth, employee_id
""",
        commentary="Anchor member selects the root, the recursive member walks one level down per iteration.",
    ),
    attempts=(
        Attempt(
            verdict=Verdict.wrong,
            mistake=Mistake.wrong_result,
            sql="""
SELECT employee_id, first_name, 0 AS depth FROM Employees WHERE employee_id = 1
UNION ALL
SELECT e.employee_id, e.first_name, 1 AS depth
FROM Employees AS e
JOIN Employees AS m ON e.manager_id = m.employee_id
WHERE m.employee_id = 1
ORDER BY depth, employee_id
""",
            commentary="A self join only reaches one level; the depth of the tree is not known in advance.",
        ),
    ),
)

ORDER_STREAKS = Problem(
    slug="order-streaks",
    title="Consecutive ordering days",
    topic=Topic.gaps_and_islands,
    prompt=(
        "For each customer, find the streaks of consecutive days with orders: "
        "first day, last day and number of days. Guest orders are ignored."
    ),
    tables=("Orders",),
    solution=Attempt(
        verdict=Verdict.done,
        sql="""
WITH numbered AS (
    SELECT customer_id, order_date,
           julianday(order_date)
             - ROW_NUMBER() OVER (PARTITION BY customer_id ORDER BY order_date) AS island
    FROM Orders
    WHERE customer_id IS NOT NULL
)
SELECT customer_id, MIN(order_date) AS streak_start, MAX(order_date) AS streak_end, COUNT(*) AS days
FROM numbered
GROUP BY customer_id, island
ORDER BY customer_id, streak_start
""",
        commentary=(
            "Dates and row numbers both grow by one inside a streak, so their difference is constant "
            "per streak and can be grouped on."
        ),
    ),
    attempts=(
        Attempt(
            verdict=Verdict.wrong,
            mistake=Mistake.wrong_result,
            sql="""
WITH numbered AS (
    SELECT customer_id, order_date,
           julianday(order_date) - ROW_NUMBER() OVER (ORDER BY order_date) AS island
    FROM Orders
    WHERE customer_id IS NOT NULL
)
SELECT customer_id, MIN(order_date) AS streak_start, MAX(order_date) AS streak_end, COUNT(*) AS days
FROM numbered
GROUP BY customer_id, island
ORDER BY customer_id, streak_start
""",
            commentary=(
                "Without PARTITION BY the numbering runs across all customers, other customers' orders "
                "shift the difference and streaks get merged or split."
            ),
        ),
    ),
)

ABOVE_DEPARTMENT_AVERAGE = Problem(
    slug="above-department-average",
    title="Earning above the department average",
    topic=Topic.subqueries,
    prompt="List employees whose salary is above the average salary of their own department.",
    tables=("Employees",),
    solution=Attempt(
        verdict=Verdict.done,
        sql="""
SELECT e.employee_id, e.first_name, e.salary
FROM Employees AS e
WHERE e.salary > (
    SELECT AVG(e2.salary) FROM Employees AS e2 WHERE e2.department_id = e.department_id
)
ORDER BY e.employee_id
""",
        commentary="A correlated subquery computes the average of the outer row's department.",
    ),
    attempts=(
        Attempt(
            verdict=Verdict.done,
            sql="""
WITH averages AS (
    SELECT department_id, AVG(salary) AS avg_salary FROM Employees GROUP BY department_id
)
SELECT e.employee_id, e.first_name, e.salary
FROM Employees AS e
JOIN averages AS a ON a.department_id = e.department_id
WHERE e.salary > a.avg_salary
ORDER BY e.employee_id
""",
            commentary="Same result with the averages computed once and joined back.",
        ),
        Attempt(
            verdict=Verdict.wrong,
            mistake=Mistake.error,
            error_contains="misuse of aggregate",
            sql="""
SELECT employee_id, first_name, salary
FROM Employees
WHERE salary > AVG(salary)
GROUP BY department_id
""",
            commentary="Aggregates are not allowed in WHERE, which runs before grouping.",
        ),
        Attempt(
            verdict=Verdict.wrong,
            mistake=Mistake.wrong_result,
            sql="""
SELECT employee_id, first_name, salary
FROM Employees
WHERE salary > (SELECT AVG(salary) FROM Employees)
ORDER BY employee_id
""",
            commentary="This compares with the company-wide average, not the department's.",
        ),
    ),
)

DEPARTMENT_HEADCOUNT = Problem(
    slug="department-headcount",
    title="Headcount per department",
    topic=Topic.aggregation,
    prompt="Count the employees of every department, including departments with nobody in them.",
    tables=("Departments", "Employees"),
    solution=Attempt(
        verdict=Verdict.done,
        sql="""
SELECT d.name, COUNT(e.employee_id) AS headcount
FROM Departments AS d
LEFT JOIN Employees AS e ON e.department_id = d.department_id
GROUP BY d.department_id, d.name
ORDER BY d.name
""",
        commentary="COUNT(column) skips the NULL produced by the outer join for empty departments.",
    ),
    attempts=(
        Attempt(
            verdict=Verdict.wrong,
            mistake=Mistake.wrong_result,
            sql="""
SELECT d.name, COUNT(*) AS headcount
FROM Departments AS d
LEFT JOIN Employees AS e ON e.department_id = d.department_id
GROUP BY d.department_id, d.name
ORDER BY d.name
""",
            commentary="COUNT(*) counts the NULL-extended row: Legal shows 1 instead of 0.",
        ),
        Attempt(
            verdict=Verdict.wrong,
            mistake=Mistake.wrong_result,
            sql="""
SELECT d.name, COUNT(e.employee_id) AS headcount
FROM Departments AS d
JOIN Employees AS e ON e.department_id = d.department_id
GROUP BY d.department_id, d.name
ORDER BY d.name
""",
            commentary="The inner join drops Legal entirely.",
        ),
    ),
)

RUNNING_PAYMENTS = Problem(
    slug="running-payments",
    title="Running total of payments per order",
    topic=Topic.window_functions,
    prompt="For every payment show the amount paid so far on its order, in payment order.",
    tables=("Payments",),
    solution=Attempt(
        verdict=Verdict.done,
        sql="""
SELECT order_id, payment_id, amount,
       SUM(amount) OVER (PARTITION BY order_id ORDER BY paid_at, payment_id) AS running_total
FROM Payments
ORDER BY order_id, paid_at, payment_id
""",
        commentary="An ordered window frame ends at the current row by default, which makes SUM cumulative.",
    ),
    attempts=(
        Attempt(
            verdict=Verdict.wrong,
            mistake=Mistake.wrong_result,
            sql="""
SELECT order_id, payment_id, amount,
       SUM(amount) OVER (ORDER BY order_id, paid_at, payment_id) AS running_total
FROM Payments
ORDER BY order_id, paid_at, payment_id
""",
            commentary="Without PARTITION BY the total keeps running across orders.",
        ),
        Attempt(
            verdict=Verdict.wrong,
            mistake=Mistake.wrong_result,
            sql="""
SELECT order_id, payment_id, amount,
       SUM(amount) OVER (PARTITION BY order_id) AS running_total
FROM Payments
ORDER BY order_id, paid_at, payment_id
""",
            commentary="Without ORDER BY in the window the frame is the whole partition: every row gets the order total.",
        ),
    ),
)

UNPAID_ORDERS = Problem(
    slug="unpaid-orders",
    title="Orders not fully paid",
    topic=Topic.joins,
    prompt="List the orders whose payments do not cover the order total, with both amounts.",
    tables=("Orders", "OrderItems", "Payments"),
    solution=Attempt(
        verdict=Verdict.done,
        sql="""
WITH totals AS (
    SELECT order_id, SUM(quantity * unit_price) AS order_total FROM OrderItems GROUP BY order_id
), paid AS (
    SELECT order_id, SUM(amount) AS paid_total FROM Payments GROUP BY order_id
)
SELECT t.order_id, t.order_total, COALESCE(p.paid_total, 0) AS paid_total
FROM totals AS t
LEFT JOIN paid AS p ON p.order_id = t.order_id
WHERE COALESCE(p.paid_total, 0) < t.order_total
ORDER BY t.order_id
""",
        commentary="Aggregate each child table on its own before joining them.",
    ),
    attempts=(
        Attempt(
            verdict=Verdict.wrong,
            mistake=Mistake.wrong_result,
            sql="""
SELECT o.order_id,
       SUM(oi.quantity * oi.unit_price) AS order_total,
       COALESCE(SUM(p.amount), 0) AS paid_total
FROM Orders AS o
JOIN OrderItems AS oi ON oi.order_id = o.order_id
LEFT JOIN Payments AS p ON p.order_id = o.order_id
GROUP BY o.order_id
HAVING COALESCE(SUM(p.amount), 0) < SUM(oi.quantity * oi.unit_price)
ORDER BY o.order_id
""",
            commentary=(
                "Joining two child tables multiplies their rows (fan-out): order 2 has two payments, "
                "so its total is counted twice and it shows up as unpaid."
            ),
        ),
    ),
)

PROBLEMS: Tuple[Problem, ...] = (
    TOP_SALARIES_PER_DEPARTMENT,
    THIRD_HIGHEST_SALARY,
    CUSTOMERS_WITHOUT_ORDERS,
    PRODUCTS_NEVER_ORDERED,
    EMPLOYEES_WITHOUT_PROJECTS,
    REPORTING_CHAIN,
    ORDER_STREAKS,
    ABOVE_DEPARTMENT_AVERAGE,
    DEPARTMENT_HEADCOUNT,
    RUNNING_PAYMENTS,
    UNPAID_ORDERS,
)
