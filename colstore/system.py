"""A registry of employees indexed by id and by name."""

from __future__ import annotations

from typing import Optional

from colstore.bst import BSTree
from colstore.employee import ContractEmployee, Employee, FullTimeEmployee

_SEPARATOR = "------------------------\n"


class EmployeeManagementSystem:
    """Holds employees, giving each a new id starting from 1."""

    def __init__(self) -> None:
        self._by_id: BSTree[Employee] = BSTree(key=lambda emp: emp.emp_id)
        self._by_name: BSTree[Employee] = BSTree(key=lambda emp: emp.name)
        self._next_id = 1

    def add_employee(
        self,
        role: str,
        name: str,
        salary: float,
        level: str,
        bonus: float = 0,
        rate: float = 0,
    ) -> Employee:
        """Create and register an employee of ``role`` ("FullTime" or "Contract").

        For a full-time employee ``bonus`` and ``rate`` are the bonus and the
        stock options; for a contractor they are the hours worked (truncated to
        a whole number) and the hourly rate.
        """
        employee: Employee
        if role == "FullTime":
            employee = FullTimeEmployee(self._next_id, name, salary, level, bonus, rate)
        elif role == "Contract":
            employee = ContractEmployee(self._next_id, name, salary, level, int(bonus), rate)
        else:
            raise ValueError("Invalid employee role")
        self._next_id += 1
        self._by_id.insert(employee)
        self._by_name.insert(employee)
        return employee

    def remove_employee(self, emp_id: int) -> bool:
        """Remove the employee with ``emp_id``; return whether one was found."""
        employee = self.find_employee_by_id(emp_id)
        if employee is None:
            return False
        self._by_id.remove(employee)
        self._by_name.remove(employee)
        return True

    def find_employee_by_id(self, emp_id: int) -> Optional[Employee]:
        """Return the employee with ``emp_id``, or None."""
        return next((emp for emp in self._by_id if emp.emp_id == emp_id), None)

    def find_employee_by_name(self, name: str) -> Optional[Employee]:
        """Return the employee called ``name``, or None."""
        return next((emp for emp in self._by_name if emp.name == name), None)

    def employees_by_role(self, role: str) -> list[Employee]:
        """Return the employees of ``role`` in id order."""
        kinds = {"FullTime": FullTimeEmployee, "Contract": ContractEmployee}
        kind = kinds.get(role)
        if kind is None:
            return []
        return [emp for emp in self._by_id if isinstance(emp, kind)]

    def describe_all(self) -> str:
        """Return every employee's description in id order, each followed by a rule."""
        return "".join(emp.describe() + _SEPARATOR for emp in self._by_id)

    def __len__(self) -> int:
        return len(self._by_id)