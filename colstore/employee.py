"""Employees with role-specific pay calculations and descriptions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

_RULE = "===============================\n"


class Employee(ABC):
    """A person on the payroll, identified by a numeric id."""

    role: ClassVar[str] = ""

    def __init__(self, emp_id: int, name: str, base_salary: float, level: str) -> None:
        self.emp_id = emp_id
        self.name = name
        self.base_salary = base_salary
        self.level = level

    @abstractmethod
    def calculate_salary(self) -> float:
        """Return the total compensation."""

    @abstractmethod
    def describe(self) -> str:
        """Return a multi-line description of the employee."""


class FullTimeEmployee(Employee):
    """An employee paid a base salary plus bonus and stock options."""

    role: ClassVar[str] = "FullTime"

    def __init__(
        self,
        emp_id: int,
        name: str,
        base_salary: float,
        level: str,
        bonus: float,
        stock_options: float,
    ) -> None:
        super().__init__(emp_id, name, base_salary, level)
        self.bonus = bonus
        self.stock_options = stock_options

    def calculate_salary(self) -> float:
        """Return base salary plus bonus plus stock options."""
        return self.base_salary + self.bonus + self.stock_options

    def describe(self) -> str:
        return (
            "\n=== Full Time Employee Details ===\n"
            f"ID: {self.emp_id}\n"
            f"Name: {self.name}\n"
            f"Level: {self.level}\n"
            f"Base Salary: ${self.base_salary:.2f}\n"
            f"Bonus: ${self.bonus:.2f}\n"
            f"Stock Options: ${self.stock_options:.2f}\n"
            f"Total Compensation: ${self.calculate_salary():.2f}\n"
            + _RULE
        )

    def __str__(self) -> str:
        return (
            f"FullTimeEmployee[ID={self.emp_id}, Name={self.name}, Level={self.level}, "
            f"Base={self.base_salary:g}, Bonus={self.bonus:g}, "
            f"Stock={self.stock_options:g}, Total={self.calculate_salary():g}]"
        )

    def adjust_salary(self, percentage: float) -> None:
        """Scale the base salary by ``percentage`` percent (-50 to +100)."""
        if percentage < -50 or percentage > 100:
            raise ValueError("Salary adjustment must be between -50% and +100%")
        self.base_salary *= 1 + percentage / 100

    def adjust_bonus(self, new_bonus: float) -> None:
        """Replace the bonus; it may not be negative."""
        if new_bonus < 0:
            raise ValueError("Bonus cannot be negative")
        self.bonus = new_bonus


class ContractEmployee(Employee):
    """An employee paid by the hour."""

    role: ClassVar[str] = "Contract"

    def __init__(
        self,
        emp_id: int,
        name: str,
        base_salary: float,
        level: str,
        hours_worked: float,
        hourly_rate: float,
    ) -> None:
        super().__init__(emp_id, name, base_salary, level)
        self.hours_worked = hours_worked
        self.hourly_rate = hourly_rate

    def calculate_salary(self) -> float:
        """Return hours worked times the hourly rate."""
        return self.hours_worked * self.hourly_rate

    def describe(self) -> str:
        return (
            "\n=== Contract Employee Details ===\n"
            f"ID: {self.emp_id}\n"
            f"Name: {self.name}\n"
            f"Level: {self.level}\n"
            f"Hours Worked: {self.hours_worked:g}\n"
            f"Hourly Rate: ${self.hourly_rate:.2f}\n"
            f"Total Compensation: ${self.calculate_salary():.2f}\n"
            + _RULE
        )

    def __str__(self) -> str:
        return (
            f"ContractEmployee[ID={self.emp_id}, Name={self.name}, Level={self.level}, "
            f"Hours={int(self.hours_worked)}, Rate={self.hourly_rate:g}, "
            f"Total={self.calculate_salary():g}]"
        )

    def adjust_hourly_rate(self, new_rate: float) -> None:
        """Replace the hourly rate; it may not be negative."""
        if new_rate < 0:
            raise ValueError("Hourly rate cannot be negative")
        self.hourly_rate = new_rate

    def set_hours_worked(self, hours: int) -> None:
        """Set the hours worked, between 0 and 744 (the most in a month)."""
        hours = int(hours)
        if hours < 0 or hours > 744:
            raise ValueError("Hours must be between 0 and 744")
        self.hours_worked = hours