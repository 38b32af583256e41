"""Interactive command interpreter for the employee management system."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Callable, Optional, Sequence, TextIO

from colstore.system import EmployeeManagementSystem

_FLOAT_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_RE = re.compile(r"\s*([+-]?\d+)")
_ROLES = {"fulltime": "FullTime", "contract": "Contract"}


class ParseError(Exception):
    """A command could not be understood."""


def tokenize(line: str) -> list[str]:
    """Split ``line`` on whitespace; a double-quoted word may hold spaces.

    Inside quotes a backslash makes the next character literal.
    """
    tokens: list[str] = []
    position, length = 0, len(line)
    while True:
        while position < length and line[position].isspace():
            position += 1
        if position >= length:
            return tokens
        if line[position] == '"':
            position += 1
            chars: list[str] = []
            while position < length:
                char = line[position]
                position += 1
                if char == "\\":
                    if position < length:
                        chars.append(line[position])
                        position += 1
                elif char == '"':
                    break
                else:
                    chars.append(char)
            tokens.append("".join(chars))
        else:
            start = position
            while position < length and not line[position].isspace():
                position += 1
            tokens.append(line[start:position])


def _parse_float(text: str) -> float:
    match = _FLOAT_RE.match(text)
    if match is None:
        raise ValueError(f"Not a number: {text!r}")
    return float(match.group(1))


def _parse_int(text: str) -> int:
    match = _INT_RE.match(text)
    if match is None:
        raise ValueError(f"Not an integer: {text!r}")
    return int(match.group(1))


class CommandParser:
    """Runs text commands against an employee system, writing results to ``out``."""

    def __init__(
        self, system: EmployeeManagementSystem, out: Optional[TextIO] = None
    ) -> None:
        self._system = system
        self._out = out
        self._commands: dict[str, Callable[[list[str]], None]] = {
            "add": self._add,
            "find": self._find,
            "remove": self._remove,
            "list": self._list,
            "stats": self._stats,
            "help": self._help,
            "exit": self._exit,
        }

    def _write(self, text: str) -> None:
        (self._out or sys.stdout).write(text)

    def execute(self, line: str) -> None:
        """Run one command line; raise ParseError if it cannot be understood."""
        tokens = tokenize(line)
        if not tokens:
            raise ParseError("Empty command")
        command = tokens[0].lower()
        handler = self._commands.get(command)
        if handler is None:
            raise ParseError(f"Unknown command: {command}")
        handler(tokens)

    def _add(self, tokens: list[str]) -> None:
        if len(tokens) < 6:
            raise ParseError(
                "Usage: ADD <role> <name> <base_salary> <level> "
                "<bonus/stock_options or hours/rate>"
            )
        role, name = tokens[1], tokens[2]
        base_salary = _parse_float(tokens[3])
        level = tokens[4]
        if role == "fulltime":
            if len(tokens) < 7:
                raise ParseError(
                    "Usage: ADD FullTime <name> <base_salary> <level> <bonus> <stock_options>"
                )
        elif role == "contract":
            if len(tokens) < 7:
                raise ParseError(
                    "Usage: ADD Contract <name> <base_salary> <level> "
                    "<hours_worked> <hourly_rate>"
                )
        else:
            raise ParseError("Invalid employee role. Must be 'fulltime' or 'contract'.")
        first = _parse_float(tokens[5])
        second = _parse_float(tokens[6])
        employee = self._system.add_employee(
            _ROLES[role], name, base_salary, level, first, second
        )
        self._write(employee.describe())

    def _find(self, tokens: list[str]) -> None:
        if len(tokens) < 3:
            raise ParseError("Usage: FIND id <value>")
        if tokens[1] != "id":
            raise ParseError("Invalid criterion. Only 'id' is supported.")
        employee = self._system.find_employee_by_id(_parse_int(tokens[2]))
        self._write(employee.describe() if employee else "Employee not found.\n")

    def _remove(self, tokens: list[str]) -> None:
        if len(tokens) < 2:
            raise ParseError("Usage: REMOVE <id>")
        if self._system.remove_employee(_parse_int(tokens[1])):
            self._write("Employee removed.\n")
        else:
            self._write("Employee not found.\n")

    def _list(self, tokens: list[str]) -> None:
        role = _ROLES.get(tokens[1]) if len(tokens) > 1 else None
        if role is None:
            self._write(self._system.describe_all())
            return
        for employee in self._system.employees_by_role(role):
            self._write(employee.describe())

    def _stats(self, tokens: list[str]) -> None:
        self._write(f"Total Employees: {len(self._system)}\n")

    def _help(self, tokens: list[str]) -> None:
        self._write("Commands:\nADD, FIND, REMOVE, LIST, STATS, HELP, EXIT\n")

    def _exit(self, tokens: list[str]) -> None:
        self._write("Exiting...\n")
        raise SystemExit(0)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read commands from standard input until it ends or EXIT is given."""
    argparse.ArgumentParser(
        description="Employee management command interpreter."
    ).parse_args(argv)
    parser = CommandParser(EmployeeManagementSystem())
    sys.stdout.write(
        "Employee Management System - Type 'HELP' for a list of commands.\n"
    )
    while True:
        sys.stdout.write("> ")
        sys.stdout.flush()
        line = sys.stdin.readline()
        if not line:
            return 0
        line = line.rstrip("\n")
        if not line:
            continue
        try:
            parser.execute(line)
        except (ParseError, ValueError) as error:
            print(f"Error: {error}", file=sys.stderr)


if __name__ == "__main__":
    sys.exit(main())