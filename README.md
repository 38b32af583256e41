# colstore

Typed, in-memory column tables with boolean-mask filtering and relational
operators, together with a small employee registry indexed by binary search
trees and an interactive shell for it.

## Installation

```
pip install .
```

To run the tests: `pip install .[test]`, then `pytest`.

## Columns (`colstore.column`)

A `Column` has a `key`, a `default_value` and an ordered list of values.

```python
from colstore.column import Column

marks = Column("Marks", 0, [10, 15, 20])
mask = (marks > 12) & (marks <= 20)
list(marks[mask])          # [15, 20]
```

- `==`, `!=`, `<`, `<=`, `>`, `>=` against a scalar, or against another column
  of the same length, give a new boolean column keyed `"Temp Column"`.
- `~`, `&` and `|` combine boolean columns element by element.
- `column[mask]` keeps the entries where a boolean column of the same length is true.
- `column[i]` and `column[i] = v` accept negative indices. An out-of-range index
  raises `IndexError`.
- `remove_entry` and `update_entry` silently ignore an out-of-range index.
- `add_entry`, `add_default(count)`, `concat(other)` and `rename(new_key)` are
  also provided, along with `len()` and iteration.
- A mask or column of the wrong length raises `ValueError`.

## Tables (`colstore.table`)

A `Table` holds columns of `str`, `int`, `float` or `bool` values. All its
columns always have the same number of records.

```python
from colstore.table import Table
from colstore.render import print_table

courses = Table("Courses")
courses.setup_column("Name", "")
courses.setup_column("Room", "N/A")
courses.setup_column("Num. Of Enrollment", 0)
courses.setup_column("Passing Rate", 0.0)
courses.setup_column("Blended Mode", False)

courses.insert_record(["Name", "Passing Rate"], "COMP1021", 90.5)
courses.insert_record(["Blended Mode", "Name"], True, "COMP3111")

courses.update_records(courses.get("Name") == "COMP1021", "Num. Of Enrollment", 1200)
print_table(courses[courses.get("Passing Rate") > 90.0])
```

- A column's type is the type of its default value. `setup_column` raises
  `ValueError` for a key that already exists and `TypeError` for an unsupported
  type. The column's default value is filled in for every existing record.
- `insert_record(keys, *values)` adds one record and returns the new record
  count. Each column that the record does not name gets its default value.
  It raises `ValueError` when the number of keys and the number of values
  differ, `KeyError` for an unknown key, and `TypeError` when a value does not
  fit its column. An `int` is accepted into a `float` column.
- `get(key)` raises `KeyError` for an unknown key. `column(key)` returns `None`
  instead.
- `table[mask]` returns a new table with the selected records.
  `update_records(mask, key, value)` and `remove_records(mask)` change the table
  in place. `update_records` does nothing if the key is unknown or the value does
  not fit the column's type.
- `remove_column`, `keys()`, `typed_columns()`, `rows()`, `copy()` and `len()`
  are also provided.

### Transformations (`colstore.transform`)

Each function returns a new table and leaves the original unchanged.

- `limit(table, count)` keeps the first `count` records.
- `skip(table, count)` drops the first `count` records. Skipping every record
  gives a table with no columns.
- `select(table, keys)` keeps only the listed columns, in the order given.
- `alias(table, new_name)` returns a copy under a new name.
- `rename_columns(table, original, renamed)` renames the listed keys.

### Relational operators (`colstore.relational`)

- `is_compatible(a, b)`: true when, for each type, both tables have columns with
  the same set of keys.
- `concat(a, b)`: the rows of `a` followed by the rows of `b`.
- `difference(a, b)`: the rows of `a` that do not appear in `b`. Columns are
  matched by their position among the columns of the same type.
- `product(a, b)`: the Cartesian product. The result is named `"<a>_<b>"` and
  its columns are named `"<table>.<column>"`. Raises `ValueError` if the two
  tables have the same name.
- `sort_by(table, key, descending=False)`: the rows ordered by one column. The
  sort is not stable. An unknown key returns an unchanged copy.

`concat` and `difference` raise `ValueError` when the tables are not compatible.

### Rendering (`colstore.render`)

`render(table)` returns the table as a boxed text grid: a `Table: <name>` line,
a header row, and one row per record. Booleans are shown as `true`/`false`.
`print_table(table)` writes the same text to standard output.

## Binary search tree (`colstore.bst`)

`BSTree(key=None)` is an unbalanced tree of unique items. Items are ordered by
`key(item)`, or by the items themselves when no key is given. It provides
`insert`, `remove` (returns whether an item was removed), `find` (returns the
stored item or `None`), in-order iteration, `inorder()`, `len()` and `height()`.
An empty tree has height -1.

## Employee registry

```python
from colstore.system import EmployeeManagementSystem

ems = EmployeeManagementSystem()
emp = ems.add_employee("FullTime", "John Doe", 80000, "Senior", 5000, 1000)
print(emp.describe())
ems.find_employee_by_name("John Doe")
```

`colstore.employee` defines the abstract `Employee` and two concrete kinds:

- `FullTimeEmployee`: total pay is base salary + bonus + stock options.
  `adjust_salary(percentage)` accepts -50 to 100. `adjust_bonus` rejects a
  negative bonus.
- `ContractEmployee`: total pay is hours worked × hourly rate.
  `adjust_hourly_rate` rejects a negative rate. `set_hours_worked` accepts
  0 to 744.

Both kinds raise `ValueError` for a value out of range. Each has a multi-line
`describe()` and a one-line `str()`.

`EmployeeManagementSystem` (in `colstore.system`) gives ids starting from 1.
It provides:

- `add_employee(role, name, salary, level, bonus=0, rate=0)`. The role is
  `"FullTime"` or `"Contract"`; any other role raises `ValueError`. For a
  contractor, `bonus` and `rate` are the hours worked and the hourly rate, and
  the hours are truncated to a whole number.
- `remove_employee`
- `find_employee_by_id`
- `find_employee_by_name`
- `employees_by_role`
- `describe_all`
- `len()`

### Interactive shell

```
colstore-employees
```

The shell reads commands from standard input, one per line, and stops at
`EXIT` or at the end of input. The command word is not case-sensitive. The
role, `id` and list-filter arguments must be written in lower case. A name
that contains spaces goes in double quotes. Commands that cannot be parsed are
reported on standard error as `Error: ...`, and the shell goes on.

| Command | What it does |
| --- | --- |
| `ADD fulltime <name> <base> <level> <bonus> <stock>` | Adds a full-time employee |
| `ADD contract <name> <base> <level> <hours> <rate>` | Adds a contract employee |
| `FIND id <id>` | Shows one employee |
| `REMOVE <id>` | Removes an employee |
| `LIST [fulltime\|contract]` | Lists employees in id order |
| `STATS` | Shows the employee count |
| `HELP` | Lists the commands |
| `EXIT` | Leaves the shell |

`colstore.cli` also provides `CommandParser(system, out=None)`, `ParseError`
and `tokenize(line)`, for driving the same commands from code.

## What it does not do

Everything is held in memory. Neither tables nor employees are saved to or
loaded from disk. The shell works only on the employee registry; there is no
command-line interface for tables.