import pytest

from colstore.relational import concat, difference, is_compatible, product, sort_by
from colstore.table import Table
from colstore.transform import rename_columns, select


def _course_schema(name="Courses"):
    table = Table(name)
    table.setup_column("Name", "")
    table.setup_column("Room", "N/A")
    table.setup_column("Num. Of Enrollment", 0)
    table.setup_column("Passing Rate", 0.0)
    table.setup_column("Blended Mode", False)
    return table


def _courses(suffix=""):
    table = _course_schema()
    table.insert_record(["Name", "Passing Rate"], "COMP1021" + suffix, 90.5)
    table.insert_record(
        ["Name", "Num. Of Enrollment", "Room", "Passing Rate"],
        "COMP2012H" + suffix, 28, "Rm 5583", 100.0,
    )
    table.insert_record(
        ["Blended Mode", "Name", "Passing Rate", "Room", "Num. Of Enrollment"],
        False, "COMP3711" + suffix, 89.3, "LTL", 181,
    )
    return table


def _students():
    table = Table("Students")
    table.setup_column("Name", "")
    table.setup_column("Student ID", "")
    table.setup_column("Year", 1)
    table.insert_record(["Name", "Student ID", "Year"], "Bob", "12345678", 3)
    table.insert_record(["Name", "Student ID", "Year"], "Alice", "20766000", 5)
    return table


def _names(table):
    return list(table.get("Name"))


def test_is_compatible_ignores_column_order():
    other = Table("Other")
    other.setup_column("Blended Mode", False)
    other.setup_column("Passing Rate", 0.0)
    other.setup_column("Name", "")
    other.setup_column("Num. Of Enrollment", 0)
    other.setup_column("Room", "N/A")
    assert is_compatible(_course_schema(), other) is True


def test_is_compatible_detects_type_mismatch():
    other = _course_schema()
    other.remove_column("Room")
    other.setup_column("Room", 0)
    assert is_compatible(_course_schema(), other) is False


def test_concat_appends_other_records():
    first = _course_schema()
    first.insert_record(["Name", "Passing Rate"], "COMP1021", 90.5)
    second = _course_schema("More Courses")
    second.insert_record(["Blended Mode", "Name"], True, "COMP3111")
    result = concat(second, first)
    assert result.name == "More Courses"
    assert _names(result) == ["COMP3111", "COMP1021"]
    assert list(result.get("Blended Mode")) == [True, False]
    assert len(result) == len(first) + len(second)


def test_concat_incompatible_raises():
    with pytest.raises(ValueError, match="concatenation"):
        concat(_courses(), _students())


def test_sort_by_matches_source_example():
    table = _courses()
    table.insert_record(["Blended Mode", "Name"], True, "COMP3111")
    result = sort_by(sort_by(table, "Name"), "Num. Of Enrollment")
    assert _names(result) == ["COMP1021", "COMP3111", "COMP2012H", "COMP3711"]


def test_sort_by_orders_and_preserves_records():
    table = _courses()
    table.insert_record(["Blended Mode", "Name"], True, "COMP3111")
    ascending = sort_by(table, "Passing Rate")
    rates = list(ascending.get("Passing Rate"))
    assert rates == sorted(rates)
    assert sorted(ascending.rows()) == sorted(table.rows())
    descending = sort_by(table, "Passing Rate", True)
    rates = list(descending.get("Passing Rate"))
    assert rates == sorted(rates, reverse=True)


def test_sort_by_unknown_key_returns_copy():
    table = _courses()
    result = sort_by(table, "Missing")
    assert result is not table
    assert list(result.rows()) == list(table.rows())


def test_difference_matches_source_example():
    table = _courses(" 2024F")
    table.insert_record(["Blended Mode", "Name"], True, "COMP3111 2024F")
    table.insert_record(
        ["Name", "Num. Of Enrollment", "Room", "Passing Rate"],
        "COMP2012H 2024F", 28, "Rm 5583", 100.0,
    )
    table.insert_record(
        ["Name", "Num. Of Enrollment", "Passing Rate"], "COMP2012H 2023F", 66, 101.0
    )
    other = _course_schema()
    other.insert_record(
        ["Name", "Num. Of Enrollment", "Room", "Passing Rate"],
        "COMP2012H 2024F", 28, "Rm 5583", 100.0,
    )
    other.insert_record(["Blended Mode", "Name"], True, "COMP3111 2024F")
    other.insert_record(["Blended Mode", "Name"], True, "COMP3711 2024F")
    result = difference(table, other)
    assert _names(result) == ["COMP1021 2024F", "COMP3711 2024F", "COMP2012H 2023F"]
    assert result.keys() == table.keys()


def test_difference_with_itself_is_empty():
    table = _courses()
    assert len(difference(table, table)) == 0


def test_difference_incompatible_raises():
    with pytest.raises(ValueError, match="difference"):
        difference(_courses(), _students())


def test_product_keys_and_rows():
    result = product(_courses(" 2024F"), _students())
    assert result.name == "Courses_Students"
    assert result.keys() == [
        "Courses.Name", "Courses.Room", "Courses.Num. Of Enrollment",
        "Courses.Passing Rate", "Courses.Blended Mode",
        "Students.Name", "Students.Student ID", "Students.Year",
    ]
    assert len(result) == 3 * 2
    assert next(result.rows()) == (
        "COMP1021 2024F", "N/A", 0, 90.5, False, "Bob", "12345678", 3,
    )


def test_product_same_name_raises():
    with pytest.raises(ValueError, match="same name"):
        product(_courses(), _courses())


def test_product_join_and_sort_integration():
    courses = _courses(" 2024F")
    courses.insert_record(
        ["Name", "Num. Of Enrollment", "Passing Rate"], "COMP2012H 2023F", 66, 101.0
    )
    grades = Table("Grades")
    grades.setup_column("Student ID", "")
    grades.setup_column("Offering", "")
    grades.setup_column("Grade", "")
    keys = ["Student ID", "Offering", "Grade"]
    grades.insert_record(keys, "12345678", "COMP2012H 2023F", "A")
    grades.insert_record(keys, "12345678", "COMP3711 2024F", "B+")
    grades.insert_record(keys, "20766000", "COMP1021 2024F", "B-")

    crossed = product(product(courses, _students()), grades)
    mask = (
        crossed.get("Grades.Student ID") == crossed.get("Courses_Students.Students.Student ID")
    ) & (crossed.get("Grades.Offering") == crossed.get("Courses_Students.Courses.Name"))
    joined = crossed[mask]
    renamed = rename_columns(
        joined,
        ["Courses_Students.Courses.Name", "Courses_Students.Courses.Passing Rate",
         "Courses_Students.Students.Name", "Grades.Grade"],
        ["Course Name", "Passing Rate", "Student Name", "Grade"],
    )
    chosen = select(renamed, ["Course Name", "Passing Rate", "Student Name", "Grade"])
    result = sort_by(chosen, "Grade")
    assert list(result.rows()) == [
        ("COMP2012H 2023F", 101.0, "Bob", "A"),
        ("COMP3711 2024F", 89.3, "Bob", "B+"),
        ("COMP1021 2024F", 90.5, "Alice", "B-"),
    ]