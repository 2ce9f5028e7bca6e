"""Tests: SammlungService — Sortierung, Filter, Gruppierung, Maximum, Durchschnitt."""

from collections import Counter

import pytest

from sammlungs_uebungen.domain import Employee, EmployeeSortKey, Student, Product
from sammlungs_uebungen.service import LeereSammlungFehler, SammlungService


@pytest.fixture
def service():
    return SammlungService()


@pytest.fixture
def employees():
    return [Employee("Bob", 30, 5000), Employee("Ann", 25, 7000), Employee("Cy", 25, 6000)]


@pytest.fixture
def products():
    return [Product("X", 10, "Food"), Product("Y", 20, "Food"), Product("Z", 5, "Tech")]


def _names(items):
    return [i.name for i in items]


# ==============================================================================
# Teil A
# ==============================================================================

def test_sort_by_age_is_stable(service, employees):
    assert _names(service.sortiere_mitarbeiter(employees, EmployeeSortKey.age)) == ["Ann", "Cy", "Bob"]


def test_sort_by_name(service, employees):
    assert _names(service.sortiere_mitarbeiter(employees, EmployeeSortKey.name)) == ["Ann", "Bob", "Cy"]


def test_sort_by_salary(service, employees):
    assert _names(service.sortiere_mitarbeiter(employees, EmployeeSortKey.salary_asc)) == ["Bob", "Cy", "Ann"]
    assert _names(service.sortiere_mitarbeiter(employees, EmployeeSortKey.salary_desc)) == ["Ann", "Cy", "Bob"]


@pytest.mark.parametrize("key", list(EmployeeSortKey))
def test_all_sort_modes_stable_on_ties(service, key):
    tagged = [Employee("Sam", 40, 3000), Employee("Sam", 40, 3000.0), Employee("Sam", 40, 3000)]
    result = service.sortiere_mitarbeiter(tagged, key)
    assert [id(e) for e in result] == [id(e) for e in tagged]


def test_salary_desc_keeps_input_order_for_equal_salaries(service):
    a, b, c = Employee("A", 20, 100), Employee("B", 21, 200), Employee("C", 22, 100)
    assert service.sortiere_mitarbeiter([a, b, c], EmployeeSortKey.salary_desc) == [b, a, c]


def test_sort_returns_copy(service, employees):
    before = list(employees)
    service.sortiere_mitarbeiter(employees, EmployeeSortKey.name)
    assert employees == before


# ==============================================================================
# Teil B
# ==============================================================================

def test_beste_studenten_scenario(service):
    students = [Student("A", 80), Student("B", 76), Student("C", 75), Student("D", 90)]
    assert service.beste_studenten(students) == ["D", "A", "B"]


def test_beste_studenten_ties_keep_order(service):
    students = [Student("P", 88), Student("Q", 99), Student("R", 88)]
    assert service.beste_studenten(students) == ["Q", "P", "R"]


def test_beste_studenten_empty_result(service):
    assert service.beste_studenten([Student("C", 75), Student("E", 10)]) == []


def test_custom_threshold():
    assert SammlungService(noten_schwelle=50).beste_studenten([Student("A", 60), Student("B", 40)]) == ["A"]


# ==============================================================================
# Teil C
# ==============================================================================

def test_group_scenario(service, products):
    groups = service.gruppiere_nach_kategorie(products)
    assert list(groups) == ["Food", "Tech"]
    assert {k: _names(v) for k, v in groups.items()} == {"Food": ["X", "Y"], "Tech": ["Z"]}


def test_group_first_seen_order(service):
    products = [Product("a", 1, "Tech"), Product("b", 2, "Food"), Product("c", 3, "Tech"), Product("d", 4, "Home")]
    groups = service.gruppiere_nach_kategorie(products)
    assert list(groups) == ["Tech", "Food", "Home"]
    assert _names(groups["Tech"]) == ["a", "c"]


def test_group_is_partition(service):
    products = [Product(str(i), i + 1, "ABC"[i % 3]) for i in range(10)]
    groups = service.gruppiere_nach_kategorie(products)
    flat = [p for members in groups.values() for p in members]
    assert Counter(flat) == Counter(products)
    for category, members in groups.items():
        assert all(p.category == category for p in members)


def test_max_per_category(service, products):
    best = service.teuerstes_pro_kategorie(products)
    assert best["Food"].name == "Y"
    assert best["Tech"].name == "Z"


def test_max_tie_keeps_first(service):
    products = [Product("first", 9, "Food"), Product("second", 9, "Food")]
    assert service.teuerstes_pro_kategorie(products)["Food"].name == "first"


def test_max_is_member_with_highest_price(service):
    products = [Product(str(i), (i * 7) % 11 + 1, "AB"[i % 2]) for i in range(12)]
    for category, p in service.teuerstes_pro_kategorie(products).items():
        members = [m for m in products if m.category == category]
        assert p in members
        assert all(p.price >= m.price for m in members)


def test_average(service, products):
    assert service.durchschnittspreis(products) == pytest.approx(35 / 3)


def test_average_empty_raises(service):
    with pytest.raises(LeereSammlungFehler):
        service.durchschnittspreis([])
    assert issubclass(LeereSammlungFehler, ValueError)


def test_auswertung_does_not_mutate_input(service, products):
    before = list(products)
    auswertung = service.erzeuge_produkt_auswertung(products)
    assert products == before
    assert auswertung.durchschnittspreis == pytest.approx(11.6667, abs=1e-4)
    assert list(auswertung.teuerste) == ["Food", "Tech"]
