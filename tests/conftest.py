"""
tests/conftest.py
──────────────────────────────────────────────────────────────────────────────
Общие фикстуры: три подразделения и пять сотрудников.

  dept1, dept3  - одинаковые поля, разные экземпляры
  emp1, emp2    - одинаковый id E001
  emp4          - та же зарплата, что у emp1 (75000), другой id
  emp5          - самая низкая зарплата (70000), без навыков
"""
from __future__ import annotations

import pytest

from domain.entities import Department, Employee


@pytest.fixture
def dept1() -> Department:
    return Department('Engineering', 'Building A')


@pytest.fixture
def dept2() -> Department:
    return Department('Marketing', 'Building B')


@pytest.fixture
def dept3() -> Department:
    return Department('Engineering', 'Building A')


@pytest.fixture
def emp1(dept1) -> Employee:
    emp = Employee('E001', 'John Doe', 75000, dept1)
    emp.add_skill('Java')
    emp.add_skill('Python')
    emp.add_skill('Docker')
    return emp


@pytest.fixture
def emp2(dept1) -> Employee:
    emp = Employee('E001', 'John Doe', 75000, dept1)
    emp.add_skill('Java')
    emp.add_skill('Python')
    emp.add_skill('Docker')
    return emp


@pytest.fixture
def emp3(dept2) -> Employee:
    emp = Employee('E002', 'Jane Smith', 80000, dept2)
    emp.add_skill('Marketing')
    emp.add_skill('Analytics')
    return emp


@pytest.fixture
def emp4(dept3) -> Employee:
    emp = Employee('E003', 'Bob Johnson', 75000, dept3)
    emp.add_skill('JavaScript')
    return emp


@pytest.fixture
def emp5(dept1) -> Employee:
    return Employee('E004', 'Alice Brown', 70000, dept1)
