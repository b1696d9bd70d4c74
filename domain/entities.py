from __future__ import annotations

import copy
import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from core.logger import logger
from core.settings import settings


@dataclass
class Department:
    """Подразделение"""

    name: str | None
    location: str | None

    def copy(self) -> Department:
        """Независимая копия подразделения (строки неизменяемы, копируем поля)."""
        return Department(name=self.name, location=self.location)

    def __deepcopy__(self, memo: dict) -> Department:
        return self.copy()

    def describe(self) -> str:
        return f"Department(name='{self.name}', location='{self.location}')"

    def __str__(self) -> str:
        return self.describe()


def _salary_key(salary: float) -> tuple[int, float]:
    if math.isnan(salary):
        return (1, 0.0)
    return (0, salary)


class SkillsView(Sequence):
    """
    Read-only представление списка навыков сотрудника.

    Изменения исходного списка видны сразу, но через представление
    изменить список нельзя.
    """

    __slots__ = ('_items',)

    def __init__(self, items: list[str]):
        self._items = items

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SkillsView):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return repr(self._items)


@dataclass(eq=False)
class Employee:
    """
    Сотрудник

    Идентичность определяется только полем id: два сотрудника с одинаковым
    id равны и имеют одинаковый hash, даже если остальные поля различаются.
    Естественный порядок - по зарплате, и он намеренно не согласован с
    равенством: при равной зарплате compare_to возвращает 0 для разных id.

    Пока экземпляр лежит ключом в dict/set, id менять нельзя - иначе
    поиск по ключу перестанет работать. Внутренней синхронизации нет,
    одновременные изменения из нескольких потоков - забота вызывающего кода.
    """

    id: str | None
    name: str | None
    salary: float
    department: Department | None = None
    _skills: list[str] = field(default_factory=list, init=False, repr=False)
    _skills_view: SkillsView = field(init=False, repr=False)

    def __post_init__(self):
        self._skills_view = SkillsView(self._skills)

    def __setattr__(self, name: str, value) -> None:
        # зарплата всегда хранится как float
        if name == 'salary':
            value = float(value)
        super().__setattr__(name, value)

    # ========== SKILLS ==========

    @property
    def skills(self) -> SkillsView:
        return self._skills_view

    def add_skill(self, skill: str | None) -> None:
        """Добавить навык в конец списка. None игнорируется."""
        if skill is None:
            logger.warning(f'[EMPLOYEE] Пустой навык пропущен. ID - {self.id}')
            return
        self._skills.append(skill)

    # ========== IDENTITY ==========

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Employee):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        if self.id is None:
            return 0
        return hash(self.id)

    # ========== ORDERING ==========

    def compare_to(self, other: Employee | None) -> int:
        """
        Сравнить по зарплате: -1, 0 или 1.

        Отсутствующий сотрудник (None) считается меньше любого.
        NaN идёт после всех чисел (включая inf) и равен сам себе.
        """
        if other is None:
            return 1
        mine, theirs = _salary_key(self.salary), _salary_key(other.salary)
        if mine < theirs:
            return -1
        if mine > theirs:
            return 1
        return 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Employee):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Employee):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Employee):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Employee):
            return NotImplemented
        return self.compare_to(other) >= 0

    # ========== CLONING ==========

    def shallow_clone(self) -> Employee:
        """
        Поверхностная копия.

        Подразделение и список навыков общие с исходным объектом.
        """
        clone = copy.copy(self)
        logger.debug(f'[EMPLOYEE] Поверхностная копия создана. ID - {self.id}')
        return clone

    def deep_clone(self) -> Employee:
        """
        Глубокая копия.

        Подразделение копируется через Department.copy(), навыки - в новый список.
        """
        department = self.department.copy() if self.department is not None else None
        clone = Employee(
            id=self.id,
            name=self.name,
            salary=self.salary,
            department=department,
        )
        clone._skills.extend(self._skills)
        logger.debug(f'[EMPLOYEE] Глубокая копия создана. ID - {self.id}')
        return clone

    def __deepcopy__(self, memo: dict) -> Employee:
        return self.deep_clone()

    # ========== TEXT ==========

    def describe(self) -> str:
        # значения вставляются как есть, без экранирования
        if self.department is not None:
            department = f"'{self.department.name}'"
        else:
            department = settings.NO_DEPARTMENT_MARKER
        if self._skills:
            skills = "['" + "', '".join(self._skills) + "']"
        else:
            skills = '[]'
        return (
            f"Employee(id='{self.id}', name='{self.name}', salary={self.salary}, "
            f'department={department}, skills={skills})'
        )

    def __str__(self) -> str:
        return self.describe()
