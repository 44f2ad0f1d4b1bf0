# tests/conftest.py

import os
import tempfile

# keep test runs from writing into the working tree's logs/ directory
os.environ.setdefault(
    "ROSTER_LOG_FILE", os.path.join(tempfile.gettempdir(), "roster-tests.log")
)

import pytest

from models.assignment import Assignment
from models.class_group import ClassGroup
from models.fields import Level, Name, Phone, Remark
from models.model import Model
from models.person import Person
from models.roster import Roster


def make_person(
    name: str,
    phone: str = "94351253",
    level: str = "Sec 3",
    class_groups: tuple[str, ...] = (),
    assignments: tuple[str, ...] = (),
    remark: str | None = None,
) -> Person:
    return Person(
        name=Name(name),
        phone=Phone(phone),
        level=Level(level),
        class_groups=[ClassGroup(cg) for cg in class_groups],
        assignments=[Assignment(a) for a in assignments],
        remark=Remark(remark) if remark else None,
    )


@pytest.fixture
def alice():
    return make_person(
        "Alice Pauline",
        "94351253",
        "Sec 3",
        class_groups=("math-1000", "phys-2000"),
        assignments=("Homework1",),
    )


@pytest.fixture
def benson():
    return make_person(
        "Benson Meier",
        "98765432",
        "Sec 4",
        class_groups=("math-1000",),
        assignments=("Homework1", "Quiz2"),
    )


@pytest.fixture
def carl():
    return make_person("Carl Kurz", "95352563", "JC1", class_groups=("phys-2000",))


@pytest.fixture
def daniel():
    return make_person("Daniel Meier", "87652533", "JC2")


@pytest.fixture
def typical_persons(alice, benson, carl, daniel):
    return [alice, benson, carl, daniel]


@pytest.fixture
def sample_roster(typical_persons):
    return Roster(typical_persons)


@pytest.fixture
def sample_model(sample_roster):
    return Model(sample_roster)


@pytest.fixture
def expected_model(typical_persons):
    return Model(Roster(typical_persons))


@pytest.fixture
def person_factory():
    return make_person
