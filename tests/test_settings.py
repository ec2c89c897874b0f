from __future__ import annotations

import pytest

from santapairing.constants import DEFAULT_CYCLE_SIZE, MAX_GENERATION_ATTEMPTS
from santapairing.exceptions import SettingsException
from santapairing.models import (
    CycleOperator,
    EqualCycles,
    Hamiltonian,
    InequalityCycles,
    Unconstrained,
)
from santapairing.settings import GenerationSettings


def test_defaults() -> None:
    settings = GenerationSettings()
    assert settings.cycle_size == DEFAULT_CYCLE_SIZE
    assert settings.cycle_operator is CycleOperator.EQUAL
    assert settings.max_attempts == MAX_GENERATION_ATTEMPTS
    assert settings.to_shape() == Unconstrained()


def test_hamiltonian_wins() -> None:
    settings = GenerationSettings(
        use_hamiltonian_cycle=True, enable_n_cycle_constraint=True, cycle_size=2
    )
    assert settings.to_shape() == Hamiltonian()


@pytest.mark.parametrize(
    "operator, expected",
    [
        (CycleOperator.EQUAL, EqualCycles(4)),
        (CycleOperator.GREATER, InequalityCycles(4, CycleOperator.GREATER)),
        (CycleOperator.LESS, InequalityCycles(4, CycleOperator.LESS)),
    ],
)
def test_n_cycle_shapes(operator, expected) -> None:
    settings = GenerationSettings(
        enable_n_cycle_constraint=True, cycle_size=4, cycle_operator=operator
    )
    assert settings.to_shape() == expected


def test_size_ignored_when_n_cycle_disabled() -> None:
    settings = GenerationSettings(cycle_size=4, cycle_operator=CycleOperator.LESS)
    assert settings.to_shape() == Unconstrained()


def test_to_dict() -> None:
    settings = GenerationSettings(
        enable_n_cycle_constraint=True,
        cycle_size=2,
        cycle_operator=CycleOperator.GREATER,
        max_attempts=50,
    )
    assert settings.to_dict() == {
        "useHamiltonianCycle": False,
        "enableNCycleConstraint": True,
        "cycleSize": 2,
        "cycleOperator": "greater",
        "maxAttempts": 50,
    }


def test_from_dict_restores_to_dict() -> None:
    settings = GenerationSettings(
        use_hamiltonian_cycle=True, cycle_operator=CycleOperator.LESS, max_attempts=9
    )
    restored = GenerationSettings.from_dict(settings.to_dict())
    assert restored.to_dict() == settings.to_dict()


def test_from_dict_fills_missing_keys() -> None:
    settings = GenerationSettings.from_dict({"enableNCycleConstraint": True})
    assert settings.to_shape() == EqualCycles(DEFAULT_CYCLE_SIZE)
    assert settings.max_attempts == MAX_GENERATION_ATTEMPTS


def test_from_dict_accepts_numeric_strings() -> None:
    settings = GenerationSettings.from_dict({"cycleSize": "5"})
    assert settings.cycle_size == 5


def test_unknown_operator() -> None:
    with pytest.raises(SettingsException, match="Unknown cycle operator"):
        GenerationSettings.from_dict({"cycleOperator": "sideways"})


@pytest.mark.parametrize("data", [{"cycleSize": "three"}, {"maxAttempts": None}])
def test_non_integer_numbers(data) -> None:
    with pytest.raises(SettingsException):
        GenerationSettings.from_dict(data)
