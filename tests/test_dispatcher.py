"""Tests du moteur de tournée."""

import pytest

from tournee.config import Config
from tournee.matching.dispatcher import Dispatcher
from tournee.matching.schema import Address, Driver
from tournee.primes import PrimeCache


@pytest.fixture
def config() -> Config:
    return Config()


def test_single_pair_end_to_end(config: Config) -> None:
    """Elm (3, impair) / Ann (1 voyelle, 2 consonnes) : 2 x 1.5 grâce au facteur 3 commun."""
    dispatcher = Dispatcher(config)
    addresses, drivers, result = dispatcher.run_lines(["12 Elm Street, Springfield"], ["Ann"])
    assert len(result.assignments) == 1
    a = result.assignments[0]
    assert (a.address_name, a.driver_name, a.score) == ("Elm", "Ann", 3.0)
    assert result.total_score == 3.0
    assert addresses[0].assigned and drivers[0].assigned
    assert result.unassigned_addresses == []
    assert result.unassigned_drivers == []


def test_top_pair_forces_remaining_pair(config: Config) -> None:
    """Le couple de tête prend la meilleure adresse et le meilleur livreur ; le reste suit."""
    addresses = [Address("Elm"), Address("Main")]
    drivers = [
        Driver("D0", vowel_count=4, consonant_count=10, length_factors=frozenset({5})),
        Driver("D1", vowel_count=0, consonant_count=9, length_factors=frozenset({7})),
    ]
    result = Dispatcher(config).run(addresses, drivers)
    pairs = [(a.address_name, a.driver_name, a.score) for a in result.assignments]
    assert pairs == [("Elm", "D0", 10.0), ("Main", "D1", 0.0)]
    # Elm/D1 (9) + Main/D0 (6) ferait 15 : comportement glouton attendu
    assert result.total_score == 10.0


def test_empty_inputs(config: Config) -> None:
    dispatcher = Dispatcher(config)
    result = dispatcher.run([], [Driver("Ann", 1, 2, frozenset({3}))])
    assert result.assignments == []
    assert result.total_score == 0
    assert result.unassigned_drivers == [0]


def test_surplus_drivers_unassigned(config: Config) -> None:
    dispatcher = Dispatcher(config)
    _, _, result = dispatcher.run_lines(
        ["1 Elm Street, X", "2 Maple Avenue, Y"],
        ["Ann", "Bob Stone", "Q", "Eve Li"],
    )
    assert len(result.assignments) == 2
    assert len(result.unassigned_drivers) == 2
    assert result.unassigned_addresses == []
    assert result.total_score == sum(a.score for a in result.assignments)


def test_assignment_count_bounded(config: Config) -> None:
    addresses = [Address(n) for n in ("Elm", "Oak", "Maple", "Broadway", "Sunset")]
    drivers = [Driver(n, 2, 3, frozenset({2})) for n in ("A", "B", "C")]
    result = Dispatcher(config).run(addresses, drivers)
    assert len(result.assignments) == 3
    assert len({a.address_ref for a in result.assignments}) == 3
    assert len(result.unassigned_addresses) == 2


def test_configured_multipliers(config: Config) -> None:
    config.vowel_multiplier = 2.0
    config.shared_factor_bonus = 1.0
    result = Dispatcher(config).run([Address("Main")], [Driver("Ann", 1, 2, frozenset({2}))])
    assert result.total_score == 2.0


def test_shared_cache_is_reused(config: Config) -> None:
    cache = PrimeCache()
    Dispatcher(config, cache).run_lines(["1 Sunset Boulevard, X"], ["Bartholomew Jones"])
    assert 17 in cache
    assert 11 in cache
