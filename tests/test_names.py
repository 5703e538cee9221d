from random import Random
from unittest.mock import Mock

import pytest

from bogusdata.config import Scenario
from bogusdata.names import (
    NAME_DICTIONARY, NameCollisionException, NameRegistry,
    choose_name, extension_of, inject_keyword,
)


def test_random_scenario_synthesizes_names():
    assert choose_name(Scenario.RANDOM, "zip", 3, Random(0)) == "random_file_3.zip"


@pytest.mark.parametrize("scenario", [Scenario.USER_DATABASE, Scenario.BACKUPS])
def test_dictionary_scenarios_ignore_extension(scenario):
    rng = Random(1)
    for i in range(50):
        assert choose_name(scenario, "conf", i, rng) in NAME_DICTIONARY[scenario]


def test_dictionary_entries_carry_extensions():
    for names in NAME_DICTIONARY.values():
        assert all(extension_of(n) in {"conf", "sql", "bak", "zip"} for n in names)


def test_keyword_always_injected_for_loggable_extensions():
    never = Mock(random=Mock(return_value=0.99))
    assert inject_keyword("users.sql", "acme", never) == "acme_users.sql"
    assert inject_keyword("full_backup.bak", "acme", never) == "acme_full_backup.bak"


def test_keyword_coin_flip_for_other_extensions():
    heads = Mock(random=Mock(return_value=0.1))
    tails = Mock(random=Mock(return_value=0.9))
    assert inject_keyword("auth.conf", "acme", heads) == "acme_auth.conf"
    assert inject_keyword("auth.conf", "acme", tails) == "auth.conf"


def test_no_keyword_leaves_name_alone():
    assert inject_keyword("users.sql", None, Random(0)) == "users.sql"
    assert inject_keyword("users.sql", "", Random(0)) == "users.sql"


def test_registry_appends_suffix_before_extension():
    registry = NameRegistry()
    assert registry.reserve("users.sql") == "users.sql"
    assert registry.reserve("users.sql") == "users_1.sql"
    assert registry.reserve("users.sql") == "users_2.sql"
    assert registry.reserve("auth.conf") == "auth.conf"
    assert len(registry) == 4
    assert "users_1.sql" in registry


def test_registry_search_is_bounded():
    registry = NameRegistry(max_attempts=2)
    for _ in range(3):
        registry.reserve("a.zip")
    with pytest.raises(NameCollisionException):
        registry.reserve("a.zip")


def test_registry_release():
    registry = NameRegistry()
    registry.reserve("a.zip")
    registry.release("a.zip")
    assert registry.reserve("a.zip") == "a.zip"
