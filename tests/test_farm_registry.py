from __future__ import annotations

import threading

import pytest

from farmtoken.core import FarmRegistry, FarmStatus, NotFoundError, ValidationError
from farmtoken.core.farms import MAX_APPRAISED_VALUE, max_tokenisable_value, slugify_farm_name


def test_register_computes_ceiling_and_defaults() -> None:
    reg = FarmRegistry()
    farm = reg.register("Oak Farm", "Devon", 400000)

    assert farm.id == "oak-farm"
    assert farm.max_tokenisable_value == 100000
    assert farm.status is FarmStatus.REGISTERED
    assert farm.external_token_id is None
    assert farm.token_symbol == "FARM"
    assert farm.token_name == "Oak Farm Token"
    assert farm.area_hectares == 0.0
    assert reg.find("oak-farm") == farm


@pytest.mark.parametrize(
    "value, expected",
    [
        (400000, 100000),
        (1, 0),
        (2, 1),  # 0.5 rounds up
        (6, 2),  # 1.5 rounds up
        (10, 3),  # 2.5 rounds up
        (123457, 30864),
        (1000.5, 250),
        (99.99, 25),
    ],
)
def test_ceiling_is_quarter_rounded_half_up(value: float, expected: int) -> None:
    assert max_tokenisable_value(value) == expected
    farm = FarmRegistry().register("f", "x", value)
    assert farm.max_tokenisable_value == expected


def test_colliding_names_get_numeric_suffixes() -> None:
    reg = FarmRegistry()
    a = reg.register("Green Acres", "Kent", 1000)
    b = reg.register("Green Acres", "Kent", 1000)
    c = reg.register("green   acres", "Kent", 1000)

    assert [a.id, b.id, c.id] == ["green-acres", "green-acres-1", "green-acres-2"]


def test_suffix_is_first_fit_against_existing_ids() -> None:
    reg = FarmRegistry()
    reg.register("Mill", "Kent", 1000)
    reg.register("Mill 1", "Kent", 1000)  # takes "mill-1"
    third = reg.register("Mill", "Kent", 1000)

    assert third.id == "mill-2"


def test_slug_strips_unsupported_characters() -> None:
    assert slugify_farm_name("  Château d'Eau Farm #2 ") == "-chteau-deau-farm-2-"
    assert slugify_farm_name("Ñandú") == "and"
    assert slugify_farm_name("!!!") == ""


def test_empty_slug_falls_back_to_positional_placeholder() -> None:
    reg = FarmRegistry()
    reg.register("Oak Farm", "Devon", 1000)
    farm = reg.register("!!!", "Devon", 1000)

    assert farm.id == "farm-2"
    assert farm.name == "!!!"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"name": "", "location": "Devon", "appraised_value": 1000},
        {"name": "   ", "location": "Devon", "appraised_value": 1000},
        {"name": "Oak", "location": "", "appraised_value": 1000},
        {"name": None, "location": "Devon", "appraised_value": 1000},
        {"name": "Oak", "location": "Devon", "appraised_value": None},
        {"name": "Oak", "location": "Devon", "appraised_value": ""},
        {"name": "Oak", "location": "Devon", "appraised_value": 0},
        {"name": "Oak", "location": "Devon", "appraised_value": -5},
        {"name": "Oak", "location": "Devon", "appraised_value": "lots"},
        {"name": "Oak", "location": "Devon", "appraised_value": float("nan")},
        {"name": "Oak", "location": "Devon", "appraised_value": True},
    ],
)
def test_invalid_registration_does_not_mutate(kwargs: dict) -> None:
    reg = FarmRegistry()
    with pytest.raises(ValidationError):
        reg.register(kwargs["name"], kwargs["location"], kwargs["appraised_value"])
    assert reg.list_farms() == []


def test_invalid_hectares_rejected() -> None:
    reg = FarmRegistry()
    with pytest.raises(ValidationError):
        reg.register("Oak", "Devon", 1000, area_hectares=-1)
    with pytest.raises(ValidationError):
        reg.register("Oak", "Devon", 1000, area_hectares="wide")
    assert reg.count() == 0


def test_numeric_strings_and_custom_token_fields() -> None:
    reg = FarmRegistry()
    farm = reg.register(
        "Oak Farm",
        "Devon",
        "400000",
        area_hectares="12.5",
        token_symbol="OAK",
        token_name="Oak Shares",
    )
    assert farm.appraised_value == 400000
    assert farm.area_hectares == 12.5
    assert farm.token_symbol == "OAK"
    assert farm.token_name == "Oak Shares"


def test_list_preserves_registration_order() -> None:
    reg = FarmRegistry()
    names = ["Zeta", "Alpha", "Mid"]
    for n in names:
        reg.register(n, "Somewhere", 1000)

    assert [f.name for f in reg.list_farms()] == names


def test_mark_tokenised_is_single_transition() -> None:
    reg = FarmRegistry()
    farm = reg.register("Oak Farm", "Devon", 400000)

    first = reg.mark_tokenised(farm.id, "0.0.1")
    assert first.status is FarmStatus.TOKENISED
    assert first.external_token_id == "0.0.1"
    assert first.tokenised_at is not None

    second = reg.mark_tokenised(farm.id, "0.0.2")
    assert second == first
    assert reg.get(farm.id).external_token_id == "0.0.1"


def test_mark_tokenised_unknown_and_empty_token() -> None:
    reg = FarmRegistry()
    with pytest.raises(NotFoundError):
        reg.mark_tokenised("nope", "0.0.1")

    farm = reg.register("Oak Farm", "Devon", 400000)
    with pytest.raises(ValidationError):
        reg.mark_tokenised(farm.id, "")
    assert reg.get(farm.id).status is FarmStatus.REGISTERED


def test_get_raises_not_found() -> None:
    reg = FarmRegistry()
    assert reg.find("missing") is None
    with pytest.raises(NotFoundError):
        reg.get("missing")


def test_concurrent_registrations_get_distinct_ids() -> None:
    reg = FarmRegistry()
    barrier = threading.Barrier(16)

    def _worker() -> None:
        barrier.wait()
        reg.register("Green Acres", "Kent", 1000)

    threads = [threading.Thread(target=_worker) for _ in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    ids = [f.id for f in reg.list_farms()]
    assert len(ids) == 16
    assert len(set(ids)) == 16
    assert "green-acres" in ids
    assert "green-acres-15" in ids


def test_large_integers_keep_exact_ceiling() -> None:
    reg = FarmRegistry()
    farm = reg.register("Big Estate", "Norfolk", 10**17 + 2)

    assert farm.appraised_value == 10**17 + 2
    assert isinstance(farm.appraised_value, int)
    assert farm.max_tokenisable_value == 25000000000000001

    from_text = reg.register("Big Estate", "Norfolk", "100000000000000002")
    assert from_text.appraised_value == 10**17 + 2
    assert from_text.max_tokenisable_value == 25000000000000001


@pytest.mark.parametrize("value", [10**400, MAX_APPRAISED_VALUE + 1, "1e400", float("inf"), 1e300])
def test_out_of_range_values_are_validation_errors(value: object) -> None:
    reg = FarmRegistry()
    with pytest.raises(ValidationError):
        reg.register("Big", "X", value)
    with pytest.raises(ValidationError):
        reg.register("Big", "X", 1000, area_hectares=10**400)
    assert reg.count() == 0


def test_max_appraised_value_is_accepted() -> None:
    farm = FarmRegistry().register("Big", "X", MAX_APPRAISED_VALUE)
    assert farm.max_tokenisable_value == MAX_APPRAISED_VALUE // 4
