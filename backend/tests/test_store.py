import pytest

from savepoint.constants import MSG_NOT_FOUND, MSG_NOT_FOUND_DELETE, SEED_GAMES
from savepoint.store import GameStore, NotFoundError, ValidationError, game_payload


def test_seed_keeps_order(store: GameStore) -> None:
    store.seed()
    assert [g.title for g in store.list_games()] == [s["title"] for s in SEED_GAMES]
    assert [g.hours for g in store.list_games()] == [180, 45, 32]


def test_create_assigns_unique_ids(store: GameStore) -> None:
    ids = {store.create({"title": f"Game {i}", "hours": i + 1}).id for i in range(50)}
    assert len(ids) == 50
    assert len(store) == 50


@pytest.mark.parametrize("payload", [
    {},
    {"title": "Celeste"},
    {"hours": 10},
    {"title": "", "hours": 10},
    {"title": "Celeste", "hours": 0},
    {"title": "Celeste", "hours": -3},
    {"title": "Celeste", "hours": "20"},
    {"title": "Celeste", "hours": True},
    {"title": "Celeste", "hours": float("nan")},
    {"title": 42, "hours": 10},
])
def test_create_rejects_invalid_payload(store: GameStore, payload: dict) -> None:
    with pytest.raises(ValidationError):
        store.create(payload)
    assert len(store) == 0


def test_update_applies_only_given_fields(store: GameStore) -> None:
    g = store.create({"title": "Hades", "hours": 45})
    store.update(g.id, {"hours": 60})
    assert game_payload(store.get(g.id)) == {"id": g.id, "title": "Hades", "hours": 60}
    store.update(g.id, {"title": "Hades II"})
    assert game_payload(store.get(g.id)) == {"id": g.id, "title": "Hades II", "hours": 60}


def test_update_coerces_numeric_strings(store: GameStore) -> None:
    g = store.create({"title": "Hades", "hours": 45})
    assert store.update(g.id, {"hours": "12"}).hours == 12
    assert store.update(g.id, {"hours": " 7.5 "}).hours == 7.5


@pytest.mark.parametrize("payload", [
    {},
    {"title": None, "hours": None},
    {"hours": "abc"},
    {"hours": 0},
    {"title": ""},
    {"title": "Ok", "hours": "many"},
])
def test_update_rejects_and_keeps_record(store: GameStore, payload: dict) -> None:
    g = store.create({"title": "Hades", "hours": 45})
    with pytest.raises(ValidationError):
        store.update(g.id, payload)
    assert game_payload(store.get(g.id)) == {"id": g.id, "title": "Hades", "hours": 45}


def test_update_checks_id_before_payload(store: GameStore) -> None:
    with pytest.raises(NotFoundError) as exc:
        store.update("missing", {})
    assert exc.value.message == MSG_NOT_FOUND


def test_delete_removes_exactly_one(store: GameStore) -> None:
    a = store.create({"title": "A", "hours": 1})
    b = store.create({"title": "B", "hours": 2})
    store.delete(a.id)
    assert store.list_games() == [b]
    with pytest.raises(NotFoundError) as exc:
        store.delete(a.id)
    assert exc.value.message == MSG_NOT_FOUND_DELETE
    assert len(store) == 1


def test_integral_float_hours_stored_as_int(store: GameStore) -> None:
    g = store.create({"title": "Celeste", "hours": 20.0})
    assert g.hours == 20 and isinstance(g.hours, int)
    assert isinstance(store.update(g.id, {"hours": "7.0"}).hours, int)
    assert isinstance(store.update(g.id, {"hours": 3.0}).hours, int)
    assert store.update(g.id, {"hours": 7.5}).hours == 7.5


def test_very_large_hours(store: GameStore) -> None:
    big = 10 ** 400
    g = store.create({"title": "Forever", "hours": big})
    assert g.hours == big
    assert store.update(g.id, {"hours": str(big * 2)}).hours == big * 2
    with pytest.raises(ValidationError):
        store.update(g.id, {"hours": "1" + "0" * 5000})
    assert g.hours == big * 2
