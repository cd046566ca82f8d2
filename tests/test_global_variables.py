import json

import pytest

from gameengine.global_variables import GlobalVariables
from gameengine.vector import Vector3


@pytest.fixture
def store(tmp_path):
    return GlobalVariables(tmp_path / "vars")


def test_set_and_get_each_kind(store):
    store.set_value("Player", "hp", 10)
    store.set_value("Player", "speed", 1.5)
    store.set_value("Player", "offset", Vector3(1.0, 2.0, 3.0))
    store.set_value("Player", "alive", True)
    assert store.get_int_value("Player", "hp") == 10
    assert store.get_float_value("Player", "speed") == 1.5
    assert store.get_vector3_value("Player", "offset") == Vector3(1.0, 2.0, 3.0)
    assert store.get_bool_value("Player", "alive") is True


def test_add_item_does_not_overwrite(store):
    store.add_item("Enemy", "count", 3)
    store.add_item("Enemy", "count", 7)
    assert store.get_int_value("Enemy", "count") == 3


def test_set_value_overwrites(store):
    store.set_value("Enemy", "count", 3)
    store.set_value("Enemy", "count", 7)
    assert store.get_int_value("Enemy", "count") == 7


def test_missing_group_and_key(store):
    with pytest.raises(KeyError):
        store.get_int_value("Nope", "hp")
    store.create_group("Player")
    with pytest.raises(KeyError):
        store.get_int_value("Player", "hp")


def test_wrong_kind_raises(store):
    store.set_value("Player", "alive", True)
    store.set_value("Player", "hp", 5)
    with pytest.raises(TypeError):
        store.get_int_value("Player", "alive")
    with pytest.raises(TypeError):
        store.get_bool_value("Player", "hp")
    with pytest.raises(TypeError):
        store.get_float_value("Player", "hp")
    with pytest.raises(TypeError):
        store.get_vector3_value("Player", "hp")


def test_unsupported_value_rejected(store):
    with pytest.raises(TypeError):
        store.set_value("Player", "name", "bob")
    with pytest.raises(ValueError):
        store.set_value("Player", "big", 2**40)


def test_save_file_format(store):
    store.set_value("Player", "speed", 1.5)
    store.set_value("Player", "offset", Vector3(1.0, 2.0, 3.0))
    path = store.save_file("Player")
    assert path.name == "Player.json"
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data == {"Player": {"speed": 1.5, "offset": [1.0, 2.0, 3.0]}}
    assert '    "Player"' in path.read_text(encoding="utf-8")


def test_save_unknown_group_raises(store):
    with pytest.raises(KeyError):
        store.save_file("Missing")


def test_round_trip(tmp_path):
    directory = tmp_path / "vars"
    first = GlobalVariables(directory)
    first.set_value("Player", "hp", 10)
    first.set_value("Player", "speed", 2.0)
    first.set_value("Player", "offset", Vector3(0.5, -1.0, 4.0))
    first.set_value("Player", "alive", False)
    first.save_file("Player")

    second = GlobalVariables(directory)
    second.load_files()
    assert second.get_int_value("Player", "hp") == 10
    assert second.get_float_value("Player", "speed") == 2.0
    assert second.get_vector3_value("Player", "offset") == Vector3(0.5, -1.0, 4.0)
    assert second.get_bool_value("Player", "alive") is False


def test_load_files_skips_other_extensions(tmp_path):
    directory = tmp_path / "vars"
    directory.mkdir()
    (directory / "notes.txt").write_text("not json", encoding="utf-8")
    (directory / "Cam.json").write_text(
        json.dumps({"Cam": {"fov": 0.45, "ignored": "text"}}), encoding="utf-8"
    )
    store = GlobalVariables(directory)
    store.load_files()
    assert store.get_float_value("Cam", "fov") == 0.45
    with pytest.raises(KeyError):
        store.get_float_value("Cam", "ignored")


def test_load_files_without_directory_is_empty(tmp_path):
    store = GlobalVariables(tmp_path / "absent")
    store.load_files()
    with pytest.raises(KeyError):
        store.get_int_value("Player", "hp")


def test_load_file_missing_raises(store):
    with pytest.raises(OSError):
        store.load_file("Missing")


def test_load_file_without_group_raises(tmp_path):
    directory = tmp_path / "vars"
    directory.mkdir()
    (directory / "A.json").write_text(json.dumps({"B": {}}), encoding="utf-8")
    store = GlobalVariables(directory)
    with pytest.raises(KeyError):
        store.load_file("A")


def test_loaded_values_replace_existing(tmp_path):
    directory = tmp_path / "vars"
    directory.mkdir()
    (directory / "P.json").write_text(json.dumps({"P": {"hp": 99}}), encoding="utf-8")
    store = GlobalVariables(directory)
    store.add_item("P", "hp", 1)
    store.load_file("P")
    assert store.get_int_value("P", "hp") == 99