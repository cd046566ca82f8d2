"""Named groups of tunable values persisted as JSON files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Union

from gameengine.vector import Vector3

DEFAULT_DIRECTORY = "resource/GlobalVariables/"

Value = Union[int, float, Vector3, bool]

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _check_value(value: object) -> Value:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if not _INT32_MIN <= value <= _INT32_MAX:
            raise ValueError(f"Integer value {value} does not fit in 32 bits.")
        return value
    if isinstance(value, float):
        return value
    if isinstance(value, Vector3):
        return value
    raise TypeError(
        f"Unsupported value type {type(value).__name__}; "
        "expected int, float, Vector3 or bool."
    )


def _to_json(value: Value) -> object:
    if isinstance(value, Vector3):
        return [value.x, value.y, value.z]
    return value


def _from_json(raw: object) -> Value | None:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return raw
    if isinstance(raw, list) and len(raw) == 3:
        x, y, z = (float(v) for v in raw)
        return Vector3(x, y, z)
    return None


class GlobalVariables:
    """Groups of named int, float, Vector3 and bool values.

    Each group is stored in ``<directory>/<group>.json``.
    """

    def __init__(self, directory: Union[str, Path] = DEFAULT_DIRECTORY) -> None:
        self.directory = Path(directory)
        self._groups: dict[str, dict[str, Value]] = {}

    def create_group(self, group_name: str) -> None:
        """Create an empty group unless one with this name exists."""
        self._groups.setdefault(group_name, {})

    def save_file(self, group_name: str) -> Path:
        """Write a group to its JSON file and return the file's path.

        Raises KeyError if the group does not exist.
        """
        if group_name not in self._groups:
            raise KeyError(f"Group {group_name!r} is not registered.")
        items = self._groups[group_name]
        root = {group_name: {key: _to_json(items[key]) for key in sorted(items)}}

        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.directory / f"{group_name}.json"
        with path.open("w", encoding="utf-8") as stream:
            json.dump(root, stream, indent=4)
            stream.write("\n")
        return path

    def load_files(self) -> None:
        """Load every ``.json`` file in the directory, if the directory exists."""
        if not self.directory.exists():
            return
        for path in sorted(self.directory.iterdir()):
            if path.suffix == ".json":
                self.load_file(path.stem)

    def load_file(self, group_name: str) -> None:
        """Load one group from its JSON file.

        Raises OSError if the file cannot be opened and KeyError if the
        file holds no entry for the group. Entries of other kinds are ignored.
        """
        path = self.directory / f"{group_name}.json"
        with path.open(encoding="utf-8") as stream:
            root = json.load(stream)

        if not isinstance(root, dict) or group_name not in root:
            raise KeyError(f"File {path} holds no group {group_name!r}.")
        for key, raw in root[group_name].items():
            value = _from_json(raw)
            if value is not None:
                self.set_value(group_name, key, value)

    def add_item(self, group_name: str, key: str, value: Value) -> None:
        """Set a value only if the key is not yet present in the group."""
        group = self._groups.setdefault(group_name, {})
        if key not in group:
            self.set_value(group_name, key, value)

    def set_value(self, group_name: str, key: str, value: Value) -> None:
        """Set a value, creating the group if needed."""
        checked = _check_value(value)
        self._groups.setdefault(group_name, {})[key] = checked

    def _get(self, group_name: str, key: str) -> Value:
        if group_name not in self._groups:
            raise KeyError(f"Group {group_name!r} is not registered.")
        group = self._groups[group_name]
        if key not in group:
            raise KeyError(f"Group {group_name!r} has no item {key!r}.")
        return group[key]

    def get_int_value(self, group_name: str, key: str) -> int:
        """Return an integer item; raises TypeError if it holds another kind."""
        value = self._get(group_name, key)
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Item {key!r} does not hold an int.")
        return value

    def get_float_value(self, group_name: str, key: str) -> float:
        """Return a float item; raises TypeError if it holds another kind."""
        value = self._get(group_name, key)
        if not isinstance(value, float):
            raise TypeError(f"Item {key!r} does not hold a float.")
        return value

    def get_vector3_value(self, group_name: str, key: str) -> Vector3:
        """Return a Vector3 item; raises TypeError if it holds another kind."""
        value = self._get(group_name, key)
        if not isinstance(value, Vector3):
            raise TypeError(f"Item {key!r} does not hold a Vector3.")
        return value

    def get_bool_value(self, group_name: str, key: str) -> bool:
        """Return a bool item; raises TypeError if it holds another kind."""
        value = self._get(group_name, key)
        if not isinstance(value, bool):
            raise TypeError(f"Item {key!r} does not hold a bool.")
        return value