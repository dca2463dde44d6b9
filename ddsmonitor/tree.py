"""A name/value tree built from JSON-like mappings."""

from __future__ import annotations

import threading
from enum import IntEnum
from typing import Any, Mapping

_USER_ROLE = 0x0100


class TreeRole(IntEnum):
    """Roles under which a tree item exposes its columns."""

    NAME = _USER_ROLE + 1
    VALUE = _USER_ROLE + 2


class TreeItem:
    """A tree node holding a row of string columns."""

    NAME_COLUMN = 0
    VALUE_COLUMN = 1

    def __init__(self, data: list[str], parent: TreeItem | None = None) -> None:
        self.item_data = list(data)
        self.parent = parent
        self.children: list[TreeItem] = []

    def append_child(self, item: TreeItem) -> None:
        self.children.append(item)

    def child_item(self, row: int) -> TreeItem | None:
        if 0 <= row < len(self.children):
            return self.children[row]
        return None

    def child_count(self) -> int:
        return len(self.children)

    def column_count(self) -> int:
        return len(self.item_data)

    def data(self, column: int) -> str | None:
        if 0 <= column < len(self.item_data):
            return self.item_data[column]
        return None

    def item_name(self) -> str | None:
        return self.data(self.NAME_COLUMN)

    def item_value(self) -> str | None:
        return self.data(self.VALUE_COLUMN)

    def clear(self) -> None:
        self.children.clear()

    def row(self) -> int:
        if self.parent is not None:
            for index, sibling in enumerate(self.parent.children):
                if sibling is self:
                    return index
            return -1
        return 0


def _primitive_text(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(int(value))
    if value is None:
        return "-"
    return None


class TreeModel:
    """Tree of name/value rows built from a nested mapping."""

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self.root = TreeItem(["Name", "Value"])
        self._update_lock = threading.Lock()
        if data is not None:
            self._setup_model_data(data, self.root)

    def column_count(self, parent: TreeItem | None = None) -> int:
        return (parent or self.root).column_count()

    def row_count(self, parent: TreeItem | None = None) -> int:
        return (parent or self.root).child_count()

    def data(self, item: TreeItem | None, role: int) -> str | None:
        if item is None:
            return None
        if role == TreeRole.NAME:
            return item.item_name()
        if role == TreeRole.VALUE:
            return item.item_value()
        return None

    def role_names(self) -> dict[TreeRole, str]:
        return {TreeRole.NAME: "name", TreeRole.VALUE: "value"}

    def clear(self) -> None:
        self.root.clear()

    def update(self, data: Mapping[str, Any]) -> None:
        """Replace the whole tree with one built from ``data``."""
        with self._update_lock:
            self.clear()
            self._setup_model_data(data, self.root)

    def _setup_model_data(self, json_data: Any, parent: TreeItem, first: bool = True) -> None:
        if isinstance(json_data, Mapping):
            entries = json_data.items()
        elif isinstance(json_data, (list, tuple)) and not json_data:
            entries = ()
        else:
            raise TypeError("tree data must be a mapping of names to values")

        for key, value in entries:
            row = [str(key)]
            text = _primitive_text(value)
            if text is not None:
                row.append(text)
            child = TreeItem(row, parent)
            if text is None:
                self._setup_model_data(value, child, first=False)
            parent.append_child(child)

        if first:
            # A trailing empty row keeps views from collapsing the last branch.
            parent.append_child(TreeItem([], parent))