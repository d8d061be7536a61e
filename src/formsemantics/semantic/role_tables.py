"""Static role lookup tables.

Each table maps a type or kind name to the role it implies and how
diagnostic that name is. Lookups are case-insensitive. The vendor-kind table
is consulted before the generic widget-type table.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import NamedTuple

ACTION_ROLE = "Action"
UNKNOWN_ROLE = "Unknown"
UNKNOWN_CONFIDENCE = 0.10


class RoleEntry(NamedTuple):
    role: str
    confidence: float


class RoleTable(Mapping[str, RoleEntry]):
    """Immutable, case-insensitive mapping of names to role entries.

    Iteration yields the original keys in declaration order.
    """

    def __init__(self, name: str, entries: Mapping[str, tuple[str, float]]) -> None:
        self.name = name
        folded: dict[str, RoleEntry] = {}
        originals: dict[str, str] = {}
        for key, (role, confidence) in entries.items():
            if not 0.0 <= confidence <= 1.0:
                raise ValueError(f"{name}: confidence for '{key}' out of range: {confidence}")
            folded[key.casefold()] = RoleEntry(role, confidence)
            originals[key.casefold()] = key
        self._entries = MappingProxyType(folded)
        self._originals = MappingProxyType(originals)

    def __getitem__(self, key: str) -> RoleEntry:
        return self._entries[key.casefold()]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.casefold() in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._originals.values())

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(self, key: str | None) -> RoleEntry | None:
        """Entry for ``key``, or None when absent or blank."""
        if not key:
            return None
        return self._entries.get(key.casefold())

    def __repr__(self) -> str:
        return f"RoleTable({self.name!r}, {len(self)} entries)"


VENDOR_KIND_ROLES = RoleTable(
    "vendor-kind",
    {
        "GridControl": ("DataGrid", 0.95),
        "PivotGridControl": ("PivotTable", 0.95),
        "XtraTabControl": ("TabContainer", 0.95),
        "LayoutControl": ("LayoutContainer", 0.90),
        "RibbonControl": ("Ribbon", 0.95),
        "BarManager": ("Toolbar", 0.90),
    },
)

WIDGET_TYPE_ROLES = RoleTable(
    "widget-type",
    {
        "Button": (ACTION_ROLE, 0.95),
        "TextBox": ("InputField", 0.95),
        "Label": ("Label", 0.90),
        "ComboBox": ("SelectField", 0.90),
        "CheckBox": ("ToggleField", 0.90),
        "RadioButton": ("ToggleField", 0.85),
        "ListBox": ("ListControl", 0.85),
        "DataGridView": ("DataGrid", 0.95),
        "TreeView": ("TreeControl", 0.90),
        "TabControl": ("TabContainer", 0.90),
        "Panel": ("Container", 0.70),
        "GroupBox": ("GroupContainer", 0.80),
        "Form": ("FormRoot", 0.99),
        "MenuStrip": ("Menu", 0.90),
        "ToolStrip": ("Toolbar", 0.85),
        "StatusStrip": ("StatusBar", 0.85),
        "PictureBox": ("Image", 0.85),
        "ProgressBar": ("ProgressIndicator", 0.90),
        "NumericUpDown": ("NumericInput", 0.85),
        "DateTimePicker": ("DateInput", 0.90),
    },
)
