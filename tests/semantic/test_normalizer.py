"""Tests for tree normalization."""

import json

from formsemantics.diagnostics import PipelineWarnings
from formsemantics.semantic.normalizer import TreeNormalizer, normalize_nodes


class TestTreeNormalizer:
    """Tests for TreeNormalizer."""

    def test_single_node(self):
        """A single node produces a single entry with its id."""
        nodes = normalize_nodes(
            [
                {
                    "id": "n1",
                    "type": "System.Windows.Forms.Form",
                    "name": "Root",
                    "bounds": {"x": 0, "y": 0, "w": 800, "h": 600},
                    "children": [],
                }
            ]
        )

        assert len(nodes) == 1
        assert nodes[0].id == "n1"
        assert (nodes[0].w, nodes[0].h) == (800, 600)

    def test_child_absolute_bounds(self):
        """Child absolute position is parent absolute plus child relative."""
        nodes = normalize_nodes(
            [
                {
                    "id": "parent",
                    "type": "Panel",
                    "bounds": {"x": 10, "y": 20, "w": 500, "h": 400},
                    "children": [
                        {
                            "id": "child",
                            "type": "Button",
                            "bounds": {"x": 5, "y": 5, "w": 80, "h": 30},
                        }
                    ],
                }
            ]
        )

        assert [n.id for n in nodes] == ["parent", "child"]
        assert (nodes[1].abs_x, nodes[1].abs_y) == (15, 25)

    def test_absolute_position_accumulates_through_levels(self):
        """Offsets thread through every level, not only the direct parent."""
        tree = [
            {
                "id": "a",
                "bounds": {"x": 10, "y": 10},
                "children": [
                    {
                        "id": "b",
                        "bounds": {"x": 20, "y": 30},
                        "children": [{"id": "c", "bounds": {"x": 1, "y": 2}}],
                    }
                ],
            }
        ]

        nodes = normalize_nodes(tree)

        assert [(n.id, n.abs_x, n.abs_y) for n in nodes] == [
            ("a", 10, 10),
            ("b", 30, 40),
            ("c", 31, 42),
        ]

    def test_initial_offset(self):
        """A non-zero starting offset shifts every node."""
        nodes = normalize_nodes([{"id": "n", "bounds": {"x": 1, "y": 1}}], parent_x=100, parent_y=50)

        assert (nodes[0].abs_x, nodes[0].abs_y) == (101, 51)

    def test_depth_first_order(self):
        """Children come right after their parent, before the parent's siblings."""
        tree = [
            {"id": "a", "children": [{"id": "a1"}, {"id": "a2", "children": [{"id": "a2x"}]}]},
            {"id": "b"},
        ]

        assert [n.id for n in normalize_nodes(tree)] == ["a", "a1", "a2", "a2x", "b"]

    def test_defaults_for_missing_fields(self):
        """Missing bounds are zero, flags default true, text stays absent."""
        node = normalize_nodes([{"id": "n1", "type": "Label"}])[0]

        assert (node.abs_x, node.abs_y, node.w, node.h) == (0, 0, 0, 0)
        assert node.visible is True
        assert node.enabled is True
        assert node.text is None
        assert node.name == ""
        assert node.vendor_kind is None

    def test_partial_bounds(self):
        """Only the missing bounds components default to zero."""
        node = normalize_nodes([{"id": "n1", "bounds": {"x": 7, "h": 12}}])[0]

        assert (node.abs_x, node.abs_y, node.w, node.h) == (7, 0, 0, 12)

    def test_explicit_flags_and_text(self):
        """Explicit values are kept as given."""
        node = normalize_nodes(
            [{"id": "n1", "visible": False, "enabled": False, "text": "  Save "}]
        )[0]

        assert node.visible is False
        assert node.enabled is False
        assert node.text == "  Save "

    def test_empty_text_is_not_absent(self):
        """An empty string is kept, distinct from a missing text."""
        node = normalize_nodes([{"id": "n1", "text": ""}])[0]

        assert node.text == ""

    def test_malformed_entries_skipped(self):
        """Non-object array members are skipped silently at every level."""
        tree = [
            "garbage",
            42,
            None,
            {"id": "ok", "children": [[1, 2], {"id": "child"}, "x"]},
        ]

        assert [n.id for n in normalize_nodes(tree)] == ["ok", "child"]

    def test_empty_and_non_array_input(self):
        """Empty or non-array input yields an empty result."""
        assert normalize_nodes([]) == []
        assert normalize_nodes(None) == []
        assert normalize_nodes({"id": "not-an-array"}) == []

    def test_vendor_kind_extracted(self):
        """The vendor kind is read from metadata."""
        node = normalize_nodes(
            [
                {
                    "id": "grid1",
                    "type": "DevExpress.XtraGrid.GridControl",
                    "metadata": {"devexpress": {"kind": "GridControl"}},
                }
            ]
        )[0]

        assert node.vendor_kind == "GridControl"

    def test_vendor_kind_custom_keys(self):
        """Configured metadata sections are probed in order."""
        normalizer = TreeNormalizer(vendor_metadata_keys=("telerik", "devexpress"))
        node = normalizer.normalize(
            [
                {
                    "id": "n",
                    "metadata": {
                        "devexpress": {"kind": "GridControl"},
                        "telerik": {"kind": "RadGridView"},
                    },
                }
            ]
        )[0]

        assert node.vendor_kind == "RadGridView"

    def test_vendor_kind_ignores_non_string(self):
        """A non-string or empty kind is treated as absent."""
        nodes = normalize_nodes(
            [
                {"id": "a", "metadata": {"devexpress": {"kind": 5}}},
                {"id": "b", "metadata": {"devexpress": {"kind": ""}}},
                {"id": "c", "metadata": "nope"},
            ]
        )

        assert [n.vendor_kind for n in nodes] == [None, None, None]

    def test_numeric_coercion(self):
        """Float and numeric-string bounds are rounded to integers."""
        node = normalize_nodes(
            [{"id": "n", "bounds": {"x": 10.4, "y": "20", "w": "abc", "h": 29.6}}]
        )[0]

        assert (node.abs_x, node.abs_y, node.w, node.h) == (10, 20, 0, 30)

    def test_non_finite_bounds_become_zero(self):
        """Infinite and NaN bounds, as numbers or strings, fall back to 0."""
        items = json.loads(
            '[{"id": "n", "bounds": {"x": Infinity, "y": -Infinity, "w": NaN, "h": 30},'
            ' "children": [{"id": "c", "bounds": {"x": "1e400", "y": "-inf", "w": "nan", "h": 5}}]}]'
        )

        nodes = normalize_nodes(items)

        assert [(n.abs_x, n.abs_y, n.w, n.h) for n in nodes] == [(0, 0, 0, 30), (0, 0, 0, 5)]

    def test_fallback_id_for_missing_id(self):
        """Nodes without an id get a depth-first positional id and a warning."""
        warnings = PipelineWarnings()
        normalizer = TreeNormalizer(warnings=warnings)

        nodes = normalizer.normalize([{"id": "a", "children": [{"type": "Label"}]}, {"id": ""}])

        assert [n.id for n in nodes] == ["a", "node-1", "node-2"]
        assert warnings.codes() == ["FALLBACK_NODE_ID", "FALLBACK_NODE_ID"]

    def test_short_type(self):
        """short_type is the last dotted segment of the type name."""
        node = normalize_nodes([{"id": "n", "type": "System.Windows.Forms.Button"}])[0]

        assert node.short_type == "Button"
