"""Tests for data contracts."""

import pytest
from pydantic import ValidationError

from formsemantics.model.annotation import NodeAnnotation, RoleAssignment, sort_roles
from formsemantics.model.bundle import RoleConfidence, SemanticBundle
from formsemantics.model.evidence import Evidence, EvidenceCode
from formsemantics.model.node import Rect


class TestRect:
    """Tests for Rect geometry."""

    def test_edges_and_area(self):
        rect = Rect(10, 20, 30, 40)

        assert (rect.right, rect.bottom, rect.area) == (40, 60, 1200)

    def test_union(self):
        union = Rect.union([Rect(10, 10, 10, 10), Rect(0, 30, 5, 5), Rect(50, 0, 1, 1)])

        assert union == Rect(0, 0, 51, 35)

    def test_union_requires_input(self):
        with pytest.raises(ValueError):
            Rect.union([])


class TestRoleAssignment:
    """Tests for RoleAssignment."""

    @pytest.mark.parametrize("confidence", [-0.01, 1.01])
    def test_confidence_range_enforced(self, confidence):
        with pytest.raises(ValueError):
            RoleAssignment("Action", confidence)

    def test_boost_capped_and_never_negative(self):
        role = RoleAssignment("Action", 0.9)

        assert role.boosted(0.5).confidence == 1.0
        assert role.boosted(-0.5).confidence == pytest.approx(0.9)

    def test_with_evidence_returns_copy(self):
        role = RoleAssignment("Action", 0.9, (Evidence(EvidenceCode.TYPE, "Button"),))

        extended = role.with_evidence(Evidence(EvidenceCode.COMPACT_BOUNDS))

        assert len(role.evidence) == 1
        assert len(extended.evidence) == 2
        assert extended.has_evidence(EvidenceCode.COMPACT_BOUNDS)
        assert not role.has_evidence(EvidenceCode.COMPACT_BOUNDS)


class TestNodeAnnotation:
    """Tests for NodeAnnotation ordering."""

    def test_sort_roles_is_stable(self):
        roles = (
            RoleAssignment("A", 0.5),
            RoleAssignment("B", 0.9),
            RoleAssignment("C", 0.5),
        )

        assert [r.role for r in sort_roles(roles)] == ["B", "A", "C"]

    def test_with_roles_sorts(self):
        annotation = NodeAnnotation("n1").with_roles(
            (RoleAssignment("Low", 0.2), RoleAssignment("High", 0.8))
        )

        assert annotation.top_role == "High"
        assert annotation.top_confidence == pytest.approx(0.8)

    def test_empty_roles(self):
        annotation = NodeAnnotation("n1")

        assert annotation.top is None
        assert annotation.top_role is None
        assert annotation.top_confidence == 0.0


class TestEvidence:
    """Tests for evidence rendering."""

    @pytest.mark.parametrize(
        "evidence,expected",
        [
            (Evidence(EvidenceCode.VENDOR_KIND, "GridControl"), "vendor.kind=GridControl"),
            (Evidence(EvidenceCode.TYPE, "A.B.Button"), "type=A.B.Button"),
            (Evidence(EvidenceCode.ACTION_KEYWORD, "Help"), "text='Help' matches action keyword"),
            (
                Evidence(EvidenceCode.PRIMARY_ACTION_KEYWORD, "OK"),
                "text='OK' matches primary action keyword",
            ),
            (Evidence(EvidenceCode.COMPACT_BOUNDS), "bounds=compact-button-region"),
            (Evidence(EvidenceCode.ACTION_COUNT, "3"), "Two or more action-role nodes detected"),
        ],
    )
    def test_render(self, evidence, expected):
        assert evidence.render() == expected
        assert str(evidence) == expected


class TestWireModels:
    """Tests for the pydantic bundle models."""

    def test_confidence_validated(self):
        with pytest.raises(ValidationError):
            RoleConfidence(role="Action", confidence=1.5)

    def test_annotations_required(self):
        with pytest.raises(ValidationError):
            SemanticBundle.model_validate(
                {
                    "semanticVersion": "1.0",
                    "sourceSchemaVersion": "1.0",
                    "form": {"name": "F", "type": "T", "width": 100, "height": 100},
                }
            )

    def test_minimal_bundle_parses(self):
        bundle = SemanticBundle.model_validate(
            {
                "semanticVersion": "1.0",
                "sourceSchemaVersion": "1.0",
                "form": {"name": "F", "type": "T", "width": 100, "height": 100},
                "annotations": [
                    {"nodeId": "node-0", "roles": [{"role": "FormRoot", "confidence": 0.99}]}
                ],
            }
        )

        assert bundle.annotations[0].node_id == "node-0"
        assert bundle.annotations[0].roles[0].evidence == []
        assert bundle.regions is None

    def test_to_json_uses_camel_case_and_drops_none(self):
        bundle = SemanticBundle(
            semantic_version="1.0",
            source_schema_version="1.0",
            form={"name": "F", "type": "T", "width": 1, "height": 1},
            annotations=[{"node_id": "n", "roles": []}],
        )

        text = bundle.to_json()

        assert '"semanticVersion"' in text
        assert '"nodeId"' in text
        assert "regions" not in text
        assert "dpi" not in text
        assert "hints" not in text
