"""Tests for the graph dataclasses and their renderer-facing dicts."""

from __future__ import annotations

import pytest

from json_diagram.graph.nodes import (
    Annotation,
    DiagramConnector,
    DiagramData,
    DiagramNode,
    DisplayContent,
)


@pytest.fixture
def container() -> DiagramNode:
    return DiagramNode(
        id="address",
        width=150,
        height=50,
        annotations=[Annotation(content="address"), Annotation(content="{2}")],
        is_leaf=False,
        path="Root.address",
        title="address",
        raw_content="address",
        merged_content="address {2}",
        display_content=DisplayContent(keys=("address",), display_value=2),
    )


@pytest.fixture
def leaf() -> DiagramNode:
    return DiagramNode(
        id="address-leaf-0",
        width=150,
        height=50,
        annotations=[
            Annotation(content="city:", id="Key_address-leaf-0_city"),
            Annotation(content="Paris", id="Value_address-leaf-0_city"),
        ],
        is_leaf=True,
        path="Root.address.leaf",
        title="city: Paris",
        raw_content="city: Paris",
    )


class TestToDict:
    def test_container(self, container: DiagramNode) -> None:
        assert container.to_dict() == {
            "id": "address",
            "width": 150,
            "height": 50,
            "annotations": [{"content": "address"}, {"content": "{2}"}],
            "additionalInfo": {"isLeaf": False, "mergedContent": "address {2}"},
            "data": {
                "path": "Root.address",
                "title": "address",
                "actualdata": "address",
                "displayContent": {"key": ["address"], "displayValue": 2},
            },
        }

    def test_leaf_omits_container_fields(self, leaf: DiagramNode) -> None:
        result = leaf.to_dict()
        assert result["additionalInfo"] == {"isLeaf": True}
        assert "displayContent" not in result["data"]
        assert result["annotations"][0] == {
            "id": "Key_address-leaf-0_city",
            "content": "city:",
        }

    def test_connector(self) -> None:
        connector = DiagramConnector(id="connector-a-b", source_id="a", target_id="b")
        assert connector.to_dict() == {"id": "connector-a-b", "sourceID": "a", "targetID": "b"}

    def test_graph(self, container: DiagramNode, leaf: DiagramNode) -> None:
        connector = DiagramConnector("connector-address-address-leaf-0", "address", "address-leaf-0")
        graph = DiagramData(nodes=[container, leaf], connectors=[connector])
        result = graph.to_dict()
        assert [n["id"] for n in result["nodes"]] == ["address", "address-leaf-0"]
        assert result["connectors"] == [connector.to_dict()]


class TestDiagramData:
    def test_empty(self) -> None:
        graph = DiagramData()
        assert graph.is_empty
        assert graph.to_dict() == {"nodes": [], "connectors": []}

    def test_lookup(self, container: DiagramNode, leaf: DiagramNode) -> None:
        graph = DiagramData(
            nodes=[container, leaf],
            connectors=[DiagramConnector("c", "address", "address-leaf-0")],
        )
        assert graph.node("address-leaf-0") is leaf
        assert graph.children("address") == [leaf]
        assert graph.children("address-leaf-0") == []
        with pytest.raises(KeyError):
            graph.node("missing")

    def test_annotation_is_frozen(self) -> None:
        annotation = Annotation(content="x")
        with pytest.raises((AttributeError, TypeError)):
            annotation.content = "y"  # type: ignore[misc]
