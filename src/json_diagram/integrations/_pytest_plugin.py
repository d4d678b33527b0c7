"""pytest plugin for json-diagram.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_diagram import DiagramData, find_graph_issues


@pytest.fixture(scope="session")
def assert_valid_diagram() -> Any:
    """Fixture that returns a callable diagram-invariant asserter.

    The fixture is session-scoped because the returned callable is stateless.

    Usage in tests::

        def test_orders(assert_valid_diagram):
            graph = process_data({"orders": [{"id": 1}, {"id": 2}]})
            assert_valid_diagram(graph)

    Returns:
        A callable ``_assert(graph, single_root=True) -> None`` that raises
        ``AssertionError`` listing the issues ``find_graph_issues`` reports
        (warnings only count when ``single_root`` is True).
    """

    def _assert(graph: DiagramData, single_root: bool = True) -> None:
        """Assert that ``graph`` satisfies the output invariants.

        Args:
            graph:       Graph returned by ``process_data``.
            single_root: Also require exactly one root when the graph is
                         non-empty.  Defaults to True.

        Raises:
            AssertionError: With one line per issue found.
        """
        issues = find_graph_issues(graph, require_single_root=single_root)
        if not single_root:
            issues = [i for i in issues if i.severity == "error"]
        if issues:
            details = "\n".join(f"  [{i.severity}] {i.message}" for i in issues)
            raise AssertionError(
                f"Diagram has {len(issues)} issue(s) "
                f"({len(graph.nodes)} nodes, {len(graph.connectors)} connectors):\n"
                f"{details}"
            )

    return _assert
