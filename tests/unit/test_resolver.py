"""Unit tests for the path resolver."""

import pytest

from a11y_bridge.synthesis.normalizer import normalize, serialize_node
from a11y_bridge.synthesis.resolver import LocatedNode, resolve


@pytest.fixture
def document():
    return normalize('<div id="a"><p>one</p></div><p>two</p><p>three</p>')


class TestResolve:
    """Test suite for resolve()."""

    def test_single_match_returns_node_and_parent(self, document):
        located = resolve(document, "//div[@id='a']/p")
        assert isinstance(located, LocatedNode)
        assert located.node.text == "one"
        assert located.parent.get("id") == "a"
        assert located.is_root is False

    def test_multiple_matches_keep_last(self, document):
        located = resolve(document, "//p")
        assert serialize_node(located.node) == "<p>three</p>"
        assert located.parent.tag == "main"

    def test_positional_engine_path(self, document):
        located = resolve(document, "/html[1]/body[1]/main[1]/p[1]")
        assert located.node.text == "two"

    def test_no_match_returns_none(self, document):
        assert resolve(document, "//table") is None

    def test_invalid_query_returns_none(self, document):
        assert resolve(document, "//p[") is None

    @pytest.mark.parametrize("query", ["count(//p)", "string(//p)", "//p/text()", "boolean(//p)"])
    def test_non_node_results_return_none(self, document, query):
        assert resolve(document, query) is None

    def test_root_has_no_parent(self, document):
        located = resolve(document, "/html")
        assert located.node.tag == "html"
        assert located.parent is None
        assert located.is_root is True

    def test_resolution_does_not_modify_document(self, document):
        before = len(document.xpath("//*"))
        resolve(document, "//p")
        resolve(document, "//nothing")
        assert len(document.xpath("//*")) == before
