"""
Unit tests for the BeautifulSoup DocumentNode adapter.
"""

from __future__ import annotations

from pagegist.extractor.protocols import DocumentNode
from pagegist.extractor.soup_node import SoupNode, parse_html
from tests.helpers.synthetic_tree import SyntheticNode


class TestSoupNode:
    def test_satisfies_protocol(self):
        assert isinstance(parse_html("<p>x</p>"), DocumentNode)
        assert isinstance(SyntheticNode("p"), DocumentNode)

    def test_attributes(self):
        node = parse_html('<div id="main" class="story lead" data-x="1">Hi</div>').select_one("div")

        assert node.tag == "div"
        assert node.classes == ("story", "lead")
        assert node.element_id == "main"
        assert node.get_attribute("data-x") == "1"
        assert node.get_attribute("class") == "story lead"
        assert node.get_attribute("missing") is None

    def test_missing_class_and_id(self):
        node = parse_html("<p>x</p>").select_one("p")

        assert node.classes == ()
        assert node.element_id == ""

    def test_children_are_elements_only(self):
        node = parse_html("<div>text <b>bold</b> more <i>it</i></div>").select_one("div")

        assert [child.tag for child in node.children()] == ["b", "i"]

    def test_descendants_in_document_order(self):
        document = parse_html("<div><p><span>a</span></p><p>b</p></div>")

        assert [node.tag for node in document.descendants()] == ["div", "p", "span", "p"]

    def test_clone_is_independent(self):
        document = parse_html("<div><p>keep</p><nav>drop</nav></div>")
        clone = document.clone()

        clone.select_one("nav").detach()

        assert clone.text == "keep"
        assert document.text == "keepdrop"

    def test_equality_follows_wrapped_tag(self):
        document = parse_html("<div><p>a</p></div>")

        assert document.select_one("p") == document.select_one("p")
        assert document.select_one("p") != SoupNode(parse_html("<p>a</p>").raw)
        assert len({document.select_one("p"), document.select_one("p")}) == 1
