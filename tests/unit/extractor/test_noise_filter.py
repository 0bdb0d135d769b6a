"""
Unit tests for NoiseFilter against both BeautifulSoup and synthetic trees.
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pagegist.config.config import NoiseRules
from pagegist.extractor.noise_filter import NoiseFilter
from pagegist.extractor.soup_node import parse_html
from tests.helpers.synthetic_tree import SyntheticNode

TAGS = ["div", "p", "span", "section", "nav", "aside", "script"]
CLASSES = ["", "story", "sidebar", "ad-slot", "x-ads-top", "lead"]


def _node(tag: str, cls: str, children=(), text: str = "") -> SyntheticNode:
    return SyntheticNode(tag, *children, text=text, classes=[cls] if cls else [])


trees = st.recursive(
    st.builds(
        _node,
        st.sampled_from(TAGS),
        st.sampled_from(CLASSES),
        text=st.text(alphabet="abc ", max_size=6),
    ),
    lambda children: st.builds(_node, st.sampled_from(TAGS), st.sampled_from(CLASSES), st.lists(children, max_size=4)),
    max_leaves=20,
)


def shape(node):
    return (node.tag, tuple(node.classes), node.element_id, tuple(shape(child) for child in node.children()))


@pytest.fixture
def noise_filter():
    return NoiseFilter()


class TestIsNoise:
    @pytest.mark.parametrize("tag", ["script", "style", "noscript", "nav", "header", "footer", "aside"])
    def test_blocked_tags(self, noise_filter, tag):
        assert noise_filter.is_noise(SyntheticNode(tag))

    @pytest.mark.parametrize("cls", ["sidebar", "advertisement", "cookie-banner", "related-posts", "werbung"])
    def test_exact_class_tokens(self, noise_filter, cls):
        assert noise_filter.is_noise(SyntheticNode("div", classes=["wrapper", cls]))

    def test_class_substring(self, noise_filter):
        """A class containing 'ad-' is noise even when not listed exactly."""
        assert noise_filter.is_noise(SyntheticNode("div", classes=["top-ad-unit"]))

    def test_id_substring(self, noise_filter):
        assert noise_filter.is_noise(SyntheticNode("div", element_id="ads-right"))

    def test_exact_id_from_rules(self):
        noise_filter = NoiseFilter(NoiseRules(ids=["disqus_thread"]))
        assert noise_filter.is_noise(SyntheticNode("div", element_id="disqus_thread"))

    @pytest.mark.parametrize(
        "node",
        [
            SyntheticNode("p"),
            SyntheticNode("div", classes=["story-body"]),
            SyntheticNode("div", element_id="headline"),
            SyntheticNode("section", classes=["loaded"]),
        ],
    )
    def test_content_nodes_are_kept(self, noise_filter, node):
        assert not noise_filter.is_noise(node)


class TestFilter:
    def test_removes_noise_from_soup(self, noise_filter):
        document = parse_html(
            "<div><nav>Menu</nav><p>Story text</p><div class='ad-banner'>Buy</div>"
            "<div id='ad-top'>Sale</div><script>track()</script></div>"
        )
        cleaned = noise_filter.filter(document.select_one("div"))

        assert cleaned.text == "Story text"

    def test_original_document_is_not_mutated(self, noise_filter, article_doc):
        before = str(article_doc.raw)

        noise_filter.filter(article_doc)

        assert str(article_doc.raw) == before
        assert article_doc.select_one("nav") is not None

    def test_root_is_never_removed(self, noise_filter):
        """Filtering a noise node strips its descendants but returns the node itself."""
        root = SyntheticNode("aside", SyntheticNode("p", text="kept"), SyntheticNode("nav", text="dropped"))

        cleaned = noise_filter.filter(root)

        assert cleaned.tag == "aside"
        assert cleaned.text == "kept"

    def test_nested_noise_removed(self, noise_filter):
        root = SyntheticNode(
            "body",
            SyntheticNode(
                "div",
                SyntheticNode("p", text="one "),
                SyntheticNode("div", SyntheticNode("span", text="hidden"), classes=["popup"]),
                SyntheticNode("p", text="two"),
            ),
        )

        assert noise_filter.filter(root).text == "one two"

    def test_soup_filter_is_idempotent(self, noise_filter, article_doc):
        once = noise_filter.filter(article_doc)
        twice = noise_filter.filter(once)

        assert twice.text == once.text
        assert [node.tag for node in twice.descendants()] == [node.tag for node in once.descendants()]

    @settings(max_examples=75, deadline=None)
    @given(tree=trees)
    def test_filter_is_idempotent(self, tree):
        noise_filter = NoiseFilter()
        once = noise_filter.filter(tree)
        twice = noise_filter.filter(once)

        assert shape(twice) == shape(once)
        assert twice.text == once.text

    @settings(max_examples=75, deadline=None)
    @given(tree=trees)
    def test_filter_leaves_input_intact(self, tree):
        before = shape(tree)

        NoiseFilter().filter(tree)

        assert shape(tree) == before

    @settings(max_examples=75, deadline=None)
    @given(tree=trees)
    def test_no_noise_below_root(self, tree):
        noise_filter = NoiseFilter()
        cleaned = noise_filter.filter(tree)

        assert not any(noise_filter.is_noise(node) for node in cleaned.descendants())
