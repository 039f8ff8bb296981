"""Unit tests for notelinks.api.link._parsers."""

import pytest
from soupsieve import SelectorSyntaxError

from notelinks.api.link._parsers import BaseParser, LinkRef, PaginationParser
from notelinks.api.link.DEFAULT_SELECTOR import DEFAULT_SELECTOR


def test_default_selector():
    parser = PaginationParser()
    assert parser.selector == DEFAULT_SELECTOR == ".pagination a"
    assert isinstance(parser, BaseParser)


def test_parse_yields_link_refs():
    text = '<div class="pagination">\n<a href="prev.html">Prev</a>\n<a href="next.html">Next</a>\n</div>'

    refs = list(PaginationParser().parse(text))

    assert refs == [
        LinkRef(target="prev.html", label="Prev"),
        LinkRef(target="next.html", label="Next"),
    ]


def test_parse_ignores_anchors_outside_pagination():
    text = '<a href="top.html">Top</a><div class="content"><a href="x.html">x</a></div>'
    assert list(PaginationParser().parse(text)) == []


def test_parse_keeps_href_verbatim():
    text = '<div class="pagination"><a href="  ./b%20c.html?x=1#frag ">b</a></div>'
    (ref,) = PaginationParser().parse(text)
    assert ref.target == "  ./b%20c.html?x=1#frag "


def test_parse_empty_document():
    assert list(PaginationParser().parse("")) == []


def test_bad_selector_fails_at_construction():
    with pytest.raises(SelectorSyntaxError):
        PaginationParser("a[href")


def test_unclosed_anchor_is_closed_by_next_anchor():
    text = '<div class="pagination"><a href="p1.html">Prev<a href="p2.html">Next</div>'

    refs = list(PaginationParser().parse(text))

    assert refs == [LinkRef(target="p1.html", label="Prev"), LinkRef(target="p2.html", label="Next")]
