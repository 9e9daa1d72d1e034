#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for TOC placeholder markers."""

import pytest
from utils import soup_of

from htmltoc.dom.markers import find_markers, marker_overrides, remove_markers, replace_marker


@pytest.mark.unit
class TestFindMarkers:
    """Test find_markers()."""

    def test_paragraph_marker(self):
        """Test a paragraph holding only the marker text."""
        soup = soup_of("<p>[toc]</p><h1>A</h1>")
        assert [m.name for m in find_markers(soup, "[toc]")] == ["p"]

    def test_surrounding_whitespace_ignored(self):
        """Test whitespace around the marker text is allowed."""
        soup = soup_of("<p>\n  [toc]  </p>")
        assert len(find_markers(soup, "[toc]")) == 1

    def test_marker_inside_text_not_matched(self):
        """Test the marker must be the whole paragraph."""
        soup = soup_of("<p>Use [toc] to insert a table of contents.</p>")
        assert find_markers(soup, "[toc]") == []

    def test_element_marker(self):
        """Test the <toc> element form."""
        soup = soup_of('<toc heading="Contents"></toc><h1>A</h1>')
        assert [m.name for m in find_markers(soup, "[toc]")] == ["toc"]

    def test_document_order(self):
        """Test markers are returned in document order."""
        soup = soup_of("<div><p>[toc]</p></div><toc></toc><p>[toc]</p>")
        assert [m.name for m in find_markers(soup, "[toc]")] == ["p", "toc", "p"]

    def test_custom_marker(self):
        """Test a custom marker text."""
        soup = soup_of("<p>{{TOC}}</p><p>[toc]</p>")
        markers = find_markers(soup, "{{TOC}}")
        assert [m.get_text() for m in markers] == ["{{TOC}}"]


@pytest.mark.unit
class TestMarkerOverrides:
    """Test marker_overrides()."""

    def test_element_attributes(self):
        """Test attributes are returned in option form."""
        soup = soup_of('<toc heading="On this page" max-level="3" min-level="2" min-headers="1"></toc>')
        assert marker_overrides(soup.toc) == {
            "heading": "On this page",
            "max_level": "3",
            "min_level": "2",
            "min_headers": "1",
        }

    def test_empty_and_unknown_attributes_ignored(self):
        """Test empty values and unrelated attributes are dropped."""
        soup = soup_of('<toc heading="" class="x" style="y"></toc>')
        assert marker_overrides(soup.toc) == {}

    def test_paragraph_has_no_overrides(self):
        """Test paragraph markers carry no overrides."""
        soup = soup_of('<p heading="ignored">[toc]</p>')
        assert marker_overrides(soup.p) == {}


@pytest.mark.unit
class TestReplaceAndRemove:
    """Test replacing and removing markers."""

    def test_replace_paragraph(self):
        """Test the replacement takes the marker's place."""
        soup = soup_of("<h1>A</h1><p>[toc]</p><h2>B</h2>")
        replacement = soup.new_tag("div", attrs={"id": "toc"})
        replace_marker(soup.p, replacement)

        assert [tag.name for tag in soup.find_all(recursive=False)] == ["h1", "div", "h2"]

    def test_replace_unclosed_element_keeps_following_content(self):
        """Test content swallowed by an unclosed <toc> stays in the document after the TOC."""
        soup = soup_of("<toc><h1>A</h1><p>Body</p>")
        replacement = soup.new_tag("div", attrs={"id": "toc"})
        replace_marker(soup.toc, replacement)

        assert soup.find("toc") is None
        assert [tag.name for tag in soup.find_all(recursive=False)] == ["div", "h1", "p"]

    def test_remove(self):
        """Test markers are removed and counted."""
        soup = soup_of("<p>[toc]</p><h1>A</h1><toc></toc>")
        assert remove_markers(find_markers(soup, "[toc]")) == 2
        assert str(soup) == "<h1>A</h1>"

    def test_remove_unclosed_element_keeps_content(self):
        """Test removing an unclosed <toc> keeps what it swallowed."""
        soup = soup_of("<toc><h1>A</h1>")
        remove_markers(find_markers(soup, "[toc]"))
        assert str(soup) == "<h1>A</h1>"

    def test_remove_nothing(self):
        """Test an empty marker list."""
        assert remove_markers([]) == 0
