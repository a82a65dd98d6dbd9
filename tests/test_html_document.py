"""Tests for the document query interface."""

from __future__ import annotations

from floorball_cal.scrapers.html_document import Document

MARKUP = """
<html>
  <body>
    <section data-team-info class="team card">
      <a href="/team/1"><img src="/logo.png"> Herren <b>I</b></a>
      <span data-team-modus>Großfeld</span>
    </section>
    <a href="/team/2">Damen</a>
  </body>
</html>
"""


def test_query_all_returns_elements_in_document_order():
    document = Document.parse(MARKUP)
    anchors = document.query_all("a")
    assert [anchor.attr("href") for anchor in anchors] == ["/team/1", "/team/2"]


def test_text_includes_descendant_text():
    anchor = Document.parse(MARKUP).query_all("a")[0]
    assert " ".join(anchor.text().split()) == "Herren I"


def test_attr_returns_none_for_missing_and_joins_multi_valued():
    document = Document.parse(MARKUP)
    anchor = document.query_all("a")[0]
    assert anchor.attr("title") is None
    assert document.query_all("section")[0].attr("class") == "team card"


def test_closest_finds_ancestor_or_none():
    document = Document.parse(MARKUP)
    first, second = document.query_all("a")

    container = first.closest("[data-team-info]")
    assert container is not None
    assert [span.text() for span in container.query_all("[data-team-modus]")] == ["Großfeld"]
    assert second.closest("[data-team-info]") is None


def test_closest_includes_the_element_itself():
    section = Document.parse(MARKUP).query_all("section")[0]
    assert section.closest("[data-team-info]") is not None


def test_nested_query_all():
    anchor = Document.parse(MARKUP).query_all("a")[0]
    images = anchor.query_all("img")
    assert len(images) == 1
    assert images[0].attr("src") == "/logo.png"
