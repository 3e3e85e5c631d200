"""Cross-check the parsed tree against BeautifulSoup's html.parser."""

import pytest
from bs4 import BeautifulSoup

from html_filter import Filter


@pytest.fixture
def soup(index_html):
    return BeautifulSoup(index_html, "html.parser")


@pytest.mark.parametrize("tag_name", [
    "section", "li", "input", "tr", "td", "th", "form", "label", "div", "h2", "meta", "br", "source",
])
def test_tag_counts(tag_name, soup, index_document):
    assert len(index_document.get_elements_by_tag_name(tag_name)) == len(soup.find_all(tag_name))


def test_element_ids(soup, index_document):
    ids = [tag["id"] for tag in soup.find_all(id=True)]

    assert ids == ["name", "check", "radio1", "radio2"]
    for element_id in ids:
        element = index_document.get_element_by_id(element_id)
        assert element is not None
        assert element.tag_name == soup.find(id=element_id).name


def test_title_text(soup, index_document):
    title = index_document.to_filtered(Filter().tag_name("title").comment(False))

    assert title.to_string() == str(soup.title)


def test_filtered_rows_match(soup, index_document):
    rows = index_document.to_filtered(Filter().tag_name("tr"))
    reparsed = BeautifulSoup(rows.to_string(), "html.parser")

    assert [row.get_text(" ", strip=True) for row in reparsed.find_all("tr")] == \
        [row.get_text(" ", strip=True) for row in soup.find_all("tr")]


def test_script_content_is_not_markup(soup, index_document):
    script = index_document.get_elements_by_tag_name("script")[0]

    assert not soup.script.find_all(True)
    assert script.child.to_string() == soup.script.get_text()
