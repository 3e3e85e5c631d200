import pytest

from html_filter import (Attribute, ClosingKind, Comment, Document, DocumentType, Element, Empty,
                         Filter, HTMLParser, NestingDepthError, ParseError, Sequence, TagHeader,
                         Text, TreeStructureError, parse)
from html_filter.utils.config import Config


def test_index_round_trip(index_html):
    document = parse(index_html)

    assert document.to_string() == index_html.replace("<!DOCTYPE >", "<!DOCTYPE>")


def test_title_text(index_document):
    titles = index_document.get_elements_by_tag_name("title")

    assert len(titles) == 1
    assert titles[0].child == Text("Test HTML")


@pytest.mark.parametrize("html", [
    "",
    "plain text",
    "<a /><b />",
    '<div id="a">x</div>',
    "<ul><li>1</li><li>2</li></ul>",
    "<!-- c --><p>t</p>",
    "<!DOCTYPE html><html><body><p>a <b>b</b> c</p></body></html>",
    "<p>a - b -- c</p>",
    "<!---->",
    "<!-- a - b -->",
])
def test_round_trip(html):
    assert parse(html).to_string() == html


def test_empty_input():
    document = parse("")

    assert document.is_empty()
    assert document == Document(Empty())


def test_tree_shape():
    document = parse('<!DOCTYPE html><p class="x">a<br>b</p>')

    assert document.root == Sequence([
        DocumentType("DOCTYPE", "html"),
        Element(TagHeader("p", [Attribute("class", "x")]), ClosingKind.CLOSED, Sequence([
            Text("a"),
            Element(TagHeader("br"), ClosingKind.CLOSED, void=True),
            Text("b"),
        ])),
    ])


def test_comment_content_is_not_parsed():
    document = parse("<!-- <p>not a tag</p> -->")

    assert document.root == Comment(" <p>not a tag</p> ")


def test_comment_dash_runs():
    document = parse("<!--- Table --->")

    assert document.root == Comment("- Table -")
    assert document.to_string() == "<!--- Table --->"


def test_dashes_outside_comments_are_text():
    assert parse("a--b").root == Text("a--b")
    assert parse("x --").root == Text("x --")


@pytest.mark.parametrize("tag", ["script", "style"])
def test_raw_text_elements(tag):
    content = 'if (1 < 2 && "</b>") { a = "<p>x</p>"; } -- ->'
    document = parse(f"<{tag}>{content}</{tag}>after")

    element = document.root.children[0]
    assert element.tag_name == tag
    assert element.child == Text(content)
    assert document.root.children[1] == Text("after")


def test_raw_text_lookahead_keeps_characters():
    document = parse("<script>a<b c='1'>d</script>")

    assert document.root.child == Text("a<b c='1'>d")


def test_raw_text_elements_are_configurable():
    config = Config()
    config.set("parser.raw_text_elements", ["textarea"])
    document = HTMLParser(config).parse("<textarea><b>x</b></textarea>")

    assert document.root.child == Text("<b>x</b>")


@pytest.mark.parametrize("html", [
    "<SCRIPT>a<b>c</SCRIPT>",
    "<Style>p > a { color: red; }</Style>",
])
def test_raw_text_names_ignore_case(html):
    document = parse(html)

    assert isinstance(document.root.child, Text)
    assert document.to_string() == html


def test_void_names_ignore_case():
    document = parse("<BR><p>a</p>")

    assert document.root.children[0].void
    assert document.to_string() == "<BR><p>a</p>"


def test_void_elements():
    document = parse('<meta charset="UTF-8"><p>a<br>b<img src="x.png"></p>')

    assert document.to_string() == '<meta charset="UTF-8"><p>a<br>b<img src="x.png"></p>'
    meta = document.root.children[0]
    assert meta.void and meta.closing is ClosingKind.CLOSED


def test_unclosed_elements_are_accepted():
    document = parse("<html><body><p>text")

    assert document.to_string() == "<html><body><p>text"
    assert document.root.is_open


def test_unclosed_comment_is_accepted():
    document = parse("<p>a</p><!-- open")

    assert document.root.children[1] == Comment(" open", closed=False)
    assert document.to_string() == "<p>a</p><!-- open"


def test_walk_order():
    document = parse("<a>1<b>2</b></a><!--3--><c/>")
    names = [getattr(node, "tag_name", None) or node.node_name for node in document.walk()]

    assert names == ["a", "#text", "b", "#text", "#comment", "c"]


def test_get_element_by_id(index_document):
    element = index_document.get_element_by_id("radio2")

    assert element is not None
    assert element.header.find_attr_value("name") == "radio"
    assert index_document.get_element_by_id("missing") is None


@pytest.mark.parametrize("html, message", [
    ("<div></span>", "Invalid closing tag: found closing tag for 'span' but 'div' is still open."),
    ("<br></em>", "Invalid closing tag: found closing tag for 'em' but no tag is open."),
    ("</em>", "Invalid closing tag: found closing tag for 'em' but no tag is open."),
    (" --> ", "Tried to close unopened comment."),
    ("<!---->-->", "Tried to close unopened comment."),
    ("<p><b></p>", "Invalid closing tag: found closing tag for 'p' but 'b' is still open."),
])
def test_structure_errors(html, message):
    with pytest.raises(TreeStructureError) as excinfo:
        parse(html)

    assert str(excinfo.value) == message


def test_error_position():
    with pytest.raises(ParseError) as excinfo:
        parse("<p>ok</p><div></span>")

    assert excinfo.value.position == 14


def test_nesting_depth_is_capped():
    config = Config()
    config.set("parser.max_depth", 10)

    HTMLParser(config).parse("<div>" * 10)
    with pytest.raises(ParseError, match="Maximum nesting depth of 10 exceeded."):
        HTMLParser(config).parse("<div>" * 11)


def nested(depth):
    """Markup with ``depth`` nested elements and a text beside each inner one."""
    return "<div>x" * (depth - 1) + "<p id='deep'>y</p>" + "</div>" * (depth - 1)


def test_documents_at_the_default_depth_cap():
    max_depth = Config().get("parser.max_depth")
    html = nested(max_depth)
    document = parse(html)

    assert document.to_string() == html
    for filter in [Filter(), Filter().tag_name("zzz"), Filter().attribute_name("id"),
                   Filter().attribute_name("id").depth(3), Filter().except_tag_name("p").comment(True)]:
        assert parse(html).to_filtered(filter) == parse(html).filter(filter)
    assert document.to_found(Filter().attribute_name("id")).to_string() == "<p id='deep'>y</p>"
    assert parse(html).find(Filter().tag_name("div")).to_string() == html
    with pytest.raises(NestingDepthError):
        parse(nested(max_depth + 1))
