from __future__ import annotations

import pytest

from invoicedoc.markup import Document, LineBreak, StyleSheet, Text, el, escape_html, multiline_text


def test_escape_html_covers_all_special_characters() -> None:
    assert escape_html("<script>&\"'") == "&lt;script&gt;&amp;&quot;&#039;"


@pytest.mark.parametrize("value", [None, ""])
def test_escape_html_blank(value) -> None:
    assert escape_html(value) == ""


def test_text_escapes_on_construction() -> None:
    assert Text("a < b").markup == "a &lt; b"


def test_string_children_become_text_and_none_is_dropped() -> None:
    element = el("div", "Tom & Jerry", None, cls="name")

    assert len(element.children) == 1
    assert isinstance(element.children[0], Text)
    assert element.children[0].markup == "Tom &amp; Jerry"


def test_multiline_text_breaks_after_escaping() -> None:
    nodes = multiline_text("1 Main St\n<Suite 5>")

    assert [type(node) for node in nodes] == [Text, LineBreak, Text]
    assert "".join(node.markup for node in nodes) == "1 Main St<br>&lt;Suite 5&gt;"


def test_multiline_text_empty() -> None:
    assert multiline_text(None) == []
    assert multiline_text("") == []


def test_document_render_is_stable() -> None:
    def build() -> Document:
        head = el("head", el("meta", charset="utf-8"), el("title", "T"))
        body = el("body", el("div", el("p", "x"), cls="wrap", data_role="main"))
        return Document(head=head, body=body)

    first = build().render()

    assert first == build().render()
    assert first.startswith("<!DOCTYPE html>\n<html lang=\"en\">")
    assert '<meta charset="utf-8">' in first
    assert '<div class="wrap" data-role="main">' in first
    assert "<p>x</p>" in first
    assert "</meta>" not in first


def test_attribute_values_are_escaped() -> None:
    body = el("body", el("div", "x", title='say "hi"'))
    markup = Document(head=el("head"), body=body).render()

    assert 'title="say &quot;hi&quot;"' in markup


def test_void_elements_reject_children() -> None:
    body = el("body", el("br", "oops"))

    with pytest.raises(ValueError):
        Document(head=el("head"), body=body).render()


def test_stylesheet_rejects_closing_tags() -> None:
    with pytest.raises(ValueError):
        StyleSheet("body {}</style><script>")


def test_multiline_text_handles_windows_line_endings() -> None:
    nodes = multiline_text("Pay within 14 days\r\nLate fees apply\rThanks")

    assert "".join(node.markup for node in nodes) == "Pay within 14 days<br>Late fees apply<br>Thanks"
