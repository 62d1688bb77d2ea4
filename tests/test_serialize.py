from __future__ import annotations

import unittest

from turbolayout.node import Comment, Doctype, Document, Element, ProcessingInstruction, Text
from turbolayout.serialize import serialize_start_tag, to_html


class TestSerialize(unittest.TestCase):
    def test_compact_document(self) -> None:
        doc = Document(
            Doctype(),
            Comment(" c "),
            ProcessingInstruction("php echo 1"),
            Element("html", {"lang": "en"}, Element("head", None, Element("meta", {"charset": "utf-8"}))),
        )
        assert to_html(doc) == '<!DOCTYPE html><!-- c --><?php echo 1?><html lang="en"><head><meta charset="utf-8"></head></html>'

    def test_escapes_text_and_attributes(self) -> None:
        p = Element("p", {"title": 'a "b" & c'}, Text("1 < 2 & 3"))
        assert to_html(p) == '<p title="a &quot;b&quot; &amp; c">1 &lt; 2 &amp; 3</p>'

    def test_empty_attribute_is_minimized(self) -> None:
        assert serialize_start_tag("input", {"disabled": ""}) == "<input disabled>"

    def test_pretty_output(self) -> None:
        doc = Document(
            Element(
                "html", None,
                Text("\n"),
                Element("head", None, Element("title", None, "T")),
                Element("body", None, Element("p", None, " Hi ")),
            )
        )
        expected = "\n".join([
            "<html>",
            "  <head>",
            "    <title>T</title>",
            "  </head>",
            "  <body>",
            "    <p>Hi</p>",
            "  </body>",
            "</html>",
        ])
        assert to_html(doc, pretty=True) == expected


if __name__ == "__main__":
    unittest.main()
