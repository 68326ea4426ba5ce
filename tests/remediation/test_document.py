"""Tests for the HTML document adapter."""

from axe_fixer.remediation.document import HTMLDocument, attribute_selector


class TestAttributeSelector:
    """Tests for attribute_selector."""

    def test_plain(self):
        assert attribute_selector("button", "name", "save") == 'button[name="save"]'

    def test_component_tag(self):
        assert attribute_selector("wm-button", "name", "save") == 'wm-button[name="save"]'

    def test_escapes_quotes(self):
        doc = HTMLDocument('<button name=\'say "hi"\'></button>')
        assert len(doc.query(attribute_selector("button", "name", 'say "hi"'))) == 1

    def test_escapes_line_breaks(self):
        assert attribute_selector("button", "name", "a\nb") == 'button[name="a\\a b"]'

    def test_escapes_carriage_return_and_form_feed(self):
        assert attribute_selector("p", "name", "a\r\x0cb") == 'p[name="a\\d \\c b"]'

    def test_multi_line_value_matches(self):
        doc = HTMLDocument('<button name="a\nb"></button><button name="ab"></button>')
        matches = doc.query(attribute_selector("button", "name", "a\nb"))
        assert len(matches) == 1


class TestHTMLDocument:
    """Tests for HTMLDocument."""

    def test_keeps_component_tags(self):
        doc = HTMLDocument('<wm-button name="save" caption="Save"></wm-button>')
        assert doc.serialize() == '<wm-button name="save" caption="Save"></wm-button>'

    def test_query_document_order(self):
        doc = HTMLDocument('<p name="a" id="1"></p><div><p name="a" id="2"></p></div>')
        assert [el["id"] for el in doc.query('p[name="a"]')] == ["1", "2"]

    def test_query_exact_match_only(self):
        doc = HTMLDocument('<button name="save-all"></button>')
        assert doc.query('button[name="save"]') == []

    def test_clone_is_detached(self):
        doc = HTMLDocument('<div><button name="x">Go</button></div>')
        original = doc.query_one('button[name="x"]')
        clone = HTMLDocument.clone(original)
        clone["title"] = "changed"

        assert clone.parent is None
        assert "title" not in original.attrs
        assert HTMLDocument.outer_html(clone) == '<button name="x" title="changed">Go</button>'

    def test_replace_keeps_position(self):
        doc = HTMLDocument('<div><span>a</span><button name="x"></button><span>b</span></div>')
        original = doc.query_one('button[name="x"]')
        clone = HTMLDocument.clone(original)
        clone["arialabel"] = "x"
        HTMLDocument.replace(original, clone)

        assert doc.serialize() == (
            '<div><span>a</span><button name="x" arialabel="x"></button><span>b</span></div>'
        )

    def test_serialize_body_contents(self):
        doc = HTMLDocument("<html><head><title>t</title></head><body><p>hi</p></body></html>")
        assert doc.serialize() == "<p>hi</p>"

    def test_serialize_fragment(self):
        doc = HTMLDocument("<p>one</p><p>two</p>")
        assert doc.serialize() == "<p>one</p><p>two</p>"

    def test_empty_document(self):
        assert HTMLDocument("").serialize() == ""

    def test_attribute_order_preserved(self):
        html = '<p z="1" a="2" m="3">text</p><wm-input placeholder="Email" name="email" class="b a"></wm-input>'
        assert HTMLDocument(html).serialize() == html

    def test_named_entities_round_trip(self):
        html = "<p>a&nbsp;b &copy; 2024 &lt;tag&gt; &amp; more</p>"
        assert HTMLDocument(html).serialize() == html

    def test_entities_in_attributes_round_trip(self):
        html = '<a name="legal" title="&copy; Acme">Legal</a>'
        doc = HTMLDocument(html)
        assert HTMLDocument.outer_html(doc.query_one("a")) == html

    def test_raw_non_ascii_written_as_entity(self):
        assert HTMLDocument("<p>café</p>").serialize() == "<p>caf&eacute;</p>"
