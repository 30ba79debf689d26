import unittest
from cratedoc.errors import InvalidPage
from cratedoc.parsers.allitems import AllItemsParser, classify
from cratedoc.parsers.base import DocKind, DocPage, Listing, ListingGroup, PageType, RawPage

BASE = "/work/target/doc/demo/all.html"

ALL_HTML = """
<html>
    <body class="rustdoc mod">
        <nav class="sidebar">
            <div class="sidebar-elems">
                <ul class="block"><li><a href="#structs">Structs</a></li></ul>
            </div>
        </nav>
        <ul><li><a href="settings.html">Settings</a></li></ul>
        <section id="main-content">
            <h3 id="modules">Modules</h3>
            <ul class="modules docblock">
                <li><a href="net/index.html">net</a></li>
                <li><a href="io/index.html">io</a></li>
            </ul>
            <h3 id="structs">Structs</h3>
            <ul class="structs docblock">
                <li><a href="struct.Client.html">Client</a></li>
                <li><a>NoHref</a></li>
                <li><a href="net/struct.Client.html">net::Client</a></li>
            </ul>
            <h3 id="traits">Traits</h3>
            <ul class="traits docblock"></ul>
            <h3 id="macros">Macros</h3>
            <ul class="macros docblock">
                <li><a href="macro.client.html">client</a></li>
            </ul>
            <h3 id="functions">Functions</h3>
            <ul class="functions docblock">
                <li><a href="fn.connect.html">connect</a></li>
                <li><a href="fn.blank.html"></a></li>
            </ul>
        </section>
    </body>
</html>
"""

class TestAllItemsParser(unittest.TestCase):
    def setUp(self):
        self.parser = AllItemsParser()

    def parse(self, html, base=BASE):
        return self.parser.parse(RawPage(html, base, PageType.ALL))

    def test_groups_in_document_order(self):
        groups = self.parse(ALL_HTML)
        self.assertEqual(
            [g.kind for g in groups],
            [DocKind.MODULE, DocKind.STRUCT, DocKind.OTHER, DocKind.FUNCTION],
        )

    def test_listings_are_resolved_and_ordered(self):
        modules, structs = self.parse(ALL_HTML)[:2]
        self.assertEqual(
            modules.listings,
            (
                Listing("net", "/work/target/doc/demo/net/index.html"),
                Listing("io", "/work/target/doc/demo/io/index.html"),
            ),
        )
        # The anchor without href is skipped, not the group.
        self.assertEqual([l.name for l in structs.listings], ["Client", "net::Client"])

    def test_empty_groups_are_dropped(self):
        groups = self.parse(ALL_HTML)
        self.assertNotIn(DocKind.TRAIT, [g.kind for g in groups])
        for group in groups:
            self.assertTrue(group.listings)

    def test_navigation_and_classless_lists_are_ignored(self):
        names = [l.name for g in self.parse(ALL_HTML) for l in g.listings]
        self.assertNotIn("Structs", names)
        self.assertNotIn("Settings", names)

    def test_empty_names_are_kept(self):
        functions = self.parse(ALL_HTML)[-1]
        self.assertEqual(functions.listings[1], Listing("", "/work/target/doc/demo/fn.blank.html"))

    def test_names_are_not_trimmed(self):
        html = '<ul class="enums"><li><a href="enum.E.html"> E </a></li></ul>'
        (group,) = self.parse(html)
        self.assertEqual(group.listings[0].name, " E ")

    def test_network_base(self):
        html = '<ul class="typedefs docblock"><li><a href="type.Result.html">Result</a></li></ul>'
        (group,) = self.parse(html, base="https://docs.rs/demo/0.1.0/demo/all.html")
        self.assertEqual(group.kind, DocKind.TYPE)
        self.assertEqual(group.listings[0].url, "https://docs.rs/demo/0.1.0/demo/type.Result.html")

    def test_unresolvable_base_drops_everything(self):
        self.assertEqual(self.parse(ALL_HTML, base="mailto:nobody@example.com"), ())

    def test_classification(self):
        cases = [
            ("modules", DocKind.MODULE),
            ("structs", DocKind.STRUCT),
            ("typedefs", DocKind.TYPE),
            ("traits", DocKind.TRAIT),
            ("enums", DocKind.ENUM),
            ("functions", DocKind.FUNCTION),
            ("constants", DocKind.CONSTANT),
            ("macros", DocKind.OTHER),
            ("Structs", DocKind.OTHER),
        ]
        for token, expected in cases:
            with self.subTest(token=token):
                self.assertEqual(classify(token), expected)
                html = f'<ul class="{token} docblock"><li><a href="x.html">x</a></li></ul>'
                (group,) = self.parse(html)
                self.assertEqual(group.kind, expected)

    def test_headed_lists_take_kind_from_heading(self):
        html = """
        <h3 id="structs">Structs</h3>
        <ul class="all-items"><li><a href="struct.A.html">A</a></li></ul>
        <h3 id="types">Type Aliases</h3>
        <ul class="all-items"><li><a href="type.R.html">R</a></li></ul>
        <h3 id="macros">Macros</h3>
        <ul class="all-items"><li><a href="macro.m.html">m</a></li></ul>
        """
        groups = self.parse(html)
        self.assertEqual([g.kind for g in groups], [DocKind.STRUCT, DocKind.TYPE, DocKind.OTHER])

    def test_malformed_href_skips_only_that_anchor(self):
        html = (
            '<ul class="structs docblock">'
            '<li><a href="http://[broken">X</a></li>'
            '<li><a href="struct.A.html">A</a></li>'
            '</ul>'
        )
        cases = [
            (BASE, "/work/target/doc/demo/struct.A.html"),
            ("https://docs.rs/demo/1.0.0/demo/all.html", "https://docs.rs/demo/1.0.0/demo/struct.A.html"),
        ]
        for base, expected in cases:
            with self.subTest(base=base):
                (group,) = self.parse(html, base=base)
                self.assertEqual(group.listings, (Listing("A", expected),))

    def test_rejects_other_page_types(self):
        with self.assertRaises(InvalidPage):
            self.parser.parse(RawPage(ALL_HTML, BASE, PageType.INDEX))

    def test_verbose_callback_reports_skips(self):
        messages = []
        self.parser.set_verbose_callback(messages.append)
        self.parse(ALL_HTML)
        self.assertTrue(any("without href" in m for m in messages))
        self.assertTrue(any("empty Traits group" in m for m in messages))

    def test_doc_page_from_source(self):
        page = DocPage.from_source(RawPage(ALL_HTML, BASE), self.parser)
        self.assertEqual(len(page.groups), 4)
        self.assertEqual(page.source.base, BASE)

class TestModels(unittest.TestCase):
    def test_labels(self):
        self.assertEqual(DocKind.MODULE.label, "Modules")
        self.assertEqual(DocKind.TYPE.label, "Types")
        self.assertEqual(DocKind.OTHER.label, "Other")

    def test_group_needs_listings(self):
        with self.assertRaises(ValueError):
            ListingGroup(DocKind.STRUCT, ())

if __name__ == "__main__":
    unittest.main()
