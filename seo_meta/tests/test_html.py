from django.test import SimpleTestCase
from django.utils.safestring import SafeData

from seo_meta.html import cleanup, markup, render
from seo_meta.page import PageMeta


class CleanupTests(SimpleTestCase):
    def test_collapses_whitespace_and_newlines(self):
        self.assertEqual(cleanup("  a \n\n b  "), "a b")
        self.assertEqual(cleanup("tab\tseparated\r\nlines"), "tab separated lines")

    def test_idempotent(self):
        for value in ["  a \n\n b  ", "plain", "", "   ", "x  y"]:
            once = cleanup(value)
            self.assertEqual(cleanup(once), once)

    def test_does_not_escape_html(self):
        self.assertEqual(cleanup('Tom & "Jerry" <b>'), 'Tom & "Jerry" <b>')


class MarkupTests(SimpleTestCase):
    def test_family_templates(self):
        self.assertEqual(markup("title", "T", 0), "<title>T</title>")
        self.assertEqual(markup("description", "D", 0), '<meta name="description" content="D" />')
        self.assertEqual(markup("canonical", "C", 0), '<link rel="canonical" href="C" />')
        self.assertEqual(markup("og_site_name", "S", 0), '<meta property="og:site_name" content="S" />')
        self.assertEqual(
            markup("twitter_image", "I", 0), '<meta property="twitter:image" content="I" />'
        )

    def test_absent_value(self):
        self.assertIsNone(markup("title", None, 4))

    def test_indent(self):
        self.assertEqual(markup("title", "T", 3), "   <title>T</title>")


class RenderTests(SimpleTestCase):
    def test_empty_record_renders_empty_string(self):
        for indent in (0, 2, 4, 10):
            self.assertEqual(render(PageMeta(), indent), "")

    def test_one_line_per_present_field(self):
        page = PageMeta.create(title="T", og_title="O", twitter_url="U")
        lines = render(page).split("\n")
        self.assertEqual(len(lines), 3)

    def test_lines_sorted_by_field_name(self):
        page = PageMeta.create(
            twitter_card="summary",
            title="Home",
            og_type="website",
            description="Desc",
            canonical="https://example.com/",
        )
        self.assertEqual(
            render(page, 0).split("\n"),
            [
                '<link rel="canonical" href="https://example.com/" />',
                '<meta name="description" content="Desc" />',
                '<meta property="og:type" content="website" />',
                "<title>Home</title>",
                '<meta property="twitter:card" content="summary" />',
            ],
        )

    def test_default_indent_is_four_spaces(self):
        self.assertEqual(render(PageMeta.create(title="T")), "    <title>T</title>")

    def test_values_are_cleaned(self):
        page = PageMeta.create(description="""
            Multi
            line
        """)
        self.assertEqual(render(page, 1), ' <meta name="description" content="Multi line" />')

    def test_output_is_marked_safe(self):
        self.assertIsInstance(render(PageMeta.create(title="T")), SafeData)
        self.assertIsInstance(render(PageMeta()), SafeData)

    def test_negative_indent_is_rejected(self):
        with self.assertRaises(ValueError):
            render(PageMeta(), -1)
