from django.test import SimpleTestCase

from seo_meta.exceptions import DuplicatePath, InvalidEnumValue, InvalidPath, UnknownField
from seo_meta.page import PageMeta
from seo_meta.registry import SeoRegistry

FULL_PAGE = {
    "title": "some title",
    "description": "some description",
    "canonical": "some canonical",
    "ogType": "website",
    "ogTitle": "some title",
    "ogDescription": "some description",
    "ogImage": "some image",
    "ogSiteName": "some site_name",
    "ogUrl": "some url",
    "twitterCard": "summary",
    "twitterSite": "some twitter_site",
    "twitterTitle": "some twitter_title",
    "twitterDescription": "some twitter_description",
    "twitterUrl": "some twitter_url",
    "twitterImage": "some twitter_image",
}

EXPECTED = """\
  <link rel="canonical" href="some canonical" />
  <meta name="description" content="some description" />
  <meta property="og:description" content="some description" />
  <meta property="og:image" content="some image" />
  <meta property="og:site_name" content="some site_name" />
  <meta property="og:title" content="some title" />
  <meta property="og:type" content="website" />
  <meta property="og:url" content="some url" />
  <title>some title</title>
  <meta property="twitter:card" content="summary" />
  <meta property="twitter:description" content="some twitter_description" />
  <meta property="twitter:image" content="some twitter_image" />
  <meta property="twitter:site" content="some twitter_site" />
  <meta property="twitter:title" content="some twitter_title" />
  <meta property="twitter:url" content="some twitter_url" />"""


class RenderForTests(SimpleTestCase):
    def setUp(self):
        self.registry = SeoRegistry(indent=2)
        self.registry.register("/", FULL_PAGE)

    def test_good_path(self):
        self.assertEqual(self.registry.render_for("/", 2), EXPECTED)

    def test_registry_indent_is_the_default(self):
        self.assertEqual(self.registry.render_for("/"), EXPECTED)

    def test_indent_override(self):
        html = self.registry.render_for("/", 0)
        self.assertTrue(html.startswith('<link rel="canonical"'))

    def test_non_existing_path(self):
        self.assertIsNone(self.registry.render_for("/bla", 2))

    def test_no_tags_differs_from_empty_page(self):
        self.registry.register("/empty/", {})
        self.assertEqual(self.registry.render_for("/empty/", 2), "")
        self.assertIsNotNone(self.registry.render_for("/empty/", 2))
        self.assertIsNone(self.registry.render_for("/missing/", 2))


class LookupTests(SimpleTestCase):
    def setUp(self):
        self.registry = SeoRegistry()
        self.page = self.registry.register("/about/", {"title": "About"})

    def test_exact_match(self):
        self.assertIs(self.registry.lookup("/about/"), self.page)

    def test_no_normalisation(self):
        self.assertIsNone(self.registry.lookup("/about"))
        self.assertIsNone(self.registry.lookup("/About/"))
        self.assertIsNone(self.registry.lookup("/about/?q=1"))

    def test_non_string_lookup_is_a_miss(self):
        self.assertIsNone(self.registry.lookup(None))

    def test_container_protocol(self):
        self.registry.register("/", PageMeta(title="Home"))
        self.assertIn("/about/", self.registry)
        self.assertNotIn("/nope/", self.registry)
        self.assertEqual(len(self.registry), 2)
        self.assertEqual(list(self.registry), ["/", "/about/"])
        self.assertEqual(self.registry.paths(), ["/", "/about/"])


class RegisterTests(SimpleTestCase):
    def test_duplicate_path_is_rejected(self):
        registry = SeoRegistry()
        registry.register("/", {"title": "One"})
        with self.assertRaises(DuplicatePath):
            registry.register("/", {"title": "Two"})
        self.assertEqual(registry.lookup("/").title, "One")

    def test_parameterised_paths_are_rejected(self):
        registry = SeoRegistry()
        for path in ["/users/:id", "/users/<int:pk>/", "^/users/(?P<pk>\\d+)$"]:
            with self.assertRaises(InvalidPath):
                registry.register(path, {"title": "User"})
        self.assertEqual(len(registry), 0)

    def test_relative_path_is_rejected(self):
        with self.assertRaises(InvalidPath):
            SeoRegistry().register("about/", {})

    def test_invalid_fields_fail_registration(self):
        registry = SeoRegistry()
        with self.assertRaises(InvalidEnumValue):
            registry.register("/", {"og_type": "bogus"})
        with self.assertRaises(UnknownField):
            registry.register("/", {"author": "me"})
        self.assertNotIn("/", registry)

    def test_negative_indent(self):
        with self.assertRaises(ValueError):
            SeoRegistry(indent=-2)


class PageBlockTests(SimpleTestCase):
    def test_block_registers_on_exit(self):
        registry = SeoRegistry()
        with registry.page("/") as page:
            page.set("title", "Home")
            page.set("og_type", "website")
            self.assertNotIn("/", registry)
        self.assertEqual(registry.lookup("/"), PageMeta(title="Home", og_type="website"))

    def test_block_does_not_register_on_error(self):
        registry = SeoRegistry()
        with self.assertRaises(InvalidEnumValue):
            with registry.page("/") as page:
                page.set("title", "Home")
                page.set("twitter_card", "invalid")
        self.assertNotIn("/", registry)

    def test_block_rejects_duplicate(self):
        registry = SeoRegistry()
        registry.register("/", {})
        with self.assertRaises(DuplicatePath):
            with registry.page("/"):
                pass


class FromConfigTests(SimpleTestCase):
    def test_mapping(self):
        registry = SeoRegistry.from_config({"/": {"title": "Home"}, "/a/": {}}, indent=1)
        self.assertEqual(registry.paths(), ["/", "/a/"])
        self.assertEqual(registry.render_for("/"), " <title>Home</title>")

    def test_pairs_reject_duplicates(self):
        with self.assertRaises(DuplicatePath):
            SeoRegistry.from_config([("/", {"title": "A"}), ("/", {"title": "B"})])
