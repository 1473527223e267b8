from django.test import SimpleTestCase

from pages.seo import registry
from seo_meta.checks import check_seo_routes
from seo_meta.conf import get_registry


class PageHeadTests(SimpleTestCase):
    def test_home_head_tags(self):
        response = self.client.get("/")
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "    <title>Acme Widgets</title>")
        self.assertContains(
            response,
            '    <meta name="description" content="Hand-made widgets, shipped worldwide." />',
        )
        self.assertContains(response, '<meta property="twitter:card" content="summary_large_image" />')
        self.assertNotContains(response, "<title>Acme</title>")

    def test_home_tags_are_ordered_by_field_name(self):
        html = self.client.get("/").content.decode()
        canonical = html.index('rel="canonical"')
        og_type = html.index('property="og:type"')
        title = html.index("<title>Acme Widgets</title>")
        twitter_site = html.index('property="twitter:site"')
        self.assertTrue(canonical < og_type < title < twitter_site)

    def test_contact_head_tags(self):
        response = self.client.get("/contact/")
        self.assertContains(response, '<meta property="og:description" content="Our contact page" />')
        self.assertContains(response, '<meta property="twitter:title" content="Contact us" />')

    def test_about_page_reads_metadata(self):
        response = self.client.get("/about/")
        self.assertContains(response, "<h1>About Acme</h1>")
        self.assertContains(response, '<meta property="og:type" content="profile" />')

    def test_unregistered_path_falls_back(self):
        response = self.client.get("/blog/launch/")
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "<title>Acme</title>")
        self.assertNotContains(response, "og:")
        self.assertNotContains(response, "twitter:")


class DemoRegistryTests(SimpleTestCase):
    def test_settings_point_at_demo_registry(self):
        self.assertIs(get_registry(), registry)
        self.assertEqual(registry.paths(), ["/", "/about/", "/contact/"])

    def test_every_static_route_has_metadata(self):
        self.assertEqual(check_seo_routes(), [])
