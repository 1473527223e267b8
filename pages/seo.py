"""
Page metadata for the demo site.

Declared once at import time; values are static strings and are rendered
without HTML escaping.
"""
from seo_meta.registry import SeoRegistry

registry = SeoRegistry(indent=4)

with registry.page("/") as page:
    page.set("title", "Acme Widgets")
    page.set("description", """
        Hand-made widgets,
        shipped worldwide.
    """)
    page.set("canonical", "https://acme.example/")
    page.set("og_type", "website")
    page.set("og_title", "Acme Widgets")
    page.set("og_site_name", "Acme")
    page.set("og_image", "https://acme.example/static/og.png")
    page.set("twitter_card", "summary_large_image")
    page.set("twitter_site", "@acme")

with registry.page("/contact/") as page:
    page.update(
        title="Contact us",
        description="Our contact page is awesome",
        og_title="Contact us",
        og_description="Our contact page",
        twitter_title="Contact us",
    )

registry.register("/about/", {
    "title": "About Acme",
    "description": "Who builds the widgets.",
    "ogType": "profile",
})
