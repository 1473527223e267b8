from django.http import Http404
from django.shortcuts import render

POSTS = {
    "launch": {
        "title": "We launched",
        "body": "Metadata is only declared for static paths, so this page has none.",
    },
}


def home(request):
    """Render the landing page."""
    return render(request, "pages/home.html")


def contact(request):
    return render(request, "pages/contact.html")


def about(request):
    return render(request, "pages/about.html")


def post(request, slug):
    entry = POSTS.get(slug)
    if entry is None:
        raise Http404("Post not found")
    return render(request, "pages/post.html", {"post": entry})
