from django.http import JsonResponse
from django.views import View

from .conf import get_registry


class SeoMetaDetailView(View):
    """Return the registered metadata and rendered tags for ``?path=``."""

    def get(self, request):
        path = request.GET.get("path")
        if not path:
            return JsonResponse({"detail": "Missing 'path' query parameter"}, status=400)
        registry = get_registry()
        page = registry.lookup(path)
        if page is None:
            return JsonResponse({"detail": f"No metadata registered for {path}"}, status=404)
        return JsonResponse(
            {
                "path": path,
                "fields": page.as_dict(),
                "html": str(registry.render_for(path)),
            }
        )
