from __future__ import annotations

from dataclasses import dataclass, fields as dataclass_fields
from typing import Any, Mapping

from .constants import ENUM_FIELDS, FIELD_NAMES
from .exceptions import InvalidEnumValue, InvalidFieldValue, UnknownField


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


# ogSiteName -> og_site_name
_CAMEL_NAMES = {_camel_case(name): name for name in FIELD_NAMES}


def canonical_field_name(name: str) -> str:
    """Map ``ogSiteName`` style names onto ``og_site_name``."""
    if not isinstance(name, str):
        raise UnknownField(name, FIELD_NAMES)
    if name in FIELD_NAMES:
        return name
    if name in _CAMEL_NAMES:
        return _CAMEL_NAMES[name]
    raise UnknownField(name, FIELD_NAMES)


def validate_field(name: str, value: Any) -> str:
    """Validate a single field assignment and return its canonical name."""
    field = canonical_field_name(name)
    if value is None:
        return field
    if not isinstance(value, str) or not value.strip():
        raise InvalidFieldValue(field, value)
    allowed = ENUM_FIELDS.get(field)
    if allowed is not None and value not in allowed:
        raise InvalidEnumValue(field, value, allowed)
    return field


@dataclass(frozen=True)
class PageMeta:
    """
    Static head metadata for one page.

    Every field is optional; ``None`` means the tag is not emitted. Values are
    expected to be developer-authored strings fixed at start-up: they are
    rendered without HTML escaping.
    """

    # HTML
    title: str | None = None
    description: str | None = None
    canonical: str | None = None

    # Open Graph
    og_type: str | None = None
    og_title: str | None = None
    og_description: str | None = None
    og_image: str | None = None
    og_site_name: str | None = None
    og_url: str | None = None

    # Twitter Card
    twitter_card: str | None = None
    twitter_site: str | None = None
    twitter_title: str | None = None
    twitter_description: str | None = None
    twitter_url: str | None = None
    twitter_image: str | None = None

    def __post_init__(self):
        for item in dataclass_fields(self):
            validate_field(item.name, getattr(self, item.name))

    @classmethod
    def create(cls, values: Mapping[str, Any] | None = None, **kwargs: Any) -> "PageMeta":
        return cls.builder().update(values, **kwargs).build()

    @classmethod
    def builder(cls) -> "PageMetaBuilder":
        return PageMetaBuilder()

    def as_dict(self) -> dict[str, str]:
        """Present fields only, ordered by field name."""
        return {
            name: getattr(self, name)
            for name in sorted(FIELD_NAMES)
            if getattr(self, name) is not None
        }

    @property
    def is_empty(self) -> bool:
        return not self.as_dict()


class PageMetaBuilder:
    """
    Collects field assignments and produces an immutable ``PageMeta``.

    Assignments are validated as they are made, and once more by ``build()``.
    """

    def __init__(self):
        self._values: dict[str, str | None] = {}

    def set(self, name: str, value: str | None) -> "PageMetaBuilder":
        field = validate_field(name, value)
        self._values[field] = value
        return self

    def update(self, values: Mapping[str, Any] | None = None, **kwargs: Any) -> "PageMetaBuilder":
        for name, value in dict(values or {}, **kwargs).items():
            self.set(name, value)
        return self

    def build(self) -> PageMeta:
        return PageMeta(**self._values)

    def __repr__(self) -> str:
        return f"<PageMetaBuilder {sorted(self._values)}>"
