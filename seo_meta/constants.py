"""
Constants for page metadata: field names and the enumerated tag values.
"""

# Basic HTML head tags
BASIC_FIELDS = (
    "title",
    "description",
    "canonical",
)

# Open Graph (property="og:*")
OPEN_GRAPH_FIELDS = (
    "og_type",
    "og_title",
    "og_description",
    "og_image",
    "og_site_name",
    "og_url",
)

# Twitter Card (property="twitter:*")
TWITTER_FIELDS = (
    "twitter_card",
    "twitter_site",
    "twitter_title",
    "twitter_description",
    "twitter_url",
    "twitter_image",
)

FIELD_NAMES = BASIC_FIELDS + OPEN_GRAPH_FIELDS + TWITTER_FIELDS

TWITTER_CARDS = (
    "summary",
    "summary_large_image",
    "app",
    "player",
    "gallery",
    "product",
    "lead_generation",
    "website",
)

OG_TYPES = (
    "music.song",
    "music.album",
    "music.playlist",
    "music.radio_station",
    "video.movie",
    "video.episode",
    "video.tv_show",
    "video.other",
    "article",
    "book",
    "profile",
    "website",
)

ENUM_FIELDS = {
    "og_type": OG_TYPES,
    "twitter_card": TWITTER_CARDS,
}

# Leading spaces before each rendered tag line
DEFAULT_INDENT = 4

# Characters that mark a parameterised route ("/users/:id", "/users/<int:pk>/", regex groups)
PATH_PARAMETER_MARKERS = (":", "<", "(")
