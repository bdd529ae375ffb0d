# Review Link Generator - Google Review Link Builder
# ==================================================
# Find a business by name and get a ready-to-share "leave a Google review" link.
#
# ARCHITECTURE LAYERS:
# - Presentation:   Web page + JSON API (review_link.web)
# - Domain:         Suggestions and link building (no external dependencies)
# - Infrastructure: Google Places proxy client, settings
#
# The Google Maps key only lives in the infrastructure layer; the browser
# never sees it.

__version__ = "0.1.0"
