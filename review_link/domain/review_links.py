"""
Review Link Builder
===================

Turns a place identifier into the "write a review" URL Google opens straight
on the review dialog for that business.
"""

import logging
from typing import Optional
from urllib.parse import quote

from .errors import ReviewLinkError

logger = logging.getLogger(__name__)

REVIEW_URL_TEMPLATE = "https://search.google.com/local/writereview?placeid={place_id}"


def build_review_link(place_id: Optional[str], template: Optional[str] = None) -> str:
    """
    Build the review link for a place.

    Args:
        place_id: Google place identifier from a selected suggestion.
        template: URL template with a ``{place_id}`` placeholder.
            Defaults to the Google write-review URL.

    Returns:
        The populated URL. Same input always gives the same link.

    Raises:
        ReviewLinkError: if no place identifier was given.
    """
    if not place_id or not place_id.strip():
        raise ReviewLinkError("place_id query parameter is required")

    template = template or REVIEW_URL_TEMPLATE
    # Plain substitution, same as the page script; other braces in the template stay literal
    link = template.replace("{place_id}", quote(place_id.strip(), safe=""))
    logger.debug(f"Built review link for place {place_id}")
    return link
