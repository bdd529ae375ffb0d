from .errors import ReviewLinkAppError, ReviewLinkError
from .review_links import REVIEW_URL_TEMPLATE, build_review_link
from .suggestions import MIN_QUERY_LENGTH, PlaceSuggestion, should_search

__all__ = [
    "MIN_QUERY_LENGTH",
    "PlaceSuggestion",
    "REVIEW_URL_TEMPLATE",
    "ReviewLinkAppError",
    "ReviewLinkError",
    "build_review_link",
    "should_search",
]
