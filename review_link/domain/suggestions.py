"""
Place Suggestions
=================

The record the search box shows: display text plus the opaque Google place
identifier. Nothing else from the upstream prediction is kept.
"""

from dataclasses import dataclass, asdict
from typing import Optional

MIN_QUERY_LENGTH = 3


@dataclass(frozen=True)
class PlaceSuggestion:
    """A candidate business match."""
    description: str
    place_id: str

    @classmethod
    def from_prediction(cls, prediction: dict) -> Optional["PlaceSuggestion"]:
        """
        Project one Places Autocomplete prediction down to description/place_id.

        Returns None when the prediction has no usable place_id, since such
        an entry could never produce a review link.
        """
        place_id = prediction.get("place_id")
        if not isinstance(place_id, str) or not place_id.strip():
            return None
        description = prediction.get("description")
        return cls(
            description=str(description) if description is not None else "",
            place_id=place_id,
        )

    def to_dict(self) -> dict:
        return asdict(self)


def should_search(query: Optional[str], min_length: int = MIN_QUERY_LENGTH) -> bool:
    """True when the trimmed query is long enough to be worth a lookup."""
    if not query:
        return False
    return len(query.strip()) >= min_length
