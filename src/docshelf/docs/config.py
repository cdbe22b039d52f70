"""Configuration dataclass for keyword search.

Pure data container with the stock scoring weights as defaults.
Override from the ``search`` section of a Config, or via constructor args.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

from docshelf.core.exceptions import ConfigurationError

if TYPE_CHECKING:
    from docshelf.core.config import Config

_WEIGHT_FIELDS = (
    "title_phrase",
    "id_phrase",
    "summary_phrase",
    "body_phrase",
    "title_term",
    "id_term",
    "summary_term",
    "body_term",
)
_EXCERPT_FIELDS = ("excerpt_lead", "excerpt_length")


@dataclass(frozen=True)
class SearchConfig:
    """Settings for scoring and excerpt extraction.

    Attributes:
        title_phrase: Added when the whole query appears in the title.
        id_phrase: Added when the whole query appears in the id.
        summary_phrase: Added when the whole query appears in the summary.
        body_phrase: Added when the whole query appears in the body.
        title_term: Added per query term found in the title.
        id_term: Added per query term found in the id.
        summary_term: Added per query term found in the summary.
        body_term: Added per query term found in the body.
        excerpt_lead: Characters of body kept before the phrase match.
        excerpt_length: Characters of body kept from the match start.
        ellipsis: Marker for a clipped excerpt edge.
        max_results: Cap on returned results. None = no cap.
    """

    title_phrase: int = 100
    id_phrase: int = 75
    summary_phrase: int = 50
    body_phrase: int = 25
    title_term: int = 10
    id_term: int = 7
    summary_term: int = 5
    body_term: int = 2
    excerpt_lead: int = 50
    excerpt_length: int = 200
    ellipsis: str = "..."
    max_results: int | None = None

    @classmethod
    def from_config(cls, config: Config) -> SearchConfig:
        """Build from ``search.weights``, ``search.excerpt`` and ``search.max_results``.

        Values may arrive as strings from env vars; they are coerced to int.
        """
        overrides: dict[str, Any] = {}
        weights = config.get("search.weights", {}) or {}
        excerpt = config.get("search.excerpt", {}) or {}

        for section, allowed, values in (
            ("search.weights", _WEIGHT_FIELDS, weights),
            ("search.excerpt", _EXCERPT_FIELDS, excerpt),
        ):
            if not isinstance(values, dict):
                raise ConfigurationError(f"{section} must be a mapping, got {values!r}")
            for key, value in values.items():
                if key == "ellipsis" and section == "search.excerpt":
                    continue
                if key not in allowed:
                    raise ConfigurationError(f"Unknown setting {section}.{key}")
                overrides[key] = _as_int(f"{section}.{key}", value)

        if "ellipsis" in excerpt:
            overrides["ellipsis"] = str(excerpt["ellipsis"])

        max_results = config.get("search.max_results")
        if max_results not in (None, ""):
            overrides["max_results"] = _as_int("search.max_results", max_results) or None

        return cls(**overrides)

    def weights(self) -> dict[str, int]:
        return {f.name: getattr(self, f.name) for f in fields(self) if f.name in _WEIGHT_FIELDS}


def _as_int(key: str, value: Any) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{key} must be an integer, got {value!r}") from None
    if number < 0:
        raise ConfigurationError(f"{key} must not be negative, got {number}")
    return number
