"""
Similarity metrics — normalized overlap scores between tag-like collections.

All comparisons are case-insensitive: inputs pass through `normalize_tags`
once, at the boundary of each metric.
"""
from __future__ import annotations
from types import MappingProxyType
from typing import FrozenSet, Iterable, Mapping, Optional, Tuple, Union

TagInput = Optional[Union[str, Iterable[str]]]

# Category -> related creative themes. Unknown categories relate only to themselves.
THEME_TAXONOMY: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "fashion": ("fashion", "luxury", "beauty", "lifestyle"),
    "food": ("food", "restaurant", "hospitality", "lifestyle"),
    "technology": ("technology", "startup", "innovation", "corporate"),
    "real_estate": ("real_estate", "architecture", "luxury", "interior"),
    "travel": ("travel", "tourism", "adventure", "landscape", "culture"),
    "automotive": ("automotive", "luxury", "commercial"),
    "healthcare": ("healthcare", "education", "social_impact"),
    "finance": ("finance", "corporate", "technology"),
})


def normalize_tags(values: TagInput) -> FrozenSet[str]:
    """
    Lowercase + strip every entry and drop empty ones.
    Accepts None, a single string, or any iterable of strings.
    """
    if values is None:
        return frozenset()
    if isinstance(values, str):
        values = [values]
    cleaned = (str(v).strip().lower() for v in values if v)
    return frozenset(v for v in cleaned if v)


def jaccard(set_a: TagInput, set_b: TagInput) -> float:
    """
    |A ∩ B| / |A ∪ B| over the normalized tags.
    Returns 0.0 if either side is empty. Symmetric, range [0, 1].
    """
    a = normalize_tags(set_a)
    b = normalize_tags(set_b)
    if not a or not b:
        return 0.0
    return len(a & b) / len(a | b)


def related_themes(category: Optional[str]) -> Tuple[str, ...]:
    key = (category or "").strip().lower()
    return THEME_TAXONOMY.get(key, (key,))


def theme_overlap(category: Optional[str], themes: TagInput) -> float:
    """
    Fraction of the category's related themes covered by `themes`, capped at 1.

    Asymmetric: only the category side is expanded through the taxonomy.
    """
    related = related_themes(category)
    hits = sum(1 for theme in normalize_tags(themes) if theme in related)
    return min(hits / len(related), 1.0)
