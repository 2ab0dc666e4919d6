"""Category metadata lookups.

Every lookup has an explicit default for keys that are not in the table:

- display name: the key with underscores replaced by spaces, title-cased
- icon: ``DEFAULT_ICON``
- group: ``CategoryGroup.OTHER``
"""

from typing import Iterable

from facts.models import Category, Fact
from shared_types import CategoryGroup

DEFAULT_ICON = "star.circle"

DISPLAY_NAMES: dict[str, str] = {
    "business": "Business & Startups",
    "technology": "Technology",
    "society": "Society & Culture",
    "economics": "Economics",
    "education": "Education",
    "philosophy": "Philosophy",
    "innovation": "Innovation",
    "politics": "Politics",
    "future": "Future Trends",
}

ICONS: dict[str, str] = {
    "business": "briefcase.fill",
    "technology": "cpu",
    "society": "person.3.fill",
    "economics": "chart.line.uptrend.xyaxis",
    "education": "graduationcap.fill",
    "philosophy": "brain",
    "innovation": "lightbulb.fill",
    "politics": "building.columns.fill",
    "future": "arrow.forward.circle.fill",
}

GROUPS: dict[str, CategoryGroup] = {
    "business": CategoryGroup.BUSINESS,
    "economics": CategoryGroup.BUSINESS,
    "innovation": CategoryGroup.BUSINESS,
    "philosophy": CategoryGroup.THINKING,
    "education": CategoryGroup.THINKING,
    "future": CategoryGroup.THINKING,
    "society": CategoryGroup.SOCIAL,
    "politics": CategoryGroup.SOCIAL,
    "technology": CategoryGroup.TECHNOLOGY,
}


def display_name_for(key: str) -> str:
    return DISPLAY_NAMES.get(key) or key.replace("_", " ").title()


def icon_for(key: str) -> str:
    return ICONS.get(key, DEFAULT_ICON)


def group_for(key: str) -> CategoryGroup:
    return GROUPS.get(key, CategoryGroup.OTHER)


def make_category(key: str) -> Category:
    return Category(key=key, display_name=display_name_for(key), icon=icon_for(key), group=group_for(key))


def categories_from_facts(facts: Iterable[Fact]) -> list[Category]:
    """Distinct categories present in *facts*, sorted by display name."""
    keys = {f.category for f in facts}
    return sorted((make_category(k) for k in keys), key=lambda c: c.display_name)


def categories_in_group(categories: Iterable[Category], group: CategoryGroup) -> list[Category]:
    return [c for c in categories if c.group == group]
