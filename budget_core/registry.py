"""Read-only category metadata lookup.

The registry maps category keys to display names, icons, colours and
groups. It is built from the category hierarchy payload and passed to
whatever needs display metadata; the redistribution and progress code never
requires it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

DEFAULT_ICON = 'tag'
DEFAULT_COLOR_HEX = '#8e8e93'

# Used when no hierarchy has been loaded yet.
FALLBACK_HIERARCHY: Dict[str, Any] = {
    'groups': [
        {
            'name': 'Fresh Food',
            'icon': 'leaf',
            'color_hex': '#34c759',
            'categories': [
                {'name': 'MEAT_FISH', 'display_name': 'Meat & Fish', 'icon': 'fish', 'color_hex': '#ff3b30'},
                {'name': 'FRESH_PRODUCE', 'display_name': 'Fresh Produce', 'icon': 'carrot'},
                {'name': 'DAIRY_EGGS', 'display_name': 'Dairy & Eggs', 'icon': 'egg', 'color_hex': '#ffcc00'},
                {'name': 'BAKERY', 'display_name': 'Bakery', 'icon': 'bread', 'color_hex': '#d2a06d'},
            ],
        },
        {
            'name': 'Pantry',
            'icon': 'basket',
            'color_hex': '#ff9500',
            'categories': [
                {'name': 'SNACKS_SWEETS', 'display_name': 'Snacks & Sweets', 'icon': 'cookie'},
                {'name': 'FROZEN', 'display_name': 'Frozen', 'icon': 'snowflake', 'color_hex': '#5ac8fa'},
                {'name': 'DRINKS_SOFT_SODA', 'display_name': 'Drinks (Soft/Soda)', 'icon': 'beer-bottle'},
            ],
        },
        {
            'name': 'Home',
            'icon': 'house',
            'color_hex': '#af52de',
            'categories': [
                {'name': 'HOUSEHOLD', 'display_name': 'Household', 'icon': 'broom'},
                {'name': 'DEPOSITS', 'display_name': 'Deposits', 'icon': 'recycle', 'budgetable': False},
            ],
        },
    ]
}


def normalize_category_name(name: str) -> str:
    """Convert enum-style names (``MEAT_FISH``) into display style.

    Names that already contain spaces or start lowercase are returned
    unchanged, as is anything that is not all caps/underscores/digits.

    Example:
        >>> normalize_category_name('FRUIT_AND_VEG')
        'Fruit & Veg'
        >>> normalize_category_name('Meat & Fish')
        'Meat & Fish'
    """
    if not name or ' ' in name or name[0].islower():
        return name
    if not all(c.isupper() or c.isdigit() or c == '_' for c in name):
        return name

    words = []
    for word in name.replace('_', ' ').split():
        lower = word.lower()
        if lower == 'and':
            words.append('&')
        elif lower == 'non':
            words.append('Non')
        else:
            words.append(word.capitalize())
    return ' '.join(words)


@dataclass
class CategoryInfo:
    name: str
    display_name: str
    group: str
    icon: str = DEFAULT_ICON
    color_hex: str = DEFAULT_COLOR_HEX
    budgetable: bool = True
    sub_categories: List[str] = field(default_factory=list)


class CategoryRegistry:
    """Category lookups keyed by internal name or display name."""

    def __init__(self, hierarchy: Optional[Dict[str, Any]] = None):
        """Build lookups from a hierarchy payload.

        Args:
            hierarchy: ``{'groups': [...]}`` payload from the categories
                       endpoint. Defaults to the built-in fallback.
        """
        self._categories: Dict[str, CategoryInfo] = {}
        self._by_display_name: Dict[str, CategoryInfo] = {}
        self._order: List[str] = []
        self._build(hierarchy if hierarchy is not None else FALLBACK_HIERARCHY)

    def _build(self, hierarchy: Dict[str, Any]) -> None:
        groups = hierarchy.get('groups') if isinstance(hierarchy, dict) else None
        if not isinstance(groups, list):
            logger.warning("Category hierarchy has no groups; registry is empty")
            return

        for group in groups:
            if not isinstance(group, dict):
                continue
            group_name = group.get('name') or 'Other'
            group_icon = group.get('icon') or DEFAULT_ICON
            group_color = group.get('color_hex') or DEFAULT_COLOR_HEX
            for entry in group.get('categories') or []:
                if not isinstance(entry, dict) or not entry.get('name'):
                    continue
                name = entry['name']
                info = CategoryInfo(
                    name=name,
                    display_name=entry.get('display_name') or normalize_category_name(name),
                    group=group_name,
                    icon=entry.get('icon') or group_icon,
                    color_hex=entry.get('color_hex') or group_color,
                    budgetable=entry.get('budgetable', True) is not False,
                    sub_categories=list(entry.get('sub_categories') or []),
                )
                self._categories[name] = info
                self._by_display_name[info.display_name] = info
                self._order.append(name)

    def get(self, category: str) -> Optional[CategoryInfo]:
        return self._categories.get(category) or self._by_display_name.get(category)

    def display_name(self, category: str) -> str:
        info = self.get(category)
        return info.display_name if info else normalize_category_name(category)

    def icon(self, category: str) -> str:
        info = self.get(category)
        return info.icon if info else DEFAULT_ICON

    def color_hex(self, category: str) -> str:
        info = self.get(category)
        return info.color_hex if info else DEFAULT_COLOR_HEX

    def group_for(self, category: str) -> str:
        info = self.get(category)
        return info.group if info else 'Other'

    @property
    def all_sub_categories(self) -> List[str]:
        """Budgetable category display names in hierarchy order."""
        return [
            self._categories[name].display_name
            for name in self._order
            if self._categories[name].budgetable
        ]
