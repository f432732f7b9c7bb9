"""Site configurations and format hints."""

from .config import DEFAULT_SITE_KEY, CORRECT_POINTS, MAX_POINTS
from .models import Level


class SiteConfig:
    """Per-site quiz settings. Each site keeps its own score history."""

    def __init__(self, site_key: str, title: str, subtitle: str, icon: str,
                 correct_points: int = CORRECT_POINTS, max_points: int = MAX_POINTS,
                 custom_levels: list[dict] = None):
        self.site_key = site_key
        self.title = title
        self.subtitle = subtitle
        self.icon = icon
        self.correct_points = correct_points
        self.max_points = max_points
        self.custom_levels = custom_levels

    def get_levels(self) -> list[Level] | None:
        """Custom level ladder, or None to use the default one."""
        if not self.custom_levels:
            return None
        return [Level.from_dict(data) for data in self.custom_levels]

    def to_dict(self) -> dict:
        return {
            'site_key': self.site_key,
            'title': self.title,
            'subtitle': self.subtitle,
            'icon': self.icon,
            'correct_points': self.correct_points,
            'max_points': self.max_points
        }


SITE_CONFIGS = {
    DEFAULT_SITE_KEY: SiteConfig(
        DEFAULT_SITE_KEY,
        title="Network Address Practice",
        subtitle="Master the identification of IPv4, IPv6, and MAC addresses",
        icon="🦆",
    ),
    'network-addresses-sprint': SiteConfig(
        'network-addresses-sprint',
        title="IP or MAC? Sprint",
        subtitle="A shorter ladder for quick revision sessions",
        icon="⚡",
        custom_levels=[
            {'emoji': '🐣', 'title': 'Starter', 'description': 'Warming up',
             'min_points': 0, 'min_accuracy': 0},
            {'emoji': '🦆', 'title': 'Sprinter', 'description': 'Quick and accurate',
             'min_points': 1000, 'min_accuracy': 70},
            {'emoji': '🏆', 'title': 'Champion', 'description': 'Nothing gets past you',
             'min_points': 3000, 'min_accuracy': 90},
        ],
    ),
}


def get_site_config(site_key: str) -> SiteConfig:
    """Get site configuration by key, falling back to the default site."""
    return SITE_CONFIGS.get(site_key) or SITE_CONFIGS[DEFAULT_SITE_KEY]


NETWORK_ADDRESS_HINTS = [
    {
        'title': 'IPv4',
        'description': '4 decimal numbers (0-255) separated by dots, no leading zeros',
        'examples': ['Example: 192.168.1.1'],
    },
    {
        'title': 'IPv6',
        'description': ('8 groups of up to 4 hex digits separated by colons. '
                        'One run of zero groups can be compressed to "::".'),
        'examples': [
            'Example: 2001:0db8:85a3:0000:0000:8a2e:0370:7334',
            'Compressed: 2001:db8::8a2e:370:7334',
        ],
    },
    {
        'title': 'MAC',
        'description': '6 pairs of hex digits separated by colons or dashes (not both)',
        'examples': ['Example: 00:1A:2B:3C:4D:5E or 00-1A-2B-3C-4D-5E'],
    },
]
