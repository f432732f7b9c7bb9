"""Configuration constants for ipormac application."""

# Address types
IPV4 = 'IPv4'
IPV6 = 'IPv6'
MAC = 'MAC'
NONE = 'none'  # Deliberately malformed near-miss

FAMILIES = (IPV4, IPV6, MAC)
ADDRESS_TYPES = FAMILIES + (NONE,)

# Question mix: relative weight of each answer type, fixed per generator
TYPE_WEIGHTS = {IPV4: 1, IPV6: 1, MAC: 1, NONE: 1}

# Safety cap on re-rolls when a generated token lands in the wrong family
MAX_GENERATION_ATTEMPTS = 100

# Scoring
DEFAULT_SITE_KEY = 'network-addresses'
CORRECT_POINTS = 100
MAX_POINTS = 100

# Streak display
STREAK_EMOJI = '🔥'
STREAK_MAX_EMOJI = '🌟'
STREAK_EMOJI_CAP = 10

# Default level ladder, ascending on both thresholds
DEFAULT_LEVELS = [
    {'emoji': '🥚', 'title': 'Egg', 'description': 'Just getting started',
     'min_points': 0, 'min_accuracy': 0},
    {'emoji': '🐣', 'title': 'Hatchling', 'description': 'Cracking the basics of address formats',
     'min_points': 500, 'min_accuracy': 50},
    {'emoji': '🐥', 'title': 'Duckling', 'description': 'Spotting dots, colons and dashes',
     'min_points': 1500, 'min_accuracy': 60},
    {'emoji': '🦆', 'title': 'Duck', 'description': 'Confident with IPv4, IPv6 and MAC',
     'min_points': 3000, 'min_accuracy': 70},
    {'emoji': '🦢', 'title': 'Swan', 'description': 'Near-misses rarely fool you',
     'min_points': 6000, 'min_accuracy': 80},
    {'emoji': '👑', 'title': 'Duck Master', 'description': 'The ultimate network address master',
     'min_points': 10000, 'min_accuracy': 90},
]

# Local state
STATE_DIR_ENV = 'IPORMAC_STATE_DIR'
CONFIG_FILE_ENV = 'IPORMAC_CONFIG'
SEED_ENV = 'IPORMAC_SEED'
DEFAULT_STATE_DIR = '~/.local/share/ipormac'
DEFAULT_CONFIG_FILE = '~/.config/ipormac/config.json'
