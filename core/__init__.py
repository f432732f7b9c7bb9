from .models import GeneratedAddress, AttemptRecord, Level, OverallStats
from .interfaces import Storage
from .validator import find_defect, is_valid, classify
from .generator import AddressGenerator
from .store import ScoreStore
from .leveling import level_for, LevelStatus
from .scoring import ScoreManager
from .config import (
    IPV4, IPV6, MAC, NONE, FAMILIES, ADDRESS_TYPES,
    DEFAULT_SITE_KEY, DEFAULT_LEVELS
)

__all__ = [
    'GeneratedAddress', 'AttemptRecord', 'Level', 'OverallStats',
    'Storage',
    'find_defect', 'is_valid', 'classify',
    'AddressGenerator',
    'ScoreStore',
    'level_for', 'LevelStatus',
    'ScoreManager',
    'IPV4', 'IPV6', 'MAC', 'NONE', 'FAMILIES', 'ADDRESS_TYPES',
    'DEFAULT_SITE_KEY', 'DEFAULT_LEVELS'
]
