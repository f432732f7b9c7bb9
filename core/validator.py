"""Syntactic validation of IPv4, IPv6 and MAC addresses.

Each family has a single checker, ``find_defect``, that walks the grammar and
returns the first rule the token breaks. Validity is defined as "no defect",
so the positive checks and the defect classification always agree, and the
generator uses the same function to confirm the defect it injected.

Rules are checked structure first (separators, group count), then group
content from left to right.
"""

import re

from .config import IPV4, IPV6, MAC, NONE, FAMILIES

# Defect classes
WRONG_GROUP_COUNT = 'wrong_group_count'
EMPTY_GROUP = 'empty_group'
NON_NUMERIC_GROUP = 'non_numeric_group'
LEADING_ZERO = 'leading_zero'
OCTET_OUT_OF_RANGE = 'octet_out_of_range'
MULTIPLE_COMPRESSION = 'multiple_compression'
TOO_MANY_GROUPS = 'too_many_groups'
NON_HEX_DIGIT = 'non_hex_digit'
GROUP_TOO_LONG = 'group_too_long'
WRONG_LENGTH = 'wrong_length'
MIXED_SEPARATORS = 'mixed_separators'
GROUP_LENGTH = 'group_length'

DEFECT_CLASSES = {
    IPV4: (WRONG_GROUP_COUNT, EMPTY_GROUP, NON_NUMERIC_GROUP, LEADING_ZERO, OCTET_OUT_OF_RANGE),
    IPV6: (MULTIPLE_COMPRESSION, TOO_MANY_GROUPS, EMPTY_GROUP, NON_HEX_DIGIT,
           GROUP_TOO_LONG, WRONG_LENGTH),
    MAC: (MIXED_SEPARATORS, WRONG_GROUP_COUNT, NON_HEX_DIGIT, GROUP_LENGTH),
}

DEFECT_REASONS = {
    IPV4: {
        WRONG_GROUP_COUNT: "does not have exactly 4 octets",
        EMPTY_GROUP: "has an empty octet",
        NON_NUMERIC_GROUP: "contains an octet that is not a number",
        LEADING_ZERO: "has an octet with a leading zero",
        OCTET_OUT_OF_RANGE: "has an octet greater than 255",
    },
    IPV6: {
        MULTIPLE_COMPRESSION: "uses '::' more than once",
        TOO_MANY_GROUPS: "has more than 8 groups",
        EMPTY_GROUP: "has an empty group outside of '::'",
        NON_HEX_DIGIT: "contains a character that is not a hex digit",
        GROUP_TOO_LONG: "has a group with more than 4 hex digits",
        WRONG_LENGTH: "does not expand to exactly 8 groups",
    },
    MAC: {
        MIXED_SEPARATORS: "mixes ':' and '-' separators",
        WRONG_GROUP_COUNT: "does not have exactly 6 pairs",
        NON_HEX_DIGIT: "contains a character that is not a hex digit",
        GROUP_LENGTH: "has a group that is not exactly 2 hex digits",
    },
}

IPV4_GROUPS = 4
IPV6_GROUPS = 8
IPV6_GROUP_DIGITS = 4
MAC_GROUPS = 6
MAC_GROUP_DIGITS = 2
MAX_OCTET = 255

_DECIMAL = re.compile(r'[0-9]+')
_HEX = re.compile(r'[0-9a-fA-F]+')


def find_ipv4_defect(address: str) -> str | None:
    groups = address.split('.')
    if len(groups) != IPV4_GROUPS:
        return WRONG_GROUP_COUNT
    for group in groups:
        if not group:
            return EMPTY_GROUP
        if not _DECIMAL.fullmatch(group):
            return NON_NUMERIC_GROUP
        if len(group) > 1 and group[0] == '0':
            return LEADING_ZERO
        if int(group) > MAX_OCTET:
            return OCTET_OUT_OF_RANGE
    return None


def _hex_group_defect(group: str) -> str | None:
    if not group:
        return EMPTY_GROUP
    if not _HEX.fullmatch(group):
        return NON_HEX_DIGIT
    if len(group) > IPV6_GROUP_DIGITS:
        return GROUP_TOO_LONG
    return None


def find_ipv6_defect(address: str) -> str | None:
    compressions = address.count('::')
    if compressions > 1:
        return MULTIPLE_COMPRESSION

    if compressions == 1:
        head, tail = address.split('::', 1)
        groups = (head.split(':') if head else []) + (tail.split(':') if tail else [])
    else:
        groups = address.split(':')

    if len(groups) > IPV6_GROUPS:
        return TOO_MANY_GROUPS
    for group in groups:
        defect = _hex_group_defect(group)
        if defect:
            return defect
    # '::' stands for at least one zero group
    if compressions == 1:
        if len(groups) >= IPV6_GROUPS:
            return WRONG_LENGTH
    elif len(groups) != IPV6_GROUPS:
        return WRONG_LENGTH
    return None


def find_mac_defect(address: str) -> str | None:
    if ':' in address and '-' in address:
        return MIXED_SEPARATORS
    separator = '-' if '-' in address else ':'
    groups = address.split(separator)
    if len(groups) != MAC_GROUPS:
        return WRONG_GROUP_COUNT
    for group in groups:
        if group and not _HEX.fullmatch(group):
            return NON_HEX_DIGIT
        if len(group) != MAC_GROUP_DIGITS:
            return GROUP_LENGTH
    return None


_CHECKERS = {
    IPV4: find_ipv4_defect,
    IPV6: find_ipv6_defect,
    MAC: find_mac_defect,
}


def find_defect(address: str, family: str) -> str | None:
    """Return the first defect that keeps ``address`` out of ``family``, or None if valid."""
    try:
        checker = _CHECKERS[family]
    except KeyError:
        raise ValueError(f"Unknown address family: {family!r}") from None
    return checker(address)


def is_valid(address: str, family: str) -> bool:
    return find_defect(address, family) is None


def is_valid_ipv4(address: str) -> bool:
    return find_ipv4_defect(address) is None


def is_valid_ipv6(address: str) -> bool:
    return find_ipv6_defect(address) is None


def is_valid_mac(address: str) -> bool:
    return find_mac_defect(address) is None


def classify(address: str) -> str:
    """Return the family ``address`` is valid for, or 'none'."""
    for family in FAMILIES:
        if is_valid(address, family):
            return family
    return NONE


def describe_defect(defect: str, family: str) -> str:
    """Generic human-readable reason for a defect, e.g. 'has an octet greater than 255'."""
    try:
        return DEFECT_REASONS[family][defect]
    except KeyError:
        raise ValueError(f"Unknown defect {defect!r} for {family}") from None
