"""Random address generation for the drill.

The generator produces valid addresses for each family and near-misses with
exactly one injected defect. Randomness comes from an injectable
``random.Random`` so a seed reproduces the same question sequence.
"""

import logging
import random
import string

from .config import (
    IPV4, IPV6, MAC, NONE, FAMILIES, ADDRESS_TYPES,
    TYPE_WEIGHTS, MAX_GENERATION_ATTEMPTS
)
from .models import GeneratedAddress
from . import validator as v

logger = logging.getLogger(__name__)

IPV6_STYLES = ('expanded', 'trimmed', 'compressed')
MAC_SEPARATORS = (':', '-')

# Defects the generator knows how to inject, per family
INJECTABLE_DEFECTS = {
    IPV4: (v.OCTET_OUT_OF_RANGE, v.WRONG_GROUP_COUNT, v.NON_NUMERIC_GROUP, v.LEADING_ZERO),
    IPV6: (v.TOO_MANY_GROUPS, v.MULTIPLE_COMPRESSION, v.GROUP_TOO_LONG,
           v.NON_HEX_DIGIT, v.WRONG_LENGTH),
    MAC: (v.WRONG_GROUP_COUNT, v.GROUP_LENGTH, v.NON_HEX_DIGIT, v.MIXED_SEPARATORS),
}

# Letters that can never be hex digits
NON_HEX_LETTERS = 'ghijklmnopqrstuvwxyz'


class AddressGenerator:
    """Builds random questions with their ground-truth labels."""

    def __init__(self, rng: random.Random = None, weights: dict = None):
        self.rng = rng or random.Random()
        weights = weights or TYPE_WEIGHTS
        unknown = set(weights) - set(ADDRESS_TYPES)
        if unknown:
            raise ValueError(f"Unknown address types in weights: {sorted(unknown)}")
        if not any(w > 0 for w in weights.values()) or any(w < 0 for w in weights.values()):
            raise ValueError("Type weights must be non-negative with at least one positive")
        self.types = list(weights)
        self.weights = [weights[t] for t in self.types]

    def generate(self) -> GeneratedAddress:
        """Generate one question. The type is drawn from the configured weights."""
        address_type = self.rng.choices(self.types, weights=self.weights)[0]
        if address_type == NONE:
            return self.generate_invalid()
        return GeneratedAddress(self.generate_valid(address_type), address_type)

    # ------------------------------------------------------------------
    # Valid addresses
    # ------------------------------------------------------------------

    def generate_valid(self, family: str) -> str:
        if family == IPV4:
            return self._join_ipv4(self._ipv4_octets())
        if family == IPV6:
            return self._format_ipv6(self._ipv6_groups(), self.rng.choice(IPV6_STYLES))
        if family == MAC:
            return self.rng.choice(MAC_SEPARATORS).join(self._mac_groups())
        raise ValueError(f"Unknown address family: {family!r}")

    def _ipv4_octets(self) -> list[str]:
        return [str(self.rng.randint(0, v.MAX_OCTET)) for _ in range(v.IPV4_GROUPS)]

    @staticmethod
    def _join_ipv4(octets: list[str]) -> str:
        return '.'.join(octets)

    def _ipv6_groups(self) -> list[int]:
        groups = [self.rng.randint(0, 0xffff) for _ in range(v.IPV6_GROUPS)]
        # Zero runs make '::' compression meaningful
        if self.rng.random() < 0.5:
            start = self.rng.randrange(v.IPV6_GROUPS)
            length = self.rng.randint(1, min(4, v.IPV6_GROUPS - start))
            groups[start:start + length] = [0] * length
        return groups

    def _format_ipv6(self, groups: list[int], style: str) -> str:
        if style == 'expanded':
            return ':'.join(f'{g:04x}' for g in groups)
        if style == 'trimmed':
            return ':'.join(f'{g:x}' for g in groups)
        start, length = self._zero_run(groups)
        head = ':'.join(f'{g:x}' for g in groups[:start])
        tail = ':'.join(f'{g:x}' for g in groups[start + length:])
        return f'{head}::{tail}'

    def _zero_run(self, groups: list[int]) -> tuple[int, int]:
        """Longest run of zero groups, or a random single group zeroed in place."""
        best_start, best_length = 0, 0
        start = None
        for i, g in enumerate(groups + [1]):
            if g == 0 and start is None:
                start = i
            elif g != 0 and start is not None:
                if i - start > best_length:
                    best_start, best_length = start, i - start
                start = None
        if best_length == 0:
            best_start, best_length = self.rng.randrange(len(groups)), 1
            groups[best_start] = 0
        return best_start, best_length

    def _mac_groups(self) -> list[str]:
        return [f'{self.rng.randint(0, 0xff):02X}' for _ in range(v.MAC_GROUPS)]

    # ------------------------------------------------------------------
    # Near-misses
    # ------------------------------------------------------------------

    def generate_invalid(self, family: str = None, defect: str = None) -> GeneratedAddress:
        """Generate a near-miss modelled on ``family`` with one injected ``defect``.

        Both are chosen at random when omitted. Candidates that break a
        different rule than intended, or that happen to be valid for another
        family, are re-rolled.
        """
        family = family or self.rng.choice(FAMILIES)
        if family not in INJECTABLE_DEFECTS:
            raise ValueError(f"Unknown address family: {family!r}")
        defect = defect or self.rng.choice(INJECTABLE_DEFECTS[family])
        if defect not in INJECTABLE_DEFECTS[family]:
            raise ValueError(f"Cannot inject {defect!r} into {family}")

        inject = getattr(self, f'_inject_{family.lower()}')
        for _ in range(MAX_GENERATION_ATTEMPTS):
            address, corrected, reason = inject(defect)
            found = v.find_defect(address, family)
            collision = v.classify(address)
            if found == defect and collision == NONE:
                return GeneratedAddress(
                    address, NONE,
                    invalid_type=family,
                    invalid_reason=reason,
                    defect=defect,
                    corrected_address=corrected
                )
            logger.debug(
                f"Re-rolling {family} {defect} candidate {address!r} "
                f"(found {found}, valid as {collision})"
            )
        raise RuntimeError(
            f"Could not generate a {family} near-miss with {defect} "
            f"after {MAX_GENERATION_ATTEMPTS} attempts"
        )

    def _corrupt_char(self, group: str, letters: str) -> str:
        """Replace one character of ``group`` with a random letter from ``letters``."""
        i = self.rng.randrange(len(group))
        return group[:i] + self.rng.choice(letters) + group[i + 1:]

    def _inject_ipv4(self, defect: str) -> tuple[str, str, str]:
        octets = self._ipv4_octets()
        corrected = self._join_ipv4(octets)
        bad = list(octets)
        i = self.rng.randrange(len(bad))

        if defect == v.OCTET_OUT_OF_RANGE:
            bad[i] = str(self.rng.randint(v.MAX_OCTET + 1, 999))
            reason = v.describe_defect(defect, IPV4)
        elif defect == v.WRONG_GROUP_COUNT:
            if self.rng.random() < 0.5:
                del bad[i]
            else:
                bad.insert(i, str(self.rng.randint(0, v.MAX_OCTET)))
            reason = f"has {len(bad)} octets instead of {v.IPV4_GROUPS}"
        elif defect == v.NON_NUMERIC_GROUP:
            bad[i] = self._corrupt_char(bad[i], string.ascii_lowercase)
            reason = v.describe_defect(defect, IPV4)
        else:  # LEADING_ZERO
            value = self.rng.randint(1, 99)
            bad[i] = '0' + str(value)
            corrected = self._join_ipv4(octets[:i] + [str(value)] + octets[i + 1:])
            reason = v.describe_defect(defect, IPV4)
        return self._join_ipv4(bad), corrected, reason

    def _inject_ipv6(self, defect: str) -> tuple[str, str, str]:
        groups = self._ipv6_groups()

        if defect == v.MULTIPLE_COMPRESSION:
            # Two separate single-group gaps with at least one group between
            i = self.rng.randint(0, v.IPV6_GROUPS - 3)
            j = self.rng.randint(i + 2, v.IPV6_GROUPS - 1)
            groups[i] = groups[j] = 0
            parts = [f'{g:x}' for g in groups]
            address = '::'.join([
                ':'.join(parts[:i]), ':'.join(parts[i + 1:j]), ':'.join(parts[j + 1:])
            ])
            corrected = self._format_ipv6(groups, 'expanded')
            return address, corrected, v.describe_defect(defect, IPV6)

        style = self.rng.choice(('expanded', 'trimmed'))
        corrected = self._format_ipv6(groups, style)
        parts = corrected.split(':')
        i = self.rng.randrange(len(parts))

        if defect == v.TOO_MANY_GROUPS:
            for _ in range(self.rng.randint(1, 2)):
                parts.insert(i, self._format_ipv6([self.rng.randint(0, 0xffff)], style))
            reason = f"has {len(parts)} groups (the maximum is {v.IPV6_GROUPS})"
        elif defect == v.GROUP_TOO_LONG:
            parts[i] = f'{groups[i]:04x}' + self.rng.choice(string.hexdigits[:16])
            reason = v.describe_defect(defect, IPV6)
        elif defect == v.NON_HEX_DIGIT:
            parts[i] = self._corrupt_char(parts[i], NON_HEX_LETTERS)
            reason = v.describe_defect(defect, IPV6)
        else:  # WRONG_LENGTH
            for _ in range(self.rng.randint(1, 2)):
                del parts[self.rng.randrange(len(parts))]
            reason = f"has only {len(parts)} groups and no '::' to fill the gap"
        return ':'.join(parts), corrected, reason

    def _inject_mac(self, defect: str) -> tuple[str, str, str]:
        groups = self._mac_groups()
        separator = self.rng.choice(MAC_SEPARATORS)
        corrected = separator.join(groups)
        bad = list(groups)
        i = self.rng.randrange(len(bad))

        if defect == v.MIXED_SEPARATORS:
            other = ':' if separator == '-' else '-'
            flipped = set(self.rng.sample(range(v.MAC_GROUPS - 1), self.rng.randint(1, 2)))
            address = bad[0]
            for k, group in enumerate(bad[1:]):
                address += (other if k in flipped else separator) + group
            return address, corrected, v.describe_defect(defect, MAC)

        if defect == v.WRONG_GROUP_COUNT:
            if self.rng.random() < 0.5:
                del bad[i]
            else:
                bad.insert(i, f'{self.rng.randint(0, 0xff):02X}')
            reason = f"has {len(bad)} pairs instead of {v.MAC_GROUPS}"
        elif defect == v.GROUP_LENGTH:
            if self.rng.random() < 0.5:
                bad[i] = bad[i][self.rng.randrange(2)]
            else:
                bad[i] = bad[i] + self.rng.choice(string.hexdigits[:16]).upper()
            reason = v.describe_defect(defect, MAC)
        else:  # NON_HEX_DIGIT
            bad[i] = self._corrupt_char(bad[i], NON_HEX_LETTERS.upper())
            reason = v.describe_defect(defect, MAC)
        return separator.join(bad), corrected, reason
