"""Unit tests for address generation."""

import random
import unittest

from core.config import IPV4, IPV6, MAC, NONE, FAMILIES
from core.generator import AddressGenerator, INJECTABLE_DEFECTS
from core.validator import (
    find_defect, is_valid, classify,
    OCTET_OUT_OF_RANGE, WRONG_GROUP_COUNT, NON_NUMERIC_GROUP, LEADING_ZERO,
    MULTIPLE_COMPRESSION, NON_HEX_DIGIT, MIXED_SEPARATORS
)


class FixedRandom(random.Random):
    """Predictable random source: small numbers, first choices, no coin flips."""

    def randint(self, a, b):
        return min(b, a + 10)

    def randrange(self, start, stop=None, step=1):
        return 0 if stop is None else start

    def random(self):
        return 0.9

    def choice(self, seq):
        return seq[0]

    def choices(self, population, weights=None, *, cum_weights=None, k=1):
        return [population[0]] * k

    def sample(self, population, k, *, counts=None):
        return list(population)[:k]


class TestFixedGeneration(unittest.TestCase):
    """Exact output for forced family and defect selections."""

    def setUp(self):
        self.generator = AddressGenerator(FixedRandom())

    def test_generate_picks_first_weighted_type(self):
        question = self.generator.generate()
        self.assertEqual(question.type, IPV4)
        self.assertEqual(question.address, '10.10.10.10')
        self.assertIsNone(question.invalid_type)
        self.assertIsNone(question.invalid_reason)

    def test_valid_ipv6_expanded(self):
        self.assertEqual(self.generator.generate_valid(IPV6), ':'.join(['000a'] * 8))

    def test_valid_mac(self):
        self.assertEqual(self.generator.generate_valid(MAC), '0A:0A:0A:0A:0A:0A')

    def test_ipv4_octet_out_of_range(self):
        question = self.generator.generate_invalid(IPV4, OCTET_OUT_OF_RANGE)
        self.assertEqual(question.address, '266.10.10.10')
        self.assertEqual(question.type, NONE)
        self.assertEqual(question.invalid_type, IPV4)
        self.assertEqual(question.invalid_reason, 'has an octet greater than 255')
        self.assertEqual(question.corrected_address, '10.10.10.10')

    def test_ipv4_wrong_group_count(self):
        question = self.generator.generate_invalid(IPV4, WRONG_GROUP_COUNT)
        self.assertEqual(question.address, '10.10.10.10.10')
        self.assertEqual(question.invalid_reason, 'has 5 octets instead of 4')

    def test_ipv4_leading_zero(self):
        question = self.generator.generate_invalid(IPV4, LEADING_ZERO)
        self.assertEqual(question.address, '011.10.10.10')
        self.assertEqual(question.corrected_address, '11.10.10.10')

    def test_ipv4_non_numeric(self):
        question = self.generator.generate_invalid(IPV4, NON_NUMERIC_GROUP)
        self.assertEqual(question.address, 'a0.10.10.10')

    def test_ipv6_multiple_compression(self):
        question = self.generator.generate_invalid(IPV6, MULTIPLE_COMPRESSION)
        self.assertEqual(question.address, 'a:a:a:a:a::a::')
        self.assertEqual(question.invalid_reason, "uses '::' more than once")
        self.assertEqual(
            question.corrected_address,
            '000a:000a:000a:000a:000a:0000:000a:0000'
        )

    def test_mac_non_hex(self):
        question = self.generator.generate_invalid(MAC, NON_HEX_DIGIT)
        self.assertEqual(question.address, 'GA:0A:0A:0A:0A:0A')
        self.assertEqual(question.invalid_type, MAC)

    def test_mac_mixed_separators(self):
        question = self.generator.generate_invalid(MAC, MIXED_SEPARATORS)
        self.assertEqual(question.address, '0A-0A-0A:0A:0A:0A')
        self.assertEqual(question.corrected_address, '0A:0A:0A:0A:0A:0A')

    def test_rejects_defect_from_other_family(self):
        with self.assertRaises(ValueError):
            self.generator.generate_invalid(IPV4, MIXED_SEPARATORS)

    def test_rejects_unknown_family(self):
        with self.assertRaises(ValueError):
            self.generator.generate_invalid('IPX')
        with self.assertRaises(ValueError):
            self.generator.generate_valid('IPX')


class TestGeneratedProperties(unittest.TestCase):
    """Properties that must hold for any seed."""

    def test_valid_addresses_match_only_their_family(self):
        generator = AddressGenerator(random.Random(1234))
        for _ in range(300):
            question = generator.generate()
            if question.type == NONE:
                continue
            for family in FAMILIES:
                self.assertEqual(is_valid(question.address, family), family == question.type,
                                 (question.address, family))

    def test_invalid_addresses_carry_labels(self):
        generator = AddressGenerator(random.Random(99), weights={NONE: 1})
        for _ in range(300):
            question = generator.generate()
            self.assertEqual(question.type, NONE)
            self.assertIn(question.invalid_type, FAMILIES)
            self.assertTrue(question.invalid_reason)
            self.assertEqual(classify(question.address), NONE, question.address)
            self.assertEqual(find_defect(question.address, question.invalid_type), question.defect)
            self.assertTrue(is_valid(question.corrected_address, question.invalid_type),
                            question.corrected_address)

    def test_every_injectable_defect(self):
        for seed in range(20):
            generator = AddressGenerator(random.Random(seed))
            for family, defects in INJECTABLE_DEFECTS.items():
                for defect in defects:
                    question = generator.generate_invalid(family, defect)
                    self.assertEqual(find_defect(question.address, family), defect,
                                     question.address)
                    self.assertEqual(classify(question.address), NONE, question.address)
                    self.assertTrue(is_valid(question.corrected_address, family))

    def test_ipv6_uses_compressed_and_expanded_forms(self):
        generator = AddressGenerator(random.Random(7))
        addresses = [generator.generate_valid(IPV6) for _ in range(200)]
        self.assertTrue(any('::' in a for a in addresses))
        self.assertTrue(any('::' not in a and len(a.split(':')) == 8 for a in addresses))

    def test_mac_uses_both_separators(self):
        generator = AddressGenerator(random.Random(7))
        addresses = [generator.generate_valid(MAC) for _ in range(100)]
        self.assertTrue(any(':' in a for a in addresses))
        self.assertTrue(any('-' in a for a in addresses))

    def test_same_seed_same_sequence(self):
        first = AddressGenerator(random.Random(42))
        second = AddressGenerator(random.Random(42))
        for _ in range(50):
            self.assertEqual(first.generate().to_dict(), second.generate().to_dict())

    def test_all_types_appear_with_uniform_weights(self):
        generator = AddressGenerator(random.Random(3))
        seen = {generator.generate().type for _ in range(200)}
        self.assertEqual(seen, {IPV4, IPV6, MAC, NONE})


class TestWeights(unittest.TestCase):
    """Tests for the family distribution policy."""

    def test_single_type_weight(self):
        generator = AddressGenerator(random.Random(5), weights={MAC: 1})
        for _ in range(20):
            self.assertEqual(generator.generate().type, MAC)

    def test_unknown_type_rejected(self):
        with self.assertRaises(ValueError):
            AddressGenerator(weights={'IPX': 1})

    def test_all_zero_rejected(self):
        with self.assertRaises(ValueError):
            AddressGenerator(weights={IPV4: 0, MAC: 0})

    def test_negative_rejected(self):
        with self.assertRaises(ValueError):
            AddressGenerator(weights={IPV4: 1, MAC: -1})


if __name__ == '__main__':
    unittest.main()
