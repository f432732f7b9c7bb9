"""Unit tests for address validation."""

import unittest

from core.config import IPV4, IPV6, MAC, NONE
from core.validator import (
    find_defect, is_valid, is_valid_ipv4, is_valid_ipv6, is_valid_mac,
    classify, describe_defect,
    WRONG_GROUP_COUNT, EMPTY_GROUP, NON_NUMERIC_GROUP, LEADING_ZERO, OCTET_OUT_OF_RANGE,
    MULTIPLE_COMPRESSION, TOO_MANY_GROUPS, NON_HEX_DIGIT, GROUP_TOO_LONG, WRONG_LENGTH,
    MIXED_SEPARATORS, GROUP_LENGTH, DEFECT_CLASSES
)


class TestIPv4(unittest.TestCase):
    """Tests for IPv4 grammar."""

    def test_valid_addresses(self):
        for address in ['192.168.1.1', '0.0.0.0', '255.255.255.255', '10.0.0.254']:
            self.assertTrue(is_valid_ipv4(address), address)

    def test_octet_out_of_range(self):
        self.assertEqual(find_defect('192.168.1.256', IPV4), OCTET_OUT_OF_RANGE)

    def test_wrong_group_count(self):
        self.assertEqual(find_defect('192.168.1', IPV4), WRONG_GROUP_COUNT)
        self.assertEqual(find_defect('192.168.1.1.1', IPV4), WRONG_GROUP_COUNT)

    def test_non_numeric_group(self):
        self.assertEqual(find_defect('192.168.a.1', IPV4), NON_NUMERIC_GROUP)
        self.assertEqual(find_defect('192.168.1.-1', IPV4), NON_NUMERIC_GROUP)

    def test_leading_zero(self):
        self.assertEqual(find_defect('192.168.1.01', IPV4), LEADING_ZERO)
        self.assertEqual(find_defect('00.1.2.3', IPV4), LEADING_ZERO)

    def test_single_zero_is_fine(self):
        self.assertIsNone(find_defect('0.10.0.100', IPV4))

    def test_empty_group(self):
        self.assertEqual(find_defect('192..1.1', IPV4), EMPTY_GROUP)
        self.assertEqual(find_defect('1.2.3.', IPV4), EMPTY_GROUP)

    def test_extraneous_characters(self):
        self.assertFalse(is_valid_ipv4(' 192.168.1.1'))
        self.assertFalse(is_valid_ipv4('192.168.1.1\n'))
        self.assertFalse(is_valid_ipv4('192.168.1.1/24'))

    def test_empty_string(self):
        self.assertEqual(find_defect('', IPV4), WRONG_GROUP_COUNT)


class TestIPv6(unittest.TestCase):
    """Tests for IPv6 grammar."""

    def test_valid_expanded(self):
        self.assertTrue(is_valid_ipv6('2001:0db8:85a3:0000:0000:8a2e:0370:7334'))

    def test_valid_compressed(self):
        for address in ['2001:db8::8a2e:370:7334', '::1', 'fe80::', '::', '1:2:3:4:5:6:7::']:
            self.assertTrue(is_valid_ipv6(address), address)

    def test_uppercase_hex(self):
        self.assertTrue(is_valid_ipv6('2001:DB8::FF'))

    def test_multiple_compression(self):
        self.assertEqual(find_defect('2001::db8::1', IPV6), MULTIPLE_COMPRESSION)

    def test_too_many_groups(self):
        self.assertEqual(find_defect('1:2:3:4:5:6:7:8:9', IPV6), TOO_MANY_GROUPS)
        self.assertEqual(find_defect('1:2:3:4::5:6:7:8:9', IPV6), TOO_MANY_GROUPS)

    def test_group_too_long(self):
        self.assertEqual(find_defect('2001:0db8a:0:0:0:0:0:1', IPV6), GROUP_TOO_LONG)

    def test_non_hex_digit(self):
        self.assertEqual(find_defect('2001:db8:g::1', IPV6), NON_HEX_DIGIT)

    def test_wrong_length_without_compression(self):
        self.assertEqual(find_defect('2001:db8:1:2:3:4:5', IPV6), WRONG_LENGTH)

    def test_compression_with_eight_groups(self):
        self.assertEqual(find_defect('1:2:3:4::5:6:7:8', IPV6), WRONG_LENGTH)

    def test_empty_group(self):
        self.assertEqual(find_defect(':1:2:3:4:5:6:7', IPV6), EMPTY_GROUP)
        self.assertEqual(find_defect(':::', IPV6), EMPTY_GROUP)

    def test_dotted_tail_not_supported(self):
        self.assertFalse(is_valid_ipv6('::ffff:192.168.1.1'))


class TestMAC(unittest.TestCase):
    """Tests for MAC grammar."""

    def test_valid_colon_and_dash(self):
        self.assertTrue(is_valid_mac('00:1A:2B:3C:4D:5E'))
        self.assertTrue(is_valid_mac('00-1a-2b-3c-4d-5e'))

    def test_mixed_separators(self):
        self.assertEqual(find_defect('00:1A-2B:3C:4D:5E', MAC), MIXED_SEPARATORS)

    def test_wrong_group_count(self):
        self.assertEqual(find_defect('00:1A:2B:3C:4D', MAC), WRONG_GROUP_COUNT)
        self.assertEqual(find_defect('001A2B3C4D5E', MAC), WRONG_GROUP_COUNT)

    def test_group_length(self):
        self.assertEqual(find_defect('00:1A:2B:3C:4D:5', MAC), GROUP_LENGTH)
        self.assertEqual(find_defect('00:1A:2B3:3C:4D:5E', MAC), GROUP_LENGTH)
        self.assertEqual(find_defect('00::2B:3C:4D:5E', MAC), GROUP_LENGTH)

    def test_non_hex_digit(self):
        self.assertEqual(find_defect('00:1G:2B:3C:4D:5E', MAC), NON_HEX_DIGIT)


class TestClassify(unittest.TestCase):
    """Tests for classify and family dispatch."""

    def test_classify_each_family(self):
        self.assertEqual(classify('192.168.1.1'), IPV4)
        self.assertEqual(classify('2001:db8::1'), IPV6)
        self.assertEqual(classify('00:1A:2B:3C:4D:5E'), MAC)
        self.assertEqual(classify('192.168.1.01'), NONE)
        self.assertEqual(classify('hello'), NONE)

    def test_families_are_disjoint_for_valid_examples(self):
        examples = {
            IPV4: '10.0.0.1',
            IPV6: 'fe80:0:0:0:202:b3ff:fe1e:8329',
            MAC: 'AA-BB-CC-DD-EE-FF',
        }
        for family, address in examples.items():
            for other in examples:
                self.assertEqual(is_valid(address, other), family == other, (address, other))

    def test_unknown_family(self):
        with self.assertRaises(ValueError):
            find_defect('1.2.3.4', 'IPX')

    def test_every_defect_has_a_reason(self):
        for family, defects in DEFECT_CLASSES.items():
            for defect in defects:
                self.assertTrue(describe_defect(defect, family))

    def test_describe_unknown_defect(self):
        with self.assertRaises(ValueError):
            describe_defect(MIXED_SEPARATORS, IPV4)


if __name__ == '__main__':
    unittest.main()
