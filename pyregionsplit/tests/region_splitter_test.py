################################################################################
#  Licensed to the Apache Software Foundation (ASF) under one
#  or more contributor license agreements.  See the NOTICE file
#  distributed with this work for additional information
#  regarding copyright ownership.  The ASF licenses this file
#  to you under the Apache License, Version 2.0 (the
#  "License"); you may not use this file except in compliance
#  with the License.  You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.
################################################################################

"""
Test cases for region split planning: region filtering, grouping and clipping.
"""

import unittest

from parameterized import parameterized

from pyregionsplit.common.bytes_utils import BytesUtils
from pyregionsplit.common.range import KeyRange
from pyregionsplit.split.clip_range import ClipRange
from pyregionsplit.split.exceptions import (ConfigurationError,
                                            InvalidSplitCountError,
                                            NoColumnsError, NoRegionsError)
from pyregionsplit.split.region import RegionBoundary
from pyregionsplit.split.region_splitter import RegionSplitter
from pyregionsplit.split.split_config import SplitConfig


def _regions(*start_keys):
    return [RegionBoundary(key, f"host-{i}") for i, key in enumerate(start_keys)]


def _numbered_regions(count):
    # first region starts at the beginning of the keyspace
    return _regions(b"", *[i.to_bytes(2, 'big') for i in range(1, count)])


class RegionSplitterTest(unittest.TestCase):

    def setUp(self):
        self.splitter = RegionSplitter()

    def _split(self, regions, split_count, start_row=None, stop_row=None, table='t'):
        config = SplitConfig(
            regions=regions,
            clip_range=ClipRange(start_row, stop_row),
            desired_split_count=split_count,
            columns=['cf:a'],
            table=table
        )
        return self.splitter.compute_splits(config)

    @staticmethod
    def _ranges(splits):
        return [(s.start_row, s.end_row) for s in splits]

    def test_groups_bigger_first(self):
        splits = self._split(_regions(b"", b"m", b"z"), 2)
        self.assertEqual(self._ranges(splits), [(b"", b"z"), (b"z", b"")])
        self.assertEqual([s.location for s in splits], ["host-0", "host-2"])
        self.assertTrue(splits[1].unbounded_end)

    def test_clip_start_truncates_first_split(self):
        splits = self._split(_regions(b"", b"m", b"z"), 2, start_row=b"g")
        self.assertEqual(self._ranges(splits), [(b"g", b"z"), (b"z", b"")])

    def test_more_splits_than_regions(self):
        splits = self._split(_regions(b"", b"m", b"z"), 10)
        self.assertEqual(self._ranges(splits), [(b"", b"m"), (b"m", b"z"), (b"z", b"")])
        self.assertEqual([s.location for s in splits], ["host-0", "host-1", "host-2"])

    def test_single_split(self):
        splits = self._split(_regions(b"", b"m", b"z"), 1)
        self.assertEqual(self._ranges(splits), [(b"", b"")])
        self.assertEqual(splits[0].location, "host-0")
        self.assertEqual(splits[0].table, 't')

    def test_whole_table_split_is_not_degenerate(self):
        # an empty start is the beginning and an empty end is unbounded
        for split_count in (1, 2):
            splits = self._split(_regions(b""), split_count, start_row=b"", stop_row=b"")
            self.assertEqual(self._ranges(splits), [(b"", b"")])
            self.assertFalse(splits[0].key_range().empty)
            self.assertTrue(splits[0].key_range().contains(b"\xff"))

    def test_stop_row_before_all_regions(self):
        with self.assertRaises(NoRegionsError) as context:
            self._split(_regions(b"b", b"m"), 2, stop_row=b"a")
        self.assertIsInstance(context.exception, ConfigurationError)
        self.assertEqual(str(context.exception), "Expecting at least one region")
        self.assertEqual(context.exception.table, 't')

        with self.assertRaises(NoRegionsError):
            self._split(_regions(b"b", b"m"), 2, stop_row=b"b")

    def test_start_row_after_bounded_regions(self):
        # the last region is unbounded, so it is never before the start row
        splits = self._split(_regions(b"", b"m", b"z"), 3, start_row=b"zz")
        self.assertEqual(self._ranges(splits), [(b"zz", b"")])
        self.assertEqual(splits[0].location, "host-2")

    def test_clip_both_sides(self):
        regions = _regions(b"", b"d", b"h", b"m", b"r", b"w")
        splits = self._split(regions, 2, start_row=b"e", stop_row=b"n")
        self.assertEqual(self._ranges(splits), [(b"e", b"m"), (b"m", b"n")])
        self.assertEqual([s.location for s in splits], ["host-1", "host-3"])

    def test_region_ending_at_start_row_is_filtered(self):
        splits = self._split(_regions(b"", b"m", b"z"), 3, start_row=b"m")
        self.assertEqual(self._ranges(splits), [(b"m", b"z"), (b"z", b"")])

    def test_stop_row_truncates_unbounded_split(self):
        splits = self._split(_regions(b"", b"m"), 2, stop_row=b"p")
        self.assertEqual(self._ranges(splits), [(b"", b"m"), (b"m", b"p")])

    def test_stop_row_at_region_start(self):
        splits = self._split(_regions(b"", b"m", b"z"), 3, stop_row=b"m")
        self.assertEqual(self._ranges(splits), [(b"", b"m")])

    def test_empty_clip_range_drops_split(self):
        self.assertEqual(self._split(_regions(b"", b"m"), 2, start_row=b"k", stop_row=b"k"), [])
        self.assertEqual(self._split(_regions(b"", b"m"), 2, start_row=b"f", stop_row=b"c"), [])

    def test_empty_clip_keys_are_unbounded(self):
        self.assertEqual(
            self._ranges(self._split(_regions(b"", b"m"), 2, start_row=b"", stop_row=b"")),
            [(b"", b"m"), (b"m", b"")]
        )

    def test_unsigned_comparison(self):
        # under a signed comparison 0x80 would sort before 0x7F and no region would be filtered
        regions = _regions(b"", b"\x7f", b"\x80")
        splits = self._split(regions, 3, start_row=b"\x80")
        self.assertEqual(self._ranges(splits), [(b"\x80", b"")])
        self.assertEqual(splits[0].location, "host-2")

        splits = self._split(regions, 3, stop_row=b"\x7f\xff")
        self.assertEqual(self._ranges(splits), [(b"", b"\x7f"), (b"\x7f", b"\x7f\xff")])

    def test_location_of_first_region_in_group(self):
        splits = self._split(_regions(b"", b"c", b"f", b"i", b"l"), 2)
        self.assertEqual(self._ranges(splits), [(b"", b"i"), (b"i", b"")])
        self.assertEqual([s.location for s in splits], ["host-0", "host-3"])

    @parameterized.expand([
        (1, 1), (3, 1), (3, 2), (5, 2), (7, 3), (10, 4), (10, 10), (12, 5), (100, 7),
    ])
    def test_group_size_balance(self, region_count, split_count):
        regions = _numbered_regions(region_count)
        splits = self._split(regions, split_count)

        self.assertEqual(len(splits), min(region_count, split_count))
        sizes = [
            sum(1 for region in regions if split.key_range().contains(region.start_key))
            for split in splits
        ]
        self.assertEqual(sum(sizes), region_count)
        base, remainder = divmod(region_count, len(splits))
        self.assertEqual(sizes, [base + 1] * remainder + [base] * (len(splits) - remainder))

    @parameterized.expand([
        (6, 1), (6, 4), (9, 2), (9, 9), (9, 20),
    ])
    def test_coverage_and_monotonicity(self, region_count, split_count):
        splits = self._split(_numbered_regions(region_count), split_count)

        self.assertEqual(splits[0].start_row, b"")
        self.assertTrue(splits[-1].unbounded_end)
        for previous, current in zip(splits, splits[1:]):
            self.assertEqual(previous.end_row, current.start_row)
            self.assertLess(BytesUtils.compare_unsigned(previous.start_row, current.start_row), 0)
        for split in splits:
            if not split.unbounded_end:
                self.assertNotEqual(split.start_row, split.end_row)
                self.assertLess(BytesUtils.compare_unsigned(split.start_row, split.end_row), 0)

    @parameterized.expand([
        (b"\x00\x02", b"\x00\x07", 3),
        (b"\x00\x01", None, 2),
        (None, b"\x00\x05", 4),
        (b"\x00\x03\x01", b"\x00\x03\x02", 5),
    ])
    def test_clipped_splits_stay_within_clip(self, start_row, stop_row, split_count):
        splits = self._split(_numbered_regions(9), split_count, start_row, stop_row)
        clip = ClipRange(start_row, stop_row).to_key_range()

        self.assertTrue(splits)
        if start_row is not None:
            self.assertEqual(splits[0].start_row, start_row)
        if stop_row is not None:
            self.assertEqual(splits[-1].end_row, stop_row)
        for previous, current in zip(splits, splits[1:]):
            self.assertEqual(previous.end_row, current.start_row)
        for split in splits:
            self.assertTrue(split.unbounded_end or BytesUtils.compare_unsigned(split.start_row, split.end_row) < 0)
            self.assertEqual(KeyRange.intersection(split.key_range(), clip), split.key_range())

    def test_clip_idempotence(self):
        regions = _regions(b"b", b"m")
        unclipped = self._split(regions, 2)
        self.assertEqual(self._split(regions, 2, start_row=b"a"), unclipped)
        self.assertEqual(self._split(regions, 2, start_row=b"b"), unclipped)

        clipped = self._split(_regions(b"", b"d", b"h", b"m"), 4, start_row=b"e", stop_row=b"k")
        wider = ClipRange(b"c", b"l").to_key_range()
        for split in clipped:
            self.assertEqual(KeyRange.intersection(split.key_range(), wider), split.key_range())

    def test_validation(self):
        with self.assertRaises(NoRegionsError):
            self._split([], 2)
        with self.assertRaises(NoColumnsError):
            self.splitter.compute_splits(SplitConfig(regions=_regions(b""), columns=[]))
        # columns are checked before anything else
        with self.assertRaises(NoColumnsError):
            self.splitter.compute_splits(SplitConfig(regions=[], columns=None))
        for split_count in (0, -1, True, "2", None):
            with self.assertRaises(InvalidSplitCountError):
                self._split(_regions(b""), split_count)

    def test_logs_truncation(self):
        with self.assertLogs('pyregionsplit.split.region_splitter', level='DEBUG') as logs:
            self._split(_regions(b"", b"m"), 2, start_row=b"g")
        output = "\n".join(logs.output)
        self.assertIn("Target split: [67 , )", output)
        self.assertIn("Kept region: [, 6D )", output)
        self.assertIn("Truncating split start  to 67 ", output)
        self.assertNotIn("Truncating split end", output)

        with self.assertLogs('pyregionsplit.split.region_splitter', level='DEBUG') as logs:
            self._split(_regions(b"", b"m"), 2, stop_row=b"p")
        output = "\n".join(logs.output)
        self.assertIn("Truncating split end  to 70 ", output)
        self.assertNotIn("Truncating split start", output)

        # a split already inside the clip range is left alone
        with self.assertLogs('pyregionsplit.split.region_splitter', level='DEBUG') as logs:
            self._split(_regions(b"b", b"m"), 2, start_row=b"a")
        self.assertNotIn("Truncating", "\n".join(logs.output))

    def test_inputs_are_not_mutated(self):
        regions = _regions(b"", b"m", b"z")
        snapshot = list(regions)
        self._split(regions, 2, start_row=b"g", stop_row=b"zz")
        self.assertEqual(regions, snapshot)


if __name__ == '__main__':
    unittest.main()
