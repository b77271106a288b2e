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
# limitations under the License.
################################################################################
import logging
from typing import List, Optional, Sequence, Tuple

from pyregionsplit.common.bytes_utils import BytesUtils, EMPTY_KEY
from pyregionsplit.common.range import KeyRange
from pyregionsplit.split.clip_range import ClipRange
from pyregionsplit.split.exceptions import (InvalidSplitCountError,
                                            NoColumnsError, NoRegionsError)
from pyregionsplit.split.region import RegionBoundary
from pyregionsplit.split.split_config import SplitConfig
from pyregionsplit.split.table_split import TableSplit

logger = logging.getLogger(__name__)

_hex = BytesUtils.to_hex_string


class RegionSplitter:
    """
    Plans the splits of a table scan from its region boundaries.

    Splits are created in number equal to the smaller of the desired split
    count and the number of regions overlapping the scan range. When there
    are more regions than splits, contiguous regions are grouped as evenly as
    possible, with the bigger groups placed first. Splits are finally clipped
    to the scan range; a split left empty by clipping is dropped.
    """

    def compute_splits(self, config: SplitConfig) -> List[TableSplit]:
        if not config.columns:
            raise NoColumnsError(config.table)
        split_count = config.desired_split_count
        if isinstance(split_count, bool) or not isinstance(split_count, int) or split_count < 1:
            raise InvalidSplitCountError(split_count)
        if not config.regions:
            raise NoRegionsError(config.table)

        clip = config.clip_range or ClipRange()
        logger.info("Target split: [%s, %s)", _hex(clip.start_row), _hex(clip.stop_row))

        regions = self._filter_regions(config.regions, clip)
        if not regions:
            raise NoRegionsError(config.table)

        splits = []
        for start_row, end_row, location in self._group_regions(regions, split_count):
            split = self._clip_split(config.table, start_row, end_row, location, clip)
            if split is None:
                continue
            logger.info("split: %d->%s", len(splits), split)
            splits.append(split)
        return splits

    @staticmethod
    def _filter_regions(regions: Sequence[RegionBoundary], clip: ClipRange) -> List[RegionBoundary]:
        """Drop the regions lying entirely outside the clip range, keeping order."""
        kept = []
        for i, region in enumerate(regions):
            cur_start = region.start_key
            cur_end = regions[i + 1].start_key if i + 1 < len(regions) else EMPTY_KEY
            # cur end <= start row: region is entirely before the range,
            # the last region never is since its end is unbounded
            if (clip.has_start_row and cur_end
                    and BytesUtils.compare_unsigned(cur_end, clip.start_row) <= 0):
                logger.debug("Skipping region [%s, %s) before start row", _hex(cur_start), _hex(cur_end))
                continue
            # stop row <= cur start: region is entirely after the range
            if clip.has_stop_row and BytesUtils.compare_unsigned(clip.stop_row, cur_start) <= 0:
                logger.debug("Skipping region [%s, %s) after stop row", _hex(cur_start), _hex(cur_end))
                continue
            logger.debug("Kept region: [%s, %s)", _hex(cur_start), _hex(cur_end))
            kept.append(region)
        return kept

    @staticmethod
    def _group_regions(regions: Sequence[RegionBoundary],
                       split_count: int) -> List[Tuple[bytes, bytes, str]]:
        """
        Partition regions into min(split_count, len(regions)) contiguous groups.

        The first len(regions) % n groups get one extra region. Each group
        spans from its first region's start key to the next group's start
        key, the last group is unbounded at the end.

        Returns:
            (start_row, end_row, location) per group, in key order
        """
        real_num_splits = min(split_count, len(regions))
        base = len(regions) // real_num_splits
        remainder = len(regions) % real_num_splits

        groups = []
        start_pos = 0
        for i in range(real_num_splits):
            last_pos = start_pos + base + (1 if i < remainder else 0)
            end_row = regions[last_pos].start_key if i + 1 < real_num_splits else EMPTY_KEY
            groups.append((regions[start_pos].start_key, end_row, regions[start_pos].location))
            start_pos = last_pos
        return groups

    @staticmethod
    def _clip_split(table: Optional[str], start_row: bytes, end_row: bytes, location: str,
                    clip: ClipRange) -> Optional[TableSplit]:
        """Truncate a grouped split to the clip range, None if nothing is left."""
        clipped = KeyRange.intersection(KeyRange(start_row, end_row), clip.to_key_range())
        if clipped is None:
            logger.debug("Dropping split [%s, %s), empty within %s", _hex(start_row), _hex(end_row), clip)
            return None

        if clipped.start != start_row:
            logger.debug("Truncating split start %s to %s", _hex(start_row), _hex(clipped.start))
        if clipped.end != end_row:
            logger.debug("Truncating split end %s to %s", _hex(end_row), _hex(clipped.end))
        return TableSplit(table, clipped.start, clipped.end, location)
