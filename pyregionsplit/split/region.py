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

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from pyregionsplit.common.bytes_utils import BytesUtils


@dataclass(frozen=True)
class RegionBoundary:
    """
    Start of a region: the region covers [start_key, next region's start_key),
    the last region of a table is unbounded at the end.
    """
    start_key: bytes
    location: str

    def __post_init__(self):
        object.__setattr__(self, 'start_key', BytesUtils.to_bytes(self.start_key))

    def __str__(self):
        return f"{self.location}:{BytesUtils.to_hex_string(self.start_key)}"


class RegionLocator(ABC):
    """
    Resolves the regions of a table.
    """

    @abstractmethod
    def locate_regions(self, table: str) -> List[RegionBoundary]:
        """
        Return the regions of the given table, sorted by start key.
        """


class StaticRegionLocator(RegionLocator):
    """RegionLocator over region lists that were resolved up front."""

    def __init__(self, regions_by_table: Dict[str, Sequence[RegionBoundary]]):
        self._regions_by_table = {
            table: tuple(regions) for table, regions in regions_by_table.items()
        }

    @classmethod
    def of(cls, table: str, boundaries: Sequence[Tuple[bytes, str]]) -> 'StaticRegionLocator':
        """Build a locator for a single table from (start_key, location) pairs."""
        return cls({table: [RegionBoundary(start_key, location) for start_key, location in boundaries]})

    def locate_regions(self, table: str) -> List[RegionBoundary]:
        return list(self._regions_by_table.get(table, ()))
