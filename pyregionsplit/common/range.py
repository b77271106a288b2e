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
from typing import Optional

import portion

from pyregionsplit.common.bytes_utils import BytesUtils, EMPTY_KEY


class KeyRange:
    """
    A half-open row key range [start, end) based on the portion library.

    Keys are byte strings, which Python already orders as unsigned
    lexicographic sequences. An empty or missing start means the beginning
    of the keyspace, an empty or missing end means the end of the keyspace.
    """

    def __init__(self, start: Optional[bytes], end: Optional[bytes]):
        self.start = BytesUtils.to_bytes(start) or EMPTY_KEY
        self.end = BytesUtils.to_bytes(end) or EMPTY_KEY
        lower = self.start if self.start else -portion.inf
        upper = self.end if self.end else portion.inf
        self._interval = portion.closedopen(lower, upper)

    @property
    def empty(self) -> bool:
        return self._interval.empty

    @property
    def unbounded_end(self) -> bool:
        return not self.end

    def contains(self, key: bytes) -> bool:
        return key in self._interval

    @staticmethod
    def intersection(range1: 'KeyRange', range2: 'KeyRange') -> Optional['KeyRange']:
        """
        Calculate the intersection of two ranges.

        Returns:
            A new KeyRange, or None if the ranges share no key.
        """
        if range1 is None or range2 is None:
            return None

        intersect = range1._interval & range2._interval
        if intersect.empty:
            return None

        atomic = list(intersect)[0]
        start = EMPTY_KEY if atomic.lower == -portion.inf else atomic.lower
        end = EMPTY_KEY if atomic.upper == portion.inf else atomic.upper
        return KeyRange(start, end)

    def __eq__(self, other):
        if not isinstance(other, KeyRange):
            return False
        return self.start == other.start and self.end == other.end

    def __hash__(self):
        return hash((self.start, self.end))

    def __repr__(self):
        return f"KeyRange({self.start!r}, {self.end!r})"

    def __str__(self):
        return f"[{BytesUtils.to_hex_string(self.start)}, {BytesUtils.to_hex_string(self.end)})"
