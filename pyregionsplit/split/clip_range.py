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

from dataclasses import dataclass
from typing import Optional

from pyregionsplit.common.bytes_utils import BytesUtils
from pyregionsplit.common.range import KeyRange


@dataclass(frozen=True)
class ClipRange:
    """
    Caller supplied scan range [start_row, stop_row).

    None on either side means unbounded. An empty key is treated the same
    way, since the empty key already stands for "no bound".
    """
    start_row: Optional[bytes] = None
    stop_row: Optional[bytes] = None

    def __post_init__(self):
        for name in ('start_row', 'stop_row'):
            value = BytesUtils.to_bytes(getattr(self, name))
            object.__setattr__(self, name, None if BytesUtils.is_empty(value) else value)

    @property
    def has_start_row(self) -> bool:
        return self.start_row is not None

    @property
    def has_stop_row(self) -> bool:
        return self.stop_row is not None

    def to_key_range(self) -> KeyRange:
        return KeyRange(self.start_row, self.stop_row)

    def __str__(self):
        return f"[{BytesUtils.to_hex_string(self.start_row)}, {BytesUtils.to_hex_string(self.stop_row)})"
