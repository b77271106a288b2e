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
class TableSplit:
    """
    A unit of scan work: rows [start_row, end_row) of a table.

    An empty end_row means the split runs to the end of the table. The
    location is a scheduling preference only.
    """
    table: Optional[str]
    start_row: bytes
    end_row: bytes
    location: str

    @property
    def unbounded_end(self) -> bool:
        return not self.end_row

    def key_range(self) -> KeyRange:
        return KeyRange(self.start_row, self.end_row)

    def __str__(self):
        return (f"{self.location}:{BytesUtils.to_hex_string(self.start_row)},"
                f"{BytesUtils.to_hex_string(self.end_row)}")
