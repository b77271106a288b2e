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

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

from pyregionsplit.split.clip_range import ClipRange
from pyregionsplit.split.region import RegionBoundary


@dataclass(frozen=True)
class SplitConfig:
    """
    Everything one split planning call needs.

    Attributes:
        regions: regions of the table, sorted by start key
        clip_range: optional scan range the splits are restricted to
        desired_split_count: upper bound on the number of splits
        columns: columns handed to each record reader, must not be empty
        row_filter: opaque filter handed to each record reader
        table: table name, carried into every split
    """
    regions: Tuple[RegionBoundary, ...]
    clip_range: Optional[ClipRange] = None
    desired_split_count: int = 1
    columns: Tuple[str, ...] = field(default_factory=tuple)
    row_filter: Any = None
    table: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'regions', tuple(self.regions or ()))
        object.__setattr__(self, 'columns', tuple(self.columns or ()))
