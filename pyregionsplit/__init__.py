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

from pyregionsplit.read.record_reader import (ReadContext, RecordReader,
                                              RecordReaderFactory)
from pyregionsplit.read.table_input_format import TableInputFormat
from pyregionsplit.split.clip_range import ClipRange
from pyregionsplit.split.exceptions import ConfigurationError, SplitException
from pyregionsplit.split.region import (RegionBoundary, RegionLocator,
                                        StaticRegionLocator)
from pyregionsplit.split.region_splitter import RegionSplitter
from pyregionsplit.split.split_config import SplitConfig
from pyregionsplit.split.table_split import TableSplit

__all__ = [
    'ClipRange',
    'ConfigurationError',
    'ReadContext',
    'RecordReader',
    'RecordReaderFactory',
    'RegionBoundary',
    'RegionLocator',
    'RegionSplitter',
    'SplitConfig',
    'SplitException',
    'StaticRegionLocator',
    'TableInputFormat',
    'TableSplit',
]
