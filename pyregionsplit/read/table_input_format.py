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
from typing import Any, List, Optional, Sequence

from pyregionsplit.common.bytes_utils import BytesUtils
from pyregionsplit.common.options import Options
from pyregionsplit.common.options.split_options import SplitOptions
from pyregionsplit.read.record_reader import (ReadContext, RecordReader,
                                              RecordReaderFactory)
from pyregionsplit.split.clip_range import ClipRange
from pyregionsplit.split.exceptions import (NoRecordReaderFactoryError,
                                            NoTableError)
from pyregionsplit.split.region import RegionLocator
from pyregionsplit.split.region_splitter import RegionSplitter
from pyregionsplit.split.split_config import SplitConfig
from pyregionsplit.split.table_split import TableSplit

logger = logging.getLogger(__name__)


class TableInputFormat:
    """
    Input format over a region-partitioned table.

    Receives a table and the locator of its regions, plus columns and
    optionally a row filter and a scan range. Values given through the
    with_* methods override the ones read from options.

    Example:
        input_format = (TableInputFormat("exampleTable", locator, reader_factory)
                        .with_columns(["columnA", "columnB"])
                        .with_start_row(b"keyPrefix"))
        for split in input_format.get_splits(8):
            with input_format.get_record_reader(split) as reader:
                for row_key, value in reader:
                    ...
    """

    def __init__(self,
                 table: str,
                 region_locator: RegionLocator,
                 record_reader_factory: Optional[RecordReaderFactory] = None,
                 options: Optional[Options] = None):
        self.table = table
        self.region_locator = region_locator
        self.options = options or Options.from_none()
        self._record_reader_factory = record_reader_factory
        self._columns: Optional[List[str]] = None
        self._row_filter: Any = None
        self._start_row: Optional[bytes] = None
        self._stop_row: Optional[bytes] = None
        self._splitter = RegionSplitter()

    def with_columns(self, columns: Sequence[str]) -> 'TableInputFormat':
        self._columns = list(columns)
        return self

    def with_row_filter(self, row_filter: Any) -> 'TableInputFormat':
        self._row_filter = row_filter
        return self

    def with_start_row(self, start_row: bytes) -> 'TableInputFormat':
        self._start_row = BytesUtils.to_bytes(start_row)
        return self

    def with_stop_row(self, stop_row: bytes) -> 'TableInputFormat':
        self._stop_row = BytesUtils.to_bytes(stop_row)
        return self

    def with_record_reader_factory(self, factory: RecordReaderFactory) -> 'TableInputFormat':
        self._record_reader_factory = factory
        return self

    def columns(self) -> List[str]:
        if self._columns is not None:
            return self._columns
        return self.options.get(SplitOptions.SCAN_COLUMNS) or []

    def clip_range(self) -> ClipRange:
        start_row = self._start_row
        if start_row is None:
            start_row = self.options.get(SplitOptions.SCAN_START_ROW)
        stop_row = self._stop_row
        if stop_row is None:
            stop_row = self.options.get(SplitOptions.SCAN_STOP_ROW)
        return ClipRange(start_row, stop_row)

    def new_split_config(self, num_splits: Optional[int] = None) -> SplitConfig:
        if not self.table or self.region_locator is None:
            raise NoTableError()
        if num_splits is None:
            num_splits = self.options.get(SplitOptions.SCAN_SPLIT_COUNT)

        regions = self.region_locator.locate_regions(self.table)
        logger.debug("Located %d regions for table %s", len(regions), self.table)
        return SplitConfig(
            regions=regions,
            clip_range=self.clip_range(),
            desired_split_count=num_splits,
            columns=self.columns(),
            row_filter=self._row_filter,
            table=self.table
        )

    def get_splits(self, num_splits: Optional[int] = None) -> List[TableSplit]:
        """
        Calculates the splits that will serve as input for the scan tasks.

        Args:
            num_splits: a hint for the number of splits, defaults to 'scan.split.count'.
        """
        return self._splitter.compute_splits(self.new_split_config(num_splits))

    def get_record_reader(self, split: TableSplit) -> RecordReader:
        if self._record_reader_factory is None:
            raise NoRecordReaderFactoryError(self.table)
        context = ReadContext(
            table=self.table,
            split=split,
            columns=tuple(self.columns()),
            row_filter=self._row_filter
        )
        return self._record_reader_factory.create_reader(context)
