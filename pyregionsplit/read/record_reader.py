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
from typing import Any, Iterator, Optional, Tuple

from pyregionsplit.split.table_split import TableSplit

KeyValue = Tuple[bytes, Any]


@dataclass(frozen=True)
class ReadContext:
    """What a record reader needs to scan one split."""
    table: Optional[str]
    split: TableSplit
    columns: Tuple[str, ...]
    row_filter: Any = None


class RecordReader(ABC):
    """
    The reader that reads the rows of one split in batches of (row key, value) pairs.
    """

    @abstractmethod
    def read_batch(self) -> Optional[Iterator[KeyValue]]:
        """
        Reads one batch of rows. The method should return None when reaching the end of the input.
        """

    @abstractmethod
    def close(self):
        """
        Closes the reader and should release all resources.
        """

    def __iter__(self) -> Iterator[KeyValue]:
        for batch in iter(self.read_batch, None):
            yield from batch

    def __enter__(self) -> 'RecordReader':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class RecordReaderFactory(ABC):
    """Creates the record reader scanning a split."""

    @abstractmethod
    def create_reader(self, context: ReadContext) -> RecordReader:
        """Open a reader over context.split, honoring its columns and row filter."""
