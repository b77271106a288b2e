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

from typing import Any, Optional


# Exception classes
class SplitException(Exception):
    """Base split planning exception"""


class ConfigurationError(SplitException):
    """The caller supplied an unusable split configuration"""


class NoTableError(ConfigurationError):
    """No table exception"""

    def __init__(self):
        super().__init__("No table was provided")


class NoRegionsError(ConfigurationError):
    """No region left to split exception"""

    def __init__(self, table: Optional[str] = None):
        self.table = table
        super().__init__("Expecting at least one region")


class NoColumnsError(ConfigurationError):
    """Empty column selection exception"""

    def __init__(self, table: Optional[str] = None):
        self.table = table
        super().__init__("Expecting at least one column")


class InvalidSplitCountError(ConfigurationError):
    """Split count exception"""

    def __init__(self, split_count: Any):
        self.split_count = split_count
        super().__init__(f"Split count must be a positive integer, but is {split_count!r}")


class NoRecordReaderFactoryError(ConfigurationError):
    """Record reader factory exception"""

    def __init__(self, table: Optional[str] = None):
        self.table = table
        super().__init__(f"No record reader factory was provided for table {table}")
