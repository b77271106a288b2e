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
from typing import List

from pyregionsplit.common.options.config_option import ConfigOption
from pyregionsplit.common.options.config_options import ConfigOptions


class SplitOptions:
    """Scan options consumed when planning table splits."""

    SCAN_SPLIT_COUNT: ConfigOption[int] = (
        ConfigOptions.key("scan.split.count")
        .int_type()
        .default_value(1)
        .with_description(
            "Desired number of splits. The actual number is the smaller of this "
            "value and the number of regions overlapping the scan range."
        )
    )

    SCAN_START_ROW: ConfigOption[bytes] = (
        ConfigOptions.key("scan.start-row")
        .bytes_type()
        .no_default_value()
        .with_description("First row to scan (inclusive), as a hex string.")
    )

    SCAN_STOP_ROW: ConfigOption[bytes] = (
        ConfigOptions.key("scan.stop-row")
        .bytes_type()
        .no_default_value()
        .with_description("Row to stop the scan at (exclusive), as a hex string.")
    )

    SCAN_COLUMNS: ConfigOption[List[str]] = (
        ConfigOptions.key("scan.columns")
        .list_type()
        .no_default_value()
        .with_description("Comma separated columns handed to each record reader.")
    )
