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

from typing import Any, Dict, Optional

from pyregionsplit.common.options.config_option import ConfigOption
from pyregionsplit.common.options.options_utils import OptionsUtils


class Options:
    """
    Raw string keyed scan options, read through typed ConfigOptions.
    """

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        self.data = dict(data) if data else {}

    @classmethod
    def from_none(cls) -> 'Options':
        return cls()

    def to_map(self) -> Dict[str, Any]:
        return self.data

    def get(self, option: ConfigOption, default=None):
        """
        Returns the value of option converted to its type; default, then the
        option's own default, when it is unset or None.
        """
        raw_value = self.data.get(option.key())
        if raw_value is not None:
            return OptionsUtils.convert_value(raw_value, option.get_clazz())
        return default if default is not None else option.default_value()

    def set(self, option: ConfigOption, value) -> 'Options':
        self.data[option.key()] = OptionsUtils.convert_to_string(value)
        return self

    def remove(self, option: ConfigOption) -> 'Options':
        self.data.pop(option.key(), None)
        return self

    def contains(self, option: ConfigOption) -> bool:
        return option.key() in self.data

    def copy(self) -> 'Options':
        return Options(self.data)

    def __repr__(self):
        return f"Options({self.data!r})"
