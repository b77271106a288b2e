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

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]

# Marks "no bound": the beginning of the keyspace as a start key,
# the end of the keyspace as an end key.
EMPTY_KEY = b""


class BytesUtils:
    """Helpers for row keys, which are opaque byte strings."""

    @staticmethod
    def to_bytes(key: Optional[BytesLike]) -> Optional[bytes]:
        if key is None:
            return None
        if isinstance(key, bytes):
            return key
        if isinstance(key, (bytearray, memoryview)):
            return bytes(key)
        raise TypeError(f"Row key must be bytes-like, but got {type(key).__name__}")

    @staticmethod
    def compare_unsigned(left: bytes, right: bytes) -> int:
        """
        Compare two keys byte by byte as unsigned values (0-255).

        A key that is a strict prefix of the other sorts first.

        Returns:
            A negative number, zero or a positive number as ``left`` is
            less than, equal to or greater than ``right``.
        """
        if left is right:
            return 0
        for a, b in zip(left, right):
            if a != b:
                return a - b
        return len(left) - len(right)

    @staticmethod
    def is_empty(key: Optional[bytes]) -> bool:
        return key is None or len(key) == 0

    @staticmethod
    def to_hex_string(key: Optional[bytes]) -> str:
        """Render a key as space separated upper-case hex, e.g. ``6D 00 ``."""
        if key is None:
            return ""
        return "".join("%02X " % b for b in key)

    @staticmethod
    def from_hex_string(value: str) -> bytes:
        """Parse the output of ``to_hex_string``; spaces are optional."""
        return bytes.fromhex(value.replace(" ", ""))
