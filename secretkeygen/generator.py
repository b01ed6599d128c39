"""
Copyright (C) 2017-2018 IAIK TU Graz and Fraunhofer AISEC

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program. If not, see <https://www.gnu.org/licenses/>.
"""

##
# @package secretkeygen.generator
# @file generator.py
# @brief Draws random bytes and encodes them as text.
# @license This project is released under the GNU GPLv3+ License.
# @author See AUTHORS file.
# @version 0.3


import os
import math
import base64
from enum import Enum
from secretkeygen.constants import MAX_BYTES
from secretkeygen.errors import EntropyError
from secretkeygen.utils import debug

"""
*************************************************************************
"""


class KeyFormat(Enum):
    HEX = "hex"
    BASE64 = "base64"
    BASE64URL = "base64url"

    @classmethod
    def choices(cls):
        return [f.value for f in cls]

    def encode(self, data):
        return ENCODERS[self](data)


def encode_hex(data):
    return data.hex()


def encode_base64(data):
    return base64.b64encode(data).decode("ascii")


# Padding is kept, same as the standard alphabet
def encode_base64url(data):
    return base64.urlsafe_b64encode(data).decode("ascii")


ENCODERS = {
    KeyFormat.HEX: encode_hex,
    KeyFormat.BASE64: encode_base64,
    KeyFormat.BASE64URL: encode_base64url,
}

if set(ENCODERS) != set(KeyFormat):
    raise RuntimeError("missing encoder for key format")

"""
*************************************************************************
"""


def random_bytes(nbytes):
    """
    Read nbytes from the platform CSPRNG.
    """
    try:
        return os.urandom(nbytes)
    except NotImplementedError as e:
        raise EntropyError("No randomness source available: " + str(e))


def encoded_length(nbytes, fmt):
    fmt = KeyFormat(fmt)
    if fmt is KeyFormat.HEX:
        return 2 * nbytes
    return 4 * math.ceil(nbytes / 3)


def generate_key(nbytes, fmt=KeyFormat.HEX):
    """
    Return nbytes of fresh random data encoded as text.

    fmt may be a KeyFormat or its string value. Nothing is cached,
    every call draws new bytes.
    """
    fmt = KeyFormat(fmt)
    if not 1 <= nbytes <= MAX_BYTES:
        raise ValueError("nbytes must be in [1, %d], got %d" % (MAX_BYTES, nbytes))
    debug(1, "Drawing %d random bytes", (nbytes,))
    return fmt.encode(random_bytes(nbytes))
