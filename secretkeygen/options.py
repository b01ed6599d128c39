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
# @package secretkeygen.options
# @file options.py
# @brief Turns command line values into a validated generation request.
# @license This project is released under the GNU GPLv3+ License.
# @author See AUTHORS file.
# @version 0.3


import re
from collections import namedtuple
from secretkeygen.constants import DEFAULTS
from secretkeygen.errors import (
    InvalidFormatError,
    InvalidByteLengthError,
    ByteLengthExceededError,
)
from secretkeygen.generator import KeyFormat
from secretkeygen.utils import debug

"""
*************************************************************************
"""


_INTEGER_RE = re.compile(r"^[+-]?[0-9]+$")


class ShowHelp:
    """Request to print the usage text and stop."""

    def __repr__(self):
        return "ShowHelp()"


class ShowVersion:
    """Request to print version information and stop."""

    def __repr__(self):
        return "ShowVersion()"


class GenerationRequest(
    namedtuple("GenerationRequest", ["nbytes", "format", "output", "env"])
):
    """
    One key to generate and where to put it.

    output is a file path, None or "" leave it unset. env selects
    appending to the .env file. With neither set the key goes to stdout.
    """

    __slots__ = ()

    def to_stdout(self):
        return not self.output and not self.env

    def destinations(self):
        dests = []
        if self.output:
            dests.append(self.output)
        if self.env:
            dests.append("env")
        if not dests:
            dests.append("stdout")
        return dests


"""
*************************************************************************
"""


def parse_format(fmt, defaults=DEFAULTS):
    if fmt is None:
        fmt = defaults.format
    try:
        return KeyFormat(fmt)
    except ValueError:
        raise InvalidFormatError(fmt, KeyFormat.choices()) from None


def parse_nbytes(value, defaults=DEFAULTS):
    if value is None:
        return defaults.nbytes
    text = str(value).strip()
    if not _INTEGER_RE.match(text):
        raise InvalidByteLengthError(value)
    nbytes = int(text)
    if nbytes <= 0:
        raise InvalidByteLengthError(value)
    if nbytes > defaults.max_bytes:
        raise ByteLengthExceededError(nbytes, defaults.max_bytes)
    return nbytes


def resolve_options(
    nbytes_args=(),
    fmt=None,
    output=None,
    env=False,
    show_help=False,
    show_version=False,
    defaults=DEFAULTS,
):
    """
    Validate raw command line values.

    nbytes_args holds the positional arguments, only the first one is
    used as byte count. Returns ShowHelp, ShowVersion or a
    GenerationRequest and raises an OptionError on invalid input. The
    help flag wins over everything else and skips validation.
    """
    if show_help:
        return ShowHelp()
    if show_version:
        return ShowVersion()

    keyformat = parse_format(fmt, defaults)
    nbytes = parse_nbytes(nbytes_args[0] if nbytes_args else None, defaults)

    request = GenerationRequest(nbytes, keyformat, output, bool(env))
    debug(1, "Resolved %s", (request,))
    return request
