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
# @package secretkeygen.errors
# @file errors.py
# @brief Errors reported by the key generator.
# @license This project is released under the GNU GPLv3+ License.
# @author See AUTHORS file.
# @version 0.3


import click

"""
*************************************************************************
"""


class SecretKeyError(click.ClickException):
    exit_code = 1


"""
Argument validation
"""


class OptionError(SecretKeyError):
    pass


class InvalidFormatError(OptionError):
    def __init__(self, fmt, choices):
        self.fmt = fmt
        valid = ", ".join(choices[:-1]) + ", or " + choices[-1]
        super().__init__(f"Invalid format '{fmt}'. Must be: {valid}")


class InvalidByteLengthError(OptionError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid byte length '{value}'. Must be a positive integer.")


class ByteLengthExceededError(OptionError):
    def __init__(self, nbytes, maximum):
        self.nbytes = nbytes
        self.maximum = maximum
        super().__init__(f"Byte length {nbytes} exceeds maximum {maximum}")


"""
Key generation and output
"""


class EntropyError(SecretKeyError):
    pass


class KeyOutputError(SecretKeyError):
    pass


class KeyFileError(KeyOutputError):
    def __init__(self, path, reason):
        self.path = path
        super().__init__(f"Cannot write key to {path}: {reason}")


class EnvFileError(KeyOutputError):
    def __init__(self, path, reason):
        self.path = path
        super().__init__(f"Cannot append key to {path}: {reason}")
