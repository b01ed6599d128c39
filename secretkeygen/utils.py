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
# @package secretkeygen.utils
# @file utils.py
# @brief Util functions.
# @license This project is released under the GNU GPLv3+ License.
# @author See AUTHORS file.
# @version 0.3


import sys
import click

debug_level = -1


def set_debuglevel(level):
    global debug_level
    if level >= -1:
        debug_level = level


# Diagnostics go to stderr, stdout is reserved for the key
def debug(level, fstr, values=()):
    if debug_level >= level:
        click.echo(fstr % values, err=True)
        sys.stderr.flush()


def info(msg):
    click.echo(msg, err=True)
