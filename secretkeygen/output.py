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
# @package secretkeygen.output
# @file output.py
# @brief Routes a generated key to stdout, a key file or the .env file.
# @license This project is released under the GNU GPLv3+ License.
# @author See AUTHORS file.
# @version 0.3


import os
import click
from secretkeygen.constants import ENV_FILE, ENV_VAR
from secretkeygen.errors import KeyFileError, EnvFileError
from secretkeygen.utils import debug, info

"""
*************************************************************************
"""


def env_block(key):
    return f'\n# Secret Key\n{ENV_VAR}="{key}"\n'


def write_key_file(key, path):
    debug(2, "Writing key to %s", (path,))
    try:
        with open(path, "w") as f:
            f.write(key + "\n")
    except OSError as e:
        raise KeyFileError(path, e.strerror or str(e)) from e
    info(f"✓ Key written to {path}")


def append_env_file(key, cwd=None):
    envpath = os.path.join(os.path.abspath(cwd or os.getcwd()), ENV_FILE)
    debug(2, "Appending key to %s", (envpath,))
    try:
        with open(envpath, "a") as f:
            f.write(env_block(key))
    except OSError as e:
        raise EnvFileError(envpath, e.strerror or str(e)) from e
    info(f"✓ Key appended to {ENV_FILE} file")
    return envpath


"""
File first, then .env. The first failure stops routing.
"""


def route_key(key, request):
    debug(1, "Routing key to %s", (", ".join(request.destinations()),))
    if request.output:
        write_key_file(key, request.output)
    if request.env:
        append_env_file(key)
    if request.to_stdout():
        click.echo(key)
