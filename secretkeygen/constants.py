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
# @package secretkeygen.constants
# @file constants.py
# @brief Defaults and usage text.
# @license This project is released under the GNU GPLv3+ License.
# @author See AUTHORS file.
# @version 0.3


from collections import namedtuple

"""
*************************************************************************
"""

DEFAULT_BYTES = 32
MAX_BYTES = 1024
DEFAULT_FORMAT = "hex"

ENV_FILE = ".env"
ENV_VAR = "SECRET_KEY"

Defaults = namedtuple("Defaults", ["nbytes", "format", "max_bytes"])

DEFAULTS = Defaults(DEFAULT_BYTES, DEFAULT_FORMAT, MAX_BYTES)

HELP_TEXT = f"""
Secret Key Generator - Cryptographically secure random key generator

USAGE:
  secret-key-generator [OPTIONS] [BYTES]

ARGUMENTS:
  [BYTES]           Number of random bytes to generate (default: {DEFAULT_BYTES}, max: {MAX_BYTES})

OPTIONS:
  -f, --format      Output format: hex, base64, base64url (default: {DEFAULT_FORMAT})
  -o, --output      Write output to file instead of stdout
  -e, --env         Append to {ENV_FILE} file in current directory
  -h, --help        Show this help message
  -V, --version     Show version information
  --debug LEVEL     Print diagnostics to stderr (default: -1)

EXAMPLES:
  secret-key-generator                    # Generate 32 bytes in hex
  secret-key-generator 64                 # Generate 64 bytes in hex
  secret-key-generator --format base64    # Generate in base64 format
  secret-key-generator -o key.txt         # Write to file
  secret-key-generator --env              # Append to .env file
  secret-key-generator 16 -f base64url -o secret.key

EQUIVALENT TO:
  openssl rand -hex 32
"""
