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
# @package secretkeygen.cli
# @file cli.py
# @brief Command line front end of the secret key generator.
# @license This project is released under the GNU GPLv3+ License.
# @author See AUTHORS file.
# @version 0.3


import re
import sys
from importlib.metadata import version
import click
import secretkeygen
from secretkeygen.constants import HELP_TEXT
from secretkeygen.generator import generate_key
from secretkeygen.options import ShowHelp, ShowVersion, resolve_options
from secretkeygen.output import route_key
from secretkeygen.utils import set_debuglevel

"""
*************************************************************************
"""

HELP_FLAGS = ("-h", "--help")

_NEGATIVE_RE = re.compile(r"^-[0-9]")


def wants_help(argv):
    for arg in argv:
        if arg == "--":
            break
        if arg in HELP_FLAGS:
            return True
    return False


# Unknown options land among the positionals, only negative numbers may stay
def check_positionals(ctx, param, value):
    for arg in value:
        if arg.startswith("-") and not _NEGATIVE_RE.match(arg):
            raise click.NoSuchOption(arg, ctx=ctx)
    return value


def print_version():
    click.echo("secret-key-generator: " + secretkeygen.__version__)
    click.echo("Python: " + sys.version)
    click.echo("Click: " + version("click"))


"""
Generate a random secret key. Argument checks live in resolve_options,
so -h/--help and negative byte counts are plain values here.
"""


@click.command(
    "secret-key-generator",
    add_help_option=False,
    context_settings={"ignore_unknown_options": True},
)
@click.argument(
    "nbytes", nargs=-1, type=str, metavar="[BYTES]", callback=check_positionals
)
@click.option("-f", "--format", "fmt", default=None, type=str)
@click.option("-o", "--output", default=None, type=str)
@click.option("-e", "--env", is_flag=True, default=False)
@click.option("-h", "--help", "show_help", is_flag=True, default=False)
@click.option("-V", "--version", "show_version", is_flag=True, default=False)
@click.option("--debug", default=-1, type=int)
def cli(nbytes, fmt, output, env, show_help, show_version, debug):
    set_debuglevel(debug)
    request = resolve_options(nbytes, fmt, output, env, show_help, show_version)
    return execute(request)


def execute(request):
    if isinstance(request, ShowHelp):
        click.echo(HELP_TEXT)
        return 0
    if isinstance(request, ShowVersion):
        print_version()
        return 0

    key = generate_key(request.nbytes, request.format)
    route_key(key, request)
    return 0


def main(argv=None):
    """
    Run the command and return the process exit status.

    Every error, usage errors from click included, exits with 1. A help
    flag anywhere before "--" wins over all other arguments, malformed
    ones included.
    """
    if argv is None:
        argv = sys.argv[1:]
    argv = list(argv)
    if wants_help(argv):
        return execute(resolve_options(show_help=True))
    try:
        cli.main(args=argv, prog_name="secret-key-generator", standalone_mode=False)
    except click.ClickException as e:
        e.show()
        return 1
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
