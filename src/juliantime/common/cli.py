"""Define the command line interface for the juliantime conversion tool."""

from __future__ import annotations

# Standard Library Imports
import argparse
import os.path

# Local Imports
from .logger import juliantimeLogError


def fileChecker(filepath):
    """Checks for valid filepaths passed to the CLI parser.

    Args:
        filepath (``str``): filepath given to CLI parser.

    Raises:
        ValueError: if the file does not exist

    Returns:
        ``str``: fully validated, absolute path to the file
    """
    filepath = os.path.abspath(os.path.realpath(os.path.normpath(filepath)))
    if not os.path.isfile(filepath):
        juliantimeLogError("Bad filepath given to CLI")
        raise ValueError(filepath)
    return filepath


def getCommandLineParser():
    """Create parser for command line arguments.

    Returns:
        ``argparse.ArgumentParser``: valid parser object
    """
    parser = argparse.ArgumentParser(description="Julian DATE/TIMESTAMP Conversion Command Line Interface")
    output_group = parser.add_argument_group("Output Options")

    parser.add_argument(
        "values",
        metavar="VALUE",
        nargs="+",
        type=str,
        help="Date/timestamp text to encode, or integer encodings with --decode",
    )

    parser.add_argument(
        "-t",
        "--timestamp",
        dest="timestamp",
        action="store_true",
        default=False,
        help="Treat values as TIMESTAMPs rather than DATEs",
    )

    parser.add_argument(
        "-d",
        "--decode",
        dest="decode",
        action="store_true",
        default=False,
        help="Decode integer encodings into canonical text",
    )

    parser.add_argument(
        "-c",
        "--config",
        dest="config_path",
        metavar="CONFIG_FILE",
        default=None,
        type=fileChecker,
        help="Path to a behavior config file",
    )

    output_group.add_argument(
        "-b",
        "--bytes",
        dest="show_bytes",
        action="store_true",
        default=False,
        help="Also print the fixed-width serialization as hex",
    )

    return parser
