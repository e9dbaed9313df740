"""Main Module Documentation.

The top-level module is documented below, which mainly serves as a command line entry point for
converting between text and the stored Julian DATE & TIMESTAMP encodings.
"""

from __future__ import annotations

__version__ = "1.0.0"


def runJuliantime(
    values: list[str],
    timestamp: bool = False,
    decode: bool = False,
    show_bytes: bool = False,
    config_path: str | None = None,
) -> list[str]:
    """Convert each of `values` and return one output line per value.

    Args:
        values (``list``): date/timestamp text, or integer encodings if `decode` is set
        timestamp (``bool``, optional): treat values as TIMESTAMPs rather than DATEs.
            Defaults to ``False``.
        decode (``bool``, optional): decode integer encodings into canonical text. Defaults
            to ``False``, which encodes text into integers.
        show_bytes (``bool``, optional): append the fixed-width hex serialization to each line
        config_path (``str``, optional): behavior config file to load before converting

    Raises:
        TimeParseError: if a value cannot be parsed as date/timestamp text
        ValueError: if a value cannot be read as an integer encoding

    Returns:
        ``list``: formatted output lines
    """
    # Local Imports
    from .common.behavioral_config import BehavioralConfig
    from .common.logger import juliantimeLogError, juliantimeLogInfo
    from .time.format import formatDate, formatTimestamp
    from .time.parse import parseDateOrRaise, parseTimestampOrRaise
    from .time.stardate import DayCount, MicrosecondCount

    if config_path:
        BehavioralConfig.resetConfig()
        BehavioralConfig.getConfig(config_file_path=config_path)

    value_type = MicrosecondCount if timestamp else DayCount
    lines = []
    for value in values:
        if decode:
            try:
                encoded = value_type(int(value, 0))
            except ValueError:
                juliantimeLogError(f"Invalid integer encoding: {value!r}")
                raise
            text = formatTimestamp(encoded) if timestamp else formatDate(encoded)
            line = f"{encoded}\t{text}"
        else:
            encoded = parseTimestampOrRaise(value) if timestamp else parseDateOrRaise(value)
            line = f"{value}\t{encoded}"

        if show_bytes:
            line = f"{line}\t{encoded.toBytes().hex()}"
        lines.append(line)

    juliantimeLogInfo(f"Converted {len(lines)} {value_type.__name__} value(s)")
    return lines


def main() -> None:
    """Juliantime conversion main entry point.

    This is the function that the :command:`juliantime` command points to. See :mod:`.cli` for
    details on what command line options are available.
    """
    # Local Imports
    from .common.behavioral_config import BehavioralConfig
    from .common.cli import getCommandLineParser
    from .common.logger import PACKAGE_LOGGER_NAME, Logger

    # Parse command line arguments and pass them to runJuliantime
    parser = getCommandLineParser()
    cli_args = parser.parse_args()

    if cli_args.config_path:
        BehavioralConfig.resetConfig()
        try:
            BehavioralConfig.getConfig(config_file_path=cli_args.config_path)
        except ValueError as err:
            parser.error(str(err))

    # stdout carries the conversion results only
    log_location = BehavioralConfig.getConfig().logging.OutputLocation
    Logger(PACKAGE_LOGGER_NAME, path="stderr" if log_location == "stdout" else log_location)

    try:
        lines = runJuliantime(
            cli_args.values,
            timestamp=cli_args.timestamp,
            decode=cli_args.decode,
            show_bytes=cli_args.show_bytes,
        )
    except ValueError as err:
        parser.error(str(err))

    for line in lines:
        print(line)
