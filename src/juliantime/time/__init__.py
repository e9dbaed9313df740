"""Contains the codecs, parser and formatter for the Julian DATE and TIMESTAMP encodings.

Values are stored the way PostgreSQL stores them:

- DATE, 4 bytes, Julian days (:class:`.DayCount`)
- TIMESTAMP, 8 bytes, Julian microseconds (:class:`.MicrosecondCount`)

Every conversion function is pure, so they are safe to call from any thread.
"""
