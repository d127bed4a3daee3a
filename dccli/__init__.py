"""dccli - fetch an XDCC pack from an IRC bot over DCC.

Layout:
- ``irc``: line framing, message classification, session state machine
- ``dcc``: the direct file transfer and its progress
- ``config``: command line and the read-only session configuration
- ``errors`` / ``logs``: error hierarchy and event logging
"""

__version__ = "0.1.0"
