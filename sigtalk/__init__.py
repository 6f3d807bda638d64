"""Bit-by-bit text messaging between processes over SIGUSR1 and SIGUSR2.

Also holds the printf-style formatter and the character and string helpers
the client and server use.
"""

__version__ = "0.1.0"