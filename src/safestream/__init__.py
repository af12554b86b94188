"""Build the transaction batch that opens a token payment stream from a Safe."""

__version__ = "1.0.0"
