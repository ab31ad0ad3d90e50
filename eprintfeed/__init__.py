"""eprintfeed - keyword-filtered and weekly views of the IACR ePrint feed."""

__version__ = "0.1.0"
