"""Run chains of commands between files, with here-document input, plus the string and buffer helpers they use."""

__version__ = "0.1.0"