"""Split, slice and search newline-delimited log files."""
