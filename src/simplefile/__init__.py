"""simplefile: read and write a fixed-name text file."""

__version__ = "0.1.0"
