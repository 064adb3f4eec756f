"""ioexamples: write and read files through four styles of Python I/O."""

__version__ = "0.1.0"
