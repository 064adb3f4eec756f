"""Allow ``python -m ioexamples``."""

from ioexamples.cli import main

if __name__ == "__main__":
    main()
