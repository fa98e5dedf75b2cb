"""Allow ``python -m campusnav``."""

from campusnav.cli import main

if __name__ == "__main__":
    main()
