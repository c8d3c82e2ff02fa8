"""Allow ``python -m kafkalens``."""

from kafkalens.cli import main

if __name__ == "__main__":
    main()
