"""Allow ``python -m puzzlegraph``."""

from puzzlegraph.cli import main

if __name__ == "__main__":
    main()
