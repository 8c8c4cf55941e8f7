"""Allow ``python -m taskpal``."""

from .cli import main

if __name__ == "__main__":
    main()
