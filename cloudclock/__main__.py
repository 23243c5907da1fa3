"""Allow ``python -m cloudclock``."""

from cloudclock.cli import main

if __name__ == "__main__":
    main()
