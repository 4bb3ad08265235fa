"""Entry point for 'python -m latchkey' command."""

from latchkey.cli import main

if __name__ == "__main__":
    main()
