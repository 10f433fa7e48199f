"""Allow ``python -m gcd_cli NUMBER ...``."""

from gcd_cli.cli.main import entry_point

if __name__ == "__main__":
    entry_point()
