"""``python -m digestfmt``."""

from .cli import cli


def main() -> None:
    cli(prog_name="digestfmt")


if __name__ == "__main__":
    main()
