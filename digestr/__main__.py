"""
Entry point for the `digestr` command-line interface.

digestr computes the digest of a string or a file with a chosen hash
algorithm and prints it in a chosen text encoding. Both the console
script and `python -m digestr` land here.
"""


def main():
    """Run the digestr command."""
    from .cli import cli

    cli(prog_name="digestr")


if __name__ == "__main__":
    main()
