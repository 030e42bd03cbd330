"""Entry point: ``python main.py --help``."""

from nqueens_trace.analysis.cli import main


if __name__ == "__main__":
    main()
