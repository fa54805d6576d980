"""Command-line interface."""
from linpoly.main import main


if __name__ == "__main__":
    main()
