"""Command-line interface."""
from curves3d.main import main

if __name__ == "__main__":
    main()
