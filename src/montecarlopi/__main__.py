"""Command-line interface."""
from montecarlopi.main import main

if __name__ == "__main__":
    main()
