import sys

from productplan_mcp.cli import main

if __name__ == "__main__":
    sys.exit(main())
