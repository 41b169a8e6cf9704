import sys

from adamik_mcp.cli import main

sys.exit(main())
