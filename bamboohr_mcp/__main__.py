# =============================================================================
# bamboohr_mcp/__main__.py  -  `python -m bamboohr_mcp`
# =============================================================================

import sys

from bamboohr_mcp.main import main

if __name__ == "__main__":
    sys.exit(main())
