import sys

from charger_uptime.cli import main

sys.exit(main())
