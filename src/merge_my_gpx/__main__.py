import sys

from merge_my_gpx.cli import main

sys.exit(main())
