import sys

from ForceViz.main import main

sys.exit(main())
