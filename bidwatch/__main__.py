import sys

from bidwatch.main import main

sys.exit(main())
