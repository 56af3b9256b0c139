import sys

from pipe_walker.main import main

sys.exit(main())
