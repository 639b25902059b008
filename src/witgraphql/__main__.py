import sys

from witgraphql.cli import main

sys.exit(main())
