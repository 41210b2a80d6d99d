import sys

from quotecat.main import main


sys.exit(main())
