import sys

from online_store.cli import main

sys.exit(main())
