import sys

from git_sync_keeper.cli.main import main

sys.exit(main())
