import sys

from orderflow.cli.main import main

sys.exit(main())
