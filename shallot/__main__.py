import sys

from shallot.repl import main

sys.exit(main())
