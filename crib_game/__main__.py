import sys

from crib_game.cli import main

sys.exit(main())
