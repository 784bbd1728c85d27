import sys

from menu_seed.main import main

sys.exit(main())
