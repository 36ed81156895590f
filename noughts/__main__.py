import sys

from noughts.app import main

sys.exit(main())
