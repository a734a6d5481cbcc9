import sys

from habit_tracker.main import main

sys.exit(main())
