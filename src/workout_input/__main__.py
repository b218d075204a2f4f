import sys

from workout_input.cli import main

sys.exit(main())
