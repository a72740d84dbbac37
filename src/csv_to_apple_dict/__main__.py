import sys

from csv_to_apple_dict.convert import main

sys.exit(main())
