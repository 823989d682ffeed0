import sys

from fridgestore.playground import main

if __name__ == "__main__":
    sys.exit(main())
