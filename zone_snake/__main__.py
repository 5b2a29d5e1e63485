"""Judge entry: ``python -m zone_snake`` decides one tick from stdin."""

import sys

from zone_snake.cli import main

if __name__ == "__main__":
    main(sys.argv[1:] or ["decide"])
