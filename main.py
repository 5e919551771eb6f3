import sys
import logging

from colordrawer.config import LOG_LEVEL, LOG_FORMAT
from colordrawer.game import Game


def main():
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    Game().run()
    sys.exit()


if __name__ == "__main__":
    main()
