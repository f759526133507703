# SPDX-License-Identifier: MIT

from track.cleanup import register_cleanup
from track.initialize import initialize
from track.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
