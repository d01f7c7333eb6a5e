"""Entry point: python -m fellowship"""

import logging
import os

from fellowship.scenario import run_adventure


def main() -> None:
    logging.basicConfig(
        level=os.environ.get("FELLOWSHIP_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )
    run_adventure()


if __name__ == "__main__":
    main()
