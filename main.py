# main.py
#
# Entry point for the AIQuiz application.
# Sets up logging, runs the startup checks and starts the GUI.

import sys
import logging

import startup


def main():
    """
    Main entry point for the application.
    Runs the startup sequence and exits with its status code.
    """
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s"
    )

    sys.exit(startup.run())


if __name__ == "__main__":
    main()
