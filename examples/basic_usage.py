#!/usr/bin/env python3
"""Basic usage example"""

import tempfile
from pathlib import Path

from logstore import Logger, LoggerError

def main():
    with tempfile.TemporaryDirectory() as log_dir:
        logger = Logger(str(Path(log_dir) / "example.log"))

        # Log messages
        logger.log("Application started")
        logger.log("Processing finished")

        # Read them back
        for entry in logger.get_logs():
            print(entry)

        print(logger.get_messages())
        print(logger.get_from("2024-10-12 00:00:00"))

        try:
            logger.get_from("2024/10/12")
        except LoggerError as e:
            print(f"Rejected: {e}")

        # Start over
        logger.clear()

if __name__ == "__main__":
    main()
