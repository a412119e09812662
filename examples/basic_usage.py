#!/usr/bin/env python3
"""Basic usage example"""

import time

from rotating_logger import Logger, LogLevel, RotationKind, WriteMode

def main():
    # Configure before the first write; settings are frozen afterwards
    logger = (Logger()
        .set_directory("logs")
        .set_rotation("logs/rotated", RotationKind.BY_DAY)
        .set_mode(WriteMode.UNBUFFERED)
        .set_level(LogLevel.INFO))

    # Log messages (trace is filtered out by the INFO minimum)
    with logger:
        for _ in range(5):
            logger.trace("Tracing this")
            logger.info("Informing that")
            logger.warning("Warning those")
            time.sleep(2)

    print(f"Metrics: {logger.get_metrics()}")

if __name__ == "__main__":
    main()
