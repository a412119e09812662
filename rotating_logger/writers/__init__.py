"""Writers module - Active log file handling"""

from rotating_logger.writers.file_writer import FileWriter

__all__ = ["FileWriter"]
