# gradebook/config.py
"""Константы приложения: формат CSV, допустимые диапазоны, настройки логирования."""
import logging

# --- CSV ---
CSV_HEADER = ("StudentId", "Name", "Age")
CSV_DELIMITER = ","
CSV_ENCODING = "utf-8"
DEFAULT_DATA_FILE = "students.csv"

# --- Диапазоны ---
MIN_AGE = 0
MAX_AGE = 150
MIN_POINTS = 0.0
MAX_POINTS = 100.0

# --- Логирование ---
LOG_LEVEL = logging.INFO
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
