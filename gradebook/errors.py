# gradebook/errors.py
"""Модуль для определения пользовательских исключений приложения."""

class GradebookError(Exception):
    """Базовый класс для всех исключений в этом приложении."""
    pass

class ValidationError(GradebookError, ValueError):
    """Значение поля не прошло проверку при создании объекта."""
    pass

class DuplicateError(GradebookError):
    """Исключение при попытке добавить студента с уже существующим ID."""
    pass

class InvalidArgumentError(GradebookError, ValueError):
    """Нарушено предусловие метода (пустой аргумент, неверный диапазон, количество < 1)."""
    pass

class StorageError(GradebookError):
    """Ошибка чтения или записи CSV-файла.

    Не выбрасывается наружу: передаётся вызывающему коду внутри IOResult.
    """
    pass
