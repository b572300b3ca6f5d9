"""
Флаттенинг документов с переводами.

Пример:
    {"text": {"test": "Test"}, "list": ["A", "B"]}
    -> {"text.test": "Test", "list.0": "A", "list.1": "B"}
"""

from typing import Any

SEPARATOR = "."


def _entries(node: Any):
    """Пары (ключ, значение) узла: ключи словаря или индексы списка."""
    if isinstance(node, dict):
        return node.items()
    if isinstance(node, (list, tuple)):
        return enumerate(node)
    # None ведёт себя как пустой узел
    return ()


def _is_nested(value: Any) -> bool:
    return value is None or isinstance(value, (dict, list, tuple))


def flatten(document: Any, separator: str = SEPARATOR) -> dict[str, Any]:
    """
    Превращает вложенный документ в плоскую таблицу.

    Ключи словарей и индексы списков склеиваются через separator.
    При совпадении путей побеждает значение, обойдённое позже.
    """
    result: dict[str, Any] = {}
    for key, value in _entries(document):
        key = str(key)
        if _is_nested(value):
            for subkey, subvalue in flatten(value, separator).items():
                result[f"{key}{separator}{subkey}"] = subvalue
        else:
            result[key] = value
    return result


def unflatten(table: dict[str, Any], separator: str = SEPARATOR) -> dict[str, Any]:
    """
    Обратная операция: собирает вложенный словарь из плоской таблицы.

    Индексы списков остаются строковыми ключами словаря.
    """
    nested: dict[str, Any] = {}
    for key, value in table.items():
        parts = key.split(separator)
        current = nested
        for part in parts[:-1]:
            current = current.setdefault(part, {})
        current[parts[-1]] = value
    return nested
