"""
Шаблон токена.

Шаблон вида "#{{key}}" превращается в регулярное выражение, которое находит
все вхождения "#{...}" и захватывает ключ. Ключ состоит из латинских букв, цифр,
подчёркиваний и точек (только ASCII) и захватывается нежадно, чтобы соседние токены не склеивались.
"""

import re
from dataclasses import dataclass, field
from typing import Callable

PLACEHOLDER = "{key}"
KEY_GROUP = r"([\w.]+?)"


@dataclass(frozen=True)
class TokenPattern:
    """Скомпилированный шаблон токена. Создаётся один раз при старте."""

    template: str
    prefix: str
    suffix: str
    regex: re.Pattern = field(repr=False, compare=False)

    def find_all(self, text: str) -> list[tuple[str, str]]:
        """Все вхождения токенов слева направо: (полное совпадение, ключ)."""
        return [(match.group(0), match.group(1)) for match in self.regex.finditer(text)]

    def sub(self, replace: Callable[[str], str], text: str) -> tuple[str, list[str]]:
        """
        Заменяет каждый токен на replace(key) за один проход.

        Returns:
            Новая строка и список подставленных ключей (в порядке вхождения)
        """
        keys: list[str] = []

        def _replace(match: re.Match) -> str:
            keys.append(match.group(1))
            return replace(match.group(1))

        return self.regex.sub(_replace, text), keys

    def token(self, key: str) -> str:
        """Собирает токен для ключа: token("hero") -> "#{hero}"."""
        return f"{self.prefix}{key}{self.suffix}"


def compile_pattern(template: str, placeholder: str = PLACEHOLDER) -> TokenPattern:
    """
    Компилирует шаблон токена.

    Args:
        template: Шаблон с ровно одним placeholder, например "#{{key}}"
        placeholder: Обозначение ключа внутри шаблона

    Raises:
        ValueError: Если placeholder встречается не ровно один раз
    """
    count = template.count(placeholder)
    if count != 1:
        raise ValueError(
            f"Escape code '{template}' must contain exactly one '{placeholder}', found {count}"
        )

    prefix, suffix = template.split(placeholder)
    regex = re.compile(re.escape(prefix) + KEY_GROUP + re.escape(suffix), re.ASCII)
    return TokenPattern(template=template, prefix=prefix, suffix=suffix, regex=regex)


def find_all(pattern: TokenPattern, text: str) -> list[tuple[str, str]]:
    """Shortcut для pattern.find_all(text)."""
    return pattern.find_all(text)
