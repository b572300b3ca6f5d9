"""
Инструменты проверки и экспорта переводов

Использование:
    # Проверка полноты переводов (относительно языка по умолчанию)
    python -m i18n.checker check
    python -m i18n.checker check --lang de

    # Ссылки на несуществующие ключи и циклические ссылки
    python -m i18n.checker refs

    # Экспорт для переводчика
    python -m i18n.checker export --lang de --format csv

    # Локализовать строку
    python -m i18n.checker resolve "#{menu.language}" --lang de
"""

import argparse
import csv
import json
import sys
from typing import Optional

import yaml

from .errors import LocalizationError
from .flatten import unflatten
from .localization import Localization, get_localization
from .matcher import TokenPattern
from .resolver import to_text


def get_missing_keys(loc: Localization, lang: str) -> list[str]:
    """Ключи языка по умолчанию, которых нет в языке lang."""
    registry = loc.registry
    default_keys = set(registry.table_for(registry.default))
    return sorted(default_keys - set(registry.table_for(lang)))


def check_translations(loc: Localization, lang: Optional[str] = None) -> bool:
    """
    Проверить полноту переводов

    Args:
        loc: загруженная локализация
        lang: конкретный язык или None для всех

    Returns:
        True если все переводы полные
    """
    registry = loc.registry
    default_table = registry.table_for(registry.default)
    total = len(default_table)
    all_ok = True

    print("\n=== Translation Status ===\n")

    languages = [lang] if lang else registry.list_languages()

    for check_lang in languages:
        if check_lang not in registry.list_languages():
            print(f"  {check_lang}: Language not found!")
            all_ok = False
            continue

        missing = get_missing_keys(loc, check_lang)
        translated = total - len(missing)
        pct = (translated / total * 100) if total > 0 else 0

        if not missing:
            status = "OK"
        else:
            status = f"MISSING {len(missing)}"
            all_ok = False

        print(f"  {check_lang}: {translated}/{total} ({pct:.0f}%) - {status}")

        # Показать недостающие ключи
        if missing and lang:
            print(f"\n  Missing keys for '{check_lang}':")
            for key in missing[:20]:
                text = to_text(default_table[key])
                preview = text[:50] + '...' if len(text) > 50 else text
                print(f"    - {key}: \"{preview}\"")
            if len(missing) > 20:
                print(f"    ... and {len(missing) - 20} more")

    print()
    return all_ok


def reference_graph(pattern: TokenPattern, table: dict) -> dict[str, list[str]]:
    """Граф ссылок: ключ -> ключи токенов в его значении."""
    return {
        key: [ref for _, ref in pattern.find_all(to_text(value))]
        for key, value in table.items()
    }


def find_unknown_references(pattern: TokenPattern, table: dict) -> list[tuple[str, str]]:
    """Пары (ключ, ссылка) для токенов, ссылающихся на отсутствующие ключи."""
    return [
        (key, ref)
        for key, refs in reference_graph(pattern, table).items()
        for ref in refs
        if ref not in table
    ]


def find_cycles(pattern: TokenPattern, table: dict) -> list[list[str]]:
    """
    Циклы в графе ссылок (обход в глубину).

    Каждый цикл возвращается как цепочка ключей, замкнутая на первый: [a, b, a].
    """
    graph = reference_graph(pattern, table)
    cycles: list[list[str]] = []
    seen_cycles: set[frozenset] = set()
    done: set[str] = set()

    def visit(key: str, stack: list[str]) -> None:
        if key in stack:
            cycle = stack[stack.index(key):] + [key]
            marker = frozenset(cycle)
            if marker not in seen_cycles:
                seen_cycles.add(marker)
                cycles.append(cycle)
            return
        if key in done or key not in graph:
            return
        stack.append(key)
        for ref in graph[key]:
            visit(ref, stack)
        stack.pop()
        done.add(key)

    for key in graph:
        visit(key, [])
    return cycles


def check_references(loc: Localization) -> bool:
    """Проверить ссылки между ключами. Циклы считаются ошибкой, неизвестные ключи — предупреждением."""
    registry = loc.registry
    all_ok = True

    print("\n=== Reference Check ===\n")

    for lang in registry.list_languages():
        table = registry.table_for(lang)
        unknown = find_unknown_references(loc.pattern, table)
        cycles = find_cycles(loc.pattern, table)

        if not unknown and not cycles:
            print(f"  {lang}: OK")
            continue

        print(f"  {lang}: {len(unknown)} unknown references, {len(cycles)} cycles")
        for key, ref in unknown[:5]:
            print(f"    - {key}: unknown key '{ref}'")
        if len(unknown) > 5:
            print(f"    ... and {len(unknown) - 5} more")
        for cycle in cycles:
            print(f"    - cycle: {' -> '.join(cycle)}")
        if cycles:
            all_ok = False

    print()
    return all_ok


def export_for_translator(
    loc: Localization,
    lang: str,
    output_format: str = 'csv',
    output_file: Optional[str] = None
) -> None:
    """
    Экспортировать ключи для переводчика

    Args:
        loc: загруженная локализация
        lang: целевой язык
        output_format: формат вывода ('csv', 'json', 'yaml')
        output_file: путь к выходному файлу
    """
    registry = loc.registry
    default = registry.default
    default_table = registry.table_for(default)
    lang_table = registry.table_for(lang)

    rows = []
    for key in sorted(default_table):
        rows.append({
            'key': key,
            default: to_text(default_table[key]),
            lang: to_text(lang_table[key]) if key in lang_table else '',
            'references': ', '.join(ref for _, ref in loc.pattern.find_all(to_text(default_table[key]))),
        })

    translated = sum(1 for r in rows if r[lang])
    total = len(rows)

    if not output_file:
        output_file = f"{lang}_translations.{output_format}"

    if output_format == 'csv':
        fieldnames = ['key', default] + ([lang] if lang != default else []) + ['references']
        with open(output_file, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            writer.writerows(rows)

    elif output_format == 'json':
        with open(output_file, 'w', encoding='utf-8') as f:
            json.dump(rows, f, ensure_ascii=False, indent=2)

    elif output_format == 'yaml':
        # Для YAML восстанавливаем вложенную структуру
        flat = {row['key']: row[lang] or f"# TODO: {row[default]}" for row in rows}
        with open(output_file, 'w', encoding='utf-8') as f:
            yaml.dump(unflatten(flat), f, allow_unicode=True, default_flow_style=False, sort_keys=False)

    print(f"\nExported to {output_file}")
    if total:
        print(f"Status: {translated}/{total} translated ({translated/total*100:.0f}%)")
    print(f"Missing: {total - translated} keys\n")


def main(argv: Optional[list[str]] = None, loc: Optional[Localization] = None) -> int:
    parser = argparse.ArgumentParser(description='i18n translation tools')
    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # check
    check_parser = subparsers.add_parser('check', help='Check translation completeness')
    check_parser.add_argument('--lang', help='Specific language to check')

    # refs
    subparsers.add_parser('refs', help='Check references between keys')

    # export
    export_parser = subparsers.add_parser('export', help='Export for translator')
    export_parser.add_argument('--lang', required=True, help='Target language')
    export_parser.add_argument('--format', choices=['csv', 'json', 'yaml'], default='csv')
    export_parser.add_argument('--output', help='Output file path')

    # resolve
    resolve_parser = subparsers.add_parser('resolve', help='Localize text')
    resolve_parser.add_argument('text', help='Text with escape codes')
    resolve_parser.add_argument('--lang', help='Language to use')

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if loc is None:
        loc = get_localization()
    try:
        loc.load()
    except LocalizationError as e:
        print(f"Error: {e}")
        return 1

    if args.command == 'check':
        return 0 if check_translations(loc, args.lang) else 1

    elif args.command == 'refs':
        return 0 if check_references(loc) else 1

    elif args.command == 'export':
        export_for_translator(loc, args.lang, args.format, args.output)

    elif args.command == 'resolve':
        if args.lang:
            loc.language = args.lang
        try:
            print(loc.localize(args.text))
        except LocalizationError as e:
            print(f"Error: {e}")
            return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
