"""Interactive command that reads container stacks and sorts them by goods type."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Sequence
from typing import TextIO

from stackyard.algorithms import (
    MAX_CONTAINERS,
    MAX_STACKS,
    Reporter,
    Stacks,
    distribute,
    merge_and_sort,
)

_PROMPT = (
    "Введите количество стопок (0 для выхода, 'log' для переключения логирования): "
)
_NOT_A_NUMBER = "Ошибка: введите число!\n\n"
_WORD_PATTERN = re.compile(r"\s*(\S+)")

_INSTRUCTIONS = (
    "*** Программа сортировки контейнеров ***\n\n"
    "Правила ввода данных:\n"
    "1. В первой строке введите количество стопок (от 1 до 500)\n"
    "2. В следующих строках для каждой стопки введите:\n"
    "   - количество контейнеров в стопке (от 0 до 500)\n"
    "   - типы товаров в контейнерах (числа от 1 до количества стопок)\n"
    "3. Для выхода из программы введите 0\n"
    "4. Для включения/выключения подробного логирования введите 'log'\n\n"
    "Пример ввода:\n"
    "3\n"
    "4 1 2 3 2\n"
    "0\n"
    "0\n\n"
)


def string_to_number(text: str) -> int:
    """Read an optionally signed decimal prefix after leading spaces; 0 if there is none."""
    rest = text.lstrip(" ")
    sign = 1
    if rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]
    match = re.match(r"[0-9]*", rest)
    digits = match.group(0) if match else ""
    return sign * int(digits) if digits else 0


def print_instructions(out: TextIO) -> None:
    """Write the input rules and a worked example."""
    out.write(_INSTRUCTIONS)


def _emit(reporter: Reporter, text: str, log_text: str | None = None) -> None:
    reporter.out.write(text)
    if reporter.log is not None:
        reporter.log.write(text if log_text is None else log_text)


def _log(reporter: Reporter, text: str) -> None:
    if reporter.log is not None:
        reporter.log.write(text)


def sort_single(stacks: Stacks, reporter: Reporter) -> bool:
    """Check a lone stack: it is sorted only if every container holds type 1."""
    is_sorted = all(value == 1 for value in stacks[0])
    _emit(reporter, "Стопка уже отсортирована.\n" if is_sorted else "0\n")
    return is_sorted


def sort_pair(stacks: Stacks, reporter: Reporter) -> bool:
    """Sort two stacks so type 1 ends up in the first and type 2 in the second.

    Both stacks are emptied first; if any container is of another type nothing is
    put back and ``False`` is returned.
    """
    first, second = list(stacks[0]), list(stacks[1])
    stacks[0].clear()
    stacks[1].clear()

    if any(value not in (1, 2) for value in first + second):
        _emit(reporter, "0\n")
        return False

    reporter.show(stacks, "Начало сортировки двух стопок")
    for value in first:
        if value == 1:
            stacks[0].append(1)
        else:
            _emit(
                reporter,
                "1 -> 2\n",
                "Перемещение: стопка 1 -> стопка 2 (контейнер типа 2)\n",
            )
            stacks[1].append(2)
        reporter.show(stacks, "После перемещения из первой стопки")

    for value in second:
        if value == 2:
            stacks[1].append(2)
        else:
            _emit(
                reporter,
                "2 -> 1\n",
                "Перемещение: стопка 2 -> стопка 1 (контейнер типа 1)\n",
            )
            stacks[0].append(1)
        reporter.show(stacks, "После перемещения из второй стопки")

    _emit(reporter, "Сортировка завершена.\n")
    return True


def sort_many(stacks: Stacks, reporter: Reporter) -> None:
    """Sort three or more stacks by repeated merging and distribution."""
    for i in range(len(stacks) - 2):
        merge_and_sort(stacks, i, i + 1, i + 2, reporter)
        distribute(i + 2, stacks, reporter)


class _EndOfInput(Exception):
    pass


class _Input:
    """Whitespace-separated words from a line-oriented stream, with line skipping."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._line = ""

    def token(self) -> str:
        while True:
            match = _WORD_PATTERN.match(self._line)
            if match:
                self._line = self._line[match.end():]
                return match.group(1)
            self._line = self._stream.readline()
            if not self._line:
                raise _EndOfInput

    def skip_line(self) -> None:
        """Discard everything up to and including the next newline."""
        if self._line:
            self._line = ""
            return
        self._stream.readline()


def _read_types(reader: _Input, reporter: Reporter, size: int, count: int) -> list[int] | None:
    _emit(reporter, "Типы товаров (через пробел): ")
    items: list[int] = []
    failed = False
    for _ in range(size):
        text = reader.token()
        _log(reporter, text + " ")
        value = string_to_number(text)
        if value == 0 and not text.startswith("0"):
            _emit(reporter, _NOT_A_NUMBER)
            reader.skip_line()
            failed = True
            break
        if not 1 <= value <= count:
            _emit(reporter, f"Ошибка: тип товара должен быть от 1 до {count}.\n\n")
            reader.skip_line()
            failed = True
            break
        items.append(value)
    reader.skip_line()
    _log(reporter, "\n")
    return None if failed else items


def _read_stacks(reader: _Input, reporter: Reporter, count: int) -> Stacks | None:
    _emit(reporter, "\nВведите данные для каждой стопки:\n")
    stacks: Stacks = [[] for _ in range(count)]
    for number, stack in enumerate(stacks, start=1):
        _emit(reporter, f"Стопка {number}:\n")
        _emit(reporter, "Количество контейнеров: ")
        text = reader.token()
        _log(reporter, text + "\n")
        size = string_to_number(text)
        if size == 0 and not text.startswith("0"):
            _emit(reporter, _NOT_A_NUMBER)
            reader.skip_line()
            return None
        if not 0 <= size <= MAX_CONTAINERS:
            _emit(reporter, "Ошибка: количество контейнеров должно быть от 0 до 500.\n\n")
            return None
        if size > 0:
            items = _read_types(reader, reporter, size, count)
            if items is None:
                return None
            stack.extend(reversed(items))
    return stacks


def _sort(stacks: Stacks, reporter: Reporter) -> None:
    reporter.out.write("\nНачальное состояние стопок:\n")
    _log(reporter, "\n=== Начальное состояние стопок ===\n")
    reporter.show(stacks, "Начальное состояние")

    reporter.out.write("\nВыполняем сортировку...\n\n")
    _log(reporter, "\n=== Начало сортировки ===\n")

    if len(stacks) == 1:
        sort_single(stacks, reporter)
    elif len(stacks) == 2:
        sort_pair(stacks, reporter)
    else:
        sort_many(stacks, reporter)

    reporter.out.write("\nРезультат сортировки:\n")
    _log(reporter, "\n=== Результат сортировки ===\n")
    reporter.show_result(stacks)

    reporter.out.write("\nСортировка завершена. Введите новые данные или 0 для выхода.\n\n")
    _log(reporter, "\n=== Сортировка завершена ===\n\n")


def _session(reader: _Input, reporter: Reporter) -> None:
    while True:
        _log(reporter, "\n=== Новый запуск ===\n")
        _emit(reporter, _PROMPT)
        text = reader.token()
        _log(reporter, text + "\n")

        if text == "0":
            _emit(reporter, "\nПрограмма завершена.\n")
            return

        if text == "log":
            reporter.detailed = not reporter.detailed
            state = "включено" if reporter.detailed else "выключено"
            _emit(reporter, f"Подробное логирование {state}\n")
            continue

        count = string_to_number(text)
        if count == 0 and not text.startswith("0"):
            _emit(reporter, _NOT_A_NUMBER)
            reader.skip_line()
            continue
        if not 1 <= count <= MAX_STACKS:
            _emit(reporter, "Ошибка: требуется от 1 до 500 стопок.\n\n")
            continue

        stacks = _read_stacks(reader, reporter, count)
        if stacks is None:
            continue
        _sort(stacks, reporter)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="stackyard", description="Sort container stacks by goods type."
    )
    parser.add_argument("--log", default="log.txt", help="path of the log file")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive sorter on standard input; return the exit status."""
    args = _parse_args(argv)
    out = sys.stdout
    try:
        log = open(args.log, "w", encoding="utf-8")
    except OSError:
        out.write(f"Ошибка: не удалось открыть файл log.txt по пути: {args.log}\n")
        return 1

    with log:
        out.write(f"Файл логов открыт: {args.log}\n")
        log.write("=== Начало работы программы ===\n")
        print_instructions(out)
        reporter = Reporter(out=out, log=log)
        try:
            _session(_Input(sys.stdin), reporter)
        except _EndOfInput:
            pass
    return 0


if __name__ == "__main__":
    sys.exit(main())