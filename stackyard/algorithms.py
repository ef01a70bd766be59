"""Stack sorting primitives: reading stacks, merging, distributing and reporting moves.

A stack is a plain list whose last element is the top.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import TextIO, Union

Stacks = list[list[int]]

MIN_STACKS = 3
MAX_STACKS = 500
MAX_CONTAINERS = 500

_LOG_CLOSED = "Ошибка: файл логов не открыт!\n"


class InputError(ValueError):
    """Raised when the description of the stacks is malformed or out of range."""


@dataclass
class Reporter:
    """Writes moves and stack snapshots to an output stream and an optional log."""

    out: TextIO = field(default_factory=lambda: sys.stdout)
    log: TextIO | None = None
    detailed: bool = False

    def action(self, source: int, target: int, value: int) -> None:
        """Report moving ``value`` from stack ``source`` to stack ``target`` (0-based)."""
        line = f"{source + 1} -> {target + 1} ({value})\n"
        self.out.write(line)
        if self.log is not None:
            self.log.write(line)

    def show(self, stacks: Sequence[Sequence[int]], message: str = "") -> None:
        """Dump every stack after ``message`` when detailed logging is on."""
        if not self.detailed:
            return
        self.out.write(f"\n{message}\n")
        if self.log is None:
            self.out.write(_LOG_CLOSED)
            return
        self.log.write(f"\n{message}\n")
        self._dump(stacks)

    def show_result(self, stacks: Sequence[Sequence[int]]) -> None:
        """Dump every stack unconditionally."""
        self.out.write("\n")
        if self.log is None:
            self.out.write(_LOG_CLOSED)
            return
        self.log.write("\n")
        self._dump(stacks)

    def _dump(self, stacks: Sequence[Sequence[int]]) -> None:
        assert self.log is not None
        for number, stack in enumerate(stacks, start=1):
            text = f"Стопка {number}: " + "".join(f"{value} " for value in reversed(stack)) + "\n"
            self.out.write(text)
            self.log.write(text)
        self.out.write("\n")
        self.log.write("\n")
        self.log.flush()


class _Silent(Reporter):
    def action(self, source: int, target: int, value: int) -> None:
        pass

    def show(self, stacks: Sequence[Sequence[int]], message: str = "") -> None:
        pass

    def show_result(self, stacks: Sequence[Sequence[int]]) -> None:
        pass


def _reporter(reporter: Reporter | None) -> Reporter:
    return reporter if reporter is not None else _Silent()


def _read_int(tokens, error: str) -> int:
    try:
        token = next(tokens)
    except StopIteration:
        raise InputError(error) from None
    if isinstance(token, int):
        return token
    try:
        return int(token)
    except (TypeError, ValueError):
        raise InputError(error) from None


def read_stacks(tokens: Union[str, Iterable[Union[str, int]]]) -> Stacks:
    """Parse a stack count followed by, per stack, a size and its items listed top first."""
    if isinstance(tokens, str):
        tokens = tokens.split()
    stream = iter(tokens)

    count = _read_int(stream, "Ошибка: введите число!")
    if not MIN_STACKS <= count <= MAX_STACKS:
        raise InputError("Ошибка: требуется от 3 до 500 стопок.")

    stacks: Stacks = []
    for i in range(1, count + 1):
        size = _read_int(stream, f"Ошибка: введите число контейнеров для стопки {i}!")
        if not 0 <= size <= MAX_CONTAINERS:
            raise InputError("Ошибка: количество контейнеров должно быть от 0 до 500.")
        items = []
        for j in range(1, size + 1):
            value = _read_int(
                stream, f"Ошибка: введите тип товара для контейнера {j} в стопке {i}!"
            )
            if not 1 <= value <= count:
                raise InputError(f"Ошибка: тип товара должен быть от 1 до {count}.")
            items.append(value)
        stacks.append(items[::-1])
    return stacks


def merge_and_sort(
    stacks: Stacks, first: int, second: int, target: int, reporter: Reporter | None = None
) -> None:
    """Gather the three stacks into ``target`` ordered with the smallest value on top."""
    report = _reporter(reporter)
    ordered = stacks[first]
    buffer = stacks[second]
    merged = stacks[target]

    def move(src: list[int], dst: list[int], src_i: int, dst_i: int, message: str) -> int:
        value = src.pop()
        dst.append(value)
        report.action(src_i, dst_i, value)
        report.show(stacks, message)
        return value

    report.show(stacks, "Начало mergeAndSort")

    while ordered:
        move(ordered, merged, first, target, "После перемещения из sorted в merged")
    while buffer:
        move(buffer, merged, second, target, "После перемещения из buffer в merged")

    while merged:
        current = merged[-1]
        if not ordered or ordered[-1] <= current:
            move(merged, ordered, target, first, "После перемещения из merged в sorted")
            continue

        move(merged, buffer, target, second, "После перемещения из merged в buffer")
        while ordered and ordered[-1] > buffer[-1]:
            move(ordered, merged, first, target, "После перемещения из sorted в merged")
        move(buffer, ordered, second, first, "После перемещения из buffer в sorted")

    while ordered:
        move(ordered, merged, first, target, "После перемещения из sorted в merged")


def distribute(index: int, stacks: Stacks, reporter: Reporter | None = None) -> None:
    """Move items off stack ``index`` to the stack matching their value until one belongs here."""
    report = _reporter(reporter)
    report.show(stacks, "Начало distribute")
    source = stacks[index]
    while source:
        value = source[-1]
        if value == index + 1:
            report.show(stacks, "Элемент уже в своем стеке")
            break
        source.pop()
        stacks[value - 1].append(value)
        report.action(index, value - 1, value)
        report.show(stacks, "После перемещения элемента")