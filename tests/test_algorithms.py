import copy
import io
import re

import pytest

from stackyard.algorithms import (
    InputError,
    Reporter,
    distribute,
    merge_and_sort,
    read_stacks,
)

MOVE = re.compile(r"^(\d+) -> (\d+) \((\d+)\)$")


def _replay(initial, output):
    stacks = copy.deepcopy(initial)
    for line in output.splitlines():
        match = MOVE.match(line)
        if not match:
            continue
        src, dst, value = (int(g) for g in match.groups())
        assert stacks[src - 1][-1] == value
        stacks[dst - 1].append(stacks[src - 1].pop())
    return stacks


def test_read_stacks_worked_example():
    stacks = read_stacks("3\n4 1 2 3 2\n0\n0\n")
    assert stacks == [[2, 3, 2, 1], [], []]


def test_read_stacks_accepts_token_list():
    stacks = read_stacks(["3", "1", "3", "2", "2", "1", "0"])
    assert stacks == [[3], [1, 2], []]


@pytest.mark.parametrize(
    "text, message",
    [
        ("abc", "Ошибка: введите число!"),
        ("2 0 0", "Ошибка: требуется от 3 до 500 стопок."),
        ("501", "Ошибка: требуется от 3 до 500 стопок."),
        ("3 x", "Ошибка: введите число контейнеров для стопки 1!"),
        ("3 501", "Ошибка: количество контейнеров должно быть от 0 до 500."),
        ("3 -1", "Ошибка: количество контейнеров должно быть от 0 до 500."),
        ("3 2 1", "Ошибка: введите тип товара для контейнера 2 в стопке 1!"),
        ("3 1 4 0 0", "Ошибка: тип товара должен быть от 1 до 3."),
        ("3 1 0 0 0", "Ошибка: тип товара должен быть от 1 до 3."),
    ],
)
def test_read_stacks_errors(text, message):
    with pytest.raises(InputError) as info:
        read_stacks(text)
    assert str(info.value) == message


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        read_stacks("")


@pytest.mark.parametrize(
    "initial",
    [
        [[2, 3, 2, 1], [], []],
        [[1, 3], [2, 2, 1], [3]],
        [[3, 2, 1], [1, 2, 3], []],
        [[], [], [4, 1, 3, 2]],
        [[1], [1], [1]],
    ],
)
def test_merge_and_sort_invariants(initial):
    stacks = copy.deepcopy(initial)
    out = io.StringIO()
    merge_and_sort(stacks, 0, 1, 2, Reporter(out=out))
    everything = sorted(v for s in initial for v in s)
    assert stacks[0] == []
    assert stacks[1] == []
    assert stacks[2] == sorted(everything, reverse=True)
    assert _replay(initial, out.getvalue()) == stacks


def test_merge_and_sort_without_reporter():
    stacks = [[1, 2], [3], []]
    merge_and_sort(stacks, 0, 1, 2, None)
    assert stacks == [[], [], [3, 2, 1]]


def test_distribute_moves_until_own_value():
    stacks = [[], [], [3, 1, 2]]
    out = io.StringIO()
    distribute(2, stacks, Reporter(out=out))
    assert stacks == [[1], [2], [3]]
    assert out.getvalue() == "3 -> 2 (2)\n3 -> 1 (1)\n"


def test_distribute_empties_stack_when_nothing_belongs():
    initial = [[], [], [1, 2, 1, 2]]
    stacks = copy.deepcopy(initial)
    out = io.StringIO()
    distribute(2, stacks, Reporter(out=out))
    assert stacks[2] == []
    assert stacks[0] == [1, 1]
    assert stacks[1] == [2, 2]
    assert _replay(initial, out.getvalue()) == stacks


def test_reporter_action_writes_out_and_log():
    out, log = io.StringIO(), io.StringIO()
    Reporter(out=out, log=log).action(0, 2, 5)
    assert out.getvalue() == "1 -> 3 (5)\n"
    assert log.getvalue() == out.getvalue()


def test_reporter_show_silent_when_not_detailed():
    out, log = io.StringIO(), io.StringIO()
    Reporter(out=out, log=log).show([[1]], "msg")
    assert out.getvalue() == ""
    assert log.getvalue() == ""


def test_reporter_show_detailed_lists_top_first():
    out, log = io.StringIO(), io.StringIO()
    Reporter(out=out, log=log, detailed=True).show([[1, 2], []], "msg")
    assert out.getvalue() == "\nmsg\nСтопка 1: 2 1 \nСтопка 2: \n\n"
    assert log.getvalue() == out.getvalue()


def test_reporter_show_without_log_reports_error():
    out = io.StringIO()
    Reporter(out=out, detailed=True).show([[1]], "msg")
    assert out.getvalue() == "\nmsg\nОшибка: файл логов не открыт!\n"


def test_reporter_show_result_ignores_detailed_flag():
    out, log = io.StringIO(), io.StringIO()
    Reporter(out=out, log=log).show_result([[3], [2, 1]])
    assert "Стопка 2: 1 2 \n" in out.getvalue()
    assert log.getvalue() == out.getvalue()


def test_reporter_show_result_without_log():
    out = io.StringIO()
    Reporter(out=out).show_result([[1]])
    assert out.getvalue() == "\nОшибка: файл логов не открыт!\n"