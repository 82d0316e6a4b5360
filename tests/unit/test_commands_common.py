from __future__ import annotations

import json
from pathlib import Path

import pytest
import typer
from rich.console import Console

from fizzbuzz_cli.commands.common import (
    classify_range,
    emit_classifications,
    get_state,
    print_json_payload,
)
from fizzbuzz_cli.core.config import DEFAULT_CONFIG
from fizzbuzz_cli.core.models import DEFAULT_RULES, Rules
from fizzbuzz_cli.core.state import CLIState


def _state(
    tmp_path: Path,
    json_output: bool = False,
    plain_output: bool = False,
    rules: Rules = DEFAULT_RULES,
) -> CLIState:
    return CLIState(
        json_output=json_output,
        plain_output=plain_output,
        verbose=False,
        quiet=False,
        config_path=tmp_path / "config.toml",
        config=dict(DEFAULT_CONFIG),
        console=Console(no_color=True),
        err_console=Console(stderr=True, no_color=True),
        rules=rules,
        range_defaults={"start": 1, "end": 100},
    )


class _Ctx:
    def __init__(self, obj) -> None:
        self.obj = obj


def test_get_state_rejects_missing_state() -> None:
    with pytest.raises(typer.Exit):
        get_state(_Ctx(None))  # type: ignore[arg-type]


def test_get_state_returns_state(tmp_path: Path) -> None:
    state = _state(tmp_path)
    assert get_state(_Ctx(state)) is state  # type: ignore[arg-type]


def test_print_json_payload_plain_is_compact(tmp_path: Path, capsys) -> None:
    print_json_payload(_state(tmp_path, plain_output=True), {"a": [1, 2]})
    assert capsys.readouterr().out == '{"a":[1,2]}\n'


def test_classify_range_uses_state_rules(tmp_path: Path) -> None:
    items = classify_range(_state(tmp_path, rules=Rules(fizz=2, buzz=7)), 13, 14)
    assert [item.kind.value for item in items] == ["number", "fizzbuzz"]


def test_emit_text_one_label_per_line(tmp_path: Path, capsys, first_fifteen) -> None:
    state = _state(tmp_path)
    emit_classifications(state, classify_range(state, 1, 15))
    assert capsys.readouterr().out.splitlines() == first_fifteen


def test_emit_text_writes_output_file(tmp_path: Path, capsys) -> None:
    state = _state(tmp_path)
    out = tmp_path / "out" / "labels.txt"
    emit_classifications(state, classify_range(state, 1, 5), output_file=out)
    assert out.read_text() == "1\n2\nFizz\n4\nBuzz\n"
    assert capsys.readouterr().out == "1\n2\nFizz\n4\nBuzz\n"


def test_emit_json_when_global_json_set(tmp_path: Path, capsys) -> None:
    state = _state(tmp_path, json_output=True)
    emit_classifications(state, classify_range(state, 14, 15), output_format="text")
    payload = json.loads(capsys.readouterr().out)
    assert payload == [
        {"n": 14, "kind": "number", "label": "14"},
        {"n": 15, "kind": "fizzbuzz", "label": "FizzBuzz"},
    ]


def test_emit_yaml_to_file(tmp_path: Path, capsys) -> None:
    state = _state(tmp_path)
    out = tmp_path / "labels.yaml"
    emit_classifications(state, classify_range(state, 3, 3), output_format="yaml", output_file=out)
    assert out.read_text() == "- n: 3\n  kind: fizz\n  label: Fizz\n"
    assert capsys.readouterr().out == "- n: 3\n  kind: fizz\n  label: Fizz\n"
