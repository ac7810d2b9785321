# tests/unit/test_textio.py

import io
import pytest

from gridwalk.config import GridConfig
from gridwalk.state import GridState
from gridwalk.textio import debug, dumps, from_rows, output
from tests.test_utils import ISLANDS_ROWS, make_grid


def test_output_writes_rows() -> None:
    grid = make_grid()
    buf = io.StringIO()
    output(grid, buf)
    assert buf.getvalue() == "AAB\nABB\nBBB\n"


def test_output_defaults_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    output(make_grid(["xy"]))
    assert capsys.readouterr().out == "xy\n"


@pytest.mark.parametrize("rows", [["AAB", "ABB", "BBB"], ISLANDS_ROWS, ["z"]])
def test_load_then_output_round_trips(rows: list) -> None:  # type: ignore[type-arg]
    text = "".join(f"{r}\n" for r in rows)
    grid = GridState(len(rows[0]), len(rows), config=GridConfig(max_width=8, max_height=8))
    grid.load(text)
    assert dumps(grid) == text


def test_debug_draws_box_on_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    debug(make_grid(["ab", "cd", "ef"]))
    assert capsys.readouterr().err == "\n┌──2\n│ab\n│cd\n│ef\n3\n\n"


def test_debug_to_stream() -> None:
    buf = io.StringIO()
    debug(make_grid(["q"]), buf)
    assert buf.getvalue() == "\n┌─1\n│q\n1\n\n"


def test_from_rows_validates_input() -> None:
    with pytest.raises(ValueError):
        from_rows([])
    with pytest.raises(ValueError):
        from_rows(["ab", "c"])
    with pytest.raises(ValueError):
        from_rows(["a b"])
