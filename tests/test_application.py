import pytest

pytest.importorskip("PySide6.QtWidgets")

from ecgview.gui.application import run_event_loop


class StubApp:
    def __init__(self, exit_code: int = 0, error: Exception | None = None) -> None:
        self.exit_code = exit_code
        self.error = error

    def exec(self) -> int:
        if self.error is not None:
            raise self.error
        return self.exit_code


def test_event_loop_closes_source_on_exit(fake_source_factory) -> None:
    source = fake_source_factory()
    assert run_event_loop(StubApp(exit_code=3), source) == 3
    assert source.closed


def test_event_loop_closes_source_when_loop_raises(fake_source_factory) -> None:
    source = fake_source_factory()
    with pytest.raises(RuntimeError):
        run_event_loop(StubApp(error=RuntimeError("boom")), source)
    assert source.closed
