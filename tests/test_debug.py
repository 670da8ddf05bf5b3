from ecgview.tools.debug import debug_enabled, time_block


def test_time_block_is_silent_when_disabled(monkeypatch) -> None:
    monkeypatch.delenv("ECGVIEW_DEBUG", raising=False)
    messages: list[str] = []
    assert debug_enabled() is False
    with time_block("draw", emitter=messages.append):
        pass
    assert messages == []


def test_time_block_emits_when_enabled(monkeypatch) -> None:
    monkeypatch.setenv("ECGVIEW_DEBUG", "yes")
    messages: list[str] = []
    with time_block("draw", emitter=messages.append):
        pass
    assert len(messages) == 1
    assert messages[0].startswith("[DEBUG] draw took ")
