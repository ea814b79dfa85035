from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from src.badger.exceptions import InvalidOperatorInput, PresetNotFoundError
from src.badger.presets.preset_rotation import PresetRotationScheduler
from src.badger.storage.snapshot_store import CURRENT_SELECTION
from tests.helpers.badges import build_state, make_badge


@pytest.fixture
def setup(tmp_path: Path):
    state, store, notifications = build_state(tmp_path, [make_badge("A"), make_badge("B")])
    store.save_preset("alpha", {"A": make_badge("A", slots=[1])})
    store.save_preset("beta", {"B": make_badge("B", slots=[2])})
    scheduler = PresetRotationScheduler(
        state=state,
        store=store,
        notifications=notifications,
        interval_seconds=lambda: 0.0,
        buffer_seconds=0.01,
    )
    return scheduler, state, store, notifications


def _messages(notifications) -> list[str]:
    return [entry.message for entry in reversed(notifications.recent())]


@pytest.mark.asyncio
async def test_rotation_applies_presets_in_order_and_wraps(setup) -> None:
    scheduler, _, _, notifications = setup

    await scheduler.start(["alpha", "beta"])
    await asyncio.sleep(0.2)
    await scheduler.stop()

    loads = [message for message in _messages(notifications) if message.startswith("loading")]
    assert loads[:4] == [
        "loading alpha preset",
        "loading beta preset",
        "loading alpha preset",
        "loading beta preset",
    ]


@pytest.mark.asyncio
async def test_rotation_replaces_current_selection(setup) -> None:
    scheduler, state, store, _ = setup

    await scheduler.start(["beta"])
    await asyncio.sleep(0.03)
    await scheduler.stop()

    assert state.snapshot()["B"].selected == [False, True, False, False, False]
    assert state.snapshot()["A"].selected == [False] * 5
    assert store.load(CURRENT_SELECTION) == state.snapshot()


@pytest.mark.asyncio
async def test_restart_leaves_exactly_one_rotation(setup) -> None:
    scheduler, _, _, notifications = setup

    await scheduler.start(["alpha"])
    await asyncio.sleep(0.03)
    first_task = scheduler._task
    await scheduler.start(["beta"])
    notifications.record("restarted")
    await asyncio.sleep(0.1)
    await scheduler.stop()

    assert first_task is not None and first_task.done()
    messages = _messages(notifications)
    after_restart = messages[messages.index("restarted") + 1 :]
    assert after_restart
    assert "loading alpha preset" not in after_restart
    assert set(after_restart) == {"loading beta preset"}


@pytest.mark.asyncio
async def test_cancelled_loop_stops_applying(setup) -> None:
    scheduler, _, _, notifications = setup

    await scheduler.start(["alpha"])
    await asyncio.sleep(0.03)
    await scheduler.stop()
    count = len(notifications)
    await asyncio.sleep(0.05)

    assert len(notifications) == count
    assert not scheduler.is_rotating
    assert scheduler.active_presets == []


@pytest.mark.asyncio
async def test_unknown_presets_are_filtered(setup) -> None:
    scheduler, _, _, _ = setup

    started = await scheduler.start(["ghost", "beta"])
    await scheduler.stop()

    assert started == ["beta"]


@pytest.mark.asyncio
async def test_only_unknown_presets_are_rejected(setup) -> None:
    scheduler, _, _, _ = setup

    with pytest.raises(PresetNotFoundError):
        await scheduler.start(["ghost"])
    with pytest.raises(InvalidOperatorInput):
        await scheduler.start([])
    assert not scheduler.is_rotating


@pytest.mark.asyncio
async def test_padded_preset_names_match_saved_presets(setup) -> None:
    scheduler, _, store, _ = setup
    store.save_preset(" gamma ", {"A": make_badge("A", slots=[3])})

    started = await scheduler.start([" gamma "])
    await scheduler.stop()

    assert started == ["gamma"]
    assert "gamma" in store.list_presets()


@pytest.mark.asyncio
async def test_vanished_preset_is_skipped(setup, tmp_path: Path) -> None:
    scheduler, _, _, notifications = setup

    await scheduler.start(["alpha"])
    (tmp_path / "preset-alpha.mb").unlink()
    await asyncio.sleep(0.05)
    await scheduler.stop()

    assert "preset alpha no longer exists, skipping" in _messages(notifications)
