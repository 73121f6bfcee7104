import pytest

from fakes import FakeNotifier, FakePlayer, FakeRegistry, FakeStore
from media_control.core.session import ControlSession, Phase
from media_control.errors import NoPlayersError, NotifyError, RegistryError, StorageError
from media_control.models.command import Command
from media_control.models.player import PlaybackStatus
from media_control.models.selection import SelectionRecord


def _session(players, record=None, notifier=None, store=None):
    return ControlSession(
        FakeRegistry(players),
        notifier or FakeNotifier(),
        store or FakeStore(record),
    )


def test_transport_command_on_persisted_player_reuses_notification():
    players = [FakePlayer("a"), FakePlayer("b", status=PlaybackStatus.PLAYING)]
    session = _session(players, SelectionRecord("b", 42), notifier=FakeNotifier(handle=42))

    outcome = session.run(Command.PLAY_PAUSE)

    assert players[1].calls == ["pause"]
    assert session.notifier.requests[0].replaces_id == 42
    assert session.store.saved == [("b", 42)]
    assert outcome.stable_id == "b"
    assert session.phase is Phase.DONE


def test_first_run_allocates_handle_and_persists_it():
    session = _session([FakePlayer("a")], notifier=FakeNotifier(handle=9))

    outcome = session.run(Command.NEXT)

    assert session.notifier.requests[0].replaces_id is None
    assert session.store.saved == [("a", 9)]
    assert outcome.notification_handle == 9


def test_next_player_persists_new_selection():
    players = [FakePlayer("a", "A"), FakePlayer("b", "B"), FakePlayer("c", "C")]
    session = _session(players, SelectionRecord("c", 3), notifier=FakeNotifier(handle=3))

    session.run(Command.NEXT_PLAYER)

    assert session.store.saved == [("a", 3)]
    assert session.notifier.requests[0].body.startswith("→ A")


def test_vanished_player_falls_back_to_first():
    players = [FakePlayer("a"), FakePlayer("b")]
    session = _session(players, SelectionRecord("gone", 5))

    session.run(Command.PLAY)

    assert players[0].calls == ["play"]
    assert session.store.saved[0][0] == "a"


def test_no_players_fails_before_notifying():
    session = _session([])
    with pytest.raises(NoPlayersError):
        session.run(Command.PLAY)
    assert session.notifier.requests == []
    assert session.store.saved == []
    assert session.phase is Phase.APPLYING


def test_transport_failure_shows_no_notification():
    session = _session([FakePlayer("a", fail=True)])
    with pytest.raises(RegistryError):
        session.run(Command.NEXT)
    assert session.notifier.requests == []
    assert session.store.saved == []


def test_notify_failure_keeps_player_side_effect():
    player = FakePlayer("a")
    session = _session([player], notifier=FakeNotifier(fail=True))

    with pytest.raises(NotifyError):
        session.run(Command.NEXT)

    assert player.calls == ["next"]
    assert session.store.saved == []
    assert session.phase is Phase.NOTIFYING


def test_save_failure_happens_after_notification_was_shown():
    session = _session([FakePlayer("a")], store=FakeStore(fail=True))

    with pytest.raises(StorageError):
        session.run(Command.PAUSE)

    assert len(session.notifier.requests) == 1
    assert session.phase is Phase.PERSISTING


def test_zero_handle_from_service_is_persisted_but_never_replaced():
    # A service that legitimately hands out id 0 gets a new notification every time
    notifier = FakeNotifier(handle=0)
    store = FakeStore()
    _session([FakePlayer("a")], notifier=notifier, store=store).run(Command.PLAY)
    assert store.saved == [("a", 0)]

    store.record = SelectionRecord(*store.saved[-1])
    _session([FakePlayer("a")], notifier=notifier, store=store).run(Command.PLAY)
    assert [r.replaces_id for r in notifier.requests] == [None, None]
