import logging

import pytest

from scorekeeper.exceptions import IncompleteGame, PlayerNotFound, RosterFull
from scorekeeper.services.session import GameSession


def _bowl(session: GameSession, seat: int, rolls) -> None:
    for pins in rolls:
        session.submit_roll(pins, seat=seat)


def _game_worth(total: int) -> list[int]:
    """Open-frame game adding up to ``total`` (at most 90)."""
    rolls = []
    remaining = total
    for _ in range(10):
        pins = min(9, remaining)
        rolls.extend([pins, 0])
        remaining -= pins
    return rolls


def test_add_player_keeps_seating_order(session):
    session.add_player("Ann")
    session.add_player("Bob")
    session.add_player("Ann")
    assert [p.name for p in session.players] == ["Ann", "Bob", "Ann"]
    assert all(p.rolls == () for p in session.players)


def test_sixth_player_is_rejected(session):
    for i in range(5):
        session.add_player(f"P{i}")
    assert session.is_full
    with pytest.raises(RosterFull, match=r"\(5\)"):
        session.add_player("Late")
    assert len(session.players) == 5


def test_roster_full_is_logged(session, caplog):
    for i in range(5):
        session.add_player(f"P{i}")
    with caplog.at_level(logging.INFO, logger="scorekeeper.services.session"):
        with pytest.raises(RosterFull):
            session.add_player("Late")
    assert "Roster full" in caplog.text


def test_submit_roll_without_seat_broadcasts(session):
    session.add_player("Ann")
    session.add_player("Bob")
    session.submit_roll(7)
    session.submit_roll(2)
    assert [row.rolls for row in session.progress_snapshot()] == [[7, 2], [7, 2]]


def test_submit_roll_to_seat_only_touches_that_ledger(session):
    session.add_player("Ann")
    session.add_player("Bob")
    session.submit_roll(10, seat=1)
    progress = session.progress_snapshot()
    assert progress[0].rolls == []
    assert progress[1].rolls == [10]


def test_submit_roll_does_not_validate_pins(session):
    session.add_player("Ann")
    session.submit_roll(42, seat=0)
    assert session.players[0].rolls == (42,)


@pytest.mark.parametrize("seat", [-1, 1, 7])
def test_submit_roll_unknown_seat(session, seat):
    session.add_player("Ann")
    with pytest.raises(PlayerNotFound):
        session.submit_roll(3, seat=seat)


def test_score_snapshot_perfect_game(session):
    session.add_player("Ann")
    _bowl(session, 0, [10] * 12)
    rows = session.score_snapshot()
    assert rows[0].name == "Ann"
    assert rows[0].frames[-1] == 300
    assert rows[0].total == 300


def test_score_snapshot_is_idempotent(session):
    session.add_player("Ann")
    session.add_player("Bob")
    _bowl(session, 0, [10, 7, 3, 9, 0, 10, 0, 8, 8, 2, 0, 6, 10, 10, 10, 8, 1])
    _bowl(session, 1, [5, 5] * 10 + [5])
    first = session.score_snapshot()
    second = session.score_snapshot()
    assert first == second
    assert first[0].frames == [20, 39, 48, 66, 74, 84, 90, 120, 148, 167]
    assert first[1].total == 150


def test_score_snapshot_incomplete_game(session):
    session.add_player("Ann")
    _bowl(session, 0, [3, 4, 5, 2, 1])
    with pytest.raises(IncompleteGame):
        session.score_snapshot()
    assert session.players[0].rolls == (3, 4, 5, 2, 1)


def test_score_snapshot_fails_if_any_player_incomplete(session):
    session.add_player("Ann")
    session.add_player("Bob")
    _bowl(session, 0, [0] * 20)
    _bowl(session, 1, [0] * 19)
    with pytest.raises(IncompleteGame):
        session.score_snapshot()
    with pytest.raises(IncompleteGame):
        session.ranking()


def test_ranking_ties_keep_roster_order(session):
    games = {
        "Ann": [10, 10, 10, 10] + [0, 0] * 6,  # 30+30+20+10 = 90
        "Bob": [5, 5] * 10 + [5],  # 150
        "Cid": [5, 5] * 10 + [5],  # 150
        "Dee": [10, 10, 10, 10, 10] + [0, 0] * 5,  # 30*3+20+10 = 120
    }
    for seat, (name, rolls) in enumerate(games.items()):
        session.add_player(name)
        _bowl(session, seat, rolls)

    ranking = session.ranking()
    assert [(e.name, e.score) for e in ranking] == [
        ("Bob", 150),
        ("Cid", 150),
        ("Dee", 120),
        ("Ann", 90),
    ]
    assert [e.rank for e in ranking] == [1, 2, 3, 4]
    assert [e.seat for e in ranking] == [1, 2, 3, 0]


def test_summary_bundles_progress_scores_and_ranking(session):
    session.add_player("Ann")
    session.add_player("Bob")
    _bowl(session, 0, _game_worth(45))
    _bowl(session, 1, _game_worth(81))
    summary = session.summary()
    assert [row.name for row in summary.progress] == ["Ann", "Bob"]
    assert [row.total for row in summary.scores] == [45, 81]
    assert [e.name for e in summary.ranking] == ["Bob", "Ann"]


def test_empty_session_snapshots(session):
    assert session.progress_snapshot() == []
    assert session.score_snapshot() == []
    assert session.ranking() == []


def test_is_complete_once_every_ledger_covers_ten_frames(session):
    assert not session.is_complete
    session.add_player("Ann")
    session.add_player("Bob")
    _bowl(session, 0, [10] * 12)
    assert not session.is_complete
    _bowl(session, 1, [0] * 20)
    assert session.is_complete
