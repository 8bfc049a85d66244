from domain.models import GoalieStats, PlayerStats, Snapshot, TeamStanding
from services import trends

DIV = "2-MANNO"


def _standings(date, *teams, abbrs=None):
    abbrs = abbrs or {}
    rows = [TeamStanding(team=t, abbr=abbrs.get(t), position=i + 1) for i, t in enumerate(teams)]
    return Snapshot(date=date, divisions={DIV: rows})


def test_standings_positions_over_time():
    snaps = [
        _standings("2025-01-01", "A", "B", "C"),
        _standings("2025-01-08", "B", "A"),
        _standings("2025-01-15", "C", "B", "A"),
    ]
    result = trends.standings_position_series(snaps, DIV)
    assert result.dates == ["2025-01-01", "2025-01-08", "2025-01-15"]
    assert [(s.label, s.values) for s in result.series] == [
        ("C", [3, None, 1]),
        ("B", [2, 1, 2]),
        ("A", [1, 2, 3]),
    ]
    mapping = result.to_mapping()
    assert mapping["series"][0] == {"label": "C", "values": [3, None, 1]}


def _players(date, **points):
    rows = [
        PlayerStats(rank=i + 1, name=name, gp=5, points=p)
        for i, (name, p) in enumerate(points.items())
    ]
    return Snapshot(date=date, divisions={DIV: rows})


def test_player_leaderboard_top_n_and_ties():
    snaps = [
        _players("2025-01-01", Ann=5, Bob=9, Cal=1),
        _players("2025-01-08", Ann=10, Bob=10, Cal=2),
    ]
    result = trends.leaderboard_series(snaps, DIV, trends.PLAYER_STATS["points"], top_n=2)
    # Equal stats fall back to name order
    assert [(s.label, s.values) for s in result.series] == [
        ("Ann", [2, 1]),
        ("Bob", [1, 2]),
    ]


def test_leaderboard_outside_top_n_is_none():
    snaps = [
        _players("2025-01-01", Ann=1, Bob=9, Cal=5),
        _players("2025-01-08", Ann=20, Bob=9, Cal=5),
    ]
    result = trends.leaderboard_series(snaps, DIV, "points", top_n=1)
    assert {s.label: s.values for s in result.series} == {
        "Ann": [None, 1],
        "Bob": [1, None],
    }


def _goalies(date, *rows):
    return Snapshot(
        date=date,
        divisions={
            DIV: [GoalieStats(rank=i + 1, name=n, gp=gp, gaa=gaa) for i, (n, gp, gaa) in enumerate(rows)]
        },
    )


def test_goalie_gaa_ascending_with_min_games():
    snaps = [_goalies("2025-01-01", ("Low", 5, 1.5), ("High", 5, 3.2), ("Rookie", 1, 0.0))]
    result = trends.goalie_leaderboard_series(snaps, DIV, "gaa", top_n=5)
    assert [(s.label, s.values) for s in result.series] == [("Low", [1]), ("High", [2])]


def test_team_name_map_uses_latest_snapshot_with_abbreviations():
    snaps = [
        _standings("2025-01-01", "Stealth", abbrs={"Stealth": "STL"}),
        _standings("2025-01-08", "Stealth"),
    ]
    assert trends.team_name_map(snaps) == {"STL": "Stealth"}
    assert trends.team_name_map([]) == {}


def test_unknown_division_gives_empty_series():
    snaps = [_standings("2025-01-01", "A")]
    result = trends.standings_position_series(snaps, "NOPE")
    assert result.dates == ["2025-01-01"]
    assert result.series == []


def test_label_teams_resolves_abbreviations_from_latest_listing():
    snaps = [
        Snapshot(date="2025-01-01", divisions={DIV: [PlayerStats(rank=1, name="Ann", team="OLD")]}),
        Snapshot(
            date="2025-01-08",
            divisions={DIV: [PlayerStats(rank=1, name="Ann", team="STL"), PlayerStats(rank=2, name="Bob", team="ZZZ")]},
        ),
    ]
    result = trends.label_teams(snaps, DIV, ["Ann", "Bob"], {"STL": "Stealth"})
    assert result == {"Ann": "Stealth", "Bob": "ZZZ"}
