from parsing import player_stats_parser
from tests.factories import player_page, player_row


def _page():
    return player_page(
        [
            player_row(1, "Alex Smith", "9", "F", "STL", 10, 8, 6, 14, "1.40", 2, 1, 0, 0, 1, 4),
            player_row(2, "Jamie Lee", "", "D", "DEV", 9, 3, 7, 10, "1.11", 0, 2, 0, 1, 0, 12),
            # Wrapped cell / totals rows the site sometimes appends
            "<tr><td colspan='16'>Totals</td></tr>",
            player_row(3, "", "", "", "", *([0] * 11)),
        ]
    )


def test_player_rows_decoded_with_recomputed_rank():
    players = player_stats_parser.parse_player_stats(_page())
    assert [p.name for p in players] == ["Alex Smith", "Jamie Lee"]
    alex, jamie = players
    assert alex.rank == 1 and jamie.rank == 2
    assert (alex.jersey_number, alex.position, alex.team) == ("9", "F", "STL")
    assert (alex.gp, alex.goals, alex.assists, alex.points) == (10, 8, 6, 14)
    assert alex.points_per_game == 1.4
    assert (alex.ppg, alex.ppa, alex.shg, alex.sha, alex.gwg, alex.pim) == (2, 1, 0, 0, 1, 4)
    assert jamie.jersey_number == ""
    assert jamie.pim == 12


def test_player_json_keys():
    alex = player_stats_parser.parse_player_stats(_page())[0]
    payload = alex.to_dict()
    assert payload["jerseyNumber"] == "9"
    assert payload["pointsPerGame"] == 1.4
    assert "jersey_number" not in payload


def test_source_rank_column_ignored():
    html = player_page(
        [
            player_row(7, "First", "1", "F", "A", 1, 0, 0, 0, "0", 0, 0, 0, 0, 0, 0),
            player_row(3, "Second", "2", "F", "A", 1, 0, 0, 0, "0", 0, 0, 0, 0, 0, 0),
        ]
    )
    assert [(p.rank, p.name) for p in player_stats_parser.parse_player_stats(html)] == [
        (1, "First"),
        (2, "Second"),
    ]


def test_page_without_stats_table_gives_no_players():
    html = "<html><body><table><tr><td>No stats yet</td></tr></table></body></html>"
    assert player_stats_parser.parse_player_stats(html) == []
