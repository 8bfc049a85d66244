import pytest

from tests.factories import standings_page, standings_row, standings_table, team_cell


@pytest.fixture
def two_team_standings_html() -> str:
    rows = [
        standings_row(team_cell("Stealth", "STL"), 10, 7, 2, 1, 0, 15, ".750"),
        standings_row(team_cell("Devils", "DEV"), 10, 6, 3, 1, 0, 13, ".650"),
        "<tr>" + "<td></td>" * 8 + "</tr>",
    ]
    return standings_page([standings_table(rows)])
