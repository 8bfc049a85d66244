from parsing import table_extractor


def _tables(html: str):
    return table_extractor.parse_document(html).find_all("table")


def test_body_rows_without_tbody_skips_thead_rows():
    html = (
        "<table><thead><tr><td>H1</td><td>H2</td></tr></thead>"
        "<tr><td>a</td><td>b</td></tr><tr><td>c</td></tr></table>"
    )
    rows = table_extractor.body_rows(_tables(html)[0])
    assert [[c.get_text() for c in r] for r in rows] == [["a", "b"], ["c"]]


def test_body_rows_skip_tfoot():
    html = (
        "<table><tbody><tr><td>inside</td></tr></tbody>"
        "<tfoot><tr><td>total</td></tr></tfoot></table>"
    )
    rows = table_extractor.body_rows(_tables(html)[0])
    assert [[c.get_text() for c in r] for r in rows] == [["inside"]]


def test_unclosed_cells_and_rows_are_split():
    html = "<table><tr><td>a<td>b<td>c<tr><td>d<td>e</table>"
    rows = table_extractor.body_rows(_tables(html)[0])
    assert [[c.get_text() for c in r] for r in rows] == [["a", "b", "c"], ["d", "e"]]


def test_nested_table_rows_belong_to_inner_table():
    html = (
        "<table><tr><td><table><tr><td>1</td><td>2</td><td>3</td></tr></table></td></tr></table>"
    )
    outer, inner = _tables(html)
    assert len(table_extractor.body_rows(outer)) == 1
    assert len(table_extractor.body_rows(outer)[0]) == 1
    assert len(table_extractor.body_rows(inner)[0]) == 3


def test_find_tables_with_min_cells_keeps_document_order():
    html = (
        "<table id='a'><tr>" + "<td>x</td>" * 8 + "</tr></table>"
        "<table id='b'><tr><td>x</td></tr></table>"
        "<table id='c'><tr>" + "<td>x</td>" * 9 + "</tr></table>"
    )
    soup = table_extractor.parse_document(html)
    found = table_extractor.find_tables_with_min_cells(soup, 8)
    assert [t["id"] for t in found] == ["a", "c"]


def test_find_table_by_headers_matches_all_keywords():
    html = (
        "<table id='nav'><tr><td>Player search</td></tr></table>"
        "<table id='stats'><tr><th>Player</th><th>GP</th><th>PTS</th></tr></table>"
    )
    soup = table_extractor.parse_document(html)
    table = table_extractor.find_table_by_headers(soup, ["player", "gp", "pts"])
    assert table is not None and table["id"] == "stats"
    assert table_extractor.find_table_by_headers(soup, ["goalie"]) is None


def test_rows_per_table_pads_missing_tables():
    html = "<table><tr><td>a</td></tr></table>"
    out = table_extractor.rows_per_table(_tables(html), 3)
    assert len(out) == 3
    assert len(out[0]) == 1
    assert out[1] == [] and out[2] == []
