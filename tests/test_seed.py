import sqlite3

from moviedb.seed import SAMPLE_MOVIES, main, seed


def read_ids(path):
    with sqlite3.connect(path) as conn:
        return [row[0] for row in conn.execute("SELECT id FROM movies ORDER BY id")]


def test_seed_creates_table_and_rows(tmp_path):
    path = tmp_path / "movies.sqlite"
    assert seed(str(path)) == len(SAMPLE_MOVIES)
    assert read_ids(path) == [row["id"] for row in SAMPLE_MOVIES]


def test_seed_is_idempotent(tmp_path):
    path = tmp_path / "movies.sqlite"
    seed(str(path))
    assert seed(str(path)) == 0
    assert len(read_ids(path)) == len(SAMPLE_MOVIES)


def test_seed_reset_replaces_rows(tmp_path):
    path = tmp_path / "movies.sqlite"
    seed(str(path))
    assert seed(str(path), reset=True, movies=SAMPLE_MOVIES[:2]) == 2
    assert read_ids(path) == [1, 2]


def test_seed_keeps_numeric_types(tmp_path):
    path = tmp_path / "movies.sqlite"
    seed(str(path))
    with sqlite3.connect(path) as conn:
        rating, box_office, year = conn.execute(
            "SELECT rating, box_office_collection, release_year FROM movies WHERE id = 1"
        ).fetchone()
    assert rating == 4.8
    assert box_office == 220 and isinstance(box_office, int)
    assert year == 2016


def test_main_accepts_path_and_reset(tmp_path):
    path = tmp_path / "cli.sqlite"
    main(["--path", str(path)])
    main(["--path", str(path), "--reset"])
    assert len(read_ids(path)) == len(SAMPLE_MOVIES)
