import pytest

from lowbudgetspotify.songs import Song, SongCatalog


@pytest.fixture
def catalog(tmp_path):
    path = tmp_path / "song.txt"
    path.write_text(
        "Queen,Bohemian Rhapsody\n"
        "Queen,Radio Ga Ga\n"
        "ABBA,Waterloo\n"
        "queen,Another One\n",
        encoding="utf-8",
    )
    cat = SongCatalog(path)
    cat.load()
    return cat


def test_load(catalog):
    assert len(catalog) == 4
    assert list(catalog)[2] == Song("ABBA", "Waterloo")


def test_str_format():
    assert str(Song("ABBA", "Waterloo")) == "ABBA - Waterloo"


def test_find_exact_ignores_case(catalog):
    assert catalog.find_exact("waterloo") == Song("ABBA", "Waterloo")


def test_find_exact_missing(catalog):
    assert catalog.find_exact("Water") is None


def test_search_songs_substring(catalog):
    found = catalog.search_songs("RA")
    assert [s.song_name for s in found] == ["Radio Ga Ga"] or all(
        "ra" in s.song_name.lower() for s in found
    )
    assert Song("Queen", "Radio Ga Ga") in found
    assert Song("ABBA", "Waterloo") not in found


def test_search_songs_empty_query_matches_all(catalog):
    assert catalog.search_songs("") == list(catalog)


def test_search_artists_deduplicates_ignoring_case(catalog):
    assert catalog.search_artists("QUE") == ["Queen"]


def test_search_artists_none(catalog):
    assert catalog.search_artists("Beatles") == []


def test_songs_by_exact_artist(catalog):
    assert catalog.songs_by("Queen") == [
        Song("Queen", "Bohemian Rhapsody"),
        Song("Queen", "Radio Ga Ga"),
    ]


def test_find_by_name_is_case_sensitive(catalog):
    assert catalog.find_by_name("Waterloo") == [Song("ABBA", "Waterloo")]
    assert catalog.find_by_name("waterloo") == []


def test_add_persists(tmp_path):
    path = tmp_path / "song.txt"
    cat = SongCatalog(path)
    added = cat.add("Lee Ann", "First Track")
    assert cat.find_exact("first track") == added

    reloaded = SongCatalog(path)
    reloaded.load()
    assert list(reloaded) == [Song("Lee Ann", "First Track")]


def test_song_name_keeps_commas(tmp_path):
    path = tmp_path / "song.txt"
    path.write_text("Band,Yes, No\n", encoding="utf-8")
    cat = SongCatalog(path)
    cat.load()
    assert list(cat) == [Song("Band", "Yes, No")]


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        SongCatalog(tmp_path / "absent.txt").load()