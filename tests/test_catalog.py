from unittest.mock import MagicMock, patch

from seekarr.models.results import ContentKind, Language, QualityTier, RawResult
from seekarr.services.catalog import build_catalog, classify_result


def make_result(name, source="P1", id_="1"):
    return RawResult(
        id=id_, name=name, size="1 GB", source=source, locator=f"url-{name}"
    )


def test_classify_result_annotates_everything():
    item = classify_result(make_result("Movie X 1080p Dual Audio English"))

    assert item.tier == QualityTier.FHD_1080P
    assert item.quality.rank == 4
    assert item.content.kind == ContentKind.MOVIE
    assert item.languages == {Language.MULTI}
    assert item.name == "Movie X 1080p Dual Audio English"
    assert item.source == "P1"


def test_movie_scenario():
    titles = [
        "Movie X 480p SD",
        "Movie X 720p HD",
        "Movie X 2160p BluRay",
        "Movie X 1080p WEB-DL",
    ]

    catalog = build_catalog([make_result(t) for t in titles], "Movie X", sources=[])

    assert [m.name for m in catalog.movies] == [
        "Movie X 2160p BluRay",
        "Movie X 1080p WEB-DL",
        "Movie X 720p HD",
    ]
    assert catalog.series == []
    assert catalog.preferred_view == ContentKind.MOVIE


def test_series_scenario():
    titles = [
        "Show.Name.S01E01.1080p",
        "Show.Name.S01E01.720p",
        "Show.Name.S01E02.1080p",
    ]

    catalog = build_catalog([make_result(t) for t in titles], "Show Name", sources=[])

    assert catalog.movies == []
    assert len(catalog.series) == 1
    series = catalog.series[0]
    assert series.name == "Show.Name"
    assert series.total_episodes == 2
    assert len(series.seasons[1][1]) == 2
    assert len(series.seasons[1][2]) == 1
    assert catalog.preferred_view == ContentKind.EPISODE


def test_partial_episode_marker_goes_nowhere():
    catalog = build_catalog(
        [make_result("Show.Name.E05.1080p")], "Show Name", sources=[]
    )

    assert catalog.movies == []
    assert catalog.series == []
    assert catalog.excluded == 1


def test_mixed_results_split_into_views():
    results = [
        make_result("Movie X 1080p", source="YTS", id_="1"),
        make_result("Movie.X.S01E01.720p", source="TPB", id_="1"),
        make_result("Movie X Season 2", source="TPB", id_="2"),
    ]

    catalog = build_catalog(results, "Movie X", sources=[])

    assert [m.name for m in catalog.movies] == ["Movie X 1080p"]
    assert [s.name for s in catalog.series] == ["Movie.X"]
    assert catalog.excluded == 1
    assert catalog.preferred_view == ContentKind.MOVIE


def test_source_filter_argument():
    results = [
        make_result("Movie X 2160p", source="YTS"),
        make_result("Movie X 1080p", source="TPB"),
    ]

    catalog = build_catalog(results, "Movie X", sources=["TPB"])

    assert [m.name for m in catalog.movies] == ["Movie X 1080p"]


def test_source_filter_from_settings():
    """Source filter falls back to the configured one."""
    results = [
        make_result("Movie X 2160p", source="YTS"),
        make_result("Movie X 1080p", source="TPB"),
    ]

    with patch("seekarr.services.catalog.get_settings") as mock_settings:
        mock_settings.return_value = MagicMock(source_filter=["YTS"])
        catalog = build_catalog(results, "Movie X")

    assert [m.name for m in catalog.movies] == ["Movie X 2160p"]


def test_empty_input():
    catalog = build_catalog([], "Movie X", sources=[])

    assert catalog.movies == []
    assert catalog.series == []
    assert catalog.excluded == 0
    assert catalog.preferred_view == ContentKind.MOVIE


def test_catalog_is_serialisable():
    catalog = build_catalog(
        [make_result("Movie X 1080p"), make_result("Show.S01E01.720p")],
        "Movie X",
        sources=[],
    )

    data = catalog.model_dump(mode="json")

    assert data["movies"][0]["quality"]["tier"] == "1080p"
    assert data["series"][0]["total_episodes"] == 1
