import pytest

from seekarr.models.results import ContentKind
from seekarr.services.content_type import classify_content, is_episode_like, series_name


def test_movie_title_is_movie_like():
    content = classify_content("Movie X 2160p BluRay")
    assert content.kind == ContentKind.MOVIE
    assert content.is_movie
    assert not content.is_aggregatable


def test_full_marker_extracts_season_and_episode():
    content = classify_content("Show.Name.S02E11.1080p")
    assert content.kind == ContentKind.EPISODE
    assert content.season == 2
    assert content.episode == 11
    assert content.is_aggregatable


def test_markers_are_case_insensitive():
    content = classify_content("show name s1e5 720p")
    assert (content.season, content.episode) == (1, 5)


def test_episode_only_marker_is_not_aggregatable():
    content = classify_content("Show.Name.E05.1080p")
    assert content.kind == ContentKind.EPISODE
    assert content.season is None
    assert content.episode == 5
    assert not content.is_aggregatable


def test_season_pack_is_not_aggregatable():
    content = classify_content("Show Name Season 2 Complete 720p")
    assert content.kind == ContentKind.EPISODE
    assert not content.is_aggregatable


def test_zero_season_counts_as_missing():
    assert not classify_content("Show.Name.S00E01.720p").is_aggregatable


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Show.Name.S01E01.1080p", True),
        ("Show Name Season 3", True),
        ("Show Name Episode 4", True),
        ("Movie X 1080p", False),
        ("", False),
    ],
)
def test_is_episode_like(name, expected):
    assert is_episode_like(name) is expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Show.Name.S01E01.1080p", "Show.Name"),
        ("Show Name S01E01 720p", "Show Name"),
        ("Show_Name_s03e10_WEB-DL", "Show_Name"),
        ("Show Name - S01E02", "Show Name"),
        ("Show Name Season 1", "Show Name Season 1"),
        ("", ""),
    ],
)
def test_series_name(name, expected):
    assert series_name(name) == expected
