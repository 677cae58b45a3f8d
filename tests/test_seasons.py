import pytest

from garden.seasons import day_in_season, season_for_day, year_for_day


def test_season_for_day():
    """Seasons should be 7 days long and wrap every 28 days."""
    assert season_for_day(1) == "spring"
    assert season_for_day(7) == "spring"
    assert season_for_day(8) == "summer"
    assert season_for_day(15) == "fall"
    assert season_for_day(22) == "winter"
    assert season_for_day(28) == "winter"
    assert season_for_day(29) == "spring"
    with pytest.raises(ValueError):
        season_for_day(0)


def test_day_in_season():
    """Day-in-season should restart at 1 each season."""
    assert day_in_season(1) == 1
    assert day_in_season(7) == 7
    assert day_in_season(8) == 1
    assert day_in_season(30) == 2


def test_year_for_day():
    """Years should roll over after four seasons."""
    assert year_for_day(1) == 1
    assert year_for_day(28) == 1
    assert year_for_day(29) == 2
    assert year_for_day(57) == 3
