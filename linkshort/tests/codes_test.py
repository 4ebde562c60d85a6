import pytest
from datetime import datetime

from linkshort.core.errors import ShortCodeExhaustedError
from linkshort.db import repository
from linkshort.db.models import Link
from linkshort.services.codes import ShortCodeGenerator
from linkshort.services.shortener import LinkService
from linkshort.utils.encoding import ALPHABET, generate_short_code, is_valid_short_code
from linkshort.utils.timewindow import subtract_months, window_start


def _sequence(*codes):
    """random_code stand-in that hands out the given codes in order."""
    remaining = list(codes)
    return lambda length: remaining.pop(0)


def test_generate_short_code_alphabet_and_length():
    for length in (1, 7, 13):
        code = generate_short_code(length)
        assert len(code) == length
        assert set(code) <= set(ALPHABET)
        assert is_valid_short_code(code)


def test_generate_short_code_rejects_bad_length():
    with pytest.raises(ValueError):
        generate_short_code(0)


def test_is_valid_short_code():
    assert is_valid_short_code("abc123")
    assert not is_valid_short_code("")
    assert not is_valid_short_code("ABC")
    assert not is_valid_short_code("a/b")


def test_generator_skips_existing_codes(db_session, make_link):
    make_link(short_url="first")
    make_link(short_url="second")

    generator = ShortCodeGenerator(db_session, random_code=_sequence("first", "second", "third"))

    assert generator.generate() == "third"


def test_generator_gives_up_after_max_attempts(db_session, make_link):
    make_link(short_url="dup")
    calls = []

    def always_dup(length):
        calls.append(length)
        return "dup"

    generator = ShortCodeGenerator(db_session, length=9, max_attempts=4, random_code=always_dup)

    with pytest.raises(ShortCodeExhaustedError) as exc_info:
        generator.generate()
    assert exc_info.value.attempts == 4
    assert calls == [9, 9, 9, 9]


def test_shorten_retries_when_insert_hits_unique_constraint(db_session, make_link, monkeypatch):
    """Simulates losing the race between the existence check and the insert."""
    make_link(short_url="raced")
    monkeypatch.setattr(repository, "short_url_exists", lambda db, short_url: False)

    generator = ShortCodeGenerator(db_session, random_code=_sequence("raced", "fresh"))
    short_link = LinkService(db_session, code_generator=generator).shorten(
        "https://example.com/race", "https://sho.rt"
    )

    assert short_link.url == "https://sho.rt/fresh"
    link = db_session.get(Link, short_link.link_id)
    assert link.short_url == "fresh"
    assert db_session.query(Link).count() == 2


def test_shorten_gives_up_when_every_insert_collides(db_session, make_link, monkeypatch):
    make_link(short_url="raced")
    monkeypatch.setattr(repository, "short_url_exists", lambda db, short_url: False)

    generator = ShortCodeGenerator(db_session, max_attempts=2, random_code=lambda length: "raced")

    with pytest.raises(ShortCodeExhaustedError):
        LinkService(db_session, code_generator=generator).shorten("https://example.com/x", "https://sho.rt")
    assert db_session.query(Link).count() == 1


def test_subtract_months_clamps_day():
    assert subtract_months(datetime(2026, 3, 31, 8, 30), 1) == datetime(2026, 2, 28, 8, 30)
    assert subtract_months(datetime(2024, 3, 31), 1) == datetime(2024, 2, 29)
    assert subtract_months(datetime(2026, 1, 15), 1) == datetime(2025, 12, 15)
    assert subtract_months(datetime(2026, 5, 10), 0) == datetime(2026, 5, 10)


def test_window_start_years_from_leap_day():
    assert window_start(datetime(2024, 2, 29, 6, 0), years=1) == datetime(2023, 2, 28, 6, 0)


def test_window_start_applies_units_in_order():
    now = datetime(2026, 3, 31, 12, 0)
    # years, then months (clamped), then days, hours, minutes
    expected = datetime(2025, 2, 27, 9, 45)
    assert window_start(now, years=1, months=1, days=1, hours=2, minutes=15) == expected


def test_window_start_without_units():
    assert window_start(datetime(2026, 3, 31)) is None


def test_window_start_rejects_negative_units():
    with pytest.raises(ValueError):
        window_start(datetime(2026, 3, 31), days=-1)


@pytest.mark.parametrize(
    "units",
    [{"years": 3000}, {"days": 10**9}, {"minutes": 10**20}, {"months": 10**6}],
)
def test_window_start_saturates_at_datetime_min(units):
    assert window_start(datetime(2026, 3, 31), **units) == datetime.min


@pytest.mark.parametrize("length", [0, 33])
def test_generator_rejects_length_outside_column(db_session, length):
    with pytest.raises(ValueError):
        ShortCodeGenerator(db_session, length=length)
