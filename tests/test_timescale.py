# tests/test_timescale.py

import datetime as dt
import pytest
import iaunut.timescale as timescale


def test_to_centuries():
    assert timescale.to_centuries(2451545.0) == 0.0
    assert timescale.to_centuries(2451545.0 + 36525.0) == 1.0
    assert timescale.to_centuries(2455013.5) == pytest.approx(
                                                0.0949623545516769,abs=1e-15)


def test_julian_day_of_datetime():
    assert timescale.jd_from_datetime(dt.datetime(2009,7,1)) == 2455013.5
    assert timescale.jd_from_datetime(dt.datetime(2000,1,1,12)) == 2451545.0
    assert timescale.jd_from_datetime(dt.datetime(1987,4,10)) == 2446895.5
    with pytest.raises(TypeError):
        timescale.jd_from_datetime('2009-07-01')


def test_datetime_of_julian_day():
    assert timescale.datetime_from_jd(2455013.5) == dt.datetime(2009,7,1)
    dto = timescale.datetime_from_jd(2455013.75)
    assert dto == dt.datetime(2009,7,1,6)
    with pytest.raises(ValueError):
        timescale.datetime_from_jd(1.0e10)


@pytest.mark.parametrize('dto,leap',[
    (dt.datetime(1971,1,1),10),
    (dt.datetime(1972,6,30),10),
    (dt.datetime(1972,7,1),11),
    (dt.datetime(2009,7,1),34),
    (dt.datetime(2016,12,31),36),
    (dt.datetime(2017,1,1),37),
    (dt.datetime(2025,1,1),37),
    ])
def test_leap_seconds(dto,leap):
    assert timescale.leap_seconds(dto) == leap


def test_tt_minus_ut1():
    # leap second era, UT1 taken as UTC
    assert timescale.tt_minus_ut1(2455013.5) == pytest.approx(66.184,
                                                              abs=1e-12)
    assert timescale.tt_minus_ut1(
        timescale.jd_from_datetime(dt.datetime(2020,1,1))) == pytest.approx(
                                                        69.184,abs=1e-12)
    # outside of it, the Espenak & Meeus polynomials
    assert timescale.tt_minus_ut1(2415020.5) == pytest.approx(-2.79,
                                                              abs=0.01)
    jd_1700 = timescale.J2000 - 300.0*365.25
    assert timescale.tt_minus_ut1(jd_1700) == pytest.approx(8.83,abs=0.01)


def test_delta_t_polynomial_continuity():
    for year in (1600.0,1700.0,1800.0,1900.0,1920.0,1986.0,2005.0):
        before = timescale.delta_t_polynomial(year - 1e-6)
        after = timescale.delta_t_polynomial(year)
        assert after == pytest.approx(before,abs=1.0)
