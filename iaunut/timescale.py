# Time scale conversions module

import numpy as np
import datetime as dt
import logging
import iaunut.checkutils as checkutils


logger = logging.getLogger(__name__)

# Julian day of J2000.0 (2000/01/01 12:00 TT) and its calendar form
J2000 = 2451545.0
J2000_DATETIME = dt.datetime(2000,1,1,12,0,0)

JULIAN_DAYS_PER_CENTURY = 36525.0
SECONDS_PER_DAY = 86400.0

# TT - TAI [seconds]
TT_MINUS_TAI = 32.184

# Start dates of the leap seconds introduced since 1972 (TAI-UTC = 10 s on
# 1972/01/01)
LEAP_DATES = np.array([
                dt.datetime(1972,7,1),
                dt.datetime(1973,1,1),
                dt.datetime(1974,1,1),
                dt.datetime(1975,1,1),
                dt.datetime(1976,1,1),
                dt.datetime(1977,1,1),
                dt.datetime(1978,1,1),
                dt.datetime(1979,1,1),
                dt.datetime(1980,1,1),
                dt.datetime(1981,7,1),
                dt.datetime(1982,7,1),
                dt.datetime(1983,7,1),
                dt.datetime(1985,7,1),
                dt.datetime(1988,1,1),
                dt.datetime(1990,1,1),
                dt.datetime(1991,1,1),
                dt.datetime(1992,7,1),
                dt.datetime(1993,7,1),
                dt.datetime(1994,7,1),
                dt.datetime(1996,1,1),
                dt.datetime(1997,7,1),
                dt.datetime(1999,1,1),
                dt.datetime(2006,1,1),
                dt.datetime(2009,1,1),
                dt.datetime(2012,7,1),
                dt.datetime(2015,7,1),
                dt.datetime(2017,1,1),
                        ])

# Interval in which TT-UT1 is taken from the leap second table
LEAP_ERA_START = dt.datetime(1972,1,1)
LEAP_ERA_END = dt.datetime(2030,1,1)


def to_centuries(jd):
    """
    Julian centuries from J2000.0 for a given Julian day
    """
    return (jd - J2000)/JULIAN_DAYS_PER_CENTURY


def jd_from_datetime(dto):
    """
    Julian day of a datetime object (proleptic Gregorian calendar, the time
    scale is the one of the given datetime)

    Keyword arguments:
        dto [datetime] : date and time

    Returns:
        jd [float] : Julian day
    """
    if not isinstance(dto,dt.datetime):
        logger.error("The given dto needs to be a datetime object",
                     stack_info=True)
        raise TypeError("The given dto needs to be a datetime object")
    return J2000 + (dto - J2000_DATETIME).total_seconds()/SECONDS_PER_DAY


def datetime_from_jd(jd):
    """
    Datetime object of a Julian day, only for the years 1 to 9999

    Keyword arguments:
        jd [float] : Julian day

    Returns:
        dto [datetime] : date and time
    """
    checkutils.check_scalar(jd)
    try:
        dto = J2000_DATETIME + dt.timedelta(days=jd-J2000)
    except OverflowError:
        logger.error(f"Julian day {jd} outside the range of datetime objects",
                     stack_info=True)
        raise ValueError(f"Julian day {jd} outside the range of datetime "
                         "objects")
    return dto


def leap_seconds(dto):
    """
    TAI-UTC [seconds] at a UTC datetime; 10 seconds before 1972
    """
    ind = np.where(LEAP_DATES <= dto)
    return len(ind[0]) + 10


def delta_t_polynomial(year):

    """
    TT-UT1 [seconds] from the Espenak & Meeus (2006) polynomial expressions

    Keyword arguments:
        year [float] : decimal year

    Returns:
        delta_t [float] : TT-UT1 in seconds

    """
    y = year
    if y < -500.0 or y >= 2150.0:
        u = (y - 1820.0)/100.0
        return -20.0 + 32.0*u**2
    if y < 500.0:
        u = y/100.0
        return (10583.6 - 1014.41*u + 33.78311*u**2 - 5.952053*u**3
                - 0.1798452*u**4 + 0.022174192*u**5 + 0.0090316521*u**6)
    if y < 1600.0:
        u = (y - 1000.0)/100.0
        return (1574.2 - 556.01*u + 71.23472*u**2 + 0.319781*u**3
                - 0.8503463*u**4 - 0.005050998*u**5 + 0.0083572073*u**6)
    if y < 1700.0:
        t = y - 1600.0
        return 120.0 - 0.9808*t - 0.01532*t**2 + t**3/7129.0
    if y < 1800.0:
        t = y - 1700.0
        return (8.83 + 0.1603*t - 0.0059285*t**2 + 0.00013336*t**3
                - t**4/1174000.0)
    if y < 1860.0:
        t = y - 1800.0
        return (13.72 - 0.332447*t + 0.0068612*t**2 + 0.0041116*t**3
                - 0.00037436*t**4 + 0.0000121272*t**5 - 0.0000001699*t**6
                + 0.000000000875*t**7)
    if y < 1900.0:
        t = y - 1860.0
        return (7.62 + 0.5737*t - 0.251754*t**2 + 0.01680668*t**3
                - 0.0004473624*t**4 + t**5/233174.0)
    if y < 1920.0:
        t = y - 1900.0
        return (-2.79 + 1.494119*t - 0.0598939*t**2 + 0.0061966*t**3
                - 0.000197*t**4)
    if y < 1941.0:
        t = y - 1920.0
        return 21.20 + 0.84493*t - 0.076100*t**2 + 0.0020936*t**3
    if y < 1961.0:
        t = y - 1950.0
        return 29.07 + 0.407*t - t**2/233.0 + t**3/2547.0
    if y < 1986.0:
        t = y - 1975.0
        return 45.45 + 1.067*t - t**2/260.0 - t**3/718.0
    if y < 2005.0:
        t = y - 2000.0
        return (63.86 + 0.3345*t - 0.060374*t**2 + 0.0017275*t**3
                + 0.000651814*t**4 + 0.00002373599*t**5)
    if y < 2050.0:
        t = y - 2000.0
        return 62.92 + 0.32217*t + 0.005589*t**2
    u = (y - 1820.0)/100.0
    return -20.0 + 32.0*u**2 - 0.5628*(2150.0 - y)


def tt_minus_ut1(jd):

    """
    Estimate TT-UT1 in seconds for a given Julian day

    Inside the leap second era UT1 is taken as UTC, so that
    TT-UT1 = TAI-UTC + 32.184 s; outside of it the Espenak & Meeus
    polynomials are used

    Keyword arguments:
        jd [float] : Julian day

    Returns:
        tt_ut1 [float] : TT-UT1 in seconds

    """
    checkutils.check_scalar(jd)
    year = 2000.0 + (jd - J2000)/365.25
    if (year >= LEAP_ERA_START.year
            and year < LEAP_ERA_END.year):
        dto = datetime_from_jd(jd)
        if LEAP_ERA_START <= dto < LEAP_ERA_END:
            return leap_seconds(dto) + TT_MINUS_TAI
    return delta_t_polynomial(year)
