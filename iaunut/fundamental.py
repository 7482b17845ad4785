# Fundamental arguments of the nutation theories

import numpy as np


# arc seconds to radians
ARCSEC_TO_RAD = np.pi/180.0/3600.0

# arc seconds in a full circle
ARCSEC_PER_CIRCLE = 1296000.0


def mod3600(x):
    """
    Reduce an angle in arc seconds to the interval [0, 1296000)
    """
    return x - ARCSEC_PER_CIRCLE*np.floor(x/ARCSEC_PER_CIRCLE)


def fundamental_fk5(t):

    """
    Fundamental arguments in the FK5 reference system, used by the IAU 1980
    nutation series

    The linear part of each argument is reduced to one revolution before the
    quadratic and cubic terms are added

    Keyword arguments:
        t [float] : Julian centuries of TT from J2000.0

    Returns:
        args [tuple] : (mm,ms,ff,dd,om) in radians
            mm : mean longitude of the Moon minus mean longitude of the Moon's
                 perigee
            ms : mean longitude of the Sun minus mean longitude of the Sun's
                 perigee
            ff : mean longitude of the Moon minus mean longitude of the Moon's
                 node
            dd : mean elongation of the Moon from the Sun
            om : longitude of the mean ascending node of the lunar orbit on the
                 ecliptic, measured from the mean equinox of date

    """
    t2 = t*t

    mm = ((mod3600(1717915922.633*t + 485866.733) + (0.064*t + 31.310)*t2)
                                                            *ARCSEC_TO_RAD)
    ms = ((mod3600(129596581.224*t + 1287099.804) - (0.012*t + 0.577)*t2)
                                                            *ARCSEC_TO_RAD)
    ff = ((mod3600(1739527263.137*t + 335778.877) + (0.011*t - 13.257)*t2)
                                                            *ARCSEC_TO_RAD)
    dd = ((mod3600(1602961601.328*t + 1072261.307) + (0.019*t - 6.891)*t2)
                                                            *ARCSEC_TO_RAD)
    om = ((mod3600(-6962890.539*t + 450160.280) + (0.008*t + 7.455)*t2)
                                                            *ARCSEC_TO_RAD)

    return mm,ms,ff,dd,om


def delaunay_iau2000(t):

    """
    Fundamental (Delaunay) arguments from Simon et al. (1994), used by the
    luni-solar part of the IAU 2000A nutation series

    The polynomials are evaluated without reduction to one revolution; the
    range reduction is left to the trigonometric functions

    Keyword arguments:
        t [float] : Julian centuries of TT from J2000.0

    Returns:
        args [tuple] : (el,elp,f,d,om) in radians
            el  : mean anomaly of the Moon
            elp : mean anomaly of the Sun
            f   : mean argument of the latitude of the Moon
            d   : mean elongation of the Moon from the Sun
            om  : mean longitude of the ascending node of the Moon

    """
    el = (485868.249036 + t*(1717915923.2178 + t*(31.8792
            + t*(0.051635 + t*(-0.00024470)))))*ARCSEC_TO_RAD
    elp = (1287104.79305 + t*(129596581.0481 + t*(-0.5532
            + t*(0.000136 + t*(-0.00001149)))))*ARCSEC_TO_RAD
    f = (335779.526232 + t*(1739527262.8478 + t*(-12.7512
            + t*(-0.001037 + t*(0.00000417)))))*ARCSEC_TO_RAD
    d = (1072260.70369 + t*(1602961601.2090 + t*(-6.3706
            + t*(0.006593 + t*(-0.00003169)))))*ARCSEC_TO_RAD
    om = (450160.398036 + t*(-6962890.5431 + t*(7.4722
            + t*(0.007702 + t*(-0.00005939)))))*ARCSEC_TO_RAD

    return el,elp,f,d,om


def planetary_iau2000(t):

    """
    Fundamental arguments of the planetary part of the IAU 2000A nutation
    series (MHB2000 luni-solar arguments and Souchay et al. 1999 planetary
    longitudes)

    Keyword arguments:
        t [float] : Julian centuries of TT from J2000.0

    Returns:
        args [numpy array] : the 14 arguments in radians, in the column order
                             of the planetary multipliers table:
                             [al,alsu,af,ad,aom,alme,alve,alea,alma,alju,alsa,
                              alur,alne,apa]

    """
    # Luni-solar arguments (MHB2000)
    al = 2.35555598 + 8328.6914269554*t     # mean anomaly of the Moon
    alsu = 6.24006013 + 628.301955*t        # mean anomaly of the Sun
    af = 1.627905234 + 8433.466158131*t     # mean argument of latitude
    ad = 5.198466741 + 7771.3771468121*t    # mean elongation of the Moon
    aom = 2.18243920 - 33.757045*t          # longitude of the Moon's node

    # General accumulated precession in longitude
    apa = (0.02438175 + 0.00000538691*t)*t

    # Planetary longitudes, Mercury through Neptune
    alme = 4.402608842 + 2608.7903141574*t
    alve = 3.176146697 + 1021.3285546211*t
    alea = 1.753470314 + 628.3075849991*t
    alma = 6.203480913 + 334.0612426700*t
    alju = 0.599546497 + 52.9690962641*t
    alsa = 0.874016757 + 21.3299104960*t
    alur = 5.481293871 + 7.4781598567*t
    alne = 5.321159000 + 3.8127774000*t

    return np.array([al,alsu,af,ad,aom,alme,alve,alea,alma,alju,alsa,alur,
                     alne,apa])
