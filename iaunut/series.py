# Nutation series evaluation: IAU 1980 and IAU 2000A models

import numpy as np
import iaunut.fundamental as fundamental
from iaunut.fundamental import ARCSEC_TO_RAD
from iaunut.nutation_tables import (NUT_1980,NALS_2000A,CLS_2000A,
                                    NAPL_2000A,ICPL_2000A)


# Highest multiple of each FK5 fundamental argument (mm,ms,ff,dd,om) found in
# the IAU 1980 table
MULTIPLES_1980 = (3,2,4,4,2)


def multiple_angles(arg,n):

    """
    Sines and cosines of the multiple angles k*arg for k = 1..n

    Only sin(arg) and cos(arg) are evaluated; the double angle formula gives
    k = 2 and the angle addition formula the higher multiples

    Keyword arguments:
        arg [float] : angle in radians
        n [int]     : highest multiple (n >= 2)

    Returns:
        ss [list] : sin(k*arg) for k = 1..n
        cc [list] : cos(k*arg) for k = 1..n

    """
    su = np.sin(arg)
    cu = np.cos(arg)
    ss = [su]
    cc = [cu]

    # sin(2L), cos(2L)
    sv = 2.0*su*cu
    cv = cu*cu - su*su
    ss.append(sv)
    cc.append(cv)

    for i in range(2,n):
        s = su*cv + cu*sv
        cv = cu*cv - su*sv
        sv = s
        ss.append(sv)
        cc.append(cv)

    return ss,cc


def nutation_iau1980(t):

    """
    Nutation in longitude and obliquity from the IAU 1980 theory of nutation

    Each term of the series has the argument
        W = i*MM + j*MS + k*FF + l*DD + m*OM
    and contributes (a + b*t/10)*sin(W) to the nutation in longitude and
    (c + d*t/10)*cos(W) to the nutation in obliquity. The sine and cosine of W
    are built from the tabulated multiple angles of the fundamental arguments
    by angle addition

    Keyword arguments:
        t [float] : Julian centuries of TT from J2000.0

    Returns:
        dpsi [float] : nutation in longitude [radians]
        deps [float] : nutation in obliquity [radians]

    References:
        Seidelmann (1982) Summary of 1980 IAU Theory of Nutation (Final Report
        of the IAU Working Group on Nutation), Transactions of the IAU Vol.
        XVIII A
        Woolard (1953) A redevelopment of the theory of nutation, The
        Astronomical Journal, 58, 1-3

    """
    t10 = t/10.0

    # sin(k*angle) and cos(k*angle) of the fundamental arguments
    ss = []
    cc = []
    for arg,n in zip(fundamental.fundamental_fk5(t),MULTIPLES_1980):
        s,c = multiple_angles(arg,n)
        ss.append(s)
        cc.append(c)

    dp = 0.0
    de = 0.0
    for row in NUT_1980.tolist():

        # argument of sine and cosine
        started = False
        sv = 0.0
        cv = 0.0
        for m in range(5):
            j = row[m]
            if j == 0:
                continue
            k = abs(j)
            su = ss[m][k-1]
            if j < 0:
                su = -su
            cu = cc[m][k-1]
            if not started:
                sv = su
                cv = cu
                started = True
            else:
                sw = su*cv + cu*sv
                cv = cu*cv - su*sv
                sv = sw

        # longitude coefficient
        f = row[5]
        if row[6] != 0:
            f += t10*row[6]

        # obliquity coefficient
        g = row[7]
        if row[8] != 0:
            g += t10*row[8]

        dp += f*sv
        de += g*cv

    # the dominant term, sin(OM) and cos(OM)
    dp += (-1742.0*t10 - 171996.0)*ss[4][0]
    de += (89.0*t10 + 92025.0)*cc[4][0]

    # 0.1 mas to radians
    dpsi = 0.0001*ARCSEC_TO_RAD*dp
    deps = 0.0001*ARCSEC_TO_RAD*de

    return float(dpsi),float(deps)


def sequential_sum(first,second):

    """
    Sum the terms first[i] + second[i] from the last i to the first, adding
    one value at a time, in the same order a term-by-term loop
    acc = acc + first[i] + second[i] would

    """
    terms = np.column_stack((first,second))[::-1].ravel()
    return np.cumsum(terms)[-1]


def nutation_iau2000a(t):

    """
    Nutation in longitude and obliquity from the IAU 2000A model (MHB2000
    luni-solar and planetary nutation, free core nutation omitted)

    The nutation is with respect to the equinox and ecliptic of date. The
    series are summed in reverse order, smallest terms first

    Keyword arguments:
        t [float] : Julian centuries of TT from J2000.0

    Returns:
        dpsi [float] : nutation in longitude [radians]
        deps [float] : nutation in obliquity [radians]

    References:
        Mathews, Herring and Buffet (2002) Modeling of nutation and
        precession: New nutation series for nonrigid Earth and insights into
        the Earth's interior, J. Geophys. Res., 107, B4
        Souchay, Loysel, Kinoshita and Folgueira (1999) A&A Supp. Ser. 135, 111
        International Astronomical Union (2020): SOFA tools for Earth Attitude

    """
    # Luni-solar nutation
    el,elp,f,d,om = fundamental.delaunay_iau2000(t)
    n = NALS_2000A
    arg = n[:,0]*el + n[:,1]*elp + n[:,2]*f + n[:,3]*d + n[:,4]*om
    sarg = np.sin(arg)
    carg = np.cos(arg)

    c = CLS_2000A
    dp = sequential_sum((c[:,0] + c[:,1]*t)*sarg,c[:,2]*carg)
    de = sequential_sum((c[:,3] + c[:,4]*t)*carg,c[:,5]*sarg)

    # 1e-7 arcsec to radians
    dpsi = dp*ARCSEC_TO_RAD/1.0e7
    deps = de*ARCSEC_TO_RAD/1.0e7

    # Planetary nutation
    fa = fundamental.planetary_iau2000(t)
    n = NAPL_2000A
    arg = n[:,0]*fa[0]
    for k in range(1,14):
        arg = arg + n[:,k]*fa[k]
    sarg = np.sin(arg)
    carg = np.cos(arg)

    c = ICPL_2000A
    dp = sequential_sum(c[:,0]*sarg,c[:,1]*carg)
    de = sequential_sum(c[:,2]*sarg,c[:,3]*carg)

    dpsi += dp*ARCSEC_TO_RAD/1.0e7
    deps += de*ARCSEC_TO_RAD/1.0e7

    return float(dpsi),float(deps)
