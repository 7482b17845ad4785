# Module for the obliquity of the ecliptic

import logging
import numpy as np
from iaunut.ephemeris import ReductionMethod
from iaunut.fundamental import ARCSEC_TO_RAD
import iaunut.checkutils as checkutils


logger = logging.getLogger(__name__)

# Obliquity at J2000.0 [arc seconds] and the coefficients of the powers of
# u = t/100 (units of 10000 Julian years), divided by 100 when applied
CAPITAINE_2003 = (84381.406,
                  [-468367.69,-183.1,200340.,-5760.,-43400.,
                   0.0,0.0,0.0,0.0,0.0])
SIMON_1994 = (84381.412,
              [-468092.7,-152.,199890.,-5138.,-24967.,
               -3905.,712.,2787.,579.,245.])
WILLIAMS_1994 = (84381.406173,
                 [-468339.6,-175.,199890.,-5138.,-24967.,
                  -3905.,712.,2787.,579.,245.])
LASKAR_1986 = (84381.448,
               [-468093.,-155.,199925.,-5138.,-24967.,
                -3905.,712.,2787.,579.,245.])
IAU_1976 = (84381.448,
            [-468150.,-590.,181300.,0.0,0.0,0.0,0.0,0.0,0.0,0.0])

POLYNOMIALS = {
        ReductionMethod.IAU_1976: IAU_1976,
        ReductionMethod.LASKAR_1986: LASKAR_1986,
        ReductionMethod.SIMON_1994: SIMON_1994,
        ReductionMethod.WILLIAMS_1994: WILLIAMS_1994,
        ReductionMethod.JPL_DE4xx: WILLIAMS_1994,
        ReductionMethod.IAU_2000: CAPITAINE_2003,
        ReductionMethod.IAU_2006: CAPITAINE_2003,
        ReductionMethod.IAU_2009: CAPITAINE_2003
        }

# Vondrak et al. (2011) long-term obliquity: polynomial coefficients
# [arc seconds] and the periodic terms [period (centuries), cos, sin]
VONDRAK_POLYNOMIAL = np.array([84028.206305,0.3624445,-0.00004039,-110E-9])
VONDRAK_PERIODIC = np.array([
                    [409.90,753.872780,-1704.720302],
                    [396.15,-247.805823,-862.308358],
                    [537.22,379.471484,447.832178],
                    [402.90,-53.880558,-889.571909],
                    [417.15,-90.109153,190.402846],
                    [288.92,-353.600190,-56.564991],
                    [4043.00,-63.115353,-296.222622],
                    [306.00,-28.248187,-75.859952],
                    [277.00,17.703387,67.473503],
                    [203.00,38.911307,3.014055]
                    ])

# Validity limit of the polynomial expressions [Julian centuries]
POLYNOMIAL_LIMIT = 100.0


def vondrak_2011(t):

    """
    Long-term mean obliquity of Vondrak et al. (2011), valid for +-200000
    years around J2000.0

    Keyword arguments:
        t [float] : Julian centuries of TT from J2000.0

    Returns:
        eps [float] : mean obliquity [radians]

    References:
        Vondrak, Capitaine and Wallace (2011) New precession expressions,
        valid for long time intervals, A&A 534, A22

    """
    w = 2.0*np.pi*t/VONDRAK_PERIODIC[:,0]
    y = np.sum(VONDRAK_PERIODIC[:,1]*np.cos(w)
               + VONDRAK_PERIODIC[:,2]*np.sin(w))
    y += np.sum(VONDRAK_POLYNOMIAL*t**np.arange(4))
    return float(y*ARCSEC_TO_RAD)


def mean_obliquity(t,eph):

    """
    Mean obliquity of the ecliptic for the reduction method of eph

    The polynomial of the reduction method is used within 10000 years of
    J2000.0. Further away, or with the IAU 2006/2009 methods when
    eph.use_vondrak_2011 is set, the long-term expression of Vondrak et al.
    (2011) is used instead

    Keyword arguments:
        t [float] : Julian centuries of TT from J2000.0
        eph [EphemerisElement] : ephemeris properties

    Returns:
        eps [float] : mean obliquity [radians]

    References:
        Lieske et al. (1977) A&A 58, 1-16 (IAU 1976)
        Laskar (1986) A&A 157, 59
        Simon et al. (1994) A&A 282, 663-683
        Williams (1994) AJ 108, 711-724
        Capitaine et al. (2003) A&A 412, 567-586

    """
    checkutils.check_scalar(t)
    method = eph.ephem_method

    if abs(t) > POLYNOMIAL_LIMIT:
        logger.warning(f"The date t = {t} centuries is too far from J2000, "
                       "the obliquity is forced to the Vondrak et al. (2011) "
                       "model")
        return vondrak_2011(t)
    if (method in (ReductionMethod.IAU_2006,ReductionMethod.IAU_2009)
            and eph.use_vondrak_2011):
        return vondrak_2011(t)

    rval_start,coeffs = POLYNOMIALS[method]
    u0 = t/100.0
    u = u0
    rval = rval_start
    for coeff in coeffs:
        rval += u*coeff/100.0
        u *= u0

    return rval*ARCSEC_TO_RAD
