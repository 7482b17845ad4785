# Module for the nutation of the Earth's rotation axis: dispatch between the
# nutation theories, free core nutation correction, cached results and the
# nutation matrix

import logging
import collections
import numpy as np
from iaunut.ephemeris import ReductionMethod
from iaunut.rotation import Rotation
from iaunut.fundamental import ARCSEC_TO_RAD
from iaunut.eop import EOPDataUnavailableError
import iaunut.series as series
import iaunut.obliquity as obliquity
import iaunut.timescale as timescale
import iaunut.checkutils as checkutils


logger = logging.getLogger(__name__)

NutationResult = collections.namedtuple('NutationResult',
                                        ['longitude','obliquity'])

# The last calculated nutation, valid for the time t [Julian centuries] and
# the reduction method ordinal method
CacheEntry = collections.namedtuple('CacheEntry',
                                    ['longitude','obliquity','t','method'])

# Time and method of an entry that matches no request
INVALID_T = -1.0e100
INVALID_METHOD = -1


class UnsupportedModelError(ValueError):
    """
    Raised for a reduction method without a nutation theory
    """


def precession_adjusted_iau2000a(t):

    """
    IAU 2000A nutation adjusted to the IAU 2006 precession

    Keyword arguments:
        t [float] : Julian centuries of TT from J2000.0

    Returns:
        dpsi [float] : nutation in longitude [radians]
        deps [float] : nutation in obliquity [radians]

    References:
        Wallace and Capitaine (2006) Precession-nutation procedures consistent
        with IAU 2006 resolutions, A&A 459, 981-985, Eq. 5

    """
    dpsi,deps = series.nutation_iau2000a(t)
    dpsi = dpsi + dpsi*(0.4697e-6 - 2.7774e-6*t)
    deps = deps - deps*(2.7774e-6*t)
    return dpsi,deps


# Nutation theory of each reduction method. The methods before IAU 2000
# differ in their precession, not in their nutation
THEORIES = {
        ReductionMethod.IAU_1976: series.nutation_iau1980,
        ReductionMethod.LASKAR_1986: series.nutation_iau1980,
        ReductionMethod.SIMON_1994: series.nutation_iau1980,
        ReductionMethod.WILLIAMS_1994: series.nutation_iau1980,
        ReductionMethod.JPL_DE4xx: series.nutation_iau1980,
        ReductionMethod.IAU_2000: series.nutation_iau2000a,
        ReductionMethod.IAU_2006: precession_adjusted_iau2000a,
        ReductionMethod.IAU_2009: precession_adjusted_iau2000a
        }


def check_theories(theories):

    """
    Check that every reduction method has a nutation theory

    Keyword arguments:
        theories [dict] : nutation theory function by ReductionMethod

    """
    missing = [method.name for method in ReductionMethod
               if method not in theories]
    if missing:
        logger.error(f"No nutation theory for the reduction methods "
                     f"{missing}",stack_info=True)
        raise UnsupportedModelError(f"No nutation theory for the reduction "
                                    f"methods {missing}")


check_theories(THEORIES)


def theory_for(method):
    """
    Nutation theory function of a reduction method
    """
    try:
        return THEORIES[method]
    except (KeyError,TypeError):
        logger.error(f"Unsupported reduction method {method}",
                     stack_info=True)
        raise UnsupportedModelError(f"Unsupported reduction method {method}")


class NutationContext:

    """
    Evaluation context of the nutation: the last calculated nutation and the
    provider of the Earth orientation parameters

    The last result is held in a single immutable CacheEntry that is replaced
    as a whole, so a reader never sees the values of one calculation with the
    time of another. Contexts are not meant to be shared between threads;
    create one context per thread instead

    """

    def __init__(self,eop_provider=None,use_cache=True):

        """
        Keyword arguments:
            eop_provider [EOPProvider] : provider of the Earth orientation
                                         parameters, needed when
                                         eph.correct_for_eop is set
            use_cache [bool] : reuse the last result for a repeated request

        Updates:
            self.eop_provider [EOPProvider]
            self.use_cache [bool]
            self.entry [CacheEntry]

        """
        checkutils.check_bool(use_cache,'use_cache')
        self.eop_provider = eop_provider
        self.use_cache = use_cache
        self.entry = CacheEntry(0.0,0.0,INVALID_T,INVALID_METHOD)

    def lookup(self,t,method):
        """
        The cached NutationResult for (t,method), or None
        """
        entry = self.entry
        if (self.use_cache and entry.method == method.value
                and entry.t == t):
            return NutationResult(entry.longitude,entry.obliquity)
        return None

    def store(self,t,method,result):
        self.entry = CacheEntry(result.longitude,result.obliquity,t,
                                method.value)

    def invalidate(self):
        """
        Force the next calculation, keeping the last values
        """
        self.entry = self.entry._replace(t=INVALID_T,method=INVALID_METHOD)
        logger.debug("Previous nutation calculation cleared")


DEFAULT_CONTEXT = NutationContext()


def _context(context):
    if context is None:
        return DEFAULT_CONTEXT
    return context


def free_core_nutation(t,eph,context):

    """
    Celestial pole offsets in longitude and obliquity from the Earth
    orientation parameters

    UT1 is taken as UTC to find the date of the parameters

    Keyword arguments:
        t [float] : Julian centuries of TT from J2000.0
        eph [EphemerisElement] : ephemeris properties
        context [NutationContext] : evaluation context with the EOP provider

    Returns:
        dpsi [float] : offset in longitude [radians]
        deps [float] : offset in obliquity [radians]

    """
    if context.eop_provider is None:
        logger.error("Correction for the Earth orientation parameters "
                     "requested but no EOP provider is set",stack_info=True)
        raise EOPDataUnavailableError("No EOP provider set in the nutation "
                                      "context")

    jd_tt = timescale.J2000 + t*timescale.JULIAN_DAYS_PER_CENTURY
    jd_ut = jd_tt - timescale.tt_minus_ut1(jd_tt)/timescale.SECONDS_PER_DAY
    eop = context.eop_provider.obtain_eop(jd_ut,eph)

    return eop[0]*ARCSEC_TO_RAD,eop[1]*ARCSEC_TO_RAD


def calc_nutation(t,eph,context=None):

    """
    Nutation in longitude and obliquity for the reduction method of eph

    The IAU 1980 theory is used for the methods before IAU 2000, the IAU 2000A
    model for IAU 2000, and the IAU 2000A model adjusted to the IAU 2006
    precession for IAU 2006 and 2009. When eph.correct_for_eop is set the
    celestial pole offsets of the Earth orientation parameters are added.
    A request with the same t and method as the last one returns the last
    result

    Keyword arguments:
        t [float] : Julian centuries of TT from J2000.0
        eph [EphemerisElement] : ephemeris properties
        context [NutationContext] : evaluation context, the default context
                                    if None

    Returns:
        nut [NutationResult] : (longitude,obliquity) in radians

    """
    checkutils.check_scalar(t)
    context = _context(context)
    method = eph.ephem_method
    theory = theory_for(method)

    result = context.lookup(t,method)
    if result is not None:
        logger.debug(f"Nutation for t = {t} and {method.name} from cache")
        return result

    dpsi,deps = theory(t)
    if eph.correct_for_eop:
        fcn_dpsi,fcn_deps = free_core_nutation(t,eph,context)
        dpsi += fcn_dpsi
        deps += fcn_deps

    result = NutationResult(dpsi,deps)
    context.store(t,method,result)
    logger.debug(f"Nutation for t = {t} and {method.name} calculated")

    return result


def clear_previous_calculation(context=None):
    """
    Force the next nutation calculation instead of returning the last result
    """
    _context(context).invalidate()


def get_nutation_in_longitude(context=None):
    """
    Last calculated nutation in longitude [radians], 0 before any calculation
    """
    return _context(context).entry.longitude


def get_nutation_in_obliquity(context=None):
    """
    Last calculated nutation in obliquity [radians], 0 before any calculation
    """
    return _context(context).entry.obliquity


def true_obliquity(t,eph,context=None):

    """
    True obliquity of the ecliptic: the mean obliquity plus the nutation in
    obliquity

    Keyword arguments:
        t [float] : Julian centuries of TT from J2000.0
        eph [EphemerisElement] : ephemeris properties
        context [NutationContext] : evaluation context, the default context
                                    if None

    Returns:
        eps [float] : true obliquity [radians]

    """
    eps0 = obliquity.mean_obliquity(t,eph)
    nut = calc_nutation(t,eph,context)
    return eps0 + nut.obliquity


def nutation_matrix(oblm,oblt,dpsi):

    """
    Nutation matrix from the mean to the true equator and equinox of date

        N = R1(-oblt).R3(-dpsi).R1(oblm)

    Keyword arguments:
        oblm [float] : mean obliquity of the ecliptic [radians]
        oblt [float] : true obliquity of the ecliptic [radians]
        dpsi [float] : nutation in longitude [radians]

    Returns:
        N [numpy.ndarray] : 3x3 nutation matrix

    """
    r1 = Rotation(oblm,1).rot
    r2 = Rotation(-dpsi,3).rot
    r3 = Rotation(-oblt,1).rot

    return np.matmul(r3,np.matmul(r2,r1))


def nutate_in_equatorial_coordinates(jd_tt,eph,vector,mean_to_true,
                                     context=None):

    """
    Nutate equatorial coordinates between the mean and the true equator and
    equinox of date

    Keyword arguments:
        jd_tt [float] : Julian day in TT
        eph [EphemerisElement] : ephemeris properties
        vector [list or numpy.ndarray] : position (x,y,z) or position and
                                         velocity (x,y,z,vx,vy,vz)
        mean_to_true [bool] : from mean to true coordinates if True, from true
                              to mean otherwise
        context [NutationContext] : evaluation context, the default context
                                    if None

    Returns:
        out [numpy.ndarray] : the nutated vector

    """
    checkutils.check_scalar(jd_tt)
    checkutils.check_vector(vector)
    checkutils.check_bool(mean_to_true,'mean_to_true')

    t = timescale.to_centuries(jd_tt)
    oblm = obliquity.mean_obliquity(t,eph)
    oblt = true_obliquity(t,eph,context)
    nut = calc_nutation(t,eph,context)

    N = nutation_matrix(oblm,oblt,nut.longitude)
    if not mean_to_true:
        N = np.transpose(N)

    vec = np.array(vector,dtype=float)
    out = np.zeros(len(vec))
    out[0:3] = np.matmul(N,vec[0:3])
    if len(vec) == 6:
        out[3:6] = np.matmul(N,vec[3:6])

    return out
