# Module for the Earth orientation parameters (EOP) used for the free core
# nutation correction

import logging
import numpy as np
from scipy.interpolate import lagrange
from iaunut.ephemeris import ReductionMethod
from iaunut.fundamental import ARCSEC_TO_RAD
import iaunut.timescale as timescale


logger = logging.getLogger(__name__)

# Methods served by the IAU 2000 EOP series (celestial pole offsets dX, dY)
IAU2000_METHODS = (ReductionMethod.IAU_2000,ReductionMethod.IAU_2006,
                   ReductionMethod.IAU_2009)

# Methods whose precession theory has no celestial pole offsets in the EOP
# series; only UT1-UTC is provided for them
NO_POLE_OFFSET_METHODS = (ReductionMethod.SIMON_1994,
                          ReductionMethod.WILLIAMS_1994,
                          ReductionMethod.JPL_DE4xx)

# Requests closer than this to the previous one [days] reuse its result
REUSE_INTERVAL = 0.25

# MJD = JD - MJD_OFFSET
MJD_OFFSET = 2400000.5


class EOPDataUnavailableError(IOError):
    """
    Raised when the EOP values for a requested date cannot be obtained
    """


def interpolate(x,y,xq):

    """
    Lagrange interpolation of y(x) at xq, with x and y normalized to zero mean
    and unit standard deviation to keep the polynomial well conditioned

    """
    x_mean = np.mean(x)
    x_scale = np.std(x)
    if x_scale == 0.0:
        return y[0]
    y_mean = np.mean(y)
    y_scale = np.std(y)
    if y_scale == 0.0:
        return y_mean
    poly = lagrange((x - x_mean)/x_scale,(y - y_mean)/y_scale)
    return poly((xq - x_mean)/x_scale)*y_scale + y_mean


def dxdy_to_dpsideps(dx,dy,jd_tt):

    """
    Transform the celestial pole offsets dX, dY (IAU 2000) into offsets in
    longitude and obliquity

    Keyword arguments:
        dx [float]    : celestial pole offset dX [arc seconds]
        dy [float]    : celestial pole offset dY [arc seconds]
        jd_tt [float] : Julian day in TT

    Returns:
        dpsi [float] : offset in longitude [arc seconds]
        deps [float] : offset in obliquity [arc seconds]

    References:
        Bizouard (2006) DPSIDEPS2000_DXDY2000, IERS conventions software

    """
    t = timescale.to_centuries(jd_tt)

    # Luni-solar and planetary precession [radians]
    psi_a = (5038.47875*t - 1.07259*t**2 - 0.001147*t**3)*ARCSEC_TO_RAD
    chi_a = (10.5526*t - 2.38064*t**2 - 0.001125*t**3)*ARCSEC_TO_RAD

    # obliquity at J2000 of 84381.406 arc seconds
    sineps0 = 0.3977771559319137
    coseps0 = 0.9174820620691818

    k = psi_a*coseps0 - chi_a
    den = -k**2*sineps0 - sineps0
    dpsi = (-dx + k*dy)/den
    deps = (-k*sineps0*dx - sineps0*dy)/den

    return dpsi,deps


class EOPdata:

    """
    Class of earth orientation parameters (EOP) data
    Reads daily EOP values from IERS C04-like files

    """

    def __init__(self,eop_file):

        """
        Initialize EOPdata class

        The records are lines of at least 10 columns:
            year month day MJD x y UT1-UTC LOD dX dY ...
        where dX, dY are the celestial pole offsets, or dPsi, dEpsilon for
        the files of the IAU 1980 series. Other lines are ignored

        Keyword arguments:
            eop_file [str] : filename of the EOP data

        Updates:
            self.eop_file [str]
            self.eop_data [numpy.ndarray]: array containing eop information
                The columns of self.eop_data are:
                [mjd,xp,yp,ut1_utc,lod,dx,dy]
                units are:
                [days,arcsec,arcsec,sec,sec,arcsec,arcsec]
        """

        # Check the given EOP file
        if not isinstance(eop_file,str):
            logger.error("The input eop_file needs to be a string",
                         stack_info=True)
            raise TypeError("The input eop_file needs to be a string")
        self.eop_file = eop_file

        records = []

        # Try to open the EOP file and fill in the eop_data array
        try:
            eop_fid = open(self.eop_file,'r')
        except IOError:
            logger.error(f"EOP file {self.eop_file} is not "
                         f"accessible!", stack_info=True)
            raise EOPDataUnavailableError(f"File {self.eop_file} not found!")
        else:
            with eop_fid:
                for line in eop_fid:
                    stuff = line.strip().split()
                    if len(stuff) < 10:
                        continue
                    try:
                        int(stuff[0])
                        int(stuff[1])
                        int(stuff[2])
                        values = [float(item) for item in stuff[3:10]]
                    except ValueError: # header line
                        continue
                    records.append(values)

        if not records:
            logger.error(f"No EOP records found in {self.eop_file}",
                         stack_info=True)
            raise EOPDataUnavailableError(f"No EOP records found in "
                                          f"{self.eop_file}")

        eop_data = np.array(records)
        self.eop_data = eop_data[np.argsort(eop_data[:,0])]
        logger.debug(f"{len(self.eop_data)} EOP records read from "
                     f"{self.eop_file}")

    def get_eop(self,jd_utc,interp_window=4.0):

        """
        Get Earth Orientation Parameters for a given UTC Julian day

        Keyword arguments:
            jd_utc [float] : Julian day in UTC
            interp_window [float] : the window of data used around the
                                    requested time for interpolation [days]

        Returns:
            eop [numpy.ndarray] : [ut1_utc,dx,dy,xp,yp] in
                                  [sec,arcsec,arcsec,arcsec,arcsec]
        """
        mjd = jd_utc - MJD_OFFSET
        first = self.eop_data[0,0]
        last = self.eop_data[-1,0]
        if mjd < first or mjd > last:
            logger.error(f"MJD {mjd} outside the EOP data span "
                         f"{first}-{last} of {self.eop_file}",stack_info=True)
            raise EOPDataUnavailableError(f"No EOP data for MJD {mjd} in "
                                          f"{self.eop_file}")

        # Slice the eop_data to only around the requested time
        ind = np.where(abs(self.eop_data[:,0]-mjd) <= interp_window/2.0)
        if len(ind[0]) == 0:
            logger.error(f"No EOP records within {interp_window/2.0} days "
                         f"of MJD {mjd}",stack_info=True)
            raise EOPDataUnavailableError(f"No EOP data around MJD {mjd} in "
                                          f"{self.eop_file}")
        if len(ind[0]) > 20:
            logger.warning("\nThe number of data points for lagrange "
                           f"interpolation = {len(ind[0])} > 20.\nThe "
                           "interpolation could be numerically unstable.\n"
                           "Consider setting a smaller interpolation window "
                           "(interp_window).")
        eop_ref = self.eop_data[ind]

        mjd_data = eop_ref[:,0]
        xp = interpolate(mjd_data,eop_ref[:,1],mjd)
        yp = interpolate(mjd_data,eop_ref[:,2],mjd)
        ut1_utc = interpolate(mjd_data,eop_ref[:,3],mjd)
        dx = interpolate(mjd_data,eop_ref[:,5],mjd)
        dy = interpolate(mjd_data,eop_ref[:,6],mjd)

        return np.array([ut1_utc,dx,dy,xp,yp])


class EOPProvider:

    """
    Base class of the EOP providers

    obtain_eop returns, for a UTC Julian day and the ephemeris properties, the
    array [dpsi,deps,ut1_utc,last_jd,last_method]: the offsets in longitude
    and obliquity [arc seconds], UT1-UTC [seconds], and the Julian day and
    reduction method ordinal of the request

    """

    def __init__(self):
        self.last_eop = None

    def obtain_eop(self,jd_utc,eph):
        raise NotImplementedError

    def clear(self):
        """
        Forget the last values obtained
        """
        self.last_eop = None


class ForcedEOPProvider(EOPProvider):

    """
    EOP provider returning fixed values for any date

    """

    def __init__(self,dpsi=0.0,deps=0.0,ut1_utc=0.0):

        """
        Keyword arguments:
            dpsi [float]    : offset in longitude [arc seconds]
            deps [float]    : offset in obliquity [arc seconds]
            ut1_utc [float] : UT1-UTC [seconds]
        """
        super().__init__()
        self.dpsi = dpsi
        self.deps = deps
        self.ut1_utc = ut1_utc

    def obtain_eop(self,jd_utc,eph):
        if not eph.correct_for_eop:
            return np.array([0.0,0.0,0.0,jd_utc,eph.ephem_method.value])
        eop = np.array([self.dpsi,self.deps,self.ut1_utc,jd_utc,
                        eph.ephem_method.value])
        self.last_eop = eop
        return eop.copy()


class FileEOPProvider(EOPProvider):

    """
    EOP provider reading the IERS EOP series from files, one for the IAU 1980
    series (dPsi, dEpsilon) and one for the IAU 2000 series (dX, dY)

    """

    def __init__(self,eop_file_iau1980=None,eop_file_iau2000=None,
                 interp_window=4.0):

        """
        Keyword arguments:
            eop_file_iau1980 [str] : EOP file of the IAU 1980 series
            eop_file_iau2000 [str] : EOP file of the IAU 2000 series
            interp_window [float]  : interpolation window [days]

        Updates:
            self.eop_file_iau1980 [str]
            self.eop_file_iau2000 [str]
            self.interp_window [float]
            self.eop_data [dict] : EOPdata objects read so far, by filename

        """
        super().__init__()
        self.eop_file_iau1980 = eop_file_iau1980
        self.eop_file_iau2000 = eop_file_iau2000
        self.interp_window = interp_window
        self.eop_data = {}

    def _data(self,eop_file):
        if eop_file not in self.eop_data:
            logger.debug(f"Reading EOP file {eop_file}")
            self.eop_data[eop_file] = EOPdata(eop_file)
        return self.eop_data[eop_file]

    def obtain_eop(self,jd_utc,eph):

        """
        Obtain the EOP values for a UTC Julian day

        Keyword arguments:
            jd_utc [float] : Julian day in UTC
            eph [EphemerisElement] : ephemeris properties

        Returns:
            eop [numpy.ndarray] : [dpsi,deps,ut1_utc,last_jd,last_method]

        """
        method = eph.ephem_method

        # Don't repeat calculations for similar dates
        if (self.last_eop is not None
                and abs(jd_utc - self.last_eop[3]) < REUSE_INTERVAL
                and method.value == self.last_eop[4]):
            return self.last_eop.copy()

        self.clear()
        if not eph.correct_for_eop:
            return np.array([0.0,0.0,0.0,jd_utc,method.value])

        iau2000 = method in IAU2000_METHODS
        if iau2000:
            eop_file = self.eop_file_iau2000
        else:
            eop_file = self.eop_file_iau1980
        if eop_file is None:
            series = 'IAU2000' if iau2000 else 'IAU1980'
            logger.error(f"No EOP file of the {series} series configured "
                         f"for the reduction method {method.name}",
                         stack_info=True)
            raise EOPDataUnavailableError(f"No EOP file of the {series} "
                                          "series configured")

        ut1_utc,dx,dy,xp,yp = self._data(eop_file).get_eop(
                                                jd_utc,self.interp_window)

        if method in NO_POLE_OFFSET_METHODS:
            dpsi = 0.0
            deps = 0.0
        elif iau2000:
            jd_tt = (jd_utc
                     + timescale.tt_minus_ut1(jd_utc)/timescale.SECONDS_PER_DAY)
            dpsi,deps = dxdy_to_dpsideps(dx,dy,jd_tt)
        else:
            dpsi = dx
            deps = dy

        eop = np.array([dpsi,deps,ut1_utc,jd_utc,method.value])
        self.last_eop = eop
        return eop.copy()


def provider_from_config(config):

    """
    Create the file based EOP provider from the 'eop' section of the
    configurations (see settings.Config)

    """
    section = config['eop']
    return FileEOPProvider(eop_file_iau1980=section['eop_file_iau1980'],
                           eop_file_iau2000=section['eop_file_iau2000'],
                           interp_window=section['interp_window'])
