# Ephemeris properties used by the nutation calculations

import enum
import logging
import iaunut.checkutils as checkutils


logger = logging.getLogger(__name__)


class ReductionMethod(enum.Enum):

    """
    Reduction methods: the combination of precession, nutation and sidereal
    time theories used for the reduction of coordinates. The values are the
    ordinals used to identify a method in cached results
    """

    IAU_1976 = 0
    LASKAR_1986 = 1
    SIMON_1994 = 2
    WILLIAMS_1994 = 3
    JPL_DE4xx = 4
    IAU_2000 = 5
    IAU_2006 = 6
    IAU_2009 = 7


def reduction_method(name):

    """
    Get the reduction method for its name (e.g. 'IAU_2006')

    Keyword arguments:
        name [str or ReductionMethod] : name of the reduction method

    Returns:
        method [ReductionMethod]

    """
    if isinstance(name,ReductionMethod):
        return name
    if not isinstance(name,str):
        logger.error("The reduction method needs to be a string",
                     stack_info=True)
        raise TypeError("The reduction method needs to be a string")
    try:
        method = ReductionMethod[name]
    except KeyError:
        allowed_methods = [item.name for item in ReductionMethod]
        logger.error(f"The given reduction method {name} not recognized! "
                     f"allowed methods: {allowed_methods}",stack_info=True)
        raise ValueError(f"The given reduction method {name} not "
                         f"recognized! allowed methods: {allowed_methods}")
    return method


class EphemerisElement:

    def __init__(self,ephem_method=ReductionMethod.IAU_2006,
                 correct_for_eop=False,use_vondrak_2011=False):

        """
        Initialize the ephemeris properties

        Keyword arguments:
            ephem_method [ReductionMethod or str] : reduction method
            correct_for_eop [bool] : add the celestial pole offsets (free core
                                     nutation) from the Earth orientation
                                     parameters to the nutation angles
            use_vondrak_2011 [bool] : use the Vondrak et al. (2011) long-term
                                      obliquity with the IAU 2006/2009 methods

        Updates:
            self.ephem_method [ReductionMethod]
            self.correct_for_eop [bool]
            self.use_vondrak_2011 [bool]

        """
        checkutils.check_bool(correct_for_eop,'correct_for_eop')
        checkutils.check_bool(use_vondrak_2011,'use_vondrak_2011')
        self.ephem_method = reduction_method(ephem_method)
        self.correct_for_eop = correct_for_eop
        self.use_vondrak_2011 = use_vondrak_2011

    def __repr__(self):
        return (f"EphemerisElement(ephem_method={self.ephem_method.name}, "
                f"correct_for_eop={self.correct_for_eop}, "
                f"use_vondrak_2011={self.use_vondrak_2011})")


def ephemeris_from_config(config):

    """
    Create the ephemeris properties from the 'ephemeris' section of the
    configurations (see settings.Config)

    Keyword arguments:
        config [dict] : configurations

    Returns:
        eph [EphemerisElement]

    """
    section = config['ephemeris']
    return EphemerisElement(ephem_method=section['ephem_method'],
                            correct_for_eop=section['correct_for_eop'],
                            use_vondrak_2011=section['use_vondrak_2011'])
