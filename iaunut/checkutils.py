# Module for checking utilities

import numpy as np
import numbers
import logging


logger = logging.getLogger(__name__)


def check_scalar(c):

    # Check the input scalar

    # Input:
    # c: supposed to be a real scalar

    if np.ndim(c) != 0:
        logger.error("The input attribute must be a scalar",stack_info=True)
        raise ValueError("The input attribute must be a scalar")
    if isinstance(c,bool) or not isinstance(c,numbers.Number):
        logger.error("The input attribute must be a real number",
                        stack_info=True)
        raise TypeError("The input attribute must be a real number")
    if isinstance(c,complex):
        logger.error("The input attribute cannot be a complex number",
                        stack_info=True)
        raise TypeError("The input attribute cannot be a complex number")


def check_bool(flag,name):

    # Check the input boolean flag
    #
    # Input:
    # flag: supposed to be True or False
    # name: name of the flag used in the messages

    if not isinstance(flag,(bool,np.bool_)):
        logger.error(f"The input {name} must be a boolean",stack_info=True)
        raise TypeError(f"The input {name} must be a boolean")


def check_vector(vector,lengths=(3,6)):

    # Check the input equatorial vector
    #
    # Input:
    # vector: supposed to be a 1-d array of real numbers with position
    #         (x,y,z) or position and velocity (x,y,z,vx,vy,vz)
    # lengths: allowed numbers of components

    if np.ndim(vector) != 1:
        logger.error("The input vector must be a 1-d array",stack_info=True)
        raise ValueError("The input vector must be a 1-d array")

    if len(vector) not in lengths:
        logger.error(f"The input vector must have {lengths} components",
                        stack_info=True)
        raise ValueError(f"The input vector must have one of {lengths} "
                          "components")

    # Check the type
    for item in vector:
        if isinstance(item,bool) or not isinstance(item,numbers.Number):
            logger.error("The input vector can only contain numbers",
                            stack_info=True)
            raise TypeError("The input vector can only contain numbers")
        if isinstance(item,complex):
            logger.error("The input vector cannot contain complex "
                         "numbers",stack_info=True)
            raise TypeError("The input vector cannot contain complex "
                            "numbers")
