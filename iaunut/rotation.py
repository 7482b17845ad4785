# Elementary rotation matrices of angle theta around a coordinate axis

import numpy as np
import logging
import iaunut.checkutils as checkutils


logger = logging.getLogger(__name__)


class Rotation:

    def __init__(self,theta,axis):

        # theta: rotation angle in radians
        # axis: 1, 2 or 3
        #
        # The rotation is of the reference frame (passive), so that a vector
        # fixed in space gets the coordinates rot.v in the rotated frame

        # Check the given attributes
        checkutils.check_scalar(theta)

        if axis not in ([1,2,3]):
            logger.error("The rotation axis can only be 1, 2 or 3",
                         stack_info=True)
            raise ValueError("The rotation axis can only be 1, 2 or 3")

        self.theta = theta
        self.axis  = axis

        # R: a 3-by-3 rotation matrix
        #
        #      |1 0            0          |
        # R1 = |0 cos(theta1)  sin(theta1)|
        #      |0 -sin(theta1) cos(theta1)|
        #
        #      |cos(theta2) 0 -sin(theta2)|
        # R2 = |0           1 0           |
        #      |sin(theta2) 0 cos(theta2) |
        #
        #      |cos(theta3)  sin(theta3) 0|
        # R3 = |-sin(theta3) cos(theta3) 0|
        #      |0            0           1|

        c = np.cos(theta)
        s = np.sin(theta)

        if axis == 1:
            R = np.array([[1.0, 0.0, 0.0],
                          [0.0,   c,   s],
                          [0.0,  -s,   c]])
        elif axis == 2:
            R = np.array([[  c, 0.0,  -s],
                          [0.0, 1.0, 0.0],
                          [  s, 0.0,   c]])
        else:
            R = np.array([[  c,   s, 0.0],
                          [ -s,   c, 0.0],
                          [0.0, 0.0, 1.0]])

        self.rot = R
