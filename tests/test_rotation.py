# tests/test_rotation.py

import numpy as np
import pytest
from iaunut.rotation import Rotation
import iaunut.checkutils as checkutils


def test_frame_rotations():
    """
    Rotating the frame by +90 degrees turns the coordinates of a fixed vector
    by -90 degrees
    """
    v = np.array([1.0,0.0,0.0])
    assert np.allclose(np.matmul(Rotation(np.pi/2,3).rot,v),[0.0,-1.0,0.0],
                       atol=1e-15)
    assert np.allclose(np.matmul(Rotation(np.pi/2,2).rot,v),[0.0,0.0,1.0],
                       atol=1e-15)
    v = np.array([0.0,1.0,0.0])
    assert np.allclose(np.matmul(Rotation(np.pi/2,1).rot,v),[0.0,0.0,-1.0],
                       atol=1e-15)


def test_inverse_rotation_is_the_transpose():
    for axis in (1,2,3):
        r = Rotation(0.3,axis).rot
        assert np.allclose(Rotation(-0.3,axis).rot,r.T,atol=1e-16)


def test_rotation_arguments():
    with pytest.raises(ValueError):
        Rotation(0.1,4)
    with pytest.raises(TypeError):
        Rotation('0.1',1)
    with pytest.raises(ValueError):
        Rotation([0.1,0.2],1)


def test_check_scalar():
    checkutils.check_scalar(1)
    checkutils.check_scalar(np.float64(0.5))
    with pytest.raises(TypeError):
        checkutils.check_scalar(True)
    with pytest.raises(TypeError):
        checkutils.check_scalar(1.0 + 2.0j)
    with pytest.raises(ValueError):
        checkutils.check_scalar(np.zeros(2))


def test_check_vector():
    checkutils.check_vector([1.0,2.0,3.0])
    checkutils.check_vector(np.arange(6.0))
    with pytest.raises(ValueError):
        checkutils.check_vector(np.zeros((2,3)))
    with pytest.raises(ValueError):
        checkutils.check_vector([1.0,2.0,3.0,4.0])
    with pytest.raises(TypeError):
        checkutils.check_vector([1.0,2.0,None])
    with pytest.raises(TypeError):
        checkutils.check_vector([1.0,2.0,1j])


def test_check_bool():
    checkutils.check_bool(False,'flag')
    checkutils.check_bool(np.bool_(True),'flag')
    with pytest.raises(TypeError):
        checkutils.check_bool(0,'flag')
