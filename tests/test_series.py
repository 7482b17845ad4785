# tests/test_series.py

import numpy as np
import pytest
import iaunut.series as series
import iaunut.fundamental as fundamental
from iaunut.fundamental import ARCSEC_TO_RAD
from iaunut.nutation_tables import (NUT_1980,NALS_2000A,CLS_2000A,
                                    NAPL_2000A,ICPL_2000A)
from iaunut.timescale import to_centuries


def test_table_shapes():
    assert NUT_1980.shape == (105,9)
    assert NALS_2000A.shape == (678,5)
    assert CLS_2000A.shape == (678,6)
    assert NAPL_2000A.shape == (687,14)
    assert ICPL_2000A.shape == (687,4)


def test_mod3600():
    assert fundamental.mod3600(5.0) == 5.0
    assert fundamental.mod3600(1296005.0) == pytest.approx(5.0,abs=1e-9)
    assert fundamental.mod3600(-5.0) == pytest.approx(1295995.0,abs=1e-9)
    assert fundamental.mod3600(-1296000.0*3 + 1.5) == pytest.approx(1.5,
                                                                    abs=1e-9)


def test_fk5_arguments_reduce_linear_part_only():
    """
    At t = 0 the arguments are the constant terms; for large t the linear part
    stays within one revolution and the quadratic part is added on top
    """
    mm,ms,ff,dd,om = fundamental.fundamental_fk5(0.0)
    assert mm == pytest.approx(485866.733*ARCSEC_TO_RAD,abs=1e-15)
    assert om == pytest.approx(450160.280*ARCSEC_TO_RAD,abs=1e-15)

    t = 20.0
    lin = fundamental.mod3600(-6962890.539*t + 450160.280)
    assert 0.0 <= lin < 1296000.0
    om = fundamental.fundamental_fk5(t)[4]
    assert om == pytest.approx((lin + (0.008*t + 7.455)*t*t)*ARCSEC_TO_RAD,
                               abs=1e-12)


def test_multiple_angles_match_direct_trigonometry():
    arg = 1.2345
    ss,cc = series.multiple_angles(arg,4)
    assert len(ss) == 4 and len(cc) == 4
    for k in range(1,5):
        assert ss[k-1] == pytest.approx(np.sin(k*arg),abs=1e-14)
        assert cc[k-1] == pytest.approx(np.cos(k*arg),abs=1e-14)


@pytest.mark.parametrize('t',[-2.5,-0.3,0.0,0.09494866529774,1.7])
def test_iau1980_recurrence_matches_direct_summation(t):
    """
    The angle addition recurrence gives the same sums as evaluating the
    trigonometric functions of each argument directly
    """
    args = np.array(fundamental.fundamental_fk5(t))
    n = NUT_1980
    w = np.matmul(n[:,0:5],args)
    t10 = t/10.0
    dp = np.sum((n[:,5] + n[:,6]*t10)*np.sin(w))
    de = np.sum((n[:,7] + n[:,8]*t10)*np.cos(w))
    dp += (-171996.0 - 1742.0*t10)*np.sin(args[4])
    de += (92025.0 + 89.0*t10)*np.cos(args[4])

    dpsi,deps = series.nutation_iau1980(t)
    assert dpsi == pytest.approx(dp*0.0001*ARCSEC_TO_RAD,abs=1e-14)
    assert deps == pytest.approx(de*0.0001*ARCSEC_TO_RAD,abs=1e-14)


def test_iau1980_sofa_reference():
    """
    SOFA test case of iauNut80, date 2400000.5 + 53736.0 (TT)
    """
    t = to_centuries(2400000.5 + 53736.0)
    dpsi,deps = series.nutation_iau1980(t)
    assert dpsi == pytest.approx(-0.9643658353226563966e-5,abs=1e-12)
    assert deps == pytest.approx(0.4060051006879713322e-4,abs=1e-12)


def test_iau1980_meeus_example_22a():
    """
    Jean Meeus, Astronomical Algorithms (2nd Ed), Example 22.a
    1987 April 10, 0h TD
    """
    t = to_centuries(2446895.5)
    dpsi,deps = series.nutation_iau1980(t)
    assert dpsi/ARCSEC_TO_RAD == pytest.approx(-3.788,abs=3e-3)
    assert deps/ARCSEC_TO_RAD == pytest.approx(9.443,abs=3e-3)


def test_iau2000a_sofa_reference():
    """
    SOFA test case of iauNut00a, date 2400000.5 + 53736.0 (TT)
    """
    t = to_centuries(2400000.5 + 53736.0)
    dpsi,deps = series.nutation_iau2000a(t)
    assert dpsi == pytest.approx(-0.9630909107115518431e-5,abs=1e-12)
    assert deps == pytest.approx(0.4063239174001678710e-4,abs=1e-12)


def test_sequential_sum_order():
    first = np.array([1.0,1e-16,1e-16])
    second = np.array([0.0,1e-16,1e-16])
    # the small terms are added first and survive the rounding
    assert series.sequential_sum(first,second) == 1.0 + 4e-16
    assert series.sequential_sum(np.array([1.0,2.0]),
                                 np.array([3.0,4.0])) == 10.0


def test_series_return_floats():
    for theory in (series.nutation_iau1980,series.nutation_iau2000a):
        dpsi,deps = theory(0.05)
        assert isinstance(dpsi,float)
        assert isinstance(deps,float)
