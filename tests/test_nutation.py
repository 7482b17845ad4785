# tests/test_nutation.py

import numpy as np
import pytest
import iaunut.nutation as nutation
import iaunut.series as series
import iaunut.obliquity as obliquity
from iaunut.ephemeris import EphemerisElement,ReductionMethod
from iaunut.eop import (ForcedEOPProvider,FileEOPProvider,
                        EOPDataUnavailableError)
from iaunut.fundamental import ARCSEC_TO_RAD
from iaunut.timescale import to_centuries


JD_2009_JUL_1 = 2455013.5

IAU1980_METHODS = (ReductionMethod.IAU_1976,ReductionMethod.LASKAR_1986,
                   ReductionMethod.SIMON_1994,ReductionMethod.WILLIAMS_1994,
                   ReductionMethod.JPL_DE4xx)


def counting(theory,calls):
    def wrapper(t):
        calls.append(t)
        return theory(t)
    return wrapper


@pytest.mark.parametrize('method,dpsi,deps',[
    (ReductionMethod.IAU_1976,14.7774,4.3386),
    (ReductionMethod.IAU_2000,14.7823,4.3391),
    ])
def test_reference_values_2009_july_1(method,dpsi,deps):
    """
    2009 July 1, 0h TT with the EOP correction forced to zero
    """
    context = nutation.NutationContext(eop_provider=ForcedEOPProvider())
    eph = EphemerisElement(method,correct_for_eop=True)
    nut = nutation.calc_nutation(to_centuries(JD_2009_JUL_1),eph,context)
    assert nut.longitude/ARCSEC_TO_RAD == pytest.approx(dpsi,abs=1e-3)
    assert nut.obliquity/ARCSEC_TO_RAD == pytest.approx(deps,abs=1e-3)


def test_cache_returns_identical_results(monkeypatch):
    calls = []
    monkeypatch.setitem(nutation.THEORIES,ReductionMethod.IAU_2000,
                        counting(series.nutation_iau2000a,calls))
    context = nutation.NutationContext()
    eph = EphemerisElement(ReductionMethod.IAU_2000)
    t = 0.0731

    first = nutation.calc_nutation(t,eph,context)
    second = nutation.calc_nutation(t,eph,context)
    assert len(calls) == 1
    assert first == second

    nutation.clear_previous_calculation(context)
    third = nutation.calc_nutation(t,eph,context)
    assert len(calls) == 2
    assert third == first


def test_cache_hit_needs_exact_time_and_method(monkeypatch):
    calls = []
    for method in (ReductionMethod.IAU_2000,ReductionMethod.IAU_2006):
        monkeypatch.setitem(nutation.THEORIES,method,
                            counting(nutation.THEORIES[method],calls))
    context = nutation.NutationContext()
    t = 0.0731

    nutation.calc_nutation(t,EphemerisElement('IAU_2000'),context)
    nutation.calc_nutation(t + 1e-15,EphemerisElement('IAU_2000'),context)
    assert len(calls) == 2
    nutation.calc_nutation(t + 1e-15,EphemerisElement('IAU_2006'),context)
    assert len(calls) == 3
    assert context.entry.method == ReductionMethod.IAU_2006.value
    assert context.entry.t == t + 1e-15


def test_disabled_cache_gives_same_results(monkeypatch):
    calls = []
    monkeypatch.setitem(nutation.THEORIES,ReductionMethod.IAU_1976,
                        counting(series.nutation_iau1980,calls))
    cached = nutation.NutationContext()
    uncached = nutation.NutationContext(use_cache=False)
    eph = EphemerisElement('IAU_1976')

    for t in (0.1,0.1,-0.4,0.1,-0.4,-0.4):
        assert (nutation.calc_nutation(t,eph,uncached)
                == nutation.calc_nutation(t,eph,cached))
    # 6 calls without cache, 4 with it
    assert len(calls) == 10


def test_invalidate_keeps_last_values():
    context = nutation.NutationContext()
    assert nutation.get_nutation_in_longitude(context) == 0.0
    assert nutation.get_nutation_in_obliquity(context) == 0.0

    nut = nutation.calc_nutation(0.2,EphemerisElement('IAU_2006'),context)
    nutation.clear_previous_calculation(context)
    assert context.entry.t == nutation.INVALID_T
    assert context.entry.method == nutation.INVALID_METHOD
    assert nutation.get_nutation_in_longitude(context) == nut.longitude
    assert nutation.get_nutation_in_obliquity(context) == nut.obliquity


def test_default_context():
    eph = EphemerisElement('IAU_2000')
    nut = nutation.calc_nutation(0.05,eph)
    assert nutation.get_nutation_in_longitude() == nut.longitude
    assert nutation.DEFAULT_CONTEXT.entry.t == 0.05


@pytest.mark.parametrize('t',[-1.3,0.0,0.095])
def test_iau1980_methods_share_the_series(t):
    context = nutation.NutationContext()
    expected = series.nutation_iau1980(t)
    for method in IAU1980_METHODS:
        nut = nutation.calc_nutation(t,EphemerisElement(method),context)
        assert tuple(nut) == expected


@pytest.mark.parametrize('method',[ReductionMethod.IAU_2006,
                                   ReductionMethod.IAU_2009])
@pytest.mark.parametrize('t',[-3.0,-0.5,0.0,0.095,2.0])
def test_precession_adjustment(method,t):
    context = nutation.NutationContext()
    ref = nutation.calc_nutation(t,EphemerisElement('IAU_2000'),context)
    nut = nutation.calc_nutation(t,EphemerisElement(method),context)
    assert nut.longitude == pytest.approx(
                ref.longitude*(1.0 + 4.697e-7 - 2.7774e-6*t),rel=1e-15)
    assert nut.obliquity == pytest.approx(
                ref.obliquity*(1.0 - 2.7774e-6*t),rel=1e-15)


def test_every_method_has_a_theory():
    assert set(nutation.THEORIES) == set(ReductionMethod)
    nutation.check_theories(nutation.THEORIES)


def test_missing_theory_is_rejected():
    theories = dict(nutation.THEORIES)
    del theories[ReductionMethod.LASKAR_1986]
    with pytest.raises(nutation.UnsupportedModelError):
        nutation.check_theories(theories)
    assert issubclass(nutation.UnsupportedModelError,ValueError)


def test_unknown_method_fails():
    eph = EphemerisElement()
    eph.ephem_method = 'IAU_2050'
    with pytest.raises(nutation.UnsupportedModelError):
        nutation.calc_nutation(0.0,eph,nutation.NutationContext())


def test_forced_eop_offsets_are_added():
    provider = ForcedEOPProvider(dpsi=0.001,deps=-0.002)
    context = nutation.NutationContext(eop_provider=provider)
    t = to_centuries(JD_2009_JUL_1)
    nut = nutation.calc_nutation(t,EphemerisElement('IAU_2000',
                                                    correct_for_eop=True),
                                 context)
    dpsi,deps = series.nutation_iau2000a(t)
    assert nut.longitude == pytest.approx(dpsi + 0.001*ARCSEC_TO_RAD,
                                          abs=1e-17)
    assert nut.obliquity == pytest.approx(deps - 0.002*ARCSEC_TO_RAD,
                                          abs=1e-17)


def test_eop_offsets_added_after_precession_adjustment():
    provider = ForcedEOPProvider(dpsi=0.5,deps=0.25)
    context = nutation.NutationContext(eop_provider=provider)
    t = 0.5
    nut = nutation.calc_nutation(t,EphemerisElement('IAU_2006',
                                                    correct_for_eop=True),
                                 context)
    dpsi,deps = nutation.precession_adjusted_iau2000a(t)
    assert nut.longitude == pytest.approx(dpsi + 0.5*ARCSEC_TO_RAD,abs=1e-17)
    assert nut.obliquity == pytest.approx(deps + 0.25*ARCSEC_TO_RAD,abs=1e-17)


def test_eop_file_offsets(eop_file_iau1980):
    """
    The EOP date is the TT date minus TT-UT1 (66.184 s in July 2009)
    """
    provider = FileEOPProvider(eop_file_iau1980=eop_file_iau1980)
    context = nutation.NutationContext(eop_provider=provider)
    t = to_centuries(JD_2009_JUL_1)
    nut = nutation.calc_nutation(t,EphemerisElement('IAU_1976',
                                                    correct_for_eop=True),
                                 context)
    dpsi,deps = series.nutation_iau1980(t)
    k = -66.184/86400.0
    assert provider.last_eop[3] == pytest.approx(JD_2009_JUL_1 + k,abs=1e-8)
    assert (nut.longitude - dpsi)/ARCSEC_TO_RAD == pytest.approx(
                                        -0.055 + 0.0001*k,abs=1e-9)
    assert (nut.obliquity - deps)/ARCSEC_TO_RAD == pytest.approx(
                                        -0.005 + 0.0002*k,abs=1e-9)


def test_eop_correction_without_provider_fails():
    eph = EphemerisElement('IAU_2000',correct_for_eop=True)
    with pytest.raises(EOPDataUnavailableError):
        nutation.calc_nutation(0.1,eph,nutation.NutationContext())


def test_eop_failure_is_not_replaced_by_zero(tmp_path):
    provider = FileEOPProvider(
                        eop_file_iau2000=str(tmp_path/'missing.txt'))
    context = nutation.NutationContext(eop_provider=provider)
    eph = EphemerisElement('IAU_2006',correct_for_eop=True)
    with pytest.raises(EOPDataUnavailableError):
        nutation.calc_nutation(0.1,eph,context)
    assert context.entry.t == nutation.INVALID_T


def test_nutation_matrix_elements():
    """
    Agreement with the element by element construction of the matrix
    """
    oblm = 0.4090928042223
    dpsi = 7.1645e-5
    oblt = oblm + 2.1034e-5
    cobm,sobm = np.cos(oblm),np.sin(oblm)
    cobt,sobt = np.cos(oblt),np.sin(oblt)
    cpsi,spsi = np.cos(dpsi),np.sin(dpsi)
    expected = np.array([
            [cpsi,-spsi*cobm,-spsi*sobm],
            [spsi*cobt,cpsi*cobm*cobt + sobm*sobt,cpsi*sobm*cobt - cobm*sobt],
            [spsi*sobt,cpsi*cobm*sobt - sobm*cobt,cpsi*sobm*sobt + cobm*cobt]
            ])
    N = nutation.nutation_matrix(oblm,oblt,dpsi)
    assert np.allclose(N,expected,rtol=0.0,atol=1e-15)


def test_nutation_matrix_sofa_reference():
    """
    SOFA test case of iauNumat
    """
    epsa = 0.4090789763356509900
    dpsi = -0.9630909107115582393e-5
    deps = 0.4063239174001678826e-4
    N = nutation.nutation_matrix(epsa,epsa + deps,dpsi)
    expected = np.array([
            [0.9999999999536227949,0.8836239320236250577e-5,
             0.3830833447458251908e-5],
            [-0.8836083657016688588e-5,0.9999999991354655028,
             -0.4063240865361857698e-4],
            [-0.3831194480235143986e-5,0.4063237480216934159e-4,
             0.9999999991671660338]
            ])
    assert np.allclose(N,expected,rtol=0.0,atol=1e-12)


def test_nutation_matrix_orthogonality():
    rng = np.random.default_rng(1980)
    for _ in range(50):
        oblm = rng.uniform(0.0,np.pi/2)
        oblt = oblm + rng.uniform(-1e-3,1e-3)
        dpsi = rng.uniform(-np.pi,np.pi)
        N = nutation.nutation_matrix(oblm,oblt,dpsi)
        assert np.allclose(np.matmul(N.T,N),np.eye(3),rtol=0.0,atol=1e-12)


@pytest.mark.parametrize('method',list(ReductionMethod))
@pytest.mark.parametrize('vector',[
    [0.3,-1.2,0.8],
    [1.1e8,-0.4e8,0.2e8,12.5,28.1,-3.3],
    ])
def test_round_trip(method,vector):
    eph = EphemerisElement(method)
    context = nutation.NutationContext()
    true = nutation.nutate_in_equatorial_coordinates(JD_2009_JUL_1,eph,vector,
                                                     True,context)
    mean = nutation.nutate_in_equatorial_coordinates(JD_2009_JUL_1,eph,true,
                                                     False,context)
    assert len(true) == len(vector)
    assert np.allclose(mean,vector,rtol=1e-15,atol=1e-10)
    assert not np.allclose(true,vector,rtol=1e-12,atol=0.0)


def test_true_obliquity():
    eph = EphemerisElement('IAU_2000')
    context = nutation.NutationContext()
    t = 0.095
    eps = nutation.true_obliquity(t,eph,context)
    nut = nutation.calc_nutation(t,eph,context)
    assert eps == obliquity.mean_obliquity(t,eph) + nut.obliquity
    assert not hasattr(obliquity,'true_obliquity')


def test_velocity_uses_the_same_matrix():
    eph = EphemerisElement('IAU_2006')
    context = nutation.NutationContext()
    t = to_centuries(JD_2009_JUL_1)
    oblm = obliquity.mean_obliquity(t,eph)
    nut = nutation.calc_nutation(t,eph,context)
    N = nutation.nutation_matrix(oblm,oblm + nut.obliquity,nut.longitude)

    vector = np.array([0.2,0.7,-0.4,1.5,-2.5,0.5])
    out = nutation.nutate_in_equatorial_coordinates(JD_2009_JUL_1,eph,vector,
                                                    True,context)
    assert np.allclose(out[0:3],np.matmul(N,vector[0:3]),atol=1e-15)
    assert np.allclose(out[3:6],np.matmul(N,vector[3:6]),atol=1e-15)

    out = nutation.nutate_in_equatorial_coordinates(JD_2009_JUL_1,eph,vector,
                                                    False,context)
    assert np.allclose(out[0:3],np.matmul(N.T,vector[0:3]),atol=1e-15)
    assert np.allclose(out[3:6],np.matmul(N.T,vector[3:6]),atol=1e-15)


def test_nutate_rejects_bad_vectors():
    eph = EphemerisElement()
    with pytest.raises(ValueError):
        nutation.nutate_in_equatorial_coordinates(JD_2009_JUL_1,eph,
                                                  [1.0,2.0],True)
    with pytest.raises(TypeError):
        nutation.nutate_in_equatorial_coordinates(JD_2009_JUL_1,eph,
                                                  [1.0,2.0,'3'],True)
    with pytest.raises(TypeError):
        nutation.nutate_in_equatorial_coordinates(JD_2009_JUL_1,eph,
                                                  [1.0,2.0,3.0],1)
