# tests/test_eop.py

import numpy as np
import pytest
import iaunut.eop as eop
from iaunut.ephemeris import EphemerisElement,ReductionMethod
import iaunut.settings as settings


JD_2009_JUL_1 = 2455013.5


def test_read_eop_file(eop_file_iau2000):
    data = eop.EOPdata(eop_file_iau2000)
    assert data.eop_data.shape == (11,7)
    assert data.eop_data[0,0] == 55008.0
    assert data.eop_data[-1,0] == 55018.0
    assert data.eop_data[5].tolist() == pytest.approx(
                        [55013.0,0.150,0.480,0.36,0.001,0.0002,-0.0001])


def test_interpolation(eop_file_iau2000):
    """
    The sample series are linear in time, so the interpolation is exact
    """
    data = eop.EOPdata(eop_file_iau2000)
    ut1_utc,dx,dy,xp,yp = data.get_eop(JD_2009_JUL_1 + 0.25)
    assert ut1_utc == pytest.approx(0.36 - 0.00025,abs=1e-12)
    assert dx == pytest.approx(0.0002 + 0.0000025,abs=1e-12)
    assert dy == pytest.approx(-0.0001 + 0.000005,abs=1e-12)
    assert xp == pytest.approx(0.150 + 0.00025,abs=1e-12)
    assert yp == pytest.approx(0.480 - 0.0005,abs=1e-12)


def test_interpolate_constant_values():
    x = np.array([1.0,2.0,3.0])
    assert eop.interpolate(x,np.array([0.001,0.001,0.001]),2.5) == \
                                            pytest.approx(0.001,rel=1e-15)
    assert eop.interpolate(np.array([5.0]),np.array([7.0]),5.0) == 7.0


def test_date_outside_the_data(eop_file_iau2000):
    data = eop.EOPdata(eop_file_iau2000)
    with pytest.raises(eop.EOPDataUnavailableError):
        data.get_eop(JD_2009_JUL_1 + 30.0)
    with pytest.raises(eop.EOPDataUnavailableError):
        data.get_eop(JD_2009_JUL_1 - 5.5)


def test_missing_or_empty_file(tmp_path):
    with pytest.raises(eop.EOPDataUnavailableError):
        eop.EOPdata(str(tmp_path/'missing.txt'))
    empty = tmp_path/'empty.txt'
    empty.write_text("no records here\n")
    with pytest.raises(eop.EOPDataUnavailableError):
        eop.EOPdata(str(empty))
    with pytest.raises(TypeError):
        eop.EOPdata(tmp_path/'missing.txt')
    assert issubclass(eop.EOPDataUnavailableError,IOError)


def test_dxdy_to_dpsideps():
    # at J2000 the precession angles vanish
    dpsi,deps = eop.dxdy_to_dpsideps(0.0003,-0.0002,2451545.0)
    assert dpsi == pytest.approx(0.0003/0.3977771559319137,rel=1e-14)
    assert deps == pytest.approx(-0.0002,rel=1e-14)

    dpsi,deps = eop.dxdy_to_dpsideps(0.0002,-0.0001,JD_2009_JUL_1)
    assert dpsi == pytest.approx(0.0002/0.3977771559319137,rel=2e-3)
    assert deps == pytest.approx(-0.0001,abs=1e-6)


def test_iau2000_provider(eop_file_iau2000):
    provider = eop.FileEOPProvider(eop_file_iau2000=eop_file_iau2000)
    eph = EphemerisElement('IAU_2006',correct_for_eop=True)
    values = provider.obtain_eop(JD_2009_JUL_1,eph)

    jd_tt = JD_2009_JUL_1 + (34.0 + 32.184)/86400.0
    dpsi,deps = eop.dxdy_to_dpsideps(0.0002,-0.0001,jd_tt)
    assert values[0] == pytest.approx(dpsi,abs=1e-12)
    assert values[1] == pytest.approx(deps,abs=1e-12)
    assert values[2] == pytest.approx(0.36,abs=1e-12)
    assert values[3] == JD_2009_JUL_1
    assert values[4] == ReductionMethod.IAU_2006.value


def test_iau1980_provider(eop_file_iau1980):
    provider = eop.FileEOPProvider(eop_file_iau1980=eop_file_iau1980)
    values = provider.obtain_eop(JD_2009_JUL_1,
                EphemerisElement('LASKAR_1986',correct_for_eop=True))
    assert values[0:3].tolist() == pytest.approx([-0.055,-0.005,0.36],
                                                 abs=1e-12)


@pytest.mark.parametrize('method',['SIMON_1994','WILLIAMS_1994','JPL_DE4xx'])
def test_no_pole_offsets(eop_file_iau1980,method):
    provider = eop.FileEOPProvider(eop_file_iau1980=eop_file_iau1980)
    values = provider.obtain_eop(JD_2009_JUL_1,
                EphemerisElement(method,correct_for_eop=True))
    assert values[0] == 0.0
    assert values[1] == 0.0
    assert values[2] == pytest.approx(0.36,abs=1e-12)


def test_provider_reuses_close_requests(eop_file_iau1980):
    provider = eop.FileEOPProvider(eop_file_iau1980=eop_file_iau1980)
    eph = EphemerisElement('IAU_1976',correct_for_eop=True)
    first = provider.obtain_eop(JD_2009_JUL_1,eph)
    second = provider.obtain_eop(JD_2009_JUL_1 + 0.2,eph)
    assert second.tolist() == first.tolist()

    third = provider.obtain_eop(JD_2009_JUL_1 + 0.3,eph)
    assert third[3] == JD_2009_JUL_1 + 0.3
    assert third[0] == pytest.approx(-0.055 + 0.0001*0.3,abs=1e-12)

    # a different method is not served from the last values
    other = provider.obtain_eop(JD_2009_JUL_1 + 0.3,
                EphemerisElement('SIMON_1994',correct_for_eop=True))
    assert other[0] == 0.0
    assert other[4] == ReductionMethod.SIMON_1994.value

    provider.clear()
    assert provider.last_eop is None


def test_provider_returned_values_are_copies(eop_file_iau1980):
    provider = eop.FileEOPProvider(eop_file_iau1980=eop_file_iau1980)
    eph = EphemerisElement('IAU_1976',correct_for_eop=True)
    values = provider.obtain_eop(JD_2009_JUL_1,eph)
    values[0] = 99.0
    assert provider.obtain_eop(JD_2009_JUL_1,eph)[0] == pytest.approx(-0.055)


def test_provider_without_correction_returns_zeros():
    provider = eop.FileEOPProvider()
    values = provider.obtain_eop(JD_2009_JUL_1,EphemerisElement('IAU_2000'))
    assert values[0:3].tolist() == [0.0,0.0,0.0]


def test_provider_failures(eop_file_iau1980,tmp_path):
    eph = EphemerisElement('IAU_2000',correct_for_eop=True)

    # only the IAU 1980 series is configured
    provider = eop.FileEOPProvider(eop_file_iau1980=eop_file_iau1980)
    with pytest.raises(eop.EOPDataUnavailableError):
        provider.obtain_eop(JD_2009_JUL_1,eph)

    provider = eop.FileEOPProvider(eop_file_iau2000=str(tmp_path/'none.txt'))
    with pytest.raises(eop.EOPDataUnavailableError):
        provider.obtain_eop(JD_2009_JUL_1,eph)

    provider = eop.FileEOPProvider(eop_file_iau1980=eop_file_iau1980)
    with pytest.raises(eop.EOPDataUnavailableError):
        provider.obtain_eop(JD_2009_JUL_1 + 365.0,
                            EphemerisElement('IAU_1976',correct_for_eop=True))


def test_forced_provider():
    provider = eop.ForcedEOPProvider(dpsi=0.01,deps=0.02,ut1_utc=0.3)
    values = provider.obtain_eop(JD_2009_JUL_1,
                EphemerisElement('IAU_2009',correct_for_eop=True))
    assert values.tolist() == [0.01,0.02,0.3,JD_2009_JUL_1,7.0]
    values = provider.obtain_eop(JD_2009_JUL_1,EphemerisElement('IAU_2009'))
    assert values[0:3].tolist() == [0.0,0.0,0.0]


def test_provider_from_config(eop_file_iau2000):
    config = settings.Config().config
    config['eop']['eop_file_iau2000'] = eop_file_iau2000
    config['eop']['interp_window'] = 2.0
    provider = eop.provider_from_config(config)
    assert isinstance(provider,eop.FileEOPProvider)
    assert provider.eop_file_iau1980 is None
    assert provider.eop_file_iau2000 == eop_file_iau2000
    assert provider.interp_window == 2.0
