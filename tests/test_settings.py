# tests/test_settings.py

import pytest
import yaml
import iaunut.settings as settings
from iaunut.ephemeris import (EphemerisElement,ReductionMethod,
                              ephemeris_from_config,reduction_method)


def test_defaults():
    config = settings.Config().config
    assert config['process']['verbose'] == 'INFO'
    assert config['ephemeris'] == {'ephem_method': 'IAU_2006',
                                   'correct_for_eop': False,
                                   'use_vondrak_2011': False}
    assert config['eop']['eop_file_iau1980'] is None
    assert config['eop']['interp_window'] == 4.0


def test_yaml_overrides_defaults(tmp_path):
    config_yaml = tmp_path/'config.yaml'
    config_yaml.write_text(
        "ephemeris:\n"
        "    ephem_method: IAU_1976\n"
        "    correct_for_eop: true\n"
        "eop:\n"
        "    eop_file_iau1980: eopc04_IAU1980.62-now\n")
    config = settings.Config(str(config_yaml)).config
    assert config['ephemeris']['ephem_method'] == 'IAU_1976'
    assert config['ephemeris']['correct_for_eop'] is True
    assert config['ephemeris']['use_vondrak_2011'] is False
    assert config['eop']['eop_file_iau1980'] == 'eopc04_IAU1980.62-now'
    assert config['eop']['interp_window'] == 4.0

    eph = ephemeris_from_config(config)
    assert eph.ephem_method is ReductionMethod.IAU_1976
    assert eph.correct_for_eop is True


def test_bad_configuration_files(tmp_path):
    with pytest.raises(TypeError):
        settings.Config(tmp_path/'config.yaml')
    with pytest.raises(IOError):
        settings.Config(str(tmp_path/'config.yaml'))
    broken = tmp_path/'broken.yaml'
    broken.write_text("ephemeris: [IAU_2000\n")
    with pytest.raises(yaml.YAMLError):
        settings.Config(str(broken))


def test_update():
    d = {'a': {'b': 1, 'c': 2}, 'd': 3}
    settings.update(d,{'a': {'c': 5}, 'e': 6})
    assert d == {'a': {'b': 1, 'c': 5}, 'd': 3, 'e': 6}
    assert settings.update(d,None) is d


def test_reduction_method():
    assert reduction_method('IAU_2009') is ReductionMethod.IAU_2009
    assert reduction_method(ReductionMethod.JPL_DE4xx) is \
                                                    ReductionMethod.JPL_DE4xx
    with pytest.raises(ValueError):
        reduction_method('IAU_2050')
    with pytest.raises(TypeError):
        reduction_method(5)


def test_ephemeris_element():
    eph = EphemerisElement()
    assert eph.ephem_method is ReductionMethod.IAU_2006
    assert eph.correct_for_eop is False
    assert eph.use_vondrak_2011 is False
    assert 'IAU_2006' in repr(eph)
    with pytest.raises(TypeError):
        EphemerisElement('IAU_2000',correct_for_eop='yes')
    with pytest.raises(TypeError):
        EphemerisElement('IAU_2000',use_vondrak_2011=1)
