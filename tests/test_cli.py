# tests/test_cli.py

import logging
import pytest
from iaunut.__main__ import main
from iaunut.formatters import MixedFormatter


@pytest.fixture(autouse=True)
def restore_root_logger():
    # main() configures the root logger from logging.yaml
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


def output_value(out,name):
    for line in out.splitlines():
        if line.startswith(name + ' ='):
            return float(line.split('=')[1].split()[0])
    raise AssertionError(f"{name} not in the output")


def test_nutation_angles(capsys):
    main(['2455013.5','-m','IAU_1976'])
    out = capsys.readouterr().out
    assert output_value(out,'dpsi') == pytest.approx(14.7774,abs=1e-3)
    assert output_value(out,'deps') == pytest.approx(4.3386,abs=1e-3)


def test_nutated_vector(capsys):
    main(['2455013.5','--vector','1.0','0.0','0.0'])
    out = capsys.readouterr().out
    assert 'vector = [' in out


def test_configuration_file(tmp_path,capsys,eop_file_iau2000):
    config_yaml = tmp_path/'config.yaml'
    config_yaml.write_text(
        "process:\n"
        "    verbose: DEBUG\n"
        "ephemeris:\n"
        "    ephem_method: IAU_2000\n"
        "eop:\n"
        f"    eop_file_iau2000: {eop_file_iau2000}\n")
    main(['2455013.5','-c',str(config_yaml)])
    without_eop = output_value(capsys.readouterr().out,'dpsi')
    assert without_eop == pytest.approx(14.7823,abs=1e-3)

    main(['2455013.5','-c',str(config_yaml),'--eop'])
    with_eop = output_value(capsys.readouterr().out,'dpsi')
    assert with_eop - without_eop == pytest.approx(0.0002/0.39778,abs=1e-5)


def test_bad_verbose_mode(tmp_path):
    config_yaml = tmp_path/'config.yaml'
    config_yaml.write_text("process:\n    verbose: LOUD\n")
    with pytest.raises(ValueError):
        main(['2455013.5','-c',str(config_yaml)])


def test_unknown_method():
    with pytest.raises(ValueError):
        main(['2455013.5','-m','IAU_2050'])


def test_mixed_formatter():
    formatter = MixedFormatter("%(message)s")
    record = logging.LogRecord('iaunut.eop',logging.WARNING,'eop.py',10,
                               "check the window",None,None,'get_eop')
    text = formatter.format(record)
    assert text.startswith('[WARNING] iaunut.eop, get_eop():')
    assert formatter.format(record) == text

    record = logging.LogRecord('iaunut.eop',logging.ERROR,'eop.py',42,
                               "no data",None,None,'get_eop')
    assert formatter.format(record).startswith('[ERROR] iaunut.eop, line 42:')

    record = logging.LogRecord('iaunut.eop',logging.INFO,'eop.py',42,
                               "plain",None,None,'get_eop')
    assert formatter.format(record) == 'plain'
