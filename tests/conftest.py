import os
import pytest
import iaunut.nutation as nutation


DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)),'data')


@pytest.fixture
def eop_file_iau2000():
    return os.path.join(DATA_DIR,'eopc04_iau2000_sample.txt')


@pytest.fixture
def eop_file_iau1980():
    return os.path.join(DATA_DIR,'eopc04_iau1980_sample.txt')


@pytest.fixture(autouse=True)
def clear_default_context():
    nutation.clear_previous_calculation()
    yield
    nutation.clear_previous_calculation()
