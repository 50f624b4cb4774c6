import pytest

from mitolib.reference import SpeciesReference


@pytest.fixture(scope='session')
def reference():
    return SpeciesReference.RCRS


@pytest.fixture(scope='session')
def genome(reference):
    return reference.get_reference()
