import pytest

from helpers import BOWTIE, L_SHAPE, SQUARE


@pytest.fixture
def l_shape():
    return list(L_SHAPE)


@pytest.fixture
def square():
    return list(SQUARE)


@pytest.fixture
def bowtie():
    return list(BOWTIE)
