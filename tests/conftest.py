import random

import pytest

from sha1digest import Sha1


@pytest.fixture(params=[False, True], ids=["scalar", "batched"])
def batched(request):
	return request.param


@pytest.fixture
def hasher(batched):
	return Sha1(batched=batched)


@pytest.fixture
def rng():
	return random.Random(0x5A827999)
