"""Shared key fixtures (generated once per session)."""

import os
import sys

import pytest
from cryptography.hazmat.primitives.asymmetric import ec

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from rsakeys import generate_private_key


@pytest.fixture(scope="session")
def rsa_key():
    return generate_private_key(2048)


@pytest.fixture(scope="session")
def ec_key():
    return ec.generate_private_key(ec.SECP256R1())


def same_private(a, b) -> bool:
    return a.private_numbers() == b.private_numbers()


def same_public(a, b) -> bool:
    return a.public_numbers() == b.public_numbers()
