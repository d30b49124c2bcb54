"""
Pytest configuration for encryption wrapper tests.
"""

import pytest
from typing import Generator

from encryption_wrapper.config import WrapperConfig
from encryption_wrapper.encryption.openssl import OpenSSLCipherProvider


TEST_KEY = "SECRET_KEY_6X2tjYipm4Wr8Sl0"

ENV_VARS = (
    "ENCRYPTION_WRAPPER_CIPHER",
    "ENCRYPTION_WRAPPER_ENCODING",
    "ENCRYPTION_WRAPPER_ALLOW_WEAK_IV",
)


class Record:
    """Plain object used as the wrapped entity."""

    def __init__(self) -> None:
        self.not_secret = None
        self.secret = None

    def describe(self, prefix: str, suffix: str = "") -> str:
        return f"{prefix}{self.not_secret}{suffix}"


class CountingProvider(OpenSSLCipherProvider):
    """
    Provider double that counts crypto calls.

    It can also pretend its random source is weak, to exercise the
    weak IV policy.
    """

    def __init__(self, strong: bool = True) -> None:
        super().__init__()
        self.strong = strong
        self.random_calls = 0
        self.encrypt_calls = 0
        self.decrypt_calls = 0

    def random_bytes(self, length: int) -> tuple[bytes, bool]:
        self.random_calls += 1
        data, _ = super().random_bytes(length)
        return data, self.strong

    def encrypt(self, *args, **kwargs):
        self.encrypt_calls += 1
        return super().encrypt(*args, **kwargs)

    def decrypt(self, *args, **kwargs):
        self.decrypt_calls += 1
        return super().decrypt(*args, **kwargs)

    @property
    def total_calls(self) -> int:
        return self.random_calls + self.encrypt_calls + self.decrypt_calls


@pytest.fixture(autouse=True)
def clean_config(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """
    Isolate every test from process-wide configuration.

    This fixture removes the ENCRYPTION_WRAPPER_* environment variables
    and resets WrapperConfig before and after the test.
    """
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    WrapperConfig._config = {}
    WrapperConfig._initialized = False

    yield

    WrapperConfig._config = {}
    WrapperConfig._initialized = False


@pytest.fixture
def key() -> str:
    return TEST_KEY


@pytest.fixture
def record() -> Record:
    return Record()


@pytest.fixture
def counting_provider() -> CountingProvider:
    return CountingProvider()


@pytest.fixture
def weak_provider() -> CountingProvider:
    """Provider whose random source reports every draw as not strong."""
    return CountingProvider(strong=False)
