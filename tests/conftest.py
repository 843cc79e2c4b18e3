import pytest

from ldapencoder import set_debug


@pytest.fixture(scope="module")
def injection_payloads():
    """Get filter injection attempts."""
    return [
        "*)(uid=*))(|(uid=*",
        "admin)(&(password=*",
        "*)(&(objectClass=*",
        "*)(userPassword=*",
        "\\*)(objectClass=*",
    ]


@pytest.fixture(scope="module")
def sample_values(injection_payloads):
    """Get values with all kinds of troublesome characters."""
    return injection_payloads + [
        "JohnDoe",
        " John Doe, Jr. ",
        "#start",
        "   ",
        " # ",
        'a,b+c"d\\e<f>g;h=i',
        "CN=user/admin",
        "test\0value",
        "test\x01\x1f\x7fvalue",
        "a\nb\rc\td",
        "café",
        "北京",
        "\U0001F600",
        "\ud800 lonely",
    ]


@pytest.fixture
def debug():
    """Turn on debug logging for the test and off afterwards."""
    set_debug(True)
    yield
    set_debug(False)
