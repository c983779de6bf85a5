"""Shared test fixtures."""
import pytest
from currency_format.editing.host import InMemoryTextInput, ManualScheduler
from currency_format.formatting.factory import build_strategy
from currency_format.models.options import FormatConfig, PatternConfig

PHONE_PATTERN = "+1 (###) ###-####"


@pytest.fixture
def usd_config():
    return FormatConfig(prefix="$")


@pytest.fixture
def usd(usd_config):
    return build_strategy(usd_config)


@pytest.fixture
def plain():
    return build_strategy(FormatConfig())


@pytest.fixture
def fixed_usd():
    return build_strategy(FormatConfig(prefix="$", decimal_scale=2, fixed_decimal_scale=True))


@pytest.fixture
def phone_config():
    return PatternConfig(pattern=PHONE_PATTERN, mask="_")


@pytest.fixture
def phone(phone_config):
    return build_strategy(phone_config)


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def text_input():
    return InMemoryTextInput()
