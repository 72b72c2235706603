from typing import Iterator

import pytest

from fluentrules import PropertyParser, ValidationConfiguration, ValidationRules


@pytest.fixture(autouse=True)
def configuration() -> Iterator[ValidationConfiguration]:
    """Every test declares its rules on a fresh configuration"""
    previous = ValidationRules.configuration
    config = ValidationConfiguration()
    ValidationRules.initialize(PropertyParser(), configuration=config)
    yield config
    ValidationRules.configuration = previous
