"""Module to setup fixtures and other required artifacts for tests"""

import datetime

import pytest

from aspects import config


@pytest.fixture(autouse=True)
def reset_config():
    """Every test starts from the default configuration"""
    config.configure()
    yield
    config.configure()


@pytest.fixture
def fixed_today(mocker):
    """Pin the clock used by `Person` to 2024-06-15"""
    day = datetime.date(2024, 6, 15)
    mocker.patch("aspects.person.today", return_value=day)
    return day
