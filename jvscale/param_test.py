#! /usr/bin/env python3

import pytest

from . import errors
from . import param

def test_update():
    opts = param.update(param.LINEAR, {})
    assert opts['range'] == (0.0, 1.0)
    assert opts['interval_count'] == 10
    assert opts['domain'] is None

    opts = param.update(param.LINEAR, {'interval_count': 5},
                        {'interval_count': 7})
    assert opts['interval_count'] == 7

    opts = param.update(param.LOG, None, log_base='base_10')
    assert opts['log_base'] == 'base_10'
    assert opts['negative_numbers'] == 'clip'

    assert param.update(param.TIME)['interval_count'] == 11
    assert param.update(param.ORDINAL)['padding'] == 0.5

def test_invalid_names():
    with pytest.raises(errors.InvalidOptionName):
        param.update(param.LINEAR, {'log_base': 'base_2'})
    with pytest.raises(errors.InvalidOptionName):
        param.update(param.ORDINAL, interval_count=5)
    assert param.check_keys(param.LINEAR, None) == {}

def test_check_value():
    assert param.check_value(param.LINEAR, 'interval_count', 4) == 4
    for bad in [1, 0, -3, 2.5, "10", True]:
        with pytest.raises(errors.InvalidOptionValue):
            param.check_value(param.LINEAR, 'interval_count', bad)

    assert param.check_value(param.ORDINAL, 'padding', 2) == 2.0
    with pytest.raises(errors.InvalidOptionValue):
        param.check_value(param.ORDINAL, 'padding', "wide")

    assert param.check_value(param.LOG, 'linear_range', None) is None
    assert param.check_value(param.LOG, 'linear_range', 1) == 1.0
    with pytest.raises(errors.InvalidOptionValue):
        param.check_value(param.LOG, 'linear_range', -1)

    for key, choices in param.CHOICES.items():
        for val in choices:
            assert param.check_value(param.LOG, key, val) == val
        with pytest.raises(errors.InvalidOptionValue):
            param.check_value(param.LOG, key, 'base_3')

    fn = str
    assert param.check_value(param.TIME, 'custom_tick_formatter', fn) is fn
    with pytest.raises(errors.InvalidOptionValue):
        param.check_value(param.TIME, 'custom_tick_formatter', "%Y")

    assert param.check_value(param.ORDINAL, 'domain', ["a", "b"]) == ("a", "b")
    assert param.check_value(param.ORDINAL, 'domain', range(3)) == (0, 1, 2)
    for bad in ["abc", 3]:
        with pytest.raises(errors.InvalidOptionValue):
            param.check_value(param.ORDINAL, 'domain', bad)

def test_error_messages():
    try:
        param.update(param.LOG, negative_numbers='drop')
    except errors.WrongUsage as e:
        assert 'negative_numbers' in str(e)
        assert 'drop' in e.msg
    else:
        assert False, "invalid option was accepted"
