#!/usr/bin/env python
# -*- coding: utf-8 -*-

from covtidy import config, IncompleteSeriesError, MalformedKeyError


class TestConfig(object):
    def test_level(self):
        config.logger(level=3)
        assert config.logger_level == 3
        config.debug("debug message")
        config.logger(level=2)
        assert config.logger_level == 2

    def test_warning(self, logged_warnings):
        config.info("information")
        config.warning("warning message")
        assert logged_warnings == ["warning message"]

    def test_error_message(self):
        error = MalformedKeyError(key="A, B, C, D", count=3, details="Please check the county names")
        assert str(error).startswith("Combined key 'A, B, C, D' has 3 delimiters")
        assert str(error).endswith("Please check the county names.")
        error = IncompleteSeriesError(location="Fairfield / Connecticut / 957419", count=5, expected=6)
        assert str(error).startswith("'Fairfield / Connecticut / 957419' has 5 records")
        assert (error.count, error.expected) == (5, 6)
