#!/usr/bin/env python
# -*- coding: utf-8 -*-

from covtidy.util.config import config


class _BaseException(Exception):
    """Basic class of exception.

    Args:
        message (str): main message of error, should be set in child classes
        details (str or None): details of error
        log (str): description used by logger
    """

    def __init__(self, message, details=None, log="exception raised"):
        config.error(log)
        self._message = str(message)
        self._details = "" if details is None else f" {details}."

    def __str__(self):
        return f"{self._message}. {self._details}"


class _ValidationError(_BaseException):
    """Basic class of exception raised when validation.

    Args:
        name (str): name of the target
        message (str): main message of error, should be set in child classes
        details (str or None): details of error
    """

    def __init__(self, name, message, details=None):
        log = f"validation of {name} failed"
        super().__init__(message=message, details=details, log=log)


class NotIncludedError(_ValidationError):
    """Error when a necessary key was not included in a container.

    Args:
        key_name (str): key name
        container_name (str): name of the container
        details (str or None): details of error
    """

    def __init__(self, key_name, container_name, details=None):
        message = f"'{key_name}' was not included in the '{container_name}'"
        super().__init__(name=key_name, message=message, details=details)


class NAFoundError(_ValidationError):
    """Error when NA values are included un-expectedly.

    Args:
        name (str): name of the target
        value (str or None): value of the target
        details (str or None): details of error
    """

    def __init__(self, name, value=None, details=None):
        message = f"'{name}' has NA(s) un-expectedly"
        if value is not None:
            message += f", '{value}'"
        super().__init__(name=name, message=message, details=details)


class UnExpectedNoneError(_ValidationError):
    """Error when a value is None un-expectedly.

    Args:
        name (str): name of the target
        details (str or None): details of error
    """

    def __init__(self, name, details=None):
        message = f"'{name}' is None un-expectedly"
        super().__init__(name=name, message=message, details=details)


class UnExpectedTypeError(_ValidationError):
    """Error when an object cannot be converted to an instance un-expectedly.

    Args:
        name (str): name of the target
        target (object): target object
        expected (object): expected type
        details (str or None): details of error
    """

    def __init__(self, name, target, expected, details=None):
        message = f"We could not convert '{name}' to an instance of {expected} because that of {type(target)} was applied"
        super().__init__(name=name, message=message, details=details)


class EmptyError(_ValidationError):
    """Error when the dataframe is empty un-expectedly.

    Args:
        name (str): name of the target
        details (str or None): details of error
    """

    def __init__(self, name, details=None):
        message = f"Empty dataframe/series was applied as '{name}' un-expectedly"
        super().__init__(name=name, message=message, details=details)


class UnExpectedValueRangeError(_ValidationError):
    """Error when the value is out of value range.

    Args:
        name (str): name of the target
        target (object): target object
        value_range (tuple(int or None, int or None)): value range, None means un-specified
        details (str or None): details of error
    """

    def __init__(self, name, target, value_range, details=None):
        _min, _max = value_range
        if _min is None:
            s = "is not in the expected value range" if _max is None else f"must be under or equal to {_max}"
        else:
            s = f"must be over or equal to {_min}" if _max is None else f"is not in the expected value range ({_min}, {_max})"
        message = f"'{name}' {s}, but {target} was applied"
        super().__init__(name=name, message=message, details=details)


class UnExpectedValueError(_ValidationError):
    """
    Error when unexpected value was applied as the value of an argument.

    Args:
        name (str): argument name
        value (object): value user applied
        candidates (list[object]): candidates of the argument
        details (str or None): details of error
    """

    def __init__(self, name, value, candidates, details=None):
        c_str = ", ".join(str(c) for c in candidates)
        message = f"'{name}' must be selected from [{c_str}], but {value} was applied"
        super().__init__(name=name, message=message, details=details)


class IncompleteSeriesError(_ValidationError):
    """
    Error when a location does not have records for all observation dates.

    Args:
        location (str): description of the location, like "Fairfield / Connecticut / 957419"
        count (int): the number of records of the location
        expected (int): the number of observation dates in the data
        details (str or None): details of error
    """

    def __init__(self, location, count, expected, details=None):
        self.location = location
        self.count = count
        self.expected = expected
        message = f"'{location}' has {count} records, but records of all {expected} dates are expected"
        super().__init__(name="time-series of locations", message=message, details=details)


class MalformedKeyError(_ValidationError):
    """
    Error when a combined key has more delimiters than the county/state/country hierarchy allows.

    Args:
        key (str): the combined key
        count (int): the number of delimiters found in the key
        details (str or None): details of error
    """

    def __init__(self, key, count, details=None):
        self.key = key
        self.count = count
        message = f"Combined key '{key}' has {count} delimiters, but at most 2 (County, Province_State, Country_Region) are accepted"
        super().__init__(name="combined key", message=message, details=details)


class UnExecutedError(_BaseException):
    """
    Error when we have unexecuted methods that we need to run in advance.

    Args:
        name (str): method name to run in advance
        details (str or None): details of error
    """

    def __init__(self, name, details=None):
        message = f"Please execute {name} in advance"
        log = f"{name} not executed"
        super().__init__(message=message, details=details, log=log)
