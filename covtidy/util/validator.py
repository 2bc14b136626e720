#!/usr/bin/env python
# -*- coding: utf-8 -*-

from inspect import signature
import pandas as pd
from covtidy.util.error import NAFoundError, NotIncludedError, UnExpectedTypeError, EmptyError
from covtidy.util.error import UnExpectedValueRangeError, UnExpectedValueError, UnExpectedNoneError


class Validator(object):
    """Validate arguments and tables.

    Args:
        target (object): target object to validate
        name (str): name of the target shown in error messages
        accept_none (bool): whether accept None as the target value or not

    Raises:
        UnExpectedNoneError: @accept_none is False, but @target is None

    Note:
        When @accept_none is True and @target is None, default values will be returned with instance methods.
    """

    def __init__(self, target, name="target", accept_none=True):
        self._target = target
        self._name = str(name)
        if target is None and not accept_none:
            raise UnExpectedNoneError(self._name)

    def instance(self, expected):
        """Ensure that the target is an instance of a specified class.

        Args:
            expected (object): expected class or tuple of expected classes

        Raises:
            UnExpectedTypeError: the target is not an instance of the class

        Returns:
            object: the target itself
        """
        if isinstance(self._target, expected):
            return self._target
        raise UnExpectedTypeError(self._name, self._target, expected)

    def dataframe(self, columns=None, empty_ok=True):
        """Ensure the target is a dataframe with the columns.

        Args:
            columns (list[str] or None): the columns the dataframe must have, like ["Combined_Key", "Date"]
            empty_ok (bool): whether give permission to empty dataframe or not

        Raises:
            UnExpectedTypeError: the target is not a dataframe
            EmptyError: empty when @empty_ok is False
            NotIncludedError: the first of the missing columns

        Returns:
            pandas.DataFrame: a copy of the target
        """
        if not isinstance(self._target, pd.DataFrame):
            raise UnExpectedTypeError(self._name, self._target, pd.DataFrame)
        df = self._target.copy()
        if not empty_ok and df.empty:
            raise EmptyError(name=self._name)
        missing = [col for col in (columns or []) if col not in df.columns]
        if missing:
            raise NotIncludedError(
                missing[0], f"column list of {self._name}",
                details=f"The dataframe has {', '.join(str(c) for c in df.columns)} as columns")
        return df

    def date(self, value_range=(None, None), default=None):
        """Convert a value, like "01Jan2021", to a date.

        Args:
            value_range (tuple(pandas.Timestamp or None, pandas.Timestamp or None)): value range, None means un-specified
            default (pandas.Timestamp or None): default value when the target is None

        Raises:
            UnExpectedTypeError: the target cannot be converted to a date
            UnExpectedValueRangeError: the value is out of value range

        Returns:
            pandas.Timestamp or None: converted date (00:00:00) or None (when both of the target and @default are None)
        """
        if self._target is None:
            return None if default is None else Validator(default, name="default").date(value_range=value_range)
        try:
            value = pd.Timestamp(self._target).normalize()
        except ValueError:
            raise UnExpectedTypeError(self._name, self._target, pd.Timestamp) from None
        if (value < (value_range[0] or value)) or (value > (value_range[1] or value)):
            raise UnExpectedValueRangeError(
                self._name, value.strftime("%Y-%m-%d"), [None if date is None else date.strftime("%Y-%m-%d") for date in value_range])
        return value

    def sequence(self, default=None, unique=False, candidates=None):
        """Convert a sequence (list, tuple, pandas.Series or pandas.Index) to a list.

        Args:
            default (list[object] or None): default value when the target is None
            unique (bool): whether remove duplicated values or not, the first value will remain
            candidates (list[object] or None): list of candidates or None (no limitations)

        Raises:
            UnExpectedTypeError: the target cannot be converted to a list
            UnExpectedValueError: the target has a value which is not included in the candidates

        Returns:
            list[object] or None: converted list or None (when both of the target and @default are None)
        """
        if self._target is None:
            return None if default is None else Validator(default, name="default").sequence(unique=unique, candidates=candidates)
        if not isinstance(self._target, (list, tuple, pd.Series, pd.Index)):
            raise UnExpectedTypeError(
                self._name, self._target, list, details="A tuple or pandas.Series can be used, but it will be converted to a list")
        targets = list(dict.fromkeys(self._target)) if unique else list(self._target)
        if candidates is None:
            return targets
        for value in targets:
            if value not in candidates:
                raise UnExpectedValueError(self._name, value, candidates)
        return targets

    def dict(self, default=None, required_keys=None, errors="coerce"):
        """Ensure the target is a dictionary, like keyword arguments of data cleaning.

        Args:
            default (dict[str, object] or None): default values, when the target is None or key is not included in the target
            required_keys (list[str] or None): keys which must be included
            errors (str): "coerce" (None will be set for missing required keys) or "raise"

        Raises:
            UnExpectedTypeError: the target is not a dictionary
            NAFoundError: values of the required keys are not specified when @errors="raise"

        Returns:
            dict[str, object]: the target with default values and required keys
        """
        if self._target is not None and not isinstance(self._target, dict):
            raise UnExpectedTypeError(self._name, self._target, dict)
        _dict = dict.fromkeys(required_keys or [])
        _dict.update(default or {})
        _dict.update(self._target or {})
        if errors == "raise":
            for key in [key for key in (required_keys or []) if _dict[key] is None]:
                raise NAFoundError(f"The value of key {key} in dictionary {self._name}")
        return _dict

    def kwargs(self, functions, default=None):
        """Select keyword arguments which the functions accept.

        Args:
            functions (list[function] or function): target functions
            default (dict[str, object] or None): default values, when the target is None or key is not included in the target

        Raises:
            UnExpectedTypeError: the target is not a dictionary

        Returns:
            dict[str, object]: keyword arguments of the functions
        """
        _dict = self.dict(default=default, required_keys=None, errors="coerce")
        keywords_nest = [
            list(signature(func).parameters.keys()) for func in (functions if isinstance(functions, list) else [functions])]
        keywords_set = set(sum(keywords_nest, [])) - {"self", "cls"}
        return {k: v for k, v in _dict.items() if k in keywords_set}
