from __future__ import annotations
import pandas as pd
from covtidy.util.validator import Validator
from covtidy.util.term import Term


def aggregate_monthly(
        data: pd.DataFrame, key: str = Term.KEY, date: str = Term.DATE, value: str = Term.DEATHS,
        date_format: str = Term.DATE_FORMAT) -> pd.DataFrame:
    """Aggregate daily cumulative counts to monthly values, the maximum of each location-month.

    Args:
        data: long-format observations
            Index
                ignored
            Columns
                - column defined by @key (str): combined keys
                - column defined by @date (pandas.Timestamp or str): observation dates, like 3/5/21
                - column defined by @value (int): cumulative counts
        key: column name of combined keys
        date: column name of observation dates
        value: column name of cumulative counts
        date_format: format of observation dates when they are strings, like %m/%d/%y for 3/5/21

    Returns:
        Index
            reset index
        Columns
            - column defined by @key (str): combined keys
            - Month (pandas.Timestamp): the first dates of the months
            - column defined by @value (Int64): the maximum cumulative count in the month

    Note:
        Cumulative counts are expected to be non-decreasing, but corrections may decrease them.
        The peak report of the month is selected, never the sum nor the last report.

    Note:
        Rows are sorted by (@key, Month) and each (@key, Month) pair in @data has exactly one row.
    """
    df = Validator(data, "observations").dataframe(columns=[key, date, value])
    if not pd.api.types.is_datetime64_any_dtype(df[date]):
        df[date] = pd.to_datetime(df[date], format=date_format)
    df[Term.MONTH] = df[date].dt.to_period("M").dt.to_timestamp()
    df[value] = pd.to_numeric(df[value]).astype("Int64")
    df = df.groupby([key, Term.MONTH], as_index=False, sort=True, dropna=False)[value].max()
    return df.loc[:, [key, Term.MONTH, value]].reset_index(drop=True)


def wide_from_monthly(data: pd.DataFrame, key: str = Term.KEY, month: str = Term.MONTH, value: str = Term.DEATHS) -> pd.DataFrame:
    """Pivot monthly aggregates to wide format, one row per location and one column per month.

    Args:
        data: monthly aggregates returned by aggregate_monthly()
        key: column name of combined keys
        month: column name of months
        value: column name of the monthly values

    Returns:
        Index
            reset index
        Columns
            - column defined by @key (str): combined keys, sorted
            - (pandas.Timestamp): one Int64 column for each month in @data, ascending

    Note:
        (@key, @month) pairs which are absent in @data are pandas.NA, not 0.
        When @data is empty, the output has @key column only.
    """
    df = Validator(data, "monthly aggregates").dataframe(columns=[key, month, value])
    if df.empty:
        return df.loc[:, [key]].reset_index(drop=True)
    df[value] = pd.to_numeric(df[value]).astype("Int64")
    df = df.pivot(index=key, columns=month, values=value).sort_index().sort_index(axis=1)
    df.columns.name = None
    df = df.astype("Int64")
    return df.reset_index()
