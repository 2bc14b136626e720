#!/usr/bin/env python
# -*- coding: utf-8 -*-

import pandas as pd
from covtidy.util.config import config
from covtidy.util.error import EmptyError
from covtidy.util.validator import Validator
from covtidy.util.term import Term


class _DataTransformer(Term):
    """Class for data transformation.

    Args:
        data (pandas.DataFrame): raw data
            Index
                reset index
            Column
                column defined by @key
                the other columns
        key (str): column name of combined keys
        date (str): column name of observation dates
    """

    def __init__(self, data, key, date):
        self._key = str(key)
        self._date = str(date)
        self._df = Validator(data, "data").dataframe(columns=[self._key])

    def all(self):
        """Return all available data.

        Returns:
            pandas.DataFrame: transformed data
        """
        return self._df

    def longer(self, id_columns, value, date_format=Term.DATE_FORMAT):
        """Convert wide-format data (one column for each date) to long-format data.

        Args:
            id_columns (list[str]): columns to keep as identifiers
            value (str): column name of the values in long-format data
            date_format (str): format of the date column names, like %m/%d/%y for 1/22/20

        Raises:
            EmptyError: no columns are date strings with @date_format

        Note:
            The columns which are neither in @id_columns nor date strings (UID, Lat etc.) will be removed.
        """
        id_cols = Validator(id_columns, "id_columns").sequence(candidates=list(self._df.columns))
        others = pd.Series([col for col in self._df.columns if col not in id_cols], dtype="object")
        parsed = pd.to_datetime(others.astype(str), format=date_format, errors="coerce")
        date_cols = others[parsed.notna()].tolist()
        if not date_cols:
            raise EmptyError(
                name="date columns of the data", details=f"Column names of observation dates must be like {self.DATE_FORMAT_DESC}")
        df = self._df.melt(id_vars=id_cols, value_vars=date_cols, var_name=self._date, value_name=value)
        config.debug(f"{len(date_cols)} date columns were converted to {len(df)} records.")
        self._df = df.loc[:, [*id_cols, self._date, value]]

    def state_totals(self, value, country=Term.US):
        """Calculate state-level values by summing the county-level values of each state and date.

        Args:
            value (str): column name of the values to sum
            country (str): the value of Country_Region

        Note:
            Records with County values are regarded as county-level records.
            State-level records with the same combined keys, like "Connecticut, US", will be replaced.
        """
        df = Validator(self._df, "data").dataframe(columns=[self.COUNTY, self.PROVINCE, self._date, value])
        county_df = df.loc[df[self.COUNTY].notna() & df[self.PROVINCE].notna()]
        state_df = county_df.groupby([self.PROVINCE, self._date], as_index=False)[value].sum()
        state_df[self.COUNTY] = pd.NA
        state_df[self.COUNTRY] = country
        state_df[self._key] = state_df[self.PROVINCE].apply(lambda x: self.combine(x, country))
        self._df = self._merge(df, state_df)
        config.info(f"State-level records were calculated for {state_df[self.PROVINCE].nunique()} states.")

    def country_totals(self, value, country=Term.US, states=None):
        """Calculate country-level values by summing the state-level values of each date.

        Args:
            value (str): column name of the values to sum
            country (str): the value of Country_Region and the combined key of the country
            states (list[str] or None): states to sum or None (the fifty states, Term.US_STATES)

        Note:
            State-level records are records whose combined keys are like "<Province_State>, <country>".
        """
        selected = Validator(states, "states").sequence(default=self.US_STATES)
        df = Validator(self._df, "data").dataframe(columns=[self.COUNTY, self.PROVINCE, self._date, value])
        state_keys = [self.combine(state, country) for state in selected]
        state_df = df.loc[df[self.COUNTY].isna() & df[self._key].isin(state_keys)]
        country_df = state_df.groupby(self._date, as_index=False)[value].sum()
        country_df[self.COUNTY] = pd.NA
        country_df[self.PROVINCE] = pd.NA
        country_df[self.COUNTRY] = country
        country_df[self._key] = country
        self._df = self._merge(df, country_df)
        config.info(f"Country-level records were calculated with {state_df[self._key].nunique()} states.")

    def _merge(self, df, new_df):
        """Combine new records with the current records, replacing the current records of the same combined keys.

        Args:
            df (pandas.DataFrame): current records
            new_df (pandas.DataFrame): new records

        Returns:
            pandas.DataFrame: new records followed by the current records which have the other combined keys
        """
        remained = df.loc[~df[self._key].isin(new_df[self._key].unique())]
        return pd.concat([new_df.loc[:, df.columns.intersection(new_df.columns)], remained], axis=0, ignore_index=True)

    def diff(self, value, suffix=Term.DAILY_SUFFIX):
        """Calculate daily values from cumulative values with "F(x>0) = F(x) - F(x-1), F(0) = F(0)" for each combined key.

        Args:
            value (str): column name of the cumulative values
            suffix (str): suffix of the column (new column name will be '{value}{suffix}')
        """
        df = Validator(self._df, "data").dataframe(columns=[self._date, value])
        df = df.sort_values([self._key, self._date], kind="stable", ignore_index=True)
        new_column = f"{value}{suffix}"
        df[value] = pd.to_numeric(df[value]).astype("Int64")
        df[new_column] = df.groupby(self._key)[value].diff().fillna(df[value]).astype("Int64")
        self._df = df.copy()
