#!/usr/bin/env python
# -*- coding: utf-8 -*-

import pandas as pd
from covtidy.util.config import config
from covtidy.util.error import IncompleteSeriesError
from covtidy.util.validator import Validator
from covtidy.util.term import Term


class _DataCleaner(Term):
    """Class for data cleaning.

    Args:
        data (pandas.DataFrame): long-format data
            Index
                reset index
            Column
                column defined by @key
                column defined by @date
                the other columns
        key (str): column name of combined keys
        date (str): column name of observation dates
    """

    def __init__(self, data, key, date):
        self._key = str(key)
        self._date = str(date)
        self._df = Validator(data, "data").dataframe(columns=[self._key, self._date])

    def all(self):
        """Return all available data.

        Returns:
            pandas.DataFrame:
                Index
                    reset index
                Column
                    column defined by @key of _DataCleaner()
                    column defined by @date of _DataCleaner()
                    the other columns
        """
        return self._df

    def convert_date(self, date_format=Term.DATE_FORMAT):
        """Convert dtype of date column to pandas.Timestamp.

        Args:
            date_format (str): format of date strings, like %m/%d/%y for 1/22/20

        Note:
            The column will not be changed if the dtype is datetime64 already.
        """
        df = self._df.copy()
        if not pd.api.types.is_datetime64_any_dtype(df[self._date]):
            df[self._date] = pd.to_datetime(df[self._date], format=date_format)
        self._df = df.copy()

    def check_completeness(self, locations=None, errors="report"):
        """Check that each location has records of all observation dates, or of none of them.

        Args:
            locations (list[str] or None): columns which identify locations or None (the default columns)
            errors (str): "raise" (raise IncompleteSeriesError) or "report" (log the partial locations with WARNING level)

        Raises:
            IncompleteSeriesError: a location has records of some dates only and @errors is "raise"

        Note:
            County, Province_State and Population are the default columns if included, Combined_Key if not.

        Note:
            Records are not changed. Locations with a different population count in some records are partial too.
        """
        Validator([errors], "errors").sequence(candidates=["raise", "report"])
        default = [col for col in [self.COUNTY, self.PROVINCE, self.POPULATION] if col in self._df]
        columns = Validator(locations, "locations").sequence(default=default or [self._key])
        df = Validator(self._df, "data").dataframe(columns=columns)
        expected = df[self._date].nunique()
        counts = df.groupby(columns, dropna=False).size()
        partial = counts.loc[counts != expected]
        if partial.empty:
            config.debug(f"All {len(counts)} locations have records of {expected} dates.")
            return
        names = [
            " / ".join("-" if pd.isna(v) else str(v) for v in (idx if isinstance(idx, tuple) else (idx,))) for idx in partial.index]
        if errors == "raise":
            raise IncompleteSeriesError(location=names[0], count=int(partial.iloc[0]), expected=expected)
        sample = ", ".join(f"'{name}'" for name in names[:5])
        config.warning(f"{len(names)} location(s) do not have records of all {expected} dates: {sample}")

    def exclude(self, pattern, column=Term.PROVINCE):
        """Remove records whose values of the column match the pattern.

        Args:
            pattern (str): regular expression, like "Princess"
            column (str): column name to search the pattern in
        """
        df = Validator(self._df, "data").dataframe(columns=[column])
        matched = df[column].astype("string").str.contains(pattern, regex=True, na=False)
        config.info(f"{matched.sum()} records matched with '{pattern}' in {column} were removed.")
        self._df = df.loc[~matched].reset_index(drop=True)

    def replace(self, old, new, columns=None):
        """Replace sub-strings in string columns.

        Args:
            old (str): sub-string to replace, like "Virgin Islands"
            new (str): new sub-string, like "U.S. Virgin Islands"
            columns (list[str] or None): columns to replace values in or None (Combined_Key and Province_State)
        """
        targets = Validator(columns, "columns").sequence(default=[self._key, self.PROVINCE])
        df = Validator(self._df, "data").dataframe(columns=targets)
        for col in targets:
            df[col] = df[col].astype("string").str.replace(old, new, regex=False)
        self._df = df.copy()

    def regenerate_keys(self, country=Term.US):
        """Regenerate combined keys of county-level records with County, Province_State and Country_Region.

        Args:
            country (str): the value of Country_Region used when the column is not included in the data

        Note:
            County-level records are records with two commas in their keys.
            Spaces around the commas will be unified, like "Fairfield,Connecticut,US" -> "Fairfield, Connecticut, US".
        """
        df = Validator(self._df, "data").dataframe(columns=[self.COUNTY, self.PROVINCE])
        if self.COUNTRY not in df:
            df[self.COUNTRY] = country
        series = df[self._key].astype("string")
        index = series.str.count(self.DELIMITER).eq(2).fillna(False)
        index &= df.loc[:, self.GEO_COLUMNS].notna().all(axis=1)
        df[self._key] = series
        if index.any():
            df.loc[index, self._key] = df.loc[index, self.GEO_COLUMNS].apply(
                lambda x: self.combine(*x.tolist()), axis=1).astype("string")
        config.debug(f"Combined keys of {index.sum()} county-level records were regenerated.")
        self._df = df.copy()
