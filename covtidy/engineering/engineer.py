from __future__ import annotations
import pandas as pd
from typing_extensions import Self
from covtidy.util.config import config
from covtidy.util.error import UnExecutedError
from covtidy.util.validator import Validator
from covtidy.util.term import Term
from covtidy.geography.resolver import GeoKeyResolver
from covtidy.engineering._cleaner import _DataCleaner
from covtidy.engineering._transformer import _DataTransformer
from covtidy.engineering.monthly import aggregate_monthly, wide_from_monthly


class DataEngineer(Term):
    """Class for data engineering of JHU CSSE time-series data, cleaning, transforming and aggregating by month.

    Args:
        country: the value of Country_Region (the data must be a single-country dataset)
        value: column name of the cumulative counts, like "Deaths_Count_Cumulative"
        date_format: format of observation dates in the raw data, like %m/%d/%y for 1/22/20

    Examples:
        >>> import covtidy as ct
        >>> raw_df = ct.DataLoader(directory="input").read("time_series_covid19_deaths_US.csv")
        >>> engineer = ct.DataEngineer(country="US", value="Deaths_Count_Cumulative")
        >>> engineer.register(raw_df).clean().totals()
        >>> engineer.workshop(errors="report")
    """

    def __init__(self, country: str = Term.US, value: str = Term.DEATHS, date_format: str = Term.DATE_FORMAT) -> None:
        self._country = str(country)
        self._value = str(value)
        self._date_format = str(date_format)
        self._resolver = GeoKeyResolver(country=self._country)
        self._df = pd.DataFrame()

    def register(self, data: pd.DataFrame) -> Self:
        """Register new data.

        Args:
            data: wide-format raw data or long-format data
                Index
                    reset index
                Columns
                    - Combined_Key (str): combined keys
                    - County (str): county names, optional
                    - Province_State (str): province/state names, optional
                    - Country_Region (str): country names, optional
                    - Population (int): population of the locations, optional
                    - (int): cumulative counts for each date, like "1/22/20" when wide-format
                    - Date (str or pandas.Timestamp) and the column defined by @value of DataEngineer() when long-format
                    - the other columns will be removed when wide-format

        Returns:
            updated `DataEngineer` instance

        Note:
            Registered records replace the records registered in advance.
        """
        df = Validator(data, "data").dataframe(columns=[self.KEY], empty_ok=False)
        id_cols = [col for col in [*self.ID_COLUMNS, self.POPULATION] if col in df]
        transformer = _DataTransformer(data=df, key=self.KEY, date=self.DATE)
        if not {self.DATE, self._value}.issubset(df.columns):
            transformer.longer(id_columns=id_cols, value=self._value, date_format=self._date_format)
        self._df = transformer.all().reset_index(drop=True)
        config.info(f"{len(self._df)} records of {self._df[self.KEY].nunique()} locations were registered.")
        return self

    def all(self) -> pd.DataFrame:
        """Return all available data in long-format.

        Raises:
            UnExecutedError: no records have been registered yet

        Returns:
            Index
                reset index
            Column
                - Combined_Key (str): combined keys
                - columns of geographic layers which were registered
                - Date (str or pandas.Timestamp): observation dates
                - the column defined by @value of DataEngineer()
                - the other columns
        """
        if self._df.empty:
            raise UnExecutedError("DataEngineer.register()")
        return self._df.copy()

    def clean(self, kinds: list[str] | None = None, **kwargs) -> Self:
        """Clean all registered data.

        Args:
            kinds: kinds of data cleaning with order or None (all available kinds except for "replace")

                - "convert_date": Convert dtype of date column to pandas.Timestamp.
                - "check_completeness": Check that each location has records of all dates, records are not changed.
                - "exclude": Remove records matched with a pattern, cruise ships as default.
                - "replace": Replace sub-strings in Combined_Key and Province_State.
                - "regenerate_keys": Regenerate combined keys of county-level records to unify spaces.
            **kwargs: keyword arguments of data cleaning refer to note

        Returns:
            updated `DataEngineer` instance

        Note:
            When "convert_date" included, `date_format` (str) can be applied, the value of DataEngineer(date_format) as default.

        Note:
            When "check_completeness" included, `locations` (list[str] or None) and `errors` (str, "report" as default) can be applied.

        Note:
            When "exclude" included, `pattern` (str, "Princess" as default) and `column` (str, "Province_State" as default) can be applied.

        Note:
            When "replace" included, `old` (str), `new` (str) and `columns` (list[str] or None) must be applied.
        """
        cleaner = _DataCleaner(data=self.all(), key=self.KEY, date=self.DATE)
        kind_dict = {
            "convert_date": cleaner.convert_date,
            "check_completeness": cleaner.check_completeness,
            "exclude": cleaner.exclude,
            "replace": cleaner.replace,
            "regenerate_keys": cleaner.regenerate_keys,
        }
        all_kinds = list(kind_dict.keys())
        selected = Validator(kinds, "kind").sequence(
            default=[kind for kind in all_kinds if kind != "replace"], candidates=all_kinds)
        default_dict = {
            "date_format": self._date_format, "errors": "report", "pattern": "Princess", "column": self.PROVINCE,
            "country": self._country,
        }
        for kind in selected:
            if kind == "replace":
                Validator(kwargs, "keyword arguments").dict(required_keys=["old", "new"], errors="raise")
            kind_dict[kind](**Validator(kwargs, "keyword arguments").kwargs(functions=kind_dict[kind], default=default_dict))
        self._df = cleaner.all().reset_index(drop=True)
        return self

    def totals(self, states: list[str] | None = None) -> Self:
        """Calculate state-level values from county-level values and country-level values from state-level values.

        Args:
            states: states to sum for the country-level values or None (the fifty states, Term.US_STATES)

        Returns:
            updated `DataEngineer` instance

        Note:
            Records of territories and cruise ships do not have county-level records and remain as-is.
        """
        transformer = _DataTransformer(data=self.all(), key=self.KEY, date=self.DATE)
        transformer.state_totals(value=self._value, country=self._country)
        transformer.country_totals(value=self._value, country=self._country, states=states)
        self._df = transformer.all().reset_index(drop=True)
        return self

    def diff(self, suffix: str = Term.DAILY_SUFFIX) -> Self:
        """Calculate daily new values with "f(x>0) = F(x) - F(x-1), f(0) = F(0) when F is cumulative values".

        Args:
            suffix: suffix of the new column (new column name will be '{value}{suffix}')

        Returns:
            updated `DataEngineer` instance
        """
        cleaner = _DataCleaner(data=self.all(), key=self.KEY, date=self.DATE)
        cleaner.convert_date(date_format=self._date_format)
        transformer = _DataTransformer(data=cleaner.all(), key=self.KEY, date=self.DATE)
        transformer.diff(value=self._value, suffix=suffix)
        self._df = transformer.all().reset_index(drop=True)
        return self

    def monthly(self, start_date: str | None = None, end_date: str | None = None) -> pd.DataFrame:
        """Return the maximum cumulative values of each location and month.

        Args:
            start_date: the first date of the month range, like 01Jan2021, or None (the first month)
            end_date: the last date of the month range, like 31Dec2021, or None (the last month)

        Raises:
            UnExpectedValueRangeError: @end_date is earlier than @start_date

        Returns:
            Index
                reset index
            Columns
                - Combined_Key (str): combined keys
                - Month (pandas.Timestamp): the first dates of the months
                - the column defined by @value of DataEngineer() (Int64): the maximum cumulative values

        Note:
            Months whose first dates are in the range will be selected. The result is empty when no months are selected.
        """
        cleaner = _DataCleaner(data=self.all(), key=self.KEY, date=self.DATE)
        cleaner.convert_date(date_format=self._date_format)
        df = aggregate_monthly(cleaner.all(), key=self.KEY, date=self.DATE, value=self._value, date_format=self._date_format)
        start = Validator(start_date, "start_date").date(default=df[self.MONTH].min())
        end_range = (None, None) if end_date is None else (start, None)
        end = Validator(end_date, "end_date").date(value_range=end_range, default=df[self.MONTH].max())
        return df.loc[df[self.MONTH].between(start, end, inclusive="both")].reset_index(drop=True)

    def wide(self, start_date: str | None = None, end_date: str | None = None) -> pd.DataFrame:
        """Return the monthly values in wide-format, one row for each location and one column for each month.

        Args:
            start_date: the first date of the month range, like 01Jan2021, or None (the first month)
            end_date: the last date of the month range, like 31Dec2021, or None (the last month)

        Returns:
            Index
                reset index
            Columns
                - Combined_Key (str): combined keys
                - (pandas.Timestamp): Int64 values of the months, NA when the location was not reported in the month
        """
        return wide_from_monthly(self.monthly(start_date=start_date, end_date=end_date), value=self._value)

    def workshop(self, errors: str = "report", start_date: str | None = None, end_date: str | None = None) -> pd.DataFrame:
        """Return the monthly values in wide-format with geographic layers decomposed from the combined keys.

        Args:
            errors: "raise" (raise MalformedKeyError) or "report" (log and skip malformed keys)
            start_date: the first date of the month range, like 01Jan2021, or None (the first month)
            end_date: the last date of the month range, like 31Dec2021, or None (the last month)

        Raises:
            MalformedKeyError: a key has more than two commas and @errors is "raise"

        Returns:
            Index
                reset index
            Columns
                - Combined_Key (str): combined keys
                - County (str or NA): county names
                - Province_State (str or NA): province/state names
                - Country_Region (str): country names
                - (pandas.Timestamp): Int64 values of the months, NA when the location was not reported in the month
        """
        df = self._resolver.attach(self.wide(start_date=start_date, end_date=end_date), errors=errors)
        config.info(f"Workshop dataset has {len(df)} locations and {len(df.columns) - len(self.ID_COLUMNS)} months.")
        return df
