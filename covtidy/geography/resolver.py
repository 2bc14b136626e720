from __future__ import annotations
from dataclasses import dataclass
import pandas as pd
from covtidy.util.config import config
from covtidy.util.error import MalformedKeyError, UnExpectedTypeError
from covtidy.util.validator import Validator
from covtidy.util.term import Term


@dataclass(frozen=True)
class GeoRecord:
    """Geographic layers decomposed from a combined key."""

    combined_key: str
    country_region: str
    province_state: str | None = None
    county: str | None = None


class GeoKeyResolver(Term):
    """Class to decompose combined keys, like "Fairfield, Connecticut, US", into geographic layers.

    Args:
        country: the value of Country_Region for state-level and county-level keys
        delimiter: delimiter of the layers in combined keys

    Note:
        The number of delimiters decides the level of a key: 0 for countries, 1 for states and 2 for counties.
        Country names of state-level and county-level keys are not parsed, the value of @country is used.

    Note:
        County names which include the delimiter cannot be distinguished from deeper hierarchies
        and are rejected as malformed keys.
    """
    _ERRORS = ["raise", "report"]

    def __init__(self, country: str = Term.US, delimiter: str = Term.DELIMITER) -> None:
        self._country = Validator(country, "country", accept_none=False).instance(str)
        self._delimiter = Validator(delimiter, "delimiter", accept_none=False).instance(str)

    @property
    def country(self) -> str:
        """str: the value of Country_Region for state-level and county-level keys
        """
        return self._country

    def _count(self, combined_key: str) -> int:
        if not isinstance(combined_key, str):
            raise UnExpectedTypeError("combined key", combined_key, str)
        count = combined_key.count(self._delimiter)
        if count > 2:
            raise MalformedKeyError(key=combined_key, count=count)
        return count

    def level(self, combined_key: str) -> str:
        """Return the lowest geographic layer a combined key represents.

        Args:
            combined_key: combined key

        Raises:
            UnExpectedTypeError: @combined_key is not a string
            MalformedKeyError: @combined_key has more than two delimiters

        Returns:
            "Country_Region", "Province_State" or "County"
        """
        return [self.COUNTRY, self.PROVINCE, self.COUNTY][self._count(combined_key)]

    def decompose(self, combined_key: str) -> GeoRecord:
        """Decompose a combined key into geographic layers.

        Args:
            combined_key: combined key, like "Fairfield, Connecticut, US", "Connecticut, US" or "US"

        Raises:
            UnExpectedTypeError: @combined_key is not a string
            MalformedKeyError: @combined_key has more than two delimiters

        Returns:
            decomposed layers

        Examples:
            >>> resolver = GeoKeyResolver(country="US")
            >>> resolver.decompose("Fairfield, Connecticut, US")
            GeoRecord(combined_key='Fairfield, Connecticut, US', country_region='US', province_state='Connecticut', county='Fairfield')
            >>> resolver.decompose("Connecticut, US")
            GeoRecord(combined_key='Connecticut, US', country_region='US', province_state='Connecticut', county=None)
        """
        count = self._count(combined_key)
        if count == 0:
            return GeoRecord(combined_key=combined_key, country_region=combined_key)
        parts = combined_key.split(self._delimiter, maxsplit=count)
        if count == 1:
            return GeoRecord(combined_key=combined_key, country_region=self._country, province_state=parts[0].strip())
        return GeoRecord(
            combined_key=combined_key, country_region=self._country,
            province_state=parts[1].strip(), county=parts[0].strip())

    def malformed(self, keys: list[str] | pd.Series) -> list[str]:
        """Return combined keys which have more than two delimiters.

        Args:
            keys: combined keys

        Returns:
            malformed keys without duplicates, in order of appearance
        """
        candidates = Validator(keys, "combined keys").sequence(unique=True)
        return [key for key in candidates if isinstance(key, str) and key.count(self._delimiter) > 2]

    def split(self, keys: list[str] | pd.Series, errors: str = "raise") -> pd.DataFrame:
        """Decompose combined keys and return a table of geographic layers.

        Args:
            keys: combined keys
            errors: "raise" (raise the errors) or "report" (log and skip malformed keys and the keys which are not strings)

        Raises:
            MalformedKeyError: a key has more than two delimiters and @errors is "raise"
            UnExpectedTypeError: a key is not a string (None, NA etc.) and @errors is "raise"

        Returns:
            Index
                reset index
            Columns
                - Combined_Key (str): distinct combined keys in order of appearance
                - County (str or NA): county names
                - Province_State (str or NA): province/state names
                - Country_Region (str): country names

        Note:
            With @errors="report", the number of skipped keys and at most five of them are logged with WARNING level.
        """
        Validator([errors], "errors").sequence(candidates=self._ERRORS)
        candidates = Validator(keys, "combined keys").sequence(unique=True)
        if errors == "report":
            invalid_dict = {
                "non-string": [str(key) for key in candidates if not isinstance(key, str)],
                "malformed": self.malformed(candidates),
            }
            for description, skipped in invalid_dict.items():
                if skipped:
                    sample = ", ".join(f"'{key}'" for key in skipped[:5])
                    config.warning(f"{len(skipped)} {description} combined key(s) were skipped: {sample}")
            candidates = [key for key in candidates if isinstance(key, str) and key.count(self._delimiter) <= 2]
        records = [self.decompose(key) for key in candidates]
        df = pd.DataFrame(
            [[rec.combined_key, rec.county, rec.province_state, rec.country_region] for rec in records],
            columns=self.ID_COLUMNS, dtype="object")
        return df.astype("string")

    def attach(self, data: pd.DataFrame, errors: str = "raise") -> pd.DataFrame:
        """Insert geographic layer columns next to the combined keys of the data.

        Args:
            data: data with Combined_Key column
            errors: "raise" (raise the errors) or "report" (log and drop rows of malformed keys and non-string keys)

        Raises:
            NotIncludedError: @data does not have Combined_Key column
            MalformedKeyError: a key has more than two delimiters and @errors is "raise"

        Returns:
            Index
                reset index
            Columns
                - Combined_Key (str): combined keys
                - County (str or NA): county names
                - Province_State (str or NA): province/state names
                - Country_Region (str): country names
                - the other columns of @data
        """
        df = Validator(data, "data").dataframe(columns=[self.KEY])
        layer_df = self.split(df[self.KEY], errors=errors)
        others = [col for col in df.columns if col not in self.ID_COLUMNS]
        df = df.loc[:, [self.KEY, *others]]
        df[self.KEY] = df[self.KEY].astype("string")
        return layer_df.merge(df, how="inner", on=self.KEY).loc[:, [*self.ID_COLUMNS, *others]]
