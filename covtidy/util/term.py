from __future__ import annotations
from covtidy.util.validator import Validator


class Term(object):
    """
    Term definition.
    """
    # Columns of JHU CSSE time-series data
    ADMIN2: str = "Admin2"
    POPULATION: str = "Population"
    # Geographic layers
    KEY: str = "Combined_Key"
    COUNTY: str = "County"
    PROVINCE: str = "Province_State"
    COUNTRY: str = "Country_Region"
    GEO_COLUMNS: list[str] = [COUNTY, PROVINCE, COUNTRY]
    ID_COLUMNS: list[str] = [KEY, *GEO_COLUMNS]
    # Time
    DATE: str = "Date"
    MONTH: str = "Month"
    # Values
    DEATHS: str = "Deaths_Count_Cumulative"
    DAILY_SUFFIX: str = "_Daily"
    # Date format of JHU column names: 1/22/20 etc.
    DATE_FORMAT: str = "%m/%d/%y"
    DATE_FORMAT_DESC: str = "M/D/YY"
    # Date format of month columns in saved files
    MONTH_FORMAT: str = "%Y-%m-%d"
    # Country of the dataset
    US: str = "US"
    # Delimiter of geographic layers in combined keys
    DELIMITER: str = ","
    # Separator used when combined keys are (re)generated
    SEP: str = ", "
    # Missing values in saved files
    NA: str = "NA"
    # The fifty states, excluding D.C., territories and cruise ships
    US_STATES: list[str] = [
        "Alabama", "Alaska", "Arizona", "Arkansas", "California", "Colorado", "Connecticut", "Delaware",
        "Florida", "Georgia", "Hawaii", "Idaho", "Illinois", "Indiana", "Iowa", "Kansas", "Kentucky",
        "Louisiana", "Maine", "Maryland", "Massachusetts", "Michigan", "Minnesota", "Mississippi",
        "Missouri", "Montana", "Nebraska", "Nevada", "New Hampshire", "New Jersey", "New Mexico",
        "New York", "North Carolina", "North Dakota", "Ohio", "Oklahoma", "Oregon", "Pennsylvania",
        "Rhode Island", "South Carolina", "South Dakota", "Tennessee", "Texas", "Utah", "Vermont",
        "Virginia", "Washington", "West Virginia", "Wisconsin", "Wyoming",
    ]

    @classmethod
    def combine(cls, *names: str | None, sep: str | None = None) -> str:
        """Create a combined key from the names of geographic layers, skipping None.

        Args:
            *names: names of layers from the lowest (county) to the highest (country)
            sep: separator or None (Term.SEP)

        Returns:
            combined key, like "Fairfield, Connecticut, US"

        Examples:
            >>> Term.combine("Fairfield", "Connecticut", "US")
            'Fairfield, Connecticut, US'
            >>> Term.combine(None, "Connecticut", "US")
            'Connecticut, US'
        """
        selected = Validator([name for name in names if name is not None], "names of layers").sequence()
        return (sep or cls.SEP).join(str(name).strip() for name in selected)
