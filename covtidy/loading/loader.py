from __future__ import annotations
from pathlib import Path
import numpy as np
import pandas as pd
from unidecode import unidecode
from covtidy.util.config import config
from covtidy.util.filer import Filer
from covtidy.util.validator import Validator
from covtidy.util.term import Term


class DataLoader(Term):
    """Class to read JHU CSSE time-series data and save the results.

    Args:
        directory: directory to save the results
        ascii_names: whether convert geographic names to ASCII characters (e.g. "Doña Ana" -> "Dona Ana") or not

    Note:
        Downloading and caching of the remote files are out of scope, please save the files locally in advance.
        The time-series data of the US is available at https://github.com/CSSEGISandData/COVID-19 as
        csse_covid_19_data/csse_covid_19_time_series/time_series_covid19_deaths_US.csv.
    """
    # Columns of the raw data to be renamed
    COL_DICT = {Term.ADMIN2: Term.COUNTY}

    def __init__(self, directory: str | Path = "output", ascii_names: bool = True) -> None:
        self._directory = directory
        self._ascii_names = bool(ascii_names)

    def read(self, filename: str | Path) -> pd.DataFrame:
        """Read the raw time-series data.

        Args:
            filename: filename of the CSV file (or the other objects which pandas.read_csv() accepts)

        Raises:
            NotIncludedError: some of Combined_Key, Admin2, Province_State and Country_Region are not included in the data

        Returns:
            Index
                reset index
            Columns
                - Combined_Key (str): combined keys
                - County (str): county names, renamed from Admin2
                - Province_State (str): province/state names
                - Country_Region (str): country names
                - the other columns, including the cumulative counts of the dates like "1/22/20"
        """
        df = pd.read_csv(filename, header=0, encoding="utf-8", engine="pyarrow")
        df = Validator(df, "raw data").dataframe(columns=[self.KEY, self.ADMIN2, self.PROVINCE, self.COUNTRY])
        df = df.rename(columns=self.COL_DICT)
        geo_cols = [self.KEY, *self.GEO_COLUMNS]
        if self._ascii_names:
            for col in geo_cols:
                df[col] = df[col].apply(lambda x: unidecode(x) if isinstance(x, str) and len(x) else np.nan)
        config.info(f"{len(df)} locations were read from {filename}.")
        return df.loc[:, [*geo_cols, *[col for col in df.columns if col not in geo_cols]]]

    def save(self, data: pd.DataFrame, title: str, prefix: str | None = None) -> str:
        """Save the data as a CSV file in the directory.

        Args:
            data: data to save, like the output of DataEngineer.workshop()
            title: title of the filename, like "workshop_deaths"
            prefix: prefix of the filename or None (no prefix)

        Returns:
            absolute filename of the saved file

        Note:
            Month columns (pandas.Timestamp) will be saved as YYYY-MM-DD and NAs as "NA".
        """
        df = Validator(data, "data").dataframe()
        df.columns = [col.strftime(self.MONTH_FORMAT) if isinstance(col, pd.Timestamp) else col for col in df.columns]
        filer = Filer(directory=self._directory, prefix=prefix)
        kwargs = filer.csv(title=title, index=False, na_rep=self.NA)
        df.to_csv(**kwargs)
        config.info(f"{len(df)} records were saved as {kwargs['path_or_buf']}.")
        return kwargs["path_or_buf"]
