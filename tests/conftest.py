import warnings

warnings.simplefilter("ignore", FutureWarning)
import numpy as np
import pandas as pd
import pytest
from covtidy import config


@pytest.fixture(scope="function")
def raw_df():
    dates = ["1/30/21", "1/31/21", "2/1/21", "2/28/21", "3/5/21", "3/20/21"]
    records = [
        # Admin2, Province_State, Combined_Key, counts
        ["Fairfield", "Connecticut", "Fairfield, Connecticut, US", [10, 12, 15, 20, 100, 95]],
        ["Hartford", "Connecticut", "Hartford,Connecticut,US", [5, 5, 6, 8, 9, 9]],
        ["Autauga", "Alabama", "Autauga, Alabama, US", [1, 2, 2, 3, 4, 5]],
        [np.nan, "American Samoa", "American Samoa, US", [0, 0, 0, 0, 0, 0]],
        [np.nan, "Diamond Princess", "Diamond Princess, US", [3, 3, 3, 3, 3, 3]],
    ]
    rows = []
    for i, (admin2, province, key, counts) in enumerate(records):
        rows.append([84000000 + i, "US", "USA", 840, 9000.0 + i, admin2, province, "US", 41.2, -73.3, key, 1000, *counts])
    columns = [
        "UID", "iso2", "iso3", "code3", "FIPS", "Admin2", "Province_State", "Country_Region", "Lat", "Long_",
        "Combined_Key", "Population", *dates]
    return pd.DataFrame(rows, columns=columns)


@pytest.fixture(scope="function")
def wide_df(raw_df):
    return raw_df.drop(["UID", "iso2", "iso3", "code3", "FIPS", "Lat", "Long_", "Population"], axis=1).rename(
        columns={"Admin2": "County"})


@pytest.fixture(scope="function")
def observations():
    return pd.DataFrame(
        {
            "Combined_Key": ["K", "K", "K", "L", "L"],
            "Date": pd.to_datetime(["2021-03-05", "2021-03-20", "2021-04-02", "2021-03-31", "2021-05-01"]),
            "Deaths_Count_Cumulative": [100, 95, 120, 0, 7],
        }
    )


@pytest.fixture(scope="function")
def logged_warnings():
    messages = []
    handler_id = config._logger.add(
        lambda message: messages.append(message.strip()), format="{message}",
        filter=lambda record: record["level"].name == "WARNING")
    yield messages
    config._logger.remove(handler_id)
