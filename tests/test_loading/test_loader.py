#!/usr/bin/env python
# -*- coding: utf-8 -*-

from pathlib import Path
import pandas as pd
import pytest
from covtidy import DataLoader, DataEngineer, Term, NotIncludedError


class TestDataLoader(object):
    def test_read(self, raw_df, tmp_path):
        raw_df.loc[0, ["Admin2", "Combined_Key"]] = ["Doña Ana", "Doña Ana, New Mexico, US"]
        filename = tmp_path.joinpath("time_series_covid19_deaths_US.csv")
        raw_df.to_csv(filename, index=False)
        df = DataLoader(directory=tmp_path).read(filename)
        assert df.columns.tolist()[:4] == [Term.KEY, *Term.GEO_COLUMNS]
        assert "Admin2" not in df
        assert df.loc[0, Term.COUNTY] == "Dona Ana"
        assert df.loc[0, Term.KEY] == "Dona Ana, New Mexico, US"
        assert pd.isna(df.loc[3, Term.COUNTY])
        assert "3/20/21" in df

    def test_read_without_ascii(self, raw_df, tmp_path):
        raw_df.loc[0, "Admin2"] = "Doña Ana"
        filename = tmp_path.joinpath("raw.csv")
        raw_df.to_csv(filename, index=False)
        df = DataLoader(directory=tmp_path, ascii_names=False).read(filename)
        assert df.loc[0, Term.COUNTY] == "Doña Ana"

    def test_read_invalid(self, raw_df, tmp_path):
        filename = tmp_path.joinpath("invalid.csv")
        raw_df.drop("Combined_Key", axis=1).to_csv(filename, index=False)
        with pytest.raises(NotIncludedError):
            DataLoader(directory=tmp_path).read(filename)

    def test_save(self, raw_df, tmp_path):
        filename = tmp_path.joinpath("raw.csv")
        raw_df.to_csv(filename, index=False)
        loader = DataLoader(directory=tmp_path.joinpath("output"))
        engineer = DataEngineer()
        engineer.register(loader.read(filename)).clean()
        data = pd.concat([engineer.all(), pd.DataFrame(
            {Term.KEY: ["Guam, US"], Term.DATE: [pd.Timestamp("2021-03-01")], Term.DEATHS: [2]})], ignore_index=True)
        engineer.register(data)
        saved = loader.save(engineer.workshop(), title="workshop")
        assert Path(saved).name == "workshop.csv"
        df = pd.read_csv(saved, keep_default_na=False)
        assert df.columns.tolist() == [*Term.ID_COLUMNS, "2021-01-01", "2021-02-01", "2021-03-01"]
        guam = df.loc[df[Term.KEY] == "Guam, US"].iloc[0]
        assert guam["2021-01-01"] == Term.NA
        assert guam[Term.COUNTY] == Term.NA
        assert str(guam["2021-03-01"]) == "2"
