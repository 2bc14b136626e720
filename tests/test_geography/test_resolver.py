#!/usr/bin/env python
# -*- coding: utf-8 -*-

from dataclasses import FrozenInstanceError
import pandas as pd
import pytest
from covtidy import GeoKeyResolver, GeoRecord, Term
from covtidy import MalformedKeyError, NotIncludedError, UnExpectedTypeError, UnExpectedValueError


class TestGeoKeyResolver(object):
    def test_state(self):
        record = GeoKeyResolver().decompose("Connecticut, US")
        assert record == GeoRecord(combined_key="Connecticut, US", country_region="US", province_state="Connecticut")
        assert record.county is None

    def test_county(self):
        record = GeoKeyResolver().decompose("Fairfield, Connecticut, US")
        assert record.county == "Fairfield"
        assert record.province_state == "Connecticut"
        assert record.country_region == "US"

    def test_country(self):
        record = GeoKeyResolver(country="Japan").decompose("US")
        assert record.country_region == "US"
        assert record.province_state is None
        assert record.county is None

    def test_trimmed(self):
        record = GeoKeyResolver().decompose(" Fairfield ,Connecticut  ,US")
        assert record.county == "Fairfield"
        assert record.province_state == "Connecticut"
        assert record.combined_key == " Fairfield ,Connecticut  ,US"

    def test_country_not_parsed(self):
        resolver = GeoKeyResolver(country="USA")
        assert resolver.country == "USA"
        assert resolver.decompose("Guam, US").country_region == "USA"
        assert resolver.decompose("Fairfield, Connecticut, US").country_region == "USA"

    def test_delimiter(self):
        record = GeoKeyResolver(delimiter="/").decompose("Fairfield/Connecticut/US")
        assert (record.county, record.province_state) == ("Fairfield", "Connecticut")

    def test_malformed(self):
        resolver = GeoKeyResolver()
        with pytest.raises(MalformedKeyError) as exc_info:
            resolver.decompose("Some, County, Connecticut, US")
        assert exc_info.value.key == "Some, County, Connecticut, US"
        assert exc_info.value.count == 3
        with pytest.raises(UnExpectedTypeError):
            resolver.decompose(None)

    def test_frozen(self):
        record = GeoKeyResolver().decompose("Connecticut, US")
        with pytest.raises(FrozenInstanceError):
            record.county = "Fairfield"

    def test_level(self):
        resolver = GeoKeyResolver()
        assert resolver.level("US") == Term.COUNTRY
        assert resolver.level("Connecticut, US") == Term.PROVINCE
        assert resolver.level("Fairfield, Connecticut, US") == Term.COUNTY
        with pytest.raises(MalformedKeyError):
            resolver.level("A, B, C, D")

    def test_malformed_list(self):
        keys = ["A, B, C, D", "Connecticut, US", "A, B, C, D", "E, F, G, H, I"]
        assert GeoKeyResolver().malformed(keys) == ["A, B, C, D", "E, F, G, H, I"]
        assert GeoKeyResolver().malformed(pd.Series(["US"])) == []

    def test_split(self):
        keys = pd.Series(["Fairfield, Connecticut, US", "Connecticut, US", "US", "Connecticut, US"])
        df = GeoKeyResolver().split(keys)
        assert df.columns.tolist() == [Term.KEY, Term.COUNTY, Term.PROVINCE, Term.COUNTRY]
        assert len(df) == 3
        assert df[Term.COUNTY].tolist()[0] == "Fairfield"
        assert df[Term.COUNTY].isna().tolist() == [False, True, True]
        assert df[Term.PROVINCE].isna().tolist() == [False, False, True]
        assert df[Term.COUNTRY].tolist() == ["US", "US", "US"]

    def test_split_errors(self):
        resolver = GeoKeyResolver()
        keys = ["Connecticut, US", "A, B, C, D"]
        with pytest.raises(MalformedKeyError):
            resolver.split(keys, errors="raise")
        df = resolver.split(keys, errors="report")
        assert df[Term.KEY].tolist() == ["Connecticut, US"]
        with pytest.raises(UnExpectedValueError):
            resolver.split(keys, errors="ignore")

    def test_split_report(self, logged_warnings):
        malformed = [f"County{i}, A, B, US" for i in range(6)]
        df = GeoKeyResolver().split(["Connecticut, US", *malformed, malformed[0]], errors="report")
        assert df[Term.KEY].tolist() == ["Connecticut, US"]
        assert len(logged_warnings) == 1
        assert logged_warnings[0].startswith("6 malformed combined key(s) were skipped: ")
        assert all(f"'{key}'" in logged_warnings[0] for key in malformed[:5])
        assert f"'{malformed[5]}'" not in logged_warnings[0]

    def test_split_not_string(self, logged_warnings):
        resolver = GeoKeyResolver()
        keys = ["US", None, pd.NA, "A, B, C, D"]
        with pytest.raises(UnExpectedTypeError):
            resolver.split(keys[:3], errors="raise")
        df = resolver.split(keys, errors="report")
        assert df[Term.KEY].tolist() == ["US"]
        assert logged_warnings == [
            "2 non-string combined key(s) were skipped: 'None', '<NA>'",
            "1 malformed combined key(s) were skipped: 'A, B, C, D'",
        ]
        data = pd.DataFrame({Term.KEY: ["US", None], "value": [1, 2]})
        assert resolver.attach(data, errors="report")["value"].tolist() == [1]

    def test_attach(self):
        data = pd.DataFrame({Term.KEY: ["US", "Fairfield, Connecticut, US", "A, B, C, D"], "value": [3, 2, 1]})
        resolver = GeoKeyResolver()
        with pytest.raises(MalformedKeyError):
            resolver.attach(data)
        df = resolver.attach(data, errors="report")
        assert df.columns.tolist() == [*Term.ID_COLUMNS, "value"]
        assert df[Term.KEY].tolist() == ["US", "Fairfield, Connecticut, US"]
        assert df["value"].tolist() == [3, 2]
        with pytest.raises(NotIncludedError):
            resolver.attach(data.rename(columns={Term.KEY: "key"}))
