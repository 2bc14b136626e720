#!/usr/bin/env python
# -*- coding: utf-8 -*-

from pathlib import Path
import covtidy as ct


def main():
    # Create output directory in example directory
    code_path = Path(__file__)
    output_dir = code_path.with_name("output").joinpath(code_path.stem)
    output_dir.mkdir(exist_ok=True, parents=True)
    # Read JHU CSSE time-series data of the US, saved locally in advance
    loader = ct.DataLoader(directory=output_dir)
    raw_df = loader.read("input/time_series_covid19_deaths_US.csv")
    # Cleaning and state/country-level values
    engineer = ct.DataEngineer(country="US", value=ct.Term.DEATHS)
    engineer.register(raw_df)
    engineer.clean()
    engineer.totals()
    loader.save(engineer.monthly(), title="monthly_long")
    # Wide-format monthly data with geographic layers for the workshop
    workshop_df = engineer.workshop(errors="report")
    loader.save(workshop_df, title="workshop")
    # Year 2021 only
    loader.save(engineer.workshop(start_date="01Jan2021", end_date="31Dec2021"), title="workshop_2021")


if __name__ == "__main__":
    main()
