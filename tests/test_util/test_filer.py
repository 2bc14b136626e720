from covtidy import Filer


def test_filing(tmp_path):
    filer = Filer(directory=tmp_path.joinpath("output"), prefix="deaths")
    assert tmp_path.joinpath("output").is_dir()
    kwargs = filer.csv("workshop", index=False, na_rep="NA")
    assert kwargs["path_or_buf"].endswith("deaths_workshop.csv")
    assert kwargs["index"] is False
    assert kwargs["na_rep"] == "NA"
    assert Filer(directory=str(tmp_path)).csv("monthly")["path_or_buf"].endswith("monthly.csv")
