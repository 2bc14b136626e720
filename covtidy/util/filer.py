from __future__ import annotations
from pathlib import Path
from typing import Any


class Filer(object):
    """
    Produce filenames of output CSV files in a directory.

    Args:
        directory: directory to save the files in, it will be created if it does not exist
        prefix: prefix of the filenames or None (no prefix)

    Examples:
        >>> import covtidy as ct
        >>> filer = ct.Filer(directory="output", prefix="deaths")
        >>> filer.csv("workshop", index=False, na_rep="NA")
        {"path_or_buf": "<absolute path>/output/deaths_workshop.csv", "index": False, "na_rep": "NA"}
    """

    def __init__(self, directory: str | Path, prefix: str | None = None) -> None:
        self._dir_path = Path(directory).resolve()
        self._dir_path.mkdir(parents=True, exist_ok=True)
        self._pre = "" if prefix is None else f"{prefix}_"

    def csv(self, title: str, **kwargs: Any) -> dict[str, Any]:
        """
        Create the filename of a CSV file.

        Args:
            title: title of the filename, like 'workshop'
            kwargs: keyword arguments of pandas.DataFrame.to_csv() to be included in the output

        Returns:
            absolute filename (key: 'path_or_buf') and @kwargs
        """
        filename = self._dir_path.joinpath(f"{self._pre}{title}.csv")
        return {"path_or_buf": str(filename), **kwargs}
