# flake8: noqa

# version
from covtidy.__version__ import __version__
# util
from covtidy.util.config import config
from covtidy.util.error import MalformedKeyError, UnExecutedError
from covtidy.util.error import NotIncludedError, NAFoundError, UnExpectedTypeError, UnExpectedNoneError
from covtidy.util.error import EmptyError, UnExpectedValueRangeError, UnExpectedValueError, IncompleteSeriesError
from covtidy.util.filer import Filer
from covtidy.util.validator import Validator
from covtidy.util.term import Term
# geography
from covtidy.geography.resolver import GeoRecord, GeoKeyResolver
# engineering
from covtidy.engineering.monthly import aggregate_monthly, wide_from_monthly
from covtidy.engineering.engineer import DataEngineer
# loading
from covtidy.loading.loader import DataLoader


def get_version():
    """
    Return the version number, like covtidy v0.0.0

    Returns:
        str
    """
    return f"covtidy v{__version__}"
