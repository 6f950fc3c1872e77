from importlib.metadata import PackageNotFoundError, version

from .constants.GrammaticalCase import GrammaticalCase
from .constants.NameCombination import NameCombination
from .constants.OrderConvention import OrderConvention
from .exceptions.DeserializationError import DeserializationError
from .exceptions.InvalidNameError import InvalidNameError
from .exceptions.LanguageNotSupportedError import LanguageNotSupportedError
from .exceptions.NotExpressibleError import NotExpressibleError
from .models.person.Gender import Gender
from .models.person.PersonName import PersonName
from .NameFormatter import NameFormatter

try:
    __version__ = version("namecombo")
except PackageNotFoundError:
    __version__ = "Please install this project with setup.py"
