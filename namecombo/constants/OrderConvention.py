from enum import Enum


class OrderConvention(str, Enum):
    GERMAN = "german"
    WESTERN = "western"
    FAMILY_FIRST = "family_first"
