from enum import Enum


class NameCombination(str, Enum):
    FIRSTNAME = "firstname"
    SURNAME = "surname"
    NAME = "name"
    FULLNAME = "fullname"
    INITIALS = "initials"
    NICKNAME = "nickname"
    POLITE = "polite"
